"""
Test suite for tiernum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
