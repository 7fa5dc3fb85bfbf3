"""
Contract Validation Module

Валидация сохранённых вызывающим кодом последовательностей блоков.
"""

from .validators import (
    BLOCK_SEQUENCE_SCHEMA_PATH,
    BlockSequenceValidator,
    load_big_number,
    load_schema,
    validate_block_sequence,
)

__all__ = [
    "BLOCK_SEQUENCE_SCHEMA_PATH",
    "BlockSequenceValidator",
    "load_big_number",
    "load_schema",
    "validate_block_sequence",
]
