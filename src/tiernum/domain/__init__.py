"""
Domain models and static data.

Contains the magnitude table and the BigNumber value object.
"""

from src.tiernum.domain.magnitude_table import (
    DIGITS_PER_TIER,
    MAX_SHORT_NOTATION_DIGITS,
    SATURATION_SENTINEL,
    SUFFIX_ZERO_COUNTS,
    TIER_COUNT,
    TIER_POWERS,
    TIER_SUFFIXES,
    power_for_tier,
    suffix_for_tier,
    tier_for_digit_count,
    zero_count_for_suffix,
)
from src.tiernum.domain.big_number import BigNumber

__all__ = [
    # Magnitude table
    "DIGITS_PER_TIER",
    "MAX_SHORT_NOTATION_DIGITS",
    "SATURATION_SENTINEL",
    "SUFFIX_ZERO_COUNTS",
    "TIER_COUNT",
    "TIER_POWERS",
    "TIER_SUFFIXES",
    "power_for_tier",
    "suffix_for_tier",
    "tier_for_digit_count",
    "zero_count_for_suffix",
    # BigNumber model
    "BigNumber",
]
