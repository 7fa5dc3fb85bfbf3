"""
Core math modules для tiernum

Разбор нотации, блочный кодек, точная арифметика и short notation.
"""

# Numerical Safeguards
from src.tiernum.math.numerical_safeguards import (
    # Block constants
    BLOCK_BASE,
    BLOCK_MAX,
    BLOCK_WIDTH,
    # Exceptions
    BlockUnderflow,
    InvalidBlockSequence,
    InvalidNotationFormat,
    # Digit strings
    canonicalize_digits,
    is_canonical_digits,
    is_digit_string,
    validate_digit_string,
    # Block sequences
    is_valid_block,
    is_valid_blocks,
    trim_high_zero_blocks,
    validate_blocks,
)

# Notation Parser
from src.tiernum.math.notation_parser import (
    GROUP_SEPARATORS,
    parse_notation,
    split_notation,
)

# Block Codec
from src.tiernum.math.block_codec import (
    blocks_to_int,
    int_to_blocks,
    to_blocks,
    to_long_notation,
)

# Block Arithmetic
from src.tiernum.math.block_arithmetic import (
    add_blocks,
    compare_blocks,
    is_greater_or_equal,
    subtract_blocks,
)

# Short Notation
from src.tiernum.math.short_notation import (
    DEFAULT_CONFIG,
    DISPLAY_DIGITS_DEFAULT,
    ROUNDING_DIGITS_DEFAULT,
    ShortNotationConfig,
    round_half_up_ratio,
    to_short_notation,
)

__all__ = [
    # Numerical Safeguards — Block constants
    "BLOCK_BASE",
    "BLOCK_MAX",
    "BLOCK_WIDTH",
    # Numerical Safeguards — Exceptions
    "BlockUnderflow",
    "InvalidBlockSequence",
    "InvalidNotationFormat",
    # Numerical Safeguards — Digit strings
    "canonicalize_digits",
    "is_canonical_digits",
    "is_digit_string",
    "validate_digit_string",
    # Numerical Safeguards — Block sequences
    "is_valid_block",
    "is_valid_blocks",
    "trim_high_zero_blocks",
    "validate_blocks",
    # Notation Parser
    "GROUP_SEPARATORS",
    "parse_notation",
    "split_notation",
    # Block Codec
    "blocks_to_int",
    "int_to_blocks",
    "to_blocks",
    "to_long_notation",
    # Block Arithmetic
    "add_blocks",
    "compare_blocks",
    "is_greater_or_equal",
    "subtract_blocks",
    # Short Notation
    "DEFAULT_CONFIG",
    "DISPLAY_DIGITS_DEFAULT",
    "ROUNDING_DIGITS_DEFAULT",
    "ShortNotationConfig",
    "round_half_up_ratio",
    "to_short_notation",
]
