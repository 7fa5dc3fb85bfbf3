"""
tiernum — неотрицательные целые произвольной величины для игровых счётчиков.

Блочное представление (основание 1000), конверсия в long/short notation,
разбор нотации с суффиксами ("15K"), точные сложение, вычитание и сравнение.
"""

from src.tiernum.contracts import load_big_number, validate_block_sequence
from src.tiernum.domain import BigNumber
from src.tiernum.math import (
    BlockUnderflow,
    InvalidBlockSequence,
    InvalidNotationFormat,
    ShortNotationConfig,
    add_blocks,
    is_greater_or_equal,
    parse_notation,
    subtract_blocks,
    to_blocks,
    to_long_notation,
    to_short_notation,
)

__all__ = [
    "BigNumber",
    "BlockUnderflow",
    "InvalidBlockSequence",
    "InvalidNotationFormat",
    "ShortNotationConfig",
    "add_blocks",
    "is_greater_or_equal",
    "load_big_number",
    "parse_notation",
    "subtract_blocks",
    "to_blocks",
    "to_long_notation",
    "to_short_notation",
    "validate_block_sequence",
]
