"""
Short Notation — Сокращённая запись больших чисел ("1500" → "1.5K")

Алгоритм:
1. L = длина long notation
2. tier t = floor((L - 1) / 3) + 1
3. t > TIER_COUNT → сентинел насыщения "∞" (не ошибка)
4. value / 10^(3*(t-1)) округляется half-up до rounding_digits знаков,
   затем усекается до display_digits знаков для отображения
5. Нулевая дробная часть → "<int><suffix>", иначе "<int>.<frac><suffix>"

Деление и округление выполняются только в целых числах (Python int),
поэтому результат точен на любом tier, включая старшие.
"""

import logging
from dataclasses import dataclass
from typing import Final, Sequence

from src.tiernum.domain.magnitude_table import (
    SATURATION_SENTINEL,
    TIER_COUNT,
    power_for_tier,
    suffix_for_tier,
    tier_for_digit_count,
)
from src.tiernum.math.block_codec import blocks_to_int, to_long_notation

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Количество знаков после запятой при округлении half-up
ROUNDING_DIGITS_DEFAULT: Final[int] = 2

# Количество отображаемых знаков после запятой (усечение)
DISPLAY_DIGITS_DEFAULT: Final[int] = 1


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ShortNotationConfig:
    """Конфигурация short notation.

    Значения по умолчанию дают формат "N.DSuffix": округление до
    сотых, отображение одной цифры дробной части.
    """

    rounding_digits: int = ROUNDING_DIGITS_DEFAULT
    display_digits: int = DISPLAY_DIGITS_DEFAULT
    saturation_sentinel: str = SATURATION_SENTINEL

    def __post_init__(self) -> None:
        if self.rounding_digits < 0:
            raise ValueError(f"rounding_digits must be non-negative, got {self.rounding_digits}")

        if not 0 <= self.display_digits <= self.rounding_digits:
            raise ValueError(
                f"display_digits must be in [0, rounding_digits={self.rounding_digits}], "
                f"got {self.display_digits}"
            )


DEFAULT_CONFIG: Final[ShortNotationConfig] = ShortNotationConfig()


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up_ratio(numerator: int, denominator: int, digits: int) -> int:
    """
    numerator / denominator, округлённое half-up до digits знаков,
    умноженное на 10^digits.

    Для неотрицательных целых: floor(x * 10^digits + 0.5) без float.

    Examples:
        >>> round_half_up_ratio(1500, 1000, 2)
        150
        >>> round_half_up_ratio(1005, 1000, 2)
        101
        >>> round_half_up_ratio(1004, 1000, 2)
        100
    """
    if numerator < 0:
        raise ValueError(f"numerator must be non-negative, got {numerator}")

    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    scaled = numerator * 10 ** digits
    return (2 * scaled + denominator) // (2 * denominator)


# =============================================================================
# SHORT NOTATION
# =============================================================================


def to_short_notation(
    blocks: Sequence[int],
    config: ShortNotationConfig = DEFAULT_CONFIG,
) -> str:
    """
    Сокращённая запись последовательности блоков.

    Args:
        blocks: Валидная последовательность блоков
        config: Параметры округления и отображения

    Returns:
        Строка вида "15K", "1.5K", "999" или сентинел насыщения

    Raises:
        InvalidBlockSequence: Если последовательность нарушает инварианты

    Examples:
        >>> to_short_notation((0, 15))
        '15K'
        >>> to_short_notation((500, 1))
        '1.5K'
        >>> to_short_notation((42,))
        '42'
    """
    digits = to_long_notation(blocks)
    tier = tier_for_digit_count(len(digits))

    if tier > TIER_COUNT:
        logger.debug(
            f"Value with {len(digits)} digits exceeds tier {TIER_COUNT}, "
            f"rendering {config.saturation_sentinel!r}"
        )
        return config.saturation_sentinel

    rounded = round_half_up_ratio(blocks_to_int(blocks), power_for_tier(tier), config.rounding_digits)
    integer_part, fraction = divmod(rounded, 10 ** config.rounding_digits)
    shown = fraction // 10 ** (config.rounding_digits - config.display_digits)

    suffix = suffix_for_tier(tier)

    if shown == 0:
        return f"{integer_part}{suffix}"

    return f"{integer_part}.{shown:0{config.display_digits}d}{suffix}"
