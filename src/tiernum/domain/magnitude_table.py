"""
Magnitude Table — Таблица суффиксов порядков величины

Статические данные (не логика):
- TIER_SUFFIXES: суффикс для каждого tier (tier t ↔ 10^(3*(t-1)), 1-based)
- SUFFIX_ZERO_COUNTS: обратный lookup suffix.lower() → количество нулей
- TIER_POWERS: предвычисленные степени 10 для каждого tier

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица строится один раз при импорте и больше не изменяется
2. Сентинел "∞" не является tier и не участвует в обратном lookup
3. Lookup по tier и по суффиксу — O(1)

Порядок величины определяется ПОЗИЦИЕЙ суффикса в таблице, а не его
традиционным названием: 'Qig' стоит на 43-й позиции и означает 10^126.
"""

from types import MappingProxyType
from typing import Final, Mapping

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество десятичных цифр в одном tier (и в одном блоке)
DIGITS_PER_TIER: Final[int] = 3

# Сентинел насыщения: величина выходит за пределы всех tier
SATURATION_SENTINEL: Final[str] = "∞"


# =============================================================================
# ТАБЛИЦА СУФФИКСОВ (short scale)
# =============================================================================

# Комментарии дают степень по позиции в таблице. Начиная с "Qag" традиционные
# названия (quadragintillion и далее) обычно означают большие степени.
TIER_SUFFIXES: Final[tuple[str, ...]] = (
    "",      # 10^0
    "K",     # 10^3   thousand
    "M",     # 10^6   million
    "B",     # 10^9   billion
    "T",     # 10^12  trillion
    "Qa",    # 10^15  quadrillion
    "Qi",    # 10^18  quintillion
    "Sx",    # 10^21  sextillion
    "Sp",    # 10^24  septillion
    "Oc",    # 10^27  octillion
    "No",    # 10^30  nonillion
    "Dc",    # 10^33  decillion
    "UD",    # 10^36  undecillion
    "DD",    # 10^39  duodecillion
    "TD",    # 10^42  tredecillion
    "QaD",   # 10^45  quattuordecillion
    "QiD",   # 10^48  quindecillion
    "SxD",   # 10^51  sedecillion
    "SpD",   # 10^54  septendecillion
    "OcD",   # 10^57  octodecillion
    "NoD",   # 10^60  novendecillion
    "Vg",    # 10^63  vigintillion
    "UVg",   # 10^66
    "DVg",   # 10^69
    "TVg",   # 10^72
    "QaVg",  # 10^75
    "QiVg",  # 10^78
    "SxVg",  # 10^81
    "SpVg",  # 10^84
    "OcVg",  # 10^87
    "NoVg",  # 10^90
    "Tg",    # 10^93  trigintillion
    "UTg",   # 10^96
    "DTg",   # 10^99
    "TTg",   # 10^102
    "QaTg",  # 10^105
    "QiTg",  # 10^108
    "SxTg",  # 10^111
    "SpTg",  # 10^114
    "OcTg",  # 10^117
    "NoTg",  # 10^120
    "Qag",   # 10^123
    "Qig",   # 10^126
    "Sxg",   # 10^129
    "Spg",   # 10^132
    "Ocg",   # 10^135
    "Nog",   # 10^138
    "Ce",    # 10^141
    "UCe",   # 10^144
    "DCe",   # 10^147
    "TCe",   # 10^150
    "QaCe",  # 10^153
    "QiCe",  # 10^156
    "SxCe",  # 10^159
    "SpCe",  # 10^162
    "OcCe",  # 10^165
    "NoCe",  # 10^168
)

# Количество определённых tier (без сентинела)
TIER_COUNT: Final[int] = len(TIER_SUFFIXES)

# Максимальная длина long notation, которая ещё имеет суффикс
MAX_SHORT_NOTATION_DIGITS: Final[int] = TIER_COUNT * DIGITS_PER_TIER


# =============================================================================
# ПРОИЗВОДНЫЕ LOOKUP-СТРУКТУРЫ (строятся один раз)
# =============================================================================


def _build_suffix_zero_counts() -> Mapping[str, int]:
    """Обратный lookup: suffix.lower() → (t - 1) * 3."""
    lookup = {
        suffix.lower(): index * DIGITS_PER_TIER
        for index, suffix in enumerate(TIER_SUFFIXES)
    }
    return MappingProxyType(lookup)


def _build_tier_powers() -> tuple[int, ...]:
    """Степени 10 для каждого tier: TIER_POWERS[t - 1] == 10 ** (3 * (t - 1))."""
    return tuple(10 ** (index * DIGITS_PER_TIER) for index in range(TIER_COUNT))


SUFFIX_ZERO_COUNTS: Final[Mapping[str, int]] = _build_suffix_zero_counts()
TIER_POWERS: Final[tuple[int, ...]] = _build_tier_powers()


# =============================================================================
# LOOKUP API
# =============================================================================


def suffix_for_tier(tier: int) -> str:
    """
    Суффикс для tier (1-based).

    Args:
        tier: Индекс tier, 1 = 10^0

    Returns:
        Суффикс tier, либо SATURATION_SENTINEL если tier > TIER_COUNT

    Raises:
        ValueError: Если tier < 1
    """
    if tier < 1:
        raise ValueError(f"tier must be >= 1, got {tier}")

    if tier > TIER_COUNT:
        return SATURATION_SENTINEL

    return TIER_SUFFIXES[tier - 1]


def zero_count_for_suffix(suffix: str) -> int | None:
    """
    Количество нулей для суффикса (без учёта регистра).

    Returns:
        (t - 1) * 3 для известного суффикса, None для неизвестного
    """
    return SUFFIX_ZERO_COUNTS.get(suffix.lower())


def power_for_tier(tier: int) -> int:
    """
    Делитель tier: 10 ** (3 * (tier - 1)).

    Raises:
        ValueError: Если tier вне диапазона [1, TIER_COUNT]
    """
    if not 1 <= tier <= TIER_COUNT:
        raise ValueError(f"tier must be in [1, {TIER_COUNT}], got {tier}")

    return TIER_POWERS[tier - 1]


def tier_for_digit_count(digit_count: int) -> int:
    """
    Tier (1-based) для числа из digit_count десятичных цифр.

    Формула: t = floor((L - 1) / 3) + 1

    Examples:
        >>> tier_for_digit_count(1)
        1
        >>> tier_for_digit_count(4)
        2
        >>> tier_for_digit_count(6)
        2
    """
    if digit_count < 1:
        raise ValueError(f"digit_count must be >= 1, got {digit_count}")

    return (digit_count - 1) // DIGITS_PER_TIER + 1
