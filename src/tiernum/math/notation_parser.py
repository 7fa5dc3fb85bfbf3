"""
Notation Parser — Разбор пользовательской нотации ("15K" → "15000")

Алгоритм:
1. Удалить все разделители групп (',' и '.')
2. Числовая часть — первая максимальная последовательность цифр
3. Суффикс — первая максимальная последовательность латинских букв
4. Известный суффикс (без учёта регистра) → дописать (t - 1) * 3 нулей
5. Неизвестный или отсутствующий суффикс → числовая часть без изменений

ВАЖНО: точка НЕ интерпретируется как десятичный разделитель.
"1.5K" разбирается как "15" + "000" = "15000", а не 1500.

Результат не канонизируется: ведущие нули входа сохраняются.
"""

import logging
import re
from typing import Final

from src.tiernum.domain.magnitude_table import zero_count_for_suffix
from src.tiernum.math.numerical_safeguards import InvalidNotationFormat

logger = logging.getLogger(__name__)

# Символы-разделители групп разрядов
GROUP_SEPARATORS: Final[str] = ",."

_SEPARATOR_PATTERN: Final[re.Pattern[str]] = re.compile(f"[{re.escape(GROUP_SEPARATORS)}]")
_DIGITS_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_SUFFIX_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z]+")


def split_notation(notation: str) -> tuple[str, str | None]:
    """
    Разделение нотации на числовую часть и суффикс.

    Args:
        notation: Строка вида "1,500K", "15k", "42"

    Returns:
        (digits, suffix): suffix = None если букв во входе нет

    Raises:
        InvalidNotationFormat: Если notation не str или в ней нет цифр
    """
    if not isinstance(notation, str):
        raise InvalidNotationFormat(
            f"notation must be a str, got {type(notation).__name__}"
        )

    cleaned = _SEPARATOR_PATTERN.sub("", notation)

    digits_match = _DIGITS_PATTERN.search(cleaned)
    if digits_match is None:
        raise InvalidNotationFormat(f"notation contains no digits: {notation!r}")

    suffix_match = _SUFFIX_PATTERN.search(cleaned)
    suffix = suffix_match.group(0) if suffix_match else None

    return digits_match.group(0), suffix


def parse_notation(notation: str) -> str:
    """
    Конверсия нотации с суффиксом в digit-строку.

    Args:
        notation: Строка нотации, например "15K" или "1,000,000"

    Returns:
        Digit-строка с дописанными нулями суффикса

    Raises:
        InvalidNotationFormat: Если во входе нет ни одной цифры

    Examples:
        >>> parse_notation("15K")
        '15000'
        >>> parse_notation("2m")
        '2000000'
        >>> parse_notation("1,234")
        '1234'
        >>> parse_notation("7zz")
        '7'
    """
    digits, suffix = split_notation(notation)

    if suffix is None:
        return digits

    zero_count = zero_count_for_suffix(suffix)
    if zero_count is None:
        logger.debug(f"Unknown suffix {suffix!r} in {notation!r}, passing digits through")
        return digits

    return digits + "0" * zero_count
