"""
Numerical Safeguards — Валидация блоков и digit-строк

Модуль обеспечивает корректность входов для всех операций над блоками:
- Исключения для некорректного формата, нарушения инвариантов и underflow
- Валидация digit-строк (только цифры 0-9, непустая строка)
- Валидация последовательностей блоков (каждый блок в [0, 999],
  старший блок ненулевой, кроме единственного блока [0])
- Канонизация digit-строк (удаление ведущих нулей)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Некорректный вход никогда не превращается молча в число
2. Валидаторы не изменяют переданные последовательности
3. Все операции детерминированы
"""

from collections.abc import Sequence
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ БЛОКОВ
# =============================================================================

# Основание блочного представления (одна "цифра" = 3 десятичных разряда)
BLOCK_BASE: Final[int] = 1000

# Максимальное значение блока
BLOCK_MAX: Final[int] = BLOCK_BASE - 1

# Ширина блока в десятичных цифрах
BLOCK_WIDTH: Final[int] = 3

_DECIMAL_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidNotationFormat(ValueError):
    """
    Строка не может быть интерпретирована как число.

    Возникает при пустой строке, отсутствии цифр в нотации,
    или при наличии нецифровых символов в digit-строке.
    """

    pass


class InvalidBlockSequence(ValueError):
    """
    Последовательность блоков нарушает инварианты представления.

    Допустимая последовательность:
    - непустая
    - каждый блок — int в [0, 999]
    - старший (последний) блок ненулевой, кроме единственного блока [0]
    """

    pass


class BlockUnderflow(ArithmeticError):
    """
    Вычитание a - b при a < b.

    Отрицательные значения не представимы; вместо "завёрнутого"
    результата операция завершается явной ошибкой.
    """

    pass


# =============================================================================
# DIGIT-СТРОКИ
# =============================================================================


def is_digit_string(value: str) -> bool:
    """
    Проверка, что строка непустая и состоит только из ASCII-цифр 0-9.

    Unicode-цифры ('²', арабско-индийские и т.п.) не принимаются.
    """
    return bool(value) and all(ch in _DECIMAL_DIGITS for ch in value)


def validate_digit_string(value: str, name: str = "digits") -> None:
    """
    Валидация digit-строки.

    Args:
        value: Проверяемая строка
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidNotationFormat: Если строка пустая или содержит не только цифры
    """
    if not isinstance(value, str):
        raise InvalidNotationFormat(
            f"{name} must be a str, got {type(value).__name__}"
        )

    if not value:
        raise InvalidNotationFormat(f"{name} must not be empty")

    if not is_digit_string(value):
        raise InvalidNotationFormat(f"{name} must contain only digits 0-9, got {value!r}")


def canonicalize_digits(value: str) -> str:
    """
    Удаление ведущих нулей из digit-строки.

    Examples:
        >>> canonicalize_digits("0015000")
        '15000'
        >>> canonicalize_digits("000")
        '0'
        >>> canonicalize_digits("7")
        '7'
    """
    validate_digit_string(value)
    return value.lstrip("0") or "0"


def is_canonical_digits(value: str) -> bool:
    """Digit-строка без незначащих ведущих нулей ("0" — каноническая)."""
    return is_digit_string(value) and (value == "0" or value[0] != "0")


# =============================================================================
# ПОСЛЕДОВАТЕЛЬНОСТИ БЛОКОВ
# =============================================================================


def is_valid_block(block: object) -> bool:
    """Блок — int (не bool) в диапазоне [0, BLOCK_MAX]."""
    return (
        isinstance(block, int)
        and not isinstance(block, bool)
        and 0 <= block <= BLOCK_MAX
    )


def validate_blocks(blocks: Sequence[int], name: str = "blocks") -> None:
    """
    Валидация последовательности блоков (least-significant first).

    Args:
        blocks: Последовательность блоков
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidBlockSequence: Если нарушен любой инвариант представления
    """
    if isinstance(blocks, (str, bytes)) or not isinstance(blocks, Sequence):
        raise InvalidBlockSequence(f"{name} must be a sequence of ints, got {type(blocks).__name__}")

    if len(blocks) == 0:
        raise InvalidBlockSequence(f"{name} must contain at least one block")

    for position, block in enumerate(blocks):
        if not is_valid_block(block):
            raise InvalidBlockSequence(
                f"{name}[{position}] must be an int in [0, {BLOCK_MAX}], got {block!r}"
            )

    if len(blocks) > 1 and blocks[-1] == 0:
        raise InvalidBlockSequence(
            f"{name} most significant block must be non-zero, got {list(blocks)!r}"
        )


def is_valid_blocks(blocks: Sequence[int]) -> bool:
    """Проверка валидности последовательности блоков без exception."""
    try:
        validate_blocks(blocks)
    except InvalidBlockSequence:
        return False
    return True


def trim_high_zero_blocks(blocks: list[int]) -> list[int]:
    """
    Удаление старших нулевых блоков, минимум один блок сохраняется.

    Изменяет переданный список (используется только для локальных
    промежуточных результатов) и возвращает его же.

    Examples:
        >>> trim_high_zero_blocks([0, 10, 0, 0])
        [0, 10]
        >>> trim_high_zero_blocks([0, 0, 0])
        [0]
    """
    while len(blocks) > 1 and blocks[-1] == 0:
        blocks.pop()
    return blocks
