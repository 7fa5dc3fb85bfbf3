"""
Block Codec — Конверсия digit-строка ↔ последовательность блоков

Представление: кортеж int-блоков в [0, 999], least-significant first.
    "15000"   → (0, 15)
    "1234567" → (567, 234, 1)

Long notation — каноническая десятичная строка: старший блок без
дополнения, остальные дополняются нулями до 3 цифр.
"""

from typing import Sequence

from src.tiernum.math.numerical_safeguards import (
    BLOCK_BASE,
    BLOCK_WIDTH,
    validate_blocks,
    validate_digit_string,
)


def to_blocks(digits: str) -> tuple[int, ...]:
    """
    Разбиение digit-строки на блоки по 3 цифры справа налево.

    Ведущие нули НЕ удаляются: "0001" даёт (1, 0), что не является
    канонической последовательностью. Для канонического результата
    вызывающий код предварительно применяет canonicalize_digits.

    Args:
        digits: Непустая строка из цифр 0-9

    Returns:
        Кортеж блоков, least-significant first

    Raises:
        InvalidNotationFormat: Если строка пустая или содержит не только цифры

    Examples:
        >>> to_blocks("15000")
        (0, 15)
        >>> to_blocks("999")
        (999,)
        >>> to_blocks("1000000")
        (0, 0, 1)
    """
    validate_digit_string(digits)

    return tuple(
        int(digits[max(0, end - BLOCK_WIDTH):end])
        for end in range(len(digits), 0, -BLOCK_WIDTH)
    )


def to_long_notation(blocks: Sequence[int]) -> str:
    """
    Каноническая десятичная строка из последовательности блоков.

    Args:
        blocks: Валидная последовательность блоков

    Returns:
        Digit-строка без ведущих нулей ("0" для нуля)

    Raises:
        InvalidBlockSequence: Если последовательность нарушает инварианты

    Examples:
        >>> to_long_notation((0, 15))
        '15000'
        >>> to_long_notation((7, 0, 1))
        '1000007'
        >>> to_long_notation((0,))
        '0'
    """
    validate_blocks(blocks)

    high = str(blocks[-1])
    rest = "".join(f"{block:03d}" for block in reversed(blocks[:-1]))
    return high + rest


def blocks_to_int(blocks: Sequence[int]) -> int:
    """
    Точное значение последовательности блоков как Python int.

    Свёртка по основанию 1000 без промежуточной строки: длина значения
    не ограничена лимитом int(str) в 4300 цифр.
    """
    validate_blocks(blocks)

    value = 0
    for block in reversed(blocks):
        value = value * BLOCK_BASE + block
    return value


def int_to_blocks(value: int) -> tuple[int, ...]:
    """
    Последовательность блоков для неотрицательного int.

    Raises:
        ValueError: Если value отрицательный или не int
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"value must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError("value must be non-negative")

    if value == 0:
        return (0,)

    blocks: list[int] = []
    while value > 0:
        value, block = divmod(value, BLOCK_BASE)
        blocks.append(block)
    return tuple(blocks)
