"""
Block Arithmetic — Точная арифметика над последовательностями блоков

Операции:
- add_blocks: сложение с переносом по основанию 1000
- subtract_blocks: вычитание с заёмом по основанию 1000 (требует a >= b)
- compare_blocks: трёхзначное сравнение (-1 / 0 / +1)
- is_greater_or_equal: a >= b

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входы не изменяются, результат — новый кортеж
2. Результат всегда валидная последовательность (старший блок ненулевой)
3. a < b при вычитании → BlockUnderflow, а не "завёрнутое" значение
4. Сравнение опирается на каноничность: более длинная последовательность больше
"""

from itertools import zip_longest
from typing import Sequence

from src.tiernum.math.numerical_safeguards import (
    BLOCK_BASE,
    BlockUnderflow,
    trim_high_zero_blocks,
    validate_blocks,
)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_blocks(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Трёхзначное сравнение двух последовательностей блоков.

    Сначала сравниваются длины; при равных длинах — блоки
    от старшего к младшему, первое различие решает.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b

    Raises:
        InvalidBlockSequence: Если любая из последовательностей невалидна

    Examples:
        >>> compare_blocks((0, 15), (0, 10))
        1
        >>> compare_blocks((999,), (0, 1))
        -1
        >>> compare_blocks((5,), (5,))
        0
    """
    validate_blocks(a, "a")
    validate_blocks(b, "b")

    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    for block_a, block_b in zip(reversed(a), reversed(b)):
        if block_a != block_b:
            return 1 if block_a > block_b else -1

    return 0


def is_greater_or_equal(a: Sequence[int], b: Sequence[int]) -> bool:
    """
    Проверка a >= b.

    Examples:
        >>> is_greater_or_equal((0, 15), (0, 10))
        True
        >>> is_greater_or_equal((7,), (7,))
        True
    """
    return compare_blocks(a, b) >= 0


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_blocks(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    Сложение двух последовательностей блоков.

    Поблочное сложение (недостающие позиции = 0) с переносом от младших
    блоков к старшим. Остаточный перенос становится новым старшим блоком.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Сумма длины max(len(a), len(b)) или на 1 больше при переносе

    Raises:
        InvalidBlockSequence: Если любая из последовательностей невалидна

    Examples:
        >>> add_blocks((0, 15), (0, 5))
        (0, 20)
        >>> add_blocks((999,), (1,))
        (0, 1)
    """
    validate_blocks(a, "a")
    validate_blocks(b, "b")

    result: list[int] = []
    carry = 0

    for block_a, block_b in zip_longest(a, b, fillvalue=0):
        carry, block = divmod(block_a + block_b + carry, BLOCK_BASE)
        result.append(block)

    if carry > 0:
        result.append(carry)

    return tuple(result)


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def subtract_blocks(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    Вычитание b из a.

    Поблочное вычитание с заёмом от младших блоков к старшим.
    Старшие нулевые блоки результата удаляются (минимум один блок).

    Args:
        a: Уменьшаемое
        b: Вычитаемое (должно быть <= a)

    Returns:
        Разность a - b

    Raises:
        BlockUnderflow: Если a < b
        InvalidBlockSequence: Если любая из последовательностей невалидна

    Examples:
        >>> subtract_blocks((0, 15), (0, 5))
        (0, 10)
        >>> subtract_blocks((0, 1), (1,))
        (999,)
        >>> subtract_blocks((42,), (42,))
        (0,)
    """
    if compare_blocks(a, b) < 0:
        raise BlockUnderflow(
            f"Cannot subtract larger value: a has {len(a)} block(s), "
            f"b has {len(b)} block(s) and b > a"
        )

    result: list[int] = []
    borrow = 0

    for block_a, block_b in zip_longest(a, b, fillvalue=0):
        diff = block_a - block_b - borrow
        if diff < 0:
            diff += BLOCK_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return tuple(trim_high_zero_blocks(result))
