"""
BigNumber — Неизменяемое неотрицательное целое произвольной величины

Immutable Pydantic модель поверх блочного представления.
Все операции делегируют в src.tiernum.math и возвращают новый экземпляр.
"""

from typing import Sequence

from pydantic import BaseModel, Field, field_validator

from src.tiernum.domain.magnitude_table import tier_for_digit_count
from src.tiernum.math.block_arithmetic import (
    add_blocks,
    compare_blocks,
    is_greater_or_equal,
    subtract_blocks,
)
from src.tiernum.math.block_codec import (
    blocks_to_int,
    int_to_blocks,
    to_blocks,
    to_long_notation,
)
from src.tiernum.math.notation_parser import parse_notation
from src.tiernum.math.numerical_safeguards import (
    InvalidBlockSequence,
    canonicalize_digits,
    validate_blocks,
)
from src.tiernum.math.short_notation import (
    DEFAULT_CONFIG,
    ShortNotationConfig,
    to_short_notation,
)


# =============================================================================
# BIG NUMBER MODEL
# =============================================================================


class BigNumber(BaseModel):
    """
    Неотрицательное целое в блочном представлении.

    blocks: кортеж int в [0, 999], least-significant first,
    старший блок ненулевой (ноль = (0,)).

    Immutable модель (frozen=True): арифметика создаёт новый экземпляр.
    """

    blocks: tuple[int, ...] = Field(
        ..., min_length=1, description="Блоки по основанию 1000, младший первым"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("blocks", mode="before")
    @classmethod
    def validate_block_invariants(cls, v: object) -> tuple[int, ...]:
        """
        Проверка диапазона блоков и ненулевого старшего блока.

        Выполняется до приведения типов: '5' или True не принимаются как блок.
        """
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"blocks must be a list or tuple, got {type(v).__name__}")
        try:
            validate_blocks(v)
        except InvalidBlockSequence as e:
            raise ValueError(str(e)) from e
        return tuple(v)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "BigNumber":
        return cls(blocks=(0,))

    @classmethod
    def from_blocks(cls, blocks: Sequence[int]) -> "BigNumber":
        return cls(blocks=tuple(blocks))

    @classmethod
    def from_digits(cls, digits: str) -> "BigNumber":
        """
        Из digit-строки; ведущие нули удаляются.

        Raises:
            InvalidNotationFormat: Если строка пустая или не из цифр
        """
        return cls(blocks=to_blocks(canonicalize_digits(digits)))

    @classmethod
    def from_notation(cls, notation: str) -> "BigNumber":
        """
        Из пользовательской нотации: "15K", "1,000", "3qa".

        Raises:
            InvalidNotationFormat: Если в нотации нет цифр
        """
        return cls.from_digits(parse_notation(notation))

    @classmethod
    def from_int(cls, value: int) -> "BigNumber":
        return cls(blocks=int_to_blocks(value))

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    @property
    def long_notation(self) -> str:
        return to_long_notation(self.blocks)

    def short_notation(self, config: ShortNotationConfig = DEFAULT_CONFIG) -> str:
        return to_short_notation(self.blocks, config)

    @property
    def tier_index(self) -> int:
        """Tier (1-based) величины: 1 для 0..999, 2 для тысяч и т.д."""
        return tier_for_digit_count(len(self.long_notation))

    def to_int(self) -> int:
        return blocks_to_int(self.blocks)

    def is_zero(self) -> bool:
        return self.blocks == (0,)

    def __str__(self) -> str:
        return self.long_notation

    # -------------------------------------------------------------------------
    # Арифметика и сравнение
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "BigNumber":
        if not isinstance(other, BigNumber):
            return NotImplemented
        return BigNumber(blocks=add_blocks(self.blocks, other.blocks))

    def __sub__(self, other: object) -> "BigNumber":
        """
        Raises:
            BlockUnderflow: Если other > self
        """
        if not isinstance(other, BigNumber):
            return NotImplemented
        return BigNumber(blocks=subtract_blocks(self.blocks, other.blocks))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigNumber):
            return NotImplemented
        return self.blocks == other.blocks

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigNumber):
            return NotImplemented
        return compare_blocks(self.blocks, other.blocks) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BigNumber):
            return NotImplemented
        return compare_blocks(self.blocks, other.blocks) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BigNumber):
            return NotImplemented
        return compare_blocks(self.blocks, other.blocks) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BigNumber):
            return NotImplemented
        return is_greater_or_equal(self.blocks, other.blocks)

    def __hash__(self) -> int:
        return hash(self.blocks)
