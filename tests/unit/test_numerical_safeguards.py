"""
Тесты для Numerical Safeguards

Проверяемые инварианты:
1. Digit-строка — непустая, только ASCII-цифры
2. Канонизация удаляет ведущие нули, "0" сохраняется
3. Последовательность блоков: непустая, int в [0, 999], старший блок ненулевой
4. Иерархия исключений совместима с ValueError / ArithmeticError
"""

import pytest

from src.tiernum.math.numerical_safeguards import (
    BLOCK_BASE,
    BLOCK_MAX,
    BLOCK_WIDTH,
    BlockUnderflow,
    InvalidBlockSequence,
    InvalidNotationFormat,
    canonicalize_digits,
    is_canonical_digits,
    is_digit_string,
    is_valid_block,
    is_valid_blocks,
    trim_high_zero_blocks,
    validate_blocks,
    validate_digit_string,
)


class TestConstants:
    """Тесты параметров блоков"""

    def test_block_parameters(self) -> None:
        """Основание 1000, ширина 3"""
        assert BLOCK_BASE == 1000
        assert BLOCK_MAX == 999
        assert BLOCK_WIDTH == 3
        assert 10 ** BLOCK_WIDTH == BLOCK_BASE


class TestExceptionHierarchy:
    """Тесты иерархии исключений"""

    def test_value_errors(self) -> None:
        """Ошибки формата — ValueError"""
        assert issubclass(InvalidNotationFormat, ValueError)
        assert issubclass(InvalidBlockSequence, ValueError)

    def test_underflow(self) -> None:
        """Underflow — ArithmeticError"""
        assert issubclass(BlockUnderflow, ArithmeticError)
        assert not issubclass(BlockUnderflow, ValueError)


class TestDigitStrings:
    """Тесты digit-строк"""

    def test_is_digit_string(self) -> None:
        """Только ASCII-цифры"""
        assert is_digit_string("0")
        assert is_digit_string("0123456789")
        assert not is_digit_string("")
        assert not is_digit_string("12a")
        assert not is_digit_string("²")
        assert not is_digit_string("١٢")

    def test_validate_digit_string(self) -> None:
        """Валидация с понятным сообщением"""
        validate_digit_string("15000")

        with pytest.raises(InvalidNotationFormat, match="must not be empty"):
            validate_digit_string("")
        with pytest.raises(InvalidNotationFormat, match="only digits"):
            validate_digit_string("1,000")
        with pytest.raises(InvalidNotationFormat, match="must be a str"):
            validate_digit_string(1000)  # type: ignore[arg-type]

    def test_custom_name_in_message(self) -> None:
        """Имя параметра попадает в сообщение"""
        with pytest.raises(InvalidNotationFormat, match="amount must not be empty"):
            validate_digit_string("", name="amount")

    @pytest.mark.parametrize(
        "digits, canonical",
        [("0015000", "15000"), ("000", "0"), ("0", "0"), ("7", "7"), ("100", "100")],
    )
    def test_canonicalize(self, digits: str, canonical: str) -> None:
        """Удаление ведущих нулей"""
        assert canonicalize_digits(digits) == canonical

    def test_canonicalize_rejects_invalid(self) -> None:
        """Канонизация валидирует вход"""
        with pytest.raises(InvalidNotationFormat):
            canonicalize_digits("")

    def test_is_canonical(self) -> None:
        """Канонические строки"""
        assert is_canonical_digits("0")
        assert is_canonical_digits("15000")
        assert not is_canonical_digits("015")
        assert not is_canonical_digits("00")
        assert not is_canonical_digits("")


class TestBlockSequences:
    """Тесты последовательностей блоков"""

    def test_is_valid_block(self) -> None:
        """int в [0, 999], bool не является блоком"""
        assert is_valid_block(0)
        assert is_valid_block(999)
        assert not is_valid_block(1000)
        assert not is_valid_block(-1)
        assert not is_valid_block(1.0)
        assert not is_valid_block(True)
        assert not is_valid_block("1")

    @pytest.mark.parametrize("blocks", [(0,), (5,), (0, 1), [999, 999, 1], (0,) * 50 + (1,)])
    def test_valid_sequences(self, blocks) -> None:
        """Валидные последовательности"""
        validate_blocks(blocks)
        assert is_valid_blocks(blocks)

    def test_empty_rejected(self) -> None:
        """Пустая последовательность"""
        with pytest.raises(InvalidBlockSequence, match="at least one block"):
            validate_blocks(())

    def test_out_of_range_rejected(self) -> None:
        """Блок вне диапазона с позицией в сообщении"""
        with pytest.raises(InvalidBlockSequence, match=r"blocks\[1\]"):
            validate_blocks((5, 1000))

    def test_zero_high_block_rejected(self) -> None:
        """Нулевой старший блок у многоблочной последовательности"""
        with pytest.raises(InvalidBlockSequence, match="most significant"):
            validate_blocks((1, 0))
        assert not is_valid_blocks((0, 0))

    def test_string_rejected(self) -> None:
        """Строка не является последовательностью блоков"""
        with pytest.raises(InvalidBlockSequence, match="sequence of ints"):
            validate_blocks("15")  # type: ignore[arg-type]

    def test_trim_high_zero_blocks(self) -> None:
        """Удаление старших нулей, минимум один блок"""
        assert trim_high_zero_blocks([0, 10, 0, 0]) == [0, 10]
        assert trim_high_zero_blocks([0, 0, 0]) == [0]
        assert trim_high_zero_blocks([5]) == [5]

    def test_non_sequence_rejected(self) -> None:
        """None и множества не являются последовательностью блоков"""
        with pytest.raises(InvalidBlockSequence, match="sequence of ints"):
            validate_blocks(None)  # type: ignore[arg-type]
        with pytest.raises(InvalidBlockSequence, match="sequence of ints"):
            validate_blocks({1, 2})  # type: ignore[arg-type]
