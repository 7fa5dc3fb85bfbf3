"""
Тесты для Short Notation

Проверяемые инварианты:
1. Формат "<int>[.<digit>]<suffix>", нулевая дробь не отображается
2. Округление half-up до сотых, затем усечение до десятых
3. Точность на старших tier (только целочисленная арифметика)
4. Больше 171 цифры → сентинел "∞"
"""

import logging

import pytest

from src.tiernum.domain.magnitude_table import SATURATION_SENTINEL
from src.tiernum.math.block_codec import to_blocks
from src.tiernum.math.numerical_safeguards import InvalidBlockSequence
from src.tiernum.math.short_notation import (
    DEFAULT_CONFIG,
    ShortNotationConfig,
    round_half_up_ratio,
    to_short_notation,
)


def short(digits: str, config: ShortNotationConfig = DEFAULT_CONFIG) -> str:
    return to_short_notation(to_blocks(digits), config)


# =============================================================================
# ТЕСТЫ: Формат по умолчанию
# =============================================================================


class TestShortNotationDefault:
    """Тесты to_short_notation с конфигурацией по умолчанию"""

    @pytest.mark.parametrize(
        "digits, expected",
        [
            ("0", "0"),
            ("42", "42"),
            ("999", "999"),
            ("1000", "1K"),
            ("1500", "1.5K"),
            ("15000", "15K"),
            ("999000", "999K"),
            ("1234567", "1.2M"),
            ("2000000000", "2B"),
            ("3" + "0" * 15, "3Qa"),
        ],
    )
    def test_basic(self, digits: str, expected: str) -> None:
        """Базовые значения"""
        assert short(digits) == expected

    def test_round_then_truncate(self) -> None:
        """1.295 → 1.30 → "1.3K"; 1.25 → 1.25 → "1.2K" """
        assert short("1295") == "1.3K"
        assert short("1250") == "1.2K"
        assert short("1249") == "1.2K"

    def test_zero_display_digit_omitted(self) -> None:
        """1.05 → дробная цифра 0 → без дробной части"""
        assert short("1050") == "1K"
        assert short("1099") == "1.1K"

    def test_round_up_to_next_integer(self) -> None:
        """999.999K округляется до 1000K (tier не меняется)"""
        assert short("999999") == "1000K"
        assert short("1995") == "2K"

    def test_highest_tier(self) -> None:
        """Последний tier (NoCe) рендерится с суффиксом"""
        assert short("15" + "0" * 167) == "1.5NoCe"
        assert short("9" * 171) == "1000NoCe"

    def test_high_tier_is_exact(self) -> None:
        """Округление на старших tier не теряет точность"""
        # 1.29499...9 × 10^150 лежит ниже границы округления 1.295
        digits = "12949" + "9" * 146
        assert short(digits) == "1.2TCe"
        assert short("1" + "0" * 119 + "5" + "0" * 30) == "1TCe"

    def test_saturation(self) -> None:
        """Больше 171 цифры → сентинел"""
        assert short("1" + "0" * 171) == SATURATION_SENTINEL
        assert short("9" * 500) == "∞"

    def test_saturation_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Насыщение пишется в DEBUG лог"""
        with caplog.at_level(logging.DEBUG, logger="src.tiernum.math.short_notation"):
            short("1" + "0" * 171)

        assert "exceeds tier" in caplog.text

    def test_invalid_blocks(self) -> None:
        """Невалидная последовательность → InvalidBlockSequence"""
        with pytest.raises(InvalidBlockSequence):
            to_short_notation((1, 0))


# =============================================================================
# ТЕСТЫ: Конфигурация
# =============================================================================


class TestShortNotationConfig:
    """Тесты ShortNotationConfig"""

    def test_defaults(self) -> None:
        """Значения по умолчанию"""
        assert DEFAULT_CONFIG.rounding_digits == 2
        assert DEFAULT_CONFIG.display_digits == 1
        assert DEFAULT_CONFIG.saturation_sentinel == "∞"

    def test_two_display_digits(self) -> None:
        """Две цифры дробной части, с ведущим нулём"""
        config = ShortNotationConfig(display_digits=2)
        assert short("1234567", config) == "1.23M"
        assert short("1050", config) == "1.05K"
        assert short("1000", config) == "1K"

    def test_no_display_digits(self) -> None:
        """Без дробной части"""
        config = ShortNotationConfig(display_digits=0)
        assert short("1234567", config) == "1M"

    def test_integer_rounding(self) -> None:
        """Округление до целого"""
        config = ShortNotationConfig(rounding_digits=0, display_digits=0)
        assert short("1500", config) == "2K"
        assert short("1499", config) == "1K"

    def test_custom_sentinel(self) -> None:
        """Пользовательский сентинел"""
        config = ShortNotationConfig(saturation_sentinel="inf")
        assert short("1" + "0" * 171, config) == "inf"

    def test_invalid_config(self) -> None:
        """Невалидные параметры отвергаются"""
        with pytest.raises(ValueError, match="rounding_digits"):
            ShortNotationConfig(rounding_digits=-1, display_digits=0)
        with pytest.raises(ValueError, match="display_digits"):
            ShortNotationConfig(rounding_digits=2, display_digits=3)

    def test_config_frozen(self) -> None:
        """Конфигурация неизменяема"""
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.display_digits = 2  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ: Округление
# =============================================================================


class TestRoundHalfUpRatio:
    """Тесты round_half_up_ratio"""

    @pytest.mark.parametrize(
        "numerator, denominator, digits, expected",
        [
            (1500, 1000, 2, 150),
            (1005, 1000, 2, 101),
            (1004, 1000, 2, 100),
            (5, 10, 0, 1),
            (4, 10, 0, 0),
            (0, 1000, 2, 0),
            (10 ** 200 + 5 * 10 ** 197, 10 ** 200, 2, 101),
        ],
    )
    def test_values(self, numerator: int, denominator: int, digits: int, expected: int) -> None:
        """Half-up округление в целых числах"""
        assert round_half_up_ratio(numerator, denominator, digits) == expected

    def test_invalid_arguments(self) -> None:
        """Отрицательный числитель и неположительный знаменатель отвергаются"""
        with pytest.raises(ValueError, match="numerator"):
            round_half_up_ratio(-1, 10, 2)
        with pytest.raises(ValueError, match="denominator"):
            round_half_up_ratio(1, 0, 2)
