"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверку конечности float
2. Классификацию стандартных числовых типов
3. Конверсию в Decimal
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from numsym.core.math.numerical_safeguards import (
    NUMBER_TYPES,
    is_number,
    is_number_type,
    is_valid_float,
    to_decimal,
)


class _MyInt(int):
    pass


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, value) -> None:
        assert not is_valid_float(value)


class TestIsNumberType:
    """Тесты для is_number_type"""

    @pytest.mark.parametrize("value_type", [int, float, Decimal])
    def test_standard_types(self, value_type) -> None:
        assert is_number_type(value_type)

    @pytest.mark.parametrize("value_type", [bool, complex, Fraction, str, _MyInt, type(None)])
    def test_other_types(self, value_type) -> None:
        assert not is_number_type(value_type)

    def test_number_types_constant(self) -> None:
        assert NUMBER_TYPES == (int, float, Decimal)


class TestIsNumber:
    """Тесты для is_number"""

    @pytest.mark.parametrize("value", [0, -5, 1.5, math.nan, Decimal("1.25")])
    def test_numbers(self, value) -> None:
        assert is_number(value)

    @pytest.mark.parametrize("value", [None, True, False, "1", 1j, Fraction(1, 2), _MyInt(3)])
    def test_not_numbers(self, value) -> None:
        assert not is_number(value)


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_float_without_binary_noise(self) -> None:
        assert to_decimal(0.1) == Decimal("0.1")
        assert str(to_decimal(0.1)) == "0.1"

    def test_int(self) -> None:
        assert to_decimal(42) == Decimal(42)

    def test_decimal_unchanged(self) -> None:
        value = Decimal("3.14")

        assert to_decimal(value) is value

    @pytest.mark.parametrize("value", [math.nan, math.inf, Decimal("NaN"), Decimal("-Infinity")])
    def test_non_finite(self, value) -> None:
        assert to_decimal(value) is None

    @pytest.mark.parametrize("value", [None, True, "1", Fraction(1, 3)])
    def test_not_a_number(self, value) -> None:
        assert to_decimal(value) is None
