"""
Тесты для quad-примитива (decimal128)

Проверяет:
1. Параметры контекста decimal128
2. Независимость от глобального decimal-контекста
3. Усечение при конверсии в целое
4. Предикаты нуля и знака
"""

import decimal
from decimal import Decimal

import pytest

from decimatrix.core.math.quad import (
    QUAD_CONTEXT,
    QUAD_EMAX,
    QUAD_EMIN,
    QUAD_ONE,
    QUAD_PRECISION_DIGITS,
    QUAD_ZERO,
    is_signed,
    is_zero,
    pow10,
    quad_abs,
    quad_add,
    quad_div,
    quad_from_int,
    quad_mul,
    quad_neg,
    quad_round,
    quad_scale_to_int,
    quad_sub,
    quad_to_int,
)


class TestQuadContext:
    """Тесты параметров контекста"""

    def test_decimal128_parameters(self) -> None:
        """34 цифры, экспонента [-6143, 6144]"""
        assert QUAD_PRECISION_DIGITS == 34
        assert QUAD_EMAX == 6144
        assert QUAD_EMIN == -6143
        assert QUAD_CONTEXT.prec == 34
        assert QUAD_CONTEXT.rounding == decimal.ROUND_HALF_EVEN

    def test_division_rounds_to_34_digits(self) -> None:
        """1/3 содержит ровно 34 значащие цифры"""
        third = quad_div(QUAD_ONE, Decimal(3))
        assert third == Decimal("0." + "3" * 34)

    def test_global_context_is_ignored(self) -> None:
        """Низкая точность глобального контекста не влияет на результат"""
        with decimal.localcontext() as ctx:
            ctx.prec = 3
            third = quad_div(QUAD_ONE, Decimal(3))
        assert third == Decimal("0." + "3" * 34)

    def test_division_by_zero_is_trapped(self) -> None:
        """Деление на ноль не маскируется"""
        with pytest.raises(decimal.DivisionByZero):
            quad_div(QUAD_ONE, QUAD_ZERO)


class TestQuadArithmetic:
    """Тесты базовой арифметики"""

    def test_add_sub_mul(self) -> None:
        assert quad_add(Decimal("1.5"), Decimal("2.25")) == Decimal("3.75")
        assert quad_sub(Decimal("1.5"), Decimal("2.25")) == Decimal("-0.75")
        assert quad_mul(Decimal("1.5"), Decimal("-2")) == Decimal("-3.0")

    def test_neg_and_abs(self) -> None:
        assert quad_neg(Decimal("4.2")) == Decimal("-4.2")
        assert quad_abs(Decimal("-4.2")) == Decimal("4.2")

    def test_int_conversions(self) -> None:
        """Конверсия в целое усекает к нулю"""
        assert quad_from_int(42) == Decimal(42)
        assert quad_to_int(Decimal("7.99")) == 7
        assert quad_to_int(Decimal("-7.99")) == -7
        assert quad_to_int(Decimal("0.5")) == 0

    def test_pow10(self) -> None:
        assert pow10(0) == QUAD_ONE
        assert pow10(3) == Decimal(1000)
        with pytest.raises(ValueError, match="non-negative"):
            pow10(-1)

    def test_round_to_quad(self) -> None:
        """Произвольный Decimal приводится к 34 цифрам, переполнение — trap"""
        assert quad_round(Decimal("2." + "5" * 40)) == Decimal("2." + "5" * 32 + "6")
        assert quad_round(Decimal("1.50")).as_tuple() == Decimal("1.50").as_tuple()
        assert is_zero(quad_round(Decimal("1E-7000")))
        with pytest.raises(decimal.Overflow):
            quad_round(Decimal("1E+9000"))

    def test_scale_to_int_is_exact(self) -> None:
        """Усечение к нулю без контекста: работает и вблизи Emax"""
        assert quad_scale_to_int(Decimal("7.999"), 2) == 799
        assert quad_scale_to_int(Decimal("-1.2345"), 3) == -1234
        assert quad_scale_to_int(Decimal("12"), 0) == 12
        assert quad_scale_to_int(Decimal("9E+6144"), 3) == 9 * 10 ** 6147
        with pytest.raises(ValueError, match="non-negative"):
            quad_scale_to_int(QUAD_ONE, -1)


class TestQuadPredicates:
    """Тесты предикатов"""

    def test_is_zero(self) -> None:
        assert is_zero(QUAD_ZERO)
        assert is_zero(Decimal("-0"))
        assert is_zero(Decimal("0.000"))
        assert not is_zero(Decimal("1E-30"))

    def test_is_signed(self) -> None:
        assert is_signed(Decimal("-1"))
        assert is_signed(Decimal("-0"))
        assert not is_signed(Decimal("1"))
        assert not is_signed(QUAD_ZERO)
