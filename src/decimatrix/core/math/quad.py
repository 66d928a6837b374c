"""
Quad — арифметический примитив decimal128

Все элементы матриц хранятся как `Decimal`, а вся арифметика выполняется
в одном явном контексте, эквивалентном IEEE 754-2008 decimal128:
- 34 значащие цифры
- экспонента в диапазоне [-6143, 6144]
- ROUND_HALF_EVEN для промежуточных результатов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Глобальный (thread-local) decimal-контекст вызывающего кода НЕ используется
2. Каждая операция детерминирована и воспроизводима бит-в-бит
3. InvalidOperation / DivisionByZero / Overflow не маскируются (trap)
"""

from decimal import (
    ROUND_DOWN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ DECIMAL128
# =============================================================================

QUAD_PRECISION_DIGITS: Final[int] = 34
QUAD_EMAX: Final[int] = 6144
QUAD_EMIN: Final[int] = -6143

QUAD_CONTEXT: Final[Context] = Context(
    prec=QUAD_PRECISION_DIGITS,
    rounding=ROUND_HALF_EVEN,
    Emin=QUAD_EMIN,
    Emax=QUAD_EMAX,
    capitals=1,
    clamp=1,
    flags=[],
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

QUAD_ZERO: Final[Decimal] = Decimal(0)
QUAD_ONE: Final[Decimal] = Decimal(1)
QUAD_TEN: Final[Decimal] = Decimal(10)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def quad_add(a: Decimal, b: Decimal) -> Decimal:
    """a + b в контексте decimal128."""
    return QUAD_CONTEXT.add(a, b)


def quad_sub(a: Decimal, b: Decimal) -> Decimal:
    """a - b в контексте decimal128."""
    return QUAD_CONTEXT.subtract(a, b)


def quad_mul(a: Decimal, b: Decimal) -> Decimal:
    """a * b в контексте decimal128."""
    return QUAD_CONTEXT.multiply(a, b)


def quad_div(a: Decimal, b: Decimal) -> Decimal:
    """
    a / b в контексте decimal128.

    Raises:
        decimal.DivisionByZero: Если b == 0 (проверка нулевого делителя —
            ответственность вызывающего кода)
    """
    return QUAD_CONTEXT.divide(a, b)


def quad_neg(a: Decimal) -> Decimal:
    return QUAD_CONTEXT.minus(a)


def quad_abs(a: Decimal) -> Decimal:
    return QUAD_CONTEXT.abs(a)


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def quad_from_int(n: int) -> Decimal:
    """
    Целое → Quad.

    Целые длиннее 34 цифр округляются по правилам контекста.
    """
    return QUAD_CONTEXT.create_decimal(n)


def quad_to_int(a: Decimal) -> int:
    """
    Quad → целое с отбрасыванием дробной части (truncation к нулю).

    Examples:
        >>> quad_to_int(Decimal("7.99"))
        7
        >>> quad_to_int(Decimal("-7.99"))
        -7
    """
    return int(a.to_integral_value(rounding=ROUND_DOWN, context=QUAD_CONTEXT))


def quad_round(a: Decimal) -> Decimal:
    """
    Произвольный Decimal → Quad (34 значащие цифры, диапазон экспоненты).

    Значения меньше наименьшего субнормального округляются к нулю.

    Raises:
        decimal.Overflow: Если |a| больше наибольшего конечного decimal128
    """
    return QUAD_CONTEXT.create_decimal(a)


def quad_scale_to_int(a: Decimal, n: int) -> int:
    """
    Точное усечение a * 10^n к целому (n >= 0).

    Вычисляется на целых Python по коэффициенту и экспоненте, без
    округления контекста, поэтому не переполняется вблизи Emax.

    Examples:
        >>> quad_scale_to_int(Decimal("-1.2345"), 3)
        -1234
    """
    if n < 0:
        raise ValueError(f"quad_scale_to_int expects non-negative exponent, got {n}")
    sign, digits, exponent = a.as_tuple()
    coefficient = 0
    for digit in digits:
        coefficient = coefficient * 10 + digit
    shift = exponent + n
    if shift >= 0:
        result = coefficient * 10 ** shift
    else:
        result = coefficient // 10 ** -shift
    return -result if sign else result


def pow10(n: int) -> Decimal:
    """10^n как Quad (n >= 0)."""
    if n < 0:
        raise ValueError(f"pow10 expects non-negative exponent, got {n}")
    return QUAD_CONTEXT.create_decimal(10 ** n)


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_zero(a: Decimal) -> bool:
    """Точное сравнение с нулём (+0 и -0 считаются нулём)."""
    return a.is_zero()


def is_signed(a: Decimal) -> bool:
    """Знаковый бит кодировки (True для отрицательных значений и -0)."""
    return a.is_signed()
