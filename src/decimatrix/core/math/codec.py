"""
Quad Decimal Codec — текст ↔ Quad

Двусторонняя конверсия между десятичным текстом и Quad-значениями.

Грамматика входа (string_to_quad):
    [-] digits [ . digits ]

Парсер намеренно снисходителен: любые символы, кроме цифр, `.` и `-`,
пропускаются без ошибки. Поэтому подстроки литерала с остатками скобок
(например "(1" или "-2)") разбираются корректно.

Формат выхода (quad_to_string):
- ровно OUTPUT_PRECISION (2) дробных цифры
- округление round-half-up по отброшенной цифре
- ноль всегда "0.0"
- ведущий "-" для отрицательных значений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Выходной формат канонический и бит-в-бит воспроизводимый
2. Вся арифметика парсинга идёт через quad-примитив (контекст decimal128)
3. Выход за диапазон decimal128 при разборе — QuadOverflowError
   (целая часть длиннее 6145 цифр или дробная длиннее 6144 цифр)
"""

from decimal import Decimal, Overflow
from typing import Final

from decimatrix.core.domain.errors import QuadOverflowError
from decimatrix.core.math.quad import (
    QUAD_ZERO,
    QUAD_ONE,
    QUAD_TEN,
    is_signed,
    is_zero,
    quad_add,
    quad_div,
    quad_from_int,
    quad_mul,
    quad_neg,
    quad_scale_to_int,
)

# =============================================================================
# ПАРАМЕТРЫ ФОРМАТИРОВАНИЯ
# =============================================================================

# Количество дробных цифр в каноническом выводе
OUTPUT_PRECISION: Final[int] = 2

# Литерал для нулевого значения (специальный случай, не "0.00")
ZERO_LITERAL: Final[str] = "0.0"

_DIGITS: Final[str] = "0123456789"


# =============================================================================
# ТЕКСТ → QUAD
# =============================================================================


def string_to_quad(text: str) -> Decimal:
    """
    Разбор десятичного текста в Quad.

    Алгоритм:
    1. Один проход: знак ("-" до первой цифры или точки) и позиция первой "."
    2. Целая часть: total = total * 10 + digit
    3. Дробная часть: frac = frac * 10 + digit, scale = scale * 10
    4. Результат: total + frac / scale, затем отрицание при знаке

    Args:
        text: Десятичный токен (посторонние символы игнорируются)

    Returns:
        Quad-значение

    Raises:
        QuadOverflowError: Если целая часть или дробный масштаб
            выходят за диапазон decimal128

    Examples:
        >>> string_to_quad("12.5")
        Decimal('12.5')
        >>> string_to_quad("(-3")
        Decimal('-3')
        >>> string_to_quad("")
        Decimal('0')
    """
    negative = False
    dot_pos = -1
    seen_numeric = False
    for pos, ch in enumerate(text):
        if ch == "-" and not seen_numeric:
            negative = True
        elif ch == ".":
            dot_pos = pos
            break
        elif ch in _DIGITS:
            seen_numeric = True

    int_end = dot_pos if dot_pos >= 0 else len(text)

    try:
        result = QUAD_ZERO
        for ch in text[:int_end]:
            if ch in _DIGITS:
                result = quad_add(quad_mul(result, QUAD_TEN), quad_from_int(int(ch)))

        if dot_pos >= 0:
            frac = QUAD_ZERO
            scale = QUAD_ONE
            for ch in text[dot_pos + 1:]:
                if ch in _DIGITS:
                    frac = quad_add(quad_mul(frac, QUAD_TEN), quad_from_int(int(ch)))
                    scale = quad_mul(scale, QUAD_TEN)
            result = quad_add(result, quad_div(frac, scale))
    except Overflow as e:
        raise QuadOverflowError(text) from e

    if negative:
        result = quad_neg(result)
    return result


# =============================================================================
# QUAD → ТЕКСТ
# =============================================================================


def quad_to_string(value: Decimal) -> str:
    """
    Каноническое текстовое представление Quad.

    Значение масштабируется на 10^(precision+1) и усекается до целого
    (точно, на целых Python: определено во всём диапазоне decimal128);
    последняя (отброшенная) цифра определяет округление round-half-up
    с переносом в целую часть при переполнении дробной.

    Args:
        value: Quad-значение

    Returns:
        Строка с ровно двумя дробными цифрами, либо "0.0" для нуля

    Examples:
        >>> quad_to_string(Decimal("7"))
        '7.00'
        >>> quad_to_string(Decimal("-0.125"))
        '-0.13'
        >>> quad_to_string(Decimal("0.995"))
        '1.00'
        >>> quad_to_string(Decimal("0"))
        '0.0'
    """
    if is_zero(value):
        return ZERO_LITERAL

    negative = is_signed(value)
    scaled = abs(quad_scale_to_int(value, OUTPUT_PRECISION + 1))

    last_digit = scaled % 10
    scaled //= 10
    modulus = 10 ** OUTPUT_PRECISION
    int_part, frac_part = divmod(scaled, modulus)

    if last_digit >= 5:
        frac_part += 1
        if frac_part >= modulus:
            frac_part -= modulus
            int_part += 1

    text = f"{uint_to_string(int_part)}.{uint_to_string(frac_part).rjust(OUTPUT_PRECISION, '0')}"
    return "-" + text if negative else text


def uint_to_string(n: int) -> str:
    """
    Десятичная запись неотрицательного целого ("0" для нуля, без ведущих нулей).

    Raises:
        ValueError: Если n < 0
    """
    if n < 0:
        raise ValueError(f"uint_to_string expects non-negative integer, got {n}")
    if n == 0:
        return "0"

    digits = []
    while n > 0:
        n, digit = divmod(n, 10)
        digits.append(_DIGITS[digit])
    return "".join(reversed(digits))
