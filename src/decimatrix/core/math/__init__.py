"""
Core math modules

Арифметический примитив decimal128 и текстовый codec Quad-значений.
"""

# Quad primitive
from decimatrix.core.math.quad import (
    # Context constants
    QUAD_CONTEXT,
    QUAD_EMAX,
    QUAD_EMIN,
    QUAD_ONE,
    QUAD_PRECISION_DIGITS,
    QUAD_TEN,
    QUAD_ZERO,
    # Arithmetic
    quad_abs,
    quad_add,
    quad_div,
    quad_mul,
    quad_neg,
    quad_sub,
    # Conversions
    pow10,
    quad_from_int,
    quad_round,
    quad_scale_to_int,
    quad_to_int,
    # Predicates
    is_signed,
    is_zero,
)

# Codec
from decimatrix.core.math.codec import (
    OUTPUT_PRECISION,
    ZERO_LITERAL,
    quad_to_string,
    string_to_quad,
    uint_to_string,
)

__all__ = [
    # Quad — Context constants
    "QUAD_CONTEXT",
    "QUAD_EMAX",
    "QUAD_EMIN",
    "QUAD_ONE",
    "QUAD_PRECISION_DIGITS",
    "QUAD_TEN",
    "QUAD_ZERO",
    # Quad — Arithmetic
    "quad_abs",
    "quad_add",
    "quad_div",
    "quad_mul",
    "quad_neg",
    "quad_sub",
    # Quad — Conversions
    "pow10",
    "quad_from_int",
    "quad_round",
    "quad_scale_to_int",
    "quad_to_int",
    # Quad — Predicates
    "is_signed",
    "is_zero",
    # Codec
    "OUTPUT_PRECISION",
    "ZERO_LITERAL",
    "quad_to_string",
    "string_to_quad",
    "uint_to_string",
]
