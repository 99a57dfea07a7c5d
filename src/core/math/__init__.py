"""
Core math modules

Точная арифметика без float: декодирование оснований, дроби, интерполяция.
"""

# Base Decoding
from src.core.math.base_decoding import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    BaseDecodingError,
    EmptyInput,
    InvalidBase,
    InvalidDigit,
    decode,
    digit_value,
    encode,
    to_decimal,
    validate_base,
)

# Rational
from src.core.math.rational import (
    ZERO,
    DivisionByZero,
    Rational,
    add,
    gcd,
    reduce,
)

# Interpolation
from src.core.math.interpolation import (
    CoincidentXValues,
    EmptyPointSet,
    interpolate,
    lagrange_term_at_zero,
    lagrange_terms_at_zero,
)

__all__ = [
    # Base Decoding
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    "BaseDecodingError",
    "EmptyInput",
    "InvalidBase",
    "InvalidDigit",
    "decode",
    "digit_value",
    "encode",
    "to_decimal",
    "validate_base",
    # Rational
    "ZERO",
    "DivisionByZero",
    "Rational",
    "add",
    "gcd",
    "reduce",
    # Interpolation
    "CoincidentXValues",
    "EmptyPointSet",
    "interpolate",
    "lagrange_term_at_zero",
    "lagrange_terms_at_zero",
]
