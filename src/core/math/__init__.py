"""
Core math modules

Школьная арифметика над десятичными векторами цифр.
mod_exponent зависит от domain.bignum и импортируется напрямую:
    from src.core.math.mod_exponent import mod_exponent
"""

# Digit Arithmetic
from src.core.math.digit_arithmetic import (
    # Constants
    BASE,
    ONE_DIGITS,
    TWO_DIGITS,
    ZERO_DIGITS,
    # Exceptions
    BignumError,
    DivisionByZeroError,
    MalformedDigitStringError,
    NegativeResultError,
    # Normalization
    is_odd,
    is_zero,
    normalize,
    parse_digits,
    # Comparison
    equals,
    greater_than,
    less_than,
    # Arithmetic
    divide,
    modulus,
    multiply,
    subtract,
)

__all__ = [
    # Constants
    "BASE",
    "ONE_DIGITS",
    "TWO_DIGITS",
    "ZERO_DIGITS",
    # Exceptions
    "BignumError",
    "DivisionByZeroError",
    "MalformedDigitStringError",
    "NegativeResultError",
    # Normalization
    "is_odd",
    "is_zero",
    "normalize",
    "parse_digits",
    # Comparison
    "equals",
    "greater_than",
    "less_than",
    # Arithmetic
    "divide",
    "modulus",
    "multiply",
    "subtract",
]
