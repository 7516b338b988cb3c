"""
Core math modules

Точная целочисленная и рациональная арифметика неограниченной точности.
"""

# Errors
from src.core.math.errors import DivisionByZero, InvalidFormat

# Magnitude & Long Division
from src.core.math.long_division import divide, find_quotient_digit
from src.core.math.magnitude import GROUP_WIDTH, RADIX

# Text Codec
from src.core.math.text_codec import parse_decimal, read_token, render_decimal

# BigInteger
from src.core.math.big_integer import (
    BigInteger,
    as_big_integer,
    compare,
    power,
    read_big_integer,
    write_big_integer,
)

# Rational
from src.core.math.rational import (
    Rational,
    as_rational,
    compare_rationals,
    gcd,
    write_rational,
)

__all__ = [
    # Errors
    "DivisionByZero",
    "InvalidFormat",
    # Magnitude — Constants
    "GROUP_WIDTH",
    "RADIX",
    # Long Division
    "divide",
    "find_quotient_digit",
    # Text Codec
    "parse_decimal",
    "read_token",
    "render_decimal",
    # BigInteger
    "BigInteger",
    "as_big_integer",
    "compare",
    "power",
    "read_big_integer",
    "write_big_integer",
    # Rational
    "Rational",
    "as_rational",
    "compare_rationals",
    "gcd",
    "write_rational",
]
