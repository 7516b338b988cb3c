"""
Domain models and value objects.

Contains radix constants, the Sign variant, rendering configuration
and serializable snapshots of BigInteger/Rational values.
"""

from src.core.domain.decimal_format import DecimalFormat
from src.core.domain.radix import GROUP_WIDTH, QUOTIENT_SEARCH_STEPS, RADIX
from src.core.domain.sign import Sign
from src.core.domain.snapshots import BigIntegerSnapshot, RationalSnapshot

__all__ = [
    # Radix constants
    "RADIX",
    "GROUP_WIDTH",
    "QUOTIENT_SEARCH_STEPS",
    # Sign
    "Sign",
    # Rendering config
    "DecimalFormat",
    # Snapshots
    "BigIntegerSnapshot",
    "RationalSnapshot",
]
