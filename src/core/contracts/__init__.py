"""
Contract Validation Module

JSON Schema контракты снимков BigInteger и Rational.
"""

from .validators import (
    SCHEMA_DIR,
    BigIntegerContract,
    RationalContract,
    SchemaLoader,
    SnapshotContract,
    big_integer_contract,
    default_loader,
    rational_contract,
    validate_big_integer,
    validate_rational,
)

__all__ = [
    # Loader
    "SCHEMA_DIR",
    "SchemaLoader",
    "default_loader",
    # Contracts
    "SnapshotContract",
    "BigIntegerContract",
    "RationalContract",
    "big_integer_contract",
    "rational_contract",
    # Functions
    "validate_big_integer",
    "validate_rational",
]
