"""
Contract Validation Module

JSON Schema контракт снапшота BigInteger.
"""

from .validators import (
    SNAPSHOT_SCHEMA_PATH,
    SNAPSHOT_VALIDATOR,
    load_snapshot_schema,
    snapshot_schema_errors,
    validate_big_integer,
)

__all__ = [
    "SNAPSHOT_SCHEMA_PATH",
    "SNAPSHOT_VALIDATOR",
    "load_snapshot_schema",
    "snapshot_schema_errors",
    "validate_big_integer",
]
