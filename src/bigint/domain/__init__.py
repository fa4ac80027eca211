"""
Domain models and value objects.

Contains the BigInteger value type and its serializable snapshot.
"""

from src.bigint.domain.big_integer import BigInteger
from src.bigint.domain.snapshot import SNAPSHOT_SCHEMA_VERSION, BigIntegerSnapshot

__all__ = [
    "BigInteger",
    "BigIntegerSnapshot",
    "SNAPSHOT_SCHEMA_VERSION",
]
