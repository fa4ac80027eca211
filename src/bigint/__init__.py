"""
bigint — знаковое целое произвольной точности base 10^9.

Public API: BigInteger, потолок разрядности (DigitLimits) и ошибки.
"""

from src.bigint.domain import BigInteger, BigIntegerSnapshot
from src.bigint.math import (
    DEFAULT_MAX_DIGITS,
    BigIntegerDivisionByZero,
    BigIntegerError,
    BigIntegerOverflow,
    DigitLimitExceeded,
    DigitLimits,
    InvalidNumberFormat,
    get_default_limits,
    limits_override,
    set_default_limits,
)

__all__ = [
    "BigInteger",
    "BigIntegerSnapshot",
    "DigitLimits",
    "DEFAULT_MAX_DIGITS",
    "get_default_limits",
    "set_default_limits",
    "limits_override",
    "BigIntegerError",
    "BigIntegerOverflow",
    "BigIntegerDivisionByZero",
    "InvalidNumberFormat",
    "DigitLimitExceeded",
]
