"""
Core math modules для bigint

Лимбовая арифметика base 10^9: чистые функции над списками лимбов.
"""

# Limits & configuration
from src.bigint.math.limits import (
    BASE,
    BASE_DIGITS,
    DEFAULT_MAX_DIGITS,
    DigitLimits,
    check_digit_count,
    check_limb_count,
    get_default_limits,
    limits_override,
    set_default_limits,
)

# Exceptions
from src.bigint.math.errors import (
    BigIntegerDivisionByZero,
    BigIntegerError,
    BigIntegerOverflow,
    DigitLimitExceeded,
    InvalidNumberFormat,
)

# Limb store & normalization
from src.bigint.math.limbs import (
    abs_less,
    compare_magnitude,
    digit_count,
    is_zero_magnitude,
    limbs_from_int,
    limbs_to_int,
    normalize,
    normalize_sign,
    reserve_capacity,
    validate_limbs,
)

# Additive core
from src.bigint.math.additive import add_magnitude, signed_add, subtract_magnitude

# Multiplicative core
from src.bigint.math.multiplicative import (
    multiply_by_small,
    multiply_magnitude,
    signed_multiply,
)

# Division engine
from src.bigint.math.division import divide_truncating, divmod_magnitude

# Text codec
from src.bigint.math.codec import format_decimal, parse_decimal, read_token

__all__ = [
    # Limits — Constants
    "BASE",
    "BASE_DIGITS",
    "DEFAULT_MAX_DIGITS",
    # Limits — Types
    "DigitLimits",
    # Limits — Functions
    "check_digit_count",
    "check_limb_count",
    "get_default_limits",
    "limits_override",
    "set_default_limits",
    # Exceptions
    "BigIntegerError",
    "BigIntegerOverflow",
    "BigIntegerDivisionByZero",
    "InvalidNumberFormat",
    "DigitLimitExceeded",
    # Limb store
    "abs_less",
    "compare_magnitude",
    "digit_count",
    "is_zero_magnitude",
    "limbs_from_int",
    "limbs_to_int",
    "normalize",
    "normalize_sign",
    "reserve_capacity",
    "validate_limbs",
    # Additive core
    "add_magnitude",
    "signed_add",
    "subtract_magnitude",
    # Multiplicative core
    "multiply_by_small",
    "multiply_magnitude",
    "signed_multiply",
    # Division engine
    "divide_truncating",
    "divmod_magnitude",
    # Text codec
    "format_decimal",
    "parse_decimal",
    "read_token",
]
