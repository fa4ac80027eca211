"""
Division Engine — деление в столбик base 10^9

Алгоритм (от старшего лимба делимого к младшему):
    current = current * BASE + dividend[i]
    q = max { q in [0, BASE) : divisor * q <= current }   (бинарный поиск)
    quotient = quotient * BASE + q
    current = current - divisor * q

Диапазон поиска q сужается по старшим лимбам: при делителе из двух и более
лимбов в нём не больше трёх кандидатов, поэтому на цифру частного уходит
1-2 пробы вместо ~30. Каждая проба — полное умножение magnitude на лимб и
сравнение, так что цифра стоит O(len(divisor)), а деление O(n * m).

Знаки (truncating division):
- Частное: XOR знаков, округление к нулю
- Остаток: знак делимого, a == (a / b) * b + a % b
"""

import logging

from src.bigint.math.additive import subtract_magnitude
from src.bigint.math.errors import BigIntegerDivisionByZero
from src.bigint.math.limbs import (
    abs_less,
    compare_magnitude,
    is_zero_magnitude,
    limbs_to_int,
    normalize,
    normalize_sign,
)
from src.bigint.math.limits import BASE
from src.bigint.math.multiplicative import multiply_by_small

logger = logging.getLogger(__name__)


def _quotient_digit_bounds(divisor: list[int], current: list[int]) -> tuple[int, int]:
    """
    Границы [low, high] цифры частного по старшим лимбам.

    Младшие t = len(divisor) - 2 лимбов отбрасываются у обоих операндов:
        d_head * B^t <= divisor < (d_head + 1) * B^t
        c_head * B^t <= current < (c_head + 1) * B^t
    откуда c_head // (d_head + 1) <= q <= (c_head + 1) // d_head.
    """
    shift = max(len(divisor) - 2, 0)
    d_head = limbs_to_int(divisor[shift:])
    c_head = limbs_to_int(current[shift:])

    low = c_head // (d_head + 1)
    high = min((c_head + 1) // d_head, BASE - 1)
    return min(low, high), high


def _find_quotient_digit(divisor: list[int], current: list[int]) -> int:
    """Наибольшее q in [0, BASE) с divisor * q <= current."""
    low, high = _quotient_digit_bounds(divisor, current)
    best = low

    while low <= high:
        mid = low + (high - low) // 2
        trial = multiply_by_small(divisor, mid)
        if compare_magnitude(trial, current) <= 0:
            best = mid
            low = mid + 1
        else:
            high = mid - 1

    return best


def divmod_magnitude(a: list[int], b: list[int]) -> tuple[list[int], list[int]]:
    """
    Деление magnitude: (|a| // |b|, |a| % |b|).

    Args:
        a: Лимбы делимого
        b: Лимбы делителя

    Returns:
        (quotient, remainder), оба нормализованы

    Raises:
        BigIntegerDivisionByZero: Если |b| == 0

    Examples:
        >>> divmod_magnitude([7], [2])
        ([3], [1])
        >>> divmod_magnitude([0, 1], [3])
        ([333333333], [1])
    """
    if is_zero_magnitude(b):
        logger.debug("division by zero: dividend has %d limbs", len(a))
        raise BigIntegerDivisionByZero("BigInteger division by zero")

    divisor = normalize(list(b))

    if abs_less(a, divisor):
        return [0], normalize(list(a))

    quotient_digits: list[int] = []
    current: list[int] = [0]

    for limb in reversed(a):
        # current = current * BASE + limb
        current.insert(0, limb)
        normalize(current)

        q = _find_quotient_digit(divisor, current)
        quotient_digits.append(q)

        if q:
            current = subtract_magnitude(current, multiply_by_small(divisor, q))

    # quotient_digits накоплены старшим первым
    quotient_digits.reverse()
    return normalize(quotient_digits), current


def divide_truncating(
    a: list[int],
    a_negative: bool,
    b: list[int],
    b_negative: bool,
) -> tuple[list[int], bool, list[int], bool]:
    """
    Знаковое деление с округлением к нулю.

    Returns:
        (quotient, quotient_negative, remainder, remainder_negative)

    Raises:
        BigIntegerDivisionByZero: Если b == 0

    Examples:
        >>> divide_truncating([7], True, [2], False)
        ([3], True, [1], True)
    """
    quotient, remainder = divmod_magnitude(a, b)
    return (
        quotient,
        normalize_sign(quotient, a_negative != b_negative),
        remainder,
        normalize_sign(remainder, a_negative),
    )
