"""
Additive Core — сложение и вычитание magnitude

Лимбовое сложение с переносом (carry) и вычитание с заёмом (borrow), base 10^9.

Смешанные знаки сводятся к сравнению magnitude (abs_less) и вычитанию
меньшей величины из большей:
    a + b при разных знаках → |a| - |b| или |b| - |a|, знак большего по модулю
    a - b при одинаковых знаках → то же, со сменой знака при |a| < |b|

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сумма с разрядностью выше потолка → BigIntegerOverflow
2. Результаты нормализованы (limbs.normalize / normalize_sign)
3. Входные списки не изменяются
"""

from src.bigint.math.limbs import (
    abs_less,
    compare_magnitude,
    digit_count,
    normalize,
    normalize_sign,
    reserve_capacity,
)
from src.bigint.math.limits import (
    BASE,
    DigitLimits,
    check_digit_count,
    get_default_limits,
)


# =============================================================================
# MAGNITUDE ОПЕРАЦИИ
# =============================================================================


def add_magnitude(
    a: list[int], b: list[int], limits: DigitLimits | None = None
) -> list[int]:
    """
    |a| + |b| с распространением переноса.

    Результат резервируется на один лимб длиннее большего операнда; если
    после переноса разрядность суммы выше потолка — overflow.

    Args:
        a: Лимбы первого слагаемого
        b: Лимбы второго слагаемого
        limits: Потолок разрядности (default: процессный)

    Returns:
        Нормализованные лимбы суммы

    Raises:
        BigIntegerOverflow: Если сумма не помещается в потолок разрядности

    Examples:
        >>> add_magnitude([999999999], [1])
        [0, 1]
    """
    limits = limits or get_default_limits()

    max_length = max(len(a), len(b))
    result = reserve_capacity(list(a), max_length + 1)

    carry = 0
    for pos in range(max_length + 1):
        total = result[pos] + carry
        if pos < len(b):
            total += b[pos]
        carry, result[pos] = divmod(total, BASE)

    normalize(result)
    check_digit_count(digit_count(result), limits)

    return result


def subtract_magnitude(a: list[int], b: list[int]) -> list[int]:
    """
    |a| - |b| с распространением заёма. Требует |a| >= |b|.

    Raises:
        ValueError: Если |a| < |b| (нарушение контракта вызывающим кодом)

    Examples:
        >>> subtract_magnitude([0, 1], [1])
        [999999999]
    """
    if abs_less(a, b):
        raise ValueError("subtract_magnitude requires |a| >= |b|")

    result = list(a)
    borrow = 0
    for pos in range(len(result)):
        diff = result[pos] - borrow
        if pos < len(b):
            diff -= b[pos]

        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0

        result[pos] = diff

    return normalize(result)


# =============================================================================
# ЗНАКОВОЕ СЛОЖЕНИЕ
# =============================================================================


def signed_add(
    a: list[int],
    a_negative: bool,
    b: list[int],
    b_negative: bool,
    subtract: bool = False,
    limits: DigitLimits | None = None,
) -> tuple[list[int], bool]:
    """
    Сложение (или вычитание при subtract=True) знаковых значений.

    Args:
        a, a_negative: Левый операнд
        b, b_negative: Правый операнд
        subtract: True → a - b
        limits: Потолок разрядности

    Returns:
        (limbs, negative) нормализованного результата

    Raises:
        BigIntegerOverflow: Если сумма magnitude превышает потолок

    Examples:
        >>> signed_add([7], False, [9], True)
        ([2], True)
        >>> signed_add([5], True, [5], True, subtract=True)
        ([0], False)
    """
    # a - b == a + (-b)
    if subtract:
        b_negative = not b_negative

    if a_negative == b_negative:
        result = add_magnitude(a, b, limits)
        return result, normalize_sign(result, a_negative)

    order = compare_magnitude(a, b)
    if order == 0:
        return [0], False

    if order > 0:
        result = subtract_magnitude(a, b)
        return result, normalize_sign(result, a_negative)

    result = subtract_magnitude(b, a)
    return result, normalize_sign(result, b_negative)
