"""
Multiplicative Core — schoolbook умножение magnitude

Для каждой пары лимбов (i, j) накапливается a[i]*b[j] + carry в result[i+j];
перенос распространяется, пока j продвигается или пока carry ненулевой.

Проверки потолка:
1. До умножения: произведение операндов из n и m лимбов занимает не менее
   n + m - 1 лимбов → если это больше max_limbs, отказ сразу
2. После умножения: точная разрядность нормализованного результата
   против max_digits (верхняя оценка n + m лимбов может не реализоваться)
"""

from src.bigint.math.limbs import (
    digit_count,
    is_zero_magnitude,
    normalize,
    normalize_sign,
)
from src.bigint.math.limits import (
    BASE,
    DigitLimits,
    check_digit_count,
    check_limb_count,
    get_default_limits,
)


def multiply_magnitude(
    a: list[int], b: list[int], limits: DigitLimits | None = None
) -> list[int]:
    """
    |a| * |b| (schoolbook).

    Args:
        a: Лимбы первого множителя
        b: Лимбы второго множителя
        limits: Потолок разрядности (default: процессный)

    Returns:
        Нормализованные лимбы произведения

    Raises:
        BigIntegerOverflow: Если произведение не помещается в потолок

    Examples:
        >>> multiply_magnitude([0, 1], [0, 1])
        [0, 0, 1]
    """
    limits = limits or get_default_limits()

    if is_zero_magnitude(a) or is_zero_magnitude(b):
        return [0]

    a = normalize(list(a))
    b = normalize(list(b))

    # Нижняя граница длины произведения: n + m - 1 лимбов
    check_limb_count(len(a) + len(b) - 1, limits)

    result = [0] * (len(a) + len(b))

    for i, a_limb in enumerate(a):
        carry = 0
        j = 0
        while j < len(b) or carry:
            current = result[i + j] + carry
            if j < len(b):
                current += a_limb * b[j]
            carry, result[i + j] = divmod(current, BASE)
            j += 1

    normalize(result)
    check_digit_count(digit_count(result), limits)

    return result


def multiply_by_small(a: list[int], factor: int) -> list[int]:
    """
    |a| * factor для одного лимба 0 <= factor < BASE.

    Используется пробными умножениями движка деления: результат не длиннее
    len(a) + 1 лимбов, потолок не проверяется.

    Raises:
        ValueError: Если factor вне [0, BASE)
    """
    if not 0 <= factor < BASE:
        raise ValueError(f"factor must be in [0, {BASE}), got {factor}")

    if factor == 0:
        return [0]

    result = []
    carry = 0
    for limb in a:
        carry, low = divmod(limb * factor + carry, BASE)
        result.append(low)
    if carry:
        result.append(carry)

    return normalize(result)


def signed_multiply(
    a: list[int],
    a_negative: bool,
    b: list[int],
    b_negative: bool,
    limits: DigitLimits | None = None,
) -> tuple[list[int], bool]:
    """
    Знаковое произведение: знак = XOR знаков операндов.

    Returns:
        (limbs, negative); ноль всегда неотрицательный
    """
    result = multiply_magnitude(a, b, limits)
    return result, normalize_sign(result, a_negative != b_negative)
