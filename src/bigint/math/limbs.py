"""
Limb Store — хранилище лимбов и нормализация

Magnitude хранится как list[int] лимбов base 10^9, младший лимб первым.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после normalize):
1. Нет старших нулевых лимбов, кроме единственного лимба нуля [0]
2. Ноль всегда неотрицательный (нет -0)
3. Каждый лимб в [0, BASE)

normalize вызывается в конце каждой операции, создающей значение, —
остальные модули могут считать инварианты выполненными на входе.
"""

import logging

from src.bigint.math.limits import BASE, BASE_DIGITS

logger = logging.getLogger(__name__)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(limbs: list[int]) -> list[int]:
    """
    Удаление старших нулевых лимбов (in place).

    Args:
        limbs: Лимбы magnitude (младший первым)

    Returns:
        Тот же список; пустой список становится [0]

    Examples:
        >>> normalize([5, 0, 0])
        [5]
        >>> normalize([0, 0])
        [0]
        >>> normalize([])
        [0]
    """
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()

    if not limbs:
        limbs.append(0)

    return limbs


def normalize_sign(limbs: list[int], negative: bool) -> bool:
    """Канонический знак: ноль всегда неотрицательный."""
    if is_zero_magnitude(limbs):
        return False
    return bool(negative)


def reserve_capacity(limbs: list[int], required: int) -> list[int]:
    """
    Расширение нулевыми лимбами до required (in place).

    Гарантирует, что распространение переноса не выйдет за границы списка.
    """
    if len(limbs) < required:
        limbs.extend([0] * (required - len(limbs)))
    return limbs


def is_zero_magnitude(limbs: list[int]) -> bool:
    """True если все лимбы нулевые (или список пуст)."""
    return all(limb == 0 for limb in limbs)


# =============================================================================
# СРАВНЕНИЕ MAGNITUDE
# =============================================================================


def _significant_length(limbs: list[int]) -> int:
    # Ноль → 0
    size = len(limbs)
    while size > 0 and limbs[size - 1] == 0:
        size -= 1
    return size


def compare_magnitude(a: list[int], b: list[int]) -> int:
    """
    Сравнение абсолютных величин, начиная со старшего лимба.

    Старшие нулевые лимбы игнорируются с обеих сторон.

    Returns:
        -1 если |a| < |b|
         0 если |a| == |b|
        +1 если |a| > |b|

    Examples:
        >>> compare_magnitude([1, 2], [9, 1])
        1
        >>> compare_magnitude([7, 0, 0], [7])
        0
    """
    a_size = _significant_length(a)
    b_size = _significant_length(b)

    if a_size != b_size:
        return -1 if a_size < b_size else 1

    for i in range(a_size - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


def abs_less(a: list[int], b: list[int]) -> bool:
    """|a| < |b|"""
    return compare_magnitude(a, b) < 0


# =============================================================================
# КОНВЕРСИЯ NATIVE INT
# =============================================================================


def limbs_from_int(value: int) -> tuple[list[int], bool]:
    """
    Конверсия native int → (limbs, negative).

    Examples:
        >>> limbs_from_int(-1234567890123)
        ([567890123, 1234], True)
        >>> limbs_from_int(0)
        ([0], False)
    """
    negative = value < 0
    value = -value if negative else value

    limbs: list[int] = []
    while value > 0:
        value, limb = divmod(value, BASE)
        limbs.append(limb)

    normalize(limbs)
    return limbs, normalize_sign(limbs, negative)


def limbs_to_int(limbs: list[int], negative: bool = False) -> int:
    """Конверсия (limbs, negative) → native int."""
    result = 0
    for limb in reversed(limbs):
        result = result * BASE + limb
    return -result if negative else result


def digit_count(limbs: list[int]) -> int:
    """
    Точное количество десятичных разрядов magnitude (ноль — 1 разряд).

    Examples:
        >>> digit_count([0])
        1
        >>> digit_count([0, 1])
        10
    """
    size = _significant_length(limbs)
    if size == 0:
        return 1
    return (size - 1) * BASE_DIGITS + len(str(limbs[size - 1]))


def validate_limbs(limbs) -> None:
    """
    Проверка, что каждый лимб — int в [0, BASE).

    Используется при восстановлении значений из внешних данных.

    Raises:
        ValueError: Если лимб вне диапазона или не int
    """
    for index, limb in enumerate(limbs):
        if isinstance(limb, bool) or not isinstance(limb, int):
            logger.debug("limb[%d] rejected: type %s", index, type(limb).__name__)
            raise ValueError(
                f"limb[{index}] must be int, got {type(limb).__name__}"
            )
        if not 0 <= limb < BASE:
            logger.debug("limb[%d] rejected: %d out of range", index, limb)
            raise ValueError(f"limb[{index}] must be in [0, {BASE}), got {limb}")
