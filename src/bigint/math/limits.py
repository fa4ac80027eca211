"""
Digit Limits — потолок разрядности BigInteger

Модуль задаёт базу лимбов и потолок количества десятичных разрядов:
- BASE / BASE_DIGITS: лимб хранит ровно 9 десятичных разрядов (base 10^9)
- DEFAULT_MAX_DIGITS: потолок по умолчанию (30000 десятичных разрядов)
- DigitLimits: immutable Pydantic конфигурация потолка
- Процессный default с возможностью временного переопределения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Превышение потолка → BigIntegerOverflow (никакого усечения)
2. max_limbs = ceil(max_digits / BASE_DIGITS)
3. DigitLimits неизменяем (frozen=True)
"""

import logging
from contextlib import contextmanager
from typing import Final, Iterator

from pydantic import BaseModel, Field

from src.bigint.math.errors import BigIntegerOverflow

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ ЛИМБОВ
# =============================================================================

# Основание системы счисления лимбов
# Десятичный текст каждого лимба, кроме старшего, ровно 9 символов
BASE: Final[int] = 1_000_000_000

# Количество десятичных разрядов в одном лимбе
BASE_DIGITS: Final[int] = 9

# Потолок количества десятичных разрядов по умолчанию
DEFAULT_MAX_DIGITS: Final[int] = 30000


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


class DigitLimits(BaseModel):
    """
    Конфигурация потолка разрядности.

    Immutable модель (frozen=True). Хранит максимальное количество десятичных
    разрядов; потолок в лимбах выводится из него.
    """

    max_digits: int = Field(
        DEFAULT_MAX_DIGITS, gt=0, description="Максимум десятичных разрядов"
    )

    model_config = {"frozen": True}

    @property
    def max_limbs(self) -> int:
        """Потолок в лимбах: ceil(max_digits / BASE_DIGITS)."""
        return -(-self.max_digits // BASE_DIGITS)


# Процессный default
_default_limits: DigitLimits = DigitLimits()


def get_default_limits() -> DigitLimits:
    """Текущий процессный потолок разрядности."""
    return _default_limits


def set_default_limits(limits: DigitLimits) -> DigitLimits:
    """
    Установка процессного потолка разрядности.

    Args:
        limits: Новая конфигурация

    Returns:
        Предыдущая конфигурация (для восстановления)

    Raises:
        TypeError: Если limits не DigitLimits
    """
    global _default_limits

    if not isinstance(limits, DigitLimits):
        raise TypeError(f"limits must be DigitLimits, got {type(limits).__name__}")

    previous = _default_limits
    _default_limits = limits
    return previous


@contextmanager
def limits_override(limits: DigitLimits) -> Iterator[DigitLimits]:
    """
    Временное переопределение процессного потолка.

    Examples:
        >>> with limits_override(DigitLimits(max_digits=18)):
        ...     get_default_limits().max_limbs
        2
    """
    previous = set_default_limits(limits)
    try:
        yield limits
    finally:
        set_default_limits(previous)


# =============================================================================
# ПРОВЕРКИ ПОТОЛКА
# =============================================================================


def check_digit_count(digit_count: int, limits: DigitLimits | None = None) -> None:
    """
    Проверка количества десятичных разрядов против потолка.

    Raises:
        BigIntegerOverflow: Если digit_count > limits.max_digits
    """
    limits = limits or get_default_limits()

    if digit_count > limits.max_digits:
        logger.debug(
            "digit ceiling exceeded: %d digits > %d", digit_count, limits.max_digits
        )
        raise BigIntegerOverflow(
            f"Value has {digit_count} decimal digits, "
            f"ceiling is {limits.max_digits}"
        )


def check_limb_count(limb_count: int, limits: DigitLimits | None = None) -> None:
    """
    Проверка количества лимбов против потолка.

    Raises:
        BigIntegerOverflow: Если limb_count > limits.max_limbs
    """
    limits = limits or get_default_limits()

    if limb_count > limits.max_limbs:
        logger.debug(
            "limb ceiling exceeded: %d limbs > %d", limb_count, limits.max_limbs
        )
        raise BigIntegerOverflow(
            f"Value needs {limb_count} limbs, ceiling is {limits.max_limbs} "
            f"({limits.max_digits} decimal digits)"
        )
