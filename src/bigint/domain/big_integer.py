"""
BigInteger — знаковое целое произвольной точности

Sign-magnitude представление: лимбы base 10^9 (младший первым) + флаг знака.
Операции делегируются чистым функциям из src.bigint.math; класс отвечает за
протоколы операторов Python, коэрцию int и in-place формы.

Семантика:
- Бинарные операторы возвращают новые значения
- Compound формы (+=, -=, *=, /=, %=) и increment/decrement изменяют
  receiver на месте; при ошибке receiver остаётся прежним
- '/' — целочисленное деление с округлением к нулю, '%' — остаток со знаком
  делимого: a == (a / b) * b + a % b
- '//' не поддерживается (floor семантика Python отличается для отрицательных)
- Значение изменяемо → не hashable

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после каждой публичной операции):
1. Нет старших нулевых лимбов, кроме [0]
2. Нет отрицательного нуля
3. Разрядность не превышает limits.max_digits
"""

import logging
from typing import Iterable, TextIO

from src.bigint.math.additive import signed_add
from src.bigint.math.codec import format_decimal, parse_decimal, read_token
from src.bigint.math.division import divide_truncating
from src.bigint.math.errors import BigIntegerOverflow
from src.bigint.math.limbs import (
    compare_magnitude,
    digit_count,
    is_zero_magnitude,
    limbs_from_int,
    limbs_to_int,
    normalize,
    normalize_sign,
    validate_limbs,
)
from src.bigint.math.limits import (
    DigitLimits,
    check_digit_count,
    get_default_limits,
)
from src.bigint.math.multiplicative import signed_multiply

logger = logging.getLogger(__name__)


def _limbs_from_native(value: int, limits: DigitLimits) -> tuple[list[int], bool]:
    """int → (limbs, negative) с проверкой потолка."""
    # Больше 4 бит на разряд: такое значение заведомо длиннее потолка
    if value.bit_length() > 4 * limits.max_digits:
        logger.debug(
            "native int rejected: %d bits for %d-digit ceiling",
            value.bit_length(),
            limits.max_digits,
        )
        raise BigIntegerOverflow(
            f"Integer with {value.bit_length()} bits exceeds "
            f"{limits.max_digits}-digit ceiling"
        )

    limbs, negative = limbs_from_int(value)
    check_digit_count(digit_count(limbs), limits)
    return limbs, negative


class BigInteger:
    """
    Знаковое целое произвольной точности с потолком разрядности.

    Конструирование:
        BigInteger()                 → 0
        BigInteger(-42)              → из native int
        BigInteger("-000123")        → из десятичной строки (или ASCII bytes)
        BigInteger(other)            → копия
        BigInteger(5, limits=...)    → с собственным потолком

    Examples:
        >>> str(BigInteger("999999999") + 1)
        '1000000000'
        >>> str(BigInteger(-7) / 2), str(BigInteger(-7) % 2)
        ('-3', '-1')
    """

    __hash__ = None

    def __init__(
        self,
        value: "int | str | bytes | BigInteger" = 0,
        *,
        limits: DigitLimits | None = None,
    ):
        """
        Args:
            value: Исходное значение (int, str, bytes или BigInteger)
            limits: Потолок разрядности экземпляра (default: процессный)

        Raises:
            BigIntegerOverflow: Значение длиннее потолка
            InvalidNumberFormat: Строка не является десятичным целым
            TypeError: Неподдерживаемый тип value
        """
        self._limits = limits

        if isinstance(value, BigInteger):
            self._limbs = list(value._limbs)
            self._negative = value._negative
            if limits is None:
                self._limits = value._limits
            else:
                check_digit_count(digit_count(self._limbs), limits)
        elif isinstance(value, int):
            self._limbs, self._negative = _limbs_from_native(value, self.limits)
        elif isinstance(value, (str, bytes, bytearray)):
            self._limbs, self._negative = parse_decimal(value, self.limits)
        else:
            raise TypeError(
                f"Cannot construct BigInteger from {type(value).__name__}"
            )

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _from_parts(
        cls, limbs: list[int], negative: bool, limits: DigitLimits | None
    ) -> "BigInteger":
        # Части уже нормализованы и проверены вызывающим кодом
        result = cls.__new__(cls)
        result._limbs = limbs
        result._negative = negative
        result._limits = limits
        return result

    @classmethod
    def from_limbs(
        cls,
        limbs: Iterable[int],
        negative: bool = False,
        *,
        limits: DigitLimits | None = None,
    ) -> "BigInteger":
        """
        Построение из лимбов base 10^9 (младший первым).

        Raises:
            ValueError: Лимб вне [0, BASE)
            BigIntegerOverflow: Значение длиннее потолка
        """
        limbs = list(limbs)
        validate_limbs(limbs)
        normalize(limbs)
        check_digit_count(digit_count(limbs), limits or get_default_limits())
        return cls._from_parts(limbs, normalize_sign(limbs, negative), limits)

    @classmethod
    def read_from(
        cls, stream: TextIO, *, limits: DigitLimits | None = None
    ) -> "BigInteger":
        """
        Чтение следующего десятичного токена из текстового потока.

        Raises:
            EOFError: Поток исчерпан
            InvalidNumberFormat: Токен не является десятичным целым
        """
        token = read_token(stream)
        if not token:
            raise EOFError("No BigInteger token left in stream")
        return cls(token, limits=limits)

    def write_to(self, stream: TextIO) -> None:
        """Запись канонической десятичной формы в текстовый поток."""
        stream.write(str(self))

    def copy(self) -> "BigInteger":
        return self._from_parts(list(self._limbs), self._negative, self._limits)

    __copy__ = copy

    def __deepcopy__(self, memo) -> "BigInteger":
        return self.copy()

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def negative(self) -> bool:
        """Флаг знака (False для нуля)."""
        return self._negative

    @property
    def limbs(self) -> tuple[int, ...]:
        """Лимбы magnitude (младший первым), копия."""
        return tuple(self._limbs)

    @property
    def limits(self) -> DigitLimits:
        """Потолок экземпляра или процессный default."""
        return self._limits or get_default_limits()

    def digit_count(self) -> int:
        """Количество десятичных разрядов magnitude."""
        return digit_count(self._limbs)

    # -------------------------------------------------------------------------
    # Коэрция
    # -------------------------------------------------------------------------

    def _coerce(self, other) -> "BigInteger":
        """BigInteger/int → BigInteger; иное → NotImplemented."""
        if isinstance(other, BigInteger):
            return other
        if isinstance(other, int):
            return BigInteger(other, limits=self._limits)
        return NotImplemented

    def _assign(self, result: "BigInteger") -> "BigInteger":
        self._limbs = result._limbs
        self._negative = result._negative
        return self

    # -------------------------------------------------------------------------
    # Унарные операторы
    # -------------------------------------------------------------------------

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __neg__(self) -> "BigInteger":
        limbs = list(self._limbs)
        return self._from_parts(
            limbs, normalize_sign(limbs, not self._negative), self._limits
        )

    def __abs__(self) -> "BigInteger":
        return self._from_parts(list(self._limbs), False, self._limits)

    # -------------------------------------------------------------------------
    # Аддитивные операторы
    # -------------------------------------------------------------------------

    def _add(self, other: "BigInteger", subtract: bool) -> "BigInteger":
        limbs, negative = signed_add(
            self._limbs,
            self._negative,
            other._limbs,
            other._negative,
            subtract=subtract,
            limits=self.limits,
        )
        return self._from_parts(limbs, negative, self._limits)

    def __add__(self, other) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._add(other, subtract=False)

    def __radd__(self, other) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._add(self, subtract=False)

    def __sub__(self, other) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._add(other, subtract=True)

    def __rsub__(self, other) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._add(self, subtract=True)

    def __iadd__(self, other) -> "BigInteger":
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __isub__(self, other) -> "BigInteger":
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    # -------------------------------------------------------------------------
    # Мультипликативные операторы
    # -------------------------------------------------------------------------

    def _multiply(self, other: "BigInteger") -> "BigInteger":
        limbs, negative = signed_multiply(
            self._limbs,
            self._negative,
            other._limbs,
            other._negative,
            limits=self.limits,
        )
        return self._from_parts(limbs, negative, self._limits)

    def __mul__(self, other) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._multiply(other)

    def __rmul__(self, other) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._multiply(self)

    def __imul__(self, other) -> "BigInteger":
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    # -------------------------------------------------------------------------
    # Деление
    # -------------------------------------------------------------------------

    def _divmod(self, other: "BigInteger") -> tuple["BigInteger", "BigInteger"]:
        quotient, q_negative, remainder, r_negative = divide_truncating(
            self._limbs, self._negative, other._limbs, other._negative
        )
        return (
            self._from_parts(quotient, q_negative, self._limits),
            self._from_parts(remainder, r_negative, self._limits),
        )

    def __truediv__(self, other) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._divmod(other)[0]

    def __rtruediv__(self, other) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._divmod(self)[0]

    def __mod__(self, other) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._divmod(other)[1]

    def __rmod__(self, other) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._divmod(self)[1]

    def __divmod__(self, other) -> tuple["BigInteger", "BigInteger"]:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._divmod(other)

    def __rdivmod__(self, other) -> tuple["BigInteger", "BigInteger"]:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other._divmod(self)

    def __itruediv__(self, other) -> "BigInteger":
        result = self.__truediv__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __imod__(self, other) -> "BigInteger":
        result = self.__mod__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    # -------------------------------------------------------------------------
    # Increment / decrement
    # -------------------------------------------------------------------------

    def increment(self) -> "BigInteger":
        """Префиксный ++: +1 на месте, возвращает self."""
        self += 1
        return self

    def decrement(self) -> "BigInteger":
        """Префиксный --: -1 на месте, возвращает self."""
        self -= 1
        return self

    def post_increment(self) -> "BigInteger":
        """Постфиксный ++: +1 на месте, возвращает копию прежнего значения."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "BigInteger":
        """Постфиксный --: -1 на месте, возвращает копию прежнего значения."""
        previous = self.copy()
        self.decrement()
        return previous

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def _compare(self, other) -> int:
        """
        Сравнение: сначала знак, затем magnitude.

        Returns:
            -1 / 0 / +1, либо NotImplemented для неподдерживаемых типов
        """
        if isinstance(other, BigInteger):
            other_limbs, other_negative = other._limbs, other._negative
        elif isinstance(other, int):
            # Без проверки потолка: сравнение не должно падать
            other_limbs, other_negative = limbs_from_int(other)
        else:
            return NotImplemented

        if self._negative != other_negative:
            return -1 if self._negative else 1

        order = compare_magnitude(self._limbs, other_limbs)
        return -order if self._negative else order

    def __eq__(self, other) -> bool:
        order = self._compare(other)
        if order is NotImplemented:
            return NotImplemented
        return order == 0

    def __ne__(self, other) -> bool:
        order = self._compare(other)
        if order is NotImplemented:
            return NotImplemented
        return order != 0

    def __lt__(self, other) -> bool:
        order = self._compare(other)
        if order is NotImplemented:
            return NotImplemented
        return order < 0

    def __le__(self, other) -> bool:
        order = self._compare(other)
        if order is NotImplemented:
            return NotImplemented
        return order <= 0

    def __gt__(self, other) -> bool:
        order = self._compare(other)
        if order is NotImplemented:
            return NotImplemented
        return order > 0

    def __ge__(self, other) -> bool:
        order = self._compare(other)
        if order is NotImplemented:
            return NotImplemented
        return order >= 0

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return not is_zero_magnitude(self._limbs)

    def __int__(self) -> int:
        return limbs_to_int(self._limbs, self._negative)

    def __str__(self) -> str:
        return format_decimal(self._limbs, self._negative)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"
