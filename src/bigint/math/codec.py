"""
Text Codec — десятичный текст ↔ лимбы

Грамматика: [+-]?[0-9]+

Парсинг:
1. Необязательный знак '+' / '-'
2. Пустая часть разрядов → InvalidNumberFormat
3. Ведущие нули пропускаются; только нули → канонический ноль ("-0" == 0)
4. Не-цифра в оставшейся части → InvalidNumberFormat (только ASCII цифры)
5. Разрядов больше потолка → DigitLimitExceeded (до конверсии)
6. Разряды режутся по 9 с младшего конца: один кусок = один лимб

Форматирование:
    '-' для отрицательных ненулевых, старший лимб без дополнения,
    остальные лимбы дополнены нулями до 9 символов. Без '+' и ведущих нулей.
"""

import logging
from typing import Final, TextIO

from src.bigint.math.errors import (
    BigIntegerOverflow,
    DigitLimitExceeded,
    InvalidNumberFormat,
)
from src.bigint.math.limbs import normalize, normalize_sign
from src.bigint.math.limits import BASE, BASE_DIGITS, DigitLimits, get_default_limits

logger = logging.getLogger(__name__)

_ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse_decimal(
    text: str | bytes, limits: DigitLimits | None = None
) -> tuple[list[int], bool]:
    """
    Парсинг десятичной строки в (limbs, negative).

    Args:
        text: Десятичная строка (str или ASCII bytes)
        limits: Потолок разрядности (default: процессный)

    Returns:
        (limbs, negative) — нормализованные

    Raises:
        InvalidNumberFormat: Пустая часть разрядов или не-цифра
        DigitLimitExceeded: Разрядов больше limits.max_digits
        TypeError: Если text не str/bytes

    Examples:
        >>> parse_decimal("-1234567890")
        ([234567890, 1], True)
        >>> parse_decimal("007")
        ([7], False)
        >>> parse_decimal("-0")
        ([0], False)
    """
    limits = limits or get_default_limits()

    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError as e:
            logger.debug("invalid number format: non-ASCII byte at %d", e.start)
            raise InvalidNumberFormat(f"Non-ASCII bytes in number: {e}") from e

    if not isinstance(text, str):
        raise TypeError(f"Expected str or bytes, got {type(text).__name__}")

    negative = False
    start = 0
    if text[:1] == "-":
        negative = True
        start = 1
    elif text[:1] == "+":
        start = 1

    if start >= len(text):
        logger.debug("invalid number format: empty digit portion in %r", text)
        raise InvalidNumberFormat(f"Invalid number format: {text!r} has no digits")

    # Пропуск ведущих нулей
    first_significant = start
    while first_significant < len(text) and text[first_significant] == "0":
        first_significant += 1

    if first_significant == len(text):
        return [0], False

    digits = text[first_significant:]

    for offset, char in enumerate(digits):
        if char not in _ASCII_DIGITS:
            logger.debug(
                "invalid number format: %r at position %d",
                char,
                first_significant + offset,
            )
            raise InvalidNumberFormat(
                f"Non-digit character {char!r} at position "
                f"{first_significant + offset} in {text!r}"
            )

    if len(digits) > limits.max_digits:
        logger.debug(
            "digit ceiling exceeded while parsing: %d > %d",
            len(digits),
            limits.max_digits,
        )
        raise DigitLimitExceeded(
            f"Number has {len(digits)} decimal digits, "
            f"ceiling is {limits.max_digits}"
        )

    limbs: list[int] = []
    position = len(digits)
    while position > 0:
        chunk_start = max(position - BASE_DIGITS, 0)
        limbs.append(_chunk_to_limb(digits[chunk_start:position]))
        position = chunk_start

    normalize(limbs)
    return limbs, normalize_sign(limbs, negative)


def _chunk_to_limb(chunk: str) -> int:
    """Кусок десятичных разрядов → один лимб."""
    limb = int(chunk)
    # Кусок из 9 цифр всегда < BASE
    if limb >= BASE:
        logger.debug("chunk of %d digits does not fit a limb", len(chunk))
        raise BigIntegerOverflow(f"Chunk {chunk!r} does not fit a limb")
    return limb


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_decimal(limbs: list[int], negative: bool = False) -> str:
    """
    Форматирование (limbs, negative) в каноническую десятичную строку.

    Examples:
        >>> format_decimal([7, 1], True)
        '-1000000007'
        >>> format_decimal([0], True)
        '0'
    """
    limbs = normalize(list(limbs))

    parts = []
    if normalize_sign(limbs, negative):
        parts.append("-")

    parts.append(str(limbs[-1]))
    for limb in reversed(limbs[:-1]):
        parts.append(f"{limb:0{BASE_DIGITS}d}")

    return "".join(parts)


# =============================================================================
# ПОТОКОВЫЙ ВВОД
# =============================================================================


def read_token(stream: TextIO) -> str:
    """
    Чтение следующего токена, разделённого пробельными символами.

    Ведущие пробельные символы пропускаются. Символ-разделитель после токена
    поглощается.

    Returns:
        Токен или "" в конце потока
    """
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)

    token = []
    while char and not char.isspace():
        token.append(char)
        char = stream.read(1)

    return "".join(token)
