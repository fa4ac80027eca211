"""
Exceptions для BigInteger

Каждая ошибка наследует и базовый BigIntegerError, и соответствующую
встроенную категорию, чтобы вызывающий код мог ловить любую из них.
"""


class BigIntegerError(Exception):
    """Базовая ошибка BigInteger."""

    pass


class BigIntegerOverflow(BigIntegerError, ArithmeticError):
    """
    Превышение потолка разрядности.

    Возникает при конструировании, сложении/вычитании (перенос за пределы
    допустимого количества разрядов) и умножении. Операнды и receiver
    compound формы после ошибки не изменяются.
    """

    pass


class BigIntegerDivisionByZero(BigIntegerError, ZeroDivisionError):
    """Деление или остаток от деления на ноль."""

    pass


class InvalidNumberFormat(BigIntegerError, ValueError):
    """Строка не является десятичным целым: пустая часть разрядов или не-цифра."""

    pass


class DigitLimitExceeded(BigIntegerOverflow, InvalidNumberFormat):
    """
    Строка содержит больше разрядов, чем допускает потолок.

    Одновременно Overflow и Invalid format.
    """

    pass
