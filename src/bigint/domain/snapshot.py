"""
BigIntegerSnapshot — сериализуемый снапшот BigInteger

Immutable Pydantic модель, представляющая значение BigInteger в JSON.
Полная совместимость с JSON Schema (contracts/schema/big_integer.json).

Поля согласованы между собой:
- limbs нормализованы (нет старших нулевых лимбов)
- negative == False для нуля
- value — каноническая десятичная форма limbs/negative
- digit_count — количество десятичных разрядов magnitude
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.bigint.domain.big_integer import BigInteger
from src.bigint.math.codec import format_decimal
from src.bigint.math.limbs import digit_count, is_zero_magnitude, validate_limbs
from src.bigint.math.limits import DigitLimits

SNAPSHOT_SCHEMA_VERSION: Final[str] = "1"


class BigIntegerSnapshot(BaseModel):
    """
    Снапшот значения BigInteger.

    Immutable модель (frozen=True). Порядок полей важен: валидаторы
    negative/value/digit_count используют уже провалидированные limbs.
    """

    schema_version: str = Field(
        SNAPSHOT_SCHEMA_VERSION, pattern="^1$", description="Версия схемы снапшота"
    )
    limbs: list[int] = Field(
        ..., min_length=1, description="Лимбы base 10^9, младший первым"
    )
    negative: bool = Field(..., description="Флаг знака (False для нуля)")
    value: str = Field(
        ...,
        pattern=r"^(0|-?[1-9][0-9]*)$",
        description="Каноническая десятичная форма",
    )
    digit_count: int = Field(..., ge=1, description="Количество десятичных разрядов")

    model_config = {"frozen": True}

    @field_validator("limbs")
    @classmethod
    def validate_limbs_normalized(cls, v: list[int]) -> list[int]:
        """Каждый лимб в [0, 10^9), нет старших нулевых лимбов."""
        validate_limbs(v)
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("limbs must not have most-significant zero limbs")
        return v

    @field_validator("negative")
    @classmethod
    def validate_no_negative_zero(cls, v: bool, info) -> bool:
        """Ноль не может быть отрицательным."""
        if v and "limbs" in info.data and is_zero_magnitude(info.data["limbs"]):
            raise ValueError("zero must not be negative")
        return v

    @field_validator("value")
    @classmethod
    def validate_value_matches_limbs(cls, v: str, info) -> str:
        """value совпадает с канонической формой limbs/negative."""
        if "limbs" in info.data and "negative" in info.data:
            expected = format_decimal(info.data["limbs"], info.data["negative"])
            if v != expected:
                raise ValueError(f"value {v!r} does not match limbs ({expected!r})")
        return v

    @field_validator("digit_count")
    @classmethod
    def validate_digit_count_matches_limbs(cls, v: int, info) -> int:
        """digit_count совпадает с разрядностью limbs."""
        if "limbs" in info.data:
            expected = digit_count(info.data["limbs"])
            if v != expected:
                raise ValueError(f"digit_count {v} does not match limbs ({expected})")
        return v

    @classmethod
    def from_big_integer(cls, number: BigInteger) -> "BigIntegerSnapshot":
        """Снапшот значения BigInteger."""
        return cls(
            limbs=list(number.limbs),
            negative=number.negative,
            value=str(number),
            digit_count=number.digit_count(),
        )

    def to_big_integer(self, limits: DigitLimits | None = None) -> BigInteger:
        """
        Восстановление BigInteger из снапшота.

        Raises:
            BigIntegerOverflow: Значение длиннее потолка limits
        """
        return BigInteger.from_limbs(self.limbs, self.negative, limits=limits)
