"""
Snapshot Contract — JSON Schema контракт снапшота BigInteger

Внешний JSON проходит два слоя проверки:
1. Структура и диапазоны — schema/big_integer.json (Draft 2020-12)
2. Согласованность полей — BigIntegerSnapshot (pydantic field validators)

validate_big_integer() выполняет оба слоя и возвращает снапшот; значение
восстанавливается через snapshot.to_big_integer().
"""

import json
import logging
from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator, ValidationError

from src.bigint.domain.snapshot import BigIntegerSnapshot

logger = logging.getLogger(__name__)

SNAPSHOT_SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "big_integer.json"


def load_snapshot_schema(path: Path = SNAPSHOT_SCHEMA_PATH) -> dict[str, Any]:
    """
    Чтение схемы снапшота с meta-validation.

    Raises:
        FileNotFoundError: Файл схемы отсутствует
        jsonschema.SchemaError: Схема не соответствует Draft 2020-12
    """
    schema = json.loads(path.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return schema


# Схема читается один раз при импорте
SNAPSHOT_VALIDATOR: Final[Draft202012Validator] = Draft202012Validator(
    load_snapshot_schema()
)


def snapshot_schema_errors(data: Any) -> list[str]:
    """
    Все нарушения схемы, по одному сообщению на нарушение.

    Пустой список — данные структурно валидны.
    """
    errors = sorted(
        SNAPSHOT_VALIDATOR.iter_errors(data), key=lambda e: [str(p) for p in e.path]
    )
    return [
        f"{'/'.join(str(p) for p in error.path) or '<root>'}: {error.message}"
        for error in errors
    ]


def validate_big_integer(data: dict[str, Any]) -> BigIntegerSnapshot:
    """
    Проверка JSON снапшота и построение BigIntegerSnapshot.

    Args:
        data: Декодированный JSON объект

    Returns:
        Провалидированный снапшот

    Raises:
        jsonschema.ValidationError: Нарушение структуры (схема)
        pydantic.ValidationError: Поля несогласованы между собой
    """
    try:
        SNAPSHOT_VALIDATOR.validate(data)
    except ValidationError as e:
        logger.debug(
            "big_integer contract rejected at %s: %s", list(e.absolute_path), e.message
        )
        raise

    return BigIntegerSnapshot.model_validate(data)
