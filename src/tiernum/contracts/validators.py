"""
Block Sequence Contract

Хранение чисел — ответственность вызывающего кода. Сохранённый payload
{"blocks": [...]} проверяется схемой block_sequence.json (Draft 2020-12),
затем превращается в BigNumber.

Схема проверяет форму и диапазоны блоков; правило ненулевого
старшего блока проверяется моделью BigNumber.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator

from src.tiernum.domain.big_number import BigNumber

# Схема лежит в пакете рядом с модулем
BLOCK_SEQUENCE_SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "block_sequence.json"


def load_schema(schema_path: Path = BLOCK_SEQUENCE_SCHEMA_PATH) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема сама по себе невалидна
    """
    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e}") from e

    return schema


class BlockSequenceValidator:
    """
    Валидатор для block_sequence контракта.

    По умолчанию использует схему пакета; путь можно переопределить.
    """

    def __init__(self, schema_path: Path = BLOCK_SEQUENCE_SCHEMA_PATH):
        self.schema = load_schema(schema_path)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)


@lru_cache(maxsize=1)
def _default_validator() -> BlockSequenceValidator:
    return BlockSequenceValidator()


def validate_block_sequence(data: Dict[str, Any]) -> None:
    """
    Валидация сохранённой последовательности блоков.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _default_validator().validate(data)


def load_big_number(data: Dict[str, Any]) -> BigNumber:
    """
    Контракт + модель: dict {"blocks": [...]} → BigNumber.

    Raises:
        jsonschema.ValidationError: Если нарушена форма или диапазон блоков
        pydantic.ValidationError: Если старший блок нулевой
    """
    validate_block_sequence(data)
    return BigNumber.model_validate(data)
