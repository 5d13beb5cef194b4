"""
JSON Schema Contract Validators

Записи сценариев самопроверки проверяются формальным JSON Schema контрактом
до построения pydantic моделей.

Схемы (каталог schema/ внутри пакета):
- addition_scenario.json (operands + expected)
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Mapping

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Чтение схемы из ресурсов пакета с meta-validation (Draft 2020-12).

    Результат кэшируется: повторный вызов возвращает тот же dict.

    Raises:
        FileNotFoundError: Нет файла schema/<schema_name>.json
        ValueError: Схема не проходит meta-validation
    """
    resource = resources.files(__package__) / "schema" / f"{schema_name}.json"
    if not resource.is_file():
        raise FileNotFoundError(f"Contract schema {schema_name!r} is not bundled with {__package__}")

    schema = json.loads(resource.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Contract schema {schema_name!r} is malformed: {e.message}")
    return schema


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка записей против одной именованной схемы."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.validator = Draft202012Validator(load_schema(schema_name))

    def validate(self, record: Mapping[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Запись нарушает контракт
        """
        self.validator.validate(dict(record))

    def is_valid(self, record: Mapping[str, Any]) -> bool:
        return self.validator.is_valid(dict(record))


class ScenarioValidator(ContractValidator):
    """Контракт addition_scenario."""

    def __init__(self):
        super().__init__("addition_scenario")
