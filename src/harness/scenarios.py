"""
Статическая таблица сценариев самопроверки.

Записи хранятся в виде JSON-совместимых dict, проверяются контрактом
addition_scenario и превращаются в AdditionScenario.
"""

from typing import Any, Iterable, Mapping

from src.core.contracts.validators import ScenarioValidator
from src.core.domain.scenario import AdditionScenario

SCENARIO_TABLE: tuple[Mapping[str, Any], ...] = (
    {"operands": ["999", "999"], "expected": "1998"},
    {"operands": ["999", "1"], "expected": "1000"},
    {"operands": ["1", "999"], "expected": "1000"},
    {"operands": ["0", "0"], "expected": "0"},
    {"operands": ["", "0"], "expected": "0"},
    {"operands": ["", ""], "expected": "0"},
    {"operands": ["999", "999", "45"], "expected": "2043"},
    {"operands": ["55", "999", "999"], "expected": "2053"},
)


def load_scenarios(
    records: Iterable[Mapping[str, Any]] = SCENARIO_TABLE,
) -> tuple[AdditionScenario, ...]:
    """
    Проверка записей контрактом и построение моделей сценариев.

    Raises:
        jsonschema.ValidationError: запись не соответствует схеме
        pydantic.ValidationError: запись не проходит валидацию модели
    """
    validator = ScenarioValidator()
    scenarios = []
    for record in records:
        validator.validate(dict(record))
        scenarios.append(AdditionScenario(**record))
    return tuple(scenarios)
