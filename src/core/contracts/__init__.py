"""
Contract Validation Module

Модуль для валидации JSON записей сценариев digit-sum.
"""

from .validators import ContractValidator, ScenarioValidator, load_schema

__all__ = [
    "ContractValidator",
    "ScenarioValidator",
    "load_schema",
]
