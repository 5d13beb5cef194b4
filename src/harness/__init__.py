"""Harness — самопроверка сложения digit strings по статической таблице сценариев.

- Прогон сценариев для каждой стратегии попарного сложения
- Отчёт "#<i> <ok|not ok>: ..." по секциям стратегий
"""

from .config import HarnessConfig
from .runner import (
    ScenarioOutcome,
    format_outcome_line,
    main,
    render_report,
    render_section,
    run_scenarios,
)
from .scenarios import SCENARIO_TABLE, load_scenarios

__all__ = [
    "HarnessConfig",
    "ScenarioOutcome",
    "SCENARIO_TABLE",
    "format_outcome_line",
    "load_scenarios",
    "main",
    "render_report",
    "render_section",
    "run_scenarios",
]
