"""
Runner — прогон сценариев и формирование отчёта

Формат строки отчёта:
    #<index> <ok|not ok>: <operand1> + <operand2> [+ ...] = <expected>

Секция: заголовок, строки сценариев, пустая строка. Код выхода всегда 0:
провалы сценариев отражаются в отчёте, а не в коде завершения.
"""

import sys
from dataclasses import dataclass
from functools import partial
from typing import Callable, Final, Iterable, Sequence

import structlog

from src.core.domain.scenario import AdditionScenario
from src.core.math.pair_adders import AdderStrategy
from src.core.math.reduction import add
from src.harness.config import HarnessConfig
from src.harness.logging_config import configure_logging
from src.harness.scenarios import load_scenarios

logger = structlog.get_logger(__name__)

# Заголовки секций отчёта по стратегиям
SECTION_HEADERS: Final[dict[AdderStrategy, str]] = {
    AdderStrategy.ITERATIVE: "imperative tests",
    AdderStrategy.COLUMNAR: "functional tests",
}


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ScenarioOutcome:
    """Результат одного сценария."""

    index: int
    passed: bool
    actual: str
    scenario: AdditionScenario


def equal(actual: str, expected: str) -> bool:
    return actual == expected


# =============================================================================
# RUN / FORMAT
# =============================================================================


def run_scenarios(
    sum_fn: Callable[..., str],
    scenarios: Iterable[AdditionScenario],
    comparator: Callable[[str, str], bool] = equal,
) -> list[ScenarioOutcome]:
    """
    Прогон сценариев через функцию n-арного сложения.

    Args:
        sum_fn: функция (*operands) -> сумма
        scenarios: сценарии
        comparator: оракул (actual, expected) -> bool

    Returns:
        Результаты в порядке сценариев
    """
    outcomes = []
    for index, scenario in enumerate(scenarios):
        actual = sum_fn(*scenario.operands)
        passed = comparator(actual, scenario.expected)
        if not passed:
            logger.warning(
                "scenario_failed",
                index=index,
                operands=scenario.operands,
                expected=scenario.expected,
                actual=actual,
            )
        outcomes.append(ScenarioOutcome(index=index, passed=passed, actual=actual, scenario=scenario))
    return outcomes


def format_outcome_line(outcome: ScenarioOutcome) -> str:
    status = "ok" if outcome.passed else "not ok"
    scenario = outcome.scenario
    return f"#{outcome.index} {status}: {scenario.render_expression()} = {scenario.expected}"


def render_section(header: str, outcomes: Sequence[ScenarioOutcome]) -> str:
    """Секция отчёта: заголовок, строки сценариев, завершающая пустая строка."""
    lines = [header, *(format_outcome_line(o) for o in outcomes), ""]
    return "\n".join(lines) + "\n"


def render_report(config: HarnessConfig | None = None) -> str:
    """Прогон всех сценариев для каждой стратегии из config и сборка отчёта."""
    config = config or HarnessConfig()
    scenarios = load_scenarios()

    sections = []
    for strategy in config.strategies:
        sum_fn = partial(add, strategy, strict=config.strict_digits)
        outcomes = run_scenarios(sum_fn, scenarios)
        logger.info(
            "strategy_completed",
            strategy=strategy.value,
            passed=sum(o.passed for o in outcomes),
            total=len(outcomes),
        )
        sections.append(render_section(SECTION_HEADERS[strategy], outcomes))
    return "".join(sections)


def main(config: HarnessConfig | None = None) -> int:
    """Точка входа самопроверки: печать отчёта в stdout, код выхода 0."""
    config = config or HarnessConfig()
    configure_logging(config.log_level, config.log_format)
    sys.stdout.write(render_report(config))
    return 0
