"""
Domain models and value objects.

Contains the addition scenario record used by the self-test harness.
"""

from src.core.domain.scenario import NIL_TOKEN, AdditionScenario, render_operand

__all__ = [
    "NIL_TOKEN",
    "AdditionScenario",
    "render_operand",
]
