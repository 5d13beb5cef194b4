"""
AdditionScenario — Модель сценария самопроверки

Immutable Pydantic модель: набор операндов и ожидаемая сумма.
Отсутствующие операнды (None) и пустые строки допустимы и трактуются
сложением как ноль.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.digit_safeguards import is_digit_string

# Представление отсутствующего операнда в выводе
NIL_TOKEN: Final[str] = "nil"


def render_operand(operand: str | None) -> str:
    """
    Представление операнда для вывода: falsy операнд → "nil".

    Examples:
        >>> render_operand("999")
        '999'
        >>> render_operand("")
        'nil'
    """
    return operand or NIL_TOKEN


class AdditionScenario(BaseModel):
    """
    Сценарий сложения: операнды и ожидаемая сумма.

    Immutable модель (frozen=True), таблица сценариев статична.
    """

    operands: tuple[str | None, ...] = Field(
        ..., min_length=2, description="Операнды сложения (None/'' трактуются как 0)"
    )
    expected: str = Field(..., min_length=1, description="Ожидаемая сумма (digit string)")

    model_config = {"frozen": True}

    @field_validator("expected")
    @classmethod
    def validate_expected_digits(cls, v: str) -> str:
        """Ожидаемая сумма — только цифры, без лишних ведущих нулей."""
        if not is_digit_string(v):
            raise ValueError(f"expected {v!r} is not a digit string")
        if len(v) > 1 and v.startswith("0"):
            raise ValueError(f"expected {v!r} has a superfluous leading zero")
        return v

    def render_expression(self) -> str:
        """
        Выражение вида "999 + 999 + 45" (отсутствующие операнды → nil).
        """
        return " + ".join(render_operand(op) for op in self.operands)
