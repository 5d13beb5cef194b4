"""
Reduction — n-арное сложение digit strings

Свёртка слева направо поверх выбранной стратегии попарного сложения:

    acc = operands[0] or "0"
    for op in operands[1:]:
        acc = add_pair(*validate_operands(acc or "0", op or "0"))

ПРАВИЛА:
1. Ноль операндов → "0" (аддитивная единица)
2. Один операнд → возвращается как есть, без вызова adder
   (отсутствующий или пустой операнд → "0"; не-строка → InvalidOperandError;
   strict проверяет его цифры)
3. Два и более → левая свёртка с нормализацией каждой пары
"""

from typing import Sequence

import structlog

from src.core.math.digit_safeguards import (
    ZERO_DIGIT_STRING,
    InvalidArgumentsError,
    ensure_string_operand,
    parse_digit_strict,
    validate_operands,
)
from src.core.math.pair_adders import AdderStrategy, PairAdder, resolve_pair_adder

logger = structlog.get_logger(__name__)


def add_operands(
    strategy: "AdderStrategy | str | PairAdder",
    operands: Sequence[str | None],
    strict: bool = False,
) -> str:
    """
    N-арное сложение списка digit strings.

    Args:
        strategy: Стратегия попарного сложения (см. resolve_pair_adder)
        operands: Список или кортеж операндов; None и "" трактуются как 0
        strict: Strict разбор цифр

    Returns:
        Сумма всех операндов как digit string

    Raises:
        InvalidArgumentsError: Если operands отсутствует или не list/tuple
        InvalidOperandError: Если один из операндов не str (и не None)
        InvalidDigitError: Если strict=True и встречен не-цифровой символ

    Examples:
        >>> add_operands(AdderStrategy.ITERATIVE, ["999", "999", "45"])
        '2043'
    """
    if operands is None or not isinstance(operands, (list, tuple)):
        raise InvalidArgumentsError(
            f"Operands must be a list of digit strings, got {type(operands).__name__}"
        )

    add_pair = resolve_pair_adder(strategy, strict=strict)

    if len(operands) == 0:
        return ZERO_DIGIT_STRING

    if len(operands) == 1:
        # Один операнд не проходит через adder, но проверяется как операнд
        lone = operands[0]
        if not lone:
            return ZERO_DIGIT_STRING
        ensure_string_operand(lone, "operands[0]")
        if strict:
            for char in lone:
                parse_digit_strict(char, lone)
        return lone

    acc = operands[0] or ZERO_DIGIT_STRING
    for position, operand in enumerate(operands[1:], start=1):
        a, b = validate_operands(acc or ZERO_DIGIT_STRING, operand or ZERO_DIGIT_STRING)
        acc = add_pair(a, b)
        logger.debug("fold_step", position=position, operand=operand, acc=acc)

    logger.debug("sum_computed", operand_count=len(operands), result=acc)
    return acc


def add(
    strategy: "AdderStrategy | str | PairAdder",
    *operands: str | None,
    strict: bool = False,
) -> str:
    """
    N-арное сложение: вариадическая форма add_operands.

    Examples:
        >>> add(AdderStrategy.COLUMNAR, "55", "999", "999")
        '2053'
        >>> add(AdderStrategy.COLUMNAR, "", "")
        '0'
    """
    return add_operands(strategy, list(operands), strict=strict)
