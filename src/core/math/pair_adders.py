"""
Pair Adders — сложение двух digit strings

Две взаимозаменяемые стратегии с одинаковым контрактом:
- ITERATIVE: цикл по колонкам справа налево с изменяемым carry
- COLUMNAR: разложение на колонки (map) и свёртка (reduce) без мутаций

Обе стратегии обязаны давать побайтно одинаковый результат для любых
валидных входов.

АЛГОРИТМ (обе стратегии):
    offset = len(b) - len(a)          (<= 0, т.к. a не короче b)
    колонка i: digit(a[i]) + digit(b[i + offset]) + carry_in
    carry_out = total // 10, цифра результата = total % 10
    ненулевой carry после старшей колонки даёт одну ведущую цифру
"""

from enum import Enum
from functools import partial, reduce
from typing import Callable, Optional, Protocol

from src.core.math.digit_safeguards import (
    RADIX,
    digit_at,
    ensure_string_operand,
    finalize_sum,
    order_by_length,
)


# =============================================================================
# ENUMS / TYPES
# =============================================================================


class AdderStrategy(str, Enum):
    """Стратегия попарного сложения."""

    ITERATIVE = "iterative"
    COLUMNAR = "columnar"


class PairAdder(Protocol):
    """Контракт попарного сложения: (a, b) -> сумма как digit string."""

    def __call__(self, a: str, b: str) -> str: ...


# =============================================================================
# ITERATIVE STRATEGY
# =============================================================================


def _add_columns_iterative(a: str, b: str, strict: bool) -> str:
    """Сложение нормализованной пары (len(a) >= len(b)) циклом по колонкам."""
    digits = []
    carry = 0
    offset = len(b) - len(a)

    # Колонка -1 виртуальная: нужна только для выброса финального carry
    for i in range(len(a) - 1, -2, -1):
        if i == -1 and carry == 0:
            break

        cur_a = digit_at(a, i, strict)
        cur_b = digit_at(b, i + offset, strict)
        added = cur_a + cur_b + carry
        carry = added // RADIX
        digits.append(str(added % RADIX))

    # digits накоплены от младшего разряда к старшему
    return "".join(reversed(digits))


def add_pair_iterative(a: str, b: str, strict: bool = False) -> str:
    """
    Сложение двух digit strings: итеративная стратегия.

    Args:
        a: Первый операнд (пустая строка = 0)
        b: Второй операнд (пустая строка = 0)
        strict: Ошибка на не-цифровых символах вместо трактовки их как 0

    Returns:
        Сумма без лишних ведущих нулей ("0" для нулевой суммы)

    Raises:
        InvalidOperandError: Если a или b не str
        InvalidDigitError: Если strict=True и встречен не-цифровой символ

    Examples:
        >>> add_pair_iterative("999", "1")
        '1000'
        >>> add_pair_iterative("", "")
        '0'
    """
    a = ensure_string_operand(a, "a")
    b = ensure_string_operand(b, "b")
    a, b = order_by_length(a, b)
    return finalize_sum(_add_columns_iterative(a, b, strict))


# =============================================================================
# COLUMNAR STRATEGY
# =============================================================================


# Неизменяемый односвязный список цифр: (digit, rest) или None
DigitChain = Optional[tuple[str, "DigitChain"]]


def _reduce_column(state: tuple[DigitChain, int], column_sum: int) -> tuple[DigitChain, int]:
    """Шаг свёртки: (chain, carry) + сумма колонки -> новое (chain, carry)."""
    chain, carry = state
    total = carry + column_sum
    return (str(total % RADIX), chain), total // RADIX


def _chain_to_str(chain: DigitChain) -> str:
    """Голова цепочки — старший разряд."""
    digits = []
    while chain is not None:
        digit, chain = chain
        digits.append(digit)
    return "".join(digits)


def _add_columns_columnar(a: str, b: str, strict: bool) -> str:
    """Сложение нормализованной пары (len(a) >= len(b)) через map/reduce."""
    offset = len(b) - len(a)

    pairs = [(digit_at(a, i, strict), digit_at(b, i + offset, strict)) for i in range(len(a))]
    # Колонки независимы друг от друга, порядок важен только для свёртки
    column_sums = map(lambda pair: pair[0] + pair[1], reversed(pairs))
    chain, carry = reduce(_reduce_column, column_sums, (None, 0))

    if carry == 0:
        return _chain_to_str(chain)

    return _chain_to_str(_reduce_column((chain, carry), 0)[0])


def add_pair_columnar(a: str, b: str, strict: bool = False) -> str:
    """
    Сложение двух digit strings: колоночная (map/reduce) стратегия.

    Контракт идентичен add_pair_iterative.

    Examples:
        >>> add_pair_columnar("999", "999")
        '1998'
        >>> add_pair_columnar("", "0")
        '0'
    """
    a = ensure_string_operand(a, "a")
    b = ensure_string_operand(b, "b")
    a, b = order_by_length(a, b)
    return finalize_sum(_add_columns_columnar(a, b, strict))


# =============================================================================
# STRATEGY RESOLUTION
# =============================================================================


_STRATEGY_ADDERS: dict[AdderStrategy, Callable[..., str]] = {
    AdderStrategy.ITERATIVE: add_pair_iterative,
    AdderStrategy.COLUMNAR: add_pair_columnar,
}


def resolve_pair_adder(
    strategy: "AdderStrategy | str | PairAdder",
    strict: bool = False,
) -> PairAdder:
    """
    Получение функции попарного сложения по стратегии.

    Args:
        strategy: AdderStrategy, его строковое значение ("iterative"/"columnar")
            или произвольный callable (a, b) -> str
        strict: Strict разбор цифр (только для встроенных стратегий)

    Returns:
        Callable (a, b) -> str

    Raises:
        ValueError: Неизвестное имя стратегии или strict для произвольного callable
    """
    if isinstance(strategy, str):
        try:
            strategy = AdderStrategy(strategy)
        except ValueError:
            known = ", ".join(s.value for s in AdderStrategy)
            raise ValueError(f"Unknown adder strategy {strategy!r} (expected one of: {known})")

        adder = _STRATEGY_ADDERS[strategy]
        return partial(adder, strict=True) if strict else adder

    if callable(strategy):
        if strict:
            raise ValueError("strict digit parsing is only available for built-in strategies")
        return strategy

    raise ValueError(f"Adder strategy must be AdderStrategy or callable, got {strategy!r}")
