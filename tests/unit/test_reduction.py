"""
Тесты для Reduction — n-арное сложение digit strings

Проверяемые инварианты:
1. Сценарии с двумя и тремя операндами для обеих стратегий
2. Ноль операндов → "0", один операнд → возвращается как есть
3. Отсутствующие/пустые операнды трактуются как "0"
4. Ассоциативность левой свёртки
5. InvalidArgumentsError / InvalidOperandError
"""

import random

import pytest

from src.core.math.digit_safeguards import (
    InvalidArgumentsError,
    InvalidDigitError,
    InvalidOperandError,
)
from src.core.math.pair_adders import AdderStrategy
from src.core.math.reduction import add, add_operands

STRATEGIES = [AdderStrategy.ITERATIVE, AdderStrategy.COLUMNAR]


@pytest.fixture(params=STRATEGIES, ids=lambda s: s.value)
def strategy(request):
    """Стратегия попарного сложения."""
    return request.param


# =============================================================================
# ТЕСТЫ: сценарии
# =============================================================================


class TestScenarios:
    """Конкретные сценарии n-арного сложения."""

    @pytest.mark.parametrize(
        "operands, expected",
        [
            (("999", "999"), "1998"),
            (("999", "1"), "1000"),
            (("1", "999"), "1000"),
            (("0", "0"), "0"),
            (("", "0"), "0"),
            (("", ""), "0"),
            (("999", "999", "45"), "2043"),
            (("55", "999", "999"), "2053"),
        ],
    )
    def test_sum(self, strategy, operands, expected):
        assert add(strategy, *operands) == expected
        assert add_operands(strategy, list(operands)) == expected

    def test_many_operands(self, strategy):
        operands = [str(n) for n in range(1, 101)]
        assert add(strategy, *operands) == "5050"

    def test_absent_operands_are_zero(self, strategy):
        assert add(strategy, None, "5") == "5"
        assert add(strategy, "5", None) == "5"
        assert add(strategy, None, None) == "0"
        assert add(strategy, "7", "", None, "3") == "10"

    def test_strategy_by_name(self):
        assert add("iterative", "999", "1") == "1000"
        assert add("columnar", "999", "1") == "1000"

    def test_custom_pair_adder(self):
        calls = []

        def recording_adder(a: str, b: str) -> str:
            calls.append((a, b))
            return str(int(a) + int(b))

        assert add(recording_adder, "1", "22", "333") == "356"
        # Пары нормализованы: длинный операнд первым
        assert calls == [("22", "1"), ("333", "23")]


class TestEdgeCases:
    """Ноль и один операнд."""

    def test_zero_operands(self, strategy):
        assert add(strategy) == "0"
        assert add_operands(strategy, []) == "0"

    def test_single_operand_returned_standalone(self, strategy):
        assert add(strategy, "42") == "42"
        # Один операнд не проходит через adder: ведущие нули сохраняются
        assert add(strategy, "007") == "007"

    def test_single_absent_operand(self, strategy):
        assert add(strategy, None) == "0"
        assert add(strategy, "") == "0"

    def test_single_operand_skips_adder(self):
        def failing_adder(a: str, b: str) -> str:
            raise AssertionError("adder must not be called")

        assert add(failing_adder, "12") == "12"


# =============================================================================
# ТЕСТЫ: инварианты
# =============================================================================


class TestInvariants:
    """Ассоциативность и эквивалентность стратегий."""

    def test_left_fold_associativity(self, strategy):
        rng = random.Random(5)
        for _ in range(100):
            a, b, c = (str(rng.randint(0, 10**30)) for _ in range(3))
            assert add(strategy, a, b, c) == add(strategy, add(strategy, a, b), c)

    def test_matches_integer_sum(self, strategy):
        rng = random.Random(9)
        for _ in range(50):
            values = [rng.randint(0, 10**25) for _ in range(rng.randint(2, 6))]
            assert add(strategy, *map(str, values)) == str(sum(values))

    def test_strategies_agree(self):
        rng = random.Random(13)
        for _ in range(50):
            operands = [str(rng.randint(0, 10**20)) for _ in range(4)]
            assert add(AdderStrategy.ITERATIVE, *operands) == add(AdderStrategy.COLUMNAR, *operands)


# =============================================================================
# ТЕСТЫ: ошибки
# =============================================================================


class TestErrors:
    """Ошибки входных данных."""

    @pytest.mark.parametrize("operands", [None, "123", 123, {"1", "2"}, iter(["1"])])
    def test_non_list_operands_raise(self, strategy, operands):
        with pytest.raises(InvalidArgumentsError):
            add_operands(strategy, operands)

    def test_non_string_operand_raises(self, strategy):
        with pytest.raises(InvalidOperandError):
            add(strategy, "5", 7)

        with pytest.raises(InvalidOperandError):
            add(strategy, 5, "7")

    def test_unknown_strategy_raises(self):
        with pytest.raises(ValueError, match="Unknown adder strategy"):
            add("bogus", "1", "2")

    def test_strict_mode(self, strategy):
        assert add(strategy, "1", "2", strict=True) == "3"
        with pytest.raises(InvalidDigitError):
            add(strategy, "1", "2b", strict=True)

    def test_strict_mode_single_operand(self, strategy):
        """Strict проверяет и одиночный операнд, минуя adder."""
        assert add(strategy, "12", strict=True) == "12"
        with pytest.raises(InvalidDigitError):
            add(strategy, "12a", strict=True)
        with pytest.raises(InvalidDigitError):
            add_operands(strategy, ["1 2"], strict=True)

    @pytest.mark.parametrize("lone", [5, 1.5, ["1"]])
    def test_single_non_string_operand_raises(self, strategy, lone):
        with pytest.raises(InvalidOperandError):
            add(strategy, lone)

    def test_permissive_mode_default(self, strategy):
        assert add(strategy, "1", "2b") == "21"
