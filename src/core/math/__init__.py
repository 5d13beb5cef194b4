"""
Core math modules для digit-sum

Арифметика произвольной точности над десятичными digit strings.
"""

# Digit Safeguards
from src.core.math.digit_safeguards import (
    # Constants
    DIGIT_CHARS,
    RADIX,
    ZERO_DIGIT_STRING,
    # Exceptions
    DigitArithmeticError,
    InvalidArgumentsError,
    InvalidDigitError,
    InvalidOperandError,
    # Digit parsing
    digit_at,
    is_digit_string,
    parse_digit,
    parse_digit_strict,
    # Operand validation
    ensure_string_operand,
    finalize_sum,
    order_by_length,
    validate_operands,
)

# Pair Adders
from src.core.math.pair_adders import (
    AdderStrategy,
    PairAdder,
    add_pair_columnar,
    add_pair_iterative,
    resolve_pair_adder,
)

# Reduction
from src.core.math.reduction import add, add_operands

__all__ = [
    # Digit Safeguards — Constants
    "DIGIT_CHARS",
    "RADIX",
    "ZERO_DIGIT_STRING",
    # Digit Safeguards — Exceptions
    "DigitArithmeticError",
    "InvalidArgumentsError",
    "InvalidDigitError",
    "InvalidOperandError",
    # Digit Safeguards — Digit parsing
    "digit_at",
    "is_digit_string",
    "parse_digit",
    "parse_digit_strict",
    # Digit Safeguards — Operand validation
    "ensure_string_operand",
    "finalize_sum",
    "order_by_length",
    "validate_operands",
    # Pair Adders
    "AdderStrategy",
    "PairAdder",
    "add_pair_columnar",
    "add_pair_iterative",
    "resolve_pair_adder",
    # Reduction
    "add",
    "add_operands",
]
