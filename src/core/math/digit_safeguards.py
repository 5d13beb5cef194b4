"""
Digit Safeguards — Digit String Primitives

Модуль обеспечивает базовые примитивы для работы с digit strings:
- Разбор отдельных символов в цифры (permissive / strict)
- Таксономию ошибок арифметики над digit strings
- Валидацию и нормализацию пары операндов (длинный операнд первым)
- Финализацию результата сложения (без лишних ведущих нулей)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После нормализации len(a) >= len(b)
2. Невалидный символ внутри строки не вызывает ошибку (permissive: цифра 0)
3. Отсутствующий или не-строковый операнд всегда вызывает InvalidOperandError
4. Результат сложения никогда не пуст: пустая сумма — это "0"
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления (только десятичная)
RADIX: Final[int] = 10

# Допустимые символы цифр (только ASCII, без unicode-цифр)
DIGIT_CHARS: Final[str] = "0123456789"

# Каноническое представление нуля
ZERO_DIGIT_STRING: Final[str] = "0"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DigitArithmeticError(Exception):
    """Базовое исключение арифметики над digit strings."""

    pass


class InvalidOperandError(DigitArithmeticError):
    """
    Один из двух операндов отсутствует (falsy) или не является строкой.

    Не возникает для невалидных символов внутри строки: они трактуются
    как цифра 0 (permissive parsing).
    """

    pass


class InvalidArgumentsError(DigitArithmeticError):
    """Коллекция операндов n-арного сложения отсутствует или не является списком."""

    pass


class InvalidDigitError(DigitArithmeticError):
    """Невалидный символ цифры в strict режиме."""

    def __init__(self, char: str, operand: str):
        self.char = char
        self.operand = operand
        super().__init__(f"Invalid digit {char!r} in operand {operand!r}")


# =============================================================================
# РАЗБОР ЦИФР
# =============================================================================


def parse_digit(char: str | None) -> int:
    """
    Permissive разбор одного символа в цифру.

    Args:
        char: Символ (или None для позиции вне строки)

    Returns:
        Значение цифры 0..9, либо 0 для None и любого не-цифрового символа

    Examples:
        >>> parse_digit("7")
        7
        >>> parse_digit("x")
        0
        >>> parse_digit(None)
        0
    """
    if char is not None and len(char) == 1 and char in DIGIT_CHARS:
        return ord(char) - ord("0")
    return 0


def parse_digit_strict(char: str | None, operand: str = "") -> int:
    """
    Strict разбор одного символа в цифру.

    None (позиция вне строки) по-прежнему трактуется как 0: это отсутствие
    цифры, а не невалидная цифра.

    Raises:
        InvalidDigitError: Если символ не является ASCII цифрой
    """
    if char is None:
        return 0
    if len(char) == 1 and char in DIGIT_CHARS:
        return ord(char) - ord("0")
    raise InvalidDigitError(char, operand)


def digit_at(value: str, index: int, strict: bool = False) -> int:
    """
    Цифра в позиции index, 0 для позиций вне строки.

    Отрицательные индексы считаются вне строки (без Python-семантики
    индексации с конца).
    """
    char = value[index] if 0 <= index < len(value) else None
    if strict:
        return parse_digit_strict(char, value)
    return parse_digit(char)


def is_digit_string(value: object) -> bool:
    """
    Проверка, что значение — непустая строка только из ASCII цифр.

    Examples:
        >>> is_digit_string("1998")
        True
        >>> is_digit_string("")
        False
        >>> is_digit_string("12a")
        False
    """
    return isinstance(value, str) and value != "" and all(c in DIGIT_CHARS for c in value)


# =============================================================================
# ВАЛИДАЦИЯ И НОРМАЛИЗАЦИЯ ОПЕРАНДОВ
# =============================================================================


def ensure_string_operand(value: object, name: str) -> str:
    """
    Проверка, что операнд является строкой (пустая строка допустима).

    Raises:
        InvalidOperandError: Если value не str
    """
    if not isinstance(value, str):
        raise InvalidOperandError(
            f"Operand {name} must be a digit string, got {type(value).__name__}: {value!r}"
        )
    return value


def order_by_length(a: str, b: str) -> tuple[str, str]:
    """
    Упорядочивание пары: более длинный (или равный) операнд первым.

    Returns:
        (a, b) с len(a) >= len(b)
    """
    if len(a) < len(b):
        return b, a
    return a, b


def validate_operands(a: object, b: object) -> tuple[str, str]:
    """
    Валидация и нормализация пары операндов.

    Оба операнда обязаны быть непустыми строками. После проверки пара
    упорядочивается так, чтобы первый операнд был не короче второго.

    Args:
        a: Первый операнд
        b: Второй операнд

    Returns:
        Нормализованная пара (a, b), len(a) >= len(b)

    Raises:
        InvalidOperandError: Если любой операнд отсутствует (falsy) или не str

    Examples:
        >>> validate_operands("1", "999")
        ('999', '1')
    """
    if not a or not b or not isinstance(a, str) or not isinstance(b, str):
        raise InvalidOperandError(f"Invalid input number: a={a!r}, b={b!r}")

    return order_by_length(a, b)


def finalize_sum(output: str) -> str:
    """
    Финализация результата сложения.

    Удаляет лишние ведущие нули; пустой результат становится "0".

    Examples:
        >>> finalize_sum("1998")
        '1998'
        >>> finalize_sum("008")
        '8'
        >>> finalize_sum("")
        '0'
    """
    return output.lstrip("0") or ZERO_DIGIT_STRING
