"""
Base Encoding — Декодирование строк цифр в произвольном основании

Единственный допустимый способ преобразования значения доли
(base, digits) в целое произвольной точности.

Алфавит: 0-9, затем a-z (регистр не важен), основания от 2 до 36.
"""

from typing import Final

from src.core.errors import InvalidBase, InvalidDigit


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

MIN_BASE: Final[int] = 2

MAX_BASE: Final[int] = len(DIGIT_ALPHABET)


# =============================================================================
# ДЕКОДИРОВАНИЕ
# =============================================================================


def validate_base(base: int) -> int:
    """
    Проверка основания системы счисления.

    Raises:
        InvalidBase: Если base не int или вне [MIN_BASE, MAX_BASE]
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"Base must be an integer, got {base!r}")
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBase(f"Base {base} outside [{MIN_BASE}, {MAX_BASE}]")
    return base


def digit_value(ch: str, base: int) -> int:
    """
    Значение одной цифры в заданном основании.

    Raises:
        InvalidDigit: Если символ вне алфавита или его значение >= base
    """
    v = DIGIT_ALPHABET.find(ch.lower()) if len(ch) == 1 else -1
    if v < 0 or v >= base:
        raise InvalidDigit(f"Invalid digit '{ch}' for base {base}")
    return v


def parse_in_base(digits: str, base: int) -> int:
    """
    Декодирование строки цифр в целое.

    Args:
        digits: Строка цифр (регистр не важен)
        base: Основание, 2..36

    Returns:
        Неотрицательное целое произвольной точности

    Raises:
        InvalidBase: Основание вне диапазона
        InvalidDigit: Пустая строка или символ вне [0, base)

    Examples:
        >>> parse_in_base("1a", 16)
        26
        >>> parse_in_base("1001", 2)
        9
    """
    validate_base(base)
    if not digits:
        raise InvalidDigit(f"Empty digit string for base {base}")

    value = 0
    for ch in digits:
        value = value * base + digit_value(ch, base)
    return value
