"""
Rational — Точная рациональная арифметика

Модуль обеспечивает точные вычисления над дробями произвольной точности
(числитель и знаменатель — Python int). Никакого float: восстановление
целочисленного секрета должно быть побитово точным.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 (знак хранится только в числителе)
2. gcd(|numerator|, denominator) == 1 (дробь всегда несократима)
3. (0, 1) — единственное представление нуля
4. Экземпляры immutable: каждая операция возвращает новый нормализованный Rational
5. Знаменатель 0 → ZeroDenominator, деление на 0 → DivideByZero,
   обращение 0 → ZeroHasNoInverse, нецелое → NotAnInteger
"""

import math
from typing import Union

from src.core.errors import (
    DivideByZero,
    NotAnInteger,
    ZeroDenominator,
    ZeroHasNoInverse,
)


RationalLike = Union["Rational", int]


class Rational:
    """
    Несократимая дробь numerator/denominator.

    Поддерживает именованные операции (add, subtract, multiply, divide,
    negate, invert, equals, to_exact_integer) и эквивалентные операторы.
    int-операнды продвигаются в Rational автоматически.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        if isinstance(numerator, bool) or not isinstance(numerator, int):
            raise TypeError(f"numerator must be int, got {type(numerator).__name__}")
        if isinstance(denominator, bool) or not isinstance(denominator, int):
            raise TypeError(f"denominator must be int, got {type(denominator).__name__}")
        if denominator == 0:
            raise ZeroDenominator(f"Zero denominator: {numerator}/0")

        g = math.gcd(numerator, denominator)
        numerator //= g
        denominator //= g
        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        object.__setattr__(self, "_numerator", numerator)
        object.__setattr__(self, "_denominator", denominator)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_value(cls, value: RationalLike) -> "Rational":
        """
        Продвижение int в Rational (Rational возвращается как есть).

        Raises:
            TypeError: Для любых других типов (float не допускается)
        """
        if isinstance(value, Rational):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value, 1)
        raise TypeError(f"Unsupported type for Rational: {type(value).__name__}")

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """
        Разбор строковой формы "n" или "n/d" (обратная операция к str()).

        Examples:
            >>> Rational.parse("-3/4")
            Rational(-3, 4)
            >>> Rational.parse("6/3")
            Rational(2, 1)
        """
        num_text, sep, den_text = text.strip().partition("/")
        try:
            numerator = int(num_text)
            denominator = int(den_text) if sep else 1
        except ValueError:
            raise ValueError(f"Invalid rational literal: {text!r}") from None
        return cls(numerator, denominator)

    @classmethod
    def zero(cls) -> "Rational":
        return cls(0, 1)

    @classmethod
    def one(cls) -> "Rational":
        return cls(1, 1)

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_integer(self) -> bool:
        return self._denominator == 1

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: RationalLike) -> "Rational":
        b = Rational.from_value(other)
        return Rational(
            self._numerator * b._denominator + b._numerator * self._denominator,
            self._denominator * b._denominator,
        )

    def subtract(self, other: RationalLike) -> "Rational":
        b = Rational.from_value(other)
        return Rational(
            self._numerator * b._denominator - b._numerator * self._denominator,
            self._denominator * b._denominator,
        )

    def multiply(self, other: RationalLike) -> "Rational":
        b = Rational.from_value(other)
        return Rational(self._numerator * b._numerator, self._denominator * b._denominator)

    def divide(self, other: RationalLike) -> "Rational":
        """
        Деление на other.

        Raises:
            DivideByZero: Если other равен нулю
        """
        b = Rational.from_value(other)
        if b._numerator == 0:
            raise DivideByZero(f"Divide by zero: {self} / 0")
        return Rational(self._numerator * b._denominator, self._denominator * b._numerator)

    def negate(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    def invert(self) -> "Rational":
        """
        Мультипликативная обратная величина.

        Raises:
            ZeroHasNoInverse: Если значение равно нулю
        """
        if self._numerator == 0:
            raise ZeroHasNoInverse("Zero has no inverse")
        return Rational(self._denominator, self._numerator)

    def equals(self, other: RationalLike) -> bool:
        b = Rational.from_value(other)
        return self._numerator == b._numerator and self._denominator == b._denominator

    def to_exact_integer(self) -> int:
        """
        Извлечение целого значения без округления.

        Raises:
            NotAnInteger: Если знаменатель не делит числитель
        """
        if self._numerator % self._denominator != 0:
            raise NotAnInteger(f"Not an integer: {self}")
        return self._numerator // self._denominator

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __add__(self, other):
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Rational.from_value(other).add(self)

    def __sub__(self, other):
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Rational.from_value(other).subtract(self)

    def __mul__(self, other):
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Rational.from_value(other).multiply(self)

    def __truediv__(self, other):
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Rational.from_value(other).divide(self)

    def __neg__(self):
        return self.negate()

    def __eq__(self, other):
        if isinstance(other, bool) or not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        # Целые значения хешируются как int: Rational(2) == 2
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __bool__(self):
        return self._numerator != 0

    def __str__(self):
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self):
        return f"Rational({self._numerator}, {self._denominator})"
