"""
Тесты для модуля Rational

Проверяет:
1. Нормализацию (сокращение, знак в числителе, единственный ноль)
2. Арифметику (add/subtract/multiply/divide/negate/invert)
3. Ошибки (ZeroDenominator, DivideByZero, ZeroHasNoInverse, NotAnInteger)
4. Операторы и продвижение int
5. Строковую форму и разбор
"""

import pytest

from src.core.errors import (
    DivideByZero,
    NotAnInteger,
    RationalArithmeticError,
    ShareRecoveryError,
    ZeroDenominator,
    ZeroHasNoInverse,
)
from src.core.math.rational import Rational


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


class TestNormalization:
    """Тесты канонической формы"""

    def test_reduces_by_gcd(self) -> None:
        """Дробь сокращается"""
        r = Rational(6, 8)
        assert (r.numerator, r.denominator) == (3, 4)

    def test_sign_moves_to_numerator(self) -> None:
        """Отрицательный знаменатель переносит знак в числитель"""
        r = Rational(3, -6)
        assert (r.numerator, r.denominator) == (-1, 2)

    def test_double_negative_is_positive(self) -> None:
        r = Rational(-4, -6)
        assert (r.numerator, r.denominator) == (2, 3)

    def test_zero_is_unique(self) -> None:
        """Ноль всегда (0, 1)"""
        for den in (1, -1, 7, -100):
            z = Rational(0, den)
            assert (z.numerator, z.denominator) == (0, 1)

    def test_reduction_idempotent(self) -> None:
        """Повторная нормализация не меняет значение"""
        r = Rational(-150, 35)
        again = Rational(r.numerator, r.denominator)
        assert again == r
        assert (again.numerator, again.denominator) == (r.numerator, r.denominator)

    def test_zero_denominator_raises(self) -> None:
        with pytest.raises(ZeroDenominator, match="Zero denominator"):
            Rational(5, 0)

    def test_rejects_float(self) -> None:
        """float не допускается"""
        with pytest.raises(TypeError):
            Rational(0.5, 1)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Rational.from_value(1.5)  # type: ignore[arg-type]

    def test_big_integers(self) -> None:
        """Произвольная точность без переполнения"""
        big = 2**521 - 1
        r = Rational(big * 3, 3 * 7)
        assert r == Rational(big, 7)
        assert r.denominator == 7

    def test_immutable(self) -> None:
        r = Rational(1, 2)
        with pytest.raises(AttributeError):
            r._numerator = 5  # type: ignore[misc]


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    """Тесты арифметических операций"""

    def test_add(self) -> None:
        assert Rational(1, 2).add(Rational(1, 3)) == Rational(5, 6)

    def test_subtract(self) -> None:
        assert Rational(1, 2).subtract(Rational(1, 3)) == Rational(1, 6)

    def test_multiply(self) -> None:
        assert Rational(2, 3).multiply(Rational(9, 4)) == Rational(3, 2)

    def test_divide(self) -> None:
        assert Rational(1, 2).divide(Rational(1, 4)) == 2

    def test_negate(self) -> None:
        assert Rational(3, 7).negate() == Rational(-3, 7)

    def test_invert(self) -> None:
        assert Rational(-3, 7).invert() == Rational(-7, 3)

    def test_results_are_normalized(self) -> None:
        """Результат любой операции нормализован"""
        r = Rational(1, 6).add(Rational(1, 3))
        assert (r.numerator, r.denominator) == (1, 2)

    def test_add_cancels_to_zero(self) -> None:
        r = Rational(2, 5).add(Rational(-2, 5))
        assert r.is_zero()
        assert (r.numerator, r.denominator) == (0, 1)

    def test_divide_by_zero_raises(self) -> None:
        with pytest.raises(DivideByZero, match="Divide by zero"):
            Rational(1, 2).divide(Rational(0))

    def test_invert_zero_raises(self) -> None:
        with pytest.raises(ZeroHasNoInverse, match="Zero has no inverse"):
            Rational(0).invert()

    def test_errors_share_base_classes(self) -> None:
        """Арифметические ошибки ловятся и доменным, и встроенным базовым классом"""
        with pytest.raises(ShareRecoveryError):
            Rational(1).divide(0)
        with pytest.raises(ZeroDivisionError):
            Rational(0).invert()
        with pytest.raises(RationalArithmeticError):
            Rational(1, 2).to_exact_integer()


# =============================================================================
# ЦЕЛОЕ ЗНАЧЕНИЕ
# =============================================================================


class TestToExactInteger:
    """Тесты to_exact_integer"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [(6, 3, 2), (-6, 3, -2), (0, 5, 0), (7, 1, 7), (10, -5, -2)],
    )
    def test_divisible_succeeds(self, a: int, b: int, expected: int) -> None:
        """Успешно, когда b делит a"""
        assert Rational(a, b).to_exact_integer() == expected

    @pytest.mark.parametrize("a, b", [(1, 2), (-7, 3), (5, 4)])
    def test_not_divisible_raises(self, a: int, b: int) -> None:
        with pytest.raises(NotAnInteger, match="Not an integer"):
            Rational(a, b).to_exact_integer()

    def test_is_integer(self) -> None:
        assert Rational(4, 2).is_integer()
        assert not Rational(3, 2).is_integer()


# =============================================================================
# ОПЕРАТОРЫ
# =============================================================================


class TestOperators:
    """Тесты операторов и продвижения int"""

    def test_binary_operators(self) -> None:
        a, b = Rational(1, 2), Rational(1, 3)
        assert a + b == Rational(5, 6)
        assert a - b == Rational(1, 6)
        assert a * b == Rational(1, 6)
        assert a / b == Rational(3, 2)
        assert -a == Rational(-1, 2)

    def test_int_promotion(self) -> None:
        """int слева и справа продвигается в Rational"""
        half = Rational(1, 2)
        assert half + 1 == Rational(3, 2)
        assert 1 + half == Rational(3, 2)
        assert 1 - half == half
        assert 3 * half == Rational(3, 2)
        assert 1 / half == 2

    def test_eq_with_int(self) -> None:
        assert Rational(4, 2) == 2
        assert Rational(1, 2) != 0

    def test_eq_with_unsupported_type(self) -> None:
        assert Rational(1, 2) != "1/2"
        assert Rational(1, 2) != 0.5

    def test_hash_consistent_with_eq(self) -> None:
        assert hash(Rational(2, 4)) == hash(Rational(1, 2))
        assert len({Rational(2, 4), Rational(1, 2), Rational(3, 6)}) == 1

    def test_bool(self) -> None:
        assert not Rational(0)
        assert Rational(-1, 9)


# =============================================================================
# СТРОКОВАЯ ФОРМА
# =============================================================================


class TestStringForm:
    """Тесты str()/parse()"""

    def test_integer_form(self) -> None:
        assert str(Rational(14, 2)) == "7"
        assert str(Rational(-3)) == "-3"

    def test_fraction_form(self) -> None:
        assert str(Rational(-2, 6)) == "-1/3"

    def test_parse_roundtrip(self) -> None:
        for r in (Rational(7), Rational(-5, 3), Rational(0)):
            assert Rational.parse(str(r)) == r

    def test_parse_normalizes(self) -> None:
        assert Rational.parse("6/-4") == Rational(-3, 2)

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid rational literal"):
            Rational.parse("1/x")

    def test_parse_zero_denominator(self) -> None:
        with pytest.raises(ZeroDenominator):
            Rational.parse("1/0")

    def test_repr(self) -> None:
        assert repr(Rational(2, -4)) == "Rational(-1, 2)"
