"""
Polynomial Algebra — Многочлены над Q

Многочлен представлен tuple коэффициентов Rational от младшей степени к старшей:
индекс i — коэффициент при x^i.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Старший коэффициент ненулевой, ЛИБО многочлен равен (0,) (нулевой многочлен)
2. Тримминг никогда не удаляет свободный член: len(p) >= 1
3. degree(p) = len(p) - 1 (нулевой многочлен имеет степень 0)
4. Все функции чистые; входные tuple не изменяются

Вызывающий код создаёт многочлены напрямую только через poly_zero()
и poly_constant(); всё остальное — результат операций этого модуля.
"""

from typing import Tuple

from src.core.math.rational import Rational, RationalLike

Polynomial = Tuple[Rational, ...]


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def poly_zero() -> Polynomial:
    """Канонический нулевой многочлен (0,)."""
    return (Rational.zero(),)


def poly_constant(value: RationalLike) -> Polynomial:
    """Константный многочлен из одного члена."""
    return (Rational.from_value(value),)


def poly_trim(coeffs) -> Polynomial:
    """
    Удаление нулевых старших коэффициентов.

    Свободный член сохраняется всегда: нулевой результат → (0,).
    """
    coeffs = tuple(coeffs)
    if not coeffs:
        return poly_zero()
    m = len(coeffs) - 1
    while m > 0 and coeffs[m].is_zero():
        m -= 1
    return coeffs[: m + 1]


def poly_degree(p: Polynomial) -> int:
    return len(p) - 1


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def poly_add(a: Polynomial, b: Polynomial) -> Polynomial:
    """
    Сумма многочленов.

    Коэффициенты складываются попарно до длины большего; отсутствующие
    старшие члены считаются нулями. Результат тримится.

    Examples:
        >>> poly_add((Rational(1), Rational(2)), (Rational(3), Rational(-2)))
        (Rational(4, 1),)
    """
    zero = Rational.zero()
    n = max(len(a), len(b))
    out = []
    for i in range(n):
        ai = a[i] if i < len(a) else zero
        bi = b[i] if i < len(b) else zero
        out.append(ai + bi)
    return poly_trim(out)


def poly_scale(p: Polynomial, scalar: RationalLike) -> Polynomial:
    """
    Умножение каждого коэффициента на скаляр.

    Тримминг не выполняется: при scalar == 0 длина сохраняется
    (как и у исходной операции масштабирования).
    """
    s = Rational.from_value(scalar)
    return tuple(c * s for c in p)


def poly_mul_linear(p: Polynomial, c: RationalLike) -> Polynomial:
    """
    Умножение многочлена на монический линейный множитель (x - c).

    Результат на один элемент длиннее входа. Аккумуляторы инициализируются
    нулями, степени обрабатываются от старшей к младшей:
        out[i + 1] += p[i]
        out[i]     += -c * p[i]

    Examples:
        >>> poly_mul_linear(poly_constant(1), 3)  # x - 3
        (Rational(-3, 1), Rational(1, 1))
    """
    c = Rational.from_value(c)
    neg_c = -c
    out = [Rational.zero()] * (len(p) + 1)
    for i in range(len(p) - 1, -1, -1):
        out[i] = out[i] + p[i] * neg_c
        out[i + 1] = out[i + 1] + p[i]
    return tuple(out)


def poly_evaluate(p: Polynomial, x: RationalLike) -> Rational:
    """
    Значение многочлена в точке x по схеме Горнера.

    acc = p[i] + acc * x, от старшего коэффициента к младшему, начиная с нуля.
    Точно в рациональной арифметике, без округления.
    """
    x = Rational.from_value(x)
    acc = Rational.zero()
    for coeff in reversed(p):
        acc = coeff + acc * x
    return acc


# =============================================================================
# ПРЕДСТАВЛЕНИЯ
# =============================================================================


def poly_is_integral(p: Polynomial) -> bool:
    """True если все коэффициенты — точные целые."""
    return all(c.is_integer() for c in p)


def poly_to_strings(p: Polynomial) -> list[str]:
    """Строковые формы коэффициентов ("n" или "n/d"), от младшей степени."""
    return [str(c) for c in p]


def poly_to_integers(p: Polynomial) -> list[int]:
    """
    Целочисленные коэффициенты.

    Raises:
        NotAnInteger: Если хотя бы один коэффициент дробный
    """
    return [c.to_exact_integer() for c in p]
