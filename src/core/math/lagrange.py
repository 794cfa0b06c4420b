"""
Lagrange Interpolator — Построение интерполяционного многочлена над Q

Для k точек с попарно различными x строит единственный многочлен P
степени <= k-1, такой что P(x_i) = y_i для каждой точки.

ФОРМУЛЫ:
    L_i(x) = Π_{j≠i} (x - x_j) / Π_{j≠i} (x_i - x_j)
    P(x)   = Σ_i y_i · L_i(x)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вычисления точные (Rational), без float
2. Дубликаты x → DuplicateAbscissa ДО построения (не DivideByZero изнутри)
3. Степень результата может быть < k-1 при сокращении старших членов
"""

import logging
from typing import Protocol, Sequence

from src.core.errors import DuplicateAbscissa, InvalidThreshold
from src.core.math.polynomial import (
    Polynomial,
    poly_add,
    poly_constant,
    poly_degree,
    poly_evaluate,
    poly_mul_linear,
    poly_scale,
    poly_zero,
)
from src.core.math.rational import Rational

logger = logging.getLogger(__name__)


class PointLike(Protocol):
    """Любой объект с целочисленными x и y (например, src.core.domain.Point)."""

    x: int
    y: int


def lagrange_basis(points: Sequence[PointLike], i: int) -> Polynomial:
    """
    Базисный многочлен L_i для точки i.

    Числитель — произведение (x - x_j) через poly_mul_linear начиная с 1,
    знаменатель — скаляр Π (x_i - x_j).
    """
    xi = Rational.from_value(points[i].x)
    numerator = poly_constant(1)
    denominator = Rational.one()
    for j, pj in enumerate(points):
        if j == i:
            continue
        xj = Rational.from_value(pj.x)
        numerator = poly_mul_linear(numerator, xj)
        denominator = denominator * (xi - xj)
    return poly_scale(numerator, denominator.invert())


def lagrange_polynomial(points: Sequence[PointLike]) -> Polynomial:
    """
    Интерполяционный многочлен Лагранжа через все переданные точки.

    Args:
        points: Точки с попарно различными x (порядок любой)

    Returns:
        Коэффициенты P от младшей степени к старшей

    Raises:
        InvalidThreshold: Если список точек пуст
        DuplicateAbscissa: Если два x совпадают

    Examples:
        >>> lagrange_polynomial([Point(x=1, y=6), Point(x=2, y=7), Point(x=3, y=10)])
        (Rational(7, 1), Rational(-2, 1), Rational(1, 1))
    """
    if not points:
        raise InvalidThreshold("Cannot interpolate through zero points")

    seen: set[int] = set()
    for p in points:
        if p.x in seen:
            raise DuplicateAbscissa(f"Duplicate abscissa x={p.x}")
        seen.add(p.x)

    result = poly_zero()
    for i, pi in enumerate(points):
        basis = lagrange_basis(points, i)
        term = poly_scale(basis, Rational.from_value(pi.y))
        result = poly_add(result, term)

    logger.debug(
        "Interpolated %d points into polynomial of degree %d",
        len(points),
        poly_degree(result),
    )
    return result


def interpolate_at(points: Sequence[PointLike], x: int) -> Rational:
    """
    Значение интерполяционного многочлена в точке x.

    Удобная обёртка; для x=0 даёт восстановленный секрет f(0).
    """
    return poly_evaluate(lagrange_polynomial(points), x)
