"""
Consistency Verifier — Проверка многочлена по всем переданным точкам

Пороговые схемы обычно переопределены (долей больше, чем k), поэтому
восстановленный P проверяется на ВСЕХ точках, а не только на подмножестве,
по которому он построен. Так обнаруживаются повреждённые доли.

Точка проходит проверку, если P(x) — точное целое и равно y.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from src.core.math.lagrange import PointLike
from src.core.math.polynomial import Polynomial, poly_evaluate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mismatch:
    """Точка, не прошедшая проверку."""

    x: int
    expected: int
    # Строковая форма P(x): "n" или "n/d"
    actual: str


@dataclass(frozen=True)
class VerificationReport:
    """Результат проверки многочлена по набору точек."""

    verified: bool
    checked: int
    mismatches: tuple[Mismatch, ...] = field(default_factory=tuple)


def check_point(p: Polynomial, point: PointLike) -> Optional[Mismatch]:
    """
    Проверка одной точки.

    Returns:
        None если P(x) == y точно, иначе Mismatch
    """
    value = poly_evaluate(p, point.x)
    if value.is_integer() and value.numerator == point.y:
        return None
    return Mismatch(x=point.x, expected=point.y, actual=str(value))


def verify_polynomial(p: Polynomial, points: Sequence[PointLike]) -> VerificationReport:
    """
    Проверка многочлена по всем точкам.

    Args:
        p: Интерполированный многочлен
        points: Полный набор точек (может быть надмножеством построечного)

    Returns:
        VerificationReport; verified=True тогда и только тогда, когда
        несовпадений нет
    """
    mismatches = []
    for point in points:
        mismatch = check_point(p, point)
        if mismatch is not None:
            logger.warning(
                "Share mismatch at x=%d: expected %d, got %s",
                mismatch.x,
                mismatch.expected,
                mismatch.actual,
            )
            mismatches.append(mismatch)

    return VerificationReport(
        verified=not mismatches,
        checked=len(points),
        mismatches=tuple(mismatches),
    )
