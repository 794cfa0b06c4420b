"""Secret Reconstructor — восстановление многочлена и секрета f(0).

Пайплайн:
1. Точки упорядочиваются по x, проверяется различность x
2. Выбор подмножества для построения (см. ReconstructionConfig)
3. Интерполяция Лагранжа над Q
4. Проверка многочлена по ВСЕМ точкам набора
5. Сборка ReconstructionResult (и проверка по контракту)

Любая ошибка терминальна: частичный результат не возвращается.
"""

import logging
from typing import Optional, Sequence

from src.core.contracts import validate_reconstruction_result
from src.core.domain import (
    Point,
    ReconstructionResult,
    ShareSet,
    check_distinct_abscissas,
    check_threshold,
    sort_points,
)
from src.core.errors import InvalidThreshold
from src.core.math import (
    Polynomial,
    VerificationReport,
    lagrange_polynomial,
    poly_degree,
    poly_is_integral,
    poly_to_integers,
    poly_to_strings,
    verify_polynomial,
)

from .config import ReconstructionConfig

logger = logging.getLogger(__name__)


class SecretReconstructor:
    """Восстановление секрета из набора долей.

    Stateless: один экземпляр можно использовать для любого числа наборов.
    """

    def __init__(self, config: Optional[ReconstructionConfig] = None):
        """
        Args:
            config: конфигурация выбора подмножества и проверки контрактов
        """
        self.config = config or ReconstructionConfig()

    def select_subset(self, points: Sequence[Point], k: int) -> tuple[Point, ...]:
        """Выбор точек для построения многочлена.

        Args:
            points: Все точки, упорядоченные по x
            k: Порог

        Raises:
            InvalidThreshold: subset_xs не из k значений или содержит x вне набора
        """
        if self.config.use_all_points:
            return tuple(points)

        if self.config.subset_xs is None:
            return tuple(points[:k])

        by_x = {p.x: p for p in points}
        wanted = self.config.subset_xs
        if len(wanted) != k:
            raise InvalidThreshold(f"Subset must contain exactly k={k} points, got {len(wanted)}")
        missing = [x for x in wanted if x not in by_x]
        if missing:
            raise InvalidThreshold(f"Subset references unknown x values: {missing}")
        return sort_points(by_x[x] for x in wanted)

    def reconstruct_points(self, points: Sequence[Point], k: int) -> ReconstructionResult:
        """Восстановление по списку точек и порогу k.

        Raises:
            InvalidThreshold: k вне [1, len(points)] или неверное подмножество
            DuplicateAbscissa: совпадающие x
            ContractViolation: результат не соответствует контракту
        """
        check_threshold(k, len(points))
        ordered = sort_points(points)
        check_distinct_abscissas(ordered)

        subset = self.select_subset(ordered, k)
        logger.info(
            "Interpolating through %d of %d points: x=%s",
            len(subset),
            len(ordered),
            [p.x for p in subset],
        )

        polynomial = lagrange_polynomial(subset)
        report = verify_polynomial(polynomial, ordered)
        if report.verified:
            logger.info("Polynomial verified against all %d points", report.checked)
        else:
            logger.warning(
                "Verification failed: %d of %d points mismatch",
                len(report.mismatches),
                report.checked,
            )

        result = build_result(polynomial, subset, report)
        if self.config.validate_contracts:
            validate_reconstruction_result(result.to_output_dict())
        return result

    def reconstruct(self, share_set: ShareSet) -> ReconstructionResult:
        """Восстановление по загруженному набору долей."""
        return self.reconstruct_points(share_set.points, share_set.k)


def build_result(
    polynomial: Polynomial,
    used_points: Sequence[Point],
    report: VerificationReport,
) -> ReconstructionResult:
    """Сборка результата для слоя вывода.

    f0_int / coefficients_int заполняются только при точной целочисленности.
    Строковые формы больших целых опираются на снятый в src.core лимит
    sys.set_int_max_str_digits.
    """
    f0 = polynomial[0]
    mismatches = list(report.mismatches)
    return ReconstructionResult(
        degree=poly_degree(polynomial),
        coefficients=poly_to_strings(polynomial),
        f0=str(f0),
        verified=report.verified,
        used_points=[p.x for p in used_points],
        mismatches=mismatches or None,
        f0_int=f0.to_exact_integer() if f0.is_integer() else None,
        coefficients_int=poly_to_integers(polynomial) if poly_is_integral(polynomial) else None,
    )
