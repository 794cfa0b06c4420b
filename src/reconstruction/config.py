"""Конфигурация восстановления.

Выбор подмножества точек, по которому строится многочлен:
- по умолчанию первые k точек по возрастанию x;
- use_all_points: все переданные точки (степень <= n-1);
- subset_xs: явный список ровно k различных x из набора.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Final, Optional

from src.core.errors import InvalidThreshold


# Файл долей по умолчанию (относительно рабочего каталога)
DEFAULT_INPUT_PATH: Final[Path] = Path("data") / "sample.json"


@dataclass(frozen=True)
class ReconstructionConfig:
    """Конфигурация SecretReconstructor.

    - use_all_points: строить по всем точкам вместо первых k
    - subset_xs: явное подмножество x (несовместимо с use_all_points)
    - validate_contracts: проверять вход и результат по JSON Schema
    """
    use_all_points: bool = False
    subset_xs: Optional[tuple[int, ...]] = None
    validate_contracts: bool = True

    def __post_init__(self):
        if self.use_all_points and self.subset_xs is not None:
            raise InvalidThreshold("use_all_points and subset_xs are mutually exclusive")
        if self.subset_xs is not None and len(set(self.subset_xs)) != len(self.subset_xs):
            raise InvalidThreshold(f"subset_xs contains repeated values: {self.subset_xs}")
