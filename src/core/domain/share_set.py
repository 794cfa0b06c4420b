"""
ShareSet — Модель набора долей

Immutable Pydantic модель: заявленные n и k плюс точки, упорядоченные по x.

Формат файла долей:
    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "6"},
        "2": {"base": "2", "value": "1001"},
        ...
    }

Проверки при построении (fail-fast, доменные исключения, не ValidationError):
1. Каждая доля декодируется (InvalidBase / InvalidDigit)
2. n совпадает с фактическим числом точек (PointCountMismatch)
3. k в [1, point_count] (InvalidThreshold)
4. Все x попарно различны (DuplicateAbscissa)
"""

from typing import Any, Final, Iterable, Mapping, Optional, Sequence

from pydantic import BaseModel, Field, ValidationError

from src.core.errors import (
    DuplicateAbscissa,
    InvalidBase,
    InvalidInput,
    InvalidThreshold,
    PointCountMismatch,
)

from .point import EncodedShare, Point


# Ключ метаданных в файле долей (не является точкой)
KEYS_FIELD: Final[str] = "keys"


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def check_distinct_abscissas(points: Iterable[Point]) -> None:
    """
    Проверка попарной различности x.

    Raises:
        DuplicateAbscissa: Если два x совпадают
    """
    seen: set[int] = set()
    for p in points:
        if p.x in seen:
            raise DuplicateAbscissa(f"Duplicate abscissa x={p.x}")
        seen.add(p.x)


def check_threshold(k: int, point_count: int) -> None:
    """
    Raises:
        InvalidThreshold: Если k вне [1, point_count]
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidThreshold(f"Threshold k must be an integer, got {k!r}")
    if k < 1 or k > point_count:
        raise InvalidThreshold(f"Invalid k={k}: must be in [1, {point_count}]")


def sort_points(points: Iterable[Point]) -> tuple[Point, ...]:
    return tuple(sorted(points, key=lambda p: p.x))


# =============================================================================
# SHARE SET MODEL
# =============================================================================


class ShareSet(BaseModel):
    """
    Набор долей для восстановления.

    Создаётся через from_mapping()/from_points(): доменные проверки выполняются
    там, чтобы наружу выходили исключения из src.core.errors.
    """

    n: int = Field(..., description="Заявленное число долей")
    k: int = Field(..., description="Порог восстановления")
    points: tuple[Point, ...] = Field(..., description="Точки, упорядоченные по x")

    model_config = {"frozen": True}

    @classmethod
    def from_points(cls, points: Sequence[Point], k: int, n: Optional[int] = None) -> "ShareSet":
        """
        Построение набора из уже декодированных точек.

        Args:
            points: Точки в любом порядке
            k: Порог
            n: Заявленное число долей (по умолчанию len(points))
        """
        declared_n = len(points) if n is None else n
        if declared_n != len(points):
            raise PointCountMismatch(f"Expected n={declared_n} points, got {len(points)}")
        check_threshold(k, len(points))
        ordered = sort_points(points)
        check_distinct_abscissas(ordered)
        return cls(n=declared_n, k=k, points=ordered)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ShareSet":
        """
        Построение набора из разобранного JSON файла долей.

        Raises:
            InvalidInput: Нет секции keys или доля имеет неверную структуру
            InvalidBase / InvalidDigit: Доля не декодируется
            PointCountMismatch / InvalidThreshold / DuplicateAbscissa
        """
        keys = data.get(KEYS_FIELD)
        if not isinstance(keys, Mapping) or "n" not in keys or "k" not in keys:
            raise InvalidInput("Share file must contain 'keys' with 'n' and 'k'")

        points = []
        for key, raw in data.items():
            if key == KEYS_FIELD:
                continue
            share = _parse_encoded_share(key, raw)
            try:
                points.append(Point.from_share(key, share))
            except InvalidInput:
                raise
            except ValueError as e:
                raise InvalidInput(str(e)) from e

        return cls.from_points(points, k=keys["k"], n=keys["n"])

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def abscissas(self) -> list[int]:
        return [p.x for p in self.points]


def _parse_encoded_share(key: str, raw: Any) -> EncodedShare:
    """Конверсия pydantic ValidationError в доменное исключение."""
    if not isinstance(raw, Mapping):
        raise InvalidInput(f"Share {key!r} must be an object with 'base' and 'value'")
    try:
        return EncodedShare.model_validate(dict(raw))
    except ValidationError as e:
        if any(err["loc"] and err["loc"][0] == "base" for err in e.errors()):
            raise InvalidBase(f"Share {key!r}: invalid base {raw.get('base')!r}") from e
        raise InvalidInput(f"Share {key!r}: {e.errors()[0]['msg']}") from e
