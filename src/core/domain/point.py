"""
Point — Модель точки (доли) для интерполяции

Immutable Pydantic модели:
- EncodedShare: значение доли в файле (base, value) до декодирования
- Point: декодированная точка (x, y) над целыми произвольной точности
"""

from pydantic import BaseModel, Field

from src.core.domain.base_encoding import MAX_BASE, MIN_BASE, parse_in_base


# =============================================================================
# ENCODED SHARE
# =============================================================================


class EncodedShare(BaseModel):
    """
    Значение доли, закодированное строкой цифр в основании base.

    base допускается как JSON-строка ("16") и как число (16).
    """

    base: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Основание системы счисления")
    # Без нормализации: пробел и пустая строка отклоняются в decode() как InvalidDigit
    value: str = Field(..., description="Строка цифр")

    model_config = {"frozen": True}

    def decode(self) -> int:
        """
        Декодирование в целое.

        Raises:
            InvalidDigit: Пустая строка или символ вне алфавита основания
        """
        return parse_in_base(self.value, self.base)


# =============================================================================
# POINT
# =============================================================================


class Point(BaseModel):
    """
    Точка (x, y) для интерполяции.

    x берётся из ключа доли (десятичная строка), y — декодированное значение.
    """

    x: int = Field(..., description="Абсцисса (ключ доли)")
    y: int = Field(..., description="Ордината (декодированное значение доли)")

    model_config = {"frozen": True}

    @classmethod
    def from_share(cls, key: str, share: EncodedShare) -> "Point":
        """
        Построение точки из ключа и закодированной доли.

        Raises:
            ValueError: Если ключ не является десятичным целым
            InvalidDigit: Если значение доли не декодируется
        """
        try:
            x = int(key.strip(), 10)
        except ValueError:
            raise ValueError(f"Share key must be a decimal integer, got {key!r}") from None
        return cls(x=x, y=share.decode())
