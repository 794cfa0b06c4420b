"""
ReconstructionResult — Модель результата восстановления

Immutable Pydantic модель, передаваемая слою вывода.
Полная совместимость с JSON Schema (src/core/contracts/schema/reconstruction_result.json)
через to_output_dict().

Целые произвольной точности выводятся в JSON десятичными строками.
Опциональные поля (mismatches, f0_int, coefficients_int) присутствуют
в выводе только когда заданы.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.math.verification import Mismatch


# =============================================================================
# RESULT MODEL
# =============================================================================


class ReconstructionResult(BaseModel):
    """
    Результат восстановления многочлена и секрета f(0).
    """

    degree: int = Field(..., ge=0, description="Степень многочлена после тримминга")
    coefficients: list[str] = Field(
        ..., min_length=1, description="Коэффициенты от младшей степени ('n' или 'n/d')"
    )
    f0: str = Field(..., min_length=1, description="Свободный член (восстановленный секрет)")
    verified: bool = Field(..., description="Несовпадений по всем точкам нет")
    used_points: list[int] = Field(
        ..., min_length=1, description="x точек, по которым построен многочлен"
    )
    mismatches: Optional[list[Mismatch]] = Field(
        None, validate_default=True, description="Несовпадения (только если есть)"
    )
    f0_int: Optional[int] = Field(None, description="f0 как целое (только если целое)")
    coefficients_int: Optional[list[int]] = Field(
        None, description="Коэффициенты как целые (только если все целые)"
    )

    model_config = {"frozen": True}

    @field_validator("coefficients")
    @classmethod
    def validate_coefficients(cls, v: list[str], info) -> list[str]:
        """Число коэффициентов = degree + 1"""
        if "degree" in info.data and len(v) != info.data["degree"] + 1:
            degree = info.data["degree"]
            raise ValueError(f"degree {degree} inconsistent with {len(v)} coefficients")
        return v

    @field_validator("mismatches")
    @classmethod
    def validate_mismatches(
        cls, v: Optional[list[Mismatch]], info
    ) -> Optional[list[Mismatch]]:
        """verified ⇔ нет несовпадений"""
        if "verified" in info.data:
            if info.data["verified"] and v:
                raise ValueError("verified result cannot carry mismatches")
            if not info.data["verified"] and not v:
                raise ValueError("unverified result must carry at least one mismatch")
        return v

    @field_validator("coefficients_int")
    @classmethod
    def validate_coefficients_int(cls, v: Optional[list[int]], info) -> Optional[list[int]]:
        coefficients = info.data.get("coefficients")
        if v is not None and coefficients is not None and len(v) != len(coefficients):
            raise ValueError("coefficients_int length differs from coefficients")
        return v

    @property
    def secret(self) -> str:
        """Восстановленный секрет (строковая форма f(0))."""
        return self.f0

    def to_output_dict(self) -> dict[str, Any]:
        """
        JSON-совместимое представление.

        Целые → десятичные строки, отсутствующие опциональные поля опускаются.
        """
        out: dict[str, Any] = {
            "degree": self.degree,
            "coefficients": list(self.coefficients),
            "f0": self.f0,
            "verified": self.verified,
            "used_points": [str(x) for x in self.used_points],
        }
        if self.mismatches:
            out["mismatches"] = [
                {"x": str(m.x), "expected": str(m.expected), "actual": m.actual}
                for m in self.mismatches
            ]
        if self.f0_int is not None:
            out["f0_int"] = str(self.f0_int)
        if self.coefficients_int is not None:
            out["coefficients_int"] = [str(c) for c in self.coefficients_int]
        return out

    def to_text(self) -> str:
        """Человекочитаемый отчёт (построчно)."""
        lines = [
            f"degree: {self.degree}",
            "coefficients (low->high): " + ", ".join(self.coefficients),
            f"f(0): {self.f0}",
            f"verified: {str(self.verified).lower()}",
            "used points: " + ", ".join(str(x) for x in self.used_points),
        ]
        if self.mismatches:
            lines.append("mismatches:")
            for m in self.mismatches:
                lines.append(f"  x={m.x} expected={m.expected} got={m.actual}")
        return "\n".join(lines)
