"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- share_set.json (входной файл долей)
- reconstruction_result.json (результат восстановления для слоя вывода)
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.errors import ContractViolation


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию схемы берутся из каталога schema/ рядом с модулем
    (устанавливаются как package data).
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or (Path(__file__).parent / "schema")
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'share_set')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ContractViolation: Если данные не соответствуют схеме
                (исходная ValidationError в __cause__)
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            location = "/".join(str(part) for part in e.absolute_path) or "<root>"
            raise ContractViolation(
                f"{self.schema_name} contract violated at {location}: {e.message}"
            ) from e

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class ShareSetValidator(ContractValidator):
    """Валидатор для share_set контракта (входной файл долей)."""

    def __init__(self):
        super().__init__("share_set")


class ReconstructionResultValidator(ContractValidator):
    """Валидатор для reconstruction_result контракта."""

    def __init__(self):
        super().__init__("reconstruction_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_share_set(data: Dict[str, Any]) -> None:
    """
    Валидация файла долей.

    Raises:
        ContractViolation: Если данные не соответствуют схеме
    """
    ShareSetValidator().validate(data)


def validate_reconstruction_result(data: Dict[str, Any]) -> None:
    """
    Валидация результата восстановления (вывод to_output_dict()).

    Raises:
        ContractViolation: Если данные не соответствуют схеме
    """
    ReconstructionResultValidator().validate(data)
