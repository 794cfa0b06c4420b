"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (pattern/minimum/additionalProperties)
- Интеграция с Pydantic моделями
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import validators as validators_module
from src.core.contracts import (
    ReconstructionResultValidator,
    SchemaLoader,
    ShareSetValidator,
    validate_reconstruction_result,
    validate_share_set,
)
from src.core.domain import ReconstructionResult
from src.core.errors import ContractViolation
from src.core.math import Mismatch


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_share_set():
    """Валидный файл долей для тестирования."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "6"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": 16, "value": "a"},
        "6": {"base": "8", "value": "37"},
    }


@pytest.fixture
def valid_result():
    """Валидный результат восстановления для тестирования."""
    return {
        "degree": 2,
        "coefficients": ["7", "-2", "1"],
        "f0": "7",
        "verified": True,
        "used_points": ["1", "2", "3"],
        "f0_int": "7",
        "coefficients_int": ["7", "-2", "1"],
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Проверка загрузки всех схем."""
    loader = SchemaLoader()

    share_set_schema = loader.load_schema("share_set")
    result_schema = loader.load_schema("reconstruction_result")

    assert share_set_schema["$id"] == "share_set.json"
    assert result_schema["$id"] == "reconstruction_result.json"
    assert "keys" in share_set_schema["required"]


def test_schema_loader_default_dir_is_package_data():
    """Схемы лежат внутри пакета, а не в корне репозитория."""
    loader = SchemaLoader()

    assert loader.schema_dir == Path(validators_module.__file__).parent / "schema"
    assert (loader.schema_dir / "share_set.json").is_file()


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("share_set")
    schema2 = loader.load_schema("share_set")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_rejects_invalid_schema(tmp_path: Path):
    """Meta-validation отклоняет невалидную схему."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
    loader = SchemaLoader(schema_dir=tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        loader.load_schema("broken")


def test_schema_loader_missing_directory(tmp_path: Path):
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(schema_dir=tmp_path / "absent")


# =============================================================================
# TESTS - SHARE SET VALIDATION
# =============================================================================


def test_share_set_validator_accepts_valid_data(valid_share_set):
    """Валидация правильного файла долей."""
    validator = ShareSetValidator()
    validator.validate(valid_share_set)  # Не должно выбросить исключение
    assert validator.is_valid(valid_share_set)


def test_share_set_validate_function(valid_share_set):
    """Проверка функции validate_share_set."""
    validate_share_set(valid_share_set)


def test_share_set_rejects_missing_keys(valid_share_set):
    """Валидация отклоняет файл без секции keys."""
    data = valid_share_set.copy()
    del data["keys"]

    with pytest.raises(ContractViolation) as exc_info:
        validate_share_set(data)
    assert "'keys' is a required property" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_share_set_rejects_missing_threshold(valid_share_set):
    data = valid_share_set.copy()
    data["keys"] = {"n": 4}

    with pytest.raises(ContractViolation, match="'k' is a required property"):
        validate_share_set(data)


def test_share_set_rejects_wrong_type(valid_share_set):
    """n должно быть целым."""
    data = valid_share_set.copy()
    data["keys"] = {"n": "4", "k": 3}

    with pytest.raises(ContractViolation, match="is not of type 'integer'"):
        validate_share_set(data)


def test_share_set_rejects_non_numeric_key(valid_share_set):
    data = valid_share_set.copy()
    data["abc"] = {"base": "10", "value": "1"}

    with pytest.raises(ContractViolation, match="Additional properties"):
        validate_share_set(data)


def test_share_set_rejects_share_without_value(valid_share_set):
    data = valid_share_set.copy()
    data["1"] = {"base": "10"}

    with pytest.raises(ContractViolation, match="at 1: 'value' is a required property"):
        validate_share_set(data)


def test_share_set_rejects_non_numeric_base(valid_share_set):
    data = valid_share_set.copy()
    data["2"] = {"base": "hex", "value": "ff"}

    assert not ShareSetValidator().is_valid(data)


def test_share_set_rejects_empty_value(valid_share_set):
    data = valid_share_set.copy()
    data["2"] = {"base": "10", "value": ""}

    assert not ShareSetValidator().is_valid(data)


def test_share_set_iter_errors_reports_all(valid_share_set):
    """iter_errors возвращает все нарушения."""
    data = valid_share_set.copy()
    data["1"] = {"base": "10"}
    data["2"] = {"base": "hex", "value": "ff"}

    errors = list(ShareSetValidator().iter_errors(data))
    assert len(errors) >= 2


# =============================================================================
# TESTS - RECONSTRUCTION RESULT VALIDATION
# =============================================================================


def test_result_validator_accepts_valid_data(valid_result):
    validator = ReconstructionResultValidator()
    validator.validate(valid_result)
    assert validator.is_valid(valid_result)


def test_result_validate_function(valid_result):
    validate_reconstruction_result(valid_result)


def test_result_rejects_missing_required_field(valid_result):
    data = valid_result.copy()
    del data["verified"]

    with pytest.raises(ContractViolation, match="'verified' is a required property"):
        validate_reconstruction_result(data)


def test_result_rejects_negative_degree(valid_result):
    data = valid_result.copy()
    data["degree"] = -1

    with pytest.raises(ContractViolation):
        validate_reconstruction_result(data)


def test_result_rejects_bad_rational_string(valid_result):
    data = valid_result.copy()
    data["coefficients"] = ["7", "-2.5", "1"]

    with pytest.raises(ContractViolation, match="coefficients/1"):
        validate_reconstruction_result(data)


def test_result_rejects_fractional_int_field(valid_result):
    data = valid_result.copy()
    data["f0_int"] = "7/2"

    with pytest.raises(ContractViolation):
        validate_reconstruction_result(data)


def test_result_rejects_empty_mismatches(valid_result):
    """mismatches присутствует только если не пуст."""
    data = valid_result.copy()
    data["mismatches"] = []

    with pytest.raises(ContractViolation):
        validate_reconstruction_result(data)


def test_result_accepts_fractional_coefficients(valid_result):
    data = valid_result.copy()
    data["coefficients"] = ["1/2", "-3/7", "5"]
    data["f0"] = "1/2"
    del data["f0_int"]
    del data["coefficients_int"]

    validate_reconstruction_result(data)


# =============================================================================
# TESTS - PYDANTIC INTEGRATION
# =============================================================================


def test_pydantic_result_output_matches_schema():
    """to_output_dict() ReconstructionResult соответствует контракту."""
    result = ReconstructionResult(
        degree=1,
        coefficients=["-1/3", "2"],
        f0="-1/3",
        verified=False,
        used_points=[1, 4],
        mismatches=[Mismatch(x=9, expected=2**100, actual="53/3")],
    )
    validate_reconstruction_result(result.to_output_dict())
