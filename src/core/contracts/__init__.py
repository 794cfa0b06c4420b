"""
Contract Validation Module

Модуль для валидации JSON контрактов: входного файла долей и результата
восстановления.
"""

from .validators import (
    ContractValidator,
    ReconstructionResultValidator,
    SchemaLoader,
    ShareSetValidator,
    validate_reconstruction_result,
    validate_share_set,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ShareSetValidator",
    "ReconstructionResultValidator",
    # Functions
    "validate_share_set",
    "validate_reconstruction_result",
]
