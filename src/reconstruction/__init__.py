"""Reconstruction — восстановление секрета из набора пороговых долей.

- ReconstructionConfig: выбор подмножества точек, проверка контрактов
- load_share_set / parse_share_set: чтение и проверка файла долей
- SecretReconstructor: интерполяция, проверка, сборка результата
"""

from .config import DEFAULT_INPUT_PATH, ReconstructionConfig
from .loader import load_share_set, parse_share_set
from .reconstructor import SecretReconstructor, build_result

__all__ = [
    "DEFAULT_INPUT_PATH",
    "ReconstructionConfig",
    "load_share_set",
    "parse_share_set",
    "SecretReconstructor",
    "build_result",
]
