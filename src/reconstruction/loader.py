"""Загрузка файла долей.

Порядок:
1. Чтение и разбор JSON
2. Проверка по контракту share_set (jsonschema)
3. Построение ShareSet с доменными проверками (декодирование, n, k, дубликаты x)
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

from src.core.contracts import validate_share_set
from src.core.domain import ShareSet
from src.core.errors import InvalidInput

logger = logging.getLogger(__name__)


def parse_share_set(data: Mapping[str, Any], validate_contract: bool = True) -> ShareSet:
    """Построение ShareSet из разобранного JSON.

    Args:
        data: Содержимое файла долей
        validate_contract: Проверять по схеме share_set перед разбором

    Raises:
        ContractViolation: Данные не соответствуют схеме
        InvalidInput (и подклассы): Доменные ошибки набора долей
    """
    if not isinstance(data, Mapping):
        raise InvalidInput(f"Share file must be a JSON object, got {type(data).__name__}")
    if validate_contract:
        validate_share_set(dict(data))

    share_set = ShareSet.from_mapping(data)
    logger.info(
        "Loaded %d shares (n=%d, k=%d)",
        share_set.point_count,
        share_set.n,
        share_set.k,
    )
    return share_set


def load_share_set(path: Union[str, Path], validate_contract: bool = True) -> ShareSet:
    """Чтение файла долей с диска.

    Raises:
        FileNotFoundError: Файл не существует
        InvalidInput: Файл не является валидным UTF-8 или JSON
        ContractViolation / InvalidInput: см. parse_share_set
    """
    path = Path(path)
    logger.debug("Reading share file %s", path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInput(f"{path}: invalid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise InvalidInput(f"{path}: not valid UTF-8: {e}") from e
    return parse_share_set(data, validate_contract=validate_contract)
