"""
Domain models and value objects.

Contains share-set entities: EncodedShare, Point, ShareSet, ReconstructionResult.
"""

from src.core.domain.base_encoding import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    digit_value,
    parse_in_base,
    validate_base,
)
from src.core.domain.point import EncodedShare, Point
from src.core.domain.reconstruction_result import ReconstructionResult
from src.core.domain.share_set import (
    KEYS_FIELD,
    ShareSet,
    check_distinct_abscissas,
    check_threshold,
    sort_points,
)

__all__ = [
    # Base encoding
    "DIGIT_ALPHABET",
    "MIN_BASE",
    "MAX_BASE",
    "digit_value",
    "parse_in_base",
    "validate_base",
    # Point models
    "EncodedShare",
    "Point",
    # Share set
    "KEYS_FIELD",
    "ShareSet",
    "check_distinct_abscissas",
    "check_threshold",
    "sort_points",
    # Result
    "ReconstructionResult",
]
