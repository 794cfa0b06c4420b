"""
Core math modules

Точная рациональная арифметика, алгебра многочленов над Q,
интерполяция Лагранжа и проверка многочлена по точкам.
"""

# Rational
from src.core.math.rational import Rational, RationalLike

# Polynomial Algebra
from src.core.math.polynomial import (
    Polynomial,
    poly_add,
    poly_constant,
    poly_degree,
    poly_evaluate,
    poly_is_integral,
    poly_mul_linear,
    poly_scale,
    poly_to_integers,
    poly_to_strings,
    poly_trim,
    poly_zero,
)

# Lagrange Interpolator
from src.core.math.lagrange import (
    PointLike,
    interpolate_at,
    lagrange_basis,
    lagrange_polynomial,
)

# Consistency Verifier
from src.core.math.verification import (
    Mismatch,
    VerificationReport,
    check_point,
    verify_polynomial,
)

__all__ = [
    # Rational
    "Rational",
    "RationalLike",
    # Polynomial Algebra: Types
    "Polynomial",
    # Polynomial Algebra: Constructors
    "poly_constant",
    "poly_trim",
    "poly_zero",
    # Polynomial Algebra: Operations
    "poly_add",
    "poly_evaluate",
    "poly_mul_linear",
    "poly_scale",
    # Polynomial Algebra: Representations
    "poly_degree",
    "poly_is_integral",
    "poly_to_integers",
    "poly_to_strings",
    # Lagrange
    "PointLike",
    "interpolate_at",
    "lagrange_basis",
    "lagrange_polynomial",
    # Verification
    "Mismatch",
    "VerificationReport",
    "check_point",
    "verify_polynomial",
]
