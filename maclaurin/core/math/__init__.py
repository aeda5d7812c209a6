"""
Core math modules для maclaurin

Численные примитивы и ряд Маклорена для e^x.
"""

# Numerical Safeguards
from maclaurin.core.math.numerical_safeguards import (
    # NaN/Inf
    is_valid_float,
    # Safe powers
    safe_exp,
    safe_pow,
    # Rounding
    round_half_up,
    # Validation
    validate_non_negative,
    validate_positive,
)

# Series Evaluator
from maclaurin.core.math.series import (
    FACTORIAL_MAX_FINITE_N,
    evaluate_series,
    factorial,
    series_terms,
)

__all__ = [
    # Numerical Safeguards — NaN/Inf
    "is_valid_float",
    # Numerical Safeguards — Safe powers
    "safe_exp",
    "safe_pow",
    # Numerical Safeguards — Rounding
    "round_half_up",
    # Numerical Safeguards — Validation
    "validate_non_negative",
    "validate_positive",
    # Series
    "FACTORIAL_MAX_FINITE_N",
    "evaluate_series",
    "factorial",
    "series_terms",
]
