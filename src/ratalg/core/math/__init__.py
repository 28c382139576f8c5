"""
Core math modules для ratalg

Численные примитивы, на которые опираются алгебраические операции.
"""

from ratalg.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_COEFF_ZERO,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Float checks
    is_close,
    is_integral,
    is_valid_float,
    is_zero,
    # GCD
    gcd,
    gcd_many,
    # Validation
    validate_positive,
    validate_step_count,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_COEFF_ZERO",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Float checks
    "is_close",
    "is_integral",
    "is_valid_float",
    "is_zero",
    # Numerical Safeguards — GCD
    "gcd",
    "gcd_many",
    # Numerical Safeguards — Validation
    "validate_positive",
    "validate_step_count",
]
