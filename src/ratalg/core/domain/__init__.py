"""
Domain models and value objects.

Contains the expression tree: Term, Polynomial, Denominator variants,
Fraction, Product, Equation.
"""

from ratalg.core.domain.expression import Equation, Product, equation_from_polynomial
from ratalg.core.domain.fraction import (
    Denominator,
    DenominatorKind,
    Fraction,
    PolynomialDenominator,
    ScalarDenominator,
    constant_fraction,
    make_denominator,
    make_fraction,
)
from ratalg.core.domain.polynomial import Polynomial
from ratalg.core.domain.term import Term, make_term

__all__ = [
    # Term model
    "Term",
    "make_term",
    # Polynomial model
    "Polynomial",
    # Fraction model
    "Denominator",
    "DenominatorKind",
    "ScalarDenominator",
    "PolynomialDenominator",
    "Fraction",
    "make_denominator",
    "make_fraction",
    "constant_fraction",
    # Composite expressions
    "Product",
    "Equation",
    "equation_from_polynomial",
]
