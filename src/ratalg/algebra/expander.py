"""Expander — раскрытие скобок (FOIL) для полиномиальных дробей.

Определено только для дробей со знаменателем — скаляром 1.
"""

from ratalg.algebra.arithmetic import add_polynomials, multiply_polynomials
from ratalg.algebra.simplifier import simplify_fraction, simplify_polynomial
from ratalg.core.domain import Equation, Fraction, Polynomial, Product, constant_fraction
from ratalg.core.errors import UnsupportedExpansionError
from ratalg.core.math.numerical_safeguards import EPS_COEFF_ZERO


def _require_polynomial(fraction: Fraction) -> None:
    if not fraction.is_polynomial:
        raise UnsupportedExpansionError()


def expand_fractions(f1: Fraction, f2: Fraction, eps: float = EPS_COEFF_ZERO) -> Fraction:
    """Произведение двух полиномиальных дробей с объединением подобных термов.

    (x + 1)(x - 1) → x² - 1

    Raises:
        UnsupportedExpansionError: знаменатель одной из дробей не скаляр 1
    """
    _require_polynomial(f1)
    _require_polynomial(f2)
    return simplify_fraction(
        Fraction(numerator=multiply_polynomials(f1.numerator, f2.numerator)),
        eps,
    )


def expand_product(product: Product, eps: float = EPS_COEFF_ZERO) -> Fraction:
    """Свёртка произведения в одну дробь.

    - пустое произведение → константа 1
    - один множитель → этот множитель без изменений
    - иначе левая свёртка expand_fractions
    """
    factors = product.factors
    if not factors:
        return constant_fraction(1.0)
    if len(factors) == 1:
        return factors[0]

    result = factors[0]
    for factor in factors[1:]:
        result = expand_fractions(result, factor, eps)
    return result


def expand_equation(equation: Equation, eps: float = EPS_COEFF_ZERO) -> Fraction:
    """Полное раскрытие: сумма раскрытых произведений в одной дроби.

    Пустое Equation → дробь с пустым числителем (0).

    Raises:
        UnsupportedExpansionError: любой множитель со знаменателем, отличным от 1
    """
    numerator = Polynomial()
    for product in equation.products:
        expanded = expand_product(product, eps)
        _require_polynomial(expanded)
        numerator = add_polynomials(numerator, expanded.numerator)
    return Fraction(numerator=simplify_polynomial(numerator, eps))
