"""
Simplifier — объединение подобных термов и сокращение дробей

Алгоритм simplify_polynomial:
1. Группировка термов по сигнатуре переменных (exponents как канонический
   ключ; пустой exponents → ключ константы)
2. Суммирование коэффициентов внутри группы
3. Отбрасывание групп с |coeff| < eps
4. Сортировка по убыванию полной степени; при равенстве — порядок вставки

simplify_fraction для скалярного знаменателя дополнительно выполняет
целочисленное сокращение на g = gcd(gcd(коэффициенты числителя), знаменатель).
Сокращение общих полиномиальных множителей числителя и знаменателя
не выполняется: (x²-1)/(x-1) остаётся как есть.
"""

import logging

from ratalg.core.domain import (
    DenominatorKind,
    Equation,
    Fraction,
    Polynomial,
    PolynomialDenominator,
    Product,
    ScalarDenominator,
    Term,
)
from ratalg.core.math.numerical_safeguards import (
    EPS_COEFF_ZERO,
    gcd,
    gcd_many,
    is_integral,
    is_zero,
    validate_positive,
)

logger = logging.getLogger(__name__)

SignatureKey = tuple[tuple[str, int], ...]

# Ключ константы (пустая сигнатура)
CONSTANT_SIGNATURE: SignatureKey = ()


def signature(term: Term) -> SignatureKey:
    """Канонический ключ набора показателей терма."""
    return tuple(sorted(term.exponents.items()))


def simplify_polynomial(p: Polynomial, eps: float = EPS_COEFF_ZERO) -> Polynomial:
    """
    Объединение подобных термов.

    Идемпотентна: simplify_polynomial(simplify_polynomial(p)) == simplify_polynomial(p).

    Args:
        p: Полином
        eps: Порог отбрасывания коэффициента

    Returns:
        Новый упрощённый полином
    """
    validate_positive(eps, "eps")

    groups: dict[SignatureKey, list] = {}
    for term in p.terms:
        key = signature(term)
        if key in groups:
            groups[key][0] += term.coefficient
        else:
            groups[key] = [term.coefficient, term.exponents]

    merged = [
        Term(coefficient=coefficient, exponents=exponents)
        for coefficient, exponents in groups.values()
        if not is_zero(coefficient, eps)
    ]
    merged.sort(key=lambda t: -t.degree)
    return Polynomial(terms=merged)


def _reduce_scalar_fraction(numerator: Polynomial, denominator: float) -> Fraction:
    coefficients = [t.coefficient for t in numerator.terms]
    if coefficients and is_integral(denominator) and all(is_integral(c) for c in coefficients):
        g = gcd(gcd_many(coefficients), denominator)
        if g > 1:
            logger.debug("GCD reduction by %s: denominator %s → %s", g, denominator, denominator / g)
            return Fraction(
                numerator=Polynomial(
                    terms=[t.with_coefficient(t.coefficient / g) for t in numerator.terms]
                ),
                denominator=ScalarDenominator(value=denominator / g),
            )
    return Fraction(numerator=numerator, denominator=ScalarDenominator(value=denominator))


def simplify_fraction(fraction: Fraction, eps: float = EPS_COEFF_ZERO) -> Fraction:
    """
    Упрощение дроби.

    - Скалярный знаменатель: упрощение числителя + сокращение на целочисленный НОД
    - Полиномиальный знаменатель: упрощение числителя и знаменателя по отдельности

    Examples:
        >>> from ratalg.core.domain import make_fraction, make_term
        >>> f = make_fraction([make_term(6, {"x": 2}), make_term(9, {"x": 1})], 3)
        >>> simplify_fraction(f).denominator.value
        1.0
    """
    numerator = simplify_polynomial(fraction.numerator, eps)
    denominator = fraction.denominator

    if denominator.kind == DenominatorKind.SCALAR:
        return _reduce_scalar_fraction(numerator, denominator.value)

    return Fraction(
        numerator=numerator,
        denominator=PolynomialDenominator(
            polynomial=simplify_polynomial(denominator.polynomial, eps)
        ),
    )


def simplify_product(product: Product, eps: float = EPS_COEFF_ZERO) -> Product:
    return Product(factors=[simplify_fraction(f, eps) for f in product.factors])


def simplify_equation(equation: Equation, eps: float = EPS_COEFF_ZERO) -> Equation:
    return Equation(products=[simplify_product(p, eps) for p in equation.products])
