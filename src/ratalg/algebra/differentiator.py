"""Differentiator — символьное дифференцирование.

- Терм/полином: power rule d/dx(c·x^n) = c·n·x^(n-1)
- Дробь: state machine по тегу знаменателя
    SCALAR(k)      → дифференцируется числитель, знаменатель k без изменений
    POLYNOMIAL(g)  → quotient rule (f'g - fg') / g²
- Product: обобщённое правило произведения, результат — Equation
- Equation: правило суммы
"""

from typing import Iterable

from ratalg.algebra.arithmetic import multiply_polynomials, subtract_polynomials
from ratalg.algebra.expander import expand_product
from ratalg.algebra.simplifier import simplify_polynomial
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
from ratalg.core.math.numerical_safeguards import EPS_COEFF_ZERO


# =============================================================================
# TERM / POLYNOMIAL
# =============================================================================


def differentiate_term(term: Term, variable: str) -> Term:
    """Power rule для одного терма.

    Если переменная отсутствует, терм константен по ней → нулевой терм.

    Examples:
        >>> from ratalg.core.domain import make_term
        >>> differentiate_term(make_term(3, {"x": 2, "y": 1}), "x")
        Term(coefficient=6.0, exponents={'x': 1, 'y': 1})
    """
    power = term.exponents.get(variable)
    if power is None:
        return Term(coefficient=0.0)

    exponents = dict(term.exponents)
    # exponent 0 удаляется нормализацией Term
    exponents[variable] = power - 1
    return Term(coefficient=term.coefficient * power, exponents=exponents)


def differentiate_polynomial(polynomial: Polynomial, variable: str) -> Polynomial:
    """Почленное дифференцирование с отбрасыванием нулевых термов.

    Подобные термы не объединяются.
    """
    derived = (differentiate_term(term, variable) for term in polynomial.terms)
    return Polynomial(terms=[term for term in derived if term.coefficient != 0])


# =============================================================================
# FRACTION
# =============================================================================


def differentiate_fraction(
    fraction: Fraction,
    variable: str,
    eps: float = EPS_COEFF_ZERO,
) -> Fraction:
    """Производная дроби.

    Для полиномиального знаменателя обе производные f' и g' вычисляются
    до любых умножений. Числитель результата упрощается, знаменатель g·g
    остаётся в развёрнутом, но не упрощённом виде.

    Args:
        fraction: Дробь f/g
        variable: Переменная дифференцирования
        eps: Порог упрощения числителя

    Returns:
        Новая Fraction
    """
    denominator = fraction.denominator

    if denominator.kind == DenominatorKind.SCALAR:
        return Fraction(
            numerator=differentiate_polynomial(fraction.numerator, variable),
            denominator=ScalarDenominator(value=denominator.value),
        )

    f = fraction.numerator
    g = denominator.polynomial
    f_prime = differentiate_polynomial(f, variable)
    g_prime = differentiate_polynomial(g, variable)

    numerator = simplify_polynomial(
        subtract_polynomials(
            multiply_polynomials(f_prime, g),
            multiply_polynomials(f, g_prime),
        ),
        eps,
    )
    return Fraction(
        numerator=numerator,
        denominator=PolynomialDenominator(polynomial=multiply_polynomials(g, g)),
    )


def nth_derivative_fraction(
    fraction: Fraction,
    variable: str,
    order: int,
    eps: float = EPS_COEFF_ZERO,
) -> Fraction:
    """Производная порядка order (повторное применение quotient rule).

    order=0 возвращает исходную дробь.

    Raises:
        ValueError: order < 0
    """
    if order < 0:
        raise ValueError(f"order must be non-negative, got {order}")

    result = fraction
    for _ in range(order):
        result = differentiate_fraction(result, variable, eps)
    return result


def gradient_fraction(
    fraction: Fraction,
    variables: Iterable[str],
    eps: float = EPS_COEFF_ZERO,
) -> dict[str, Fraction]:
    """Частные производные дроби по каждой переменной."""
    return {v: differentiate_fraction(fraction, v, eps) for v in variables}


# =============================================================================
# PRODUCT / EQUATION
# =============================================================================


def differentiate_product(
    product: Product,
    variable: str,
    eps: float = EPS_COEFF_ZERO,
) -> Equation:
    """Обобщённое правило произведения.

    (f1·f2·…·fk)' = Σ_i f_i' · Π_{j≠i} f_j

    Слагаемое, все множители которого имеют знаменатель 1, сворачивается
    в одну дробь через expand_product. Остальные слагаемые остаются
    произведениями [f_i', прочие множители...].

    - 0 множителей → пустое Equation (0)
    - 1 множитель  → Equation из одной производной differentiate_fraction
    """
    factors = product.factors
    if not factors:
        return Equation()
    if len(factors) == 1:
        return Equation(products=[Product(factors=[differentiate_fraction(factors[0], variable, eps)])])

    summands = []
    for i, factor in enumerate(factors):
        others = [*factors[:i], *factors[i + 1:]]
        summand = Product(factors=[differentiate_fraction(factor, variable, eps), *others])
        if all(f.is_polynomial for f in summand.factors):
            summand = Product(factors=[expand_product(summand, eps)])
        summands.append(summand)
    return Equation(products=summands)


def differentiate_equation(
    equation: Equation,
    variable: str,
    eps: float = EPS_COEFF_ZERO,
) -> Equation:
    """Правило суммы: производные слагаемых объединяются в одно Equation."""
    products: list[Product] = []
    for product in equation.products:
        products.extend(differentiate_product(product, variable, eps).products)
    return Equation(products=products)
