"""Evaluator — численное вычисление выражений.

Контекст bindings: mapping variable → real. Отсутствие нужной переменной —
единственный источник MissingVariableError; переменная никогда не
подставляется нулём неявно.

Пустые агрегаты:
- пустой полином / Equation → 0
- пустой Product → 1
"""

from typing import Mapping

from ratalg.core.domain import DenominatorKind, Equation, Fraction, Polynomial, Product, Term
from ratalg.core.errors import DivisionByZeroError, MissingVariableError

Bindings = Mapping[str, float]


def evaluate_term(term: Term, bindings: Bindings) -> float:
    """Вычисление терма: coefficient * Π bindings[v]^exponent.

    Raises:
        MissingVariableError: переменной терма нет в bindings
        DivisionByZeroError: отрицательный показатель при значении 0
    """
    result = term.coefficient
    for variable, power in term.exponents.items():
        if variable not in bindings:
            raise MissingVariableError(variable)
        try:
            result *= bindings[variable] ** power
        except ZeroDivisionError:
            raise DivisionByZeroError(
                f"{variable}^{power} is undefined at {variable}=0"
            ) from None
    return result


def evaluate_polynomial(polynomial: Polynomial, bindings: Bindings) -> float:
    return sum((evaluate_term(term, bindings) for term in polynomial.terms), 0.0)


def evaluate_denominator(fraction: Fraction, bindings: Bindings) -> float:
    """Значение знаменателя: литерал скаляра либо значение полинома."""
    denominator = fraction.denominator
    if denominator.kind == DenominatorKind.SCALAR:
        return denominator.value
    return evaluate_polynomial(denominator.polynomial, bindings)


def evaluate_fraction(fraction: Fraction, bindings: Bindings) -> float:
    """Вычисление дроби.

    Raises:
        DivisionByZeroError: знаменатель в точке равен ровно 0
    """
    numerator = evaluate_polynomial(fraction.numerator, bindings)
    denominator = evaluate_denominator(fraction, bindings)
    if denominator == 0:
        raise DivisionByZeroError(f"Denominator evaluated to zero at {dict(bindings)}")
    return numerator / denominator


def evaluate_product(product: Product, bindings: Bindings) -> float:
    result = 1.0
    for fraction in product.factors:
        result *= evaluate_fraction(fraction, bindings)
    return result


def evaluate_equation(equation: Equation, bindings: Bindings) -> float:
    return sum((evaluate_product(product, bindings) for product in equation.products), 0.0)


def evaluate(entity, bindings: Bindings) -> float:
    """Вычисление любой сущности модели выражений.

    Raises:
        TypeError: entity не является сущностью модели
    """
    if isinstance(entity, Term):
        return evaluate_term(entity, bindings)
    if isinstance(entity, Polynomial):
        return evaluate_polynomial(entity, bindings)
    if isinstance(entity, Fraction):
        return evaluate_fraction(entity, bindings)
    if isinstance(entity, Product):
        return evaluate_product(entity, bindings)
    if isinstance(entity, Equation):
        return evaluate_equation(entity, bindings)
    raise TypeError(f"Cannot evaluate {type(entity).__name__}")
