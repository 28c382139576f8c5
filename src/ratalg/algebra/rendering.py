"""Rendering — текстовое представление выражений.

Формат:
- терм:      coefficient[*var[^exp]]...   (показатель 1 не пишется)
- полином:   термы через " + "; отрицательный коэффициент несёт свой знак
- дробь:     (num) | (num)/k | (num)/(den)
- Product:   дроби через " * "
- Equation:  произведения через " + "

Пустой полином → "0", пустой Product → "1", пустое Equation → "0".
"""

from ratalg.core.domain import DenominatorKind, Equation, Fraction, Polynomial, Product, Term


def format_number(value: float) -> str:
    """Целые значения без ".0": 2.0 → "2", 0.5 → "0.5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def term_to_string(term: Term) -> str:
    parts = [format_number(term.coefficient)]
    for variable, power in term.exponents.items():
        parts.append(variable if power == 1 else f"{variable}^{power}")
    return "*".join(parts)


def polynomial_to_string(polynomial: Polynomial) -> str:
    if not polynomial.terms:
        return "0"
    return " + ".join(term_to_string(t) for t in polynomial.terms)


def fraction_to_string(fraction: Fraction) -> str:
    numerator = polynomial_to_string(fraction.numerator)
    denominator = fraction.denominator

    if denominator.kind == DenominatorKind.SCALAR:
        if denominator.value == 1:
            return f"({numerator})"
        return f"({numerator})/{format_number(denominator.value)}"

    return f"({numerator})/({polynomial_to_string(denominator.polynomial)})"


def product_to_string(product: Product) -> str:
    if not product.factors:
        return "1"
    return " * ".join(fraction_to_string(f) for f in product.factors)


def equation_to_string(equation: Equation) -> str:
    if not equation.products:
        return "0"
    return " + ".join(product_to_string(p) for p in equation.products)


def to_string(entity) -> str:
    """Представление любой сущности модели выражений."""
    if isinstance(entity, Term):
        return term_to_string(entity)
    if isinstance(entity, Polynomial):
        return polynomial_to_string(entity)
    if isinstance(entity, Fraction):
        return fraction_to_string(entity)
    if isinstance(entity, Product):
        return product_to_string(entity)
    if isinstance(entity, Equation):
        return equation_to_string(entity)
    raise TypeError(f"Cannot render {type(entity).__name__}")
