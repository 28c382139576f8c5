"""Algebra — семейства операций над выражениями.

- evaluator: численное вычисление
- arithmetic: арифметика полиномов
- simplifier: объединение подобных термов, сокращение на НОД
- differentiator: power rule, quotient rule, правило произведения
- integrator: power rule, определённый интеграл, Simpson's rule
- expander: раскрытие скобок (FOIL)
- rendering: текстовое представление
"""

from .arithmetic import (
    add_polynomials,
    multiply_polynomials,
    multiply_terms,
    negate_polynomial,
    scale_polynomial,
    subtract_polynomials,
)
from .differentiator import (
    differentiate_equation,
    differentiate_fraction,
    differentiate_polynomial,
    differentiate_product,
    differentiate_term,
    gradient_fraction,
    nth_derivative_fraction,
)
from .evaluator import (
    evaluate,
    evaluate_equation,
    evaluate_fraction,
    evaluate_polynomial,
    evaluate_product,
    evaluate_term,
)
from .expander import expand_equation, expand_fractions, expand_product
from .integrator import (
    DEFAULT_SIMPSON_STEPS,
    definite_integrate_fraction,
    definite_integrate_polynomial,
    definite_integrate_term,
    integrate_fraction,
    integrate_polynomial,
    integrate_term,
    numerical_integrate_fraction,
)
from .rendering import (
    equation_to_string,
    fraction_to_string,
    polynomial_to_string,
    product_to_string,
    term_to_string,
    to_string,
)
from .simplifier import (
    simplify_equation,
    simplify_fraction,
    simplify_polynomial,
    simplify_product,
)

__all__ = [
    # Evaluator
    "evaluate",
    "evaluate_term",
    "evaluate_polynomial",
    "evaluate_fraction",
    "evaluate_product",
    "evaluate_equation",
    # Arithmetic
    "multiply_terms",
    "negate_polynomial",
    "add_polynomials",
    "subtract_polynomials",
    "multiply_polynomials",
    "scale_polynomial",
    # Simplifier
    "simplify_polynomial",
    "simplify_fraction",
    "simplify_product",
    "simplify_equation",
    # Differentiator
    "differentiate_term",
    "differentiate_polynomial",
    "differentiate_fraction",
    "differentiate_product",
    "differentiate_equation",
    "nth_derivative_fraction",
    "gradient_fraction",
    # Integrator
    "DEFAULT_SIMPSON_STEPS",
    "integrate_term",
    "integrate_polynomial",
    "integrate_fraction",
    "definite_integrate_term",
    "definite_integrate_polynomial",
    "definite_integrate_fraction",
    "numerical_integrate_fraction",
    # Expander
    "expand_fractions",
    "expand_product",
    "expand_equation",
    # Rendering
    "term_to_string",
    "polynomial_to_string",
    "fraction_to_string",
    "product_to_string",
    "equation_to_string",
    "to_string",
]
