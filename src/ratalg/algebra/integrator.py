"""
Integrator — символьное и численное интегрирование

Символьное (power rule): ∫ c·x^n dx = c/(n+1) · x^(n+1)
- показатель -1 → LogarithmicIntegralError (ln|x| не поддерживается)
- дробь с полиномиальным знаменателем → UnsupportedIntegralError
  (подстановка / разложение на простые дроби не поддерживаются)

Определённый интеграл терма: неопределённый интеграл, затем множитель
upper^p - lower^p, где p — новый показатель переменной интегрирования;
переменная удаляется из результата, прочие переменные сохраняются.

Численное (composite Simpson's rule):
    ∫[a,b] f ≈ h/3 · [f(x0) + 4f(x1) + 2f(x2) + 4f(x3) + … + f(xn)],  h = (b-a)/n
- нечётное n увеличивается до чётного
- результат — дробь-константа (без переменных), совместимая с моделью
"""

import logging
from typing import Final, Mapping, Optional

from ratalg.algebra.evaluator import evaluate_fraction
from ratalg.core.domain import (
    DenominatorKind,
    Fraction,
    Polynomial,
    ScalarDenominator,
    Term,
    constant_fraction,
)
from ratalg.core.errors import (
    DivisionByZeroError,
    LogarithmicIntegralError,
    UnsupportedIntegralError,
)
from ratalg.core.math.numerical_safeguards import validate_step_count

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Количество интервалов Simpson's rule по умолчанию
DEFAULT_SIMPSON_STEPS: Final[int] = 1000


# =============================================================================
# INDEFINITE INTEGRATION
# =============================================================================


def integrate_term(term: Term, variable: str) -> Term:
    """
    Неопределённый интеграл терма по power rule.

    Args:
        term: Терм
        variable: Переменная интегрирования

    Returns:
        Новый Term с коэффициентом c/(n+1) и показателем n+1

    Raises:
        LogarithmicIntegralError: если показатель переменной равен -1

    Examples:
        >>> from ratalg.core.domain import make_term
        >>> integrate_term(make_term(3, {"x": 2}), "x")
        Term(coefficient=1.0, exponents={'x': 3})
        >>> integrate_term(make_term(5), "x")
        Term(coefficient=5.0, exponents={'x': 1})
    """
    power = term.exponent_of(variable)
    if power == -1:
        raise LogarithmicIntegralError(variable)

    exponents = dict(term.exponents)
    exponents[variable] = power + 1
    return Term(coefficient=term.coefficient / (power + 1), exponents=exponents)


def integrate_polynomial(polynomial: Polynomial, variable: str) -> Polynomial:
    return Polynomial(terms=[integrate_term(t, variable) for t in polynomial.terms])


def integrate_fraction(fraction: Fraction, variable: str) -> Fraction:
    """
    Неопределённый интеграл дроби со скалярным знаменателем.

    Raises:
        UnsupportedIntegralError: знаменатель — полином
    """
    denominator = fraction.denominator
    if denominator.kind != DenominatorKind.SCALAR:
        raise UnsupportedIntegralError()

    return Fraction(
        numerator=integrate_polynomial(fraction.numerator, variable),
        denominator=ScalarDenominator(value=denominator.value),
    )


# =============================================================================
# DEFINITE INTEGRATION
# =============================================================================


def definite_integrate_term(term: Term, lower: float, upper: float, variable: str) -> Term:
    """
    Определённый интеграл терма на [lower, upper].

    Вычисляется только множитель переменной интегрирования; прочие
    переменные терма сохраняются.

    Examples:
        >>> from ratalg.core.domain import make_term
        >>> definite_integrate_term(make_term(3, {"x": 2}), 0, 2, "x")
        Term(coefficient=8.0, exponents={})
    """
    integrated = integrate_term(term, variable)
    power = integrated.exponent_of(variable)
    try:
        bounds_diff = upper ** power - lower ** power
    except ZeroDivisionError:
        raise DivisionByZeroError(
            f"{variable}^{power} is undefined at an integration bound of 0"
        ) from None

    exponents = {v: p for v, p in integrated.exponents.items() if v != variable}
    return Term(coefficient=integrated.coefficient * bounds_diff, exponents=exponents)


def definite_integrate_polynomial(
    polynomial: Polynomial, lower: float, upper: float, variable: str
) -> Polynomial:
    return Polynomial(
        terms=[definite_integrate_term(t, lower, upper, variable) for t in polynomial.terms]
    )


def definite_integrate_fraction(
    fraction: Fraction,
    lower: float,
    upper: float,
    variable: str,
    steps: int = DEFAULT_SIMPSON_STEPS,
    bindings: Optional[Mapping[str, float]] = None,
) -> Fraction:
    """
    Определённый интеграл дроби.

    - Скалярный знаменатель → почленный символьный определённый интеграл
    - Полиномиальный знаменатель → numerical_integrate_fraction
    """
    denominator = fraction.denominator
    if denominator.kind == DenominatorKind.SCALAR:
        return Fraction(
            numerator=definite_integrate_polynomial(fraction.numerator, lower, upper, variable),
            denominator=ScalarDenominator(value=denominator.value),
        )

    logger.debug(
        "Polynomial denominator: falling back to Simpson's rule on [%s, %s], steps=%d",
        lower,
        upper,
        steps,
    )
    return numerical_integrate_fraction(fraction, lower, upper, variable, steps, bindings)


# =============================================================================
# NUMERICAL INTEGRATION
# =============================================================================


def simpson_weight(i: int, steps: int) -> int:
    """Вес узла i: 1 на концах, 4 для нечётных, 2 для чётных внутренних."""
    if i == 0 or i == steps:
        return 1
    return 4 if i % 2 == 1 else 2


def numerical_integrate_fraction(
    fraction: Fraction,
    lower: float,
    upper: float,
    variable: str,
    steps: int = DEFAULT_SIMPSON_STEPS,
    bindings: Optional[Mapping[str, float]] = None,
) -> Fraction:
    """
    Численный интеграл дроби по composite Simpson's rule.

    Args:
        fraction: Подынтегральная дробь
        lower: Нижний предел
        upper: Верхний предел
        variable: Переменная интегрирования
        steps: Количество интервалов (нечётное увеличивается на 1)
        bindings: Значения прочих переменных, постоянных при интегрировании

    Returns:
        Дробь-константа со значением интеграла

    Raises:
        ValueError: steps < 1
        MissingVariableError: в дроби есть переменная без значения
        DivisionByZeroError: знаменатель обращается в 0 в узле сетки
    """
    validate_step_count(steps)
    if steps % 2 != 0:
        logger.debug("Simpson's rule requires an even step count: %d → %d", steps, steps + 1)
        steps += 1

    h = (upper - lower) / steps
    point = dict(bindings or {})
    total = 0.0

    for i in range(steps + 1):
        point[variable] = lower + i * h
        total += simpson_weight(i, steps) * evaluate_fraction(fraction, point)

    return constant_fraction((h / 3) * total)
