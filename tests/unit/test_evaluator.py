"""
Тесты для Evaluator

Проверяет:
1. Вычисление термов, полиномов, дробей, произведений, Equation
2. Пустые агрегаты (0 для сумм, 1 для произведений)
3. MissingVariableError без неявной подстановки нуля
4. DivisionByZeroError для нулевого знаменателя
"""

import pytest

from ratalg.algebra.evaluator import (
    evaluate,
    evaluate_equation,
    evaluate_fraction,
    evaluate_polynomial,
    evaluate_product,
    evaluate_term,
)
from ratalg.core.domain import (
    Equation,
    Polynomial,
    Product,
    make_fraction,
    make_term,
)
from ratalg.core.errors import AlgebraErrorKind, DivisionByZeroError, MissingVariableError


class TestEvaluateTerm:
    """Тесты для evaluate_term"""

    def test_multivariable_term(self) -> None:
        """3·x²·y³ при x=2, y=3 → 324"""
        assert evaluate_term(make_term(3, {"x": 2, "y": 3}), {"x": 2, "y": 3}) == 3 * 4 * 27

    def test_constant_term_ignores_bindings(self) -> None:
        """Константа не требует переменных"""
        assert evaluate_term(make_term(-2.5), {}) == -2.5

    def test_extra_bindings_ignored(self) -> None:
        """Лишние переменные в bindings допустимы"""
        assert evaluate_term(make_term(2, {"x": 1}), {"x": 3, "z": 100}) == 6

    def test_missing_variable(self) -> None:
        """Отсутствующая переменная → MissingVariableError"""
        with pytest.raises(MissingVariableError) as exc_info:
            evaluate_term(make_term(1, {"x": 1, "y": 1}), {"x": 1.0})
        assert exc_info.value.variable == "y"
        assert exc_info.value.kind == AlgebraErrorKind.MISSING_VARIABLE

    def test_missing_variable_is_not_zero(self) -> None:
        """Отсутствующая переменная не подставляется нулём"""
        with pytest.raises(MissingVariableError):
            evaluate_term(make_term(0, {"x": 1}), {})

    def test_negative_exponent_at_zero(self) -> None:
        """x^-1 при x=0 → DivisionByZeroError"""
        with pytest.raises(DivisionByZeroError):
            evaluate_term(make_term(1, {"x": -1}), {"x": 0.0})


class TestEvaluateAggregates:
    """Тесты для полиномов, дробей, произведений и Equation"""

    def test_polynomial(self) -> None:
        """x² - 3x + 2 при x=5 → 12"""
        p = Polynomial(terms=[make_term(1, {"x": 2}), make_term(-3, {"x": 1}), make_term(2)])
        assert evaluate_polynomial(p, {"x": 5}) == 12

    def test_empty_polynomial_is_zero(self) -> None:
        """Пустой полином → 0"""
        assert evaluate_polynomial(Polynomial(), {}) == 0.0

    def test_fraction_scalar_denominator(self) -> None:
        """(6x)/4 при x=2 → 3"""
        f = make_fraction([make_term(6, {"x": 1})], 4)
        assert evaluate_fraction(f, {"x": 2}) == 3.0

    def test_fraction_polynomial_denominator(self) -> None:
        """x/(x+1) при x=1 → 0.5"""
        f = make_fraction([make_term(1, {"x": 1})], [make_term(1, {"x": 1}), make_term(1)])
        assert evaluate_fraction(f, {"x": 1}) == pytest.approx(0.5)

    def test_division_by_zero_polynomial_denominator(self) -> None:
        """x/(x-2) при x=2 → DivisionByZeroError"""
        f = make_fraction([make_term(1, {"x": 1})], [make_term(1, {"x": 1}), make_term(-2)])
        with pytest.raises(DivisionByZeroError) as exc_info:
            evaluate_fraction(f, {"x": 2})
        assert exc_info.value.kind == AlgebraErrorKind.DIVISION_BY_ZERO

    def test_division_by_zero_scalar_denominator(self) -> None:
        """Скалярный знаменатель 0 → DivisionByZeroError"""
        f = make_fraction([make_term(1)], 0)
        with pytest.raises(DivisionByZeroError):
            evaluate_fraction(f, {})

    def test_empty_product_is_one(self) -> None:
        """Пустой Product → 1"""
        assert evaluate_product(Product(), {}) == 1.0

    def test_empty_equation_is_zero(self) -> None:
        """Пустое Equation → 0"""
        assert evaluate_equation(Equation(), {}) == 0.0

    def test_equation(self) -> None:
        """(x)·(y) + (2)/4 при x=2, y=3 → 6.5"""
        eq = Equation(
            products=[
                Product(
                    factors=[
                        make_fraction([make_term(1, {"x": 1})]),
                        make_fraction([make_term(1, {"y": 1})]),
                    ]
                ),
                Product(factors=[make_fraction([make_term(2)], 4)]),
            ]
        )
        assert evaluate_equation(eq, {"x": 2, "y": 3}) == pytest.approx(6.5)

    def test_evaluate_dispatch(self) -> None:
        """evaluate выбирает функцию по типу сущности"""
        term = make_term(2, {"x": 1})
        assert evaluate(term, {"x": 4}) == 8
        assert evaluate(Polynomial(terms=[term]), {"x": 4}) == 8
        assert evaluate(make_fraction([term], 2), {"x": 4}) == 4

    def test_evaluate_unknown_entity(self) -> None:
        """Неизвестная сущность → TypeError"""
        with pytest.raises(TypeError):
            evaluate("x + 1", {"x": 1})  # type: ignore
