"""
Тесты для Expander

Проверяет:
1. FOIL с объединением подобных термов
2. Свёртку произведения (пустое → 1, один множитель → без изменений)
3. Полное раскрытие Equation
4. UnsupportedExpansionError для знаменателя, отличного от 1
"""

import pytest

from ratalg.algebra.expander import expand_equation, expand_fractions, expand_product
from ratalg.core.domain import Equation, Product, make_fraction, make_term
from ratalg.core.errors import AlgebraErrorKind, UnsupportedExpansionError


@pytest.fixture
def x_plus_one():
    return make_fraction([make_term(1, {"x": 1}), make_term(1)])


@pytest.fixture
def x_minus_one():
    return make_fraction([make_term(1, {"x": 1}), make_term(-1)])


def coefficients(fraction) -> list[float]:
    return [t.coefficient for t in fraction.numerator.terms]


class TestExpandFractions:
    """Тесты для expand_fractions"""

    def test_difference_of_squares(self, x_plus_one, x_minus_one) -> None:
        """(x+1)(x-1) = x² - 1"""
        result = expand_fractions(x_plus_one, x_minus_one)
        assert coefficients(result) == [1.0, -1.0]
        assert [t.exponents for t in result.numerator.terms] == [{"x": 2}, {}]
        assert result.is_polynomial

    def test_multivariable(self) -> None:
        """(x + y)(x - y) = x² - y²"""
        result = expand_fractions(
            make_fraction([make_term(1, {"x": 1}), make_term(1, {"y": 1})]),
            make_fraction([make_term(1, {"x": 1}), make_term(-1, {"y": 1})]),
        )
        assert len(result.numerator) == 2
        assert {(t.coefficient, tuple(t.exponents.items())) for t in result.numerator.terms} == {
            (1.0, (("x", 2),)),
            (-1.0, (("y", 2),)),
        }

    def test_scalar_denominator_rejected(self, x_plus_one) -> None:
        """Знаменатель 2 → UnsupportedExpansionError"""
        with pytest.raises(UnsupportedExpansionError) as exc_info:
            expand_fractions(x_plus_one, make_fraction([make_term(1)], 2))
        assert exc_info.value.kind == AlgebraErrorKind.UNSUPPORTED_EXPANSION

    def test_polynomial_denominator_rejected(self, x_plus_one) -> None:
        """Полиномиальный знаменатель → UnsupportedExpansionError"""
        f = make_fraction([make_term(1)], [make_term(1, {"x": 1})])
        with pytest.raises(UnsupportedExpansionError):
            expand_fractions(f, x_plus_one)


class TestExpandProduct:
    """Тесты для expand_product и expand_equation"""

    def test_empty_product_is_one(self) -> None:
        """Пустое произведение → константа 1"""
        result = expand_product(Product())
        assert coefficients(result) == [1.0]
        assert result.numerator.terms[0].is_constant

    def test_single_factor_unchanged(self, x_plus_one) -> None:
        """Один множитель возвращается без изменений"""
        assert expand_product(Product(factors=[x_plus_one])) == x_plus_one

    def test_cube(self, x_plus_one) -> None:
        """(x+1)³ = x³ + 3x² + 3x + 1"""
        result = expand_product(Product(factors=[x_plus_one, x_plus_one, x_plus_one]))
        assert coefficients(result) == [1.0, 3.0, 3.0, 1.0]
        assert [t.degree for t in result.numerator.terms] == [3, 2, 1, 0]

    def test_equation(self, x_plus_one, x_minus_one) -> None:
        """(x+1)(x-1) + 2x = x² + 2x - 1"""
        eq = Equation(
            products=[
                Product(factors=[x_plus_one, x_minus_one]),
                Product(factors=[make_fraction([make_term(2, {"x": 1})])]),
            ]
        )
        result = expand_equation(eq)
        assert coefficients(result) == [1.0, 2.0, -1.0]

    def test_equation_cancellation(self, x_plus_one) -> None:
        """(x+1) + (-x - 1) = 0"""
        eq = Equation(
            products=[
                Product(factors=[x_plus_one]),
                Product(factors=[make_fraction([make_term(-1, {"x": 1}), make_term(-1)])]),
            ]
        )
        assert expand_equation(eq).numerator.is_zero

    def test_empty_equation_is_zero(self) -> None:
        """Пустое Equation → дробь с пустым числителем"""
        result = expand_equation(Equation())
        assert result.numerator.is_zero
        assert result.is_polynomial

    def test_equation_with_non_unit_denominator(self) -> None:
        """Одиночный множитель со знаменателем 2 → UnsupportedExpansionError"""
        eq = Equation(products=[Product(factors=[make_fraction([make_term(1)], 2)])])
        with pytest.raises(UnsupportedExpansionError):
            expand_equation(eq)
