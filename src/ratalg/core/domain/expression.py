"""
Product, Equation — составные выражения

- Product: упорядоченная последовательность дробей, перемножаемых между собой.
  Пустой Product — мультипликативная единица (1).
- Equation: упорядоченная последовательность Product, складываемых между собой.
  Пустое Equation — аддитивный ноль (0). Выражение верхнего уровня.

Модель — чистое дерево без разделяемых поддеревьев.
"""

from pydantic import BaseModel, Field, field_validator

from .fraction import Fraction
from .polynomial import Polynomial


# =============================================================================
# PRODUCT
# =============================================================================


class Product(BaseModel):
    """Произведение дробей."""

    factors: list[Fraction] = Field(default_factory=list, description="Множители")

    model_config = {"frozen": True}  # Immutable

    @field_validator("factors", mode="before")
    @classmethod
    def copy_factors(cls, v):
        if isinstance(v, (list, tuple)):
            return [f.model_copy(deep=True) if isinstance(f, Fraction) else f for f in v]
        return v

    def __len__(self) -> int:
        return len(self.factors)


# =============================================================================
# EQUATION
# =============================================================================


class Equation(BaseModel):
    """Сумма произведений — выражение верхнего уровня."""

    products: list[Product] = Field(default_factory=list, description="Слагаемые")

    model_config = {"frozen": True}  # Immutable

    @field_validator("products", mode="before")
    @classmethod
    def copy_products(cls, v):
        if isinstance(v, (list, tuple)):
            return [p.model_copy(deep=True) if isinstance(p, Product) else p for p in v]
        return v

    def __len__(self) -> int:
        return len(self.products)


def equation_from_polynomial(polynomial: Polynomial) -> Equation:
    """
    Представление полинома p(x) как Equation.

    Каждый терм становится отдельным Product из одной дроби со знаменателем 1.
    """
    return Equation(
        products=[
            Product(factors=[Fraction(numerator=Polynomial(terms=[term]))])
            for term in polynomial.terms
        ]
    )
