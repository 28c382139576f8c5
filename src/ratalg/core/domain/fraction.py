"""
Fraction — Модель рациональной функции

Дробь: numerator / denominator, где знаменатель — явный tagged union:
- ScalarDenominator(value)           — число
- PolynomialDenominator(polynomial)  — полином

Каждый алгоритм, обрабатывающий Fraction, ветвится по denominator.kind,
а не по типу объекта.

Дроби не обязаны быть несократимыми: упрощение — явная операция.
"""

from enum import Enum
from numbers import Real
from typing import Annotated, Literal, Sequence, Union

from pydantic import BaseModel, Field, field_validator

from .polynomial import Polynomial
from .term import Term, make_term


# =============================================================================
# ENUMS
# =============================================================================


class DenominatorKind(str, Enum):
    """Тег варианта знаменателя."""

    SCALAR = "scalar"
    POLYNOMIAL = "polynomial"


# =============================================================================
# DENOMINATOR VARIANTS
# =============================================================================


class ScalarDenominator(BaseModel):
    """Числовой знаменатель."""

    kind: Literal["scalar"] = DenominatorKind.SCALAR.value
    value: float = Field(1.0, allow_inf_nan=False, description="Значение знаменателя")

    model_config = {"frozen": True}


class PolynomialDenominator(BaseModel):
    """Полиномиальный знаменатель."""

    kind: Literal["polynomial"] = DenominatorKind.POLYNOMIAL.value
    polynomial: Polynomial = Field(..., description="Полином знаменателя")

    model_config = {"frozen": True}

    @field_validator("polynomial", mode="before")
    @classmethod
    def copy_polynomial(cls, v):
        if isinstance(v, Polynomial):
            return v.model_copy(deep=True)
        return v


Denominator = Annotated[
    Union[ScalarDenominator, PolynomialDenominator],
    Field(discriminator="kind"),
]


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Модель дроби numerator / denominator.

    Immutable модель (frozen=True). Поддеревья числителя и знаменателя
    не разделяются с входными данными.
    """

    numerator: Polynomial = Field(default_factory=Polynomial, description="Числитель")
    denominator: Denominator = Field(
        default_factory=ScalarDenominator, description="Знаменатель (scalar | polynomial)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("numerator", mode="before")
    @classmethod
    def copy_numerator(cls, v):
        if isinstance(v, Polynomial):
            return v.model_copy(deep=True)
        return v

    @property
    def has_scalar_denominator(self) -> bool:
        return self.denominator.kind == DenominatorKind.SCALAR

    @property
    def is_polynomial(self) -> bool:
        """Знаменатель — скаляр 1 (дробь является полиномом)."""
        return self.has_scalar_denominator and self.denominator.value == 1


# =============================================================================
# CONSTRUCTION API
# =============================================================================


def _as_polynomial(value: Union[Polynomial, Sequence[Term]]) -> Polynomial:
    if isinstance(value, Polynomial):
        return Polynomial(terms=value.terms)
    return Polynomial(terms=list(value))


def make_denominator(
    denominator: Union[Real, Sequence[Term], Polynomial, ScalarDenominator, PolynomialDenominator],
) -> Union[ScalarDenominator, PolynomialDenominator]:
    """
    Создание варианта знаменателя.

    Тег фиксируется при создании: число → ScalarDenominator,
    последовательность термов или Polynomial → PolynomialDenominator.

    Raises:
        TypeError: Если тип знаменателя не поддерживается
    """
    if isinstance(denominator, (ScalarDenominator, PolynomialDenominator)):
        return denominator.model_copy(deep=True)
    if isinstance(denominator, bool):
        raise TypeError("Boolean is not a valid denominator")
    if isinstance(denominator, Real):
        return ScalarDenominator(value=float(denominator))
    if isinstance(denominator, (Polynomial, list, tuple)):
        return PolynomialDenominator(polynomial=_as_polynomial(denominator))
    raise TypeError(f"Unsupported denominator type: {type(denominator).__name__}")


def make_fraction(
    numerator_terms: Union[Sequence[Term], Polynomial],
    denominator: Union[Real, Sequence[Term], Polynomial, ScalarDenominator, PolynomialDenominator] = 1,
) -> Fraction:
    """
    Создание дроби.

    Args:
        numerator_terms: Термы числителя (последовательность Term или Polynomial)
        denominator: Число, последовательность термов или Polynomial

    Returns:
        Новая Fraction; все входные данные скопированы

    Examples:
        >>> x = make_term(1, {"x": 1})
        >>> make_fraction([x], [x, make_term(1)]).has_scalar_denominator
        False
        >>> make_fraction([x], 3).denominator.value
        3.0
    """
    return Fraction(
        numerator=_as_polynomial(numerator_terms),
        denominator=make_denominator(denominator),
    )


def constant_fraction(value: float) -> Fraction:
    """Дробь-константа value/1 (без переменных)."""
    return Fraction(numerator=Polynomial(terms=[make_term(value)]))
