"""
Term — Модель одночлена

Одночлен: coefficient * Π variable^exponent.

Immutable Pydantic модель. Нормализация при создании:
- переменная с показателем 0 удаляется из exponents
- пустой exponents означает константу
- exponents всегда копируется, изменение исходного dict вызывающего кода
  не влияет на построенный Term
"""

from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# TERM MODEL
# =============================================================================


class Term(BaseModel):
    """
    Модель одночлена.

    Immutable модель (frozen=True). Любая операция, "изменяющая" терм,
    создаёт новый экземпляр.

    Показатели — целые числа. В модели рациональных функций они
    неотрицательны; отрицательные показатели допускаются как мономы Лорана,
    чтобы интегрирование x^-1 явно сообщало LogarithmicIntegralError.
    """

    coefficient: float = Field(..., allow_inf_nan=False, description="Коэффициент")
    exponents: dict[str, int] = Field(
        default_factory=dict, description="Показатели: variable → exponent"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("exponents")
    @classmethod
    def normalize_exponents(cls, v: dict[str, int]) -> dict[str, int]:
        """Удаление нулевых показателей и проверка имён переменных."""
        for name in v:
            if not name:
                raise ValueError("variable name must be non-empty")
        return {name: power for name, power in v.items() if power != 0}

    @property
    def is_constant(self) -> bool:
        """Терм не зависит ни от одной переменной."""
        return not self.exponents

    @property
    def degree(self) -> int:
        """Полная степень (сумма показателей)."""
        return sum(self.exponents.values())

    def exponent_of(self, variable: str) -> int:
        """Показатель переменной (0 если переменная отсутствует)."""
        return self.exponents.get(variable, 0)

    def with_coefficient(self, coefficient: float) -> "Term":
        """Новый терм с тем же набором показателей."""
        return Term(coefficient=coefficient, exponents=dict(self.exponents))


# =============================================================================
# CONSTRUCTION API
# =============================================================================


def make_term(coefficient: float, exponents: Optional[Mapping[str, int]] = None) -> Term:
    """
    Создание терма.

    Args:
        coefficient: Коэффициент
        exponents: Показатели переменных, например {"x": 2, "y": 1}

    Returns:
        Новый Term (exponents скопирован)

    Examples:
        >>> make_term(3, {"x": 2})
        Term(coefficient=3.0, exponents={'x': 2})
        >>> make_term(5).is_constant
        True
    """
    return Term(coefficient=coefficient, exponents=dict(exponents or {}))
