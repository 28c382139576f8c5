"""
Polynomial — Модель полинома

Полином: сумма термов в порядке вставки. Порядок по убыванию степени —
задача отображения/упрощения, а не структурный инвариант.
Пустая последовательность термов — полином 0.
"""

from typing import Iterator

from pydantic import BaseModel, Field, field_validator

from .term import Term


class Polynomial(BaseModel):
    """
    Модель полинома.

    Immutable модель (frozen=True). Термы копируются при создании:
    изменение исходного списка (или термов в нём) вызывающим кодом
    не влияет на построенный полином.
    """

    terms: list[Term] = Field(default_factory=list, description="Термы полинома")

    model_config = {"frozen": True}  # Immutable

    @field_validator("terms", mode="before")
    @classmethod
    def copy_terms(cls, v):
        """Deep-copy термов, переданных вызывающим кодом."""
        if isinstance(v, (list, tuple)):
            return [t.model_copy(deep=True) if isinstance(t, Term) else t for t in v]
        return v

    def __len__(self) -> int:
        return len(self.terms)

    def iter_terms(self) -> Iterator[Term]:
        return iter(self.terms)

    @property
    def is_zero(self) -> bool:
        """Пустой полином."""
        return not self.terms

    @property
    def variables(self) -> set[str]:
        """Все переменные, встречающиеся в полиноме."""
        names: set[str] = set()
        for term in self.terms:
            names.update(term.exponents)
        return names
