"""RationalEngine — фасад алгебраического движка.

Связывает семейства операций с явной конфигурацией:
- zero_eps: порог отбрасывания коэффициентов в Simplifier
- simpson_steps: количество интервалов Simpson's rule по умолчанию

Движок не хранит изменяемого состояния между вызовами: каждый вызов
строит новое дерево выражения и не изменяет входные данные.
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

from ratalg.algebra import differentiator, evaluator, expander, integrator, simplifier
from ratalg.algebra.rendering import to_string
from ratalg.core.domain import Equation, Fraction, Polynomial, Product, Term
from ratalg.core.errors import Outcome, attempt
from ratalg.core.math.numerical_safeguards import (
    EPS_COEFF_ZERO,
    validate_positive,
    validate_step_count,
)

logger = logging.getLogger(__name__)

Expression = Union[Term, Polynomial, Fraction, Product, Equation]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация движка.

    Переменные окружения (from_env):
    - RATALG_ZERO_EPS
    - RATALG_SIMPSON_STEPS
    """

    zero_eps: float = EPS_COEFF_ZERO
    simpson_steps: int = integrator.DEFAULT_SIMPSON_STEPS

    def __post_init__(self):
        validate_positive(self.zero_eps, "zero_eps")
        validate_step_count(self.simpson_steps, "simpson_steps")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Конфигурация из переменных окружения с fallback на значения по умолчанию."""
        env = os.environ if environ is None else environ
        return cls(
            zero_eps=float(env.get("RATALG_ZERO_EPS", EPS_COEFF_ZERO)),
            simpson_steps=int(env.get("RATALG_SIMPSON_STEPS", integrator.DEFAULT_SIMPSON_STEPS)),
        )


# =============================================================================
# ENGINE
# =============================================================================


class RationalEngine:
    """Алгебраический движок рациональных функций.

    Все методы — чистые функции от аргументов и конфигурации.
    Ошибки таксономии (AlgebraError) пробрасываются вызывающему коду;
    evaluate_batch перехватывает их на границе и возвращает Outcome.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Args:
            config: конфигурация движка (опционально, используется default)
        """
        self.config = config or EngineConfig()

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def evaluate(self, expression: Expression, bindings: Mapping[str, float]) -> float:
        return evaluator.evaluate(expression, bindings)

    def evaluate_batch(
        self,
        expression: Expression,
        points: Iterable[Mapping[str, float]],
    ) -> list[Outcome[float]]:
        """Вычисление выражения в наборе точек.

        Точка, в которой вычисление завершилось AlgebraError, не прерывает
        обработку: для неё возвращается Outcome с error_kind.
        """
        outcomes = []
        for index, point in enumerate(points):
            outcome = attempt(evaluator.evaluate, expression, point)
            if not outcome.ok:
                logger.warning(
                    "Skipping point #%d %s: %s (%s)",
                    index,
                    dict(point),
                    outcome.message,
                    outcome.error_kind.value,
                )
            outcomes.append(outcome)
        return outcomes

    # -------------------------------------------------------------------------
    # Simplification / expansion
    # -------------------------------------------------------------------------

    def simplify(self, expression: Expression) -> Expression:
        """Упрощение полинома, дроби, произведения или Equation.

        Raises:
            TypeError: expression — одиночный Term
        """
        eps = self.config.zero_eps
        if isinstance(expression, Polynomial):
            return simplifier.simplify_polynomial(expression, eps)
        if isinstance(expression, Fraction):
            return simplifier.simplify_fraction(expression, eps)
        if isinstance(expression, Product):
            return simplifier.simplify_product(expression, eps)
        if isinstance(expression, Equation):
            return simplifier.simplify_equation(expression, eps)
        raise TypeError(f"Cannot simplify {type(expression).__name__}")

    def expand(self, expression: Union[Product, Equation]) -> Fraction:
        eps = self.config.zero_eps
        if isinstance(expression, Product):
            return expander.expand_product(expression, eps)
        if isinstance(expression, Equation):
            return expander.expand_equation(expression, eps)
        raise TypeError(f"Cannot expand {type(expression).__name__}")

    # -------------------------------------------------------------------------
    # Differentiation
    # -------------------------------------------------------------------------

    def differentiate(self, expression: Expression, variable: str, order: int = 1) -> Expression:
        """Производная порядка order.

        Term/Polynomial → тот же тип; Fraction → Fraction;
        Product/Equation → Equation.
        """
        if order < 0:
            raise ValueError(f"order must be non-negative, got {order}")

        eps = self.config.zero_eps
        result = expression
        for _ in range(order):
            if isinstance(result, Term):
                result = differentiator.differentiate_term(result, variable)
            elif isinstance(result, Polynomial):
                result = differentiator.differentiate_polynomial(result, variable)
            elif isinstance(result, Fraction):
                result = differentiator.differentiate_fraction(result, variable, eps)
            elif isinstance(result, Product):
                result = differentiator.differentiate_product(result, variable, eps)
            elif isinstance(result, Equation):
                result = differentiator.differentiate_equation(result, variable, eps)
            else:
                raise TypeError(f"Cannot differentiate {type(result).__name__}")
        return result

    def gradient(self, fraction: Fraction, variables: Iterable[str]) -> dict[str, Fraction]:
        return differentiator.gradient_fraction(fraction, variables, self.config.zero_eps)

    # -------------------------------------------------------------------------
    # Integration
    # -------------------------------------------------------------------------

    def integrate(self, expression: Union[Term, Polynomial, Fraction], variable: str):
        """Неопределённый интеграл (power rule)."""
        if isinstance(expression, Term):
            return integrator.integrate_term(expression, variable)
        if isinstance(expression, Polynomial):
            return integrator.integrate_polynomial(expression, variable)
        if isinstance(expression, Fraction):
            return integrator.integrate_fraction(expression, variable)
        raise TypeError(f"Cannot integrate {type(expression).__name__}")

    def definite_integral(
        self,
        fraction: Fraction,
        lower: float,
        upper: float,
        variable: str,
        bindings: Optional[Mapping[str, float]] = None,
    ) -> Fraction:
        return integrator.definite_integrate_fraction(
            fraction, lower, upper, variable, self.config.simpson_steps, bindings
        )

    def numerical_integral(
        self,
        fraction: Fraction,
        lower: float,
        upper: float,
        variable: str,
        bindings: Optional[Mapping[str, float]] = None,
    ) -> float:
        """Значение интеграла по Simpson's rule как число."""
        result = integrator.numerical_integrate_fraction(
            fraction, lower, upper, variable, self.config.simpson_steps, bindings
        )
        return evaluator.evaluate_fraction(result, {})

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, expression: Expression) -> str:
        return to_string(expression)
