"""
Errors — таксономия ошибок алгебраического движка

Все ошибки локальные и восстановимые вызывающим кодом. Операция либо
возвращает полностью сформированный результат, либо завершается ровно одной
ошибкой из таксономии:

- MISSING_VARIABLE: при вычислении нет значения для переменной
- DIVISION_BY_ZERO: знаменатель дроби в точке равен ровно 0
- LOGARITHMIC_INTEGRAL: power rule для показателя -1 (x^-1 → ln|x|)
- UNSUPPORTED_INTEGRAL: символьное интегрирование дроби с полиномиальным знаменателем
- UNSUPPORTED_EXPANSION: раскрытие дроби со знаменателем, отличным от скаляра 1

Для вызывающего кода без try/except предусмотрен Outcome — явный
дискриминированный результат (значение либо вид ошибки).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class AlgebraErrorKind(str, Enum):
    """Вид ошибки алгебраической операции."""

    MISSING_VARIABLE = "MISSING_VARIABLE"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    LOGARITHMIC_INTEGRAL = "LOGARITHMIC_INTEGRAL"
    UNSUPPORTED_INTEGRAL = "UNSUPPORTED_INTEGRAL"
    UNSUPPORTED_EXPANSION = "UNSUPPORTED_EXPANSION"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class AlgebraError(Exception):
    """
    Базовая ошибка алгебраического движка.

    Каждый подкласс фиксирует свой kind, по которому вызывающий код
    может ветвиться без проверки типа исключения.
    """

    kind: AlgebraErrorKind


class MissingVariableError(AlgebraError):
    """Переменная выражения отсутствует в bindings."""

    kind = AlgebraErrorKind.MISSING_VARIABLE

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Variable '{variable}' not provided")


class DivisionByZeroError(AlgebraError):
    """Знаменатель вычислен ровно в 0."""

    kind = AlgebraErrorKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "Denominator evaluated to zero"):
        super().__init__(message)


class LogarithmicIntegralError(AlgebraError):
    """Power rule неприменим: показатель -1 требует логарифма."""

    kind = AlgebraErrorKind.LOGARITHMIC_INTEGRAL

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(
            f"Integration of {variable}^-1 requires logarithm (not supported)"
        )


class UnsupportedIntegralError(AlgebraError):
    """Символьное интегрирование дроби с полиномиальным знаменателем."""

    kind = AlgebraErrorKind.UNSUPPORTED_INTEGRAL

    def __init__(
        self,
        message: str = (
            "Symbolic integration of a fraction with a polynomial denominator "
            "is not supported. Use numerical_integrate_fraction() instead."
        ),
    ):
        super().__init__(message)


class UnsupportedExpansionError(AlgebraError):
    """Раскрытие определено только для дробей со знаменателем 1."""

    kind = AlgebraErrorKind.UNSUPPORTED_EXPANSION

    def __init__(
        self,
        message: str = "Expansion requires both denominators to be the scalar 1",
    ):
        super().__init__(message)


# =============================================================================
# OUTCOME
# =============================================================================


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Дискриминированный результат операции.

    ok=True  → value содержит результат, error_kind=None
    ok=False → error_kind и message описывают ошибку, value=None
    """

    ok: bool
    value: Optional[T] = None
    error_kind: Optional[AlgebraErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: AlgebraError) -> "Outcome[T]":
        return cls(ok=False, error_kind=error.kind, message=str(error))

    def unwrap(self) -> T:
        """
        Извлечение значения.

        Raises:
            ValueError: если Outcome содержит ошибку
        """
        if not self.ok:
            raise ValueError(f"Outcome is a failure ({self.error_kind}): {self.message}")
        return self.value


def attempt(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """
    Выполнение операции с конверсией AlgebraError в Outcome.

    Исключения вне таксономии (например, ValidationError, ValueError)
    не перехватываются.

    Examples:
        >>> attempt(lambda: 1.5).value
        1.5
    """
    try:
        return Outcome.success(fn(*args, **kwargs))
    except AlgebraError as e:
        return Outcome.failure(e)
