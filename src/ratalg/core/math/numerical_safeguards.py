"""
Numerical Safeguards — численные примитивы для алгебры рациональных функций

Модуль обеспечивает численную устойчивость операций над коэффициентами:
- Epsilon-пороги для отбрасывания "почти нулевых" коэффициентов
- Сравнения float с учётом машинной точности
- Целочисленный НОД (алгоритм Евклида) для сокращения дробей
- Валидация параметров численных методов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(0, 0) == 1 — деление на нулевой НОД невозможно
2. НОД считается только для целочисленных значений (float.is_integer)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Iterable

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог отбрасывания коэффициента при упрощении полинома
# |coeff| < EPS_COEFF_ZERO → терм удаляется
EPS_COEFF_ZERO: Final[float] = 1e-10

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_zero(value: float, tol: float = EPS_COEFF_ZERO) -> bool:
    """
    Проверка, пренебрежимо ли мало значение.

    Строгое сравнение: значение ровно на пороге нулём не считается.

    Args:
        value: Проверяемое значение
        tol: Абсолютный порог (default: EPS_COEFF_ZERO)

    Returns:
        True если abs(value) < tol

    Examples:
        >>> is_zero(1e-12)
        True
        >>> is_zero(1e-10)
        False
    """
    return abs(value) < tol


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_integral(value: float) -> bool:
    """
    Проверка, представляет ли значение целое число.

    Examples:
        >>> is_integral(6.0)
        True
        >>> is_integral(2.5)
        False
        >>> is_integral(float("inf"))
        False
    """
    if not is_valid_float(value):
        return False
    return float(value).is_integer()


# =============================================================================
# НОД (АЛГОРИТМ ЕВКЛИДА)
# =============================================================================


def gcd(a: float, b: float) -> float:
    """
    Наибольший общий делитель двух чисел (алгоритм Евклида по модулям).

    Соглашение: gcd(0, 0) = 1, чтобы результат всегда был безопасным делителем.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        НОД(|a|, |b|), либо 1 если оба значения нулевые

    Examples:
        >>> gcd(6, 9)
        3
        >>> gcd(-4, 6)
        2
        >>> gcd(0, 0)
        1
        >>> gcd(0, 5)
        5
    """
    a = abs(a)
    b = abs(b)
    while b:
        a, b = b, a % b
    return a or 1


def gcd_many(values: Iterable[float]) -> float:
    """
    НОД последовательности значений.

    Пустая последовательность → 1 (нейтральный безопасный делитель).

    Examples:
        >>> gcd_many([6, 9, 12])
        3
        >>> gcd_many([])
        1
    """
    result = 0
    for value in values:
        result = gcd(result, value) if result else abs(value)
    return result or 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_step_count(steps: int, name: str = "steps") -> None:
    """
    Валидация количества шагов численного метода.

    Raises:
        ValueError: Если steps не целое или steps < 1
    """
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise ValueError(f"{name} must be an integer, got {steps!r}")

    if steps < 1:
        raise ValueError(f"{name} must be >= 1, got {steps}")
