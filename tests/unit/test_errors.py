"""
Тесты для таксономии ошибок и Outcome

Проверяет:
1. Каждое исключение несёт свой AlgebraErrorKind
2. Outcome.success / failure / unwrap
3. attempt перехватывает только AlgebraError
"""

import pytest

from ratalg.algebra.evaluator import evaluate_fraction
from ratalg.core.domain import make_fraction, make_term
from ratalg.core.errors import (
    AlgebraError,
    AlgebraErrorKind,
    DivisionByZeroError,
    LogarithmicIntegralError,
    MissingVariableError,
    Outcome,
    UnsupportedExpansionError,
    UnsupportedIntegralError,
    attempt,
)


class TestErrorTaxonomy:
    """Тесты для иерархии исключений"""

    @pytest.mark.parametrize(
        "error, kind",
        [
            (MissingVariableError("x"), AlgebraErrorKind.MISSING_VARIABLE),
            (DivisionByZeroError(), AlgebraErrorKind.DIVISION_BY_ZERO),
            (LogarithmicIntegralError("t"), AlgebraErrorKind.LOGARITHMIC_INTEGRAL),
            (UnsupportedIntegralError(), AlgebraErrorKind.UNSUPPORTED_INTEGRAL),
            (UnsupportedExpansionError(), AlgebraErrorKind.UNSUPPORTED_EXPANSION),
        ],
    )
    def test_kind(self, error, kind) -> None:
        """Каждый подкласс AlgebraError фиксирует свой kind"""
        assert isinstance(error, AlgebraError)
        assert error.kind == kind

    def test_kind_is_string_enum(self) -> None:
        """AlgebraErrorKind сериализуется как строка"""
        assert AlgebraErrorKind.DIVISION_BY_ZERO == "DIVISION_BY_ZERO"

    def test_messages(self) -> None:
        """Сообщения называют переменную"""
        assert "'y'" in str(MissingVariableError("y"))
        assert "t^-1" in str(LogarithmicIntegralError("t"))


class TestOutcome:
    """Тесты для Outcome и attempt"""

    def test_success(self) -> None:
        """Успешный результат"""
        outcome = Outcome.success(2.5)
        assert outcome.ok
        assert outcome.unwrap() == 2.5
        assert outcome.error_kind is None

    def test_failure(self) -> None:
        """Ошибка сохраняет kind и сообщение"""
        outcome = Outcome.failure(MissingVariableError("z"))
        assert not outcome.ok
        assert outcome.value is None
        assert outcome.error_kind == AlgebraErrorKind.MISSING_VARIABLE
        assert "'z'" in outcome.message
        with pytest.raises(ValueError):
            outcome.unwrap()

    def test_attempt_success(self) -> None:
        """attempt возвращает значение функции"""
        f = make_fraction([make_term(1, {"x": 1})], 2)
        assert attempt(evaluate_fraction, f, {"x": 3}).unwrap() == pytest.approx(1.5)

    def test_attempt_captures_algebra_error(self) -> None:
        """attempt конвертирует AlgebraError в Outcome"""
        f = make_fraction([make_term(1)], [make_term(1, {"x": 1})])
        outcome = attempt(evaluate_fraction, f, {"x": 0})
        assert outcome.error_kind == AlgebraErrorKind.DIVISION_BY_ZERO

    def test_attempt_propagates_other_errors(self) -> None:
        """Исключения вне таксономии пробрасываются"""

        def fail():
            raise KeyError("boom")

        with pytest.raises(KeyError):
            attempt(fail)
