"""
JSON Schema Contract Validators

Модуль для валидации сериализованных выражений согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema (Draft 2020-12).

Схемы:
- equation.json — дерево выражения (Equation → Product → Fraction → Polynomial → Term)

Сериализация моделей: model_dump(mode="json") / model_validate.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from ratalg.core.domain import Equation


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем (package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'equation')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class EquationValidator(ContractValidator):
    """Валидатор для контракта equation."""

    def __init__(self):
        super().__init__("equation")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_equation(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного Equation.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    EquationValidator().validate(data)


def equation_to_payload(equation: Equation) -> Dict[str, Any]:
    """
    Сериализация Equation в JSON-совместимый dict.

    Результат всегда соответствует контракту equation.json.
    """
    payload = equation.model_dump(mode="json")
    validate_equation(payload)
    return payload


def equation_from_payload(data: Dict[str, Any]) -> Equation:
    """
    Десериализация Equation с предварительной проверкой контракта.

    Raises:
        jsonschema.ValidationError: Нарушение контракта
        pydantic.ValidationError: Нарушение инвариантов модели
    """
    validate_equation(data)
    return Equation.model_validate(data)
