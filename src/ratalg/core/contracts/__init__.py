"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных выражений.
"""

from .validators import (
    ContractValidator,
    EquationValidator,
    SchemaLoader,
    equation_from_payload,
    equation_to_payload,
    validate_equation,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "EquationValidator",
    # Functions
    "validate_equation",
    "equation_to_payload",
    "equation_from_payload",
]
