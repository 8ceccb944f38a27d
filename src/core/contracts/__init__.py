"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных чисел.
"""

from .validators import (
    ContractValidator,
    NumeralRecordValidator,
    SchemaLoader,
    validate_numeral_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumeralRecordValidator",
    # Functions
    "validate_numeral_record",
]
