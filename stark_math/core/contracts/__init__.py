"""
Contract Validation Module

Модуль для валидации JSON контрактов с rational значениями.
"""

from .validators import (
    ContractValidator,
    RangeSetValidator,
    RationalValueValidator,
    SchemaLoader,
    load_range_set,
    load_rational_value,
    validate_range_set,
    validate_rational_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RationalValueValidator",
    "RangeSetValidator",
    # Functions
    "validate_rational_value",
    "validate_range_set",
    "load_rational_value",
    "load_range_set",
]
