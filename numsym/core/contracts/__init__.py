"""
Contract Validation Module

Модуль для валидации JSON контрактов numsym.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    NumberSymbolsValidator,
    SchemaLoader,
    validate_number_symbols,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumberSymbolsValidator",
    # Functions
    "validate_number_symbols",
]
