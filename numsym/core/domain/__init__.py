"""
Domain models and value objects.

Contains the NumberSymbols value object, its validation errors and
predicates, and the NumberList sequence.
"""

from numsym.core.domain.exceptions import (
    DuplicateSymbolError,
    EmptySymbolError,
    EmptySymbolTokenError,
    InvalidSymbolCharacterError,
    InvalidSymbolStringError,
    MalformedSymbolsTextError,
    MissingSymbolError,
    NumberSymbolsError,
)
from numsym.core.domain.number_list import NumberList
from numsym.core.domain.number_symbols import (
    AMERICAN_SYMBOLS,
    CHARACTER_FIELDS,
    DISTINCT_FIELDS,
    FIELD_NAMES,
    STRING_FIELDS,
    TEXT_FORMAT_VERSION,
    TEXT_TOKEN_COUNT,
    NumberSymbols,
    PlatformSymbolTable,
    validate_symbols,
)
from numsym.core.domain.symbol_predicates import (
    is_digit,
    is_letter,
    is_permill_symbol,
    is_printable,
    is_symbol,
    is_symbol_string,
    is_whitespace,
    is_zero_digit,
)

__all__ = [
    # NumberSymbols model
    "NumberSymbols",
    "PlatformSymbolTable",
    "AMERICAN_SYMBOLS",
    "validate_symbols",
    # NumberSymbols field table
    "FIELD_NAMES",
    "STRING_FIELDS",
    "CHARACTER_FIELDS",
    "DISTINCT_FIELDS",
    "TEXT_FORMAT_VERSION",
    "TEXT_TOKEN_COUNT",
    # Predicates
    "is_printable",
    "is_letter",
    "is_digit",
    "is_whitespace",
    "is_symbol",
    "is_permill_symbol",
    "is_zero_digit",
    "is_symbol_string",
    # Exceptions
    "NumberSymbolsError",
    "MissingSymbolError",
    "InvalidSymbolCharacterError",
    "InvalidSymbolStringError",
    "EmptySymbolError",
    "DuplicateSymbolError",
    "MalformedSymbolsTextError",
    "EmptySymbolTokenError",
    # NumberList
    "NumberList",
]
