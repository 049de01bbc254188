"""Platform — источники символов локали для NumberSymbols.

- BabelSymbolTable: таблица символов из CLDR данных Babel
- PlatformSymbolsConfig: конфигурация локали/валюты/положительного знака
"""

from .symbol_table import (
    DEFAULT_NUMBERING_SYSTEM,
    ZERO_DIGITS,
    BabelSymbolTable,
    PlatformSymbolsConfig,
    symbols_for_locale,
)

__all__ = [
    "BabelSymbolTable",
    "PlatformSymbolsConfig",
    "symbols_for_locale",
    "DEFAULT_NUMBERING_SYSTEM",
    "ZERO_DIGITS",
]
