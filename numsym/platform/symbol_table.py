"""
Platform Symbol Table — Таблица числовых символов локали на основе Babel/CLDR

Источник сырых значений для NumberSymbols.from_platform_symbols.
Таблица только читает данные локали и никогда их не изменяет.

Особенности CLDR:
- Символы некоторых локалей содержат bidi-метки (категория Cf,
  например U+200E перед минусом в иврите). Они удаляются.
- Цифра ноль не хранится среди number symbols: она определяется
  системой счисления (numbering system).
- Положительный знак таблица не предоставляет: его выбирает вызывающий
  код (PlatformSymbolsConfig.positive_sign).
"""

import logging
import unicodedata
from dataclasses import dataclass
from typing import Final, Mapping, Optional, Union

from babel import Locale
from babel.numbers import get_currency_symbol, get_territory_currencies

from numsym.core.domain.number_symbols import NumberSymbols

logger = logging.getLogger(__name__)

# Цифра ноль для поддерживаемых систем счисления CLDR
ZERO_DIGITS: Final[Mapping[str, str]] = {
    "latn": "0",
    "arab": "\u0660",
    "arabext": "\u06f0",
    "beng": "\u09e6",
    "deva": "\u0966",
    "fullwide": "\uff10",
    "thai": "\u0e50",
}

DEFAULT_NUMBERING_SYSTEM: Final[str] = "latn"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PlatformSymbolsConfig:
    """Конфигурация построения NumberSymbols из данных локали.

    - positive_sign: положительный знак (в таблицах локали отсутствует)
    - locale: идентификатор локали Babel (например, 'en_US', 'de_DE')
    - currency: ISO 4217 код валюты (None — текущая валюта территории)
    - numbering_system: система счисления CLDR
    """
    positive_sign: str = "+"
    locale: str = "en_US"
    currency: Optional[str] = None
    numbering_system: str = DEFAULT_NUMBERING_SYSTEM


# =============================================================================
# BABEL SYMBOL TABLE
# =============================================================================


def _strip_format_marks(value: str) -> str:
    return "".join(c for c in value if unicodedata.category(c) != "Cf")


class BabelSymbolTable:
    """
    Read-only таблица символов локали из CLDR данных Babel.

    Реализует протокол PlatformSymbolTable.
    """

    def __init__(
        self,
        locale: Union[str, Locale],
        currency: Optional[str] = None,
        numbering_system: str = DEFAULT_NUMBERING_SYSTEM,
    ):
        """
        Args:
            locale: Идентификатор локали или babel.Locale
            currency: ISO 4217 код валюты (default: текущая валюта территории)
            numbering_system: Система счисления CLDR (default: 'latn')

        Raises:
            babel.UnknownLocaleError: Неизвестная локаль
            LookupError: Неподдерживаемая система счисления
        """
        self._locale = locale if isinstance(locale, Locale) else Locale.parse(locale)

        if numbering_system not in ZERO_DIGITS:
            raise LookupError(
                f"Unsupported numbering system '{numbering_system}', "
                f"expected one of {sorted(ZERO_DIGITS)}"
            )
        self._numbering_system = numbering_system

        symbols = self._locale.number_symbols
        # Babel >= 2.14 группирует символы по системам счисления
        if numbering_system in symbols:
            symbols = symbols[numbering_system]
        self._symbols: Mapping[str, str] = symbols

        self._currency = currency or self._default_currency()

    def _default_currency(self) -> Optional[str]:
        territory = self._locale.territory
        if not territory:
            return None
        currencies = get_territory_currencies(territory)
        return currencies[0] if currencies else None

    def _symbol(self, key: str) -> str:
        try:
            value = self._symbols[key]
        except KeyError:
            raise LookupError(
                f"Locale {self._locale} has no '{key}' symbol "
                f"for numbering system '{self._numbering_system}'"
            ) from None
        return _strip_format_marks(value)

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def currency(self) -> Optional[str]:
        return self._currency

    @property
    def minus_sign(self) -> str:
        return self._symbol("minusSign")

    @property
    def zero_digit(self) -> str:
        return ZERO_DIGITS[self._numbering_system]

    @property
    def currency_symbol(self) -> str:
        """Символ валюты; для локали без территории и валюты — международный '¤'"""
        if self._currency is None:
            return "\u00a4"
        return _strip_format_marks(get_currency_symbol(self._currency, locale=self._locale))

    @property
    def decimal_separator(self) -> str:
        return self._symbol("decimal")

    @property
    def exponent_separator(self) -> str:
        return self._symbol("exponential")

    @property
    def grouping_separator(self) -> str:
        return self._symbol("group")

    @property
    def infinity(self) -> str:
        return self._symbol("infinity")

    @property
    def monetary_decimal_separator(self) -> str:
        # CLDR задаёт currencyDecimal только там, где он отличается
        if "currencyDecimal" in self._symbols:
            return self._symbol("currencyDecimal")
        return self.decimal_separator

    @property
    def nan(self) -> str:
        return self._symbol("nan")

    @property
    def percent(self) -> str:
        return self._symbol("percentSign")

    @property
    def per_mill(self) -> str:
        return self._symbol("perMille")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({str(self._locale)!r}, "
            f"currency={self._currency!r}, numbering_system={self._numbering_system!r})"
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def symbols_for_locale(config: Optional[PlatformSymbolsConfig] = None) -> NumberSymbols:
    """
    Построение NumberSymbols для локали из конфигурации.

    Args:
        config: Конфигурация (default: PlatformSymbolsConfig())

    Returns:
        Провалидированный NumberSymbols

    Raises:
        babel.UnknownLocaleError: Неизвестная локаль
        NumberSymbolsError: Символы локали нарушают инварианты NumberSymbols
    """
    config = config or PlatformSymbolsConfig()
    table = BabelSymbolTable(
        config.locale,
        currency=config.currency,
        numbering_system=config.numbering_system,
    )
    logger.debug("Building number symbols for %s", table)
    return NumberSymbols.from_platform_symbols(config.positive_sign, table)
