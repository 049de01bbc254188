"""
NumberSymbols — Набор локале-зависимых символов для десятичных чисел

Immutable Pydantic модель, описывающая символы, которые использует
движок форматирования/парсинга чисел: знаки, цифра ноль, символ валюты,
разделители и токены специальных значений.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждое поле удовлетворяет своему предикату формата (symbol_predicates)
2. Символьные поля negative_sign, positive_sign, decimal_separator,
   group_separator, monetary_decimal_separator, percent_symbol,
   permill_symbol попарно различны
3. Исключение: decimal_separator может совпадать с monetary_decimal_separator
4. zero_digit не участвует в проверке уникальности
5. Проверка уникальности детерминирована: пары перебираются построчно
   (negative_sign против всех последующих полей, затем positive_sign и т.д.)
6. set_* возвращает self, если значение не изменилось

КАНОНИЧЕСКИЙ ТЕКСТ (версия TEXT_FORMAT_VERSION):
    12 токенов через запятую в порядке FIELD_NAMES, минимальное CSV
    экранирование. Пример (AMERICAN_SYMBOLS):
    -,+,0,$,.,E,",",∞,.,NaN,%,‰
"""

import csv
import io
import logging
from typing import Any, Callable, Dict, Final, Mapping, Protocol

from pydantic import BaseModel, Field

from numsym.core.contracts.validators import validate_number_symbols
from numsym.core.domain.exceptions import (
    DuplicateSymbolError,
    EmptySymbolError,
    EmptySymbolTokenError,
    InvalidSymbolCharacterError,
    InvalidSymbolStringError,
    MalformedSymbolsTextError,
    MissingSymbolError,
    quote_char,
    quote_string,
)
from numsym.core.domain.symbol_predicates import (
    is_permill_symbol,
    is_printable,
    is_symbol,
    is_zero_digit,
)

logger = logging.getLogger(__name__)


# =============================================================================
# FIELD TABLE
# =============================================================================

# Порядок полей фиксирован: канонический текст, дампы и проверки уникальности
FIELD_NAMES: Final[tuple[str, ...]] = (
    "negative_sign",
    "positive_sign",
    "zero_digit",
    "currency_symbol",
    "decimal_separator",
    "exponent_symbol",
    "group_separator",
    "infinity_symbol",
    "monetary_decimal_separator",
    "nan_symbol",
    "percent_symbol",
    "permill_symbol",
)

STRING_FIELDS: Final[frozenset[str]] = frozenset(
    {"currency_symbol", "exponent_symbol", "infinity_symbol", "nan_symbol"}
)

CHARACTER_FIELDS: Final[frozenset[str]] = frozenset(FIELD_NAMES) - STRING_FIELDS

# Поля, которые должны быть попарно различны (zero_digit исключён)
DISTINCT_FIELDS: Final[tuple[str, ...]] = (
    "negative_sign",
    "positive_sign",
    "decimal_separator",
    "group_separator",
    "monetary_decimal_separator",
    "percent_symbol",
    "permill_symbol",
)

# Пары, которым разрешено совпадать
_MAY_BE_EQUAL: Final[frozenset[frozenset[str]]] = frozenset(
    {frozenset({"decimal_separator", "monetary_decimal_separator"})}
)

# Версия канонического текста. Увеличивается при изменении набора полей.
TEXT_FORMAT_VERSION: Final[int] = 1
TEXT_TOKEN_COUNT: Final[int] = len(FIELD_NAMES)


# =============================================================================
# FIELD CHECKS
# =============================================================================


def _require_str(field: str, value: Any) -> str:
    if value is None:
        raise MissingSymbolError(field)
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a str, got {type(value).__name__}: {value!r}")
    return value


def _character_check(predicate: Callable[[str], bool]) -> Callable[[str, Any], str]:
    def check(field: str, value: Any) -> str:
        value = _require_str(field, value)
        if len(value) != 1 or not predicate(value):
            raise InvalidSymbolCharacterError(field, value)
        return value

    return check


def _check_string(field: str, value: Any) -> str:
    value = _require_str(field, value)
    if not value:
        raise EmptySymbolError(field)
    for position, c in enumerate(value):
        if not is_printable(c):
            raise InvalidSymbolStringError(field, value, position)
    return value


_check_symbol = _character_check(is_symbol)

_FIELD_CHECKS: Final[Dict[str, Callable[[str, Any], str]]] = {
    "negative_sign": _check_symbol,
    "positive_sign": _check_symbol,
    "zero_digit": _character_check(is_zero_digit),
    "currency_symbol": _check_string,
    "decimal_separator": _check_symbol,
    "exponent_symbol": _check_string,
    "group_separator": _check_symbol,
    "infinity_symbol": _check_string,
    "monetary_decimal_separator": _check_symbol,
    "nan_symbol": _check_string,
    "percent_symbol": _check_symbol,
    "permill_symbol": _character_check(is_permill_symbol),
}


def _check_distinct(values: Mapping[str, str]) -> None:
    """
    Проверка попарной уникальности символьных полей.

    Пары перебираются построчно: negative_sign против всех последующих
    полей DISTINCT_FIELDS, затем positive_sign против последующих и т.д.
    При нескольких совпадениях порядок определяет, какая пара попадёт
    в DuplicateSymbolError.

    Raises:
        DuplicateSymbolError: field = более позднее поле пары,
            other_field = более раннее поле с тем же символом
    """
    for index, earlier in enumerate(DISTINCT_FIELDS):
        value = values[earlier]
        for later in DISTINCT_FIELDS[index + 1 :]:
            if values[later] == value and frozenset((earlier, later)) not in _MAY_BE_EQUAL:
                raise DuplicateSymbolError(later, earlier, value)


def validate_symbols(data: Mapping[str, Any]) -> Dict[str, str]:
    """
    Полная валидация сырых значений NumberSymbols.

    Порядок: для каждого поля в порядке FIELD_NAMES — отсутствие значения,
    тип, формат; затем межполевая уникальность.

    Args:
        data: Значения полей по имени

    Returns:
        Проверенные значения в порядке FIELD_NAMES

    Raises:
        TypeError: Неизвестное поле или значение не str
        NumberSymbolsError: Первое найденное нарушение инварианта
    """
    unknown = set(data) - set(FIELD_NAMES)
    if unknown:
        raise TypeError(f"Unknown number symbols field(s): {sorted(unknown)}")

    values = {field: _FIELD_CHECKS[field](field, data.get(field)) for field in FIELD_NAMES}
    _check_distinct(values)
    return values


# =============================================================================
# PLATFORM SYMBOL TABLE PROTOCOL
# =============================================================================


class PlatformSymbolTable(Protocol):
    """
    Read-only таблица символов платформы/локали.

    Платформенные таблицы не содержат положительного знака: его
    передаёт вызывающий код в NumberSymbols.from_platform_symbols.
    """

    @property
    def minus_sign(self) -> str: ...

    @property
    def zero_digit(self) -> str: ...

    @property
    def currency_symbol(self) -> str: ...

    @property
    def decimal_separator(self) -> str: ...

    @property
    def exponent_separator(self) -> str: ...

    @property
    def grouping_separator(self) -> str: ...

    @property
    def infinity(self) -> str: ...

    @property
    def monetary_decimal_separator(self) -> str: ...

    @property
    def nan(self) -> str: ...

    @property
    def percent(self) -> str: ...

    @property
    def per_mill(self) -> str: ...


# =============================================================================
# NUMBER SYMBOLS MODEL
# =============================================================================


class NumberSymbols(BaseModel):
    """
    Набор символов для текстового представления десятичных чисел.

    Immutable модель (frozen=True). Все инварианты проверяются при
    создании, частично построенный экземпляр невозможен.

    Создание:
        NumberSymbols.with_(...)               — валидирующая фабрика
        NumberSymbols(negative_sign="-", ...)  — та же валидация
        NumberSymbols.parse(text)              — из канонического текста
        NumberSymbols.from_platform_symbols()  — из таблицы локали
        NumberSymbols.from_dict(data)          — из JSON контракта
    """

    negative_sign: str = Field(..., description="Знак отрицательного числа")
    positive_sign: str = Field(..., description="Явный знак положительного числа")
    zero_digit: str = Field(..., description="Цифра 0 (цифры 1-9 идут следующими code points)")
    currency_symbol: str = Field(..., description="Символ валюты")
    decimal_separator: str = Field(..., description="Разделитель дробной части")
    exponent_symbol: str = Field(..., description="Маркер экспоненты")
    group_separator: str = Field(..., description="Разделитель групп разрядов")
    infinity_symbol: str = Field(..., description="Токен бесконечности")
    monetary_decimal_separator: str = Field(
        ..., description="Разделитель дробной части для денежных значений"
    )
    nan_symbol: str = Field(..., description="Токен not-a-number")
    percent_symbol: str = Field(..., description="Символ процента")
    permill_symbol: str = Field(..., description="Символ промилле")

    model_config = {"frozen": True}

    def __init__(self, **data: Any):
        super().__init__(**validate_symbols(data))

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def with_(
        cls,
        negative_sign: str,
        positive_sign: str,
        zero_digit: str,
        currency_symbol: str,
        decimal_separator: str,
        exponent_symbol: str,
        group_separator: str,
        infinity_symbol: str,
        monetary_decimal_separator: str,
        nan_symbol: str,
        percent_symbol: str,
        permill_symbol: str,
    ) -> "NumberSymbols":
        """
        Валидирующая фабрика из всех 12 значений.

        Raises:
            MissingSymbolError: Значение None
            InvalidSymbolCharacterError: Символ не прошёл предикат поля
            InvalidSymbolStringError: Строка пустая или содержит непечатаемый символ
            DuplicateSymbolError: Нарушена попарная уникальность
        """
        return cls(
            negative_sign=negative_sign,
            positive_sign=positive_sign,
            zero_digit=zero_digit,
            currency_symbol=currency_symbol,
            decimal_separator=decimal_separator,
            exponent_symbol=exponent_symbol,
            group_separator=group_separator,
            infinity_symbol=infinity_symbol,
            monetary_decimal_separator=monetary_decimal_separator,
            nan_symbol=nan_symbol,
            percent_symbol=percent_symbol,
            permill_symbol=permill_symbol,
        )

    @classmethod
    def from_platform_symbols(
        cls, positive_sign: str, table: PlatformSymbolTable
    ) -> "NumberSymbols":
        """
        Построение из платформенной таблицы символов.

        Чистое отображение полей таблицы, без дополнительной валидации
        кроме валидации фабрики.

        Args:
            positive_sign: Положительный знак (таблицы платформы его не содержат)
            table: Таблица символов локали

        Raises:
            MissingSymbolError: table is None
        """
        if table is None:
            raise MissingSymbolError("table")

        logger.debug("Deriving number symbols from platform table %r", table)
        return cls.with_(
            table.minus_sign,
            positive_sign,
            table.zero_digit,
            table.currency_symbol,
            table.decimal_separator,
            table.exponent_separator,
            table.grouping_separator,
            table.infinity,
            table.monetary_decimal_separator,
            table.nan,
            table.percent,
            table.per_mill,
        )

    @classmethod
    def parse(cls, text: str) -> "NumberSymbols":
        """
        Разбор канонического CSV текста (обратная операция к text()).

        Закон: NumberSymbols.parse(symbols.text()) == symbols

        Args:
            text: 12 CSV токенов в порядке FIELD_NAMES

        Returns:
            Провалидированный NumberSymbols

        Raises:
            MalformedSymbolsTextError: Неверное число токенов или символьный
                токен длиной > 1
            EmptySymbolTokenError: Пустой символьный токен
            NumberSymbolsError: Нарушение инвариантов при построении
        """
        if text is None:
            raise MissingSymbolError("text")

        _ensure_field_size_limit(len(text))
        try:
            tokens = next(csv.reader([text]), [])
        except csv.Error as e:
            raise MalformedSymbolsTextError(f"Invalid number symbols text: {e}") from e

        if len(tokens) != TEXT_TOKEN_COUNT:
            logger.debug("Rejected number symbols text %r: %d tokens", text, len(tokens))
            raise MalformedSymbolsTextError(
                f"Expected {TEXT_TOKEN_COUNT} tokens but got {len(tokens)}"
            )

        values = {
            field: _token_to_character(field, token) if field in CHARACTER_FIELDS else token
            for field, token in zip(FIELD_NAMES, tokens)
        }
        return cls(**values)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NumberSymbols":
        """
        Построение из JSON представления.

        Данные сначала проверяются по контракту number_symbols.json,
        затем по инвариантам модели.

        Raises:
            jsonschema.ValidationError: Данные не соответствуют контракту
            NumberSymbolsError: Нарушение инвариантов
        """
        validate_number_symbols(dict(data))
        return cls(**data)

    # -------------------------------------------------------------------------
    # Withers
    # -------------------------------------------------------------------------

    def _with_field(self, field: str, value: str) -> "NumberSymbols":
        if getattr(self, field) == value:
            return self

        values = self.to_dict()
        values[field] = value
        return type(self)(**values)

    def set_negative_sign(self, negative_sign: str) -> "NumberSymbols":
        return self._with_field("negative_sign", negative_sign)

    def set_positive_sign(self, positive_sign: str) -> "NumberSymbols":
        return self._with_field("positive_sign", positive_sign)

    def set_zero_digit(self, zero_digit: str) -> "NumberSymbols":
        return self._with_field("zero_digit", zero_digit)

    def set_currency_symbol(self, currency_symbol: str) -> "NumberSymbols":
        return self._with_field("currency_symbol", currency_symbol)

    def set_decimal_separator(self, decimal_separator: str) -> "NumberSymbols":
        return self._with_field("decimal_separator", decimal_separator)

    def set_exponent_symbol(self, exponent_symbol: str) -> "NumberSymbols":
        return self._with_field("exponent_symbol", exponent_symbol)

    def set_group_separator(self, group_separator: str) -> "NumberSymbols":
        return self._with_field("group_separator", group_separator)

    def set_infinity_symbol(self, infinity_symbol: str) -> "NumberSymbols":
        return self._with_field("infinity_symbol", infinity_symbol)

    def set_monetary_decimal_separator(self, monetary_decimal_separator: str) -> "NumberSymbols":
        return self._with_field("monetary_decimal_separator", monetary_decimal_separator)

    def set_nan_symbol(self, nan_symbol: str) -> "NumberSymbols":
        return self._with_field("nan_symbol", nan_symbol)

    def set_percent_symbol(self, percent_symbol: str) -> "NumberSymbols":
        return self._with_field("percent_symbol", percent_symbol)

    def set_permill_symbol(self, permill_symbol: str) -> "NumberSymbols":
        return self._with_field("permill_symbol", permill_symbol)

    # -------------------------------------------------------------------------
    # Text / dumps
    # -------------------------------------------------------------------------

    def values(self) -> tuple[str, ...]:
        """Значения всех полей в порядке FIELD_NAMES"""
        return tuple(getattr(self, field) for field in FIELD_NAMES)

    def text(self) -> str:
        """
        Канонический CSV текст.

        Токены, содержащие запятую, кавычку или перевод строки, берутся
        в кавычки; кавычки внутри удваиваются.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(self.values())
        return buffer.getvalue()[: -len("\n")]

    def to_dict(self) -> Dict[str, str]:
        """JSON представление (контракт number_symbols.json)"""
        return {field: getattr(self, field) for field in FIELD_NAMES}

    def tree_text(self) -> str:
        """
        Древовидный диагностический дамп: имя класса, затем блок на каждое поле.

        Example:
            NumberSymbols
              negative_sign
                '-'
              ...
        """
        lines = [type(self).__name__]
        for field in FIELD_NAMES:
            lines.append("  " + field)
            lines.append("    " + _quote_value(field, getattr(self, field)))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return " ".join(
            f"{field}={_quote_value(field, getattr(self, field))}" for field in FIELD_NAMES
        )


def _ensure_field_size_limit(size: int) -> None:
    # csv.field_size_limit is process-wide; it is only ever raised here
    if size > csv.field_size_limit():
        csv.field_size_limit(size)


def _quote_value(field: str, value: str) -> str:
    return quote_string(value) if field in STRING_FIELDS else quote_char(value)


def _token_to_character(field: str, token: str) -> str:
    length = len(token)
    if length == 0:
        raise EmptySymbolTokenError(field)
    if length > 1:
        raise MalformedSymbolsTextError(
            f"Invalid {field} expected 1 character but got {length}", field
        )
    return token


# =============================================================================
# PRESETS
# =============================================================================

# Символы, которые можно условно назвать американскими.
# Их же используют многие интернет-стандарты.
AMERICAN_SYMBOLS: Final[NumberSymbols] = NumberSymbols.with_(
    "-",
    "+",
    "0",
    "$",
    ".",  # decimal_separator
    "E",
    ",",
    "\u221e",  # infinity_symbol
    ".",  # monetary_decimal_separator
    "NaN",
    "%",
    "\u2030",  # permill_symbol
)
