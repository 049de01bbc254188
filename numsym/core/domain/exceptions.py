"""
NumberSymbols Exceptions — Ошибки валидации набора числовых символов

Все ошибки синхронные, локальные и не требуют повторных попыток:
это чистые ошибки валидации входных данных.

Иерархия:
- NumberSymbolsError (base, ValueError)
  - MissingSymbolError: обязательное значение отсутствует (None)
  - InvalidSymbolCharacterError: одиночный символ не прошёл предикат формата
  - InvalidSymbolStringError: строка содержит непечатаемый символ
    - EmptySymbolError: строка пустая
  - DuplicateSymbolError: два поля содержат один и тот же символ
  - MalformedSymbolsTextError: некорректный CSV текст (только parse)
    - EmptySymbolTokenError: пустой токен символьного поля
"""

from typing import Optional


def quote_char(value: str) -> str:
    """Символ в одинарных кавычках с экранированием (для сообщений и дампов)"""
    return "'" + _escape(value, "'") + "'"


def quote_string(value: str) -> str:
    """Строка в двойных кавычках с экранированием (для сообщений и дампов)"""
    return '"' + _escape(value, '"') + '"'


def _escape(value: str, quote: str) -> str:
    escaped = []
    for c in value:
        if c == "\\" or c == quote:
            escaped.append("\\" + c)
        elif c == "\n":
            escaped.append("\\n")
        elif c == "\r":
            escaped.append("\\r")
        elif c == "\t":
            escaped.append("\\t")
        elif ord(c) < 0x20 or ord(c) == 0x7F:
            escaped.append(f"\\u{ord(c):04x}")
        else:
            escaped.append(c)
    return "".join(escaped)


# =============================================================================
# BASE
# =============================================================================


class NumberSymbolsError(ValueError):
    """
    Базовая ошибка для всех нарушений инвариантов NumberSymbols.

    Attributes:
        field: Имя поля NumberSymbols (или параметра), к которому относится ошибка
    """

    def __init__(self, field: Optional[str], message: str):
        super().__init__(message)
        self.field = field


# =============================================================================
# SINGLE-FIELD ERRORS
# =============================================================================


class MissingSymbolError(NumberSymbolsError):
    """Обязательное значение не передано (None)"""

    def __init__(self, field: str):
        super().__init__(field, f"Missing {quote_string(field)}")


class InvalidSymbolCharacterError(NumberSymbolsError):
    """
    Одиночный символ не удовлетворяет предикату своего поля.

    Attributes:
        field: Имя поля
        value: Невалидный символ
    """

    def __init__(self, field: str, value: str):
        super().__init__(field, f"Invalid {field} character {quote_char(value)}")
        self.value = value


class InvalidSymbolStringError(NumberSymbolsError):
    """
    Строковое поле содержит непечатаемый символ.

    Attributes:
        field: Имя поля
        value: Невалидная строка
        position: Индекс первого невалидного символа (None для пустой строки)
    """

    def __init__(
        self,
        field: str,
        value: str,
        position: Optional[int],
        message: Optional[str] = None,
    ):
        if message is None:
            message = (
                f"Invalid character {quote_char(value[position])} "
                f"at {position} in {quote_string(field)}"
            )
        super().__init__(field, message)
        self.value = value
        self.position = position


class EmptySymbolError(InvalidSymbolStringError):
    """Строковое поле пустое"""

    def __init__(self, field: str):
        super().__init__(field, "", None, f"Empty {quote_string(field)}")


# =============================================================================
# CROSS-FIELD ERRORS
# =============================================================================


class DuplicateSymbolError(NumberSymbolsError):
    """
    Два поля, подлежащие проверке на уникальность, содержат один символ.

    Единственная межполевая ошибка. Вызывающий код может отличать её от
    ошибок формата (например, предложить другую локаль).

    Attributes:
        field: Поле, которое проверялось (более позднее в порядке объявления)
        other_field: Ранее проверенное поле с тем же значением
        value: Общий символ
    """

    def __init__(self, field: str, other_field: str, value: str):
        super().__init__(
            field,
            f"Duplicate {quote_string(field)} is same as "
            f"{quote_string(other_field)} {quote_char(value)}",
        )
        self.other_field = other_field
        self.value = value


# =============================================================================
# TEXT ERRORS
# =============================================================================


class MalformedSymbolsTextError(NumberSymbolsError):
    """
    Некорректный канонический текст: неверное число токенов или
    символьный токен длиной != 1.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(field, message)


class EmptySymbolTokenError(MalformedSymbolsTextError):
    """Пустой токен для символьного поля"""

    def __init__(self, field: str):
        super().__init__(f"Empty {quote_string(field)}", field)
