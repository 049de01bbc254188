"""
Symbol Predicates — Предикаты формата для полей NumberSymbols

Предикаты публичные: вызывающий код может проверить кандидата
до построения NumberSymbols (например, при выборе символов из UI).

Правила:
- PRINTABLE: не управляющий ASCII символ (< 0x20 или 0x7F)
- SYMBOL: PRINTABLE, не буква, не цифра, не пробельный символ
- PERMILL_SYMBOL: PRINTABLE, не буква, не пробельный символ (цифры разрешены)
- ZERO_DIGIT: десятичная цифра Unicode (категория Nd)
- STRING: непустая строка, все символы PRINTABLE

Неразрывные пробелы (U+00A0, U+2007, U+202F) НЕ считаются пробельными:
они используются как разделители групп (например, во французской локали).
"""

import unicodedata
from typing import Final

_NO_BREAK_SPACES: Final[frozenset[str]] = frozenset("\u00a0\u2007\u202f")

# TAB, LF, VT, FF, CR и разделители файлов/групп/записей/единиц
_CONTROL_WHITESPACE: Final[frozenset[str]] = frozenset("\t\n\x0b\x0c\r\x1c\x1d\x1e\x1f")

_SEPARATOR_CATEGORIES: Final[frozenset[str]] = frozenset({"Zs", "Zl", "Zp"})


def is_printable(c: str) -> bool:
    """True если символ не является управляющим ASCII символом"""
    code = ord(c)
    return not (code < 0x20 or code == 0x7F)


def is_letter(c: str) -> bool:
    """True для букв Unicode (категории L*)"""
    return unicodedata.category(c).startswith("L")


def is_digit(c: str) -> bool:
    """True для десятичных цифр Unicode (категория Nd)"""
    return unicodedata.category(c) == "Nd"


def is_whitespace(c: str) -> bool:
    """True для пробельных символов, кроме неразрывных пробелов"""
    if c in _CONTROL_WHITESPACE:
        return True
    return unicodedata.category(c) in _SEPARATOR_CATEGORIES and c not in _NO_BREAK_SPACES


def is_symbol(c: str) -> bool:
    """
    Предикат для всех символьных полей, кроме permill_symbol и zero_digit.

    Returns:
        True если символ печатный и не буква, не цифра, не пробельный
    """
    return is_printable(c) and not (is_letter(c) or is_digit(c)) and not is_whitespace(c)


def is_permill_symbol(c: str) -> bool:
    """
    Предикат для permill_symbol.

    Мягче, чем is_symbol: цифроподобные символы промилле встречаются
    в некоторых письменностях, поэтому цифры разрешены.
    """
    return is_printable(c) and not is_letter(c) and not is_whitespace(c)


def is_zero_digit(c: str) -> bool:
    """Предикат для zero_digit: любая десятичная цифра Unicode"""
    return is_digit(c)


def is_symbol_string(value: str) -> bool:
    """
    Предикат для строковых полей (currency_symbol, exponent_symbol,
    infinity_symbol, nan_symbol).

    Returns:
        True если строка непустая и все символы печатные
    """
    return len(value) > 0 and all(is_printable(c) for c in value)
