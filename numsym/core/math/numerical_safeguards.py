"""
Numerical Safeguards — Классификация и конверсия чисел

Модуль определяет, что считается "стандартным числом", и обеспечивает
безопасную конверсию в Decimal:
- Проверка конечности float (NaN/Inf)
- Классификация стандартных числовых типов (int, float, Decimal)
- Конверсия стандартного числа в Decimal без шума двоичной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool НЕ является числом (хотя и является подклассом int)
2. Подклассы стандартных типов НЕ считаются стандартными числами
3. NaN/Inf никогда не конвертируются в Decimal (возвращается None)
"""

import math
from decimal import Decimal
from typing import Any, Final, Optional

# =============================================================================
# СТАНДАРТНЫЕ ЧИСЛОВЫЕ ТИПЫ
# =============================================================================

# Точное совпадение типа: пользовательские подклассы не принимаются
NUMBER_TYPES: Final[tuple[type, ...]] = (int, float, Decimal)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_number_type(value_type: type) -> bool:
    """
    Проверка, является ли тип стандартным числовым типом.

    Args:
        value_type: Проверяемый тип

    Returns:
        True только для int, float, Decimal (не для bool и подклассов)

    Examples:
        >>> is_number_type(int)
        True
        >>> is_number_type(bool)
        False
    """
    return value_type in NUMBER_TYPES


def is_number(value: Any) -> bool:
    """
    Проверка, является ли значение стандартным числом.

    Args:
        value: Любое значение (None допустим)

    Returns:
        True если type(value) — стандартный числовой тип
    """
    return value is not None and is_number_type(type(value))


# =============================================================================
# КОНВЕРСИЯ В DECIMAL
# =============================================================================


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Конверсия стандартного числа в Decimal.

    float конвертируется через repr, поэтому 0.1 → Decimal("0.1"),
    а не точное двоичное значение.

    Args:
        value: Любое значение

    Returns:
        Decimal, или None если значение не стандартное число
        либо float NaN/Inf (Decimal NaN/Inf тоже → None)

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("1") is None
        True
    """
    if not is_number(value):
        return None

    if isinstance(value, Decimal):
        return value if value.is_finite() else None

    if isinstance(value, float):
        if not is_valid_float(value):
            return None
        return Decimal(repr(value))

    return Decimal(value)
