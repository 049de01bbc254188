"""
Rounding — Политики округления float до целого

Модуль реализует закрытый набор политик округления:
- UP / DOWN: от нуля / к нулю (по модулю, знак восстанавливается)
- CEILING / FLOOR: с учётом знака, без работы с модулем
- HALF_UP / HALF_DOWN: половина округляется от нуля / к нулю
- HALF_EVEN: по чётности усечённого исходного значения
- UNNECESSARY: значение обязано быть целым, иначе ошибка

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/+Inf/-Inf возвращаются без изменений при любой политике
2. Округление всегда возвращает float
3. Необработанная политика — дефект программы (UnhandledRoundingPolicyError),
   а не восстанавливаемая ошибка

ИЗВЕСТНАЯ ОСОБЕННОСТЬ HALF_EVEN:
    Чётность определяется по ИСХОДНОМУ значению, усечённому до 64-битного
    знакового целого (с насыщением на границах диапазона):
        odd  → HALF_UP
        even → HALF_DOWN
    Для |value| >= 2**63 это расходится с математическим half-even.
    Поведение сохранено намеренно.

НАСЫЩЕНИЕ HALF_UP:
    Модуль округляется до 64-битного целого, поэтому HALF_UP (и HALF_EVEN
    для нечётной ветви) при |value| >= 2**63 возвращает
    ±9.223372036854776e18, а не исходное значение.

ЗНАК НУЛЯ:
    Следует IEEE 754 ceil/floor: HALF_DOWN(-0.3) == +0.0,
    CEILING(-0.5) == -0.0.
"""

import math
from enum import Enum, IntEnum
from typing import Callable, Dict, Final

from numsym.core.math.numerical_safeguards import is_valid_float

# Границы 64-битного знакового целого (для усечения в HALF_EVEN)
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# ENUMS
# =============================================================================


class RoundingPolicy(str, Enum):
    """Политика округления"""

    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    UNNECESSARY = "UNNECESSARY"


class LegacyRoundingMode(IntEnum):
    """Числовые константы режимов округления в устаревшем целочисленном виде"""

    ROUND_UP = 0
    ROUND_DOWN = 1
    ROUND_CEILING = 2
    ROUND_FLOOR = 3
    ROUND_HALF_UP = 4
    ROUND_HALF_DOWN = 5
    ROUND_HALF_EVEN = 6
    ROUND_UNNECESSARY = 7


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonIntegralValueError(ValueError):
    """
    Политика UNNECESSARY применена к нецелому значению.

    Attributes:
        value: Исходное значение
    """

    def __init__(self, value: float):
        super().__init__(f"Invalid value {value}")
        self.value = value


class UnhandledRoundingPolicyError(AssertionError):
    """
    Политика вне закрытого перечисления дошла до диспетчеризации.

    Означает дефект программы, не должна перехватываться.
    """

    def __init__(self, policy: object):
        super().__init__(
            f"Unhandled rounding policy {policy!r}, expected one of "
            f"{[p.value for p in RoundingPolicy]}"
        )
        self.policy = policy


# =============================================================================
# ROUNDING PRIMITIVES
# =============================================================================
#
# Результаты совпадают с IEEE 754 ceil/floor вплоть до знака нуля:
# ceil(-0.3) == -0.0, floor(0.3) == 0.0.


def _ceil(x: float) -> float:
    rounded = math.ceil(x)
    return math.copysign(0.0, x) if rounded == 0 else float(rounded)


def _floor(x: float) -> float:
    rounded = math.floor(x)
    return math.copysign(0.0, x) if rounded == 0 else float(rounded)


def _with_sign(value: float, magnitude: float) -> float:
    return -magnitude if value < 0 else magnitude


def _up(value: float) -> float:
    return _with_sign(value, _ceil(abs(value)))


def _down(value: float) -> float:
    return _with_sign(value, _floor(abs(value)))


def _half_up(value: float) -> float:
    """
    Дробная часть модуля >= 0.5 округляется вверх.

    Модуль округляется до 64-битного целого с насыщением:
    |value| >= 2**63 даёт float(INT64_MAX) == 9.223372036854776e18.
    """
    magnitude = abs(value)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return _with_sign(value, float(min(rounded, INT64_MAX)))


def _half_down(value: float) -> float:
    """
    ceil(|value| - 0.5) со знаком исходного значения.

    Знак нуля следует из ceil: _half_down(-0.3) == +0.0,
    _half_down(0.3) == -0.0.
    """
    return _with_sign(value, _ceil(abs(value) - 0.5))


def truncate_to_int64(value: float) -> int:
    """
    Усечение к нулю до 64-битного знакового целого с насыщением.

    Examples:
        >>> truncate_to_int64(-3.7)
        -3
        >>> truncate_to_int64(1e300)
        9223372036854775807
    """
    return max(INT64_MIN, min(INT64_MAX, math.trunc(value)))


def _half_even(value: float) -> float:
    if truncate_to_int64(value) & 1 == 1:
        return _half_up(value)
    return _half_down(value)


def _unnecessary(value: float) -> float:
    rounded = _floor(value)
    if rounded != value:
        raise NonIntegralValueError(value)
    return rounded


_ROUNDERS: Final[Dict[RoundingPolicy, Callable[[float], float]]] = {
    RoundingPolicy.UP: _up,
    RoundingPolicy.DOWN: _down,
    RoundingPolicy.CEILING: _ceil,
    RoundingPolicy.FLOOR: _floor,
    RoundingPolicy.HALF_UP: _half_up,
    RoundingPolicy.HALF_DOWN: _half_down,
    RoundingPolicy.HALF_EVEN: _half_even,
    RoundingPolicy.UNNECESSARY: _unnecessary,
}

_LEGACY_MODES: Final[Dict[RoundingPolicy, LegacyRoundingMode]] = {
    RoundingPolicy.UP: LegacyRoundingMode.ROUND_UP,
    RoundingPolicy.DOWN: LegacyRoundingMode.ROUND_DOWN,
    RoundingPolicy.CEILING: LegacyRoundingMode.ROUND_CEILING,
    RoundingPolicy.FLOOR: LegacyRoundingMode.ROUND_FLOOR,
    RoundingPolicy.HALF_UP: LegacyRoundingMode.ROUND_HALF_UP,
    RoundingPolicy.HALF_DOWN: LegacyRoundingMode.ROUND_HALF_DOWN,
    RoundingPolicy.HALF_EVEN: LegacyRoundingMode.ROUND_HALF_EVEN,
    RoundingPolicy.UNNECESSARY: LegacyRoundingMode.ROUND_UNNECESSARY,
}


def _dispatch(table: Dict[RoundingPolicy, object], policy: RoundingPolicy):
    if policy is None:
        raise ValueError("rounding policy must not be None")
    if not isinstance(policy, RoundingPolicy):
        raise UnhandledRoundingPolicyError(policy)
    try:
        return table[policy]
    except KeyError:
        raise UnhandledRoundingPolicyError(policy) from None


# =============================================================================
# PUBLIC API
# =============================================================================


def round_value(value: float, policy: RoundingPolicy) -> float:
    """
    Округление float до целого по заданной политике.

    Args:
        value: Исходное значение
        policy: Политика округления

    Returns:
        Округлённое значение (float); NaN/Inf возвращаются как есть

    Raises:
        ValueError: policy is None
        NonIntegralValueError: UNNECESSARY и значение не целое
        UnhandledRoundingPolicyError: policy вне RoundingPolicy

    Examples:
        >>> round_value(2.5, RoundingPolicy.HALF_UP)
        3.0
        >>> round_value(2.5, RoundingPolicy.HALF_EVEN)
        2.0
        >>> round_value(-1.1, RoundingPolicy.CEILING)
        -1.0
    """
    rounder = _dispatch(_ROUNDERS, policy)
    if not is_valid_float(value):
        return value
    return rounder(value)


def to_legacy_rounding_mode(policy: RoundingPolicy) -> LegacyRoundingMode:
    """
    Отображение политики на эквивалентную устаревшую числовую константу.

    Raises:
        ValueError: policy is None
        UnhandledRoundingPolicyError: policy вне RoundingPolicy
    """
    return _dispatch(_LEGACY_MODES, policy)
