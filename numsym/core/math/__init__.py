"""
Core math modules для numsym

Политики округления и классификация стандартных чисел.
"""

# Numerical Safeguards
from numsym.core.math.numerical_safeguards import (
    NUMBER_TYPES,
    is_number,
    is_number_type,
    is_valid_float,
    to_decimal,
)

# Rounding
from numsym.core.math.rounding import (
    INT64_MAX,
    INT64_MIN,
    LegacyRoundingMode,
    NonIntegralValueError,
    RoundingPolicy,
    UnhandledRoundingPolicyError,
    round_value,
    to_legacy_rounding_mode,
    truncate_to_int64,
)

__all__ = [
    # Numerical Safeguards
    "NUMBER_TYPES",
    "is_number",
    "is_number_type",
    "is_valid_float",
    "to_decimal",
    # Rounding: Constants
    "INT64_MAX",
    "INT64_MIN",
    # Rounding: Types
    "LegacyRoundingMode",
    "RoundingPolicy",
    # Rounding: Exceptions
    "NonIntegralValueError",
    "UnhandledRoundingPolicyError",
    # Rounding: Functions
    "round_value",
    "to_legacy_rounding_mode",
    "truncate_to_int64",
]
