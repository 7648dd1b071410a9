"""
Core math modules for the compliance engine.

Finite checks, guards and rounding shared by every calculator.
"""

from energy_compliance.core.math.numerical_safeguards import (
    # Parameters
    CORRECTION_FACTOR_DECIMAL_PLACES,
    DEFAULT_DECIMAL_PLACES,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ROUNDING_MAGNITUDE_CEILING,
    # Finite checks and guards
    is_valid_float,
    require_finite,
    require_finite_result,
    require_non_negative,
    require_positive,
    # Rounding
    round_half_away,
    # Comparisons
    is_close,
)

__all__ = [
    # Parameters
    "CORRECTION_FACTOR_DECIMAL_PLACES",
    "DEFAULT_DECIMAL_PLACES",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "ROUNDING_MAGNITUDE_CEILING",
    # Finite checks and guards
    "is_valid_float",
    "require_finite",
    "require_finite_result",
    "require_non_negative",
    "require_positive",
    # Rounding
    "round_half_away",
    # Comparisons
    "is_close",
]
