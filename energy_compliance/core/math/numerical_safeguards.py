"""
Numerical Safeguards — Safe Math Primitives

The engine's numerical preconditions and rounding live here so that every
calculator applies them identically:
- Finite checks (NaN/Inf never reach a formula)
- Sign/positivity guards raising InvalidInputError with caller-supplied text
- Fixed-decimal rounding, half away from zero
- Float comparison with tolerance (for tests and downstream callers)

CRITICAL INVARIANTS:
1. NaN/Inf are rejected before any comparison is made with them
2. Rounding never uses banker's rounding: 2.675 -> 2.68, -2.675 -> -2.68
3. All operations are deterministic and reproducible
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from energy_compliance.core.errors import InvalidInputError

# =============================================================================
# PARAMETERS
# =============================================================================

# Default number of decimal places for reported metrics (TDL, DLO, margins, ...)
DEFAULT_DECIMAL_PLACES: Final[int] = 2

# Decimal places for dimensionless correction factors (weather, altitude)
CORRECTION_FACTOR_DECIMAL_PLACES: Final[int] = 4

# Above this magnitude a float carries no fractional digits worth rounding
ROUNDING_MAGNITUDE_CEILING: Final[float] = 2.0**53

# Tolerances for is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# FINITE CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a number is finite (not NaN, not +/-Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite
    """
    return math.isfinite(value)


def require_finite(message: str, *values: float) -> None:
    """
    Reject the call if any of the values is NaN or infinite.

    Args:
        message: Error message for the caller
        *values: Values that must all be finite

    Raises:
        InvalidInputError: If any value is NaN/Inf
    """
    for value in values:
        if not is_valid_float(value):
            raise InvalidInputError(message)


def require_finite_result(value: float, message: str) -> float:
    """
    Pass through a computed value, rejecting overflow to Inf/NaN.

    Finite inputs can still produce a non-finite result (1e308 * 60).

    Returns:
        value, unchanged

    Raises:
        InvalidInputError: If value is NaN/Inf
    """
    if not is_valid_float(value):
        raise InvalidInputError(message)
    return value


def require_positive(value: float, message: str) -> None:
    """
    Reject zero or negative values (and non-finite ones).

    Raises:
        InvalidInputError: If value <= 0 or NaN/Inf
    """
    if not is_valid_float(value) or value <= 0:
        raise InvalidInputError(message)


def require_non_negative(value: float, message: str) -> None:
    """
    Reject negative values (and non-finite ones).

    Raises:
        InvalidInputError: If value < 0 or NaN/Inf
    """
    if not is_valid_float(value) or value < 0:
        raise InvalidInputError(message)


# =============================================================================
# ROUNDING
# =============================================================================


def round_half_away(value: float, places: int = DEFAULT_DECIMAL_PLACES) -> float:
    """
    Round to a fixed number of decimals, half away from zero.

    The float is first taken at its shortest decimal representation, so a
    value displayed as 1.005 rounds to 1.01 (currency-style) rather than to
    1.0 as its binary expansion 1.00499999... would suggest.

    Args:
        value: Finite value to round
        places: Number of decimal places (>= 0)

    Returns:
        Rounded value

    Raises:
        ValueError: If places is negative

    Examples:
        >>> round_half_away(2.675)
        2.68
        >>> round_half_away(-2.675)
        -2.68
        >>> round_half_away(0.125)
        0.13
        >>> round_half_away(1.23456, 4)
        1.2346
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    if not is_valid_float(value) or abs(value) >= ROUNDING_MAGNITUDE_CEILING:
        return value

    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


# =============================================================================
# COMPARISONS
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Compare floats with machine-precision tolerance.

    abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
