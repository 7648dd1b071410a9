"""
Blower Door — Envelope Airtightness (ACH50) Calculation & Compliance

RESNET / ASTM E779 blower door metrics and the Minnesota 2020 Energy Code
envelope limit (ACH50 <= 3.0).

FORMULAS:
    ACH50 = CFM50 * 60 / house_volume
    weather = sqrt((460 + T_in) / (460 + T_out)) * sqrt(P_baro / 29.92)
    altitude = sqrt(P_alt / 29.92),  P_alt = 29.92 * exp(-h / 28000)
    ELA = CFM50 / (2610 * sqrt(4))         (square inches at 4 Pa)

Correction factors are reported to 4 dp, everything else to 2 dp.
Multi-point CFM50 readings are averaged by average_multi_point_readings,
which shares the duct_leakage median outlier rule.
"""

import math
from collections.abc import Sequence
from typing import Final

from energy_compliance.calculators.duct_leakage import average_readings
from energy_compliance.core.domain import (
    ACH50ComplianceResult,
    AverageResult,
    WeatherConditions,
)
from energy_compliance.core.errors import InvalidInputError
from energy_compliance.core.math.numerical_safeguards import (
    CORRECTION_FACTOR_DECIMAL_PLACES,
    require_finite,
    require_finite_result,
    round_half_away,
)
from energy_compliance.core.ports import MetricsCounter

# =============================================================================
# CODE THRESHOLDS
# =============================================================================

ACH50_LIMIT_2020: Final[float] = 3.0

DEFAULT_CODE_YEAR: Final[str] = "2020"

# =============================================================================
# PHYSICAL CONSTANTS
# =============================================================================

# Fahrenheit -> Rankine offset
RANKINE_OFFSET_F: Final[float] = 460.0

# Temperatures at or below this are treated as below absolute zero
MIN_TEMPERATURE_F: Final[float] = -459.0

# Standard sea-level barometric pressure (inches Hg)
STANDARD_PRESSURE_INHG: Final[float] = 29.92

# Plausible barometric pressure range for a field test (inches Hg)
MIN_BAROMETRIC_INHG: Final[float] = 20.0
MAX_BAROMETRIC_INHG: Final[float] = 32.0

# Scale height for the exponential pressure-altitude approximation (ft)
PRESSURE_SCALE_HEIGHT_FT: Final[float] = 28000.0

# ELA reference pressure (Pa) and unit coefficient
ELA_REFERENCE_PRESSURE_PA: Final[float] = 4.0
ELA_COEFFICIENT: Final[float] = 2610.0


# =============================================================================
# ACH50
# =============================================================================


def calculate_ach50(cfm50: float, house_volume: float) -> float:
    """
    Air changes per hour at 50 Pa.

    Args:
        cfm50: Airflow at 50 Pa (CFM)
        house_volume: Conditioned volume (cubic feet)

    Returns:
        ACH50, 2 dp

    Raises:
        InvalidInputError: volume <= 0, cfm50 < 0, or non-finite input

    Examples:
        >>> calculate_ach50(1000, 20000)
        3.0
    """
    require_finite("CFM50 and volume must be finite numbers", cfm50, house_volume)

    if house_volume <= 0:
        raise InvalidInputError("Volume must be greater than zero")

    if cfm50 < 0:
        raise InvalidInputError("CFM50 cannot be negative")

    ach50 = require_finite_result(cfm50 * 60 / house_volume, "ACH50 is out of range")
    return round_half_away(ach50)


def check_ach50_compliance(
    ach50: float,
    code_year: str = DEFAULT_CODE_YEAR,
    *,
    metrics: MetricsCounter | None = None,
) -> ACH50ComplianceResult:
    """
    Check ACH50 against the Minnesota 2020 Energy Code limit.

    Args:
        ach50: Measured ACH50
        code_year: Code year label carried into the result
        metrics: Optional counter; one increment labelled
            {"test_type": "ACH50", "passed": "true"|"false"}

    Raises:
        InvalidInputError: ach50 negative or non-finite
    """
    require_finite("ACH50 must be a finite number", ach50)

    if ach50 < 0:
        raise InvalidInputError("ACH50 cannot be negative")

    compliant = ach50 <= ACH50_LIMIT_2020

    if metrics is not None:
        metrics.inc({"test_type": "ACH50", "passed": "true" if compliant else "false"})

    return ACH50ComplianceResult(
        ach50=ach50,
        code_limit=ACH50_LIMIT_2020,
        compliant=compliant,
        margin=round_half_away(ACH50_LIMIT_2020 - ach50),
        code_year=code_year,
    )


def average_multi_point_readings(
    readings: Sequence[float],
    detect_outliers: bool = True,
) -> AverageResult:
    """
    Average multi-point blower door readings (same outlier rule as duct tests).

    Raises:
        EmptyInputError: readings is empty
        InvalidInputError: "CFM readings cannot be negative", "All CFM readings
            must be finite numbers"
    """
    return average_readings(readings, detect_outliers, reading_label="CFM")


# =============================================================================
# CORRECTIONS
# =============================================================================


def apply_weather_corrections(conditions: WeatherConditions) -> float:
    """
    Temperature/pressure correction factor for a measured CFM.

    Args:
        conditions: Indoor/outdoor temperature (°F) and barometric pressure

    Returns:
        Multiplicative correction factor, 4 dp

    Raises:
        InvalidInputError: non-finite input, a temperature at/below absolute
            zero, or barometric pressure outside 20-32 inches Hg
    """
    indoor = conditions.indoor_temp_f
    outdoor = conditions.outdoor_temp_f
    barometric = conditions.barometric_pressure_inhg

    require_finite("All weather parameters must be finite numbers", indoor, outdoor, barometric)

    if indoor <= MIN_TEMPERATURE_F or outdoor <= MIN_TEMPERATURE_F:
        raise InvalidInputError("Temperature below absolute zero")

    if barometric < MIN_BAROMETRIC_INHG or barometric > MAX_BAROMETRIC_INHG:
        raise InvalidInputError(
            "Barometric pressure out of realistic range (20-32 inches Hg)"
        )

    temperature_correction = math.sqrt(
        (indoor + RANKINE_OFFSET_F) / (outdoor + RANKINE_OFFSET_F)
    )
    pressure_correction = math.sqrt(barometric / STANDARD_PRESSURE_INHG)

    return round_half_away(
        temperature_correction * pressure_correction, CORRECTION_FACTOR_DECIMAL_PLACES
    )


def calculate_altitude_correction(altitude_ft: float) -> float:
    """
    Air density correction for test site elevation (<= 1.0).

    Raises:
        InvalidInputError: altitude negative or non-finite
    """
    require_finite("Altitude must be a finite number", altitude_ft)

    if altitude_ft < 0:
        raise InvalidInputError("Altitude cannot be negative")

    if altitude_ft == 0:
        return 1.0

    pressure_at_altitude = STANDARD_PRESSURE_INHG * math.exp(
        -altitude_ft / PRESSURE_SCALE_HEIGHT_FT
    )
    correction = math.sqrt(pressure_at_altitude / STANDARD_PRESSURE_INHG)

    return round_half_away(correction, CORRECTION_FACTOR_DECIMAL_PLACES)


def apply_corrected_cfm50(
    measured_cfm: float,
    weather: WeatherConditions,
    altitude_ft: float = 0.0,
) -> float:
    """CFM50 adjusted for weather and altitude, 2 dp."""
    require_finite("Measured CFM must be a finite number", measured_cfm)

    if measured_cfm < 0:
        raise InvalidInputError("CFM50 cannot be negative")

    weather_correction = apply_weather_corrections(weather)
    altitude_correction = calculate_altitude_correction(altitude_ft)

    corrected = require_finite_result(
        measured_cfm * weather_correction * altitude_correction,
        "Corrected CFM50 is out of range",
    )
    return round_half_away(corrected)


def calculate_ela(cfm50: float) -> float:
    """
    Effective Leakage Area in square inches.

    Raises:
        InvalidInputError: cfm50 negative or non-finite
    """
    require_finite("CFM50 must be a finite number", cfm50)

    if cfm50 < 0:
        raise InvalidInputError("CFM50 cannot be negative")

    ela = cfm50 / (ELA_COEFFICIENT * math.sqrt(ELA_REFERENCE_PRESSURE_PA))
    return round_half_away(ela)
