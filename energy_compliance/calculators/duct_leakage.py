"""
Duct Leakage — TDL/DLO Calculation & Code Compliance

RESNET / ASHRAE 152 duct leakage metrics and Minnesota 2020 Energy Code
thresholds:
- Total Duct Leakage (TDL)          <= 4.0 CFM25 per 100 sq ft
- Duct Leakage to Outside (DLO)     <= 3.0 CFM25 per 100 sq ft

CRITICAL INVARIANTS:
1. Every reported number is rounded to 2 dp, half away from zero
2. DLO raw reading never exceeds TDL raw reading (else measurement error)
3. Margin = limit - value (positive = passing, negative = failing)
4. Pressure conversion uses the fixed power-law exponent 0.6
5. No function holds state: identical inputs give identical outputs

FORMULAS:
    TDL = cfm25_total   / floor_area * 100
    DLO = cfm25_outside / floor_area * 100
    CFM_to = CFM_from * (P_to / P_from) ** 0.6
    percent_of_system = cfm25 / system_airflow * 100
"""

from collections.abc import Sequence
from typing import Final

from energy_compliance.core.domain import (
    AverageResult,
    ComplianceResult,
    LeakageMetrics,
    MeasurementInput,
    PressureConversion,
)
from energy_compliance.core.errors import (
    EmptyInputError,
    InvalidInputError,
    PhysicallyInconsistentMeasurementError,
)
from energy_compliance.core.math.numerical_safeguards import (
    is_valid_float,
    require_finite,
    require_finite_result,
    round_half_away,
)
from energy_compliance.core.ports import MetricsCounter

# =============================================================================
# CODE THRESHOLDS (Minnesota 2020 Energy Code)
# =============================================================================

# CFM25 per 100 sq ft
TDL_LIMIT_2020: Final[float] = 4.0
DLO_LIMIT_2020: Final[float] = 3.0

DEFAULT_CODE_YEAR: Final[str] = "2020"

# =============================================================================
# MEASUREMENT PARAMETERS
# =============================================================================

# Duct leakage power-law exponent n in Q = C * dP^n
POWER_LAW_EXPONENT: Final[float] = 0.6

# A reading deviating from the median by more than this fraction is an outlier
OUTLIER_DEVIATION_FRAC: Final[float] = 0.20

# Outlier detection needs at least this many samples
OUTLIER_MIN_SAMPLES: Final[int] = 3


# =============================================================================
# TDL / DLO
# =============================================================================


def _normalized_leakage(cfm25: float, floor_area: float, negative_message: str) -> float:
    require_finite("CFM25 and floor area must be finite numbers", cfm25, floor_area)

    if floor_area <= 0:
        raise InvalidInputError("Floor area must be greater than zero")

    if cfm25 < 0:
        raise InvalidInputError(negative_message)

    leakage = require_finite_result(
        cfm25 / floor_area * 100, "Duct leakage is out of range for this floor area"
    )
    return round_half_away(leakage)


def calculate_tdl(cfm25_total: float, floor_area: float) -> float:
    """
    Total Duct Leakage normalized to floor area.

    TDL = (cfm25_total / floor_area) * 100

    Args:
        cfm25_total: Total duct leakage at 25 Pa (CFM)
        floor_area: Conditioned floor area (sq ft)

    Returns:
        TDL in CFM25 per 100 sq ft, 2 dp

    Raises:
        InvalidInputError: non-finite input, floor_area <= 0, cfm25_total < 0

    Examples:
        >>> calculate_tdl(80, 2000)
        4.0
        >>> calculate_tdl(66.666, 2000)
        3.33
    """
    return _normalized_leakage(cfm25_total, floor_area, "CFM25 cannot be negative")


def calculate_dlo(cfm25_outside: float, floor_area: float) -> float:
    """
    Duct Leakage to Outside normalized to floor area.

    DLO = (cfm25_outside / floor_area) * 100

    Raises:
        InvalidInputError: non-finite input, floor_area <= 0, cfm25_outside < 0
    """
    return _normalized_leakage(
        cfm25_outside, floor_area, "CFM25 to outside cannot be negative"
    )


def validate_leakage_consistency(
    cfm25_total: float,
    cfm25_outside: float,
    floor_area: float,
) -> LeakageMetrics:
    """
    Compute TDL and DLO and check they are physically consistent.

    Leakage to outside is part of total leakage, so cfm25_outside greater
    than cfm25_total means a measurement error (wrong hose, wrong ring,
    transposed entries).

    Args:
        cfm25_total: Total duct leakage at 25 Pa (CFM)
        cfm25_outside: Duct leakage to outside at 25 Pa (CFM)
        floor_area: Conditioned floor area (sq ft)

    Returns:
        LeakageMetrics(tdl, dlo)

    Raises:
        InvalidInputError: from calculate_tdl / calculate_dlo
        PhysicallyInconsistentMeasurementError: cfm25_outside > cfm25_total,
            carrying both raw readings
    """
    tdl = calculate_tdl(cfm25_total, floor_area)
    dlo = calculate_dlo(cfm25_outside, floor_area)

    # Compared on raw readings: rounding could hide a small inversion
    if cfm25_outside > cfm25_total:
        raise PhysicallyInconsistentMeasurementError(
            f"DLO cannot exceed TDL: CFM25 to outside ({cfm25_outside}) > "
            f"Total CFM25 ({cfm25_total}). Check measurements.",
            cfm25_total=cfm25_total,
            cfm25_outside=cfm25_outside,
        )

    return LeakageMetrics(tdl=tdl, dlo=dlo)


# =============================================================================
# MULTI-SAMPLE AVERAGING
# =============================================================================


def _relative_deviation(reading: float, median: float) -> float:
    if median == 0:
        # 0/0 is no deviation; anything else over a zero median is unbounded
        return 0.0 if reading == 0 else float("inf")
    return abs((reading - median) / median)


def average_readings(
    readings: Sequence[float],
    detect_outliers: bool = True,
    *,
    reading_label: str = "CFM25",
) -> AverageResult:
    """
    Average repeated duct blaster (or blower door) readings.

    Standard practice is 3-5 readings per test. With detect_outliers and at
    least OUTLIER_MIN_SAMPLES readings, any reading more than 20% away from
    the median is reported.

    The median is sorted[len // 2]: for an even count this is the upper of
    the two middle elements of the ascending sort, not their mean. Results
    for even-length inputs depend on this exact choice.

    Args:
        readings: CFM readings, non-negative and finite
        detect_outliers: Whether to run outlier detection
        reading_label: Reading name used in error messages ("CFM25", "CFM")

    Returns:
        AverageResult; outliers is None when nothing was flagged

    Raises:
        EmptyInputError: readings is empty
        InvalidInputError: a reading is negative or non-finite

    Examples:
        >>> average_readings([100, 102, 98, 150]).outliers
        (150.0,)
    """
    if not readings:
        raise EmptyInputError(f"Cannot average empty array of {reading_label} readings")

    for reading in readings:
        if not is_valid_float(reading):
            raise InvalidInputError(f"All {reading_label} readings must be finite numbers")
        if reading < 0:
            raise InvalidInputError(f"{reading_label} readings cannot be negative")

    average = require_finite_result(
        sum(readings) / len(readings), f"Average of {reading_label} readings is out of range"
    )

    outliers: tuple[float, ...] = ()
    if detect_outliers and len(readings) >= OUTLIER_MIN_SAMPLES:
        ordered = sorted(readings)
        median = ordered[len(ordered) // 2]
        outliers = tuple(
            reading
            for reading in readings
            if _relative_deviation(reading, median) > OUTLIER_DEVIATION_FRAC
        )

    has_outliers = len(outliers) > 0
    return AverageResult(
        average=round_half_away(average),
        outliers=outliers if has_outliers else None,
        has_outliers=has_outliers,
    )


# =============================================================================
# CODE COMPLIANCE
# =============================================================================


def _passed_label(passed: bool) -> str:
    return "true" if passed else "false"


def check_compliance_threshold(
    tdl: float,
    dlo: float,
    code_year: str = DEFAULT_CODE_YEAR,
    *,
    metrics: MetricsCounter | None = None,
) -> ComplianceResult:
    """
    Check TDL and DLO against the Minnesota 2020 Energy Code limits.

    Both metrics must be at or under their limit for overall compliance.

    Args:
        tdl: Total Duct Leakage (CFM25 per 100 sq ft)
        dlo: Duct Leakage to Outside (CFM25 per 100 sq ft)
        code_year: Code year label carried into the result
        metrics: Optional counter; receives one increment per metric with
            labels {"test_type": "TDL"|"DLO", "passed": "true"|"false"}

    Returns:
        ComplianceResult

    Raises:
        InvalidInputError: tdl or dlo negative or non-finite

    Examples:
        >>> r = check_compliance_threshold(3.5, 2.0)
        >>> (r.overall_compliant, r.tdl_margin, r.dlo_margin)
        (True, 0.5, 1.0)
    """
    require_finite("TDL and DLO must be finite numbers", tdl, dlo)

    if tdl < 0:
        raise InvalidInputError("TDL cannot be negative")

    if dlo < 0:
        raise InvalidInputError("DLO cannot be negative")

    tdl_compliant = tdl <= TDL_LIMIT_2020
    dlo_compliant = dlo <= DLO_LIMIT_2020

    if metrics is not None:
        metrics.inc({"test_type": "TDL", "passed": _passed_label(tdl_compliant)})
        metrics.inc({"test_type": "DLO", "passed": _passed_label(dlo_compliant)})

    return ComplianceResult(
        tdl=tdl,
        dlo=dlo,
        tdl_limit=TDL_LIMIT_2020,
        dlo_limit=DLO_LIMIT_2020,
        tdl_compliant=tdl_compliant,
        dlo_compliant=dlo_compliant,
        overall_compliant=tdl_compliant and dlo_compliant,
        tdl_margin=round_half_away(TDL_LIMIT_2020 - tdl),
        dlo_margin=round_half_away(DLO_LIMIT_2020 - dlo),
        code_year=code_year,
    )


def evaluate_measurement(
    measurement: MeasurementInput,
    code_year: str = DEFAULT_CODE_YEAR,
    *,
    metrics: MetricsCounter | None = None,
) -> ComplianceResult:
    """Consistency check followed by the threshold check, for a validated input model."""
    leakage = validate_leakage_consistency(
        measurement.cfm25_total,
        measurement.cfm25_outside,
        measurement.floor_area,
    )
    return check_compliance_threshold(
        leakage.tdl, leakage.dlo, code_year, metrics=metrics
    )


# =============================================================================
# UNIT CONVERSIONS
# =============================================================================


def convert_pressure(cfm: float, from_pressure: float, to_pressure: float) -> float:
    """
    Translate an airflow reading to another test pressure.

    CFM_to = CFM_from * (P_to / P_from) ** 0.6

    Typical uses: CFM50 -> CFM25 (blower door to duct test), CFM10 -> CFM25.

    Args:
        cfm: Measured airflow (CFM)
        from_pressure: Pressure of the measurement (Pa)
        to_pressure: Target pressure (Pa)

    Returns:
        Converted airflow at to_pressure, 2 dp

    Raises:
        InvalidInputError: cfm < 0, a pressure <= 0, or non-finite input

    Examples:
        >>> convert_pressure(100, 25, 25)
        100.0
        >>> convert_pressure(100, 50, 25)
        65.98
    """
    require_finite(
        "All parameters must be finite numbers", cfm, from_pressure, to_pressure
    )

    if cfm < 0:
        raise InvalidInputError("CFM cannot be negative")

    if from_pressure <= 0 or to_pressure <= 0:
        raise InvalidInputError("Pressure differentials must be greater than zero")

    converted = require_finite_result(
        cfm * (to_pressure / from_pressure) ** POWER_LAW_EXPONENT,
        "Converted CFM is out of range",
    )
    return round_half_away(converted)


def convert_pressure_input(conversion: PressureConversion) -> float:
    """convert_pressure for a validated PressureConversion model."""
    return convert_pressure(
        conversion.cfm, conversion.from_pressure, conversion.to_pressure
    )


def percent_of_system_airflow(cfm25: float, system_airflow: float) -> float:
    """
    Duct leakage as a percentage of design system airflow.

    Rough guide: under 10% is good, under 15% acceptable.

    Raises:
        InvalidInputError: system_airflow <= 0, cfm25 < 0, or non-finite input
    """
    require_finite(
        "CFM25 and system airflow must be finite numbers", cfm25, system_airflow
    )

    if system_airflow <= 0:
        raise InvalidInputError("System airflow must be greater than zero")

    if cfm25 < 0:
        raise InvalidInputError("CFM25 cannot be negative")

    percent = require_finite_result(
        cfm25 / system_airflow * 100, "Percent of system airflow is out of range"
    )
    return round_half_away(percent)
