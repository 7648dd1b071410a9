"""Calculators — field measurement to code-compliance metrics.

- duct_leakage: TDL / DLO, multi-sample averaging, pressure conversion,
  Minnesota 2020 duct leakage thresholds
- blower_door: ACH50, multi-point averaging, weather/altitude corrections,
  ELA, ACH50 threshold
"""

from .blower_door import (
    ACH50_LIMIT_2020,
    apply_corrected_cfm50,
    apply_weather_corrections,
    average_multi_point_readings,
    calculate_ach50,
    calculate_altitude_correction,
    calculate_ela,
    check_ach50_compliance,
)
from .duct_leakage import (
    DEFAULT_CODE_YEAR,
    DLO_LIMIT_2020,
    OUTLIER_DEVIATION_FRAC,
    OUTLIER_MIN_SAMPLES,
    POWER_LAW_EXPONENT,
    TDL_LIMIT_2020,
    average_readings,
    calculate_dlo,
    calculate_tdl,
    check_compliance_threshold,
    convert_pressure,
    convert_pressure_input,
    evaluate_measurement,
    percent_of_system_airflow,
    validate_leakage_consistency,
)

__all__ = [
    # Duct leakage
    "DEFAULT_CODE_YEAR",
    "DLO_LIMIT_2020",
    "OUTLIER_DEVIATION_FRAC",
    "OUTLIER_MIN_SAMPLES",
    "POWER_LAW_EXPONENT",
    "TDL_LIMIT_2020",
    "average_readings",
    "calculate_dlo",
    "calculate_tdl",
    "check_compliance_threshold",
    "convert_pressure",
    "convert_pressure_input",
    "evaluate_measurement",
    "percent_of_system_airflow",
    "validate_leakage_consistency",
    # Blower door
    "ACH50_LIMIT_2020",
    "apply_corrected_cfm50",
    "apply_weather_corrections",
    "average_multi_point_readings",
    "calculate_ach50",
    "calculate_altitude_correction",
    "calculate_ela",
    "check_ach50_compliance",
]
