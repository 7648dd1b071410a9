"""
Contract Validation Module

JSON Schema validation of payloads entering and leaving the engine.
"""

from .validators import (
    ComplianceResultValidator,
    ContractValidator,
    MeasurementInputValidator,
    PressureConversionValidator,
    SchemaLoader,
    validate_compliance_result,
    validate_measurement_input,
    validate_pressure_conversion,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MeasurementInputValidator",
    "PressureConversionValidator",
    "ComplianceResultValidator",
    # Functions
    "validate_measurement_input",
    "validate_pressure_conversion",
    "validate_compliance_result",
]
