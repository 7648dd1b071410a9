"""
Domain models and value objects.

Measurement inputs, calculator results, business-entity records and the
closed enums used by the validation rules.
"""

from energy_compliance.core.domain.entities import (
    BuilderProfile,
    ContactProfile,
    HierarchyLink,
    TemporalWindow,
)
from energy_compliance.core.domain.enums import (
    ClosedEnum,
    ContactRole,
    ExpirationCategory,
    PreferredContactMethod,
    VolumeTier,
)
from energy_compliance.core.domain.measurements import (
    MeasurementInput,
    PressureConversion,
    WeatherConditions,
)
from energy_compliance.core.domain.results import (
    ACH50ComplianceResult,
    AverageResult,
    ComplianceResult,
    ExpirationStatus,
    LeakageMetrics,
)

__all__ = [
    # Enums
    "ClosedEnum",
    "ContactRole",
    "ExpirationCategory",
    "PreferredContactMethod",
    "VolumeTier",
    # Measurements
    "MeasurementInput",
    "PressureConversion",
    "WeatherConditions",
    # Results
    "ACH50ComplianceResult",
    "AverageResult",
    "ComplianceResult",
    "ExpirationStatus",
    "LeakageMetrics",
    # Entities
    "BuilderProfile",
    "ContactProfile",
    "HierarchyLink",
    "TemporalWindow",
]
