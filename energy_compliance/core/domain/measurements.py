"""
Measurements — Field measurement input models

Immutable Pydantic models for raw readings taken on site. They enforce the
physical invariants at construction time, so a caller that builds one from an
HTTP payload gets a pydantic ValidationError for bad input before any
calculator is called.
"""

from pydantic import BaseModel, Field, field_validator


class MeasurementInput(BaseModel):
    """
    Duct blaster readings for one system.

    cfm25_outside can never exceed cfm25_total: leakage to outside is a
    subset of total leakage.
    """

    cfm25_total: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Total duct leakage at 25 Pa (CFM)"
    )
    cfm25_outside: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Duct leakage to outside at 25 Pa (CFM)"
    )
    floor_area: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Conditioned floor area (sq ft)"
    )

    model_config = {"frozen": True}

    @field_validator("cfm25_outside")
    @classmethod
    def validate_outside_not_above_total(cls, v: float, info) -> float:
        """cfm25_outside <= cfm25_total"""
        if "cfm25_total" in info.data:
            total = info.data["cfm25_total"]
            if v > total:
                raise ValueError(
                    f"cfm25_outside {v} must not exceed cfm25_total {total}"
                )
        return v


class PressureConversion(BaseModel):
    """Airflow reading to be translated from one test pressure to another."""

    cfm: float = Field(..., ge=0, allow_inf_nan=False, description="Measured airflow (CFM)")
    from_pressure: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Test pressure of the reading (Pa)"
    )
    to_pressure: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Target pressure (Pa)"
    )

    model_config = {"frozen": True}


class WeatherConditions(BaseModel):
    """
    Conditions during a blower door test.

    Range checks are left to calculators.blower_door.apply_weather_corrections
    so that they surface as engine errors with field-crew friendly messages.
    """

    indoor_temp_f: float = Field(..., description="Indoor temperature (°F)")
    outdoor_temp_f: float = Field(..., description="Outdoor temperature (°F)")
    barometric_pressure_inhg: float = Field(
        ..., description="Barometric pressure (inches Hg)"
    )

    model_config = {"frozen": True}
