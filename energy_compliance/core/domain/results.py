"""
Results — Calculator and classifier output models

Immutable Pydantic models returned by the calculators and the expiration
classifier. model_dump(mode="json") of each model is what
core.contracts validates at the HTTP boundary.

Margin sign convention (callers format margins directly):
    margin = limit - measured
    positive -> under the limit (passing)
    negative -> over the limit (failing)
"""

from pydantic import BaseModel, Field, field_validator

from .enums import ExpirationCategory


class LeakageMetrics(BaseModel):
    """TDL and DLO computed from one consistent set of readings."""

    tdl: float = Field(..., ge=0, description="Total duct leakage (CFM25 per 100 sq ft)")
    dlo: float = Field(..., ge=0, description="Duct leakage to outside (CFM25 per 100 sq ft)")

    model_config = {"frozen": True}


class ComplianceResult(BaseModel):
    """
    Duct leakage verdict against an energy code.

    overall_compliant is the conjunction of the per-metric verdicts.
    """

    tdl: float = Field(..., ge=0, description="Measured TDL")
    dlo: float = Field(..., ge=0, description="Measured DLO")
    tdl_limit: float = Field(..., gt=0, description="Code limit for TDL")
    dlo_limit: float = Field(..., gt=0, description="Code limit for DLO")
    tdl_compliant: bool
    dlo_compliant: bool
    overall_compliant: bool
    tdl_margin: float = Field(..., description="tdl_limit - tdl (2 dp)")
    dlo_margin: float = Field(..., description="dlo_limit - dlo (2 dp)")
    code_year: str = Field(..., min_length=1, description="Energy code year")

    model_config = {"frozen": True}

    @field_validator("overall_compliant")
    @classmethod
    def validate_overall_is_conjunction(cls, v: bool, info) -> bool:
        """overall_compliant == tdl_compliant and dlo_compliant"""
        if "tdl_compliant" in info.data and "dlo_compliant" in info.data:
            expected = info.data["tdl_compliant"] and info.data["dlo_compliant"]
            if v != expected:
                raise ValueError(
                    f"overall_compliant {v} must equal tdl_compliant and dlo_compliant ({expected})"
                )
        return v


class AverageResult(BaseModel):
    """
    Mean of a set of readings with optional outlier report.

    outliers is None (not an empty tuple) whenever has_outliers is False;
    callers distinguish "no outlier check / nothing flagged" by absence.
    """

    average: float = Field(..., ge=0)
    outliers: tuple[float, ...] | None = None
    has_outliers: bool = Field(False, validate_default=True)

    model_config = {"frozen": True}

    @field_validator("has_outliers")
    @classmethod
    def validate_flag_matches_outliers(cls, v: bool, info) -> bool:
        outliers = info.data.get("outliers")
        if v != bool(outliers):
            raise ValueError("has_outliers must be True exactly when outliers are present")
        return v


class ACH50ComplianceResult(BaseModel):
    """Blower door (envelope airtightness) verdict."""

    ach50: float = Field(..., ge=0, description="Air changes per hour at 50 Pa")
    code_limit: float = Field(..., gt=0)
    compliant: bool
    margin: float = Field(..., description="code_limit - ach50 (2 dp)")
    code_year: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class ExpirationStatus(BaseModel):
    """
    Urgency classification of an end date.

    days_until_expiration is None when there is no end date (unbounded).
    """

    category: ExpirationCategory
    days_until_expiration: int | None
    message: str

    model_config = {"frozen": True}
