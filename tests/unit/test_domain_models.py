"""
Tests for domain models

Checks:
1. Measurement inputs enforce physical invariants at construction
2. Result models enforce their cross-field invariants
3. Models are immutable
4. Closed enums expose their members in declaration order
"""

import pytest
from pydantic import ValidationError

from energy_compliance.core.domain import (
    AverageResult,
    ComplianceResult,
    ContactRole,
    ExpirationCategory,
    HierarchyLink,
    MeasurementInput,
    PreferredContactMethod,
    PressureConversion,
    TemporalWindow,
    VolumeTier,
)


@pytest.fixture
def compliance_kwargs() -> dict:
    return {
        "tdl": 3.5,
        "dlo": 2.0,
        "tdl_limit": 4.0,
        "dlo_limit": 3.0,
        "tdl_compliant": True,
        "dlo_compliant": True,
        "overall_compliant": True,
        "tdl_margin": 0.5,
        "dlo_margin": 1.0,
        "code_year": "2020",
    }


# =============================================================================
# MEASUREMENTS
# =============================================================================


class TestMeasurementInput:
    """Tests for MeasurementInput"""

    def test_valid(self) -> None:
        m = MeasurementInput(cfm25_total=100, cfm25_outside=50, floor_area=2000)
        assert m.cfm25_total == 100.0

    def test_outside_above_total_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not exceed cfm25_total"):
            MeasurementInput(cfm25_total=50, cfm25_outside=100, floor_area=2000)

    def test_zero_floor_area_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MeasurementInput(cfm25_total=100, cfm25_outside=50, floor_area=0)

    def test_negative_reading_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MeasurementInput(cfm25_total=-1, cfm25_outside=0, floor_area=2000)

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MeasurementInput(cfm25_total=float("nan"), cfm25_outside=0, floor_area=2000)

    def test_frozen(self) -> None:
        m = MeasurementInput(cfm25_total=100, cfm25_outside=50, floor_area=2000)
        with pytest.raises(ValidationError):
            m.cfm25_total = 10


class TestPressureConversion:
    """Tests for PressureConversion"""

    def test_zero_pressure_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PressureConversion(cfm=100, from_pressure=0, to_pressure=25)

    def test_inf_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PressureConversion(cfm=float("inf"), from_pressure=50, to_pressure=25)


# =============================================================================
# RESULTS
# =============================================================================


class TestComplianceResult:
    """Tests for ComplianceResult"""

    def test_valid(self, compliance_kwargs: dict) -> None:
        result = ComplianceResult(**compliance_kwargs)
        assert result.overall_compliant is True

    def test_overall_must_be_conjunction(self, compliance_kwargs: dict) -> None:
        compliance_kwargs["dlo_compliant"] = False
        with pytest.raises(ValidationError, match="overall_compliant"):
            ComplianceResult(**compliance_kwargs)

    def test_json_dump(self, compliance_kwargs: dict) -> None:
        dumped = ComplianceResult(**compliance_kwargs).model_dump(mode="json")
        assert dumped == compliance_kwargs


class TestAverageResult:
    """Tests for AverageResult"""

    def test_defaults(self) -> None:
        result = AverageResult(average=100.0)
        assert result.outliers is None
        assert result.has_outliers is False

    def test_flag_requires_outliers(self) -> None:
        with pytest.raises(ValidationError):
            AverageResult(average=100.0, has_outliers=True)

    def test_outliers_require_flag(self) -> None:
        with pytest.raises(ValidationError):
            AverageResult(average=100.0, outliers=(150.0,), has_outliers=False)

    def test_outliers_without_flag_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AverageResult(average=100.0, outliers=(150.0,))

    def test_outliers_coerced_to_tuple(self) -> None:
        result = AverageResult(average=112.5, outliers=[150], has_outliers=True)
        assert result.outliers == (150.0,)


class TestEntityModels:
    """Tests for entity input models"""

    def test_hierarchy_link_requires_ids(self) -> None:
        with pytest.raises(ValidationError):
            HierarchyLink(child_id="", parent_id="dev-1")

    def test_temporal_window_keeps_raw_values(self) -> None:
        window = TemporalWindow(start_date="2024-01-01", end_date="garbage")
        assert window.end_date == "garbage"


# =============================================================================
# ENUMS
# =============================================================================


class TestClosedEnums:
    """Tests for closed enums"""

    def test_members_in_declaration_order(self) -> None:
        assert VolumeTier.all_members() == ("low", "medium", "high", "premium")
        assert PreferredContactMethod.all_members() == ("phone", "email", "text")
        assert ContactRole.all_members()[0] == "superintendent"
        assert ExpirationCategory.all_members() == ("critical", "warning", "notice", "ok")

    def test_members_equal_raw_strings(self) -> None:
        assert VolumeTier.HIGH == "high"
        assert ContactRole("owner") is ContactRole.OWNER
