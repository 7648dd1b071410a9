"""
Tests for whole-record entity validation

Checks:
1. Builder records: name bounds, contact formats, tier, rating, lead time
2. Contact records: name, role, phones, preferred contact method
3. All failures collected, first failure exposed as .error
"""

import pytest

from energy_compliance.core.domain import BuilderProfile, ContactProfile, ContactRole
from energy_compliance.core.errors import EnumMismatchError, InvalidInputError
from energy_compliance.rules.entities import (
    ValidationResult,
    validate_builder_fields,
    validate_contact,
    validate_contact_role,
)


@pytest.fixture
def valid_builder() -> BuilderProfile:
    return BuilderProfile(
        company_name="M/I Homes Construction Corp",
        email="permits@mihomes.example.com",
        phone="(612) 555-0100",
        volume_tier="high",
        rating=4.5,
        preferred_lead_time=3,
    )


@pytest.fixture
def valid_contact() -> ContactProfile:
    return ContactProfile(
        name="Pat Lindqvist",
        role="superintendent",
        email="pat@builder.example.com",
        phone="612-555-0199",
        mobile_phone="651 555 0123",
        preferred_contact="text",
    )


# =============================================================================
# BUILDERS
# =============================================================================


class TestValidateBuilderFields:
    """Tests for validate_builder_fields"""

    def test_valid_builder(self, valid_builder: BuilderProfile) -> None:
        result = validate_builder_fields(valid_builder)

        assert result == ValidationResult(valid=True)
        assert result.error is None
        assert result.messages == ()

    def test_only_name_required(self) -> None:
        assert validate_builder_fields(BuilderProfile(company_name="Lennar")).valid

    def test_missing_name(self) -> None:
        result = validate_builder_fields(BuilderProfile())

        assert not result.valid
        assert result.messages == ("Company name is required",)

    def test_short_name(self) -> None:
        result = validate_builder_fields(BuilderProfile(company_name="X"))
        assert result.messages == ("Company name must be at least 2 characters",)

    def test_long_name(self) -> None:
        result = validate_builder_fields(BuilderProfile(company_name="X" * 256))
        assert result.messages == ("Company name must not exceed 255 characters",)

    def test_blank_optional_fields_skipped(self) -> None:
        result = validate_builder_fields(
            BuilderProfile(company_name="Lennar", email="  ", phone="", volume_tier="")
        )
        assert result.valid

    def test_invalid_volume_tier(self, valid_builder: BuilderProfile) -> None:
        result = validate_builder_fields(valid_builder.model_copy(update={"volume_tier": "huge"}))

        assert isinstance(result.error, EnumMismatchError)
        assert result.error.message == (
            "Invalid volume tier. Must be one of: low, medium, high, premium"
        )

    @pytest.mark.parametrize("rating", [0, 0.99, 5.01, 6])
    def test_rating_out_of_range(self, valid_builder: BuilderProfile, rating: float) -> None:
        result = validate_builder_fields(valid_builder.model_copy(update={"rating": rating}))
        assert result.messages == ("Rating must be between 1 and 5",)

    @pytest.mark.parametrize("rating", [1, 5])
    def test_rating_bounds_inclusive(self, valid_builder: BuilderProfile, rating: float) -> None:
        assert validate_builder_fields(valid_builder.model_copy(update={"rating": rating})).valid

    def test_negative_lead_time(self, valid_builder: BuilderProfile) -> None:
        result = validate_builder_fields(
            valid_builder.model_copy(update={"preferred_lead_time": -1})
        )
        assert result.messages == ("Preferred lead time must be non-negative",)

    def test_all_failures_collected_in_order(self) -> None:
        result = validate_builder_fields(
            BuilderProfile(
                company_name="",
                email="not-an-email",
                phone="123",
                volume_tier="giant",
                rating=9,
                preferred_lead_time=-2,
            )
        )

        assert not result.valid
        assert result.messages == (
            "Company name is required",
            "Invalid email format",
            "Invalid phone format (must be 10-15 digits)",
            "Invalid volume tier. Must be one of: low, medium, high, premium",
            "Rating must be between 1 and 5",
            "Preferred lead time must be non-negative",
        )
        assert isinstance(result.error, InvalidInputError)
        assert result.error.message == "Company name is required"


# =============================================================================
# CONTACTS
# =============================================================================


class TestValidateContactRole:
    """Tests for validate_contact_role"""

    def test_valid_role(self) -> None:
        assert validate_contact_role("project_manager") is ContactRole.PROJECT_MANAGER

    def test_invalid_role(self) -> None:
        with pytest.raises(EnumMismatchError, match="Invalid role. Must be one of: superintendent"):
            validate_contact_role("foreman")


class TestValidateContact:
    """Tests for validate_contact"""

    def test_valid_contact(self, valid_contact: ContactProfile) -> None:
        assert validate_contact(valid_contact).valid

    def test_missing_name_and_role(self) -> None:
        result = validate_contact(ContactProfile())
        assert result.messages == ("Contact name is required", "Contact role is required")

    def test_long_name(self, valid_contact: ContactProfile) -> None:
        result = validate_contact(valid_contact.model_copy(update={"name": "N" * 256}))
        assert result.messages == ("Contact name must not exceed 255 characters",)

    def test_invalid_mobile_phone_label(self, valid_contact: ContactProfile) -> None:
        result = validate_contact(valid_contact.model_copy(update={"mobile_phone": "555"}))
        assert result.messages == ("Invalid mobile phone format (must be 10-15 digits)",)

    def test_invalid_preferred_contact(self, valid_contact: ContactProfile) -> None:
        result = validate_contact(valid_contact.model_copy(update={"preferred_contact": "fax"}))
        assert result.messages == (
            "Invalid preferred contact method. Must be one of: phone, email, text",
        )

    def test_invalid_role_in_record(self, valid_contact: ContactProfile) -> None:
        result = validate_contact(valid_contact.model_copy(update={"role": "boss"}))

        assert not result.valid
        assert isinstance(result.error, EnumMismatchError)
        assert result.error.value == "boss"
