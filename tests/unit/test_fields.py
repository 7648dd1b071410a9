"""
Tests for single-field rules

Checks:
1. Required text with length bounds
2. Email and phone structural checks
3. Closed-enum membership and the allowed-values message
"""

import pytest

from energy_compliance.core.domain import ContactRole, PreferredContactMethod, VolumeTier
from energy_compliance.core.errors import EnumMismatchError, InvalidInputError
from energy_compliance.rules.fields import (
    validate_email,
    validate_enum_membership,
    validate_phone,
    validate_required_text_field,
)

# =============================================================================
# TEXT
# =============================================================================


class TestValidateRequiredTextField:
    """Tests for validate_required_text_field"""

    def test_valid_value(self) -> None:
        validate_required_text_field("Lennar", "Company name", min_length=2, max_length=255)

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_missing_or_blank_raises(self, value: str | None) -> None:
        with pytest.raises(InvalidInputError, match="Company name is required"):
            validate_required_text_field(value, "Company name")

    def test_too_short_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="must be at least 2 characters"):
            validate_required_text_field("A", "Company name", min_length=2)

    def test_too_long_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="must not exceed 255 characters"):
            validate_required_text_field("x" * 256, "Company name", max_length=255)

    def test_bounds_inclusive(self) -> None:
        validate_required_text_field("AB", "Company name", min_length=2, max_length=255)
        validate_required_text_field("x" * 255, "Company name", min_length=2, max_length=255)

    def test_no_bounds(self) -> None:
        validate_required_text_field("x", "Contact name")


# =============================================================================
# CONTACT DETAILS
# =============================================================================


class TestValidateEmail:
    """Tests for validate_email"""

    @pytest.mark.parametrize(
        "value", ["super@builder.com", "a.b+c@sub.example.org", "x@y.co"]
    )
    def test_valid(self, value: str) -> None:
        validate_email(value)

    @pytest.mark.parametrize(
        "value",
        ["", "no-at-sign.com", "two@@example.com", "user@nodot", "has space@example.com", "@example.com"],
    )
    def test_invalid(self, value: str) -> None:
        with pytest.raises(InvalidInputError, match="Invalid email format"):
            validate_email(value)


class TestValidatePhone:
    """Tests for validate_phone"""

    @pytest.mark.parametrize(
        "value",
        ["6125550100", "(612) 555-0100", "612.555.0100", "1 612 555 0100", "441234567890123"],
    )
    def test_valid(self, value: str) -> None:
        validate_phone(value)

    @pytest.mark.parametrize(
        "value", ["555-0100", "+1 612 555 0100", "612-555-CALL", "1234567890123456"]
    )
    def test_invalid(self, value: str) -> None:
        with pytest.raises(InvalidInputError, match=r"Invalid phone format \(must be 10-15 digits\)"):
            validate_phone(value)

    def test_label_in_message(self) -> None:
        with pytest.raises(InvalidInputError, match="Invalid mobile phone format"):
            validate_phone("123", "mobile phone")


# =============================================================================
# ENUM MEMBERSHIP
# =============================================================================


class TestValidateEnumMembership:
    """Tests for validate_enum_membership"""

    def test_enum_member_returned(self) -> None:
        assert validate_enum_membership("high", VolumeTier, "volume tier") is VolumeTier.HIGH

    def test_message_lists_members_in_order(self) -> None:
        with pytest.raises(EnumMismatchError) as exc_info:
            validate_enum_membership("ceo", ContactRole, "role")

        err = exc_info.value
        assert err.message == (
            "Invalid role. Must be one of: superintendent, project_manager, owner, "
            "estimator, office_manager, other"
        )
        assert err.value == "ceo"
        assert err.allowed == ContactRole.all_members()
        assert err.kind == "enum_mismatch"

    def test_case_sensitive(self) -> None:
        with pytest.raises(EnumMismatchError):
            validate_enum_membership("Phone", PreferredContactMethod, "preferred contact method")

    def test_list_of_strings(self) -> None:
        assert validate_enum_membership("b", ["a", "b"], "status") == "b"

        with pytest.raises(EnumMismatchError, match="Invalid status. Must be one of: a, b"):
            validate_enum_membership("c", ["a", "b"], "status")

    def test_set_sorted_in_message(self) -> None:
        with pytest.raises(EnumMismatchError, match="Must be one of: alpha, beta, gamma"):
            validate_enum_membership("delta", {"gamma", "alpha", "beta"})

    def test_default_label(self) -> None:
        with pytest.raises(EnumMismatchError, match="Invalid value."):
            validate_enum_membership("x", ["y"])
