"""
Entity Rules — Whole-record validation for builders and contacts

Unlike the single-field rules, these run every applicable check and collect
all failures so a form can show them together. Checks run in a fixed order;
ValidationResult.error is the first failure in that order.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from energy_compliance.core.domain import (
    BuilderProfile,
    ContactProfile,
    ContactRole,
    PreferredContactMethod,
    VolumeTier,
)
from energy_compliance.core.errors import EngineError, InvalidInputError
from energy_compliance.rules.fields import (
    validate_email,
    validate_enum_membership,
    validate_phone,
    validate_required_text_field,
)

COMPANY_NAME_MIN_LENGTH: Final[int] = 2
NAME_MAX_LENGTH: Final[int] = 255

RATING_MIN: Final[float] = 1
RATING_MAX: Final[float] = 5


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a whole-record validation."""

    valid: bool
    errors: tuple[EngineError, ...] = ()

    @property
    def error(self) -> EngineError | None:
        """First failure, if any."""
        return self.errors[0] if self.errors else None

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(e.message for e in self.errors)


def _check(errors: list[EngineError], rule: Callable[..., object], *args, **kwargs) -> None:
    try:
        rule(*args, **kwargs)
    except EngineError as e:
        errors.append(e)


def _is_provided(value: str | None) -> bool:
    return value is not None and len(value.strip()) > 0


def _result(errors: list[EngineError]) -> ValidationResult:
    return ValidationResult(valid=not errors, errors=tuple(errors))


# =============================================================================
# BUILDERS
# =============================================================================


def validate_builder_fields(builder: BuilderProfile) -> ValidationResult:
    """
    Validate a builder record.

    Checks, in order:
    1. company_name required, 2-255 characters
    2. email format (if provided)
    3. phone format (if provided)
    4. volume_tier in VolumeTier (if provided)
    5. rating within 1-5 (if provided)
    6. preferred_lead_time non-negative (if provided)
    """
    errors: list[EngineError] = []

    _check(
        errors,
        validate_required_text_field,
        builder.company_name,
        "Company name",
        min_length=COMPANY_NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
    )

    if _is_provided(builder.email):
        _check(errors, validate_email, builder.email)

    if _is_provided(builder.phone):
        _check(errors, validate_phone, builder.phone)

    if builder.volume_tier:
        _check(errors, validate_enum_membership, builder.volume_tier, VolumeTier, "volume tier")

    if builder.rating is not None:
        if builder.rating < RATING_MIN or builder.rating > RATING_MAX:
            errors.append(InvalidInputError("Rating must be between 1 and 5"))

    if builder.preferred_lead_time is not None:
        if builder.preferred_lead_time < 0:
            errors.append(InvalidInputError("Preferred lead time must be non-negative"))

    return _result(errors)


# =============================================================================
# CONTACTS
# =============================================================================


def validate_contact_role(role: str) -> ContactRole:
    """
    Raises:
        EnumMismatchError: "Invalid role. Must be one of: superintendent, ..."
    """
    return validate_enum_membership(role, ContactRole, "role")


def validate_contact(contact: ContactProfile) -> ValidationResult:
    """
    Validate a builder contact record.

    Checks, in order: name (required, <= 255), role (required, ContactRole),
    email, phone, mobile phone, preferred contact method.
    """
    errors: list[EngineError] = []

    _check(
        errors,
        validate_required_text_field,
        contact.name,
        "Contact name",
        max_length=NAME_MAX_LENGTH,
    )

    if not contact.role:
        errors.append(InvalidInputError("Contact role is required"))
    else:
        _check(errors, validate_contact_role, contact.role)

    if _is_provided(contact.email):
        _check(errors, validate_email, contact.email)

    if _is_provided(contact.phone):
        _check(errors, validate_phone, contact.phone)

    if _is_provided(contact.mobile_phone):
        _check(errors, validate_phone, contact.mobile_phone, "mobile phone")

    if contact.preferred_contact:
        _check(
            errors,
            validate_enum_membership,
            contact.preferred_contact,
            PreferredContactMethod,
            "preferred contact method",
        )

    return _result(errors)
