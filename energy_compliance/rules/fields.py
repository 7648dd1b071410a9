"""
Field Rules — Single-field format and membership checks

Shared by every entity validator (builders, contacts, agreements, ...).
Each rule raises an EngineError subclass with a user-displayable message
on failure.

Email and phone checks are structural checks, not RFC validation. They
accept the real-world values already stored.
"""

import re
from collections.abc import Iterable
from enum import Enum
from typing import Final

from energy_compliance.core.errors import EnumMismatchError, InvalidInputError

# =============================================================================
# PATTERNS
# =============================================================================

# local@domain.tld, no whitespace, exactly one '@' per part
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# Formatting characters stripped from phone numbers before counting digits
PHONE_FORMATTING_PATTERN: Final[re.Pattern[str]] = re.compile(r"[\s\-().]")

PHONE_DIGITS_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]{10,15}")


# =============================================================================
# TEXT
# =============================================================================


def validate_required_text_field(
    value: str | None,
    field_name: str,
    *,
    min_length: int | None = None,
    max_length: int | None = None,
) -> None:
    """
    Required free-text field with optional length bounds.

    Emptiness is judged on the trimmed value; length bounds apply to the
    value as entered.

    Args:
        value: Field value
        field_name: Display name, e.g. "Company name"
        min_length: Minimum length (inclusive), if any
        max_length: Maximum length (inclusive), if any

    Raises:
        InvalidInputError: missing/blank value or length out of bounds

    Examples:
        >>> validate_required_text_field("Lennar", "Company name", min_length=2, max_length=255)
        >>> validate_required_text_field("   ", "Company name")
        Traceback (most recent call last):
            ...
        energy_compliance.core.errors.InvalidInputError: Company name is required
    """
    if value is None or len(value.strip()) == 0:
        raise InvalidInputError(f"{field_name} is required")

    if min_length is not None and len(value) < min_length:
        raise InvalidInputError(f"{field_name} must be at least {min_length} characters")

    if max_length is not None and len(value) > max_length:
        raise InvalidInputError(f"{field_name} must not exceed {max_length} characters")


# =============================================================================
# CONTACT DETAILS
# =============================================================================


def validate_email(value: str) -> None:
    """
    Structural email check: local@domain.tld.

    Raises:
        InvalidInputError: "Invalid email format"
    """
    if EMAIL_PATTERN.fullmatch(value) is None:
        raise InvalidInputError("Invalid email format")


def validate_phone(value: str, label: str = "phone") -> None:
    """
    Phone number check: 10-15 digits once formatting is removed.

    "(612) 555-0100", "612.555.0100" and "+1 612 555 0100" minus the '+'
    all pass; letters or a '+' prefix do not.

    Args:
        value: Phone number as entered
        label: Display name used in the message ("phone", "mobile phone")

    Raises:
        InvalidInputError: "Invalid {label} format (must be 10-15 digits)"
    """
    cleaned = PHONE_FORMATTING_PATTERN.sub("", value)
    if PHONE_DIGITS_PATTERN.fullmatch(cleaned) is None:
        raise InvalidInputError(f"Invalid {label} format (must be 10-15 digits)")


# =============================================================================
# ENUM MEMBERSHIP
# =============================================================================


def _allowed_values(allowed: type[Enum] | Iterable[str]) -> tuple[str, ...]:
    if isinstance(allowed, type) and issubclass(allowed, Enum):
        return tuple(str(member.value) for member in allowed)
    if isinstance(allowed, (set, frozenset)):
        # No inherent order: sort so the message is stable
        return tuple(sorted(allowed))
    return tuple(allowed)


def validate_enum_membership(
    value: str,
    allowed: type[Enum] | Iterable[str],
    field_label: str = "value",
):
    """
    Check that a value belongs to a closed set.

    Args:
        value: Raw value (or an enum member)
        allowed: Enum class (preferred) or iterable of allowed strings
        field_label: Display name, e.g. "role", "volume tier"

    Returns:
        The enum member when `allowed` is an enum class, otherwise the value

    Raises:
        EnumMismatchError: "Invalid {label}. Must be one of: a, b, c"

    Examples:
        >>> from energy_compliance.core.domain import VolumeTier
        >>> validate_enum_membership("high", VolumeTier, "volume tier")
        <VolumeTier.HIGH: 'high'>
    """
    members = _allowed_values(allowed)

    if value not in members:
        raise EnumMismatchError(
            f"Invalid {field_label}. Must be one of: {', '.join(members)}",
            value=value,
            allowed=members,
        )

    if isinstance(allowed, type) and issubclass(allowed, Enum):
        return allowed(value)
    return value
