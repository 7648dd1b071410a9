"""
Closed enums for business-domain fields.

Each enum is a str-valued Enum so members compare equal to their raw string
form and serialize naturally. `all_members()` returns the allowed values in
declaration order; that order is what users see in "Must be one of: ..."
messages.
"""

from enum import Enum


class ClosedEnum(str, Enum):
    """Base for enums validated by rules.fields.validate_enum_membership."""

    @classmethod
    def all_members(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


# =============================================================================
# BUILDER / CONTACT FIELDS
# =============================================================================


class VolumeTier(ClosedEnum):
    """Builder volume tier."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    PREMIUM = "premium"


class ContactRole(ClosedEnum):
    """Role of a builder contact."""

    SUPERINTENDENT = "superintendent"
    PROJECT_MANAGER = "project_manager"
    OWNER = "owner"
    ESTIMATOR = "estimator"
    OFFICE_MANAGER = "office_manager"
    OTHER = "other"


class PreferredContactMethod(ClosedEnum):
    """How a contact prefers to be reached."""

    PHONE = "phone"
    EMAIL = "email"
    TEXT = "text"


# =============================================================================
# CLASSIFICATION
# =============================================================================


class ExpirationCategory(ClosedEnum):
    """
    Urgency bucket for an expiring agreement or program enrollment.

    critical: expired, or expires within 30 days
    warning:  31-60 days
    notice:   61-90 days
    ok:       more than 90 days, or no end date
    """

    CRITICAL = "critical"
    WARNING = "warning"
    NOTICE = "notice"
    OK = "ok"
