"""
Temporal Rules — Date ordering, wall-clock checks, expiration urgency

Dates arrive from forms and imports as ISO-8601 strings, dates or datetimes.
They are normalized to timezone-aware UTC instants before any comparison:
- datetime with tzinfo  -> converted to UTC
- naive datetime        -> taken as UTC
- date                  -> midnight UTC
- str                   -> parsed by pydantic (ISO-8601, date-only allowed;
                           bare numbers are not dates)

Wall-clock dependent rules never read system time; they take a Clock.
"""

import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Final

from pydantic import TypeAdapter, ValidationError

from energy_compliance.core.domain import (
    ExpirationCategory,
    ExpirationStatus,
    TemporalWindow,
)
from energy_compliance.core.errors import DateOrderViolationError, InvalidInputError
from energy_compliance.core.ports import Clock

DateLike = datetime | date | str

_DATETIME_ADAPTER: Final[TypeAdapter[datetime]] = TypeAdapter(datetime)

_NUMERIC_STRING_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+(\.\d*)?")

_ONE_DAY: Final[timedelta] = timedelta(days=1)

# =============================================================================
# EXPIRATION BUCKETS (upper bounds inclusive, in days)
# =============================================================================

CRITICAL_WITHIN_DAYS: Final[int] = 30
WARNING_WITHIN_DAYS: Final[int] = 60
NOTICE_WITHIN_DAYS: Final[int] = 90


# =============================================================================
# PARSING
# =============================================================================


def _is_missing(value: DateLike | None) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def to_utc_instant(value: DateLike) -> datetime | None:
    """
    Normalize a date-like value to an aware UTC datetime.

    Returns:
        The instant, or None if the value cannot be parsed or falls outside
        the datetime range once converted to UTC
    """
    if isinstance(value, datetime):
        instant = value
    elif isinstance(value, date):
        instant = datetime.combine(value, time.min)
    else:
        # Digit-only strings would otherwise parse as Unix timestamps
        if isinstance(value, str) and _NUMERIC_STRING_PATTERN.fullmatch(value.strip()):
            return None
        try:
            instant = _DATETIME_ADAPTER.validate_python(value)
        except ValidationError:
            return None

    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    try:
        return instant.astimezone(timezone.utc)
    except OverflowError:
        return None


def _capitalize(label: str) -> str:
    return label[:1].upper() + label[1:]


# =============================================================================
# DATE ORDERING
# =============================================================================


def validate_date_ordering(
    start: DateLike | None,
    end: DateLike | None = None,
    *,
    start_label: str = "start date",
    end_label: str = "end date",
) -> None:
    """
    Start is required and valid; end, when present, is strictly after start.

    Args:
        start: Start of the window
        end: Optional end of the window
        start_label: Display name of the start field
        end_label: Display name of the end field

    Raises:
        DateOrderViolationError: missing start, unparsable date, or end <= start
    """
    if _is_missing(start):
        raise DateOrderViolationError(f"{_capitalize(start_label)} is required")

    start_instant = to_utc_instant(start)
    if start_instant is None:
        raise DateOrderViolationError(f"Invalid {start_label}")

    if _is_missing(end):
        return

    end_instant = to_utc_instant(end)
    if end_instant is None:
        raise DateOrderViolationError(f"Invalid {end_label}")

    if end_instant <= start_instant:
        raise DateOrderViolationError(
            f"{_capitalize(end_label)} must be after {start_label}"
        )


def validate_agreement_dates(start_date: DateLike | None, end_date: DateLike | None = None) -> None:
    """Builder agreement: end date strictly after start date."""
    validate_date_ordering(start_date, end_date)


def validate_program_dates(
    enrollment_date: DateLike | None,
    expiration_date: DateLike | None = None,
) -> None:
    """Program enrollment: expiration date strictly after enrollment date."""
    validate_date_ordering(
        enrollment_date,
        expiration_date,
        start_label="enrollment date",
        end_label="expiration date",
    )


def validate_temporal_window(
    window: TemporalWindow,
    *,
    start_label: str = "start date",
    end_label: str = "end date",
) -> None:
    """validate_date_ordering for a TemporalWindow."""
    validate_date_ordering(
        window.start_date,
        window.end_date,
        start_label=start_label,
        end_label=end_label,
    )


# =============================================================================
# WALL-CLOCK CHECKS
# =============================================================================


def validate_not_in_future(
    value: DateLike | None,
    clock: Clock,
    *,
    label: str = "interaction date",
) -> None:
    """
    Reject dates after clock.now(). "Now" itself is accepted.

    Raises:
        InvalidInputError: missing, unparsable, or in the future
    """
    if _is_missing(value):
        raise InvalidInputError(f"{_capitalize(label)} is required")

    instant = to_utc_instant(value)
    if instant is None:
        raise InvalidInputError(f"Invalid {label}")

    now = to_utc_instant(clock.now())
    if instant > now:
        raise InvalidInputError(f"{_capitalize(label)} cannot be in the future")


def validate_interaction_date(value: DateLike | None, clock: Clock) -> None:
    """Builder interactions are logged after the fact, never ahead of time."""
    validate_not_in_future(value, clock, label="interaction date")


# =============================================================================
# EXPIRATION CATEGORIZATION
# =============================================================================


def days_until(end: datetime, now: datetime) -> int:
    """ceil((end - now) / 1 day), computed exactly on timedeltas."""
    return -((now - end) // _ONE_DAY)


def categorize_expiration(end_date: DateLike | None, now: DateLike) -> ExpirationStatus:
    """
    Bucket an end date by urgency relative to `now`.

    days = ceil((end_date - now) / 1 day)

        days < 0        critical  "Expired {|days|} days ago"
        0 <= days <= 30 critical  "Expires in {days} days - URGENT renewal needed"
        31..60          warning   "Expires in {days} days - Renewal recommended"
        61..90          notice    "Expires in {days} days"
        > 90            ok        "Expires in {days} days"
        no end date     ok        "No expiration date set", days = None

    Args:
        end_date: Expiration date, or None for open-ended
        now: Reference instant

    Returns:
        ExpirationStatus

    Raises:
        InvalidInputError: end_date or now cannot be parsed
    """
    if _is_missing(end_date):
        return ExpirationStatus(
            category=ExpirationCategory.OK,
            days_until_expiration=None,
            message="No expiration date set",
        )

    end_instant = to_utc_instant(end_date)
    if end_instant is None:
        raise InvalidInputError("Invalid end date")

    now_instant = to_utc_instant(now)
    if now_instant is None:
        raise InvalidInputError("Invalid reference date")

    days = days_until(end_instant, now_instant)

    if days < 0:
        category = ExpirationCategory.CRITICAL
        message = f"Expired {abs(days)} days ago"
    elif days <= CRITICAL_WITHIN_DAYS:
        category = ExpirationCategory.CRITICAL
        message = f"Expires in {days} days - URGENT renewal needed"
    elif days <= WARNING_WITHIN_DAYS:
        category = ExpirationCategory.WARNING
        message = f"Expires in {days} days - Renewal recommended"
    elif days <= NOTICE_WITHIN_DAYS:
        category = ExpirationCategory.NOTICE
        message = f"Expires in {days} days"
    else:
        category = ExpirationCategory.OK
        message = f"Expires in {days} days"

    return ExpirationStatus(
        category=category,
        days_until_expiration=days,
        message=message,
    )


def categorize_agreement_expiration(end_date: DateLike | None, clock: Clock) -> ExpirationStatus:
    """categorize_expiration against the injected clock's current time."""
    return categorize_expiration(end_date, clock.now())
