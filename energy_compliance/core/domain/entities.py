"""
Entities — Business-domain input records

Loosely typed on purpose: every field is optional and unconstrained so that
rules.entities can report *all* problems with user-facing messages, instead
of pydantic stopping at the first type error.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field


class BuilderProfile(BaseModel):
    """Builder (homebuilding company) fields subject to validation."""

    company_name: str | None = None
    email: str | None = None
    phone: str | None = None
    volume_tier: str | None = None
    rating: float | None = None
    preferred_lead_time: int | None = Field(None, description="Days of notice the builder wants")

    model_config = {"frozen": True}


class ContactProfile(BaseModel):
    """Builder contact fields subject to validation."""

    name: str | None = None
    role: str | None = None
    email: str | None = None
    phone: str | None = None
    mobile_phone: str | None = None
    preferred_contact: str | None = None

    model_config = {"frozen": True}


class TemporalWindow(BaseModel):
    """
    Start/end pair for agreements and program enrollments.

    Values are kept as supplied (string, date or datetime); parsing and the
    end > start check happen in rules.temporal.validate_temporal_window.
    """

    start_date: datetime | date | str | None
    end_date: datetime | date | str | None = None

    model_config = {"frozen": True}


class HierarchyLink(BaseModel):
    """Expected parent/child relationship, e.g. lot -> development."""

    child_id: str = Field(..., min_length=1)
    parent_id: str = Field(..., min_length=1)

    model_config = {"frozen": True}
