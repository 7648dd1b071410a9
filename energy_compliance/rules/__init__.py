"""Rules — validation and classification of business-domain records.

- fields: required text, email, phone, closed-enum membership
- temporal: date ordering, not-in-future, expiration urgency buckets
- hierarchy: parent/child membership through an injected lookup
- company_names: abbreviation-tolerant builder name matching
- entities: whole-record builder / contact validation
"""

from .company_names import ABBREVIATIONS, match_company_abbreviation, normalize_company_name
from .entities import (
    ValidationResult,
    validate_builder_fields,
    validate_contact,
    validate_contact_role,
)
from .fields import (
    validate_email,
    validate_enum_membership,
    validate_phone,
    validate_required_text_field,
)
from .hierarchy import (
    attribute_getter,
    validate_hierarchy_link,
    validate_hierarchy_membership,
    validate_job_belongs_to_lot,
    validate_lot_belongs_to_development,
)
from .temporal import (
    categorize_agreement_expiration,
    categorize_expiration,
    to_utc_instant,
    validate_agreement_dates,
    validate_date_ordering,
    validate_interaction_date,
    validate_not_in_future,
    validate_program_dates,
    validate_temporal_window,
)

__all__ = [
    # Fields
    "validate_email",
    "validate_enum_membership",
    "validate_phone",
    "validate_required_text_field",
    # Temporal
    "categorize_agreement_expiration",
    "categorize_expiration",
    "to_utc_instant",
    "validate_agreement_dates",
    "validate_date_ordering",
    "validate_interaction_date",
    "validate_not_in_future",
    "validate_program_dates",
    "validate_temporal_window",
    # Hierarchy
    "attribute_getter",
    "validate_hierarchy_link",
    "validate_hierarchy_membership",
    "validate_job_belongs_to_lot",
    "validate_lot_belongs_to_development",
    # Company names
    "ABBREVIATIONS",
    "match_company_abbreviation",
    "normalize_company_name",
    # Entities
    "ValidationResult",
    "validate_builder_fields",
    "validate_contact",
    "validate_contact_role",
]
