"""
Engine Errors — Typed Error Taxonomy

Every calculator and rule in the engine signals failure by raising one of the
exceptions below. They all derive from EngineError (itself a ValueError), so
callers can catch the whole family in one place and map `kind` 1:1 to a
user-facing message or an HTTP status.

KINDS:
- invalid_input: single field violates its precondition
- empty_input: required collection was empty
- physically_inconsistent_measurement: fields valid alone, impossible together
- not_found: referenced id does not resolve
- hierarchy_mismatch: entity exists but under another parent
- enum_mismatch: value outside its allowed set
- date_order_violation: end <= start, or unparsable date
"""

from typing import Any


class EngineError(ValueError):
    """Base class for all engine errors."""

    kind: str = "engine_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(EngineError):
    """A single field violates its numeric or type precondition."""

    kind = "invalid_input"


class EmptyInputError(EngineError):
    """A required non-empty collection was empty."""

    kind = "empty_input"


class PhysicallyInconsistentMeasurementError(EngineError):
    """
    Measurements that are individually valid but jointly impossible.

    Carries the raw readings (not the derived TDL/DLO) so the caller can
    report the offending values exactly as entered.
    """

    kind = "physically_inconsistent_measurement"

    def __init__(self, message: str, cfm25_total: float, cfm25_outside: float):
        super().__init__(message)
        self.cfm25_total = cfm25_total
        self.cfm25_outside = cfm25_outside


class NotFoundError(EngineError):
    """A referenced entity id did not resolve through the injected lookup."""

    kind = "not_found"

    def __init__(self, message: str, entity_id: Any):
        super().__init__(message)
        self.entity_id = entity_id


class HierarchyMismatchError(EngineError):
    """A resolved entity does not belong to the expected parent."""

    kind = "hierarchy_mismatch"

    def __init__(
        self,
        message: str,
        child_id: Any,
        expected_parent_id: Any,
        actual_parent_id: Any,
    ):
        super().__init__(message)
        self.child_id = child_id
        self.expected_parent_id = expected_parent_id
        self.actual_parent_id = actual_parent_id


class EnumMismatchError(EngineError):
    """A value is not a member of its allowed set."""

    kind = "enum_mismatch"

    def __init__(self, message: str, value: Any, allowed: tuple[str, ...]):
        super().__init__(message)
        self.value = value
        self.allowed = allowed


class DateOrderViolationError(EngineError):
    """End date not strictly after start date, or a date failed to parse."""

    kind = "date_order_violation"
