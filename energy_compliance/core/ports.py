"""
Engine port definitions.

The engine has exactly three external collaborators, all injected by the
caller and all outside the engine's purity guarantees:
- a clock, for wall-clock dependent rules
- an entity lookup, for hierarchy membership checks
- a metrics counter, for compliance pass/fail tallies
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Protocol, TypeVar

EntityT_co = TypeVar("EntityT_co", covariant=True)


class Clock(Protocol):
    """Time source."""

    def now(self) -> datetime:
        """Return the current instant as a timezone-aware UTC datetime."""
        ...


class EntityLookup(Protocol[EntityT_co]):
    """Narrow read-only view of a storage layer."""

    def get_by_id(self, entity_id: str) -> EntityT_co | None:
        """Fetch an entity by id, or None if it does not exist."""
        ...


class MetricsCounter(Protocol):
    """Labelled counter sink (e.g. a Prometheus counter wrapper)."""

    def inc(self, labels: Mapping[str, str]) -> None:
        """Increment the counter for the given label set."""
        ...
