"""
Hierarchy Rules — Parent/child membership

Geographic and work hierarchies (development -> lot -> job) are checked the
same way: fetch the child through an injected lookup, then compare the
child's recorded parent id with the expected one. The engine never
persists or caches the fetched entity.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from energy_compliance.core.domain import HierarchyLink
from energy_compliance.core.errors import HierarchyMismatchError, NotFoundError
from energy_compliance.core.ports import EntityLookup

EntityT = TypeVar("EntityT")


def attribute_getter(name: str) -> Callable[[Any], Any]:
    """Parent-id accessor for entities exposing it as an attribute or mapping key."""

    def get_parent(entity: Any) -> Any:
        if isinstance(entity, dict):
            return entity.get(name)
        return getattr(entity, name, None)

    return get_parent


def validate_hierarchy_membership(
    child_id: str,
    parent_id: str,
    lookup: EntityLookup[EntityT],
    *,
    parent_of: Callable[[EntityT], Any],
    child_label: str,
    parent_label: str,
) -> EntityT:
    """
    Check that `child_id` exists and belongs to `parent_id`.

    Args:
        child_id: Id of the child entity (lot, job, ...)
        parent_id: Expected parent id
        lookup: Read-only entity lookup for the child type
        parent_of: Extracts the recorded parent id from a fetched child
        child_label: Display name of the child, e.g. "Lot"
        parent_label: Display name of the parent, e.g. "development"

    Returns:
        The fetched child entity

    Raises:
        NotFoundError: "{child_label} not found"
        HierarchyMismatchError: "{child_label} does not belong to this {parent_label}"
    """
    child = lookup.get_by_id(child_id)
    if child is None:
        raise NotFoundError(f"{child_label} not found", entity_id=child_id)

    actual_parent_id = parent_of(child)
    if actual_parent_id != parent_id:
        raise HierarchyMismatchError(
            f"{child_label} does not belong to this {parent_label}",
            child_id=child_id,
            expected_parent_id=parent_id,
            actual_parent_id=actual_parent_id,
        )

    return child


def validate_hierarchy_link(
    link: HierarchyLink,
    lookup: EntityLookup[EntityT],
    *,
    parent_of: Callable[[EntityT], Any],
    child_label: str,
    parent_label: str,
) -> EntityT:
    """validate_hierarchy_membership for a HierarchyLink."""
    return validate_hierarchy_membership(
        link.child_id,
        link.parent_id,
        lookup,
        parent_of=parent_of,
        child_label=child_label,
        parent_label=parent_label,
    )


def validate_lot_belongs_to_development(
    lookup: EntityLookup[EntityT],
    lot_id: str,
    development_id: str,
) -> EntityT:
    """Lot must exist and carry `development_id` as its development."""
    return validate_hierarchy_membership(
        lot_id,
        development_id,
        lookup,
        parent_of=attribute_getter("development_id"),
        child_label="Lot",
        parent_label="development",
    )


def validate_job_belongs_to_lot(
    lookup: EntityLookup[EntityT],
    job_id: str,
    lot_id: str,
) -> EntityT:
    """Job must exist and carry `lot_id` as its lot."""
    return validate_hierarchy_membership(
        job_id,
        lot_id,
        lookup,
        parent_of=attribute_getter("lot_id"),
        child_label="Job",
        parent_label="lot",
    )
