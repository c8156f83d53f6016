"""
Dependent Type Registry

Static table of every record type owned by a community. The snapshot
collector, the cascade deleter and the restoration engine all iterate this
table, so the set of types and their reference fields is defined once.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Set, Tuple, Type
from uuid import UUID

from sqlmodel import SQLModel

from src.domain.entities import (
    Advertisement,
    Amenity,
    CommonSpaceBooking,
    CommunityManager,
    CommunitySubscription,
    Issue,
    Notification,
    Payment,
    PreApproval,
    Resident,
    Security,
    Visitor,
    Worker,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DependentType:
    """
    A dependent record type.

    Attributes:
        key: Name used in snapshots, counts and API responses
        model: SQLModel table class
        reference_fields: Every field name that has ever pointed at the owning
            community; a record matching any of them is owned
        holds_notifications: Records keep a list of Notification ids
    """

    key: str
    model: Type[SQLModel]
    reference_fields: Tuple[str, ...]
    holds_notifications: bool = False


NOTIFICATIONS_KEY = "notifications"

DEPENDENT_TYPES: Tuple[DependentType, ...] = (
    DependentType("residents", Resident, ("community",), holds_notifications=True),
    DependentType("issues", Issue, ("community",)),
    DependentType(
        "workers", Worker, ("community", "community_assigned"), holds_notifications=True
    ),
    DependentType(
        "securities", Security, ("community", "community_assigned"), holds_notifications=True
    ),
    DependentType(
        "managers",
        CommunityManager,
        ("assigned_community", "community_assigned"),
        holds_notifications=True,
    ),
    DependentType("amenities", Amenity, ("community",)),
    DependentType("commonSpaces", CommonSpaceBooking, ("community",)),
    DependentType("payments", Payment, ("community", "community_id")),
    DependentType("subscriptions", CommunitySubscription, ("community_id", "community")),
    DependentType("visitors", Visitor, ("community",)),
    DependentType("preapprovals", PreApproval, ("community",)),
    DependentType(NOTIFICATIONS_KEY, Notification, ("community",)),
    DependentType("ads", Advertisement, ("community",)),
)

DEPENDENT_KEYS: Tuple[str, ...] = tuple(t.key for t in DEPENDENT_TYPES)


def get_dependent_type(key: str) -> DependentType:
    for dependent_type in DEPENDENT_TYPES:
        if dependent_type.key == key:
            return dependent_type
    raise KeyError(key)


def notification_owner_types() -> Tuple[DependentType, ...]:
    return tuple(t for t in DEPENDENT_TYPES if t.holds_notifications)


def empty_counts() -> dict[str, int]:
    return {key: 0 for key in DEPENDENT_KEYS}


def notification_ids_of(records: Iterable[SQLModel]) -> Set[UUID]:
    """Collect Notification ids referenced by notification-holding records"""
    ids: Set[UUID] = set()
    for record in records:
        for notification_id in getattr(record, "notifications", None) or []:
            try:
                ids.add(UUID(str(notification_id)))
            except ValueError:
                logger.warning(
                    f"Skipping malformed notification reference {notification_id!r} "
                    f"on {type(record).__name__} {getattr(record, 'id', None)}"
                )
    return ids
