"""
Cascade Deleter

Removes a community and every record it owns. Only run after the
community's backup has been committed.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.dependents import (
    DEPENDENT_TYPES,
    NOTIFICATIONS_KEY,
    empty_counts,
    notification_ids_of,
    notification_owner_types,
)

logger = logging.getLogger(__name__)


@dataclass
class CascadeResult:
    deleted_community_id: Optional[UUID]
    deleted_counts: Dict[str, int]


class CascadeDeleter:
    """
    Delete a community and its dependents, one committed step per type.

    Order:
    1. Collect notification ids held by residents, workers, security staff
       and managers (before those owners are gone)
    2. Delete notifications (community reference or collected id)
    3. Delete every other dependent type, matching any of its reference fields
    4. Delete the community row

    Running it again on a deleted community deletes nothing and returns zero counts.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def delete(self, community_id: UUID) -> Result[CascadeResult]:
        """
        Execute the cascade.

        Errors:
            - PARTIAL_CASCADE_FAILURE: A step failed; earlier steps stay committed.
              details carries failed_type and the deleted counts so far.
        """
        counts = empty_counts()

        owner_notification_ids = set()
        for owner_type in notification_owner_types():
            owners = await self.uow.dependents[owner_type.key].find_owned(community_id)
            owner_notification_ids |= notification_ids_of(owners)

        ordered = [t for t in DEPENDENT_TYPES if t.key == NOTIFICATIONS_KEY] + [
            t for t in DEPENDENT_TYPES if t.key != NOTIFICATIONS_KEY
        ]
        for dependent_type in ordered:
            extra_ids = owner_notification_ids if dependent_type.key == NOTIFICATIONS_KEY else None
            try:
                counts[dependent_type.key] = await self.uow.dependents[
                    dependent_type.key
                ].delete_owned(community_id, extra_ids=extra_ids)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                return Return.err(self._partial_failure(community_id, dependent_type.key, counts, exc))

        try:
            community_deleted = await self.uow.communities.delete_by_id(community_id)
            await self.uow.commit()
        except SQLAlchemyError as exc:
            await self.uow.rollback()
            return Return.err(self._partial_failure(community_id, "community", counts, exc))

        return Return.ok(
            CascadeResult(
                deleted_community_id=community_id if community_deleted else None,
                deleted_counts=counts,
            )
        )

    @staticmethod
    def _partial_failure(
        community_id: UUID, failed_type: str, counts: Dict[str, int], exc: Exception
    ) -> Error:
        logger.error(
            f"Cascade delete of community {community_id} failed at {failed_type}: {exc}. "
            f"Deleted so far: {counts}"
        )
        return Error(
            "PARTIAL_CASCADE_FAILURE",
            f"Failed to delete {failed_type} of community",
            reason=str(exc),
            details={"failed_type": failed_type, "deleted": dict(counts)},
        )
