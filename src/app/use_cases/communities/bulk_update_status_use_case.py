"""
Use Case: Bulk Update Community Status

Activates or deactivates several communities in one request.
"""

import logging
from typing import List, Optional
from uuid import UUID

from cachetools import TTLCache
from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.admin_cache import admin_cache, invalidate_admin_views
from src.app.services.audit_recorder import AdminActor, AuditRecorder, RequestOrigin
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, CommunityStatus

from .dtos import BulkUpdateStatusResponse

logger = logging.getLogger(__name__)


class BulkUpdateCommunityStatusUseCase:
    """
    Set the status of every listed community.

    Business Logic:
    1. Reject an empty id list
    2. Update matching communities in one statement (unknown ids are skipped)
    3. Invalidate cached admin listings and dashboard
    4. Record the audit entry
    """

    def __init__(self, uow: UnitOfWork, cache: TTLCache = admin_cache):
        self.uow = uow
        self.cache = cache

    async def execute(
        self,
        actor: AdminActor,
        community_ids: List[UUID],
        status: CommunityStatus,
        origin: Optional[RequestOrigin] = None,
    ) -> Result[BulkUpdateStatusResponse]:
        """
        Errors:
            - INVALID_REQUEST: No community ids given
            - BULK_UPDATE_FAILED: The update statement failed; nothing changed
        """
        if not community_ids:
            return Return.err(Error("INVALID_REQUEST", "IDs array and status are required"))

        ids = list(dict.fromkeys(community_ids))

        async with self.uow:
            try:
                updated = await self.uow.communities.update_status(ids, status)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                logger.error(f"Bulk status update to {status.value} failed: {exc}")
                return Return.err(
                    Error("BULK_UPDATE_FAILED", "Failed to bulk update status", reason=str(exc))
                )

            invalidate_admin_views(self.cache)

            await AuditRecorder(self.uow).record(
                actor,
                AuditAction.update_community.value,
                target_type="Community",
                changes={"after": {"status": status.value}},
                metadata={
                    "community_ids": [str(community_id) for community_id in ids],
                    "updated": updated,
                },
                origin=origin,
            )

            logger.info(f"{updated} communities set to {status.value} by {actor.email}")

            return Return.ok(
                BulkUpdateStatusResponse(
                    message=f"{updated} communities updated successfully",
                    updated=updated,
                )
            )
