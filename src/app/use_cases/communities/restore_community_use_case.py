"""
Use Case: Restore Community

Rehydrates a deleted community from its backup under a new id.
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

from cachetools import TTLCache
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.admin_cache import admin_cache, invalidate_admin_views
from src.app.services.audit_recorder import AdminActor, AuditRecorder, RequestOrigin
from src.app.services.backup_policy import restore_guard_error
from src.app.services.restoration_engine import RestorationEngine
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditAction

from .dtos import CommunitySummary, RestoreCommunityResponse

logger = logging.getLogger(__name__)


class RestoreCommunityUseCase:
    """
    Restore a community from a pending, unexpired backup.

    Business Logic:
    1. Load backup and check it is restorable
    2. Claim the backup: conditional update pending -> restored
    3. Recreate the community with a new id and reinsert all dependents
       pointing at it
    4. Commit claim and data together; on failure both roll back
    5. Invalidate cached admin listings and record the audit entry

    A backup is restored at most once: a second concurrent restore loses
    the claim and reports the backup's current state.
    """

    def __init__(self, uow: UnitOfWork, cache: TTLCache = admin_cache):
        self.uow = uow
        self.cache = cache

    async def execute(
        self,
        actor: AdminActor,
        backup_id: UUID,
        origin: Optional[RequestOrigin] = None,
    ) -> Result[RestoreCommunityResponse]:
        """
        Execute restore community use case.

        Errors:
            - BACKUP_NOT_FOUND: Backup does not exist
            - BACKUP_EXPIRED: Retention deadline has passed
            - ALREADY_RESTORED: Backup was restored before
            - PERMANENTLY_DELETED: Backup was purged
            - RESTORE_FAILED: Reinsertion failed; nothing was restored
        """
        async with self.uow:
            # 1. Load backup and check guards
            backup = await self.uow.backups.get_by_id(backup_id)
            if not backup:
                return Return.err(Error("BACKUP_NOT_FOUND", "Backup not found"))

            now = utc_now()
            guard_error = restore_guard_error(backup, now)
            if guard_error:
                logger.warning(f"Restore of backup {backup_id} refused: {guard_error.code}")
                return Return.err(guard_error)

            logger.info(f"Starting community restoration from backup: {backup_id} by {actor.email}")

            # 2. Claim the backup
            new_community_id = uuid4()
            claimed = await self.uow.backups.mark_restored(
                backup_id, actor.admin_id, now, new_community_id
            )
            if not claimed:
                await self.uow.rollback()
                current = await self.uow.backups.get_by_id(backup_id)
                guard_error = (current and restore_guard_error(current, now)) or Error(
                    "ALREADY_RESTORED", "Community already restored"
                )
                logger.warning(f"Restore of backup {backup_id} lost claim: {guard_error.code}")
                return Return.err(guard_error)

            # 3. Rehydrate and commit with the claim
            try:
                restoration = await RestorationEngine(self.uow).restore(backup, new_community_id)
                community = restoration.community
                summary = CommunitySummary(
                    id=str(community.id), name=community.name, location=community.location
                )
                await self.uow.commit()
            except (SQLAlchemyError, ValidationError) as exc:
                await self.uow.rollback()
                logger.error(f"Restore of backup {backup_id} failed: {exc}")
                return Return.err(
                    Error(
                        "RESTORE_FAILED",
                        "Failed to restore community",
                        reason=str(exc),
                    )
                )

            restored_counts = restoration.restored_counts

            # 4. Invalidate cache
            invalidate_admin_views(self.cache)

            # 5. Audit log (best-effort)
            await AuditRecorder(self.uow).record(
                actor,
                AuditAction.restore_community.value,
                target_type="Community",
                target_id=new_community_id,
                target_name=summary.name,
                changes={"before": None, "after": {"name": summary.name, "location": summary.location}},
                metadata={
                    "backup_id": str(backup_id),
                    "original_community_id": str(backup.original_community_id),
                    "restored_counts": restored_counts,
                },
                origin=origin,
            )

            logger.info(f"Community restored successfully: {summary.name}, counts={restored_counts}")

            return Return.ok(
                RestoreCommunityResponse(
                    message="Community restored successfully",
                    community=summary,
                    restored=restored_counts,
                )
            )
