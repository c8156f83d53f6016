"""
Use Case: Delete Community

Deletes a community and everything it owns, after capturing a backup that
can be restored for BACKUP_RETENTION_DAYS.
"""

import logging
from typing import Optional
from uuid import UUID

from cachetools import TTLCache
from sqlalchemy.exc import SQLAlchemyError

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.admin_cache import admin_cache, invalidate_admin_views
from src.app.services.audit_recorder import AdminActor, AuditRecorder, RequestOrigin
from src.app.services.backup_policy import retention_deadline
from src.app.services.cascade_deleter import CascadeDeleter
from src.app.services.community_locks import CommunityLocks, community_locks
from src.app.services.snapshot_collector import SnapshotCollector
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditAction, AuditStatus, BackupStatus, DeletedCommunityBackup

from .dtos import BackupInfo, DeleteCommunityResponse

logger = logging.getLogger(__name__)


class DeleteCommunityUseCase:
    """
    Cascade delete a community with backup.

    Business Logic:
    1. Take the per-community lock (a concurrent delete of the same community is refused)
    2. Load the community and snapshot every dependent record
    3. Persist and commit the backup; nothing is deleted if this fails
    4. Cascade delete dependents and the community
    5. Invalidate cached admin listings
    6. Record the audit entry (failure is logged, never returned)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        cache: TTLCache = admin_cache,
        locks: CommunityLocks = community_locks,
        retention_days: int = ApplicationConfig.BACKUP_RETENTION_DAYS,
    ):
        self.uow = uow
        self.cache = cache
        self.locks = locks
        self.retention_days = retention_days

    async def execute(
        self,
        actor: AdminActor,
        community_id: UUID,
        reason: Optional[str] = None,
        origin: Optional[RequestOrigin] = None,
    ) -> Result[DeleteCommunityResponse]:
        """
        Execute delete community use case.

        Args:
            actor: Admin performing the deletion
            community_id: UUID of community to delete
            reason: Free-form reason kept in the backup and audit log
            origin: Request IP and user agent for the audit log

        Returns:
            Result[DeleteCommunityResponse] with deleted counts and backup reference

        Errors:
            - DELETION_IN_PROGRESS: Another deletion of this community is running
            - COMMUNITY_NOT_FOUND: Community does not exist
            - BACKUP_FAILED: Backup could not be stored; nothing was deleted
            - PARTIAL_CASCADE_FAILURE: Some dependents were deleted; the backup is kept
        """
        async with self.locks.hold(community_id) as acquired:
            if not acquired:
                return Return.err(
                    Error(
                        "DELETION_IN_PROGRESS",
                        "Community deletion is already in progress",
                    )
                )

            async with self.uow:
                # 1. Load community and snapshot its dependents
                collected = await SnapshotCollector(self.uow).collect(community_id)
                if collected.is_err():
                    return collected
                snapshot = collected.value
                community_name = snapshot.community.get("name")
                community_location = snapshot.community.get("location")

                logger.info(
                    f"Starting community deletion: {community_name} ({community_id}) by {actor.email}"
                )

                # 2. Persist backup before anything is deleted
                now = utc_now()
                backup = DeletedCommunityBackup(
                    original_community_id=community_id,
                    community_data=snapshot.to_payload(),
                    deleted_by=actor.admin_id,
                    deleted_by_email=actor.email,
                    deleted_at=now,
                    reason=reason or "No reason provided",
                    counts=snapshot.counts(),
                    permanent_delete_at=retention_deadline(now, self.retention_days),
                    status=BackupStatus.pending,
                )
                try:
                    backup = await self.uow.backups.create(backup)
                    await self.uow.commit()
                except SQLAlchemyError as exc:
                    await self.uow.rollback()
                    logger.error(f"Backup of community {community_id} failed, aborting delete: {exc}")
                    return Return.err(
                        Error(
                            "BACKUP_FAILED",
                            "Failed to back up community, nothing was deleted",
                            reason=str(exc),
                        )
                    )

                backup_id = backup.id
                can_restore_until = backup.permanent_delete_at.isoformat()
                logger.info(f"Created deletion backup {backup_id} for community: {community_name}")

                # 3. Cascade delete
                cascade = await CascadeDeleter(self.uow).delete(community_id)

                # 4. Invalidate cache
                invalidate_admin_views(self.cache)

                audit = AuditRecorder(self.uow)
                if cascade.is_err():
                    error = cascade.error
                    error.details["backup_id"] = str(backup_id)
                    await audit.record(
                        actor,
                        AuditAction.delete_community.value,
                        target_type="Community",
                        target_id=community_id,
                        target_name=community_name,
                        metadata={"backup_id": str(backup_id), **error.details},
                        origin=origin,
                        status=AuditStatus.partial,
                        error_message=error.reason,
                    )
                    return Return.err(error)

                deleted_counts = cascade.value.deleted_counts

                # 5. Audit log (best-effort)
                await audit.record(
                    actor,
                    AuditAction.delete_community.value,
                    target_type="Community",
                    target_id=community_id,
                    target_name=community_name,
                    changes={
                        "before": {"name": community_name, "location": community_location},
                        "after": None,
                    },
                    metadata={
                        "backup_id": str(backup_id),
                        "deleted_counts": deleted_counts,
                        "reason": reason,
                        "can_restore_until": can_restore_until,
                    },
                    origin=origin,
                )

                logger.info(
                    f"Community deleted successfully: {community_name}, "
                    f"counts={deleted_counts}, backup={backup_id}"
                )

                return Return.ok(
                    DeleteCommunityResponse(
                        message=(
                            "Community deleted successfully. "
                            f"Can be restored within {self.retention_days} days."
                        ),
                        deleted=deleted_counts,
                        backup=BackupInfo(
                            id=str(backup_id),
                            can_restore_until=can_restore_until,
                        ),
                    )
                )
