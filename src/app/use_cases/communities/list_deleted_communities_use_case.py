"""
Use Case: List Deleted Communities

Lists community backups so an admin can pick one to restore.
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import enum_value
from src.domain.entities import BackupStatus, DeletedCommunityBackup

from .dtos import DeletedCommunitiesResponse, DeletedCommunityInfo


def _isoformat(value) -> Optional[str]:
    return value.isoformat() if value else None


def to_deleted_community_info(backup: DeletedCommunityBackup) -> DeletedCommunityInfo:
    community = (backup.community_data or {}).get("community") or {}
    return DeletedCommunityInfo(
        id=str(backup.id),
        original_community_id=str(backup.original_community_id),
        community_name=community.get("name"),
        deleted_by_email=backup.deleted_by_email,
        deleted_at=backup.deleted_at.isoformat(),
        reason=backup.reason,
        counts=backup.counts or {},
        status=enum_value(backup.status),
        can_restore_until=backup.permanent_delete_at.isoformat(),
        restored_at=_isoformat(backup.restored_at),
        restored_community_id=(
            str(backup.restored_community_id) if backup.restored_community_id else None
        ),
    )


class ListDeletedCommunitiesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, status: Optional[BackupStatus] = None, limit: int = 50
    ) -> Result[DeletedCommunitiesResponse]:
        async with self.uow:
            backups = await self.uow.backups.list_recent(status=status, limit=limit)
            return Return.ok(
                DeletedCommunitiesResponse(
                    backups=[to_deleted_community_info(backup) for backup in backups]
                )
            )
