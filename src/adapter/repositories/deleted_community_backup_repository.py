from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.deleted_community_backup_repository import (
    IDeletedCommunityBackupRepository,
)
from src.domain.entities import BackupStatus, DeletedCommunityBackup


class DeletedCommunityBackupRepository(IDeletedCommunityBackupRepository):
    """DeletedCommunityBackup repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, backup: DeletedCommunityBackup) -> DeletedCommunityBackup:
        """Persist a new backup"""
        self.session.add(backup)
        await self.session.flush()
        await self.session.refresh(backup)
        return backup

    async def get_by_id(self, backup_id: UUID) -> Optional[DeletedCommunityBackup]:
        """Get backup by ID"""
        stmt = select(DeletedCommunityBackup).where(DeletedCommunityBackup.id == backup_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_restored(
        self,
        backup_id: UUID,
        restored_by: Optional[UUID],
        restored_at: datetime,
        restored_community_id: UUID,
    ) -> bool:
        """Compare-and-swap pending -> restored"""
        stmt = (
            update(DeletedCommunityBackup)
            .where(
                DeletedCommunityBackup.id == backup_id,
                DeletedCommunityBackup.status == BackupStatus.pending,
                DeletedCommunityBackup.permanent_delete_at >= restored_at,
            )
            .values(
                status=BackupStatus.restored,
                restored_at=restored_at,
                restored_by=restored_by,
                restored_community_id=restored_community_id,
                updated_at=restored_at,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def list_recent(
        self, status: Optional[BackupStatus] = None, limit: int = 50
    ) -> List[DeletedCommunityBackup]:
        """List backups ordered by deleted_at DESC"""
        stmt = select(DeletedCommunityBackup)
        if status is not None:
            stmt = stmt.where(DeletedCommunityBackup.status == status)
        stmt = stmt.order_by(DeletedCommunityBackup.deleted_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
