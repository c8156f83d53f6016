from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import BackupStatus, DeletedCommunityBackup


class IDeletedCommunityBackupRepository(ABC):
    """DeletedCommunityBackup repository interface - application layer"""

    @abstractmethod
    async def create(self, backup: DeletedCommunityBackup) -> DeletedCommunityBackup:
        """Persist a new backup"""
        pass

    @abstractmethod
    async def get_by_id(self, backup_id: UUID) -> Optional[DeletedCommunityBackup]:
        """Get backup by ID"""
        pass

    @abstractmethod
    async def mark_restored(
        self,
        backup_id: UUID,
        restored_by: Optional[UUID],
        restored_at: datetime,
        restored_community_id: UUID,
    ) -> bool:
        """
        Transition pending -> restored in a single conditional update.

        Only applies while the backup is pending and restored_at <= permanent_delete_at.

        Returns:
            True if this call performed the transition, False otherwise
        """
        pass

    @abstractmethod
    async def list_recent(
        self, status: Optional[BackupStatus] = None, limit: int = 50
    ) -> List[DeletedCommunityBackup]:
        """List backups ordered by deleted_at DESC, optionally filtered by status"""
        pass
