"""
Backup retention and restore guards.

A backup is restorable only while it is pending and its retention deadline
has not passed. The deadline check comes first: an expired backup reports
BACKUP_EXPIRED whatever its status.
"""

from datetime import datetime, timedelta
from typing import Optional

from libs.result import Error
from src.domain.entities import BackupStatus, DeletedCommunityBackup

DEFAULT_RETENTION_DAYS = 30


def retention_deadline(deleted_at: datetime, retention_days: int = DEFAULT_RETENTION_DAYS) -> datetime:
    return deleted_at + timedelta(days=retention_days)


def restore_guard_error(backup: DeletedCommunityBackup, now: datetime) -> Optional[Error]:
    """Return the error preventing restoration of `backup`, or None if it is restorable"""
    if now > backup.permanent_delete_at:
        return Error(
            "BACKUP_EXPIRED",
            "Backup expired, cannot restore",
            reason=f"Restorable until {backup.permanent_delete_at.isoformat()}",
        )
    if backup.status == BackupStatus.restored:
        return Error("ALREADY_RESTORED", "Community already restored")
    if backup.status == BackupStatus.permanently_deleted:
        return Error("PERMANENTLY_DELETED", "Backup permanently deleted, cannot restore")
    return None
