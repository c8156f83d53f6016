"""
DeletedCommunityBackup Entity

Frozen snapshot of a community and all of its dependents, captured
immediately before cascade deletion.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import BackupStatus


class DeletedCommunityBackup(SQLModel, table=True):
    """
    DeletedCommunityBackup entity.

    Business Rules:
    - `original_community_id` is a plain reference; the community no longer exists
    - `community_data` holds the community document plus one list per dependent type
    - Restorable while status is pending and now <= permanent_delete_at
    - pending -> restored and pending -> permanently_deleted happen at most once
    """

    __tablename__ = "deleted_community_backups"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    original_community_id: UUID = Field(nullable=False, index=True)

    community_data: dict = Field(default_factory=dict, sa_column=Column(JSON))

    # Deletion metadata
    deleted_by: Optional[UUID] = Field(default=None)
    deleted_by_email: Optional[str] = Field(default=None, max_length=255)
    deleted_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    reason: Optional[str] = Field(default=None)
    counts: dict = Field(default_factory=dict, sa_column=Column(JSON))

    permanent_delete_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    status: BackupStatus = Field(default=BackupStatus.pending)

    restored_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    restored_by: Optional[UUID] = Field(default=None)
    restored_community_id: Optional[UUID] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_backup_cleanup", "permanent_delete_at", "status"),
    )
