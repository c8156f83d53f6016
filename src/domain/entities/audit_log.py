"""
AuditLogEntry Entity

Immutable record of an admin action.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import AuditStatus


class AuditLogEntry(SQLModel, table=True):
    """
    AuditLogEntry entity - append-only log of admin actions.

    Business Rules:
    - Immutable (never updated or deleted)
    - target_name and admin_email are denormalized for display
    - changes holds {"before": ..., "after": ...}
    """

    __tablename__ = "admin_audit_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    admin_id: Optional[UUID] = Field(default=None, index=True)
    admin_email: Optional[str] = Field(default=None, max_length=255)

    action: str = Field(max_length=100)
    target_type: str = Field(default="Other", max_length=50)
    target_id: Optional[UUID] = Field(default=None)
    target_name: Optional[str] = Field(default=None, max_length=255)

    changes: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    log_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    ip: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=500)

    status: AuditStatus = Field(default=AuditStatus.success)
    error_message: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_log_action_created", "action", "created_at"),
        Index("idx_audit_log_target", "target_type", "target_id"),
    )
