"""
Issue Entity

Maintenance issue raised by a resident.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now

from .enums import IssueStatus


class Issue(SQLModel, table=True):
    __tablename__ = "issues"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    community: Optional[UUID] = Field(default=None, index=True)

    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    category: Optional[str] = Field(default=None, max_length=100)
    status: IssueStatus = Field(default=IssueStatus.open)
    resident_id: Optional[UUID] = Field(default=None)
    worker_id: Optional[UUID] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
