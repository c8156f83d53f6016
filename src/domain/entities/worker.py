"""
Worker Entity

Maintenance and service staff assigned to a community.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class Worker(SQLModel, table=True):
    """
    Worker entity.

    Business Rules:
    - Older records reference their community through `community_assigned`,
      newer ones through `community`; either one identifies the owner
    """

    __tablename__ = "workers"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    community: Optional[UUID] = Field(default=None, index=True)
    community_assigned: Optional[UUID] = Field(default=None, index=True)

    name: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    contact: Optional[str] = Field(default=None, max_length=30)
    job_role: Optional[str] = Field(default=None, max_length=100)
    salary: Optional[float] = Field(default=None)

    notifications: list[str] = Field(default_factory=list, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
