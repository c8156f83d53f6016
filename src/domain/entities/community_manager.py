"""
CommunityManager Entity

Manager account that runs the community console.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class CommunityManager(SQLModel, table=True):
    """
    CommunityManager entity.

    Business Rules:
    - Linked through `assigned_community`; records created before the
      rename carry `community_assigned` instead
    """

    __tablename__ = "community_managers"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    assigned_community: Optional[UUID] = Field(default=None, index=True)
    community_assigned: Optional[UUID] = Field(default=None, index=True)

    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    contact: Optional[str] = Field(default=None, max_length=30)

    notifications: list[str] = Field(default_factory=list, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
