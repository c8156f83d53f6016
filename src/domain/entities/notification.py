"""
Notification Entity

Message delivered to residents, workers, security staff or managers.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class Notification(SQLModel, table=True):
    """
    Notification entity.

    Business Rules:
    - May carry its own `community` reference
    - Owners keep the ids of their notifications; a notification referenced by an
      owner of a community belongs to that community even without `community` set
    """

    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    community: Optional[UUID] = Field(default=None, index=True)

    title: str = Field(max_length=255)
    message: Optional[str] = Field(default=None)
    type: Optional[str] = Field(default=None, max_length=50)
    read: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
