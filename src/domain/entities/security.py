"""
Security Entity

Security staff guarding a community gate.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class Security(SQLModel, table=True):
    """Security staff entity. Referenced by `community` or legacy `community_assigned`."""

    __tablename__ = "securities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    community: Optional[UUID] = Field(default=None, index=True)
    community_assigned: Optional[UUID] = Field(default=None, index=True)

    name: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    contact: Optional[str] = Field(default=None, max_length=30)
    shift: Optional[str] = Field(default=None, max_length=50)
    gate: Optional[str] = Field(default=None, max_length=50)

    notifications: list[str] = Field(default_factory=list, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
