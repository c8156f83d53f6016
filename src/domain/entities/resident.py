"""
Resident Entity

A person living in a unit of a community.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class Resident(SQLModel, table=True):
    """
    Resident entity.

    Business Rules:
    - Belongs to one community through `community`
    - `notifications` holds ids of Notification records addressed to the resident
    """

    __tablename__ = "residents"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    community: Optional[UUID] = Field(default=None, index=True)

    first_name: str = Field(max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)
    contact: Optional[str] = Field(default=None, max_length=30)
    block: Optional[str] = Field(default=None, max_length=50)
    flat_no: Optional[str] = Field(default=None, max_length=50)

    notifications: list[str] = Field(default_factory=list, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
