"""
Advertisement Entity

Ad shown to the residents of a community.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class Advertisement(SQLModel, table=True):
    __tablename__ = "advertisements"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    community: Optional[UUID] = Field(default=None, index=True)

    title: str = Field(max_length=255)
    link: Optional[str] = Field(default=None, max_length=500)
    image_url: Optional[str] = Field(default=None, max_length=500)
    start_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    status: str = Field(default="active", max_length=20)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
