"""
Visitor Entity

Gate entry of a visitor.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class Visitor(SQLModel, table=True):
    __tablename__ = "visitors"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    community: Optional[UUID] = Field(default=None, index=True)

    name: str = Field(max_length=255)
    contact: Optional[str] = Field(default=None, max_length=30)
    purpose: Optional[str] = Field(default=None, max_length=255)
    vehicle_number: Optional[str] = Field(default=None, max_length=30)
    checked_in_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    checked_out_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
