"""
Amenity Entity

Bookable facility of a community (clubhouse, pool, court...).
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class Amenity(SQLModel, table=True):
    __tablename__ = "amenities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    community: Optional[UUID] = Field(default=None, index=True)

    name: str = Field(max_length=255)
    capacity: Optional[int] = Field(default=None)
    booking_rules: Optional[str] = Field(default=None)
    hourly_rate: Optional[float] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
