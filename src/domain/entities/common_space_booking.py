"""
CommonSpaceBooking Entity

Resident booking of a common space for a time slot.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now

from .enums import BookingStatus


class CommonSpaceBooking(SQLModel, table=True):
    __tablename__ = "common_space_bookings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    community: Optional[UUID] = Field(default=None, index=True)

    space_name: str = Field(max_length=255)
    booked_by: Optional[UUID] = Field(default=None)
    booking_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    from_time: Optional[str] = Field(default=None, max_length=10)
    to_time: Optional[str] = Field(default=None, max_length=10)
    status: BookingStatus = Field(default=BookingStatus.pending)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
