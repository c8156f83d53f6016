"""
Payment Entity

Resident or community payment record.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now

from .enums import PaymentStatus


class Payment(SQLModel, table=True):
    """Payment entity. Referenced by `community` or legacy `community_id`."""

    __tablename__ = "payments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    community: Optional[UUID] = Field(default=None, index=True)
    community_id: Optional[UUID] = Field(default=None, index=True)

    title: str = Field(max_length=255)
    amount: float = Field(default=0)
    status: PaymentStatus = Field(default=PaymentStatus.pending)
    payment_method: Optional[str] = Field(default=None, max_length=50)
    sender_id: Optional[UUID] = Field(default=None)
    payment_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
