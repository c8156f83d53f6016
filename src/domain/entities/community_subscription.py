"""
CommunitySubscription Entity

Subscription billing record of a community.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now

from .enums import SubscriptionStatus


class CommunitySubscription(SQLModel, table=True):
    """Subscription record. Referenced by `community_id`, some older rows by `community`."""

    __tablename__ = "community_subscriptions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    community_id: Optional[UUID] = Field(default=None, index=True)
    community: Optional[UUID] = Field(default=None, index=True)

    plan_name: str = Field(max_length=100)
    amount: float = Field(default=0)
    status: SubscriptionStatus = Field(default=SubscriptionStatus.pending)
    transaction_id: Optional[str] = Field(default=None, max_length=100)
    plan_start_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    plan_end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
