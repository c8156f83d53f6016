"""
Community Entity

Root entity of the platform. Every dependent record belongs to exactly one community.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import CommunityStatus, SubscriptionStatus


class Community(SQLModel, table=True):
    """
    Community entity - a managed residential property.

    Business Rules:
    - Created by the manager onboarding flow
    - Structure (blocks -> floors -> units) is stored as a JSON document
    - Deleted only through cascade delete with backup
    """

    __tablename__ = "communities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    location: Optional[str] = Field(default=None, max_length=500)
    description: Optional[str] = Field(default=None)

    status: CommunityStatus = Field(default=CommunityStatus.active)

    # Subscription
    subscription_plan: Optional[str] = Field(default=None, max_length=100)
    subscription_status: SubscriptionStatus = Field(default=SubscriptionStatus.pending)
    plan_start_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    plan_end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Structural layout and occupancy
    blocks: list = Field(default_factory=list, sa_column=Column(JSON))
    total_members: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_community_status", "status"),
        Index("idx_community_name", "name"),
    )
