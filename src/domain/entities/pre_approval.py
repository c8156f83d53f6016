"""
PreApproval Entity

Visitor entry approved in advance by a resident.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class PreApproval(SQLModel, table=True):
    __tablename__ = "visitor_preapprovals"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    community: Optional[UUID] = Field(default=None, index=True)

    visitor_name: str = Field(max_length=255)
    contact: Optional[str] = Field(default=None, max_length=30)
    approved_by: Optional[UUID] = Field(default=None)
    scheduled_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
