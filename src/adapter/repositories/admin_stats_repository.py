from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.admin_stats_repository import IAdminStatsRepository
from src.domain.entities import (
    Community,
    CommunityManager,
    CommunityStatus,
    Payment,
    PaymentStatus,
    Resident,
)


class AdminStatsRepository(IAdminStatsRepository):
    """Dashboard aggregates using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _count(self, stmt) -> int:
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_communities(self, status: Optional[CommunityStatus] = None) -> int:
        stmt = select(func.count()).select_from(Community)
        if status is not None:
            stmt = stmt.where(Community.status == status)
        return await self._count(stmt)

    async def count_residents(self) -> int:
        return await self._count(select(func.count()).select_from(Resident))

    async def count_managers(self) -> int:
        return await self._count(select(func.count()).select_from(CommunityManager))

    async def completed_payments_since(self, since: datetime) -> List[Payment]:
        stmt = select(Payment).where(
            Payment.status == PaymentStatus.completed,
            Payment.payment_date >= since,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def communities_created_since(self, since: datetime) -> List[datetime]:
        stmt = select(Community.created_at).where(Community.created_at >= since)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
