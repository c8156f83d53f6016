from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.community_repository import ICommunityRepository
from src.domain.entities import Community, CommunityStatus


class CommunityRepository(ICommunityRepository):
    """Community repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, community_id: UUID) -> Optional[Community]:
        """Get community by ID"""
        stmt = select(Community).where(Community.id == community_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Community]:
        """List all communities, newest first"""
        stmt = select(Community).order_by(Community.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, community: Community) -> Community:
        """Create a new community"""
        self.session.add(community)
        await self.session.flush()
        await self.session.refresh(community)
        return community

    async def delete_by_id(self, community_id: UUID) -> int:
        """Delete community by ID"""
        stmt = delete(Community).where(Community.id == community_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def update_status(self, community_ids: List[UUID], status: CommunityStatus) -> int:
        """Set status on every listed community"""
        stmt = update(Community).where(Community.id.in_(community_ids)).values(status=status)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
