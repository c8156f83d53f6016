from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Community, CommunityStatus


class ICommunityRepository(ABC):
    """Community repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, community_id: UUID) -> Optional[Community]:
        """Get community by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Community]:
        """List all communities, newest first"""
        pass

    @abstractmethod
    async def create(self, community: Community) -> Community:
        """Create a new community"""
        pass

    @abstractmethod
    async def delete_by_id(self, community_id: UUID) -> int:
        """Delete community by ID, returns number of rows removed (0 or 1)"""
        pass

    @abstractmethod
    async def update_status(self, community_ids: List[UUID], status: CommunityStatus) -> int:
        """Set status on every listed community, returns number of rows updated"""
        pass
