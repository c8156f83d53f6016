from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from src.domain.entities import CommunityStatus, Payment


class IAdminStatsRepository(ABC):
    """Read-only aggregates for the admin dashboard - application layer"""

    @abstractmethod
    async def count_communities(self, status: Optional[CommunityStatus] = None) -> int:
        """Count communities, optionally only those with `status`"""
        pass

    @abstractmethod
    async def count_residents(self) -> int:
        pass

    @abstractmethod
    async def count_managers(self) -> int:
        pass

    @abstractmethod
    async def completed_payments_since(self, since: datetime) -> List[Payment]:
        """Completed payments with payment_date >= since"""
        pass

    @abstractmethod
    async def communities_created_since(self, since: datetime) -> List[datetime]:
        """created_at of every community created at or after `since`"""
        pass
