from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from sqlmodel import SQLModel


class IDependentRepository(ABC):
    """
    Repository interface for one dependent record type - application layer

    "Owned" means the record references the community through any of the
    type's reference fields, or its id is listed in `extra_ids`.
    """

    @abstractmethod
    async def find_owned(
        self, community_id: UUID, extra_ids: Optional[Iterable[UUID]] = None
    ) -> List[SQLModel]:
        """Get every record owned by the community"""
        pass

    @abstractmethod
    async def count_owned(
        self, community_id: UUID, extra_ids: Optional[Iterable[UUID]] = None
    ) -> int:
        """Count records owned by the community"""
        pass

    @abstractmethod
    async def delete_owned(
        self, community_id: UUID, extra_ids: Optional[Iterable[UUID]] = None
    ) -> int:
        """Delete records owned by the community, returns deleted count"""
        pass

    @abstractmethod
    async def insert_many(self, records: List[SQLModel]) -> int:
        """Insert records keeping their primary keys, returns inserted count"""
        pass
