from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import delete, func, or_
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.dependent_repository import IDependentRepository
from src.domain.dependents import DependentType


class DependentRepository(IDependentRepository):
    """
    Generic repository for a dependent record type using SQLModel.

    One instance per registry entry; the ownership filter is built from the
    entry's reference fields.
    """

    def __init__(self, session: AsyncSession, dependent_type: DependentType):
        self.session = session
        self.dependent_type = dependent_type
        self.model = dependent_type.model

    def _owned_clause(self, community_id: UUID, extra_ids: Optional[Iterable[UUID]]):
        conditions = [
            getattr(self.model, field) == community_id
            for field in self.dependent_type.reference_fields
        ]
        ids = list(extra_ids or [])
        if ids:
            conditions.append(self.model.id.in_(ids))
        return or_(*conditions)

    async def find_owned(
        self, community_id: UUID, extra_ids: Optional[Iterable[UUID]] = None
    ) -> List[SQLModel]:
        stmt = select(self.model).where(self._owned_clause(community_id, extra_ids))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_owned(
        self, community_id: UUID, extra_ids: Optional[Iterable[UUID]] = None
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(self._owned_clause(community_id, extra_ids))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def delete_owned(
        self, community_id: UUID, extra_ids: Optional[Iterable[UUID]] = None
    ) -> int:
        stmt = delete(self.model).where(self._owned_clause(community_id, extra_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def insert_many(self, records: List[SQLModel]) -> int:
        """
        Insert records keeping their primary keys.

        Uses merge so a record that is still present (e.g. left behind by a
        partially failed cascade) is overwritten instead of duplicated.
        """
        for record in records:
            await self.session.merge(record)
        await self.session.flush()
        return len(records)
