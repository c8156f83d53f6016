from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.admin_stats_repository import AdminStatsRepository
from src.adapter.repositories.audit_log_repository import AuditLogRepository
from src.adapter.repositories.community_repository import CommunityRepository
from src.adapter.repositories.deleted_community_backup_repository import (
    DeletedCommunityBackupRepository,
)
from src.adapter.repositories.dependent_repository import DependentRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.dependents import DEPENDENT_TYPES


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.communities = CommunityRepository(self.session)
        self.backups = DeletedCommunityBackupRepository(self.session)
        self.audit_logs = AuditLogRepository(self.session)
        self.stats = AdminStatsRepository(self.session)
        self.dependents = {
            dependent_type.key: DependentRepository(self.session, dependent_type)
            for dependent_type in DEPENDENT_TYPES
        }
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
