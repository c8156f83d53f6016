from abc import ABC, abstractmethod
from typing import Dict

from src.app.repositories.admin_stats_repository import IAdminStatsRepository
from src.app.repositories.audit_log_repository import IAuditLogRepository
from src.app.repositories.community_repository import ICommunityRepository
from src.app.repositories.deleted_community_backup_repository import (
    IDeletedCommunityBackupRepository,
)
from src.app.repositories.dependent_repository import IDependentRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    communities: ICommunityRepository
    backups: IDeletedCommunityBackupRepository
    audit_logs: IAuditLogRepository
    stats: IAdminStatsRepository
    # One repository per dependent type, keyed by DependentType.key
    dependents: Dict[str, IDependentRepository]

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
