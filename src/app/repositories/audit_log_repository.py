from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.domain.entities import AuditLogEntry


class IAuditLogRepository(ABC):
    """AuditLogEntry repository interface - application layer"""

    @abstractmethod
    async def create(self, entry: AuditLogEntry) -> AuditLogEntry:
        """Append an audit log entry (immutable)"""
        pass

    @abstractmethod
    async def get_paginated(
        self, limit: int = 50, cursor: Optional[str] = None, action: Optional[str] = None
    ) -> Tuple[List[AuditLogEntry], Optional[str]]:
        """
        Get audit log entries with cursor-based pagination.

        Returns:
            Tuple of (entries list, next_cursor)
            - entries: List of entries ordered by created_at DESC
            - next_cursor: Cursor for next page, None if no more entries
        """
        pass
