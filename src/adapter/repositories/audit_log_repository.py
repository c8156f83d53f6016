import base64
from datetime import datetime
from typing import List, Optional, Tuple

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_log_repository import IAuditLogRepository
from src.domain.entities import AuditLogEntry


class AuditLogRepository(IAuditLogRepository):
    """AuditLogEntry repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: AuditLogEntry) -> AuditLogEntry:
        """Append an audit log entry (immutable)"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def get_paginated(
        self, limit: int = 50, cursor: Optional[str] = None, action: Optional[str] = None
    ) -> Tuple[List[AuditLogEntry], Optional[str]]:
        """
        Get audit log entries with cursor-based pagination.

        Cursor format: base64-encoded ISO timestamp of created_at
        """
        stmt = select(AuditLogEntry)
        if action:
            stmt = stmt.where(AuditLogEntry.action == action)

        if cursor:
            try:
                cursor_timestamp_str = base64.b64decode(cursor).decode("utf-8")
                cursor_timestamp = datetime.fromisoformat(cursor_timestamp_str)
                stmt = stmt.where(AuditLogEntry.created_at < cursor_timestamp)
            except (ValueError, TypeError):
                # Invalid cursor, ignore and return from beginning
                pass

        stmt = stmt.order_by(AuditLogEntry.created_at.desc()).limit(limit + 1)

        result = await self.session.exec(stmt)
        entries = list(result.all())

        has_more = len(entries) > limit
        if has_more:
            entries = entries[:limit]

        next_cursor = None
        if has_more and entries:
            cursor_timestamp_str = entries[-1].created_at.isoformat()
            next_cursor = base64.b64encode(cursor_timestamp_str.encode("utf-8")).decode("utf-8")

        return entries, next_cursor
