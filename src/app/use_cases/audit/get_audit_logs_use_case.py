"""
Get Audit Logs Use Case

Retrieves recent admin actions with cursor pagination.
"""

from typing import Any, Dict, Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import enum_value


class GetAuditLogsUseCase:
    """
    Use case for retrieving the admin audit log.

    Business Rules:
    - Results ordered by newest first
    - Optional filter on action (e.g. delete_community)
    - Supports cursor-based pagination
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        limit: int = 50,
        cursor: Optional[str] = None,
        action: Optional[str] = None,
    ) -> Result[Dict[str, Any]]:
        async with self.uow:
            entries, next_cursor = await self.uow.audit_logs.get_paginated(
                limit=limit, cursor=cursor, action=action
            )

            logs = [
                {
                    "id": str(entry.id),
                    "action": entry.action,
                    "admin_email": entry.admin_email,
                    "target_type": entry.target_type,
                    "target_id": str(entry.target_id) if entry.target_id else None,
                    "target_name": entry.target_name,
                    "status": enum_value(entry.status),
                    "timestamp": entry.created_at.isoformat() + "Z",
                    "metadata": entry.log_metadata or {},
                }
                for entry in entries
            ]

            return Return.ok({"logs": logs, "next_cursor": next_cursor})
