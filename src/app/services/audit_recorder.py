"""
Audit Recorder

Appends admin actions to the audit log. Recording is best-effort: a failure
is logged locally and never reaches the caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditLogEntry, AuditStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminActor:
    """Authenticated admin performing an action"""

    admin_id: Optional[UUID]
    email: Optional[str]
    role: str


@dataclass(frozen=True)
class RequestOrigin:
    ip: Optional[str] = None
    user_agent: Optional[str] = None


class AuditRecorder:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record(
        self,
        actor: AdminActor,
        action: str,
        target_type: str = "Other",
        target_id: Optional[UUID] = None,
        target_name: Optional[str] = None,
        changes: Optional[Dict[str, Any]] = None,
        metadata: Optional[Dict[str, Any]] = None,
        origin: Optional[RequestOrigin] = None,
        status: AuditStatus = AuditStatus.success,
        error_message: Optional[str] = None,
    ) -> Optional[AuditLogEntry]:
        """
        Append and commit an audit entry.

        Returns:
            The stored entry, or None if the write failed
        """
        origin = origin or RequestOrigin()
        entry = AuditLogEntry(
            admin_id=actor.admin_id,
            admin_email=actor.email,
            action=action,
            target_type=target_type,
            target_id=target_id,
            target_name=target_name,
            changes=changes,
            log_metadata=metadata,
            ip=origin.ip,
            user_agent=origin.user_agent,
            status=status,
            error_message=error_message,
        )
        try:
            entry = await self.uow.audit_logs.create(entry)
            await self.uow.commit()
        except Exception as exc:
            logger.warning(f"Audit log write failed for {action} by {actor.email}: {exc}")
            try:
                await self.uow.rollback()
            except Exception as rollback_exc:
                logger.warning(f"Rollback after audit failure also failed: {rollback_exc}")
            return None

        logger.info(f"Admin action recorded: {action} {target_type} {target_id} by {actor.email}")
        return entry
