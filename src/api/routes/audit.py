"""
Audit API Routes

Admin audit log retrieval.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from src.api.error import ServerError
from src.api.utils.rbac import require_permission
from src.app.services.audit_recorder import AdminActor
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import GetAuditLogsUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/audit-logs", tags=["Audit"])


class AuditLogResponse(BaseModel):
    """Single audit log entry in response"""

    id: str
    action: str
    admin_email: Optional[str]
    target_type: str
    target_id: Optional[str]
    target_name: Optional[str]
    status: str
    timestamp: str
    metadata: Dict[str, Any]


class AuditLogsResponse(BaseModel):
    """GET /audit-logs response payload"""

    logs: List[AuditLogResponse]
    next_cursor: Optional[str]


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=AuditLogsResponse,
)
async def get_audit_logs(
    actor: AdminActor = Depends(require_permission("read:analytics")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of entries to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
    action: Optional[str] = Query(None, description="Filter by action"),
):
    """
    Get Admin Audit Logs

    Returns:
        - logs: Entries ordered by newest first
        - next_cursor: Cursor for next page (null if no more entries)

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: INSUFFICIENT_PERMISSIONS (requires read:analytics)
    """
    result = await GetAuditLogsUseCase(uow).execute(limit=limit, cursor=cursor, action=action)
    if result.is_err():
        raise ServerError(result.error)
    return result.value
