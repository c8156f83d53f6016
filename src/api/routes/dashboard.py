"""
Dashboard API Routes

KPIs and growth charts for the admin console home page.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import ServerError
from src.api.utils.rbac import require_permission
from src.app.services.audit_recorder import AdminActor
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dashboard import DashboardResponse, GetDashboardUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=DashboardResponse,
)
async def get_dashboard(
    actor: AdminActor = Depends(require_permission("read:analytics")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Dashboard

    Served from the admin cache when a fresh copy exists (cached=true).

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 403 Forbidden: INSUFFICIENT_PERMISSIONS (requires read:analytics)
    """
    result = await GetDashboardUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value
