"""
Community Admin API Routes

Community listing, delete preview, cascade delete with backup, and restore.
All routes require an admin JWT; permissions come from the RBAC matrix.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from libs.result import Error
from src.api.error import ClientError, ServerError
from src.api.utils.rbac import require_permission
from src.app.services.audit_recorder import AdminActor, RequestOrigin
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.communities import (
    BulkUpdateCommunityStatusUseCase,
    BulkUpdateStatusResponse,
    CommunitiesResponse,
    CommunityResponse,
    DeleteCommunityResponse,
    DeleteCommunityUseCase,
    DeletedCommunitiesResponse,
    DeletePreviewResponse,
    GetCommunityUseCase,
    GetDeletePreviewUseCase,
    ListCommunitiesUseCase,
    ListDeletedCommunitiesUseCase,
    RestoreCommunityResponse,
    RestoreCommunityUseCase,
)
from src.depends import get_request_origin, get_unit_of_work
from src.domain.entities import BackupStatus, CommunityStatus

router = APIRouter(prefix="/communities", tags=["Communities"])


def parse_uuid(value: str, code: str, message: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(Error(code, message), status_code=status.HTTP_400_BAD_REQUEST)


def parse_community_id(community_id: str) -> UUID:
    return parse_uuid(community_id, "INVALID_COMMUNITY_ID", "Invalid community ID format")


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=CommunitiesResponse,
)
async def list_communities(
    actor: AdminActor = Depends(require_permission("read:communities")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Communities

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 403 Forbidden: INSUFFICIENT_PERMISSIONS
    """
    result = await ListCommunitiesUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get(
    "/deleted",
    status_code=status.HTTP_200_OK,
    response_model=DeletedCommunitiesResponse,
)
async def list_deleted_communities(
    actor: AdminActor = Depends(require_permission("read:communities")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    backup_status: Optional[BackupStatus] = Query(None, alias="status"),
    limit: int = Query(50, ge=1, le=100),
):
    """
    List Deleted Community Backups

    Newest deletions first, optionally filtered by backup status.
    """
    result = await ListDeletedCommunitiesUseCase(uow).execute(status=backup_status, limit=limit)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


class BulkUpdateStatusRequest(BaseModel):
    """Bulk status update HTTP request payload"""

    ids: List[UUID] = Field(..., min_length=1, description="Community ids to update")
    status: CommunityStatus


@router.post(
    "/bulk-update",
    status_code=status.HTTP_200_OK,
    response_model=BulkUpdateStatusResponse,
)
async def bulk_update_status(
    request: BulkUpdateStatusRequest,
    actor: AdminActor = Depends(require_permission("write:communities")),
    origin: RequestOrigin = Depends(get_request_origin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Bulk Update Community Status

    Raises:
        - 400 Bad Request: INVALID_REQUEST
        - 403 Forbidden: INSUFFICIENT_PERMISSIONS (requires write:communities)
        - 500 Internal Server Error: BULK_UPDATE_FAILED
    """
    use_case = BulkUpdateCommunityStatusUseCase(uow)
    result = await use_case.execute(actor, request.ids, request.status, origin=origin)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_REQUEST":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get(
    "/{community_id}",
    status_code=status.HTTP_200_OK,
    response_model=CommunityResponse,
)
async def get_community(
    community_id: str,
    actor: AdminActor = Depends(require_permission("read:communities")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Community

    Raises:
        - 400 Bad Request: INVALID_COMMUNITY_ID
        - 404 Not Found: COMMUNITY_NOT_FOUND
    """
    community_uuid = parse_community_id(community_id)

    result = await GetCommunityUseCase(uow).execute(community_uuid)
    if result.is_err():
        error = result.error
        if error.code == "COMMUNITY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value


@router.get(
    "/{community_id}/delete-preview",
    status_code=status.HTTP_200_OK,
    response_model=DeletePreviewResponse,
)
async def get_delete_preview(
    community_id: str,
    actor: AdminActor = Depends(require_permission("delete:critical")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Preview

    Counts of the records a deletion would remove, per dependent type.

    Raises:
        - 400 Bad Request: INVALID_COMMUNITY_ID
        - 403 Forbidden: INSUFFICIENT_PERMISSIONS (requires delete:critical)
        - 404 Not Found: COMMUNITY_NOT_FOUND
    """
    community_uuid = parse_community_id(community_id)

    result = await GetDeletePreviewUseCase(uow).execute(community_uuid)
    if result.is_err():
        error = result.error
        if error.code == "COMMUNITY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value


class DeleteCommunityRequest(BaseModel):
    """
    Delete community HTTP request payload

    The body is optional; reason is stored with the backup and audit entry.
    """

    reason: Optional[str] = Field(None, max_length=1000, description="Why the community is deleted")


@router.delete(
    "/{community_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteCommunityResponse,
)
async def delete_community(
    community_id: str,
    request: Optional[DeleteCommunityRequest] = None,
    actor: AdminActor = Depends(require_permission("delete:critical")),
    origin: RequestOrigin = Depends(get_request_origin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Community

    Backs up the community and all of its dependents, then cascade deletes
    them. The backup can be restored until canRestoreUntil.

    Raises:
        - 400 Bad Request: INVALID_COMMUNITY_ID
        - 401 Unauthorized: Missing or invalid token
        - 403 Forbidden: INSUFFICIENT_PERMISSIONS (requires delete:critical)
        - 404 Not Found: COMMUNITY_NOT_FOUND
        - 409 Conflict: DELETION_IN_PROGRESS
        - 500 Internal Server Error: BACKUP_FAILED, PARTIAL_CASCADE_FAILURE
    """
    community_uuid = parse_community_id(community_id)
    reason = request.reason if request else None

    use_case = DeleteCommunityUseCase(uow)
    result = await use_case.execute(actor, community_uuid, reason=reason, origin=origin)

    if result.is_err():
        error = result.error
        if error.code == "COMMUNITY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "DELETION_IN_PROGRESS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.post(
    "/{backup_id}/restore",
    status_code=status.HTTP_200_OK,
    response_model=RestoreCommunityResponse,
)
async def restore_community(
    backup_id: str,
    actor: AdminActor = Depends(require_permission("delete:critical")),
    origin: RequestOrigin = Depends(get_request_origin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Restore Community

    Recreates a deleted community from its backup under a new id.

    Raises:
        - 400 Bad Request: INVALID_BACKUP_ID, ALREADY_RESTORED,
                           PERMANENTLY_DELETED, BACKUP_EXPIRED
        - 403 Forbidden: INSUFFICIENT_PERMISSIONS (requires delete:critical)
        - 404 Not Found: BACKUP_NOT_FOUND
        - 500 Internal Server Error: RESTORE_FAILED
    """
    backup_uuid = parse_uuid(backup_id, "INVALID_BACKUP_ID", "Invalid backup ID format")

    use_case = RestoreCommunityUseCase(uow)
    result = await use_case.execute(actor, backup_uuid, origin=origin)

    if result.is_err():
        error = result.error
        if error.code == "BACKUP_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in ("ALREADY_RESTORED", "PERMANENTLY_DELETED", "BACKUP_EXPIRED"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
