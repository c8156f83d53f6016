"""Community administration use cases: listing, delete preview, cascade delete, restore."""

from .dtos import (
    BackupInfo,
    BulkUpdateStatusResponse,
    CommunitiesResponse,
    CommunityInfo,
    CommunityResponse,
    CommunitySummary,
    DeleteCommunityResponse,
    DeletedCommunitiesResponse,
    DeletedCommunityInfo,
    DeletePreviewResponse,
    RestoreCommunityResponse,
)
from .bulk_update_status_use_case import BulkUpdateCommunityStatusUseCase
from .delete_community_use_case import DeleteCommunityUseCase
from .get_delete_preview_use_case import GetDeletePreviewUseCase
from .list_communities_use_case import GetCommunityUseCase, ListCommunitiesUseCase
from .list_deleted_communities_use_case import ListDeletedCommunitiesUseCase
from .restore_community_use_case import RestoreCommunityUseCase

__all__ = [
    "BulkUpdateCommunityStatusUseCase",
    "BulkUpdateStatusResponse",
    "GetDeletePreviewUseCase",
    "DeletePreviewResponse",
    "DeleteCommunityUseCase",
    "DeleteCommunityResponse",
    "BackupInfo",
    "RestoreCommunityUseCase",
    "RestoreCommunityResponse",
    "CommunitySummary",
    "ListCommunitiesUseCase",
    "GetCommunityUseCase",
    "CommunitiesResponse",
    "CommunityResponse",
    "CommunityInfo",
    "ListDeletedCommunitiesUseCase",
    "DeletedCommunitiesResponse",
    "DeletedCommunityInfo",
]
