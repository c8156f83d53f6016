"""
Community Use Case DTOs (Data Transfer Objects)

Response classes for the community administration use cases.
Field aliases give the camelCase keys the admin console reads.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Shared
# ============================================================================


class CommunitySummary(BaseModel):
    """Minimal community identity returned by preview and restore"""

    id: str
    name: str
    location: Optional[str] = None


class CommunityInfo(BaseModel):
    """Community row in admin listings"""

    id: str
    name: str
    location: Optional[str] = None
    status: str
    subscription_plan: Optional[str] = None
    subscription_status: str
    total_members: int
    created_at: str


# ============================================================================
# Response DTOs
# ============================================================================


class DeletePreviewResponse(BaseModel):
    """Response for get delete preview use case"""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    community: CommunitySummary
    will_delete: Dict[str, int] = Field(alias="willDelete")


class BackupInfo(BaseModel):
    """Backup reference returned after deletion"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    can_restore_until: str = Field(alias="canRestoreUntil")


class DeleteCommunityResponse(BaseModel):
    """Response for delete community use case"""

    success: bool = True
    message: str
    deleted: Dict[str, int]
    backup: BackupInfo


class RestoreCommunityResponse(BaseModel):
    """Response for restore community use case"""

    success: bool = True
    message: str
    community: CommunitySummary
    restored: Dict[str, int]


class DeletedCommunityInfo(BaseModel):
    """Backup row in the deleted communities listing"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    original_community_id: str
    community_name: Optional[str] = None
    deleted_by_email: Optional[str] = None
    deleted_at: str
    reason: Optional[str] = None
    counts: Dict[str, int]
    status: str
    can_restore_until: str = Field(alias="canRestoreUntil")
    restored_at: Optional[str] = None
    restored_community_id: Optional[str] = None


class DeletedCommunitiesResponse(BaseModel):
    """Response for list deleted communities use case"""

    success: bool = True
    backups: List[DeletedCommunityInfo]


class CommunitiesResponse(BaseModel):
    """Response for list communities use case"""

    success: bool = True
    communities: List[CommunityInfo]


class CommunityResponse(BaseModel):
    """Response for get community use case"""

    success: bool = True
    community: CommunityInfo


class BulkUpdateStatusResponse(BaseModel):
    """Response for bulk update community status use case"""

    success: bool = True
    message: str
    updated: int
