"""
Use Cases

Organized into domain folders:
- communities/: Community listing, delete preview, cascade delete and restore
- audit/: Admin audit log
- dashboard/: Admin dashboard KPIs
"""

from .communities import (
    BulkUpdateCommunityStatusUseCase,
    DeleteCommunityUseCase,
    GetCommunityUseCase,
    GetDeletePreviewUseCase,
    ListCommunitiesUseCase,
    ListDeletedCommunitiesUseCase,
    RestoreCommunityUseCase,
)
from .audit import GetAuditLogsUseCase
from .dashboard import GetDashboardUseCase

__all__ = [
    # Communities
    "BulkUpdateCommunityStatusUseCase",
    "DeleteCommunityUseCase",
    "GetCommunityUseCase",
    "GetDeletePreviewUseCase",
    "ListCommunitiesUseCase",
    "ListDeletedCommunitiesUseCase",
    "RestoreCommunityUseCase",
    # Audit
    "GetAuditLogsUseCase",
    # Dashboard
    "GetDashboardUseCase",
]
