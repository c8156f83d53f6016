"""
RBAC Permission Matrix

Pure role -> permission mapping plus a FastAPI dependency factory that
enforces a permission on a route.
"""

import logging
from typing import Dict, List

from fastapi import Depends, status

from libs.result import Error
from src.api.error import ClientError
from src.app.services.audit_recorder import AdminActor
from src.depends import get_current_admin

logger = logging.getLogger(__name__)

PERMISSIONS: Dict[str, List[str]] = {
    "super-admin": ["*"],
    "admin": [
        # Read permissions
        "read:communities",
        "read:users",
        "read:applications",
        "read:payments",
        "read:issues",
        "read:analytics",
        # Write permissions
        "write:communities",
        "write:users",
        "write:applications",
        "write:issues",
        # Delete permissions (non-critical only)
        "delete:users",
        "delete:issues",
    ],
    "support": [
        "read:communities",
        "read:users",
        "read:applications",
        "read:issues",
        "write:issues",
        "write:applications",
    ],
}


def get_role_permissions(role: str) -> List[str]:
    return PERMISSIONS.get(role, [])


def has_permission(role: str, permission: str) -> bool:
    """
    Check if a role grants a permission.

    Matches "*", the exact permission, or an action wildcard such as
    "read:*" for "read:communities".
    """
    role_permissions = get_role_permissions(role)
    if "*" in role_permissions or permission in role_permissions:
        return True
    action = permission.split(":", 1)[0]
    return f"{action}:*" in role_permissions


def require_permission(permission: str):
    """Dependency factory: resolves the current admin and enforces `permission`"""

    async def dependency(actor: AdminActor = Depends(get_current_admin)) -> AdminActor:
        if not has_permission(actor.role, permission):
            logger.warning(
                f"Permission denied: {actor.role} attempted {permission} (admin {actor.admin_id})"
            )
            raise ClientError(
                Error(
                    "INSUFFICIENT_PERMISSIONS",
                    "Insufficient permissions",
                    reason=f"Requires {permission}",
                ),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return actor

    return dependency
