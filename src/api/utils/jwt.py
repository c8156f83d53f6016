from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(admin_id: UUID, email: str, role: str) -> str:
    """
    Generate admin access token

    Args:
        admin_id: Admin UUID
        email: Admin email
        role: Admin role (super-admin, admin, support)

    Returns:
        JWT token string (HS256, JWT_EXPIRE_MINUTES expiry)
    """
    now = datetime.now(UTC)
    payload = {
        "admin_id": str(admin_id),
        "email": email,
        "role": role,
        "exp": now + timedelta(minutes=ApplicationConfig.JWT_EXPIRE_MINUTES),
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
