from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig

SESSION_TOKEN_TYPE = "session"
SUPERADMIN_TOKEN_TYPE = "superadmin"


def generate_session_jwt(
    user_id: UUID,
    organization_id: UUID,
    role: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Generate tenant session token

    Args:
        user_id: User UUID
        organization_id: Organization UUID
        role: User role (admin, staff, client)
        expires_delta: Lifetime, SESSION_TTL_MINUTES by default

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    lifetime = expires_delta or timedelta(minutes=ApplicationConfig.SESSION_TTL_MINUTES)
    payload = {
        "typ": SESSION_TOKEN_TYPE,
        "user_id": str(user_id),
        "organization_id": str(organization_id),
        "role": role,
        "exp": now + lifetime,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def generate_superadmin_jwt(
    super_admin_id: UUID, email: str, expires_delta: Optional[timedelta] = None
) -> str:
    """Generate superadmin console token (role=superadmin, 8h by default)"""
    now = datetime.now(UTC)
    lifetime = expires_delta or timedelta(
        seconds=ApplicationConfig.SUPERADMIN_TOKEN_TTL_SECONDS
    )
    payload = {
        "typ": SUPERADMIN_TOKEN_TYPE,
        "sub": str(super_admin_id),
        "email": email,
        "role": "superadmin",
        "exp": now + lifetime,
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.SUPERADMIN_JWT_SECRET, algorithm="HS256"
    )


def _decode(token: str, secret: str, token_type: str) -> Optional[dict]:
    try:
        payload = jwt.decode(token, secret, algorithms=["HS256"])
    except JWTError:
        return None
    if payload.get("typ") != token_type:
        return None
    return payload


def verify_session_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode a tenant session token

    Returns:
        Decoded payload dict or None if invalid, expired or of another type
    """
    return _decode(token, ApplicationConfig.JWT_SECRET, SESSION_TOKEN_TYPE)


def verify_superadmin_jwt(token: str) -> Optional[dict]:
    payload = _decode(
        token, ApplicationConfig.SUPERADMIN_JWT_SECRET, SUPERADMIN_TOKEN_TYPE
    )
    if payload is None or payload.get("role") != "superadmin":
        return None
    return payload
