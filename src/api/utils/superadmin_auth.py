"""
Superadmin console authentication

Bearer token or ``superadmin_token`` cookie, verified against the superadmin
secret. Tenant session tokens are never accepted here.
"""

from fastapi import Request, status

from libs.result import Error
from src.api.error import ClientError
from src.api.utils.jwt import verify_superadmin_jwt

SUPERADMIN_COOKIE_NAME = "superadmin_token"


async def require_superadmin(request: Request) -> dict:
    """
    Raises:
        ClientError: 401 if the token is missing, invalid or not a superadmin token

    Returns:
        Decoded token payload (sub, email, role)
    """
    authorization = request.headers.get("authorization") or ""
    scheme, _, credentials = authorization.partition(" ")
    token = credentials.strip() if scheme.lower() == "bearer" else ""
    token = token or request.cookies.get(SUPERADMIN_COOKIE_NAME)

    payload = verify_superadmin_jwt(token) if token else None
    if payload is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Sesión de superadmin no válida"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return payload
