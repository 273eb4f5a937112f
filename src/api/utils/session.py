"""
Session Resolver

The only place that knows how a tenant session travels: a bearer token in
the Authorization header, or the session cookie set at login.
"""

from typing import Optional
from uuid import UUID

from fastapi import Request, Response

from config import ApplicationConfig
from src.api.utils.jwt import generate_session_jwt, verify_session_jwt
from src.app.services.authorization import Principal
from src.domain.entities import UserRole


def _token_from(request: Request) -> Optional[str]:
    authorization = request.headers.get("authorization") or ""
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(ApplicationConfig.SESSION_COOKIE_NAME)


def resolve_session(request: Request) -> Optional[Principal]:
    """Principal of a valid session, or None. Never raises."""
    token = _token_from(request)
    if not token:
        return None

    payload = verify_session_jwt(token)
    if payload is None:
        return None

    try:
        return Principal(
            id=UUID(payload["user_id"]),
            role=UserRole(payload["role"]),
            organization_id=UUID(payload["organization_id"]),
        )
    except (KeyError, ValueError):
        return None


def create_session(user, response: Optional[Response] = None) -> str:
    """Issue a session token for a user; also sets the cookie when a response is given"""
    role = getattr(user.role, "value", user.role)
    token = generate_session_jwt(user.id, user.organization_id, role)
    if response is not None:
        response.set_cookie(
            ApplicationConfig.SESSION_COOKIE_NAME,
            token,
            max_age=ApplicationConfig.SESSION_TTL_MINUTES * 60,
            httponly=True,
            secure=ApplicationConfig.SESSION_COOKIE_SECURE,
            samesite="lax",
            path="/",
        )
    return token


def destroy_session(response: Response) -> None:
    response.delete_cookie(ApplicationConfig.SESSION_COOKIE_NAME, path="/")


def client_ip(request: Request) -> str:
    """First X-Forwarded-For hop, else the peer address"""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client is not None:
        return request.client.host
    return "unknown"
