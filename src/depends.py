from functools import lru_cache

from fastapi import Depends, Request, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.google_drive_service import DisabledDriveService, GoogleDriveService
from src.adapter.services.memory_rate_limiter import InMemoryRateLimiter
from src.adapter.services.resend_email_service import ResendEmailService
from src.adapter.services.s3_storage_service import S3StorageService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.webhook_document_review_service import WebhookDocumentReviewService
from src.api.error import ClientError
from src.api.utils.session import resolve_session
from src.app.services.authorization import Principal, require_role
from src.app.services.document_review_service import IDocumentReviewService
from src.app.services.drive_service import IDriveService
from src.app.services.email_service import IEmailService
from src.app.services.rate_limiter import IRateLimiter
from src.app.services.storage_service import IStorageService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Process-local; swap for a shared IRateLimiter when running several workers
_rate_limiter = InMemoryRateLimiter()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_rate_limiter() -> IRateLimiter:
    return _rate_limiter


@lru_cache
def get_storage() -> IStorageService:
    return S3StorageService()


def get_email_service() -> IEmailService:
    return ResendEmailService()


def get_drive_service() -> IDriveService:
    if not ApplicationConfig.GOOGLE_DRIVE_ACCESS_TOKEN:
        return DisabledDriveService()
    return GoogleDriveService()


def get_document_review_service() -> IDocumentReviewService:
    return WebhookDocumentReviewService()


async def get_principal(
    request: Request, uow: UnitOfWork = Depends(get_unit_of_work)
) -> Principal:
    """
    Dependency resolving the caller's session.

    The token only names the user; role and organization are read from the
    stored user so role changes and deactivations apply immediately.

    Raises:
        ClientError: 401 without a valid session or for a missing or
        deactivated user, 403 when the caller's organization has been
        deactivated
    """
    claimed = resolve_session(request)
    gate = require_role(claimed, UserRole)
    if gate.is_err():
        raise ClientError(gate.error, status_code=status.HTTP_401_UNAUTHORIZED)

    async with uow:
        user = await uow.users.get_by_id(claimed.id)
        organization = await uow.organizations.get_by_id(claimed.organization_id)

    if user is None or not user.is_active or user.organization_id != claimed.organization_id:
        raise ClientError(
            Error("UNAUTHORIZED", "Sesión no válida o expirada"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    if organization is None or not organization.is_active:
        raise ClientError(
            Error("ORGANIZATION_INACTIVE", "La organización está desactivada, contacta a soporte"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return Principal(id=user.id, role=user.role, organization_id=user.organization_id)


def require_roles(*roles: UserRole):
    """Dependency factory: a resolved principal holding one of the roles"""

    async def dependency(principal: Principal = Depends(get_principal)) -> Principal:
        gate = require_role(principal, roles)
        if gate.is_err():
            raise ClientError(gate.error, status_code=status.HTTP_403_FORBIDDEN)
        return gate.value

    return dependency


require_staff = require_roles(UserRole.admin, UserRole.staff)
require_admin = require_roles(UserRole.admin)
