import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.google_drive_service import DisabledDriveService
from src.adapter.services.memory_rate_limiter import InMemoryRateLimiter
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import (
    get_document_review_service,
    get_drive_service,
    get_email_service,
    get_rate_limiter,
    get_storage,
    get_unit_of_work,
)
from tests.integration.helpers import (
    InMemoryStorage,
    RecordingEmailService,
    Seeder,
    StubReviewService,
)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def storage():
    return InMemoryStorage()


@pytest_asyncio.fixture
def email_service():
    return RecordingEmailService()


@pytest_asyncio.fixture
def review_service():
    return StubReviewService()


@pytest_asyncio.fixture
def seed(db_session):
    return Seeder(db_session)


@pytest_asyncio.fixture
async def client(db_session, storage, email_service, review_service):
    from src.api.app import create_app

    app = create_app(ApplicationConfig)
    rate_limiter = InMemoryRateLimiter()

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_email_service] = lambda: email_service
    app.dependency_overrides[get_drive_service] = lambda: DisabledDriveService()
    app.dependency_overrides[get_document_review_service] = lambda: review_service
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
