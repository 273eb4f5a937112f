from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.activity_log_repository import ActivityLogRepository
from src.adapter.repositories.case_key_date_repository import CaseKeyDateRepository
from src.adapter.repositories.case_repository import CaseRepository
from src.adapter.repositories.case_stage_repository import CaseStageRepository
from src.adapter.repositories.document_repository import DocumentRepository
from src.adapter.repositories.message_repository import MessageRepository
from src.adapter.repositories.metrics_repository import MetricsRepository
from src.adapter.repositories.notification_repository import NotificationRepository
from src.adapter.repositories.organization_repository import OrganizationRepository
from src.adapter.repositories.reminder_repository import ReminderRepository
from src.adapter.repositories.super_admin_repository import SuperAdminRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Every repository shares one session, hence one transaction
        self.organizations = OrganizationRepository(self.session)
        self.users = UserRepository(self.session)
        self.cases = CaseRepository(self.session)
        self.case_stages = CaseStageRepository(self.session)
        self.key_dates = CaseKeyDateRepository(self.session)
        self.reminders = ReminderRepository(self.session)
        self.documents = DocumentRepository(self.session)
        self.messages = MessageRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        self.activity_logs = ActivityLogRepository(self.session)
        self.super_admins = SuperAdminRepository(self.session)
        self.metrics = MetricsRepository(self.session)
        return self

    async def __aexit__(self, exc_type, *args):
        # Rolling back expires every loaded instance; only do it when there
        # is something to discard so committed results stay readable.
        session = self.session
        if exc_type is not None or session.new or session.dirty or session.deleted:
            await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

    def savepoint(self):
        return self.session.begin_nested()
