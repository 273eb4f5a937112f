from abc import ABC, abstractmethod

from src.app.repositories.activity_log_repository import IActivityLogRepository
from src.app.repositories.case_key_date_repository import ICaseKeyDateRepository
from src.app.repositories.case_repository import ICaseRepository
from src.app.repositories.case_stage_repository import ICaseStageRepository
from src.app.repositories.document_repository import IDocumentRepository
from src.app.repositories.message_repository import IMessageRepository
from src.app.repositories.metrics_repository import IMetricsRepository
from src.app.repositories.notification_repository import INotificationRepository
from src.app.repositories.organization_repository import IOrganizationRepository
from src.app.repositories.reminder_repository import IReminderRepository
from src.app.repositories.super_admin_repository import ISuperAdminRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    organizations: IOrganizationRepository
    users: IUserRepository
    cases: ICaseRepository
    case_stages: ICaseStageRepository
    key_dates: ICaseKeyDateRepository
    reminders: IReminderRepository
    documents: IDocumentRepository
    messages: IMessageRepository
    notifications: INotificationRepository
    activity_logs: IActivityLogRepository
    super_admins: ISuperAdminRepository
    metrics: IMetricsRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

    @abstractmethod
    def savepoint(self):
        """
        Async context manager around a nested transaction.

        An exception inside it discards only the work done inside it; the
        enclosing transaction and already loaded instances stay usable.
        """
        pass
