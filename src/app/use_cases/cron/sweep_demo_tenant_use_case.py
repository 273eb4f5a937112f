"""
Demo Lifecycle Sweeper

Deletes demo-tenant content older than a TTL so the shared demo stays small.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, Optional

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.storage_service import IStorageService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid

logger = logging.getLogger(__name__)


class SweepDemoTenantUseCase:
    """
    Business Rules:
    - Only the organization named by DEMO_ORG_ID is swept
    - Eligible rows satisfy created_at < now - ttl (strict)
    - At most batch_limit rows of each kind per run
    - Stored payloads are deleted best-effort before the document rows
    - Running twice in a row deletes nothing the second time
    """

    def __init__(self, uow: UnitOfWork, storage: IStorageService):
        self.uow = uow
        self.storage = storage

    async def execute(
        self,
        ttl_minutes: int = ApplicationConfig.DEMO_TTL_MINUTES,
        batch_limit: int = ApplicationConfig.DEMO_BATCH_LIMIT,
        now: Optional[datetime] = None,
        demo_organization_id=None,
    ) -> Result[Dict[str, int]]:
        organization_id = parse_uuid(demo_organization_id or ApplicationConfig.DEMO_ORG_ID)
        if organization_id is None:
            return Return.err(
                Error("DEMO_ORG_NOT_CONFIGURED", "La organización demo no está configurada")
            )

        cutoff = (now or datetime.utcnow()) - timedelta(minutes=ttl_minutes)

        async with self.uow:
            documents = await self.uow.documents.find_created_before(
                organization_id, cutoff, batch_limit
            )
            messages = await self.uow.messages.find_created_before(
                organization_id, cutoff, batch_limit
            )
            notifications = await self.uow.notifications.find_created_before(
                organization_id, cutoff, batch_limit
            )

            for document in documents:
                if not document.storage_path:
                    continue
                try:
                    await self.storage.delete(document.storage_path)
                except Exception as exc:
                    logger.warning(f"Could not delete stored payload {document.storage_path}: {exc}")

            documents_deleted = await self.uow.documents.delete_by_ids(
                organization_id, [d.id for d in documents]
            )
            messages_deleted = await self.uow.messages.delete_by_ids(
                organization_id, [m.id for m in messages]
            )
            notifications_deleted = await self.uow.notifications.delete_by_ids(
                organization_id, [n.id for n in notifications]
            )
            await self.uow.commit()

        logger.info(
            f"Demo sweep removed {documents_deleted} documents, {messages_deleted} messages "
            f"and {notifications_deleted} notifications older than {cutoff.isoformat()}"
        )
        return Return.ok(
            {
                "documents_deleted": documents_deleted,
                "messages_deleted": messages_deleted,
                "notifications_deleted": notifications_deleted,
            }
        )
