"""
Activity/Notification Recorder

Best-effort side effects of successful mutations. A failure here is logged
and reported as an error Result; it never fails the primary operation.

Callers commit the primary mutation first, then record and commit again.
Each insert runs in a savepoint, so a failed side effect discards only
itself and leaves the caller's loaded rows readable.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityLog, Notification

logger = logging.getLogger(__name__)


async def log_activity(
    uow: UnitOfWork,
    organization_id: UUID,
    actor_id: Optional[UUID],
    action: str,
    description: str,
    case_id: Optional[UUID] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Result[ActivityLog]:
    try:
        async with uow.savepoint():
            activity = await uow.activity_logs.create(
                ActivityLog(
                    organization_id=organization_id,
                    user_id=actor_id,
                    case_id=case_id,
                    action=action,
                    description=description,
                    event_metadata=metadata or {},
                )
            )
    except Exception as exc:
        logger.error(f"Failed to log activity {action} for org {organization_id}: {exc}")
        return Return.err(Error("ACTIVITY_LOG_FAILED", str(exc)))

    return Return.ok(activity)


async def create_notification(
    uow: UnitOfWork,
    organization_id: UUID,
    recipient_id: Optional[UUID],
    title: str,
    body: str,
    category: str = "general",
    case_id: Optional[UUID] = None,
) -> Result[Notification]:
    if recipient_id is None:
        return Return.err(Error("NO_RECIPIENT", "Notification has no recipient"))

    try:
        async with uow.savepoint():
            notification = await uow.notifications.create(
                Notification(
                    organization_id=organization_id,
                    user_id=recipient_id,
                    title=title,
                    message=body,
                    type=category,
                    related_case_id=case_id,
                )
            )
    except Exception as exc:
        logger.error(
            f"Failed to create notification '{title}' for user {recipient_id}: {exc}"
        )
        return Return.err(Error("NOTIFICATION_FAILED", str(exc)))

    return Return.ok(notification)
