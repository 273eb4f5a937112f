from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from src.domain.entities import ActivityLog, User


class ActivityResponse(BaseModel):
    id: str
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    case_id: Optional[str] = None
    action: str
    description: Optional[str] = None
    metadata: Dict[str, Any] = {}
    created_at: datetime

    @classmethod
    def from_entity(
        cls, activity: ActivityLog, people: Optional[Dict[Any, User]] = None
    ) -> "ActivityResponse":
        actor = (people or {}).get(activity.user_id) if activity.user_id else None
        return cls(
            id=str(activity.id),
            user_id=str(activity.user_id) if activity.user_id else None,
            user_name=actor.name if actor else None,
            case_id=str(activity.case_id) if activity.case_id else None,
            action=activity.action,
            description=activity.description,
            metadata=activity.event_metadata or {},
            created_at=activity.created_at,
        )


class ActivityListResponse(BaseModel):
    activities: List[ActivityResponse]
