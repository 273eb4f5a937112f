from .dtos import ActivityListResponse, ActivityResponse
from .list_activity_use_case import ListActivityUseCase

__all__ = ["ListActivityUseCase", "ActivityListResponse", "ActivityResponse"]
