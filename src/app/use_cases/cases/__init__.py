"""
Case Use Cases

Cases, their stages and key dates.
"""

from .dtos import (
    CaseDetailResponse,
    CaseListResponse,
    CaseResponse,
    CreateCaseCommand,
    CreateKeyDateCommand,
    CreateStageCommand,
    DeleteKeyDateResponse,
    KeyDateListResponse,
    KeyDateResponse,
    StageResponse,
)
from .list_cases_use_case import ListCasesUseCase
from .get_case_use_case import GetCaseUseCase
from .create_case_use_case import CreateCaseUseCase, generate_case_number
from .update_case_use_case import UpdateCaseUseCase
from .create_stage_use_case import CreateStageUseCase
from .update_stage_use_case import UpdateStageUseCase
from .list_key_dates_use_case import ListKeyDatesUseCase
from .create_key_date_use_case import CreateKeyDateUseCase
from .update_key_date_use_case import UpdateKeyDateUseCase
from .delete_key_date_use_case import DeleteKeyDateUseCase

__all__ = [
    "ListCasesUseCase",
    "GetCaseUseCase",
    "CreateCaseUseCase",
    "UpdateCaseUseCase",
    "CreateStageUseCase",
    "UpdateStageUseCase",
    "ListKeyDatesUseCase",
    "CreateKeyDateUseCase",
    "UpdateKeyDateUseCase",
    "DeleteKeyDateUseCase",
    "generate_case_number",
    "CaseDetailResponse",
    "CaseListResponse",
    "CaseResponse",
    "CreateCaseCommand",
    "CreateKeyDateCommand",
    "CreateStageCommand",
    "DeleteKeyDateResponse",
    "KeyDateListResponse",
    "KeyDateResponse",
    "StageResponse",
]
