"""
Client Directory DTOs
"""

from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from src.app.use_cases.auth.dtos import UserInfo
from src.app.use_cases.cases.dtos import CaseResponse, StageResponse
from src.app.use_cases.documents.dtos import DocumentResponse


class CreateClientCommand(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = None
    country_of_origin: Optional[str] = None


class ClientSummary(UserInfo):
    case_count: int = 0
    unread_notifications: int = 0


class ClientListResponse(BaseModel):
    clients: List[ClientSummary]


class CreateClientResponse(BaseModel):
    client: UserInfo
    temporary_password: str


class ClientCase(BaseModel):
    case: CaseResponse
    stages: List[StageResponse]
    documents: List[DocumentResponse]


class ClientDetailResponse(BaseModel):
    client: UserInfo
    cases: List[ClientCase]
