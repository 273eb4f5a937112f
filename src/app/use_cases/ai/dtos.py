from typing import Any, Optional

from pydantic import BaseModel


class ReviewDocumentCommand(BaseModel):
    prompt: Optional[str] = None
    case_id: Optional[str] = None
    document_id: Optional[str] = None
    file_name: Optional[str] = None
    file_type: Optional[str] = None
    file_base64: Optional[str] = None


class ReviewDocumentResponse(BaseModel):
    result: str
    raw: Any = None
