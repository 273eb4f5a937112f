from abc import ABC, abstractmethod
from typing import Any, Dict


class DocumentReviewError(Exception):
    """Raised when the review agent cannot be reached or answers with an error"""

    def __init__(self, message: str, details: str = ""):
        self.details = details
        super().__init__(message)


class IDocumentReviewService(ABC):
    """AI document review agent reached through a webhook"""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        pass

    @abstractmethod
    async def review(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Submit a document for review and return the agent's JSON answer"""
        pass
