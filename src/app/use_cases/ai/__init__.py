"""
AI Document Review Use Cases
"""

from .dtos import ReviewDocumentCommand, ReviewDocumentResponse
from .review_document_use_case import ReviewDocumentUseCase

__all__ = ["ReviewDocumentUseCase", "ReviewDocumentCommand", "ReviewDocumentResponse"]
