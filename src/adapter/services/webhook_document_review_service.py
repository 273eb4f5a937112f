import logging
from typing import Any, Dict

import httpx

from config import ApplicationConfig
from src.app.services.document_review_service import (
    DocumentReviewError,
    IDocumentReviewService,
)

logger = logging.getLogger(__name__)


class WebhookDocumentReviewService(IDocumentReviewService):
    """Posts documents to the review agent's webhook"""

    def __init__(
        self,
        webhook_url: str = ApplicationConfig.DOCUMENT_REVIEW_WEBHOOK_URL,
        timeout: float = ApplicationConfig.EXTERNAL_TIMEOUT_SECONDS,
    ):
        self.webhook_url = webhook_url
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.webhook_url)

    async def review(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.webhook_url, json=payload)
        except httpx.HTTPError as exc:
            logger.error(f"Review webhook unreachable: {exc}")
            raise DocumentReviewError("El agente de IA no respondió correctamente.", str(exc))

        if response.status_code >= 400:
            logger.error(f"Review webhook answered {response.status_code}")
            raise DocumentReviewError(
                "El agente de IA no respondió correctamente.", response.text
            )

        try:
            return response.json()
        except ValueError:
            return {}
