import logging
from typing import List, Optional

import httpx

from config import ApplicationConfig
from src.app.services.email_service import EmailRecipient, IEmailService

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class ResendEmailService(IEmailService):
    """Transactional email through the Resend HTTP API"""

    def __init__(
        self,
        api_key: str = ApplicationConfig.RESEND_API_KEY,
        from_email: str = ApplicationConfig.RESEND_FROM_EMAIL,
        timeout: float = ApplicationConfig.EXTERNAL_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key
        self.from_email = from_email
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.from_email)

    async def send(
        self,
        to: List[EmailRecipient],
        subject: str,
        text: Optional[str],
        html: str,
    ) -> Optional[str]:
        if not self.is_configured:
            raise RuntimeError("Resend no está configurado")

        payload = {
            "from": self.from_email,
            "to": [recipient.formatted() for recipient in to],
            "subject": subject,
            "html": html,
        }
        if text:
            payload["text"] = text

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                RESEND_API_URL,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )

        if response.status_code >= 400:
            logger.error(f"Resend API error {response.status_code}: {response.text}")
            raise RuntimeError(f"Resend respondió {response.status_code}: {response.text}")

        message_id = response.json().get("id")
        logger.info(f"Email sent to {len(to)} recipient(s), provider id {message_id}")
        return message_id
