"""
Cron Key Authentication

Scheduled jobs call in with the shared secret in the x-cron-key header.
"""

import hmac

from fastapi import Header, status
from libs.result import Error
from src.api.error import ClientError
from config import ApplicationConfig


async def verify_cron_key(x_cron_key: str = Header(None)):
    """
    Raises:
        ClientError: 401 if the key is missing or wrong, or when no secret is
        configured (an empty CRON_SECRET_KEY rejects every caller)
    """
    secret = ApplicationConfig.CRON_SECRET_KEY
    if not secret or not x_cron_key or not hmac.compare_digest(x_cron_key, secret):
        raise ClientError(
            Error("UNAUTHORIZED", "Clave de cron inválida"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return True
