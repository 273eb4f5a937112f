"""
Google Drive folder provisioning.

Each client gets a folder under the configured root and each case a
sub-folder named after its case number.
"""

import logging
import re
import time
from typing import Any, Dict, Optional

import httpx

from config import ApplicationConfig
from src.app.services.drive_service import IDriveService

logger = logging.getLogger(__name__)

DRIVE_API_URL = "https://www.googleapis.com/drive/v3"
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"

_FORBIDDEN_CHARS = re.compile(r'[\\/:*?"<>|]')


def sanitize_folder_name(name: str) -> str:
    trimmed = (name or "").strip()
    if not trimmed:
        return f"Carpeta_{int(time.time() * 1000)}"
    return _FORBIDDEN_CHARS.sub("-", trimmed)[:80]


class GoogleDriveService(IDriveService):
    def __init__(
        self,
        access_token: str = ApplicationConfig.GOOGLE_DRIVE_ACCESS_TOKEN,
        root_folder_id: str = ApplicationConfig.GOOGLE_DRIVE_ROOT_FOLDER_ID,
        timeout: float = ApplicationConfig.EXTERNAL_TIMEOUT_SECONDS,
    ):
        self.access_token = access_token
        self.root_folder_id = root_folder_id
        self.timeout = timeout

    async def _create_folder(self, client: httpx.AsyncClient, name: str, parent_id: str) -> str:
        response = await client.post(
            f"{DRIVE_API_URL}/files",
            json={
                "name": sanitize_folder_name(name),
                "mimeType": FOLDER_MIME_TYPE,
                "parents": [parent_id],
            },
            headers={"Authorization": f"Bearer {self.access_token}"},
        )
        if response.status_code >= 400:
            raise RuntimeError(f"Drive API error (files): {response.text}")
        payload: Dict[str, Any] = response.json()
        return payload["id"]

    async def ensure_case_folder(self, case_number: str, client_name: str) -> Optional[str]:
        if not self.root_folder_id:
            raise RuntimeError("Missing GOOGLE_DRIVE_ROOT_FOLDER_ID")

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            client_folder_id = await self._create_folder(client, client_name, self.root_folder_id)
            case_folder_id = await self._create_folder(client, case_number, client_folder_id)

        logger.info(f"Drive folder {case_folder_id} created for case {case_number}")
        return case_folder_id


class DisabledDriveService(IDriveService):
    """Used when no Drive credentials are configured"""

    async def ensure_case_folder(self, case_number: str, client_name: str) -> Optional[str]:
        return None
