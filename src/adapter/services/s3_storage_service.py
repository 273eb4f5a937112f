"""
S3-compatible storage for case document payloads.

boto3 is synchronous; every call runs in a worker thread so the event loop
is never blocked.
"""

import asyncio
import logging
import re
import time
from typing import Optional
from uuid import UUID

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from config import ApplicationConfig
from src.app.services.storage_service import IStorageService, StoredObject

LOGGER = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _normalize_endpoint(url: Optional[str]) -> Optional[str]:
    """Ensure endpoints include a scheme so boto3 accepts them."""
    if not url:
        return None
    if url.startswith("http://") or url.startswith("https://"):
        return url
    return f"http://{url}"


def safe_file_name(file_name: str) -> str:
    cleaned = _UNSAFE_CHARS.sub("_", file_name or "").strip("._")
    return cleaned or "documento"


def build_object_path(organization_id: UUID, case_id: UUID, file_name: str) -> str:
    """{organization}/{case}/{millis}-{safe name}"""
    return f"{organization_id}/{case_id}/{int(time.time() * 1000)}-{safe_file_name(file_name)}"


class S3StorageService(IStorageService):
    def __init__(
        self,
        bucket: str = ApplicationConfig.STORAGE_BUCKET,
        endpoint: str = ApplicationConfig.STORAGE_ENDPOINT,
        access_key: str = ApplicationConfig.STORAGE_ACCESS_KEY,
        secret_key: str = ApplicationConfig.STORAGE_SECRET_KEY,
        region: str = ApplicationConfig.STORAGE_REGION,
        signed_url_ttl: int = ApplicationConfig.SIGNED_URL_TTL_SECONDS,
    ):
        self.bucket = bucket
        self.signed_url_ttl = signed_url_ttl
        session = boto3.session.Session(
            aws_access_key_id=access_key or None,
            aws_secret_access_key=secret_key or None,
            region_name=region,
        )
        self._client = session.client(
            "s3",
            endpoint_url=_normalize_endpoint(endpoint),
            config=Config(signature_version="s3v4"),
        )

    async def upload_case_document(
        self,
        organization_id: UUID,
        case_id: UUID,
        file_name: str,
        content: bytes,
        content_type: str,
        uploader_id: Optional[UUID] = None,
    ) -> StoredObject:
        path = build_object_path(organization_id, case_id, file_name)
        metadata = {"organization_id": str(organization_id), "case_id": str(case_id)}
        if uploader_id:
            metadata["uploaded_by"] = str(uploader_id)

        await asyncio.to_thread(
            self._client.put_object,
            Bucket=self.bucket,
            Key=path,
            Body=content,
            ContentType=content_type,
            Metadata=metadata,
        )
        LOGGER.info("Stored document payload %s (%d bytes)", path, len(content))
        return StoredObject(path=path, signed_url=await self.signed_url(path))

    async def delete(self, path: str) -> None:
        await asyncio.to_thread(self._client.delete_object, Bucket=self.bucket, Key=path)

    async def download(self, path: str) -> bytes:
        response = await asyncio.to_thread(
            self._client.get_object, Bucket=self.bucket, Key=path
        )
        body = response["Body"]
        try:
            return await asyncio.to_thread(body.read)
        finally:
            body.close()

    async def signed_url(self, path: str) -> Optional[str]:
        try:
            return await asyncio.to_thread(
                self._client.generate_presigned_url,
                "get_object",
                Params={"Bucket": self.bucket, "Key": path},
                ExpiresIn=self.signed_url_ttl,
            )
        except (BotoCoreError, ClientError) as exc:
            LOGGER.warning("Could not sign URL for %s: %s", path, exc)
            return None
