from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class StoredObject:
    path: str
    signed_url: Optional[str]


class IStorageService(ABC):
    """Object storage for case document payloads"""

    @abstractmethod
    async def upload_case_document(
        self,
        organization_id: UUID,
        case_id: UUID,
        file_name: str,
        content: bytes,
        content_type: str,
        uploader_id: Optional[UUID] = None,
    ) -> StoredObject:
        """Store a payload and return its path plus a signed URL"""
        pass

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Delete a stored payload; raises on provider failure"""
        pass

    @abstractmethod
    async def download(self, path: str) -> bytes:
        """Fetch a stored payload; raises on provider failure"""
        pass

    @abstractmethod
    async def signed_url(self, path: str) -> Optional[str]:
        """Signed download URL, or None when it cannot be produced"""
        pass
