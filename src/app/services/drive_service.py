from abc import ABC, abstractmethod
from typing import Optional


class IDriveService(ABC):
    """Folder provisioning in the firm's shared drive"""

    @abstractmethod
    async def ensure_case_folder(self, case_number: str, client_name: str) -> Optional[str]:
        """Create (or reuse) the folder of a case and return its id. Raises on failure."""
        pass
