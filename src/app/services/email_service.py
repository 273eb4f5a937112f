from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class EmailRecipient:
    email: str
    name: Optional[str] = None

    def formatted(self) -> str:
        return f"{self.name} <{self.email}>" if self.name else self.email


class IEmailService(ABC):
    """Transactional email provider"""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        pass

    @abstractmethod
    async def send(
        self,
        to: List[EmailRecipient],
        subject: str,
        text: Optional[str],
        html: str,
    ) -> Optional[str]:
        """Send one message; returns the provider message id. Raises on failure."""
        pass
