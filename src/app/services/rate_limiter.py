"""
Rate Limiter Interface

Fixed-window counters keyed by caller-composed strings.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple
from uuid import UUID

from config import ApplicationConfig
from libs.result import Error, Result, Return


@dataclass(frozen=True)
class RateLimitResult:
    ok: bool
    remaining: int = 0
    reset_at_ms: Optional[int] = None
    retry_after_ms: Optional[int] = None

    @property
    def retry_after_seconds(self) -> int:
        if not self.retry_after_ms:
            return 0
        return max(1, -(-self.retry_after_ms // 1000))


class IRateLimiter(ABC):
    """Rate limiter interface - one check-and-increment must be atomic"""

    @abstractmethod
    def check(self, key: str, limit: int, window_ms: int) -> RateLimitResult:
        """Count one call against key and report whether it is allowed"""
        pass


def rate_limit_key(action: str, organization_id: Optional[UUID], identity: str) -> str:
    """Compose a limiter key so limits apply per action, tenant and identity"""
    tenant = str(organization_id) if organization_id else "-"
    return f"{action}:{tenant}:{identity}"


def is_demo_organization(organization) -> bool:
    """Flagged as demo in its metadata, or the configured demo organization"""
    if organization is None:
        return False
    if organization.is_demo:
        return True
    return bool(ApplicationConfig.DEMO_ORG_ID) and str(organization.id) == str(
        ApplicationConfig.DEMO_ORG_ID
    )


def limits_for(action: str, organization=None) -> Tuple[int, int]:
    """
    (limit, window_ms) of an action.

    Demo organizations may override any action through
    ``org_metadata["demo_limits"][action] = [limit, window_ms]``.
    """
    limit, window_ms = ApplicationConfig.RATE_LIMITS[action]
    if is_demo_organization(organization):
        override = organization.demo_limits.get(action)
        if override:
            limit, window_ms = override
    return int(limit), int(window_ms)


def enforce_rate_limit(
    limiter: IRateLimiter,
    action: str,
    organization_id: Optional[UUID],
    identity: str,
    organization=None,
) -> Result[RateLimitResult]:
    """
    Count one call of ``action`` and turn a rejection into a RATE_LIMITED error.

    The error reason carries the Retry-After value in seconds.
    """
    limit, window_ms = limits_for(action, organization)
    outcome = limiter.check(rate_limit_key(action, organization_id, identity), limit, window_ms)
    if not outcome.ok:
        return Return.err(
            Error(
                "RATE_LIMITED",
                "Demasiadas solicitudes, intenta de nuevo en unos segundos",
                reason=str(outcome.retry_after_seconds),
            )
        )
    return Return.ok(outcome)
