import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch
from uuid import uuid4

from config import ApplicationConfig
from src.adapter.services.memory_rate_limiter import InMemoryRateLimiter
from src.app.services.rate_limiter import (
    RateLimitResult,
    enforce_rate_limit,
    is_demo_organization,
    limits_for,
    rate_limit_key,
)
from tests.factories import make_organization


class FakeClock:
    def __init__(self, now: int = 1_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now


def test_allows_up_to_limit_within_window():
    """The first `limit` calls pass, the next one is rejected"""
    clock = FakeClock()
    limiter = InMemoryRateLimiter(clock=clock)

    results = [limiter.check("k", 3, 1000) for _ in range(3)]
    rejected = limiter.check("k", 3, 1000)

    assert all(r.ok for r in results)
    assert [r.remaining for r in results] == [2, 1, 0]
    assert rejected.ok is False
    assert rejected.retry_after_ms == 1000


def test_retry_after_shrinks_as_window_ages():
    clock = FakeClock()
    limiter = InMemoryRateLimiter(clock=clock)
    limiter.check("k", 1, 1000)

    clock.now += 400
    rejected = limiter.check("k", 1, 1000)

    assert rejected.ok is False
    assert rejected.retry_after_ms == 600
    assert rejected.retry_after_seconds == 1


def test_window_resets_exactly_at_boundary():
    """At now == reset_at the old window is expired and a new one opens with count=1"""
    clock = FakeClock()
    limiter = InMemoryRateLimiter(clock=clock)
    limiter.check("k", 1, 1000)
    assert limiter.check("k", 1, 1000).ok is False

    clock.now += 1000
    result = limiter.check("k", 1, 1000)

    assert result.ok is True
    assert result.remaining == 0
    assert result.reset_at_ms == clock.now + 1000


def test_concurrent_callers_get_exactly_limit_passes():
    """Threads racing on one key never let more than `limit` calls through"""
    limiter = InMemoryRateLimiter(clock=FakeClock())
    limit, callers = 20, 64
    barrier = threading.Barrier(callers)

    def call(_):
        barrier.wait()
        return limiter.check("message_send:org:u1", limit, 60_000)

    with ThreadPoolExecutor(max_workers=callers) as pool:
        results = list(pool.map(call, range(callers)))

    passed = [r for r in results if r.ok]
    assert len(passed) == limit
    assert sorted(r.remaining for r in passed) == list(range(limit))
    assert all(r.retry_after_ms == 60_000 for r in results if not r.ok)


def test_keys_are_isolated():
    limiter = InMemoryRateLimiter(clock=FakeClock())
    limiter.check("login:-:1.1.1.1", 1, 1000)

    assert limiter.check("login:-:1.1.1.1", 1, 1000).ok is False
    assert limiter.check("login:-:2.2.2.2", 1, 1000).ok is True


def test_expired_windows_are_evicted_when_full():
    clock = FakeClock()
    limiter = InMemoryRateLimiter(clock=clock, max_keys=2)
    limiter.check("a", 5, 100)
    limiter.check("b", 5, 100)

    clock.now += 200
    limiter.check("c", 5, 100)

    assert set(limiter._windows) == {"c"}


def test_reset_clears_counters():
    limiter = InMemoryRateLimiter(clock=FakeClock())
    limiter.check("k", 1, 1000)
    limiter.reset()

    assert limiter.check("k", 1, 1000).ok is True


def test_retry_after_seconds_rounds_up():
    assert RateLimitResult(ok=False, retry_after_ms=1).retry_after_seconds == 1
    assert RateLimitResult(ok=False, retry_after_ms=1001).retry_after_seconds == 2
    assert RateLimitResult(ok=True).retry_after_seconds == 0


def test_rate_limit_key_composes_action_tenant_identity():
    org_id = uuid4()

    assert rate_limit_key("message_send", org_id, "u1") == f"message_send:{org_id}:u1"
    assert rate_limit_key("login", None, "10.0.0.1") == "login:-:10.0.0.1"


def test_demo_organization_detection():
    flagged = make_organization(org_metadata={"is_demo": True})
    regular = make_organization()

    assert is_demo_organization(flagged) is True
    assert is_demo_organization(regular) is False
    assert is_demo_organization(None) is False

    with patch.object(ApplicationConfig, "DEMO_ORG_ID", str(regular.id)):
        assert is_demo_organization(regular) is True


def test_demo_limits_override_configured_limits():
    demo = make_organization(
        org_metadata={"is_demo": True, "demo_limits": {"message_send": [2, 5000]}}
    )

    assert limits_for("message_send", demo) == (2, 5000)
    assert limits_for("message_send", make_organization()) == tuple(
        ApplicationConfig.RATE_LIMITS["message_send"]
    )


def test_enforce_rate_limit_maps_rejection_to_error():
    limiter = MagicMock()
    limiter.check.return_value = RateLimitResult(ok=False, retry_after_ms=2500)

    result = enforce_rate_limit(limiter, "document_upload", uuid4(), "user-1")

    assert result.is_err()
    assert result.error.code == "RATE_LIMITED"
    assert result.error.reason == "3"


def test_enforce_rate_limit_passes_configured_limit():
    limiter = MagicMock()
    limiter.check.return_value = RateLimitResult(ok=True, remaining=4)
    org_id = uuid4()

    result = enforce_rate_limit(limiter, "login", org_id, "1.2.3.4")

    assert result.is_ok()
    limit, window_ms = ApplicationConfig.RATE_LIMITS["login"]
    limiter.check.assert_called_once_with(f"login:{org_id}:1.2.3.4", limit, window_ms)
