import time

import pytest

from contact_resolver.models import VerificationResult
from contact_resolver.rate_limit import DelayPolicy, RateLimitedClient, RateLimiter


class DummyVerifier:
    name = "dummy"

    def __init__(self) -> None:
        self.calls = 0
        self.last_email = None
        self.threshold = 0.5

    def verify_email(self, email: str, mode: str = "power") -> VerificationResult:
        self.calls += 1
        self.last_email = email
        return VerificationResult(email=email, is_valid=True, status="valid")


def test_rate_limited_client_delegates_calls() -> None:
    verifier = DummyVerifier()
    wrapper = RateLimitedClient(verifier)

    result = wrapper.verify_email("jane@acme.com")

    assert isinstance(result, VerificationResult)
    assert result.email == "jane@acme.com"
    assert verifier.calls == 1
    assert verifier.last_email == "jane@acme.com"
    assert wrapper.name == "dummy"
    assert wrapper.wrapped is verifier


def test_rate_limited_client_passes_through_attributes() -> None:
    wrapper = RateLimitedClient(DummyVerifier(), display_name="Reoon (paced)")

    assert wrapper.threshold == 0.5
    assert wrapper.name == "Reoon (paced)"


def test_delay_policy_applied_after_each_call(monkeypatch) -> None:
    sleeps = []
    monkeypatch.setattr(time, "sleep", sleeps.append)
    wrapper = RateLimitedClient(DummyVerifier(), delay_policy=DelayPolicy(delay_seconds=0.25))

    wrapper.verify_email("a@acme.com")
    wrapper.verify_email("b@acme.com")

    assert sleeps == [0.25, 0.25]


def test_delay_applied_even_when_call_fails(monkeypatch) -> None:
    class FailingVerifier:
        def verify_email(self, email, mode="power"):
            raise ConnectionError("boom")

    sleeps = []
    monkeypatch.setattr(time, "sleep", sleeps.append)
    wrapper = RateLimitedClient(FailingVerifier(), delay_policy=DelayPolicy(delay_seconds=1.0))

    with pytest.raises(ConnectionError):
        wrapper.verify_email("a@acme.com")

    assert sleeps == [1.0]


def test_rate_limiter_enforces_minimum_interval() -> None:
    limiter = RateLimiter(calls_per_minute=1200)  # 50ms between calls

    start = time.monotonic()
    for _ in range(3):
        limiter.acquire()
    elapsed = time.monotonic() - start

    assert elapsed >= 0.09


def test_rate_limiter_without_limit_never_waits() -> None:
    limiter = RateLimiter(None)

    start = time.monotonic()
    for _ in range(100):
        limiter.acquire()

    assert time.monotonic() - start < 0.5
