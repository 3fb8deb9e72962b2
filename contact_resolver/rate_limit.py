"""Utilities for applying delay and rate limiting to external service calls."""
from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class DelayPolicy:
    """Fixed pause after every call, to stay polite towards third-party services."""

    delay_seconds: float = 0.0


class RateLimiter:
    """Token bucket style rate limiter enforcing minimum interval between calls."""

    def __init__(self, calls_per_minute: Optional[float]) -> None:
        self._interval = 60.0 / float(calls_per_minute) if calls_per_minute else 0.0
        self._lock = threading.Lock()
        self._next_available = 0.0

    def acquire(self) -> None:
        if self._interval <= 0:
            return
        with self._lock:
            now = time.monotonic()
            if now < self._next_available:
                time.sleep(self._next_available - now)
                now = time.monotonic()
            self._next_available = now + self._interval


class RateLimitedClient:
    """Wrapper that paces every public method call of a collaborator.

    Attribute access is delegated to the wrapped object; callables are wrapped
    so that the rate limiter is acquired before, and the delay applied after,
    each call.
    """

    def __init__(
        self,
        client: Any,
        *,
        display_name: Optional[str] = None,
        delay_policy: Optional[DelayPolicy] = None,
        rate_limiter: Optional[RateLimiter] = None,
    ) -> None:
        self._client = client
        self._display_name = display_name
        self._delay_policy = delay_policy or DelayPolicy()
        self._rate_limiter = rate_limiter or RateLimiter(None)

    @property
    def name(self) -> str:
        if self._display_name:
            return self._display_name
        return getattr(self._client, "name", self._client.__class__.__name__)

    @property
    def wrapped(self) -> Any:
        return self._client

    def _call(self, method, *args, **kwargs):
        self._rate_limiter.acquire()
        try:
            return method(*args, **kwargs)
        finally:
            if self._delay_policy.delay_seconds > 0:
                time.sleep(self._delay_policy.delay_seconds)

    def __getattr__(self, item):
        attribute = getattr(self._client, item)
        if item.startswith("_") or not callable(attribute):
            return attribute

        def paced(*args, **kwargs):
            return self._call(attribute, *args, **kwargs)

        paced.__name__ = getattr(attribute, "__name__", item)
        return paced
