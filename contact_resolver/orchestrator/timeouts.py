"""Per-call ceilings for external collaborator calls."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Callable, Optional


class StageTimeoutError(TimeoutError):
    """Raised when an external call does not finish within its ceiling."""


def call_with_timeout(func: Callable[..., Any], timeout: Optional[float], *args, **kwargs) -> Any:
    """Run ``func`` and wait at most ``timeout`` seconds for it.

    The call is not interrupted on timeout; its worker thread is abandoned and
    the result discarded.
    """

    if not timeout or timeout <= 0:
        return func(*args, **kwargs)

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="contact-resolver-call")
    future = executor.submit(func, *args, **kwargs)
    try:
        return future.result(timeout=timeout)
    except FutureTimeoutError as exc:
        future.cancel()
        name = getattr(func, "__name__", repr(func))
        raise StageTimeoutError(f"{name} did not finish within {timeout:g}s") from exc
    finally:
        executor.shutdown(wait=False)
