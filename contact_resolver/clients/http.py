"""Shared HTTP plumbing for paid-service clients."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..quota import QUOTA_MESSAGE_MARKERS, QuotaExceededError

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class ServiceResponseError(RuntimeError):
    """Raised when a service answers with an error or an unexpected payload."""


def _message(payload: Any) -> str:
    if isinstance(payload, dict):
        for key in ("error", "message", "reason", "detail"):
            value = payload.get(key)
            if value:
                return str(value)
    return ""


def decode_response(service: str, response: requests.Response) -> Dict[str, Any]:
    """Return the JSON body of ``response``, translating quota answers to :class:`QuotaExceededError`.

    Only a daily-limit message counts as quota exhaustion. A bare HTTP 429 is
    short-term throttling and raises :class:`ServiceResponseError` like any
    other failed call.
    """

    try:
        payload = response.json()
    except ValueError:
        payload = None

    message = _message(payload) or (response.text or "")[:200]
    if any(marker in message.lower() for marker in QUOTA_MESSAGE_MARKERS):
        raise QuotaExceededError(service, f"{service}: {message}")

    if response.status_code >= 400:
        raise ServiceResponseError(f"{service} returned HTTP {response.status_code}: {message}")
    if not isinstance(payload, dict):
        raise ServiceResponseError(f"{service} returned a non-JSON response")
    return payload


def make_session(session: Optional[requests.Session] = None) -> requests.Session:
    if session is not None:
        return session
    new_session = requests.Session()
    new_session.headers.update({"Accept": "application/json", "User-Agent": "contact-resolver"})
    return new_session
