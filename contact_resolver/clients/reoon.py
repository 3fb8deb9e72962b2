"""Reoon mailbox verification client."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from ..models import VerificationResult
from .http import DEFAULT_TIMEOUT, decode_response, make_session

LOGGER = logging.getLogger(__name__)

REOON_BASE_URL = "https://api.reoon.com/v2/verify"
VALID_STATUSES = frozenset({"valid", "safe", "accept_all"})


class ReoonVerifier:
    """Single-address verification against the Reoon API.

    Quota is not tracked here; the waterfall gates and records every call.
    """

    name = "reoon"

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = REOON_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = make_session(session)

    def verify_email(self, email: str, mode: str = "power") -> VerificationResult:
        LOGGER.debug("Verifying %s with Reoon (%s mode)", email, mode)
        response = self.session.get(
            self.base_url,
            params={"email": email, "key": self.api_key, "mode": mode},
            timeout=self.timeout,
        )
        payload = decode_response(self.name, response)

        status = str(payload.get("status") or "unknown").lower()
        score = payload.get("overall_score", payload.get("score"))
        try:
            score = float(score) if score is not None else None
        except (TypeError, ValueError):
            score = None

        return VerificationResult(
            email=email,
            is_valid=status in VALID_STATUSES,
            status=status,
            score=score,
            reason=payload.get("reason"),
        )
