"""Icypeas email finder client: submit a search, then poll for its result."""
from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Optional

import requests

from ..models import FinderEmail, FinderResult
from .http import DEFAULT_TIMEOUT, ServiceResponseError, decode_response, make_session

LOGGER = logging.getLogger(__name__)

ICYPEAS_BASE_URL = "https://app.icypeas.com/api"
INITIAL_POLL_DELAY = 2.0
MAX_POLL_DELAY = 16.0
MAX_POLL_ATTEMPTS = 10

DONE_STATUSES = frozenset({"DEBITED", "FOUND"})
PENDING_STATUSES = frozenset({"NONE", "SCHEDULED", "IN_PROGRESS"})


def backoff_delay(attempt: int, initial: float = INITIAL_POLL_DELAY, ceiling: float = MAX_POLL_DELAY) -> float:
    """Delay before poll ``attempt`` (1-based): doubles each time, capped at ``ceiling``."""

    return min(initial * (2 ** (attempt - 1)), ceiling)


class IcypeasFinder:
    name = "icypeas"

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = ICYPEAS_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_poll_attempts: int = MAX_POLL_ATTEMPTS,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_poll_attempts = max_poll_attempts
        self.session = make_session(session)
        self._sleep = sleep

    def _post(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        response = self.session.post(
            f"{self.base_url}/{path}",
            json=body,
            headers={"Authorization": self.api_key, "Content-Type": "application/json"},
            timeout=self.timeout,
        )
        return decode_response(self.name, response)

    def find_email(self, first_name: str, last_name: str, domain_or_company: str) -> FinderResult:
        if not domain_or_company:
            raise ValueError("domain_or_company is required")

        submitted = self._post(
            "email-search",
            {"firstname": first_name or "", "lastname": last_name or "", "domainOrCompany": domain_or_company},
        )
        if not submitted.get("success"):
            raise ServiceResponseError(f"Icypeas rejected the search: {submitted.get('error') or 'unknown error'}")
        search_id = (submitted.get("item") or {}).get("_id")
        if not search_id:
            raise ServiceResponseError("Icypeas returned no search id")

        LOGGER.debug("Icypeas search %s submitted for %s %s @ %s", search_id, first_name, last_name, domain_or_company)
        return self._poll(search_id)

    def _poll(self, search_id: str) -> FinderResult:
        for attempt in range(1, self.max_poll_attempts + 1):
            payload = self._post("bulk-single-searchs/read", {"id": search_id})
            items = payload.get("items") or []
            if not items:
                raise ServiceResponseError(f"Icypeas returned no items for search {search_id}")

            item = items[0]
            status = str(item.get("status") or "").upper()
            if status in DONE_STATUSES:
                emails = ((item.get("results") or {}).get("emails")) or []
                return FinderResult(
                    emails=[
                        FinderEmail(email=entry["email"], certainty=entry.get("certainty"))
                        for entry in emails
                        if isinstance(entry, dict) and entry.get("email")
                    ]
                )
            if status not in PENDING_STATUSES:
                LOGGER.debug("Icypeas search %s finished with status %s", search_id, status)
                return FinderResult()
            if attempt < self.max_poll_attempts:
                self._sleep(backoff_delay(attempt))

        raise ServiceResponseError(
            f"Icypeas search {search_id} still pending after {self.max_poll_attempts} attempts"
        )
