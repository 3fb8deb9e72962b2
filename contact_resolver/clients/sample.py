"""Collaborators that replay recorded answers from local JSON fixtures.

Fixtures are keyed by website domain (for extractors) or by address (for the
verifier), so a batch can be run offline against captured responses.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..emails.classify import extract_domain
from ..models import (
    FinderEmail,
    FinderResult,
    LlmEmail,
    LlmExtraction,
    LlmOwner,
    OwnerCandidate,
    SiteExtraction,
    VerificationResult,
)

LOGGER = logging.getLogger(__name__)

Fixture = Union[str, Path, Mapping[str, Any]]


def _load_fixture(fixture: Fixture) -> Dict[str, Any]:
    if isinstance(fixture, Mapping):
        return dict(fixture)
    return json.loads(Path(fixture).read_text(encoding="utf-8"))


def _by_domain(entries: Mapping[str, Any]) -> Dict[str, Any]:
    return {extract_domain(key) or key.lower(): value for key, value in entries.items()}


class RecordedSiteExtractor:
    """Site-text extractor answering from ``{url: {"owner_names": [...], "emails": [...]}}``."""

    name = "recorded-site"

    def __init__(self, fixture: Fixture) -> None:
        self._pages = _by_domain(_load_fixture(fixture))

    def scrape_website(self, url: str) -> SiteExtraction:
        page = self._pages.get(extract_domain(url) or "", {})
        owners = [
            OwnerCandidate(
                raw_name=entry.get("name", ""),
                title=entry.get("title"),
                matched_email=entry.get("matched_email"),
                has_email_match=bool(entry.get("has_email_match")),
            )
            for entry in page.get("owner_names", [])
        ]
        return SiteExtraction(owner_names=owners, emails=list(page.get("emails", [])))


class RecordedOwnerExtractor:
    """LLM extractor stand-in; unknown sites yield ``None`` like a failed model call."""

    name = "recorded-llm"

    def __init__(self, fixture: Fixture) -> None:
        self._pages = _by_domain(_load_fixture(fixture))

    def extract_owners_from_website(self, business_name: str, url: str) -> Optional[LlmExtraction]:
        page = self._pages.get(extract_domain(url) or "")
        if page is None:
            LOGGER.debug("No recorded LLM answer for %s (%s)", business_name, url)
            return None
        return LlmExtraction(
            owners=[
                LlmOwner(name=entry.get("name", ""), title=entry.get("title"), email=entry.get("email"))
                for entry in page.get("owners", [])
            ],
            emails=[
                LlmEmail(email=entry["email"], type=entry.get("type", "generic"), person=entry.get("person"))
                for entry in page.get("emails", [])
                if entry.get("email")
            ],
            input_tokens=int(page.get("input_tokens", 0)),
            output_tokens=int(page.get("output_tokens", 0)),
        )


class RecordedVerifier:
    """Answers verification calls from ``{address: status}``; unknown addresses get ``default_status``."""

    name = "recorded-verifier"

    def __init__(self, fixture: Fixture, default_status: str = "invalid") -> None:
        self._statuses = {key.lower(): str(value).lower() for key, value in _load_fixture(fixture).items()}
        self.default_status = default_status

    def verify_email(self, email: str, mode: str = "power") -> VerificationResult:
        status = self._statuses.get(email.lower(), self.default_status)
        return VerificationResult(email=email, is_valid=status in {"valid", "safe"}, status=status)


class RecordedFinder:
    """Finder stand-in answering from ``{domain: [{"email": ..., "certainty": ...}]}``."""

    name = "recorded-finder"

    def __init__(self, fixture: Fixture) -> None:
        self._results = _by_domain(_load_fixture(fixture))

    def find_email(self, first_name: str, last_name: str, domain_or_company: str) -> FinderResult:
        entries = self._results.get((domain_or_company or "").lower(), [])
        return FinderResult(
            emails=[FinderEmail(email=entry["email"], certainty=entry.get("certainty")) for entry in entries]
        )
