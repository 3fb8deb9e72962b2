"""Data models shared by the contact resolution engine, its stages and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

FALLBACK_GREETING = "there"


# --- Provenance & verification enums ---

class NameSource(str, Enum):
    """Provenance of the owner name currently held on a record."""

    NONE = "none"
    TEAM = "team"
    REGEX = "regex"
    LLM = "llm"

    @property
    def rank(self) -> int:
        return _NAME_SOURCE_RANK[self]


_NAME_SOURCE_RANK = {
    NameSource.NONE: 0,
    NameSource.TEAM: 1,
    NameSource.REGEX: 2,
    NameSource.LLM: 3,
}


class EmailSource(str, Enum):
    """Which discovery stage produced the email currently held on a record."""

    NONE = "none"
    WEBSITE_SCRAPE = "website_scrape"
    LLM = "llm"
    PATTERN_REOON = "pattern_reoon"
    THIRD_PARTY_FINDER = "third_party_finder"


class VerificationStatus(str, Enum):
    UNCHECKED = "unchecked"
    VALID = "valid"
    RISKY = "risky"
    INVALID = "invalid"


# --- Core record ---

@dataclass
class Owner:
    """A person accepted from a website, kept when a site lists several people."""

    first_name: str
    last_name: str = ""
    full_name: str = ""
    title: Optional[str] = None
    email: Optional[str] = None


@dataclass
class BusinessContactState:
    """Mutable contact record the discovery waterfall refines."""

    business_name: str
    website_url: Optional[str] = None
    domain: Optional[str] = None
    owner_first_name: Optional[str] = None
    owner_last_name: Optional[str] = None
    name_source: NameSource = NameSource.NONE
    name_is_fallback: bool = True
    email: Optional[str] = None
    email_source: EmailSource = EmailSource.NONE
    email_verified: Optional[bool] = None
    email_verification_status: VerificationStatus = VerificationStatus.UNCHECKED
    owners: List[Owner] = field(default_factory=list)
    source_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.domain is None and self.website_url:
            from .emails.classify import extract_domain

            self.domain = extract_domain(self.website_url)
        if self.owner_first_name and self.owner_first_name.lower() == FALLBACK_GREETING:
            self.owner_first_name = None
        if self.owner_first_name:
            self.name_is_fallback = False

    @property
    def has_email(self) -> bool:
        return bool(self.email)

    @property
    def has_personal_email(self) -> bool:
        from .emails.classify import is_generic_email

        return bool(self.email) and not is_generic_email(self.email)

    @property
    def has_personal_name(self) -> bool:
        """True when a real person's first name (not a team label) is on file."""

        return (
            bool(self.owner_first_name)
            and not self.name_is_fallback
            and self.name_source is not NameSource.TEAM
        )

    @property
    def full_name(self) -> Optional[str]:
        name = " ".join(filter(None, [self.owner_first_name, self.owner_last_name])).strip()
        return name or None

    @property
    def greeting_name(self) -> str:
        """Name used to greet the owner, falling back to a neutral greeting."""

        if self.name_is_fallback or not self.owner_first_name:
            return FALLBACK_GREETING
        return self.owner_first_name

    def display_name(self) -> str:
        return self.business_name or "(Unnamed Business)"


# --- Raw extraction output ---

@dataclass(slots=True)
class OwnerCandidate:
    """Person found by the site-text extractor before any validation."""

    raw_name: str
    title: Optional[str] = None
    matched_email: Optional[str] = None
    has_email_match: bool = False


@dataclass
class SiteExtraction:
    """Result of the regex-based website extractor."""

    owner_names: List[OwnerCandidate] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)


@dataclass(slots=True)
class LlmOwner:
    name: str
    title: Optional[str] = None
    email: Optional[str] = None


@dataclass(slots=True)
class LlmEmail:
    email: str
    type: str = "generic"
    person: Optional[str] = None

    @property
    def is_personal(self) -> bool:
        return (self.type or "").lower() == "personal"


@dataclass
class LlmExtraction:
    """Owners and emails returned by the LLM extractor, with token usage."""

    owners: List[LlmOwner] = field(default_factory=list)
    emails: List[LlmEmail] = field(default_factory=list)
    input_tokens: int = 0
    output_tokens: int = 0


@dataclass(slots=True)
class VerificationResult:
    """Outcome of a single mailbox verification call."""

    email: str
    is_valid: bool
    status: str
    score: Optional[float] = None
    reason: Optional[str] = None


@dataclass(slots=True)
class FinderEmail:
    email: str
    certainty: Union[float, str, None] = None


@dataclass
class FinderResult:
    emails: List[FinderEmail] = field(default_factory=list)


# --- Quota bookkeeping ---

@dataclass(slots=True)
class QuotaRecord:
    """Persisted daily counter for one paid service."""

    service: str
    utc_date: str
    used: int
    limit: int


@dataclass(slots=True)
class QuotaStatus:
    service: str
    can_use: bool
    remaining: int
    used: int
    limit: int


@dataclass(slots=True)
class QuotaUsage:
    service: str
    used: int
    remaining: int
    limit: int
