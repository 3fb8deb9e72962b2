"""The four discovery stages, each described by trigger, executor and acceptance rule.

Stages run cheapest first. A trigger that returns ``False`` skips the stage
without any external call; every trigger requires that the record holds no
personal email yet, so a record that already has one is never touched.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple

from ..emails.classify import is_generic_email, is_plausible_email, is_social_url
from ..emails.patterns import generate_email_patterns
from ..emails.verification import classify_verification
from ..models import (
    BusinessContactState,
    EmailSource,
    FinderEmail,
    LlmExtraction,
    NameSource,
    Owner,
    SiteExtraction,
    VerificationStatus,
)
from ..names import ParsedName, name_from_email, parse_name
from ..quota import QuotaStorageError, is_quota_signal
from .policy import ContactCandidate, apply_candidate
from .timeouts import StageTimeoutError

if TYPE_CHECKING:  # pragma: no cover
    from .service import ContactWaterfall

LOGGER = logging.getLogger(__name__)

SAFE_STATUS = "safe"

_ERROR_MESSAGE_LIMIT = 120

# finder certainty labels, best first
CERTAINTY_LEVELS = {"ultra_sure": 4, "sure": 3, "probable": 2, "risky": 1}

Trigger = Callable[["ContactWaterfall", BusinessContactState], bool]
Executor = Callable[["ContactWaterfall", BusinessContactState], Optional[ContactCandidate]]
Acceptor = Callable[[BusinessContactState, ContactCandidate], bool]


@dataclass(frozen=True)
class Stage:
    name: str
    cost_class: str
    trigger: Trigger
    execute: Executor
    accept: Acceptor = apply_candidate
    service: Optional[str] = None


# --- shared helpers ---

def has_usable_website(state: BusinessContactState) -> bool:
    return bool(state.website_url) and not is_social_url(state.website_url)


def _wants_paid_email(waterfall: "ContactWaterfall", state: BusinessContactState) -> bool:
    if not state.email:
        return True
    return waterfall.settings.upgrade_generic_with_paid_stages and is_generic_email(state.email)


def _name_source_for(parsed: ParsedName, source: NameSource) -> NameSource:
    return NameSource.TEAM if parsed.is_team else source


def _distinct_owners(people: Sequence[Tuple[ParsedName, Optional[str], Optional[str]]]) -> List[Owner]:
    """Return an owner list when two or more different people were accepted."""

    owners: List[Owner] = []
    seen = set()
    for parsed, title, email in people:
        if parsed.is_team:
            continue
        key = parsed.full_name.lower()
        if key in seen:
            continue
        seen.add(key)
        owners.append(
            Owner(
                first_name=parsed.first_name,
                last_name=parsed.last_name,
                full_name=parsed.full_name,
                title=title,
                email=email,
            )
        )
    return owners if len(owners) > 1 else []


def _first_email(emails: Sequence[str]) -> Optional[str]:
    plausible = [email for email in emails if is_plausible_email(email)]
    for email in plausible:
        if not is_generic_email(email):
            return email
    return plausible[0] if plausible else None


def _with_email_name(candidate: ContactCandidate, source: NameSource) -> ContactCandidate:
    if candidate.first_name or not candidate.email or is_generic_email(candidate.email):
        return candidate
    derived = name_from_email(candidate.email)
    if derived:
        candidate.first_name, candidate.last_name = derived
        candidate.name_source = source
    return candidate


# --- stage 1: site-text regex ---

def site_regex_trigger(waterfall: "ContactWaterfall", state: BusinessContactState) -> bool:
    return waterfall.site_extractor is not None and has_usable_website(state) and not state.has_personal_email


def candidate_from_site(extraction: Optional[SiteExtraction]) -> Optional[ContactCandidate]:
    """Pick the best person and address from the regex extractor's output."""

    if extraction is None:
        return None

    people = []
    for owner in extraction.owner_names:
        parsed = parse_name(owner.raw_name)
        if parsed:
            people.append((parsed, owner))

    candidate = ContactCandidate(
        email_source=EmailSource.WEBSITE_SCRAPE,
        verification_status=VerificationStatus.VALID,
    )

    persons = [entry for entry in people if not entry[0].is_team]
    matched = next(
        (
            entry
            for entry in persons
            if entry[1].has_email_match and is_plausible_email(entry[1].matched_email)
        ),
        None,
    )
    if matched is not None:
        chosen, candidate.email = matched[0], matched[1].matched_email
    else:
        chosen = (persons or people or [(None, None)])[0][0]
        candidate.email = _first_email(extraction.emails)

    if chosen is not None:
        candidate.first_name = chosen.first_name
        candidate.last_name = chosen.last_name
        candidate.name_source = _name_source_for(chosen, NameSource.REGEX)
        candidate.owners = _distinct_owners(
            [(parsed, owner.title, owner.matched_email if owner.has_email_match else None) for parsed, owner in persons]
        )

    candidate = _with_email_name(candidate, NameSource.REGEX)
    return None if candidate.is_empty else candidate


def site_regex_execute(waterfall: "ContactWaterfall", state: BusinessContactState) -> Optional[ContactCandidate]:
    extraction = waterfall.call("site", waterfall.site_extractor.scrape_website, state.website_url)
    return candidate_from_site(extraction)


# --- stage 2: LLM extraction ---

def llm_trigger(waterfall: "ContactWaterfall", state: BusinessContactState) -> bool:
    return waterfall.owner_extractor is not None and has_usable_website(state) and not state.has_personal_email


def candidate_from_llm(extraction: Optional[LlmExtraction]) -> Optional[ContactCandidate]:
    """Pick an address and owner from the LLM extractor's structured answer."""

    if extraction is None:
        return None

    ordered: List[str] = []
    personal = set()

    def add(email: Optional[str], is_personal: bool = False) -> None:
        if not email or not is_plausible_email(email):
            return
        lowered = email.strip().lower()
        if is_personal:
            personal.add(lowered)
        if lowered not in ordered:
            ordered.append(lowered)

    for entry in extraction.emails:
        if entry.is_personal:
            add(entry.email, True)
    for owner in extraction.owners:
        add(owner.email)
    for entry in extraction.emails:
        add(entry.email)

    email = (
        next((address for address in ordered if address in personal and not is_generic_email(address)), None)
        or next((address for address in ordered if not is_generic_email(address)), None)
        or (ordered[0] if ordered else None)
    )

    candidate = ContactCandidate(
        email=email,
        email_source=EmailSource.LLM,
        verification_status=VerificationStatus.VALID,
    )

    people = [(parse_name(owner.name), owner) for owner in extraction.owners]
    people = [(parsed, owner) for parsed, owner in people if parsed]
    chosen = next(
        (parsed for parsed, owner in people if email and (owner.email or "").strip().lower() == email),
        people[0][0] if people else None,
    )
    if chosen is not None:
        candidate.first_name = chosen.first_name
        candidate.last_name = chosen.last_name
        candidate.name_source = _name_source_for(chosen, NameSource.LLM)
        candidate.owners = _distinct_owners([(parsed, owner.title, owner.email) for parsed, owner in people])

    candidate = _with_email_name(candidate, NameSource.REGEX)
    return None if candidate.is_empty else candidate


def llm_execute(waterfall: "ContactWaterfall", state: BusinessContactState) -> Optional[ContactCandidate]:
    extraction = waterfall.call(
        "llm",
        waterfall.owner_extractor.extract_owners_from_website,
        state.business_name,
        state.website_url,
    )
    if extraction is not None:
        waterfall.stats.add_llm_tokens(extraction.input_tokens, extraction.output_tokens)
    return candidate_from_llm(extraction)


# --- stage 3: pattern guess + verify ---

def pattern_trigger(waterfall: "ContactWaterfall", state: BusinessContactState) -> bool:
    return (
        waterfall.verifier is not None
        and not waterfall.is_exhausted(waterfall.settings.verifier_service)
        and state.has_personal_name
        and bool(state.domain)
        and _wants_paid_email(waterfall, state)
    )


def pattern_execute(waterfall: "ContactWaterfall", state: BusinessContactState) -> Optional[ContactCandidate]:
    service = waterfall.settings.verifier_service
    patterns = generate_email_patterns(state.owner_first_name, state.owner_last_name, state.domain)
    patterns = patterns[: waterfall.settings.pattern_checks_per_business]

    for address in patterns:
        if not waterfall.has_quota(service):
            break
        try:
            result = waterfall.call_paid("verify", service, waterfall.verifier.verify_email, address)
        except QuotaStorageError:
            raise
        except Exception as exc:
            if is_quota_signal(exc):
                waterfall.mark_exhausted(service, exc)
                break
            waterfall.stats.stage(PATTERN_VERIFY).errors += 1
            LOGGER.warning(
                "%s: could not verify pattern %s: %s",
                state.display_name(),
                address,
                str(exc)[:_ERROR_MESSAGE_LIMIT],
            )
            continue
        waterfall.stats.verification_calls += 1

        if result.is_valid or (result.status or "").lower() == SAFE_STATUS:
            LOGGER.info("%s: pattern %s verified (%s)", state.display_name(), address, result.status)
            return ContactCandidate(
                email=address,
                email_source=EmailSource.PATTERN_REOON,
                verification_status=VerificationStatus.VALID,
            )
        LOGGER.debug("%s: pattern %s rejected (%s)", state.display_name(), address, result.status)
    return None


# --- stage 4: third-party finder ---

def certainty_score(entry: FinderEmail) -> float:
    certainty = entry.certainty
    if certainty is None:
        return 0.0
    if isinstance(certainty, str):
        label = certainty.strip().lower()
        if label in CERTAINTY_LEVELS:
            return float(CERTAINTY_LEVELS[label])
        try:
            return float(label)
        except ValueError:
            return 0.0
    return float(certainty)


def best_finder_email(emails: Sequence[FinderEmail]) -> Optional[FinderEmail]:
    """Highest certainty wins; ``max`` keeps the first of equal entries."""

    usable = [entry for entry in emails if is_plausible_email(entry.email)]
    if not usable:
        return None
    return max(usable, key=certainty_score)


def finder_trigger(waterfall: "ContactWaterfall", state: BusinessContactState) -> bool:
    service = waterfall.settings.finder_service
    return (
        waterfall.finder is not None
        and not waterfall.is_exhausted(service)
        and state.has_personal_name
        and bool(state.owner_last_name)
        and bool(state.domain)
        and _wants_paid_email(waterfall, state)
        and waterfall.has_quota(service)
    )


def _verify_finder_email(waterfall: "ContactWaterfall", state: BusinessContactState, email: str) -> VerificationStatus:
    service = waterfall.settings.verifier_service
    if (
        not waterfall.settings.verify_finder_results
        or waterfall.verifier is None
        or waterfall.is_exhausted(service)
        or not waterfall.has_quota(service)
    ):
        return VerificationStatus.UNCHECKED
    try:
        result = waterfall.call_paid("verify", service, waterfall.verifier.verify_email, email)
    except QuotaStorageError:
        raise
    except Exception as exc:
        if is_quota_signal(exc):
            waterfall.mark_exhausted(service, exc)
        else:
            LOGGER.warning(
                "%s: could not verify finder result %s: %s",
                state.display_name(),
                email,
                str(exc)[:_ERROR_MESSAGE_LIMIT],
            )
        return VerificationStatus.UNCHECKED
    waterfall.stats.verification_calls += 1
    return classify_verification(result)


def finder_execute(waterfall: "ContactWaterfall", state: BusinessContactState) -> Optional[ContactCandidate]:
    service = waterfall.settings.finder_service
    credits = waterfall.settings.finder_credits_per_search
    try:
        result = waterfall.call_paid(
            "finder",
            service,
            waterfall.finder.find_email,
            state.owner_first_name,
            state.owner_last_name,
            state.domain,
            count=credits,
        )
    except StageTimeoutError:
        waterfall.stats.finder_credits += credits
        raise
    except QuotaStorageError:
        raise
    except Exception as exc:
        if is_quota_signal(exc):
            waterfall.mark_exhausted(service, exc)
            return None
        raise
    waterfall.stats.finder_credits += credits

    best = best_finder_email(result.emails if result else [])
    if best is None:
        LOGGER.info("%s: finder returned no usable email", state.display_name())
        return None

    status = _verify_finder_email(waterfall, state, best.email)
    if status is VerificationStatus.INVALID:
        LOGGER.info("%s: finder result %s failed verification", state.display_name(), best.email)
        return None
    return ContactCandidate(
        email=best.email.strip().lower(),
        email_source=EmailSource.THIRD_PARTY_FINDER,
        verification_status=status,
    )


SITE_REGEX = "site_regex"
LLM_EXTRACTION = "llm"
PATTERN_VERIFY = "pattern"
FINDER = "finder"


def default_stages(verifier_service: str = "reoon", finder_service: str = "icypeas") -> List[Stage]:
    return [
        Stage(SITE_REGEX, "free", site_regex_trigger, site_regex_execute),
        Stage(LLM_EXTRACTION, "tokens", llm_trigger, llm_execute),
        Stage(PATTERN_VERIFY, "verification", pattern_trigger, pattern_execute, service=verifier_service),
        Stage(FINDER, "finder", finder_trigger, finder_execute, service=finder_service),
    ]


STAGE_NAMES = (SITE_REGEX, LLM_EXTRACTION, PATTERN_VERIFY, FINDER)
