"""Checks applied to resolved records before they are exported for outreach."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .emails.classify import is_generic_email, is_plausible_email
from .models import BusinessContactState, EmailSource, NameSource, VerificationStatus
from .names import is_valid_name_pair, is_valid_person_name

_SOURCE_POINTS = {
    EmailSource.THIRD_PARTY_FINDER: 20,
    EmailSource.PATTERN_REOON: 15,
    EmailSource.WEBSITE_SCRAPE: 10,
    EmailSource.LLM: 10,
}


@dataclass
class ExportCheck:
    errors: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.valid


def validate_for_export(
    state: BusinessContactState,
    *,
    allow_risky: bool = False,
    require_name: bool = True,
) -> ExportCheck:
    """Return the reasons ``state`` must not be exported; an empty result means it may be.

    Only ``VALID`` addresses pass, plus ``RISKY`` ones when ``allow_risky`` is
    set. ``UNCHECKED`` never passes.
    """

    check = ExportCheck()

    if not state.email:
        check.errors.append("Missing email")
    elif not is_plausible_email(state.email):
        check.errors.append(f"Invalid email format: {state.email}")

    status = state.email_verification_status
    accepted = {VerificationStatus.VALID, VerificationStatus.RISKY} if allow_risky else {VerificationStatus.VALID}
    if status not in accepted:
        check.errors.append(f"Email not verified (status={status.value})")

    first_name = state.owner_first_name
    if state.name_source is NameSource.TEAM:
        pass
    elif not first_name or state.name_is_fallback:
        if require_name:
            check.errors.append("Missing first name")
    elif not is_valid_person_name(first_name):
        check.errors.append(f'Invalid first name: "{first_name}"')
    elif not is_valid_name_pair(first_name, state.owner_last_name):
        check.errors.append(f'Invalid name pair: "{state.full_name}"')

    if not (state.business_name or "").strip():
        check.errors.append("Missing business name")

    return check


def contact_confidence(state: BusinessContactState) -> int:
    """Score a record from 0 to 100 on email quality, name quality and source."""

    score = 0
    if state.email and is_plausible_email(state.email):
        score += 20
        if state.email_verification_status is VerificationStatus.VALID:
            score += 20
        elif state.email_verification_status is VerificationStatus.RISKY:
            score += 5
        if not is_generic_email(state.email):
            score += 10

    if state.has_personal_name and is_valid_person_name(state.owner_first_name):
        score += 15
        if state.owner_last_name:
            score += 15

    if state.email:
        score += _SOURCE_POINTS.get(state.email_source, 0)

    return min(score, 100)
