"""Upgrade policy: when a stage's candidate may overwrite what a record already holds."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..emails.classify import is_generic_email
from ..models import (
    BusinessContactState,
    EmailSource,
    NameSource,
    Owner,
    VerificationStatus,
)

LOGGER = logging.getLogger(__name__)


@dataclass
class ContactCandidate:
    """Name and/or email proposed by a single stage."""

    email: Optional[str] = None
    email_source: EmailSource = EmailSource.NONE
    verification_status: VerificationStatus = VerificationStatus.UNCHECKED
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    name_source: NameSource = NameSource.NONE
    owners: List[Owner] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.email and not self.first_name


def should_accept_email(current: Optional[str], candidate: Optional[str]) -> bool:
    """Return ``True`` when ``candidate`` should replace ``current``.

    An empty record takes anything, a generic address is upgraded to a personal
    one, and a personal address is never replaced.
    """

    if not candidate:
        return False
    if not current:
        return True
    return is_generic_email(current) and not is_generic_email(candidate)


def should_accept_name(current: NameSource, candidate: NameSource) -> bool:
    if candidate is NameSource.NONE:
        return False
    return current is NameSource.NONE or candidate.rank > current.rank


def apply_candidate(state: BusinessContactState, candidate: ContactCandidate) -> bool:
    """Merge ``candidate`` into ``state`` in place; return ``True`` when anything changed."""

    changed = False

    if should_accept_email(state.email, candidate.email):
        LOGGER.info(
            "%s: accepted email %s from %s (%s)",
            state.display_name(),
            candidate.email,
            candidate.email_source.value,
            candidate.verification_status.value,
        )
        state.email = candidate.email
        state.email_source = candidate.email_source
        state.email_verification_status = candidate.verification_status
        state.email_verified = candidate.verification_status is VerificationStatus.VALID
        changed = True
    elif candidate.email and candidate.email != state.email:
        LOGGER.debug("%s: kept %s over %s", state.display_name(), state.email, candidate.email)

    if candidate.first_name and should_accept_name(state.name_source, candidate.name_source):
        LOGGER.info(
            "%s: accepted name %s from %s",
            state.display_name(),
            " ".join(filter(None, [candidate.first_name, candidate.last_name])),
            candidate.name_source.value,
        )
        state.owner_first_name = candidate.first_name
        state.owner_last_name = candidate.last_name or None
        state.name_source = candidate.name_source
        state.name_is_fallback = False
        state.owners = list(candidate.owners)
        changed = True

    return changed
