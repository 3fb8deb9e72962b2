"""Verification state transitions for the email held on a contact record.

``UNCHECKED`` moves to ``VALID``, ``RISKY`` or ``INVALID`` once a verifier
answers. Only ``INVALID`` clears the address; a risky address may still be the
only lead, and a failed call says nothing about the mailbox.
"""
from __future__ import annotations

import logging

from ..models import BusinessContactState, VerificationResult, VerificationStatus

LOGGER = logging.getLogger(__name__)

RISKY_STATUS = "risky"


def classify_verification(result: VerificationResult) -> VerificationStatus:
    if result.is_valid:
        return VerificationStatus.VALID
    if (result.status or "").lower() == RISKY_STATUS:
        return VerificationStatus.RISKY
    return VerificationStatus.INVALID


def apply_verification_result(state: BusinessContactState, result: VerificationResult) -> VerificationStatus:
    """Apply ``result`` to ``state`` in place and return the new status."""

    status = classify_verification(result)
    state.email_verification_status = status
    state.email_verified = status is VerificationStatus.VALID
    if status is VerificationStatus.INVALID:
        LOGGER.info("%s: %s failed verification (%s), clearing", state.display_name(), state.email, result.status)
        state.email = None
    return status


def apply_verification_error(state: BusinessContactState, error: BaseException) -> None:
    LOGGER.warning("%s: could not verify %s: %s", state.display_name(), state.email, str(error)[:120])
    state.email_verification_status = VerificationStatus.UNCHECKED
    state.email_verified = False


def mark_published(state: BusinessContactState) -> None:
    """Mark an address read from the business's own website as verified."""

    state.email_verification_status = VerificationStatus.VALID
    state.email_verified = True
