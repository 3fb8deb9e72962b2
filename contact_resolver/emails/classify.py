"""Email address classification: role-based vs personal, and plausibility checks."""
from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import urlparse

LOGGER = logging.getLogger(__name__)

GENERIC_PREFIXES = (
    "info", "hello", "contact", "enquiries", "enquiry", "admin", "office",
    "sales", "mail", "support", "team", "help", "service", "bookings",
    "booking", "appointments", "reception", "general",
)
_GENERIC_PREFIX_SET = frozenset(GENERIC_PREFIXES)

SOCIAL_MEDIA_DOMAINS = (
    "facebook.com", "instagram.com", "twitter.com", "linkedin.com",
    "tiktok.com", "youtube.com", "pinterest.com",
)

BLOCKED_EMAIL_DOMAINS = (
    "sentry.io", "sentry-next.wixpress.com", "wixpress.com",
    "sentry.wixpress.com", "wordpress.com", "squarespace.com",
    "wix.com", "mailchimp.com", "hubspot.com", "salesforce.com",
)

_PLACEHOLDERS = ("example.com", "test.com", "email@example", "test@test", "domain.com", "yourcompany.com")
_IMAGE_EXTENSION = re.compile(r"\.(jpg|jpeg|png|gif|svg|webp|bmp|ico|tiff)$", re.IGNORECASE)
_IMAGE_SIZE = re.compile(r"\d+x\d+@")
_IMAGE_DESCRIPTOR = re.compile(r"(logo|icon|banner|header|footer|brandmark|badge|thumb|avatar)_", re.IGNORECASE)
_HEX_USERNAME = re.compile(r"^[a-f0-9]{16,}$")
_EMAIL_FORMAT = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@"
    r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


def local_part(email: Optional[str]) -> str:
    if not email or "@" not in email:
        return ""
    return email.split("@", 1)[0].strip().lower()


def is_generic_email(email: Optional[str]) -> bool:
    """Return ``True`` for role addresses such as ``info@`` or ``bookings@``.

    The first dot-separated segment of the local part must be a role prefix.
    Further segments keep the address generic only when they are role words
    themselves or carry no letters (``info.2@``, ``sales.team@``); anything
    else reads as a person (``hello.world@``).
    """

    prefix = local_part(email)
    if not prefix:
        return False

    head, *rest = prefix.split(".")
    if head not in _GENERIC_PREFIX_SET:
        return False
    return all(
        segment in _GENERIC_PREFIX_SET or not any(ch.isalpha() for ch in segment)
        for segment in rest
    )


def is_personal_email(email: Optional[str]) -> bool:
    return bool(local_part(email)) and not is_generic_email(email)


def is_plausible_email(email: Optional[str]) -> bool:
    """Reject scraped strings that are not usable addresses (images, placeholders, trackers)."""

    if not email or not isinstance(email, str):
        return False
    if "@" not in email or len(email) > 254:
        return False

    if _IMAGE_EXTENSION.search(email) or _IMAGE_SIZE.search(email) or _IMAGE_DESCRIPTOR.search(email):
        LOGGER.debug("Email rejected, looks like an image asset: %s", email)
        return False

    lowered = email.lower()
    if any(placeholder in lowered for placeholder in _PLACEHOLDERS):
        LOGGER.debug("Email rejected, placeholder address: %s", email)
        return False

    username, _, domain = lowered.partition("@")
    if any(domain == blocked or domain.endswith("." + blocked) for blocked in BLOCKED_EMAIL_DOMAINS):
        LOGGER.debug("Email rejected, platform or tracking domain: %s", email)
        return False
    if _HEX_USERNAME.match(username):
        return False

    return bool(_EMAIL_FORMAT.match(email))


def extract_domain(url: Optional[str]) -> Optional[str]:
    """Return the lower-cased host of ``url`` without a leading ``www.``."""

    if not url or not isinstance(url, str):
        return None
    candidate = url.strip()
    if not candidate:
        return None
    if "://" not in candidate:
        candidate = "https://" + candidate
    try:
        host = urlparse(candidate).hostname
    except ValueError:
        return None
    if not host:
        return None
    host = host.lower()
    if host.startswith("www."):
        host = host[4:]
    return host or None


def is_social_url(url: Optional[str]) -> bool:
    domain = extract_domain(url)
    if not domain:
        return False
    return any(domain == social or domain.endswith("." + social) for social in SOCIAL_MEDIA_DOMAINS)
