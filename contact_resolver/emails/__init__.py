"""Email classification, candidate generation and verification state."""

from .classify import (
    GENERIC_PREFIXES,
    extract_domain,
    is_generic_email,
    is_personal_email,
    is_plausible_email,
    is_social_url,
    local_part,
)
from .patterns import EMAIL_PATTERNS, generate_email_patterns

__all__ = [
    "EMAIL_PATTERNS",
    "GENERIC_PREFIXES",
    "extract_domain",
    "generate_email_patterns",
    "is_generic_email",
    "is_personal_email",
    "is_plausible_email",
    "is_social_url",
    "local_part",
]
