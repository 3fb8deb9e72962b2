"""Candidate personal addresses guessed from an owner's name and a domain."""
from __future__ import annotations

import re
from typing import Callable, List, Optional, Sequence, Tuple

_NON_LETTERS = re.compile(r"[^a-z]")

Pattern = Tuple[str, Callable[[str, str, str], str]]

# order matters: the first verified pattern wins
EMAIL_PATTERNS: Sequence[Pattern] = (
    ("first", lambda f, l, d: f"{f}@{d}"),
    ("first.last", lambda f, l, d: f"{f}.{l}@{d}"),
    ("f.last", lambda f, l, d: f"{f[0]}.{l}@{d}"),
    ("firstlast", lambda f, l, d: f"{f}{l}@{d}"),
    ("flast", lambda f, l, d: f"{f[0]}{l}@{d}"),
    ("last", lambda f, l, d: f"{l}@{d}"),
    ("first_last", lambda f, l, d: f"{f}_{l}@{d}"),
)


def _clean(value: Optional[str]) -> str:
    return _NON_LETTERS.sub("", (value or "").lower())


def generate_email_patterns(first_name: Optional[str], last_name: Optional[str], domain: Optional[str]) -> List[str]:
    """Return the ordered, de-duplicated candidate addresses for a person at ``domain``.

    Without a usable last name only ``first@domain`` is produced.
    """

    first = _clean(first_name)
    last = _clean(last_name)
    domain = (domain or "").strip().lower()
    if not first or not domain:
        return []

    if not last:
        return [f"{first}@{domain}"]

    candidates: List[str] = []
    for _, build in EMAIL_PATTERNS:
        address = build(first, last, domain)
        if address not in candidates:
            candidates.append(address)
    return candidates
