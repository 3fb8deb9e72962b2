"""Turn scraped name strings and email local parts into validated owner names.

Every function in this module is total: malformed or implausible input yields
an empty :class:`ParsedName` or ``None`` and never raises. Callers treat an
empty result as "no candidate".
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .dictionary import DEFAULT_DICTIONARY, MIN_PREFIX_LENGTH, NameDictionary
from .wordlists import (
    BAD_EMAIL_WORDS,
    BAD_LAST_NAME_WORDS,
    BUSINESS_WORDS,
    GENERIC_USERNAMES,
    KNOWN_SHORT_FIRST_NAMES,
    KNOWN_SHORT_SURNAMES,
    NON_NAME_WORDS,
    TEAM_FILLER_WORDS,
    TITLE_PREFIXES,
)

LOGGER = logging.getLogger(__name__)

NameSplit = Tuple[str, str]

_MAX_SINGLE_WORD_LENGTH = 15
_NAME_PUNCTUATION = frozenset("-'’")
_HASH_USERNAME = re.compile(r"^[0-9a-f]{8,}$")
_LOCAL_PART_SEPARATORS = re.compile(r"[._-]")


@dataclass(frozen=True)
class ParsedName:
    """First/last name split of a raw string; empty when the string was rejected."""

    first_name: str = ""
    last_name: str = ""
    is_team: bool = False

    def __bool__(self) -> bool:
        return bool(self.first_name)

    @property
    def full_name(self) -> str:
        return " ".join(filter(None, [self.first_name, self.last_name]))


_EMPTY = ParsedName()


def _capitalise(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def strip_titles(name: str) -> str:
    """Remove honorific prefixes such as ``Dr.`` or ``Mrs`` from ``name``."""

    if not name:
        return ""
    cleaned = name.strip()
    for title in TITLE_PREFIXES:
        if cleaned.startswith(title + " "):
            cleaned = cleaned[len(title) + 1:].strip()
    return cleaned


def is_valid_person_name(name: Optional[str]) -> bool:
    """Heuristically decide whether ``name`` (one or more words) is a person's name."""

    if not name or not isinstance(name, str):
        return False

    cleaned = strip_titles(name.strip())
    if len(cleaned) < 2 or not any(ch.isalpha() for ch in cleaned):
        return False

    if any(ch.isdigit() for ch in cleaned):
        LOGGER.debug("Name rejected, contains digits: %r", name)
        return False

    if any(not (ch.isalpha() or ch.isspace() or ch in _NAME_PUNCTUATION) for ch in cleaned):
        LOGGER.debug("Name rejected, unexpected characters: %r", name)
        return False

    words = cleaned.lower().split()
    if len(words) == 1 and len(cleaned) > _MAX_SINGLE_WORD_LENGTH:
        LOGGER.debug("Name rejected, single word too long: %r", name)
        return False

    if len(cleaned) <= 2 and cleaned.lower() not in KNOWN_SHORT_FIRST_NAMES:
        return False

    for word in words:
        if word in NON_NAME_WORDS:
            LOGGER.debug("Name rejected, %r is not a name word: %r", word, name)
            return False

    first = words[0]
    if len(words) > 1 and len(first) <= 2 and first not in KNOWN_SHORT_FIRST_NAMES:
        LOGGER.debug("Name rejected, suspiciously short first name: %r", name)
        return False

    return True


def is_valid_name_pair(first_name: Optional[str], last_name: Optional[str]) -> bool:
    """Validate a first/last pair, catching strings like ``"Wilson Accountancy"``."""

    if not first_name or not isinstance(first_name, str):
        return False

    first = first_name.strip().lower()
    last = (last_name or "").strip().lower()

    if first == "there":
        return True
    if first.endswith(" team") or last == "team":
        return True

    if not is_valid_person_name(first_name):
        return False

    if last:
        for word in last.split():
            if word in BAD_LAST_NAME_WORDS:
                LOGGER.debug("Name pair rejected, %r in last name: %s %s", word, first_name, last_name)
                return False
        if len(last) <= 2 and last not in KNOWN_SHORT_SURNAMES:
            LOGGER.debug("Name pair rejected, short last name: %s %s", first_name, last_name)
            return False

    return True


def _team_name(tokens: list[str]) -> Optional[ParsedName]:
    if len(tokens) < 2 or tokens[-1].lower() != "team":
        return None
    leading = tokens[:-1]
    if any(ch.isdigit() for token in leading for ch in token):
        return None
    if all(token.lower() in TEAM_FILLER_WORDS for token in leading):
        return None
    return ParsedName(first_name=" ".join(leading + ["Team"]), is_team=True)


def _looks_like_business(cleaned: str, tokens: list[str]) -> bool:
    if len(tokens) < 2 or not cleaned.isupper():
        return False
    if len(tokens) > 3:
        return True
    return any(token.lower().strip(".,") in BUSINESS_WORDS for token in tokens)


class NameResolver:
    """Name parsing and email local-part segmentation backed by a :class:`NameDictionary`."""

    def __init__(self, dictionary: Optional[NameDictionary] = None) -> None:
        self.dictionary = dictionary or DEFAULT_DICTIONARY

    is_valid_person_name = staticmethod(is_valid_person_name)
    is_valid_name_pair = staticmethod(is_valid_name_pair)

    def parse_name(self, raw: Optional[str]) -> ParsedName:
        """Split ``raw`` into first/last name, or return an empty result."""

        if not raw or not isinstance(raw, str):
            return _EMPTY

        cleaned = " ".join(strip_titles(raw).split())
        if not cleaned:
            return _EMPTY
        tokens = cleaned.split(" ")

        team = _team_name(tokens)
        if team is not None:
            return team

        if any(ch.isdigit() for ch in cleaned):
            return _EMPTY
        if len(tokens) == 1 and len(cleaned) < 2:
            return _EMPTY
        if _looks_like_business(cleaned, tokens):
            LOGGER.debug("Name rejected, looks like a business: %r", raw)
            return _EMPTY
        if cleaned.isupper():
            tokens = [_capitalise(token) for token in tokens]
            cleaned = " ".join(tokens)

        if not is_valid_person_name(cleaned):
            return _EMPTY

        first_name, last_name = tokens[0], " ".join(tokens[1:])
        if not is_valid_person_name(first_name) or not is_valid_name_pair(first_name, last_name):
            LOGGER.debug("Name rejected after split: %r", raw)
            return _EMPTY
        return ParsedName(first_name=first_name, last_name=last_name)

    def segment_concatenated_local_part(self, local_part: Optional[str]) -> Optional[NameSplit]:
        """Split a run-together local part such as ``"kategymer"`` into ``("Kate", "Gymer")``.

        Only the longest dictionary prefix is considered. A local part that is
        itself a known name yields ``(name, "")``. ``None`` is returned when no
        prefix matches or the remainder does not look like a surname; a missed
        split is preferable to greeting someone by the wrong name.
        """

        letters = "".join(ch for ch in (local_part or "").lower() if ch.isalpha())
        if len(letters) < MIN_PREFIX_LENGTH:
            return None

        prefix = self.dictionary.longest_prefix(letters)
        if prefix is None:
            return None

        first_name = _capitalise(prefix)
        remainder = letters[len(prefix):]
        if not remainder:
            return first_name, ""

        if len(remainder) < 2 or remainder in NON_NAME_WORDS or remainder in BAD_LAST_NAME_WORDS:
            LOGGER.debug("Segmentation of %r rejected, remainder %r", local_part, remainder)
            return None

        LOGGER.debug("Segmented %r into %s %s", local_part, first_name, _capitalise(remainder))
        return first_name, _capitalise(remainder)

    def name_from_email(self, email: Optional[str]) -> Optional[NameSplit]:
        """Derive an owner name from the local part of ``email`` when it is personal."""

        if not email or not isinstance(email, str) or "@" not in email:
            return None

        username = email.split("@", 1)[0].strip()
        lowered = username.lower()

        if lowered in GENERIC_USERNAMES:
            return None
        if _HASH_USERNAME.match(lowered) or lowered.isdigit():
            return None
        if any(word in lowered for word in BAD_EMAIL_WORDS):
            return None

        parts = [part for part in _LOCAL_PART_SEPARATORS.split(username) if part]
        if len(parts) > 1:
            capitalised = [_capitalise(part) for part in parts]
            if is_valid_person_name(" ".join(capitalised)):
                return capitalised[0], " ".join(capitalised[1:])
            return None

        if lowered in NON_NAME_WORDS:
            return None

        # a whole-word hit wins over a split ("rosemary" is not "Rose Mary")
        if lowered in self.dictionary:
            return _capitalise(lowered), ""

        if len(lowered) >= 6:
            split = self.segment_concatenated_local_part(lowered)
            if split is not None:
                return split

        single = _capitalise(username)
        if is_valid_person_name(single):
            return single, ""
        return None


DEFAULT_RESOLVER = NameResolver()

parse_name = DEFAULT_RESOLVER.parse_name
segment_concatenated_local_part = DEFAULT_RESOLVER.segment_concatenated_local_part
name_from_email = DEFAULT_RESOLVER.name_from_email
