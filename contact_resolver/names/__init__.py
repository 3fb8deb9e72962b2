"""Name dictionary, parsing and validation helpers."""

from .dictionary import DEFAULT_DICTIONARY, NameDictionary
from .resolver import (
    DEFAULT_RESOLVER,
    NameResolver,
    ParsedName,
    is_valid_name_pair,
    is_valid_person_name,
    name_from_email,
    parse_name,
    segment_concatenated_local_part,
    strip_titles,
)

__all__ = [
    "DEFAULT_DICTIONARY",
    "DEFAULT_RESOLVER",
    "NameDictionary",
    "NameResolver",
    "ParsedName",
    "is_valid_name_pair",
    "is_valid_person_name",
    "name_from_email",
    "parse_name",
    "segment_concatenated_local_part",
    "strip_titles",
]
