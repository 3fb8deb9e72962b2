"""Static dictionary of known first names."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from ._first_names import FIRST_NAMES

MIN_PREFIX_LENGTH = 2


class NameDictionary:
    """Case-insensitive set of first names with longest-prefix lookup."""

    def __init__(self, names: Iterable[str]) -> None:
        self._names = frozenset(name.strip().lower() for name in names if name and name.strip())
        # longest first, so the first prefix hit is the longest one
        self._by_length: Tuple[str, ...] = tuple(sorted(self._names, key=lambda name: (-len(name), name)))
        self._max_length = len(self._by_length[0]) if self._by_length else 0

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name.strip().lower() in self._names

    def __len__(self) -> int:
        return len(self._names)

    @property
    def names_by_length(self) -> Tuple[str, ...]:
        return self._by_length

    def longest_prefix(self, text: str, min_length: int = MIN_PREFIX_LENGTH) -> Optional[str]:
        """Return the longest known name that ``text`` starts with, if any."""

        lowered = (text or "").lower()
        for length in range(min(len(lowered), self._max_length), min_length - 1, -1):
            prefix = lowered[:length]
            if prefix in self._names:
                return prefix
        return None


DEFAULT_DICTIONARY = NameDictionary(FIRST_NAMES)
