"""
Alphabet Builder
================
The ordered set of characters eligible for substitution.

Every alphabet is seeded with the 52 ASCII letters (A-Z then a-z) and
any extra characters the caller supplies. Characters are kept unique and
sorted by code point at all times, so lookups are a binary search.

The alphabet only ever grows. Re-keying with a key string that contains
unknown characters merges them in, which shifts the index of every
character sorting after them.
"""

import bisect
import logging
import string
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase


class Alphabet:
    """Sorted, duplicate-free sequence of characters."""

    def __init__(self, chars: Iterable[str] = ()):
        self._chars = sorted(set(chars))

    def index(self, char: str) -> Optional[int]:
        """Position of `char`, or None if it is not in the alphabet."""
        i = bisect.bisect_left(self._chars, char)
        if i < len(self._chars) and self._chars[i] == char:
            return i
        return None

    def extend(self, chars: Iterable[str]) -> int:
        """
        Merge `chars` into the alphabet and re-sort.
        Characters already present are ignored.
        Returns the number of characters actually added.
        """
        new = set(chars).difference(self._chars)
        if new:
            self._chars.extend(new)
            self._chars.sort()
            logger.info(f"Alphabet extended by {len(new)} chars -> size {len(self._chars)}")
        return len(new)

    def __contains__(self, char: str) -> bool:
        return self.index(char) is not None

    def __len__(self) -> int:
        return len(self._chars)

    def __getitem__(self, i: int) -> str:
        return self._chars[i]

    def __iter__(self):
        return iter(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self):
        return f"Alphabet({len(self._chars)} chars)"


def build_alphabet(extra: Iterable[str] = "") -> Alphabet:
    """ASCII letters plus every character of `extra`, sorted and deduplicated."""
    chars = set(UPPERCASE)
    chars.update(LOWERCASE)
    chars.update(extra)
    return Alphabet(chars)
