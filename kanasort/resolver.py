from __future__ import annotations
import logging
import os
from functools import lru_cache
from typing import Mapping, Optional

from .dictionary import ReadingDictionary, default_dictionary
from .normalize import is_kana, normalize_kana, widen_kana

logger = logging.getLogger(__name__)

FIRST_MATCH = "first"
LONGEST_MATCH = "longest"
MATCH_STRATEGIES = (FIRST_MATCH, LONGEST_MATCH)

# Tie-break for the substring fallback when several tokens occur in the text
DEFAULT_MATCH_STRATEGY = os.getenv("KANASORT_MATCH_STRATEGY", FIRST_MATCH)


def split_name(text: str) -> list[str]:
    """Split on ASCII or ideographic whitespace."""
    return text.split()


class ReadingResolver:
    """Approximate the kana reading of a display string.

    The dictionary is a static lookup table; text it does not cover falls
    back to its lowercased form, so Latin names still sort sensibly.
    """

    def __init__(
        self,
        dictionary: Mapping[str, str] | None = None,
        strategy: str | None = None,
    ):
        if dictionary is None:
            dictionary = default_dictionary()
        elif not isinstance(dictionary, ReadingDictionary):
            dictionary = ReadingDictionary(dictionary)
        strategy = (strategy or DEFAULT_MATCH_STRATEGY).lower()
        if strategy not in MATCH_STRATEGIES:
            raise ValueError(f"Unsupported match strategy: {strategy}")
        self.dictionary = dictionary
        self.strategy = strategy

    def resolve(self, text: str | None, explicit_reading: str | None = None) -> str:
        """Return the canonical sort key for ``text``.

        A non-blank ``explicit_reading`` always wins. Kana input is folded to
        hiragana; anything else goes through the dictionary and finally the
        lowercased text.
        """
        if explicit_reading:
            reading = widen_kana(explicit_reading).strip()
            if reading:
                return normalize_kana(reading)

        clean = widen_kana(text).strip()
        if not clean:
            return ""
        if is_kana(clean):
            return normalize_kana(clean)

        found = self.lookup(clean)
        if found is not None:
            return found

        logger.debug("no dictionary reading for %r", clean)
        return clean.lower()

    def lookup(self, text: str) -> Optional[str]:
        """Return the dictionary reading for ``text`` or ``None``."""
        if text in self.dictionary:
            return self.dictionary[text]

        tokens = split_name(text)
        if len(tokens) == 2:
            surname = self.dictionary.get(tokens[0])
            given = self.dictionary.get(tokens[1])
            if surname and given:
                return f"{surname} {given}"
            if surname or given:
                return surname or given

        return self._scan(text)

    def surname_reading(self, text: str | None) -> Optional[str]:
        """Return the reading of the surname of a "surname given" pair."""
        tokens = split_name(widen_kana(text))
        if len(tokens) != 2:
            return None
        return self.dictionary.get(tokens[0])

    def _scan(self, text: str) -> Optional[str]:
        best = None
        for token in self.dictionary:
            if token not in text:
                continue
            if self.strategy == FIRST_MATCH:
                return self.dictionary[token]
            if best is None or len(token) > len(best):
                best = token
        if best is None:
            return None
        return self.dictionary[best]


@lru_cache(maxsize=1)
def default_resolver() -> ReadingResolver:
    """Return a resolver over the compiled-in dictionary."""
    return ReadingResolver()


def resolve_reading(text: str | None, explicit_reading: str | None = None) -> str:
    """Resolve ``text`` with the default resolver."""
    return default_resolver().resolve(text, explicit_reading)
