"""Word plausibility checks used by the segmenters and the pattern detector."""

import functools
import re
from collections.abc import Mapping

from glossfix.core.dictionary import PREFIXES, SUFFIXES, get_dictionary
from glossfix.utils.constants import Constants

_NON_LETTERS_RE = re.compile(r"[\W\d_]")


class WordValidator:
    """Decide whether a candidate substring is a plausible word.

    A candidate is accepted when it is a dictionary word, a compound of two
    dictionary words, a known prefix or suffix attached to a long enough
    stem, or (permissive catch-all) any alphabetic string of at least
    ``min_fallback_length`` letters.

    In strict mode the catch-all is disabled and affix matches need a stem
    that is itself a dictionary word. The pattern detector uses strict mode
    to tell genuinely glued words from unknown vocabulary.

    Attributes:
        dictionary: Read-only word -> score mapping
        prefixes: Known prefixes
        suffixes: Known suffixes
        min_fallback_length: Length for the catch-all (None disables it)
        strict_affixes: Whether affix stems must be dictionary words
    """

    def __init__(
        self,
        dictionary: Mapping[str, int] | None = None,
        prefixes: frozenset[str] = PREFIXES,
        suffixes: frozenset[str] = SUFFIXES,
        min_fallback_length: int | None = Constants.MIN_FALLBACK_LENGTH,
        strict_affixes: bool = False,
    ) -> None:
        self.dictionary = get_dictionary() if dictionary is None else dictionary
        self.prefixes = prefixes
        self.suffixes = suffixes
        self.min_fallback_length = min_fallback_length
        self.strict_affixes = strict_affixes

    @property
    def is_strict(self) -> bool:
        """True when neither permissive fallback is active."""
        return self.min_fallback_length is None and self.strict_affixes

    def strict(self) -> "WordValidator":
        """Return a validator sharing this one's tables with both fallbacks disabled."""
        if self.is_strict:
            return self
        return self._strict_validator

    @functools.cached_property
    def _strict_validator(self) -> "WordValidator":
        return WordValidator(
            self.dictionary,
            self.prefixes,
            self.suffixes,
            min_fallback_length=None,
            strict_affixes=True,
        )

    def score(self, word: str) -> int | None:
        """Return the dictionary score for a word, or None if it is not listed."""
        return self.dictionary.get(word)

    def _is_compound(self, word: str) -> bool:
        """Check if word splits into two dictionary words of 3+ letters each."""
        if len(word) < Constants.COMPOUND_MIN_LENGTH:
            return False
        piece = Constants.GLUED_PIECE_LENGTH
        for split_at in range(piece, len(word) - piece + 1):
            if word[:split_at] in self.dictionary and word[split_at:] in self.dictionary:
                return True
        return False

    def _stem_ok(self, stem: str) -> bool:
        if len(stem) < Constants.AFFIX_MIN_REMAINDER:
            return False
        return stem in self.dictionary or not self.strict_affixes

    def _has_known_prefix(self, word: str) -> bool:
        return any(
            word.startswith(prefix) and self._stem_ok(word[len(prefix) :])
            for prefix in self.prefixes
        )

    def _has_known_suffix(self, word: str) -> bool:
        return any(
            word.endswith(suffix) and self._stem_ok(word[: -len(suffix)])
            for suffix in self.suffixes
        )

    def is_valid(self, candidate: str) -> bool:
        """Check if a candidate substring is a plausible word.

        Args:
            candidate: Raw candidate (case and non-letters are ignored; accented
                letters are kept, so they only pass the catch-all)

        Returns:
            True if the candidate should be accepted as a word
        """
        word = _NON_LETTERS_RE.sub("", candidate.casefold())
        if not word:
            return False

        if len(word) == 1:
            return word in Constants.SINGLE_LETTER_WORDS

        if word in self.dictionary:
            return True

        if self._is_compound(word):
            return True

        if self._has_known_prefix(word) or self._has_known_suffix(word):
            return True

        if self.min_fallback_length is None:
            return False
        return len(word) >= self.min_fallback_length and candidate.isalpha()

    def is_known(self, candidate: str) -> bool:
        """Check if a candidate is a listed word or a listed stem with a known affix.

        Unlike strict validation, compounds do not count: two listed words
        stuck together are exactly what glued-text detection looks for.
        """
        word = _NON_LETTERS_RE.sub("", candidate.casefold())
        if len(word) <= 1:
            return word in Constants.SINGLE_LETTER_WORDS
        if word in self.dictionary:
            return True
        strict = self.strict()
        return strict._has_known_prefix(word) or strict._has_known_suffix(word)


@functools.lru_cache(maxsize=1)
def get_default_validator() -> WordValidator:
    """Return the shared validator built on the compiled-in dictionary."""
    return WordValidator()


def is_valid_word(candidate: str) -> bool:
    """Check a candidate with the default (permissive) validator."""
    return get_default_validator().is_valid(candidate)
