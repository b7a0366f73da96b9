"""Shared utility functions for glossfix."""

import functools
from pathlib import Path

from wordfreq import zipf_frequency as _zipf_frequency


def resolve_user_path(path: str | None) -> str | None:
    """Return ``path`` with a leading ``~`` expanded; an empty path becomes None."""
    return str(Path(path).expanduser()) if path else None


@functools.lru_cache(maxsize=None)
def cached_zipf_frequency(word: str, lang: str = "en") -> float:
    """Cached wrapper for zipf_frequency to avoid repeated lookups.

    Dictionary augmentation scores every fetched word, and the same words
    come back when several configurations are built in one process.

    Args:
        word: The word to look up
        lang: Language code (default: "en")

    Returns:
        Zipf frequency as a float (0.0 for unknown words)
    """
    return _zipf_frequency(word, lang)
