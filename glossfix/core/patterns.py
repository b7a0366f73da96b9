"""Text pattern detection: classify how a raw selection is corrupted."""

import re

from glossfix.core.segmentation.optimal import segment_optimal
from glossfix.core.segmentation.runs import lowercase_run, split_runs
from glossfix.core.types import TextPattern
from glossfix.core.validation import WordValidator, get_default_validator
from glossfix.utils.constants import Constants

_SPACED_GLYPHS_RE = re.compile(r"(?:[^\W_]\s){%d,}" % Constants.EXTREME_SPACING_MIN_GROUPS)
_CASE_GLUE_RE = re.compile(r"[a-z][A-Z]")
_WHITESPACE_RE = re.compile(r"\s")
_LETTER_RE = re.compile(r"[^\W\d_]")


def space_ratio(text: str) -> float | None:
    """Return whitespace count divided by non-whitespace count (None if no glyphs)."""
    whitespace = len(_WHITESPACE_RE.findall(text))
    glyphs = len(text) - whitespace
    if glyphs == 0:
        return None
    return whitespace / glyphs


def is_glued_run(run: str, validator: WordValidator) -> bool:
    """Check if a letter run looks like several words stuck together.

    The run must be long enough to hold two 3+ letter pieces, must not be a
    known word itself, and must split completely into two or more known
    words. Only dictionary-backed checks are used, so unknown vocabulary
    (names, jargon) is never mistaken for glued text.

    Args:
        run: A maximal run of letters
        validator: Validator whose tables are used in strict mode

    Returns:
        True if the run should be segmented
    """
    if len(run) < 2 * Constants.GLUED_PIECE_LENGTH:
        return False
    if validator.is_known(run):
        return False
    tokens = segment_optimal(lowercase_run(run), validator.strict())
    return tokens is not None and len(tokens) >= 2


def detect_text_pattern(text: str, validator: WordValidator | None = None) -> TextPattern:
    """Classify a raw selection into exactly one TextPattern.

    Args:
        text: Raw text (callers normally trim it first)
        validator: Validator for glued-run checks (default: compiled-in dictionary)

    Returns:
        EXTREME_SPACING, MISSING_SPACES, MIXED or NORMAL
    """
    ratio = space_ratio(text)
    if ratio is None:
        return TextPattern.NORMAL

    if _SPACED_GLYPHS_RE.search(text) or ratio > Constants.EXTREME_SPACE_RATIO:
        return TextPattern.EXTREME_SPACING

    if validator is None:
        validator = get_default_validator()

    if _CASE_GLUE_RE.search(text) or any(
        is_glued_run(chunk, validator) for is_letters, chunk in split_runs(text) if is_letters
    ):
        return TextPattern.MISSING_SPACES

    letters = len(_LETTER_RE.findall(text))
    if ratio < Constants.MIXED_SPACE_RATIO and letters > Constants.MIXED_MIN_LETTERS:
        return TextPattern.MIXED

    return TextPattern.NORMAL
