"""Whitespace, punctuation and capitalization normalization."""

import re

_WHITESPACE_RE = re.compile(r"\s+")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([.,:;!?])")
_PUNCT_THEN_WORD_RE = re.compile(r"(\d)?([.,:;!?])(\s*)(\w)")
_OPEN_PAREN_RE = re.compile(r"\(\s+")
_CLOSE_PAREN_RE = re.compile(r"\s+\)")
_SLASH_RE = re.compile(r"\s*/\s*")
_HYPHEN_RE = re.compile(r"\s*-\s*")
_CONTRACTION_RE = re.compile(r"\b([A-Za-z]+)\s*'\s*(s|t|d|ll|re|ve|m)\b", re.IGNORECASE)
_SENTENCE_START_RE = re.compile(r"(\.\s+)([a-z])")
_FIRST_LETTER_RE = re.compile(r"[^\W\d_]")


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _space_after_punctuation(match: re.Match) -> str:
    digit, mark, gap, following = match.groups()
    if digit and following.isdigit() and not gap:
        return match.group()
    return f"{digit or ''}{mark} {following}"


def normalize_spacing(text: str) -> str:
    """Normalize spacing around punctuation, brackets, slashes and hyphens.

    Numbers such as ``3.14``, ``1,000`` or ``10:30`` keep their separators
    tight even though a space normally follows ``.``, ``,`` and ``:``.
    """
    text = collapse_whitespace(text)
    text = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
    text = _PUNCT_THEN_WORD_RE.sub(_space_after_punctuation, text)
    text = _OPEN_PAREN_RE.sub("(", text)
    text = _CLOSE_PAREN_RE.sub(")", text)
    text = _SLASH_RE.sub("/", text)
    text = _HYPHEN_RE.sub("-", text)
    text = _CONTRACTION_RE.sub(r"\1'\2", text)
    return text


def capitalize_sentences(text: str) -> str:
    """Uppercase the first letter of the text and the first letter after each ``. ``."""
    first = _FIRST_LETTER_RE.search(text)
    if first:
        start = first.start()
        text = text[:start] + text[start].upper() + text[start + 1 :]
    return _SENTENCE_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def normalize(text: str) -> str:
    """Full normalization: spacing first, then capitalization."""
    return capitalize_sentences(normalize_spacing(text))
