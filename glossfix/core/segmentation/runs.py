"""Letter-run scanning and splicing.

Segmentation only ever sees runs of letters (accented letters included).
Everything else (whitespace, digits, punctuation) is carried around the
runs unchanged.
"""

import re
from collections.abc import Iterator

from glossfix.core.types import Token

_RUN_RE = re.compile(r"[^\W\d_]+|[\W\d_]+")
_CASE_CHANGE_RE = re.compile(r"(?<=[a-z])(?=[A-Z])")
_WHITESPACE_RE = re.compile(r"\s+")


def split_runs(text: str) -> Iterator[tuple[bool, str]]:
    """Yield ``(is_letters, chunk)`` for each maximal letter or non-letter run."""
    for match in _RUN_RE.finditer(text):
        chunk = match.group()
        yield chunk[0].isalpha(), chunk


def split_case_changes(run: str) -> list[str]:
    """Split a letter run wherever a lowercase letter is followed by an uppercase one."""
    return _CASE_CHANGE_RE.split(run)


def has_case_change(run: str) -> bool:
    return _CASE_CHANGE_RE.search(run) is not None


def strip_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub("", text)


def lowercase_run(run: str) -> str:
    """Lowercase a run letter by letter, leaving letters whose lowercase form is longer."""
    return "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in run)


def restore_case(run: str, tokens: list[Token]) -> list[Token]:
    """Map lowercase tokens back onto the original run to keep its letter case.

    Raises:
        ValueError: If the tokens do not cover the run exactly
    """
    if sum(len(token) for token in tokens) != len(run):
        raise ValueError(f"Tokens {tokens} do not cover run {run!r}")
    restored = []
    position = 0
    for token in tokens:
        restored.append(run[position : position + len(token)])
        position += len(token)
    return restored


def letters_of(text: str) -> str:
    """Return only the letters of a text, in order."""
    return "".join(chunk for is_letters, chunk in split_runs(text) if is_letters)
