"""Word segmentation of letter streams."""

from glossfix.core.segmentation.greedy import score_greedy_candidate, segment_greedy
from glossfix.core.segmentation.optimal import score_word, segment_optimal
from glossfix.core.segmentation.runs import (
    has_case_change,
    letters_of,
    lowercase_run,
    restore_case,
    split_case_changes,
    split_runs,
    strip_whitespace,
)
from glossfix.core.segmentation.strategy import segment, segment_run

__all__ = [
    "has_case_change",
    "letters_of",
    "lowercase_run",
    "restore_case",
    "score_greedy_candidate",
    "score_word",
    "segment",
    "segment_greedy",
    "segment_optimal",
    "segment_run",
    "split_case_changes",
    "split_runs",
    "strip_whitespace",
]
