"""Type definitions for glossfix."""

from enum import Enum


class TextPattern(Enum):
    """Failure mode detected in a raw text selection."""

    EXTREME_SPACING = "extreme_spacing"  # whitespace between (almost) every glyph
    MISSING_SPACES = "missing_spaces"  # words glued together
    MIXED = "mixed"  # dense text, few spaces, nothing clearly glued
    NORMAL = "normal"


class SegmentationStrategy(Enum):
    """Which segmenter produced the tokens of a reconstruction."""

    NONE = "none"  # nothing was segmented
    OPTIMAL = "optimal"
    GREEDY = "greedy"  # at least one stream needed the greedy fallback


# Type alias for a segmented word token
Token = str
