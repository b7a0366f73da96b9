"""Constants used throughout the glossfix codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Pattern detection
    EXTREME_SPACING_MIN_GROUPS = 8
    """Consecutive single-glyph-plus-whitespace groups that mark extreme spacing."""

    EXTREME_SPACE_RATIO = 0.3
    """Whitespace/non-whitespace ratio above which text counts as extremely spaced."""

    MIXED_SPACE_RATIO = 0.1
    """Whitespace/non-whitespace ratio below which dense text counts as mixed."""

    MIXED_MIN_LETTERS = 20
    """Letter count a dense text must exceed to count as mixed."""

    GLUED_PIECE_LENGTH = 3
    """Minimum length of each of the two adjacent pieces in a glued letter run."""

    # Pipeline
    MIN_LETTERS = 5
    """Inputs with fewer letters than this skip segmentation entirely."""

    # Word validation
    SINGLE_LETTER_WORDS = frozenset({"a", "i"})
    """The only single letters accepted as words."""

    COMPOUND_MIN_LENGTH = 7
    """Candidates must be at least this long to try a compound split."""

    AFFIX_MIN_REMAINDER = 3
    """Minimum stem length left after removing a prefix or suffix."""

    MIN_FALLBACK_LENGTH = 4
    """Default length at which any alphabetic candidate is accepted."""

    # Optimal segmentation scoring
    MAX_WORD_LENGTH = 20
    """Longest candidate the DP segmenter considers."""

    DP_UNKNOWN_BASE = 25
    """Base score for valid words missing from the dictionary (minus 2 per letter)."""

    COMMON_WORD_SCORE = 60
    """Dictionary score above which a word earns the common-word bonus."""

    COMMON_WORD_BONUS = 20
    MID_LENGTH_BONUS = 15
    SWEET_SPOT_BONUS = 10
    TINY_WORD_PENALTY = 15
    LONG_WORD_PENALTY = 10
    LONG_WORD_LENGTH = 12

    TINY_WORD_STREAM_LENGTH = 8
    """Streams longer than this penalize one- and two-letter words."""

    # Greedy segmentation scoring
    GREEDY_MAX_WORD_LENGTH = 15
    """Longest candidate the greedy segmenter considers."""

    GREEDY_UNKNOWN_BASE = 20
    """Base score for valid words missing from the dictionary (minus 1 per letter)."""

    GREEDY_LENGTH_MULTIPLIER = 3
    """Per-letter bonus for mid-length greedy candidates."""

    # Dictionary augmentation
    ZIPF_WEIGHT_MULTIPLIER = 2
    """Multiplier turning a wordfreq Zipf value (0-8) into a frequency weight."""

    # Glossary
    DEFAULT_MODEL = "llama3.2"
    DEFAULT_COLOR_TAG = "yellow"
    ENRICHMENT_SOURCE = "ai"
