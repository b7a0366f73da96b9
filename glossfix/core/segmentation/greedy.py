"""Greedy best-match segmentation, the fallback when the DP pass fails."""

from glossfix.core.types import Token
from glossfix.core.validation import WordValidator
from glossfix.utils.constants import Constants


def score_greedy_candidate(word: str, validator: WordValidator) -> int:
    """Score a valid candidate word for the greedy segmenter."""
    length = len(word)
    known = validator.score(word)
    score = max(1, Constants.GREEDY_UNKNOWN_BASE - length) if known is None else known

    if 3 <= length <= 8:
        score += length * Constants.GREEDY_LENGTH_MULTIPLIER
    if 5 <= length <= 7:
        score += Constants.SWEET_SPOT_BONUS

    return score


def best_match_at(
    stream: str,
    position: int,
    validator: WordValidator,
    max_word_length: int = Constants.GREEDY_MAX_WORD_LENGTH,
) -> Token | None:
    """Return the best scoring valid word starting at ``position``.

    Lengths are tried from longest to shortest and only a strictly higher
    score replaces the current pick, so the longest candidate wins ties.
    """
    best_word: Token | None = None
    best_score = 0
    for length in range(min(max_word_length, len(stream) - position), 0, -1):
        candidate = stream[position : position + length]
        if not validator.is_valid(candidate):
            continue
        score = score_greedy_candidate(candidate, validator)
        if best_word is None or score > best_score:
            best_word = candidate
            best_score = score
    return best_word


def segment_greedy(
    stream: str,
    validator: WordValidator,
    max_word_length: int = Constants.GREEDY_MAX_WORD_LENGTH,
) -> list[Token]:
    """Segment a letter stream left to right, taking the best word at each position.

    When no candidate is valid at a position the single character is emitted
    as its own token, so the scan always advances and always covers the
    whole stream.

    Args:
        stream: Lowercase letters-only string
        validator: Word validator (also provides dictionary scores)
        max_word_length: Longest candidate word to consider

    Returns:
        Tokens whose concatenation equals ``stream``
    """
    tokens: list[Token] = []
    position = 0
    while position < len(stream):
        word = best_match_at(stream, position, validator, max_word_length)
        if word is None:
            word = stream[position]
        tokens.append(word)
        position += len(word)
    return tokens
