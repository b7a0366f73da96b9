"""Optimal word segmentation by dynamic programming."""

import math

from glossfix.core.types import Token
from glossfix.core.validation import WordValidator
from glossfix.utils.constants import Constants


def score_word(word: str, validator: WordValidator, stream_length: int) -> int:
    """Score a valid candidate word for the DP segmenter.

    Dictionary words score their dictionary weight (plus a bonus when very
    common); unknown words score less the longer they are. Mid-length words
    get a bonus, tiny words inside long streams and very long words a penalty.

    Args:
        word: Candidate word (already validated)
        validator: Validator providing dictionary scores
        stream_length: Length of the whole stream being segmented

    Returns:
        The candidate's score (may be negative)
    """
    length = len(word)
    known = validator.score(word)
    if known is None:
        score = max(1, Constants.DP_UNKNOWN_BASE - 2 * length)
    else:
        score = known
        if known > Constants.COMMON_WORD_SCORE:
            score += Constants.COMMON_WORD_BONUS

    if 3 <= length <= 8:
        score += Constants.MID_LENGTH_BONUS
        if 5 <= length <= 7:
            score += Constants.SWEET_SPOT_BONUS

    if length <= 2 and stream_length > Constants.TINY_WORD_STREAM_LENGTH:
        score -= Constants.TINY_WORD_PENALTY

    if length > Constants.LONG_WORD_LENGTH:
        score -= Constants.LONG_WORD_PENALTY

    return score


def segment_optimal(
    stream: str,
    validator: WordValidator,
    max_word_length: int = Constants.MAX_WORD_LENGTH,
) -> list[Token] | None:
    """Find the highest scoring segmentation of a letter stream.

    ``best[i]`` holds the best total score for the first ``i`` characters,
    ``parent[i]`` the split point achieving it and ``chosen[i]`` the word
    ending at ``i``. Only candidates up to ``max_word_length`` characters are
    evaluated, so the work is bounded by ``n * max_word_length`` validator
    calls. On equal totals the earlier (longer) candidate is kept.

    Args:
        stream: Lowercase letters-only string
        validator: Word validator (also provides dictionary scores)
        max_word_length: Longest candidate word to consider

    Returns:
        Tokens whose concatenation equals ``stream``, or None if no
        segmentation covers the whole stream
    """
    n = len(stream)
    if n == 0:
        return []

    best = [-math.inf] * (n + 1)
    parent = [-1] * (n + 1)
    chosen: list[Token] = [""] * (n + 1)
    best[0] = 0

    for i in range(1, n + 1):
        for j in range(max(0, i - max_word_length), i):
            if best[j] == -math.inf:
                continue
            word = stream[j:i]
            if not validator.is_valid(word):
                continue
            total = best[j] + score_word(word, validator, n)
            if total > best[i]:
                best[i] = total
                parent[i] = j
                chosen[i] = word

    if best[n] == -math.inf:
        return None

    tokens: list[Token] = []
    position = n
    while position > 0:
        tokens.append(chosen[position])
        position = parent[position]
    tokens.reverse()
    return tokens
