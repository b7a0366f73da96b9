"""Segmentation strategy: optimal pass first, greedy fallback on failure."""

from loguru import logger

from glossfix.core.segmentation.greedy import segment_greedy
from glossfix.core.segmentation.optimal import segment_optimal
from glossfix.core.segmentation.runs import lowercase_run, restore_case
from glossfix.core.types import SegmentationStrategy, Token
from glossfix.core.validation import WordValidator
from glossfix.utils.constants import Constants


def segment(
    stream: str,
    validator: WordValidator,
    max_word_length: int = Constants.MAX_WORD_LENGTH,
    greedy_max_word_length: int = Constants.GREEDY_MAX_WORD_LENGTH,
) -> tuple[list[Token], SegmentationStrategy]:
    """Segment a lowercase letter stream.

    The DP result is used whenever it covers the whole stream. Otherwise the
    greedy segmenter runs on the entire stream; no partial DP result is kept.

    Args:
        stream: Lowercase letters-only string
        validator: Word validator
        max_word_length: Longest candidate for the DP pass
        greedy_max_word_length: Longest candidate for the greedy pass

    Returns:
        Tuple of (tokens, strategy that produced them)
    """
    tokens = segment_optimal(stream, validator, max_word_length)
    if tokens is not None:
        return tokens, SegmentationStrategy.OPTIMAL

    logger.debug(f"Optimal segmentation failed for '{stream}', falling back to greedy")
    return segment_greedy(stream, validator, greedy_max_word_length), SegmentationStrategy.GREEDY


def segment_run(
    run: str,
    validator: WordValidator,
    max_word_length: int = Constants.MAX_WORD_LENGTH,
    greedy_max_word_length: int = Constants.GREEDY_MAX_WORD_LENGTH,
) -> tuple[list[Token], SegmentationStrategy]:
    """Segment a letter run of any case, returning tokens in the run's original case."""
    tokens, strategy = segment(
        lowercase_run(run), validator, max_word_length, greedy_max_word_length
    )
    return restore_case(run, tokens), strategy
