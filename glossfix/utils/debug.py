"""Debug logging helpers for tracing individual words through the pipeline."""

from loguru import logger


def is_debug_word(word: str, debug_words: frozenset[str] | set[str]) -> bool:
    """Check if a word is being debugged (case-insensitive exact match)."""
    return bool(debug_words) and word.lower() in debug_words


def log_debug_word(word: str, message: str, stage: str = "") -> None:
    """Log a debug message for a traced word.

    Args:
        word: The word being traced
        message: What happened to it
        stage: Optional pipeline stage name
    """
    prefix = f"[DEBUG WORD: '{word.lower()}']"
    if stage:
        prefix = f"{prefix} [{stage}]"
    logger.debug(f"{prefix} {message}")


def log_debug_tokens(
    tokens: list[str],
    debug_words: frozenset[str] | set[str],
    stage: str,
) -> None:
    """Log every token in a segmentation that matches a debug word."""
    if not debug_words:
        return
    for position, token in enumerate(tokens, 1):
        if is_debug_word(token, debug_words):
            log_debug_word(token, f"emitted as token #{position} of {len(tokens)}", stage)


def log_missing_debug_words(
    stream: str,
    tokens: list[str],
    debug_words: frozenset[str] | set[str],
    stage: str,
) -> None:
    """Log debug words present in a stream that did not survive as whole tokens."""
    if not debug_words:
        return
    produced = {token.lower() for token in tokens}
    lowered = stream.lower()
    for word in sorted(debug_words):
        if word in lowered and word not in produced:
            log_debug_word(word, f"present in '{stream}' but split as {tokens}", stage)
