"""Regression tests for debug word tracing through segmentation.

When debug_words is set and debug=True, each traced word must show up in
the log either as an emitted token or as a word the segmenter split.
"""

import io

from loguru import logger

from glossfix.core import Config, TextReconstructor
from glossfix.utils.logging import setup_logger


def _capture_debug(config: Config, text: str) -> str:
    """Clean text with config and return everything logged at DEBUG."""
    setup_logger(verbose=True, debug=True)

    # Add after setup_logger so it doesn't get removed
    log_capture = io.StringIO()
    handler_id = logger.add(log_capture, level="DEBUG", format="{message}")
    try:
        TextReconstructor(config).clean(text)
    finally:
        logger.remove(handler_id)
    return log_capture.getvalue()


def test_debug_word_logged_when_emitted_as_token():
    """A traced word that survives segmentation is logged with its token position."""
    config = Config(debug=True, debug_words=["attacks"])
    log_text = _capture_debug(config, "ransomwareattacks")
    assert "[DEBUG WORD: 'attacks']" in log_text, (
        f"Expected debug word logging for 'attacks', but not found. "
        f"Captured messages:\n{log_text}"
    )
    assert "emitted as token #2 of 2" in log_text


def test_debug_word_logged_when_split():
    """A traced word the segmenter broke apart is logged with the split."""
    config = Config(debug=True, debug_words=["keyloggers"])
    log_text = _capture_debug(config, "keyloggerspyware")
    assert "[DEBUG WORD: 'keyloggers']" in log_text, (
        f"Expected debug word logging for 'keyloggers', but not found. "
        f"Captured messages:\n{log_text}"
    )
    assert "but split as ['keylogger', 'spyware']" in log_text


def test_detected_pattern_is_logged():
    """Every reconstruction logs its detected pattern."""
    log_text = _capture_debug(Config(debug=True), "denialofservice")
    assert "Detected pattern 'missing_spaces'" in log_text


def test_untraced_words_are_not_logged():
    """Without debug_words no word tracing appears."""
    log_text = _capture_debug(Config(debug=True), "ransomwareattacks")
    assert "[DEBUG WORD:" not in log_text
