"""Utility functions for glossfix."""

from glossfix.utils.constants import Constants
from glossfix.utils.debug import (
    is_debug_word,
    log_debug_tokens,
    log_debug_word,
    log_missing_debug_words,
)
from glossfix.utils.helpers import cached_zipf_frequency, resolve_user_path
from glossfix.utils.logging import setup_logger

__all__ = [
    "Constants",
    "is_debug_word",
    "log_debug_tokens",
    "log_debug_word",
    "log_missing_debug_words",
    "cached_zipf_frequency",
    "resolve_user_path",
    "setup_logger",
]
