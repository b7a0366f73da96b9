"""Core domain logic for glossfix."""

from .config import Config, load_config
from .dictionary import PREFIXES, SUFFIXES, get_dictionary
from .patterns import detect_text_pattern, is_glued_run
from .pipeline import (
    ReconstructionResult,
    TextReconstructor,
    clean_selected_text,
    reconstruct_text,
)
from .types import SegmentationStrategy, TextPattern, Token
from .validation import WordValidator, is_valid_word

__all__ = [
    "Config",
    "PREFIXES",
    "ReconstructionResult",
    "SUFFIXES",
    "SegmentationStrategy",
    "TextPattern",
    "TextReconstructor",
    "Token",
    "WordValidator",
    "clean_selected_text",
    "detect_text_pattern",
    "get_dictionary",
    "is_glued_run",
    "is_valid_word",
    "load_config",
    "reconstruct_text",
]
