"""glossfix - Repair text selected from PDF course material.

Reconstruct word boundaries in text that lost its spaces, or gained a space
between every glyph, before it goes into a study glossary.
"""

from .core import (
    Config,
    TextPattern,
    clean_selected_text,
    detect_text_pattern,
    is_valid_word,
    load_config,
    reconstruct_text,
)

__version__ = "0.3.0"
__all__ = [
    "Config",
    "TextPattern",
    "clean_selected_text",
    "detect_text_pattern",
    "is_valid_word",
    "load_config",
    "reconstruct_text",
]
