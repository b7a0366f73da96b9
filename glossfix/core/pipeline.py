"""Text reconstruction pipeline: classify, segment, repair, normalize."""

import functools

from loguru import logger
from pydantic import BaseModel, Field

from glossfix.core.config import Config
from glossfix.core.dictionary import get_dictionary
from glossfix.core.patterns import detect_text_pattern, is_glued_run
from glossfix.core.repair.normalization import collapse_whitespace, normalize
from glossfix.core.repair.rules import RuleTable, get_default_rules, load_rule_file
from glossfix.core.segmentation import (
    has_case_change,
    letters_of,
    segment_run,
    split_case_changes,
    split_runs,
    strip_whitespace,
)
from glossfix.core.types import SegmentationStrategy, TextPattern, Token
from glossfix.core.validation import WordValidator
from glossfix.utils.constants import Constants
from glossfix.utils.debug import log_debug_tokens, log_missing_debug_words


class ReconstructionResult(BaseModel):
    """Outcome of reconstructing one text selection."""

    original: str
    cleaned: str
    pattern: TextPattern
    strategy: SegmentationStrategy = SegmentationStrategy.NONE
    tokens: list[Token] = Field(default_factory=list)
    dictionary_ratio: float = 1.0


class _SegmentationState:
    """Per-call accumulator for tokens and the strategy used."""

    def __init__(self) -> None:
        self.tokens: list[Token] = []
        self.strategy = SegmentationStrategy.NONE

    def record(self, tokens: list[Token], strategy: SegmentationStrategy) -> None:
        self.tokens.extend(tokens)
        if strategy == SegmentationStrategy.GREEDY or self.strategy == SegmentationStrategy.NONE:
            self.strategy = strategy


class TextReconstructor:
    """Repair text captured from PDF selections.

    Holds the validator and the rule table, both read-only after
    construction, so one instance can serve any number of concurrent calls.

    Args:
        config: Configuration (default: Config())
        validator: Word validator (default: built from the configured dictionary)
        rules: Repair rule table (default: packaged rules plus config.extra_rules)
    """

    def __init__(
        self,
        config: Config | None = None,
        validator: WordValidator | None = None,
        rules: RuleTable | None = None,
    ) -> None:
        self.config = config or Config()
        if validator is None:
            validator = WordValidator(
                get_dictionary(self.config.top_n),
                min_fallback_length=self.config.min_fallback_length,
            )
        self.validator = validator
        if rules is None:
            rules = get_default_rules()
            if self.config.extra_rules:
                rules = rules.extend(load_rule_file(self.config.extra_rules))
        self.rules = rules

    def _segment(self, run: str, state: _SegmentationState) -> str:
        tokens, strategy = segment_run(
            run,
            self.validator,
            self.config.max_word_length,
            self.config.greedy_max_word_length,
        )
        state.record(tokens, strategy)
        log_debug_tokens(tokens, self.config.debug_words, strategy.value)
        log_missing_debug_words(run, tokens, self.config.debug_words, strategy.value)
        return " ".join(tokens)

    def _should_segment(self, run: str, pattern: TextPattern) -> bool:
        if is_glued_run(run, self.validator):
            return True
        # dense text: any long run that is not a known word is suspect
        return (
            pattern == TextPattern.MIXED
            and len(run) >= 2 * Constants.GLUED_PIECE_LENGTH
            and not self.validator.is_known(run)
        )

    def _rebuild_spaced(self, text: str, state: _SegmentationState) -> str:
        """Drop all whitespace, then segment every letter run."""
        pieces = []
        for is_letters, chunk in split_runs(strip_whitespace(text)):
            pieces.append(self._segment(chunk, state) if is_letters else chunk)
        return " ".join(pieces)

    def _rebuild_glued(self, text: str, pattern: TextPattern, state: _SegmentationState) -> str:
        """Keep existing whitespace; segment only the runs that look glued."""
        pieces = []
        for is_letters, chunk in split_runs(text):
            if not is_letters:
                pieces.append(chunk)
                continue
            parts = split_case_changes(chunk) if has_case_change(chunk) else [chunk]
            rebuilt = []
            for part in parts:
                if self._should_segment(part, pattern):
                    rebuilt.append(self._segment(part, state))
                else:
                    rebuilt.append(part)
            pieces.append(" ".join(rebuilt))
        return "".join(pieces)

    def _dictionary_ratio(self, tokens: list[Token]) -> float:
        if not tokens:
            return 1.0
        known = sum(1 for token in tokens if token.lower() in self.validator.dictionary)
        return known / len(tokens)

    def reconstruct(self, raw_text: str) -> ReconstructionResult:
        """Reconstruct a selection and report how it was done.

        Args:
            raw_text: Text as captured from the document

        Returns:
            ReconstructionResult with the cleaned text, detected pattern,
            strategy, tokens and the share of dictionary-backed tokens
        """
        text = raw_text.strip()

        if len(letters_of(text)) < self.config.min_letters:
            return ReconstructionResult(
                original=raw_text,
                cleaned=collapse_whitespace(text),
                pattern=TextPattern.NORMAL,
            )

        pattern = detect_text_pattern(text, self.validator)
        logger.debug(f"Detected pattern '{pattern.value}' for {len(text)} characters")

        state = _SegmentationState()
        if pattern == TextPattern.EXTREME_SPACING:
            rebuilt = self._rebuild_spaced(text, state)
        elif pattern in (TextPattern.MISSING_SPACES, TextPattern.MIXED):
            rebuilt = self._rebuild_glued(text, pattern, state)
        else:
            rebuilt = text

        cleaned = normalize(self.rules.apply(rebuilt))

        return ReconstructionResult(
            original=raw_text,
            cleaned=cleaned,
            pattern=pattern,
            strategy=state.strategy,
            tokens=state.tokens,
            dictionary_ratio=self._dictionary_ratio(state.tokens),
        )

    def clean(self, raw_text: str) -> str:
        """Return only the cleaned text for a selection."""
        return self.reconstruct(raw_text).cleaned


@functools.lru_cache(maxsize=1)
def get_default_reconstructor() -> TextReconstructor:
    """Return the shared reconstructor with default configuration (built once)."""
    return TextReconstructor()


def reconstruct_text(raw_text: str, config: Config | None = None) -> ReconstructionResult:
    """Reconstruct a selection, using the shared default reconstructor when no config is given."""
    reconstructor = get_default_reconstructor() if config is None else TextReconstructor(config)
    return reconstructor.reconstruct(raw_text)


def clean_selected_text(raw_text: str) -> str:
    """Repair text captured from a PDF selection.

    Never raises for string input; in the worst case the trimmed original
    comes back with cosmetic cleanup.
    """
    return get_default_reconstructor().clean(raw_text)
