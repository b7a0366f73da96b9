"""Unit tests for word validation and the compiled-in dictionary.

Small hand-built dictionaries keep each case independent of the shipped
word list; the last classes check the shipped list itself.
"""

from types import MappingProxyType
from unittest.mock import patch

import pytest

from glossfix.core.dictionary import _parse_tiers, get_dictionary, length_scaled_score
from glossfix.core.validation import WordValidator, is_valid_word


def _validator(words, **kwargs) -> WordValidator:
    kwargs.setdefault("prefixes", frozenset())
    kwargs.setdefault("suffixes", frozenset())
    kwargs.setdefault("min_fallback_length", None)
    return WordValidator(dict.fromkeys(words, 50), **kwargs)


class TestSingleLetters:
    """Test that only 'a' and 'i' are valid single letters."""

    @pytest.mark.parametrize("letter", ["a", "i", "A", "I"])
    def test_a_and_i_are_valid(self, letter: str) -> None:
        """The two English one-letter words are accepted in either case."""
        assert _validator([]).is_valid(letter)

    @pytest.mark.parametrize("letter", ["x", "s", "t", "o"])
    def test_other_letters_are_rejected(self, letter: str) -> None:
        """Any other single letter is rejected even with the fallback on."""
        assert not _validator([], min_fallback_length=1).is_valid(letter)

    def test_empty_candidate_is_rejected(self) -> None:
        """A candidate with no letters is never a word."""
        assert not _validator([]).is_valid("")

    def test_punctuation_only_is_rejected(self) -> None:
        """Punctuation is stripped before the check, leaving nothing."""
        assert not _validator([]).is_valid("!?-")


class TestDictionaryWords:
    """Test plain dictionary lookups."""

    def test_listed_word_is_valid(self) -> None:
        """A word in the dictionary is accepted."""
        assert _validator(["service"]).is_valid("service")

    def test_case_is_ignored(self) -> None:
        """Lookup is case-insensitive."""
        assert _validator(["service"]).is_valid("SeRvIcE")

    def test_surrounding_punctuation_is_ignored(self) -> None:
        """Non-letters are stripped before lookup."""
        assert _validator(["service"]).is_valid("service,")

    def test_unlisted_word_is_rejected_without_fallback(self) -> None:
        """With every fallback disabled an unlisted word is rejected."""
        assert not _validator(["service"]).is_valid("servic")


class TestCompounds:
    """Test compounds of two dictionary words."""

    def test_two_listed_words_form_a_compound(self) -> None:
        """Two listed 3+ letter words glued together are accepted."""
        assert _validator(["cyber", "crime"]).is_valid("cybercrime")

    def test_short_compound_is_rejected(self) -> None:
        """Compounds shorter than seven letters are not considered."""
        assert not _validator(["cat", "dog"]).is_valid("catdog")

    def test_pieces_must_be_three_letters(self) -> None:
        """A two-letter piece does not make a compound."""
        assert not _validator(["an", "thology"]).is_valid("anthology")


class TestAffixes:
    """Test prefix and suffix handling in both modes."""

    def test_permissive_prefix_accepts_any_stem(self) -> None:
        """In permissive mode any stem of 3+ letters is enough."""
        validator = _validator([], prefixes=frozenset({"un"}))
        assert validator.is_valid("unxyz")

    def test_prefix_stem_must_be_three_letters(self) -> None:
        """A two-letter remainder is too short."""
        validator = _validator([], prefixes=frozenset({"un"}))
        assert not validator.is_valid("unxy")

    def test_permissive_suffix_accepts_any_stem(self) -> None:
        """Suffixes follow the same rule as prefixes."""
        validator = _validator([], suffixes=frozenset({"ing"}))
        assert validator.is_valid("xyzing")

    def test_strict_prefix_needs_listed_stem(self) -> None:
        """In strict mode the stem must itself be a dictionary word."""
        validator = _validator(["lock"], prefixes=frozenset({"un"}), strict_affixes=True)
        assert validator.is_valid("unlock")
        assert not validator.is_valid("unxyz")

    def test_strict_suffix_needs_listed_stem(self) -> None:
        """Inflections of listed words pass strict checks."""
        validator = _validator(["attack"], suffixes=frozenset({"ed"}), strict_affixes=True)
        assert validator.is_valid("attacked")
        assert not validator.is_valid("zorked")


class TestFallback:
    """Test the permissive catch-all for long alphabetic candidates."""

    def test_long_alphabetic_candidate_is_valid(self) -> None:
        """Any alphabetic string of the fallback length is accepted."""
        assert _validator([], min_fallback_length=4).is_valid("qwrt")

    def test_shorter_candidate_is_rejected(self) -> None:
        """Below the fallback length the catch-all does not apply."""
        assert not _validator([], min_fallback_length=4).is_valid("qwr")

    def test_fallback_length_is_configurable(self) -> None:
        """Raising the length makes the catch-all stricter."""
        assert not _validator([], min_fallback_length=6).is_valid("qwrtz")

    def test_candidate_with_non_letters_is_rejected(self) -> None:
        """The catch-all only accepts purely alphabetic candidates."""
        assert not _validator([], min_fallback_length=4).is_valid("ab1cd")

    def test_default_validator_accepts_unknown_vocabulary(self) -> None:
        """The default validator keeps the catch-all at four letters."""
        assert is_valid_word("zxcv")
        assert not is_valid_word("zxc")


class TestStrictCopies:
    """Test strict() and is_known()."""

    def test_strict_disables_fallbacks(self) -> None:
        """The strict copy rejects what only the catch-all allowed."""
        validator = _validator([], min_fallback_length=4)
        assert validator.is_valid("qwrt")
        assert not validator.strict().is_valid("qwrt")

    def test_strict_copy_is_cached(self) -> None:
        """Repeated calls return the same strict validator."""
        validator = _validator(["word"], min_fallback_length=4)
        assert validator.strict() is validator.strict()

    def test_strict_validator_returns_itself(self) -> None:
        """A validator that is already strict is its own strict copy."""
        validator = _validator(["word"], strict_affixes=True)
        assert validator.is_strict
        assert validator.strict() is validator

    def test_strict_copy_shares_dictionary(self) -> None:
        """The strict copy looks words up in the same table."""
        validator = _validator(["word"], min_fallback_length=4)
        assert validator.strict().dictionary is validator.dictionary

    def test_is_known_accepts_listed_inflection(self) -> None:
        """A listed stem with a known suffix counts as known."""
        validator = _validator(["attack"], suffixes=frozenset({"s"}), min_fallback_length=4)
        assert validator.is_known("Attacks")

    def test_is_known_rejects_compounds(self) -> None:
        """Two listed words glued together are valid but not known."""
        validator = _validator(["ransom", "attack"])
        assert validator.is_valid("ransomattack")
        assert not validator.is_known("ransomattack")

    def test_is_known_ignores_fallback(self) -> None:
        """Unknown vocabulary is never known, whatever the fallback length."""
        assert not _validator([], min_fallback_length=4).is_known("zxcvbn")


class TestCompiledDictionary:
    """Test the shipped dictionary."""

    def test_dictionary_is_read_only(self) -> None:
        """The shared table cannot be mutated by callers."""
        dictionary = get_dictionary()
        assert isinstance(dictionary, MappingProxyType)
        with pytest.raises(TypeError):
            dictionary["newword"] = 1  # type: ignore[index]

    def test_keys_are_lowercase_letters(self) -> None:
        """Every key is lowercase ASCII letters only."""
        words = get_dictionary()
        assert all(word.isascii() and word.isalpha() and word.islower() for word in words)

    def test_scores_are_positive(self) -> None:
        """Every score is a positive integer."""
        assert all(isinstance(score, int) and score > 0 for score in get_dictionary().values())

    def test_every_dictionary_word_is_valid(self) -> None:
        """Every listed word passes validation."""
        assert all(is_valid_word(word) for word in get_dictionary())

    def test_single_letter_entries_are_a_and_i(self) -> None:
        """No single-letter entry other than 'a' and 'i' is listed."""
        singles = {word for word in get_dictionary() if len(word) == 1}
        assert singles <= {"a", "i"}


class TestDictionaryTiers:
    """Test tier parsing and wordfreq augmentation."""

    def test_highest_tier_wins_for_duplicates(self) -> None:
        """A word listed twice keeps its higher weight."""
        assert _parse_tiers({50: "word", 90: "word"}) == {"word": 90}

    def test_invalid_word_raises(self) -> None:
        """Tier words must be lowercase letters."""
        with pytest.raises(ValueError):
            _parse_tiers({50: "don't"})

    def test_non_positive_weight_raises(self) -> None:
        """Weights must be positive."""
        with pytest.raises(ValueError):
            _parse_tiers({0: "word"})

    def test_top_n_adds_wordfreq_words(self) -> None:
        """Augmentation adds new alphabetic words and keeps built-in scores."""
        get_dictionary.cache_clear()
        try:
            with (
                patch(
                    "glossfix.core.dictionary.top_n_list",
                    return_value=["the", "zebra", "don't", "x"],
                ),
                patch("glossfix.core.dictionary.cached_zipf_frequency", return_value=4.2),
            ):
                dictionary = get_dictionary(4)
            assert dictionary["zebra"] == length_scaled_score("zebra", 8)
            assert dictionary["the"] == get_dictionary()["the"]
            assert "don't" not in dictionary
            assert "x" not in dictionary
        finally:
            get_dictionary.cache_clear()

    def test_score_is_weight_times_length_squared(self) -> None:
        """Doubling a word's length quadruples its score."""
        assert length_scaled_score("attack", 10) == 360
        assert length_scaled_score("attackattack", 10) == 4 * 360

    def test_compiled_scores_follow_weights(self) -> None:
        """Shipped scores are the tier weight scaled by length."""
        dictionary = get_dictionary()
        assert dictionary["attackers"] == length_scaled_score("attackers", 11)
        assert dictionary["the"] == length_scaled_score("the", 10)


class TestAccentedCandidates:
    """Test candidates containing non-ASCII letters."""

    def test_accented_letters_are_kept_for_the_catch_all(self) -> None:
        """Accented letters count towards the fallback length."""
        assert _validator([], min_fallback_length=4).is_valid("café")

    def test_accented_word_is_never_a_dictionary_word(self) -> None:
        """Accents are not stripped to reach an ASCII entry."""
        validator = _validator(["cafe"])
        assert not validator.is_valid("café")
        assert not validator.is_known("café")

    def test_uppercase_accented_candidate(self) -> None:
        """Case folding applies to accented letters too."""
        assert _validator([], min_fallback_length=4).is_valid("CAFÉ")
