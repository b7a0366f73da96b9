"""Unit tests for the repair rule table and its YAML loading."""

import pytest

from glossfix.core.repair.rules import (
    RuleKind,
    RuleTable,
    RuleTableError,
    get_default_rules,
    load_rule_file,
    merge_rule,
    parse_rule_table,
    split_rule,
)


class TestMergeRules:
    """Test rules that join adjacent words."""

    def test_joins_spaced_words_with_hyphens(self) -> None:
        """Separated words become the hyphenated unit."""
        rule = merge_rule(["denial", "of", "service"], "-")
        assert rule.apply("a denial of service attack") == "a denial-of-service attack"

    def test_joins_glued_words(self) -> None:
        """Words with no gap at all are joined too."""
        rule = merge_rule(["denial", "of", "service"], "-")
        assert rule.apply("denialofservice") == "denial-of-service"

    def test_space_joiner_separates_glued_words(self) -> None:
        """A space joiner splits function words stuck together."""
        assert merge_rule(["of", "the"], " ").apply("ofthe") == "of the"

    def test_keeps_leading_capital(self) -> None:
        """A capitalized match stays capitalized."""
        rule = merge_rule(["business", "critical"], "-")
        assert rule.apply("Business critical") == "Business-critical"

    def test_whole_words_only(self) -> None:
        """Matches must start and end on word boundaries."""
        assert merge_rule(["of", "the"], " ").apply("often") == "often"


class TestSplitRules:
    """Test rules that rejoin fragmented words."""

    def test_rejoins_fragments(self) -> None:
        """Letters separated by any whitespace are rejoined."""
        assert split_rule("service").apply("se rv ice") == "service"

    def test_uppercase_match_stays_uppercase(self) -> None:
        """All-caps fragments give the all-caps word."""
        assert split_rule("ransomware").apply("RANSOM WARE") == "RANSOMWARE"

    def test_capitalized_match_keeps_capital(self) -> None:
        """Only the first letter's case is carried for mixed matches."""
        assert split_rule("ransomware").apply("Ransom ware") == "Ransomware"

    def test_correct_word_is_unchanged(self) -> None:
        """An already-correct word is returned exactly as written."""
        assert split_rule("malware").apply("MalWare") == "MalWare"

    def test_does_not_match_inside_longer_word(self) -> None:
        """A term followed by more letters is left alone."""
        assert split_rule("service").apply("serviceable") == "serviceable"


class TestDefaultRules:
    """Test the packaged rule table."""

    def test_default_table_is_not_empty(self) -> None:
        """Both groups ship with rules."""
        rules = get_default_rules()
        assert rules.merge_rules
        assert rules.split_rules

    def test_merge_rules_run_first(self) -> None:
        """All merge rules precede all split rules."""
        kinds = [rule.kind for rule in get_default_rules().rules]
        assert kinds == sorted(kinds, key=lambda kind: kind != RuleKind.MERGE)

    def test_repairs_split_and_merged_text(self) -> None:
        """The table fixes both kinds of damage in one pass."""
        text = "ransom ware is a denial of service threat"
        expected = "ransomware is a denial-of-service threat"
        assert get_default_rules().apply(text) == expected

    def test_clean_text_is_unchanged(self) -> None:
        """Correct prose passes through untouched."""
        text = "The quick brown fox jumps over the lazy dog."
        assert get_default_rules().apply(text) == text

    def test_quoted_on_loads_as_word(self) -> None:
        """The 'on the' rule survives YAML loading."""
        assert "on the" in {rule.name for rule in get_default_rules().merge_rules}


class TestParseRuleTable:
    """Test rule data validation."""

    def test_none_gives_empty_table(self) -> None:
        """An empty YAML file is an empty table."""
        assert len(parse_rule_table(None)) == 0

    def test_parses_both_sections(self) -> None:
        """Merge and split sections build their rules in order."""
        table = parse_rule_table(
            {"merge": [{"words": ["zero", "day"], "joiner": "-"}], "split": ["botnet"]}
        )
        assert [rule.name for rule in table.rules] == ["zero-day", "botnet"]

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"bogus": []},
            {"merge": {"words": ["a", "b"]}},
            {"merge": [{"words": ["one"]}]},
            {"merge": [{"words": [True, "the"]}]},
            {"merge": [{"words": ["zero", "day"], "joiner": "+"}]},
            {"merge": ["zero day"]},
            {"split": ["two words"]},
            {"split": [42]},
        ],
    )
    def test_malformed_data_raises(self, data: object) -> None:
        """Every shape error is reported as RuleTableError."""
        with pytest.raises(RuleTableError):
            parse_rule_table(data)

    def test_extend_keeps_groups_ordered(self) -> None:
        """Extending appends to each group, keeping merges ahead of splits."""
        first = RuleTable(merge_rules=(merge_rule(["of", "the"], " "),))
        second = RuleTable(
            merge_rules=(merge_rule(["zero", "day"], "-"),), split_rules=(split_rule("botnet"),)
        )
        combined = first.extend(second)
        assert [rule.name for rule in combined.rules] == ["of the", "zero-day", "botnet"]


class TestLoadRuleFile:
    """Test loading user rule files."""

    def test_loads_yaml_file(self, tmp_path) -> None:
        """A well-formed file loads into a table."""
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text(
            'merge:\n  - words: [cross, site]\n    joiner: "-"\nsplit:\n  - xss\n'
        )
        table = load_rule_file(rules_file)
        assert table.apply("cross site x ss") == "cross-site xss"

    def test_invalid_yaml_raises(self, tmp_path) -> None:
        """YAML syntax errors become RuleTableError."""
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text("merge: [\n")
        with pytest.raises(RuleTableError):
            load_rule_file(rules_file)

    def test_unquoted_boolean_word_raises(self, tmp_path) -> None:
        """Bare 'on' loads as a boolean and is rejected with a clear error."""
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text("merge:\n  - words: [on, the]\n")
        with pytest.raises(RuleTableError, match="quoted"):
            load_rule_file(rules_file)
