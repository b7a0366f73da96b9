"""Post-segmentation repair: rule table and normalization."""

from glossfix.core.repair.normalization import (
    capitalize_sentences,
    collapse_whitespace,
    normalize,
    normalize_spacing,
)
from glossfix.core.repair.rules import (
    RepairRule,
    RuleKind,
    RuleTable,
    RuleTableError,
    get_default_rules,
    load_rule_file,
    merge_rule,
    parse_rule_table,
    split_rule,
)

__all__ = [
    "RepairRule",
    "RuleKind",
    "RuleTable",
    "RuleTableError",
    "capitalize_sentences",
    "collapse_whitespace",
    "get_default_rules",
    "load_rule_file",
    "merge_rule",
    "normalize",
    "normalize_spacing",
    "parse_rule_table",
    "split_rule",
]
