"""Ordered repair rules for known mis-segmentations.

Rules are data: the default table ships as ``data/repair_rules.yaml`` and
users can append their own file with the same layout. Each rule is a
compiled ``(pattern, replacement)`` pair; merge rules always run before
split-repair rules, each group in file order.
"""

import functools
import re
from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from pathlib import Path

import yaml
from loguru import logger

DEFAULT_RULES_RESOURCE = "repair_rules.yaml"

_TERM_RE = re.compile(r"^[a-z]+$")
_JOINER_GAPS = {" ": r"\s*", "-": r"[\s-]*"}


class RuleTableError(ValueError):
    """Raised when a repair rule file is malformed."""


class RuleKind(Enum):
    """What a repair rule fixes."""

    MERGE = "merge"  # adjacent tokens that form one unit
    SPLIT = "split"  # one word broken into fragments


@dataclass(frozen=True)
class RepairRule:
    """A single case-insensitive regex repair."""

    name: str
    kind: RuleKind
    pattern: re.Pattern
    replacement: str

    def _replace(self, match: re.Match) -> str:
        matched = match.group()
        if matched.lower() == self.replacement.lower():
            return matched
        letters = [char for char in matched if char.isalpha()]
        if len(letters) > 1 and all(char.isupper() for char in letters):
            return self.replacement.upper()
        if matched[0].isupper():
            return self.replacement[0].upper() + self.replacement[1:]
        return self.replacement

    def apply(self, text: str) -> str:
        """Apply the rule everywhere in text, keeping the case of each match's start."""
        return self.pattern.sub(self._replace, text)


def merge_rule(words: list[str], joiner: str) -> RepairRule:
    """Build a rule joining adjacent whole words with ``joiner``."""
    gap = _JOINER_GAPS[joiner]
    body = gap.join(re.escape(word) for word in words)
    return RepairRule(
        name=joiner.join(words),
        kind=RuleKind.MERGE,
        pattern=re.compile(rf"\b{body}\b", re.IGNORECASE),
        replacement=joiner.join(words),
    )


def split_rule(term: str) -> RepairRule:
    """Build a rule rejoining a term whose letters were separated by whitespace."""
    body = r"\s*".join(re.escape(char) for char in term)
    return RepairRule(
        name=term,
        kind=RuleKind.SPLIT,
        pattern=re.compile(rf"\b{body}\b", re.IGNORECASE),
        replacement=term,
    )


@dataclass(frozen=True)
class RuleTable:
    """Immutable ordered rule table: merge rules first, then split-repair rules."""

    merge_rules: tuple[RepairRule, ...] = field(default_factory=tuple)
    split_rules: tuple[RepairRule, ...] = field(default_factory=tuple)

    @property
    def rules(self) -> tuple[RepairRule, ...]:
        return self.merge_rules + self.split_rules

    def __len__(self) -> int:
        return len(self.merge_rules) + len(self.split_rules)

    def extend(self, other: "RuleTable") -> "RuleTable":
        """Return a new table with other's rules appended to each group."""
        return RuleTable(
            merge_rules=self.merge_rules + other.merge_rules,
            split_rules=self.split_rules + other.split_rules,
        )

    def apply(self, text: str) -> str:
        """Run every rule in order over text."""
        for rule in self.rules:
            repaired = rule.apply(text)
            if repaired != text:
                logger.debug(f"Repair rule '{rule.name}' ({rule.kind.value}) applied")
            text = repaired
        return text


def _parse_merge_entry(entry: object, source: str) -> RepairRule:
    if not isinstance(entry, dict) or "words" not in entry:
        raise RuleTableError(f"{source}: merge entry must be a mapping with 'words': {entry!r}")
    words = entry["words"]
    joiner = entry.get("joiner", " ")
    if not isinstance(words, list) or len(words) < 2:
        raise RuleTableError(f"{source}: merge rule needs at least two words: {entry!r}")
    # unquoted YAML words such as on/off/yes/no load as booleans
    if not all(isinstance(word, str) and _TERM_RE.match(word.lower()) for word in words):
        raise RuleTableError(f"{source}: merge words must be quoted letters only: {words!r}")
    words = [word.lower() for word in words]
    if joiner not in _JOINER_GAPS:
        raise RuleTableError(f"{source}: joiner must be ' ' or '-', got {joiner!r}")
    return merge_rule(words, joiner)


def _parse_split_entry(entry: object, source: str) -> RepairRule:
    term = str(entry).lower() if isinstance(entry, str) else None
    if term is None or not _TERM_RE.match(term):
        raise RuleTableError(f"{source}: split term must be a single word of letters: {entry!r}")
    return split_rule(term)


def parse_rule_table(data: object, source: str = "<rules>") -> RuleTable:
    """Build a RuleTable from parsed YAML data.

    Args:
        data: Mapping with optional ``merge`` and ``split`` lists (None = empty table)
        source: Name used in error messages

    Returns:
        The compiled rule table

    Raises:
        RuleTableError: If the data does not have the expected shape
    """
    if data is None:
        return RuleTable()
    if not isinstance(data, dict):
        raise RuleTableError(f"{source}: top level must be a mapping")

    unknown = set(data) - {kind.value for kind in RuleKind}
    if unknown:
        raise RuleTableError(f"{source}: unknown sections {sorted(unknown)}")

    merge_entries = data.get("merge") or []
    split_entries = data.get("split") or []
    if not isinstance(merge_entries, list) or not isinstance(split_entries, list):
        raise RuleTableError(f"{source}: 'merge' and 'split' must be lists")

    return RuleTable(
        merge_rules=tuple(_parse_merge_entry(entry, source) for entry in merge_entries),
        split_rules=tuple(_parse_split_entry(entry, source) for entry in split_entries),
    )


def load_rule_file(filepath: str | Path) -> RuleTable:
    """Load a repair rule YAML file.

    Raises:
        RuleTableError: If the file is not valid YAML or has the wrong shape
    """
    path = Path(filepath).expanduser()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise RuleTableError(f"{path}: invalid YAML: {e}") from e
    table = parse_rule_table(data, str(path))
    logger.debug(f"Loaded {len(table)} repair rules from {path}")
    return table


@functools.lru_cache(maxsize=1)
def get_default_rules() -> RuleTable:
    """Return the rule table shipped with the package (loaded once)."""
    package_files = resources.files("glossfix.core.repair")
    resource = package_files.joinpath("data").joinpath(DEFAULT_RULES_RESOURCE)
    data = yaml.safe_load(resource.read_text(encoding="utf-8"))
    return parse_rule_table(data, DEFAULT_RULES_RESOURCE)
