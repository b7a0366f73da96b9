"""Configuration loading and validation."""

import argparse
import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from glossfix.utils.constants import Constants
from glossfix.utils.helpers import resolve_user_path


class Config(BaseModel):
    """Runtime configuration for text reconstruction and the CLI."""

    # Input / output
    input: str | None = None
    output: str | None = None
    report: bool = False

    # Dictionary and rules
    top_n: int = Field(default=0, ge=0)
    extra_rules: str | None = None

    # Segmentation tuning
    min_fallback_length: int | None = Field(default=Constants.MIN_FALLBACK_LENGTH, ge=2)
    max_word_length: int = Field(default=Constants.MAX_WORD_LENGTH, ge=1)
    greedy_max_word_length: int = Field(default=Constants.GREEDY_MAX_WORD_LENGTH, ge=1)
    min_letters: int = Field(default=Constants.MIN_LETTERS, ge=0)

    # Diagnostics
    verbose: bool = False
    debug: bool = False
    debug_words: frozenset[str] = Field(default_factory=frozenset)
    jobs: int = 1

    model_config = ConfigDict(frozen=True)

    @field_validator("debug_words", mode="before")
    @classmethod
    def parse_string_set(cls, value: Any) -> Any:
        """Accept comma separated strings and lists; normalize to lowercase."""
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = value.split(",")
        return frozenset(word.strip().lower() for word in value if word and word.strip())

    @field_validator("input", "output", "extra_rules")
    @classmethod
    def expand_paths(cls, value: str | None) -> str | None:
        return resolve_user_path(value)

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Check constraints spanning several fields."""
        if self.greedy_max_word_length > self.max_word_length:
            raise ValueError("greedy_max_word_length must not exceed max_word_length")
        if self.jobs < 1:
            raise ValueError("jobs must be at least 1")
        if self.debug_words and not self.debug:
            raise ValueError("debug_words requires debug to be enabled")
        return self


def _explicit_cli_values(
    args: argparse.Namespace, parser: argparse.ArgumentParser | None
) -> dict:
    """Return the CLI values that were actually given (differ from the parser defaults)."""
    values = {}
    for key, value in vars(args).items():
        if key in ("config", "texts"):
            continue
        if value is None or (parser is not None and value == parser.get_default(key)):
            continue
        values[key] = value
    return values


def load_config(
    config_path: str | None,
    args: argparse.Namespace | None = None,
    parser: argparse.ArgumentParser | None = None,
) -> Config:
    """Build a Config from an optional JSON file overridden by CLI arguments.

    Args:
        config_path: Path to a JSON configuration file (None = no file)
        args: Parsed CLI arguments; explicitly given values win over the file
        parser: Parser used to report errors; without one errors are raised

    Returns:
        Validated configuration

    Raises:
        ValueError: If the file or the merged values are invalid and no parser is given
    """
    values: dict[str, Any] = {}

    if config_path:
        path = resolve_user_path(config_path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                values.update(json.load(f))
        except (OSError, json.JSONDecodeError) as e:
            if parser is None:
                raise ValueError(f"Cannot read config file {path}: {e}") from e
            parser.error(f"Cannot read config file {path}: {e}")

    if args is not None:
        values.update(_explicit_cli_values(args, parser))

    try:
        return Config(**values)
    except ValidationError as e:
        if parser is None:
            raise
        parser.error(f"Invalid configuration: {e}")
