"""Configuration model and loaders for aitextclean.

Responsibilities:
- Define the per-category rule toggles as an explicit typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `CleaningConfiguration`: one boolean per `RuleCategory`.
- `CleanerSettings`: rule toggles plus output preferences for CLI runs.
- `ConfigLoader`: static construction helpers for `CleanerSettings`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field, fields, replace
import os
from pathlib import Path
from typing import Any, Iterable, Mapping

from .models.datatypes import RuleCategory
from .parsing import (
    normalize_optional_string,
    parse_required_boolean,
    parse_rule_category,
    parse_rule_list,
)


_DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class CleaningConfiguration:
    """Which normalization rules are enabled.

    Every category defaults to enabled. No category implies another, and the
    all-disabled configuration is a valid identity transform.
    """

    hidden_characters: bool = True
    encoding_issues: bool = True
    non_breaking_space: bool = True
    dashes: bool = True
    quotes: bool = True
    ellipsis: bool = True
    math_symbols: bool = True
    unicode_punctuation: bool = True
    spacing: bool = True
    ai_artifacts: bool = True
    trailing_whitespace: bool = True

    @classmethod
    def none(cls) -> CleaningConfiguration:
        """Return a configuration with every rule disabled."""

        return cls(**{category.value: False for category in RuleCategory})

    @classmethod
    def from_categories(cls, categories: Iterable[RuleCategory]) -> CleaningConfiguration:
        """Return a configuration enabling exactly `categories`."""

        enabled = frozenset(categories)
        return cls(**{category.value: category in enabled for category in RuleCategory})

    @classmethod
    def from_mapping(
        cls, payload: Mapping[RuleCategory | str, object]
    ) -> CleaningConfiguration:
        """Build a configuration from a `{category: flag}` mapping.

        Missing categories are disabled. Flag values accept permissive boolean
        tokens such as `yes`/`no`.

        Raises:
            ValueError: On unknown category keys or non-boolean values.
        """

        values = {category.value: False for category in RuleCategory}
        for key, raw_value in payload.items():
            category = key if isinstance(key, RuleCategory) else parse_rule_category(key)
            values[category.value] = parse_required_boolean(raw_value, category.value)
        return cls(**values)

    def is_enabled(self, category: RuleCategory) -> bool:
        """Return whether `category` is enabled."""

        return bool(getattr(self, category.value))

    def enabled_categories(self) -> tuple[RuleCategory, ...]:
        """Return enabled categories in declaration order."""

        return tuple(category for category in RuleCategory if self.is_enabled(category))

    def with_overrides(
        self,
        enable: Iterable[RuleCategory] = (),
        disable: Iterable[RuleCategory] = (),
    ) -> CleaningConfiguration:
        """Return a copy with `enable` switched on, then `disable` switched off."""

        changes = {category.value: True for category in enable}
        changes.update({category.value: False for category in disable})
        return replace(self, **changes)

    def as_dict(self) -> dict[str, bool]:
        """Return flags keyed by category value."""

        return {item.name: bool(getattr(self, item.name)) for item in fields(self)}


@dataclass(slots=True)
class CleanerSettings:
    """Runtime settings for one CLI invocation.

    Attributes:
        rules: Rule toggles applied to every cleaning call.
        output_dir: Optional directory for timestamped cleaned-text files.
        encoding: Text encoding used to read input and write output files.
    """

    rules: CleaningConfiguration = field(default_factory=CleaningConfiguration)
    output_dir: Path | None = None
    encoding: str = _DEFAULT_ENCODING

    def validate(self) -> None:
        """Validate settings values before any file is read."""

        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown `encoding` value `{self.encoding}`.") from exc


class ConfigLoader:
    """Factory methods for creating `CleanerSettings` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"rules", "output_dir", "encoding"})

    @staticmethod
    def from_yaml(path: Path) -> CleanerSettings:
        """Create validated settings from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_settings_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> CleanerSettings:
        """Create validated settings from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        rules_value = normalize_optional_string(env_map.get("AITEXTCLEAN_RULES"))
        rules = (
            CleaningConfiguration.from_categories(parse_rule_list(rules_value))
            if rules_value is not None
            else CleaningConfiguration()
        )
        output_dir_value = normalize_optional_string(env_map.get("AITEXTCLEAN_OUTPUT_DIR"))
        encoding = (
            normalize_optional_string(env_map.get("AITEXTCLEAN_ENCODING")) or _DEFAULT_ENCODING
        )

        settings = CleanerSettings(
            rules=rules,
            output_dir=Path(output_dir_value) if output_dir_value is not None else None,
            encoding=encoding,
        )
        settings.validate()
        return settings

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        import yaml

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_settings_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> CleanerSettings:
        """Build validated settings from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        rules = ConfigLoader._parse_rules(payload.get("rules"), source_label)
        output_dir_value = normalize_optional_string(payload.get("output_dir"))
        encoding = normalize_optional_string(payload.get("encoding")) or _DEFAULT_ENCODING

        settings = CleanerSettings(
            rules=rules,
            output_dir=Path(output_dir_value) if output_dir_value is not None else None,
            encoding=encoding,
        )
        settings.validate()
        return settings

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject unknown top-level keys."""

        unknown = sorted(str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS)
        if unknown:
            raise ValueError(
                f"{source_label} has unsupported key(s): {', '.join(unknown)}."
            )

    @staticmethod
    def _parse_rules(value: object, source_label: str) -> CleaningConfiguration:
        """Parse the `rules` entry as a mapping, a list, or `all`/`none`."""

        if value is None:
            return CleaningConfiguration()
        if isinstance(value, Mapping):
            return CleaningConfiguration.from_mapping(value)
        if isinstance(value, (str, list, tuple)):
            return CleaningConfiguration.from_categories(parse_rule_list(value))
        raise ValueError(
            f"{source_label} `rules` must be a mapping, a list of categories, `all`, or `none`."
        )
