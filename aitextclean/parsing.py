"""Shared parsing helpers for configuration and CLI value normalization."""

from __future__ import annotations

from typing import Iterable

from .models.datatypes import RuleCategory


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})
_ALL_RULES_TOKEN = "all"
_NO_RULES_TOKEN = "none"


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_boolean(value: object, field_name: str) -> bool:
    """Parse a required boolean value from accepted textual tokens.

    Args:
        value: Value to parse.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the token is not one of the accepted boolean values.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed

    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def parse_rule_category(value: object) -> RuleCategory:
    """Resolve a rule category from its snake_case or dashed name.

    Raises:
        ValueError: If the name does not match any known category.
    """

    normalized = normalize_optional_string(value)
    token = normalized.lower().replace("-", "_") if normalized is not None else ""
    try:
        return RuleCategory(token)
    except ValueError:
        supported = ", ".join(category.value for category in RuleCategory)
        raise ValueError(
            f"Unknown rule category `{value}`; supported: {supported}."
        ) from None


def parse_rule_list(value: str | Iterable[object]) -> frozenset[RuleCategory]:
    """Parse a comma-separated or iterable rule list into categories.

    The tokens `all` and `none` select every category or no category.
    """

    if isinstance(value, str):
        normalized = normalize_optional_string(value)
        if normalized is None or normalized.lower() == _NO_RULES_TOKEN:
            return frozenset()
        if normalized.lower() == _ALL_RULES_TOKEN:
            return frozenset(RuleCategory)
        tokens: Iterable[object] = normalized.split(",")
    else:
        tokens = value

    return frozenset(
        parse_rule_category(token)
        for token in tokens
        if normalize_optional_string(token) is not None
    )
