"""Unit tests for shared configuration and CLI parsing helpers."""

import pytest

from aitextclean.models.datatypes import RuleCategory
from aitextclean.parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_required_boolean,
    parse_rule_category,
    parse_rule_list,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string("  value  ") == "value"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("YeS", True),
        ("FALSE", False),
        (" oFf ", False),
        ("nO", False),
        (True, True),
    ],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: object, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "   ", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


def test_parse_required_boolean_raises_for_invalid_token() -> None:
    """Strict boolean parsing should name the offending field."""

    with pytest.raises(
        ValueError,
        match=(
            r"`quotes` must be a boolean value "
            r"\(`true`/`false`, `1`/`0`, `yes`/`no`\)\."
        ),
    ):
        parse_required_boolean("maybe", "quotes")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("quotes", RuleCategory.QUOTES),
        (" Trailing-Whitespace ", RuleCategory.TRAILING_WHITESPACE),
        ("AI_ARTIFACTS", RuleCategory.AI_ARTIFACTS),
    ],
)
def test_parse_rule_category_accepts_dashed_and_cased_names(
    name: str, expected: RuleCategory
) -> None:
    """Category names should be matched case-insensitively with `-` or `_`."""

    assert parse_rule_category(name) is expected


def test_parse_rule_category_lists_supported_names_on_error() -> None:
    """Unknown names should report every supported category."""

    with pytest.raises(ValueError, match="supported: hidden_characters, encoding_issues"):
        parse_rule_category("markdown")


def test_parse_rule_list_handles_keywords_and_blanks() -> None:
    """Rule lists should accept `all`, `none`, commas and iterables."""

    assert parse_rule_list("all") == frozenset(RuleCategory)
    assert parse_rule_list(" NONE ") == frozenset()
    assert parse_rule_list("") == frozenset()
    assert parse_rule_list("quotes,, dashes") == frozenset(
        {RuleCategory.QUOTES, RuleCategory.DASHES}
    )
    assert parse_rule_list(["spacing", ""]) == frozenset({RuleCategory.SPACING})
