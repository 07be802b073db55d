"""Unit tests for the cross-component link pattern builder."""

from __future__ import annotations

import pytest

from component_pages.links import build_component_link_pattern, component_link_pattern
from component_pages.manifest import parse_manifest


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("(../button)", ("button", None)),
        ("(../button/)", ("button", None)),
        ("(../card#usage)", ("card", "#usage")),
        ("(../card/#usage)", ("card", "#usage")),
    ],
)
def test_pattern_matches_known_components(
    text: str, expected: tuple[str, str | None]
) -> None:
    """Relative links to known short names are recognised."""
    match = build_component_link_pattern(["button", "card"]).search(text)
    assert match is not None, f"expected {text!r} to match"
    assert match.groups() == expected


@pytest.mark.parametrize(
    "text", ["(../select)", "(../buttons)", "(./button)", "(../button-group)"]
)
def test_pattern_rejects_unknown_targets(text: str) -> None:
    """Links to other names or paths are ignored."""
    pattern = build_component_link_pattern(["button", "card"])
    assert pattern.search(text) is None, f"expected {text!r} not to match"


def test_pattern_finds_every_link_in_markdown() -> None:
    """All component links inside a paragraph are found in order."""
    pattern = build_component_link_pattern(["item", "item-option", "list"])
    text = "Use [item](../item) with [options](../item-option#usage) in a [list](../list/)."
    assert [m.group(1) for m in pattern.finditer(text)] == [
        "item",
        "item-option",
        "list",
    ]


def test_pattern_escapes_names() -> None:
    """Regex metacharacters in names are matched literally."""
    pattern = build_component_link_pattern(["a.b"])
    assert pattern.search("(../a.b)") is not None
    assert pattern.search("(../axb)") is None


def test_empty_name_list_never_matches() -> None:
    """Without names nothing matches, not even a bare parent link."""
    pattern = build_component_link_pattern([])
    assert pattern.search("(../)") is None
    assert pattern.search("(../button)") is None


def test_builder_returns_independent_patterns() -> None:
    """Each call builds its own pattern from the names it is given."""
    first = build_component_link_pattern(["button"])
    second = build_component_link_pattern(["card"])
    assert first.search("(../card)") is None
    assert second.search("(../card)") is not None


def test_manifest_pattern_strips_namespace_prefix() -> None:
    """Short names are derived from manifest tags."""
    manifest = parse_manifest(
        b'{"components": [{"tag": "ion-button"}, {"tag": "ion-card"}]}'
    )
    pattern = component_link_pattern(manifest, "ion-")
    assert pattern.search("(../card#usage)") is not None
    assert pattern.search("(../ion-card)") is None
