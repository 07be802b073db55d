"""Shared fixtures for component page tests."""

from __future__ import annotations

import json
import typing as typ

import pytest

from component_pages.manifest import (
    ComponentEntry,
    EventDescriptor,
    MethodDescriptor,
    NamedDescriptor,
    PropertyDescriptor,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def button_entry() -> ComponentEntry:
    """Return the single-property button component used across tests."""
    return ComponentEntry(
        tag="ns-button",
        props=(
            PropertyDescriptor(
                name="variant",
                docs="The visual style.",
                attr="variant",
                type="primary|secondary",
                default="primary",
            ),
        ),
    )


@pytest.fixture
def full_entry() -> ComponentEntry:
    """Return a component with every facet populated."""
    return ComponentEntry(
        tag="ion-select",
        props=(
            PropertyDescriptor(
                name="interface",
                docs="The interface the select should use.\n\nDefaults to alert.",
                attr="interface",
                type='"action-sheet" | "alert" | "popover"',
                default="'alert'",
            ),
            PropertyDescriptor(
                name="disabled",
                docs="If `true`, the user cannot interact\nwith the select.",
                attr="disabled",
                type="boolean",
                default="false",
            ),
        ),
        events=(
            EventDescriptor(event="ionChange", docs="Emitted when the value changes."),
            EventDescriptor(event="ionCancel", docs="Emitted when the selection is cancelled."),
        ),
        methods=(
            MethodDescriptor(
                name="open",
                docs="Open the select overlay.",
                signature="open(event?: UIEvent) => Promise<any | undefined>",
            ),
            MethodDescriptor(
                name="close",
                docs="Close the select overlay.",
                signature="close() => Promise<boolean>",
            ),
        ),
        parts=(
            NamedDescriptor(name="icon", docs="The select icon container."),
            NamedDescriptor(name="text", docs="The displayed value | placeholder."),
        ),
        styles=(
            NamedDescriptor(name="--placeholder-color", docs="Color of the placeholder text"),
            NamedDescriptor(name="--placeholder-opacity", docs="Opacity of the placeholder text"),
        ),
        slots=(
            NamedDescriptor(name="label", docs="The label text."),
            NamedDescriptor(name="start", docs="Content before the value."),
        ),
    )


@pytest.fixture
def manifest_payload() -> dict[str, typ.Any]:
    """Return a manifest document with two components."""
    return {
        "timestamp": "2024-01-01T00:00:00",
        "components": [
            {
                "tag": "ion-badge",
                "props": [],
                "events": [],
                "methods": [],
                "parts": [],
                "styles": [{"name": "--background", "docs": "Background of the badge"}],
                "slots": [{"name": "", "docs": "Content is placed between the named slots."}],
            },
            {
                "tag": "ion-toggle",
                "props": [
                    {
                        "name": "checked",
                        "docs": "If `true`, the toggle is selected.",
                        "attr": "checked",
                        "type": "boolean",
                        "default": "false",
                    }
                ],
                "events": [{"event": "ionChange", "docs": "Emitted when the user switches the toggle on or off."}],
                "methods": [],
                "parts": [{"name": "track", "docs": "The background track."}],
                "styles": [],
                "slots": [],
            },
        ],
    }


@pytest.fixture
def manifest_file(tmp_path: Path, manifest_payload: dict[str, typ.Any]) -> Path:
    """Write the manifest payload to a temporary JSON file."""
    path = tmp_path / "translated-api.json"
    path.write_text(json.dumps(manifest_payload), encoding="utf-8")
    return path
