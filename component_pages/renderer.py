"""Render component API facets into Markdown documents.

Each ``render_*`` function maps one :class:`ComponentEntry` to the Markdown
for a single facet (properties, events, methods, CSS shadow parts, CSS custom
properties, slots). The functions are pure: they never touch the filesystem
and always return the same text for the same entry. A facet with no
descriptors renders to the empty string so callers can skip the page.

Example
-------
>>> from component_pages.manifest import ComponentEntry, EventDescriptor
>>> entry = ComponentEntry(
...     tag="ion-toggle",
...     events=(EventDescriptor(event="ionChange", docs="Emitted on change."),),
... )
>>> print(render_events(entry).strip())
## Events
<BLANKLINE>
| Name | Description |
| --- | --- |
| `ionChange` | Emitted on change. |
>>> render_slots(entry)
''
"""

from __future__ import annotations

import logging
import typing as typ

from ._constants import FACET_KEYS, FULLWIDTH_VERTICAL_BAR, PARAGRAPH_BREAK
from .errors import MalformedDescriptor

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .manifest import ComponentEntry, NamedDescriptor

logger = logging.getLogger(__name__)

# Fields that legitimately go missing and never trip strict mode.
OPTIONAL_FIELDS = frozenset({"default"})


class FacetRenderer(typ.Protocol):
    """Callable rendering one facet of a component."""

    def __call__(self, entry: ComponentEntry, *, strict: bool = False) -> str: ...


def format_multiline(text: str) -> str:
    r"""Collapse ``text`` onto one line while keeping paragraph breaks.

    Blank-line separated paragraphs are joined with ``<br /><br />`` and any
    remaining single newline becomes a space, which keeps the text valid inside
    a Markdown table cell.

    >>> format_multiline("A\n\nB\nC")
    'A<br /><br />B C'
    """
    return PARAGRAPH_BREAK.join(text.split("\n\n")).replace("\n", " ")


def escape_union_bars(text: str) -> str:
    """Swap ``|`` for the full-width bar so unions survive inside table code spans.

    >>> escape_union_bars("'primary' | 'secondary'")
    "'primary' ｜ 'secondary'"
    """
    return text.replace("|", FULLWIDTH_VERTICAL_BAR)


class _FieldReader:
    """Read descriptor fields for one facet under the missing-field policy."""

    def __init__(self, tag: str, facet: str, *, strict: bool) -> None:
        self.tag = tag
        self.facet = facet
        self.strict = strict

    def __call__(self, descriptor: object, index: int, field: str) -> str:
        value = getattr(descriptor, field, None)
        if value is not None:
            return value
        if field in OPTIONAL_FIELDS:
            return ""
        if self.strict:
            raise MalformedDescriptor(
                tag=self.tag, facet=self.facet, index=index, field=field
            )
        logger.warning(
            "%s: %s[%d] is missing '%s'; rendering it empty",
            self.tag,
            self.facet,
            index,
            field,
        )
        return ""


def render_properties(entry: ComponentEntry, *, strict: bool = False) -> str:
    """Render one key/value table per property under a ``Properties`` heading."""
    if not entry.props:
        return ""
    read = _FieldReader(entry.tag, "props", strict=strict)
    blocks: list[str] = []
    for index, prop in enumerate(entry.props):
        docs = format_multiline(read(prop, index, "docs"))
        type_expr = escape_union_bars(read(prop, index, "type"))
        blocks.append(
            f"\n### {read(prop, index, 'name')}\n\n"
            "| | |\n"
            "| --- | --- |\n"
            f"| **Description** | {docs} |\n"
            f"| **Attribute** | `{read(prop, index, 'attr')}` |\n"
            f"| **Type** | `{type_expr}` |\n"
            f"| **Default** | `{read(prop, index, 'default')}` |\n\n"
        )
    return "\n## Properties\n\n" + "\n".join(blocks) + "\n"


def render_events(entry: ComponentEntry, *, strict: bool = False) -> str:
    """Render a name/description table of the component's events."""
    if not entry.events:
        return ""
    read = _FieldReader(entry.tag, "events", strict=strict)
    rows = [
        _name_row(read(event, index, "event"), read(event, index, "docs"))
        for index, event in enumerate(entry.events)
    ]
    return _name_table("Events", rows)


def render_methods(entry: ComponentEntry, *, strict: bool = False) -> str:
    """Render one description/signature table per method."""
    if not entry.methods:
        return ""
    read = _FieldReader(entry.tag, "methods", strict=strict)
    blocks: list[str] = []
    for index, method in enumerate(entry.methods):
        docs = format_multiline(read(method, index, "docs"))
        signature = escape_union_bars(read(method, index, "signature"))
        blocks.append(
            f"\n### {read(method, index, 'name')}\n\n"
            "| | |\n"
            "| --- | --- |\n"
            f"| **Description** | {docs} |\n"
            f"| **Signature** | `{signature}` |\n"
        )
    return "\n## Methods\n\n" + "\n".join(blocks) + "\n\n"


def render_parts(entry: ComponentEntry, *, strict: bool = False) -> str:
    """Render the component's CSS shadow parts."""
    return _render_named(entry.tag, "parts", "CSS Shadow Parts", entry.parts, strict)


def render_custom_props(entry: ComponentEntry, *, strict: bool = False) -> str:
    """Render the component's CSS custom properties."""
    return _render_named(
        entry.tag, "custom-props", "CSS Custom Properties", entry.styles, strict
    )


def render_slots(entry: ComponentEntry, *, strict: bool = False) -> str:
    """Render the component's slots."""
    return _render_named(entry.tag, "slots", "Slots", entry.slots, strict)


FACET_RENDERERS: dict[str, FacetRenderer] = {
    "props": render_properties,
    "events": render_events,
    "methods": render_methods,
    "parts": render_parts,
    "custom-props": render_custom_props,
    "slots": render_slots,
}


def render_component(entry: ComponentEntry, *, strict: bool = False) -> dict[str, str]:
    """Render every facet of ``entry``.

    Parameters
    ----------
    entry : ComponentEntry
        Component to document.
    strict : bool, optional
        Raise :class:`MalformedDescriptor` for missing fields instead of
        rendering them empty.

    Returns
    -------
    dict[str, str]
        Facet key to Markdown text, ordered as :data:`FACET_KEYS`. Facets
        without descriptors map to ``""``.
    """
    return {key: FACET_RENDERERS[key](entry, strict=strict) for key in FACET_KEYS}


def _render_named(
    tag: str,
    facet: str,
    heading: str,
    descriptors: cabc.Sequence[NamedDescriptor],
    strict: bool,  # noqa: FBT001
) -> str:
    if not descriptors:
        return ""
    read = _FieldReader(tag, facet, strict=strict)
    rows = [
        _name_row(read(item, index, "name"), read(item, index, "docs"))
        for index, item in enumerate(descriptors)
    ]
    return _name_table(heading, rows)


def _name_row(name: str, docs: str) -> str:
    return f"| `{name}` | {format_multiline(docs)} |"


def _name_table(heading: str, rows: list[str]) -> str:
    body = "\n".join(rows)
    return f"\n## {heading}\n\n| Name | Description |\n| --- | --- |\n{body}\n\n"


__all__ = [
    "FACET_RENDERERS",
    "OPTIONAL_FIELDS",
    "escape_union_bars",
    "format_multiline",
    "render_component",
    "render_custom_props",
    "render_events",
    "render_methods",
    "render_parts",
    "render_properties",
    "render_slots",
]
