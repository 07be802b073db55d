"""Typed records describing a component API manifest."""

from __future__ import annotations

import dataclasses as dc

from .._constants import DEFAULT_NAMESPACE_PREFIX


@dc.dataclass(slots=True, frozen=True)
class PropertyDescriptor:
    """A public property of a component.

    Attributes
    ----------
    name : str | None
        Property name, unique within the component.
    docs : str | None
        Free-text description; may contain blank-line separated paragraphs.
    attr : str | None
        Serialized attribute name.
    type : str | None
        Type expression, possibly a union such as ``"primary | secondary"``.
    default : str | None
        Stringified default value.

    A field holds ``None`` when the manifest omitted it.
    """

    name: str | None = None
    docs: str | None = None
    attr: str | None = None
    type: str | None = None
    default: str | None = None


@dc.dataclass(slots=True, frozen=True)
class EventDescriptor:
    """An event emitted by a component."""

    event: str | None = None
    docs: str | None = None


@dc.dataclass(slots=True, frozen=True)
class MethodDescriptor:
    """A public method of a component."""

    name: str | None = None
    docs: str | None = None
    signature: str | None = None


@dc.dataclass(slots=True, frozen=True)
class NamedDescriptor:
    """A CSS shadow part, CSS custom property, or slot."""

    name: str | None = None
    docs: str | None = None


@dc.dataclass(slots=True, frozen=True)
class ComponentEntry:
    """API surface of a single component as listed in the manifest."""

    tag: str
    props: tuple[PropertyDescriptor, ...] = ()
    events: tuple[EventDescriptor, ...] = ()
    methods: tuple[MethodDescriptor, ...] = ()
    parts: tuple[NamedDescriptor, ...] = ()
    styles: tuple[NamedDescriptor, ...] = ()
    slots: tuple[NamedDescriptor, ...] = ()

    def short_name(self, prefix: str = DEFAULT_NAMESPACE_PREFIX) -> str:
        """Return the tag with ``len(prefix)`` leading characters removed."""
        return short_name(self.tag, prefix)


@dc.dataclass(slots=True, frozen=True)
class Manifest:
    """Ordered collection of component entries read from one source."""

    components: tuple[ComponentEntry, ...]
    source: str = "<memory>"

    def short_names(self, prefix: str = DEFAULT_NAMESPACE_PREFIX) -> list[str]:
        """Return component short names in manifest order."""
        return [component.short_name(prefix) for component in self.components]


def short_name(tag: str, prefix: str = DEFAULT_NAMESPACE_PREFIX) -> str:
    """Strip a fixed-length namespace prefix from ``tag``.

    The strip is positional: ``len(prefix)`` characters are dropped whether or
    not ``tag`` actually starts with ``prefix``.

    Examples
    --------
    >>> short_name("ion-button")
    'button'
    >>> short_name("ns-button", "ns-")
    'button'
    """
    return tag[len(prefix) :]


__all__ = [
    "ComponentEntry",
    "EventDescriptor",
    "Manifest",
    "MethodDescriptor",
    "NamedDescriptor",
    "PropertyDescriptor",
    "short_name",
]
