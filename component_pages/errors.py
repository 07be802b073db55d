"""Exception types raised while loading manifests and rendering pages."""

from __future__ import annotations


class ComponentPagesError(Exception):
    """Base class for manifest and rendering failures."""


class MalformedManifest(ComponentPagesError, ValueError):
    """Raised when the manifest cannot be shaped into component entries."""


class ManifestFetchError(ComponentPagesError, RuntimeError):
    """Raised when a remote manifest cannot be downloaded."""


class MalformedDescriptor(ComponentPagesError, ValueError):
    """Raised in strict mode when a descriptor lacks a field the page needs.

    Attributes
    ----------
    tag : str
        Tag of the component owning the descriptor.
    facet : str
        Facet key being rendered (``"props"``, ``"events"``, ...).
    index : int
        Zero-based position of the descriptor within its facet list.
    field : str
        Name of the missing field.
    """

    def __init__(self, *, tag: str, facet: str, index: int, field: str) -> None:
        self.tag = tag
        self.facet = facet
        self.index = index
        self.field = field
        msg = f"{tag}: {facet}[{index}] is missing '{field}'"
        super().__init__(msg)


__all__ = [
    "ComponentPagesError",
    "MalformedDescriptor",
    "MalformedManifest",
    "ManifestFetchError",
]
