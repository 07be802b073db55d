"""Load component API manifests into typed records.

The primary entry point is :func:`load_manifest`, which reads the manifest
JSON from a path or URL, checks the shape needed for rendering, and returns a
:class:`Manifest` of :class:`ComponentEntry` records.

Examples
--------
>>> from component_pages.manifest import parse_manifest
>>> manifest = parse_manifest(b'{"components": [{"tag": "ion-badge"}]}')
>>> manifest.short_names()
['badge']
"""

from .loader import load_manifest, parse_manifest, read_manifest_source
from .models import (
    ComponentEntry,
    EventDescriptor,
    Manifest,
    MethodDescriptor,
    NamedDescriptor,
    PropertyDescriptor,
    short_name,
)

__all__ = [
    "ComponentEntry",
    "EventDescriptor",
    "Manifest",
    "MethodDescriptor",
    "NamedDescriptor",
    "PropertyDescriptor",
    "load_manifest",
    "parse_manifest",
    "read_manifest_source",
    "short_name",
]
