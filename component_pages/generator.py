"""Orchestrate rendering a manifest into per-component facet pages.

:func:`generate_component_pages` is the explicit entry point: it takes an
already-loaded :class:`~component_pages.manifest.Manifest` and a
:class:`~component_pages.writer.PageWriter`, renders every facet of every
component in memory, and only then hands the documents to the writer. Nothing
happens at import time.

Example
-------
>>> from component_pages.manifest import parse_manifest
>>> from component_pages.writer import MemoryPageWriter
>>> manifest = parse_manifest(
...     b'{"components": [{"tag": "ion-badge",'
...     b' "slots": [{"name": "", "docs": "Badge content."}]}]}'
... )
>>> writer = MemoryPageWriter()
>>> result = generate_component_pages(manifest, writer)
>>> sorted(writer.pages)
[('badge', 'slots')]
>>> result.skipped[:2]
[('badge', 'props'), ('badge', 'events')]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import DEFAULT_NAMESPACE_PREFIX, FACET_KEYS
from .errors import MalformedDescriptor, MalformedManifest
from .renderer import FACET_RENDERERS

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .manifest import Manifest
    from .writer import PageWriter

logger = logging.getLogger(__name__)

_RESERVED_NAMES = frozenset({"", ".", ".."})


@dc.dataclass(slots=True)
class GenerationResult:
    """Outcome of a generation run.

    Attributes
    ----------
    written : list[tuple[str, str, Path | None]]
        ``(short_name, facet, path)`` for each document handed to the writer;
        ``path`` is ``None`` for writers that do not touch the filesystem.
    skipped : list[tuple[str, str]]
        Facets that rendered empty and were not written.
    failures : list[MalformedDescriptor]
        Strict-mode errors, one per document that could not be rendered.
    """

    written: list[tuple[str, str, Path | None]] = dc.field(default_factory=list)
    skipped: list[tuple[str, str]] = dc.field(default_factory=list)
    failures: list[MalformedDescriptor] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return ``True`` when every document rendered."""
        return not self.failures


def render_manifest(
    manifest: Manifest,
    *,
    namespace_prefix: str = DEFAULT_NAMESPACE_PREFIX,
    strict: bool = False,
) -> tuple[list[tuple[str, str, str]], list[MalformedDescriptor]]:
    """Render every facet of every component without writing anything.

    Returns
    -------
    tuple[list[tuple[str, str, str]], list[MalformedDescriptor]]
        ``(short_name, facet, text)`` triples in manifest and facet order,
        followed by strict-mode failures. A failing document is left out of
        the triples while the other facets of that component are kept.
    """
    names = _checked_short_names(manifest, namespace_prefix)
    documents: list[tuple[str, str, str]] = []
    failures: list[MalformedDescriptor] = []
    for component, name in zip(manifest.components, names, strict=True):
        for facet in FACET_KEYS:
            try:
                text = FACET_RENDERERS[facet](component, strict=strict)
            except MalformedDescriptor as exc:
                logger.error("skipping %s/%s: %s", name, facet, exc)
                failures.append(exc)
                continue
            documents.append((name, facet, text))
    logger.debug(
        "rendered %d documents for %d components from %s",
        len(documents),
        len(manifest.components),
        manifest.source,
    )
    return documents, failures


def _checked_short_names(manifest: Manifest, prefix: str) -> list[str]:
    """Return short names, rejecting any that cannot name a page directory."""
    names = manifest.short_names(prefix)
    for tag, name in zip((c.tag for c in manifest.components), names, strict=True):
        if name in _RESERVED_NAMES:
            msg = f"{manifest.source}: tag {tag!r} leaves short name {name!r}"
            raise MalformedManifest(msg)
    return names


def generate_component_pages(
    manifest: Manifest,
    writer: PageWriter,
    *,
    namespace_prefix: str = DEFAULT_NAMESPACE_PREFIX,
    strict: bool = False,
    write_empty: bool = False,
) -> GenerationResult:
    """Render ``manifest`` and persist each document through ``writer``.

    Parameters
    ----------
    manifest : Manifest
        Parsed manifest; manifest-level errors are raised while loading, so
        no page is written for a malformed manifest.
        Short names that cannot name a directory raise
        :class:`MalformedManifest` before anything is written.
    writer : PageWriter
        Receives ``(short_name, facet, text)`` for each document.
    namespace_prefix : str, optional
        Prefix whose length is stripped from each tag to form the short name.
    strict : bool, optional
        Fail documents with missing descriptor fields instead of rendering the
        field empty. Failures are isolated to the affected document.
    write_empty : bool, optional
        Also write facets that rendered to the empty string. Otherwise the
        writer discards any page left for that facet by an earlier run.

    Returns
    -------
    GenerationResult
        Written, skipped, and failed documents.
    """
    documents, failures = render_manifest(
        manifest, namespace_prefix=namespace_prefix, strict=strict
    )
    result = GenerationResult(failures=failures)
    for name, facet, text in documents:
        if not text and not write_empty:
            result.skipped.append((name, facet))
            writer.discard(name, facet)
            continue
        path = writer.write(name, facet, text)
        result.written.append((name, facet, path))
    return result


__all__ = ["GenerationResult", "generate_component_pages", "render_manifest"]
