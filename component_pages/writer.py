"""Persist rendered facet documents."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ._constants import DEFAULT_FILE_SUFFIX, PAGE_FILENAME_TEMPLATE


class PageWriter(typ.Protocol):
    """Destination for rendered documents keyed by ``(short_name, facet)``."""

    def write(self, short_name: str, facet: str, text: str) -> Path | None:
        """Store ``text`` and return its path when it lands on disk."""
        ...

    def discard(self, short_name: str, facet: str) -> None:
        """Drop any document previously stored for the key."""
        ...


class FilesystemPageWriter:
    """Write each document to ``<output_dir>/<short_name>/<facet><suffix>``."""

    def __init__(self, output_dir: Path, *, suffix: str = DEFAULT_FILE_SUFFIX) -> None:
        self.output_dir = output_dir
        self.suffix = suffix

    def path_for(self, short_name: str, facet: str) -> Path:
        """Return the target path for a component facet.

        Raises
        ------
        ValueError
            If the resolved path falls outside ``output_dir``.
        """
        filename = PAGE_FILENAME_TEMPLATE.format(facet=facet, suffix=self.suffix)
        path = self.output_dir / short_name / filename
        root = self.output_dir.resolve()
        if path.resolve().parent.parent != root:
            msg = f"Page for '{short_name}' would be written outside '{self.output_dir}'."
            raise ValueError(msg)
        return path

    def write(self, short_name: str, facet: str, text: str) -> Path:
        path = self.path_for(short_name, facet)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def discard(self, short_name: str, facet: str) -> None:
        self.path_for(short_name, facet).unlink(missing_ok=True)


class MemoryPageWriter:
    """Collect documents in a dict instead of writing them."""

    def __init__(self) -> None:
        self.pages: dict[tuple[str, str], str] = {}

    def write(self, short_name: str, facet: str, text: str) -> None:
        self.pages[(short_name, facet)] = text

    def discard(self, short_name: str, facet: str) -> None:
        self.pages.pop((short_name, facet), None)


__all__ = ["FilesystemPageWriter", "MemoryPageWriter", "PageWriter"]
