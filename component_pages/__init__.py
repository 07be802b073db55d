"""Utilities for generating component API reference pages.

This package renders a component manifest (properties, events, methods, CSS
shadow parts, CSS custom properties, slots) into one Markdown page per
component per facet, ready for a documentation site to include.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``generate_component_pages``: Library entry point taking a manifest and a
  page writer.

Examples
--------
>>> from component_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .generator import GenerationResult, generate_component_pages

__all__ = ["GenerationResult", "app", "generate_component_pages", "main"]
