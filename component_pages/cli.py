"""Cyclopts CLI entrypoint for generating component API pages.

The ``pages`` console script reads a component manifest (local JSON or a URL),
renders one Markdown page per component per facet, and writes them under the
configured output directory. ``pages links`` prints the pattern matching
relative links between component pages.

Examples
--------
Generate pages using ``config/components.yaml``:

>>> from component_pages.cli import main
>>> main()  # doctest: +SKIP

Render a manifest without a config file:

>>> from component_pages.cli import app
>>> app(
...     ["generate", "--manifest", "data/api.json", "--output-dir", "out"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import PagesConfig, load_pages_config
from .generator import generate_component_pages
from .links import component_link_pattern
from .manifest import load_manifest
from .writer import FilesystemPageWriter

DEFAULT_CONFIG = Path("config/components.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

logger = logging.getLogger(__name__)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(), format="%(levelname)s %(name)s: %(message)s"
    )


def _resolve_config(
    config: Path, manifest: str | None, **overrides: typ.Any
) -> PagesConfig:
    return load_pages_config(config, manifest=manifest).with_overrides(**overrides)


@app.command(help="Render Markdown pages for every component in the manifest.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to pages config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    manifest: typ.Annotated[
        str | None,
        Parameter(help="Manifest path or URL", env_var="INPUT_MANIFEST"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    namespace_prefix: typ.Annotated[
        str | None, Parameter(help="Tag prefix stripped to form page folder names")
    ] = None,
    strict: typ.Annotated[
        bool | None,
        Parameter(help="Fail documents whose descriptors are missing fields"),
    ] = None,
    write_empty: typ.Annotated[
        bool | None,
        Parameter(
            help="Also write facets that render empty; otherwise stale pages "
            "for those facets are removed"
        ),
    ] = None,
    log_level: typ.Annotated[
        str, Parameter(help="Logging level", env_var="INPUT_LOG_LEVEL")
    ] = "WARNING",
) -> None:
    """Generate facet pages for every component listed in the manifest.

    Parameters
    ----------
    config : Path, optional
        Path to the ``components.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``). May be absent when ``manifest`` is supplied.
    manifest : str or None, optional
        Manifest path or URL overriding the configured source.
    output_dir : Path or None, optional
        Override the directory pages are written into.
    namespace_prefix : str or None, optional
        Override the tag prefix stripped from component tags.
    strict : bool or None, optional
        Override the missing-field policy.
    write_empty : bool or None, optional
        Override whether empty facets are written. When false, a page left
        by an earlier run for a now-empty facet is deleted.
    log_level : str, optional
        Logging level name; defaults to ``WARNING``.

    Raises
    ------
    MalformedManifest
        If the manifest cannot be shaped into components; nothing is written.
    SystemExit
        With status 1 when strict mode left documents unrendered.
    """
    _configure_logging(log_level)
    settings = _resolve_config(
        config,
        manifest,
        output_dir=output_dir,
        namespace_prefix=namespace_prefix,
        strict=strict,
        write_empty=write_empty,
    )
    loaded = load_manifest(settings.manifest)
    writer = FilesystemPageWriter(settings.output_dir, suffix=settings.file_suffix)
    result = generate_component_pages(
        loaded,
        writer,
        namespace_prefix=settings.namespace_prefix,
        strict=settings.strict,
        write_empty=settings.write_empty,
    )
    for _name, _facet, path in result.written:
        if path is not None:
            print(f"wrote {_format_path(path)}")
    if not result.ok:
        logger.error("%d documents failed to render", len(result.failures))
        raise SystemExit(1)


@app.command(help="Print the pattern matching relative links between components.")
def links(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to pages config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    manifest: typ.Annotated[
        str | None,
        Parameter(help="Manifest path or URL", env_var="INPUT_MANIFEST"),
    ] = None,
    namespace_prefix: typ.Annotated[
        str | None, Parameter(help="Tag prefix stripped to form short names")
    ] = None,
) -> None:
    """Print the component link pattern for the configured manifest."""
    settings = _resolve_config(config, manifest, namespace_prefix=namespace_prefix)
    loaded = load_manifest(settings.manifest)
    print(component_link_pattern(loaded, settings.namespace_prefix).pattern)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pages`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
