"""Load the component pages YAML configuration into a typed dataclass.

The configuration names the manifest source (path or URL), the output
directory, and rendering options. :func:`load_pages_config` applies defaults
for anything omitted and :meth:`PagesConfig.with_overrides` layers CLI flags
on top.

Examples
--------
>>> from pathlib import Path
>>> from component_pages.config import load_pages_config
>>> config = load_pages_config(Path("config/components.yaml"))  # doctest: +SKIP
>>> config.output_dir  # doctest: +SKIP
PosixPath('static/auto-generated')
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ._constants import DEFAULT_FILE_SUFFIX, DEFAULT_NAMESPACE_PREFIX, DEFAULT_OUTPUT_DIR


class ComponentPagesConfigError(ValueError):
    """Raised when the pages configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class PagesConfig:
    """Resolved settings for one generation run."""

    manifest: str
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    namespace_prefix: str = DEFAULT_NAMESPACE_PREFIX
    file_suffix: str = DEFAULT_FILE_SUFFIX
    strict: bool = False
    write_empty: bool = False

    def with_overrides(self, **overrides: typ.Any) -> PagesConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dc.replace(self, **changes)


def load_pages_config(path: Path, *, manifest: str | None = None) -> PagesConfig:
    """Load the YAML configuration describing a generation run.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file.
    manifest : str, optional
        Manifest source supplied on the command line. When given, a missing
        configuration file is tolerated and defaults are used.

    Returns
    -------
    PagesConfig
        Parsed configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If the file does not exist and no ``manifest`` override is supplied.
    TypeError
        If the top-level YAML structure is not a mapping.
    ComponentPagesConfigError
        If no manifest source is configured or a field has the wrong type.
    """
    raw: dict[str, typ.Any] = {}
    if path.exists():
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
        if not isinstance(loaded, dict):
            msg = "Top-level YAML structure must be a mapping."
            raise TypeError(msg)
        raw = dict(loaded)
    elif manifest is None:
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    source = manifest or raw.get("manifest")
    if not source:
        msg = f"No 'manifest' source configured in '{path}'."
        raise ComponentPagesConfigError(msg)

    return PagesConfig(
        manifest=str(source),
        output_dir=Path(_text(raw, "output_dir", DEFAULT_OUTPUT_DIR)),
        namespace_prefix=_text(raw, "namespace_prefix", DEFAULT_NAMESPACE_PREFIX),
        file_suffix=_text(raw, "file_suffix", DEFAULT_FILE_SUFFIX),
        strict=_as_bool(raw.get("strict"), "strict"),
        write_empty=_as_bool(raw.get("write_empty"), "write_empty"),
    )


def _text(raw: typ.Mapping[str, typ.Any], key: str, default: str) -> str:
    """Return the string at ``key``, using ``default`` when unset or null."""
    value = raw.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    msg = f"'{key}' must be a string, got {value!r}."
    raise ComponentPagesConfigError(msg)


def _as_bool(value: object, key: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    msg = f"'{key}' must be true or false, got {value!r}."
    raise ComponentPagesConfigError(msg)


__all__ = ["ComponentPagesConfigError", "PagesConfig", "load_pages_config"]
