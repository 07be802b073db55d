"""Read a component manifest from disk or HTTP and shape it into records."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import msgspec
import msgspec.json as msgspec_json
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..errors import MalformedManifest, ManifestFetchError
from .models import (
    ComponentEntry,
    EventDescriptor,
    Manifest,
    MethodDescriptor,
    NamedDescriptor,
    PropertyDescriptor,
)

logger = logging.getLogger(__name__)

_T = typ.TypeVar("_T")

# Tags become directory names under the output folder.
_PATH_SEPARATORS = ("/", "\\")

_DESCRIPTOR_FIELDS: dict[str, tuple[type, tuple[str, ...]]] = {
    "props": (PropertyDescriptor, ("name", "docs", "attr", "type", "default")),
    "events": (EventDescriptor, ("event", "docs")),
    "methods": (MethodDescriptor, ("name", "docs", "signature")),
    "parts": (NamedDescriptor, ("name", "docs")),
    "styles": (NamedDescriptor, ("name", "docs")),
    "slots": (NamedDescriptor, ("name", "docs")),
}


def _is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _build_session() -> requests.Session:
    """Return a session that retries transient upstream failures."""
    session = requests.Session()
    retry = Retry(
        total=5,
        read=5,
        connect=3,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=("GET", "HEAD"),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def read_manifest_source(
    source: str | Path,
    *,
    session: requests.Session | None = None,
    timeout: float = 30,
) -> bytes:
    """Return the raw manifest bytes from a local path or an HTTP(S) URL.

    Parameters
    ----------
    source : str | Path
        Filesystem path or ``http(s)://`` URL of the manifest JSON.
    session : requests.Session, optional
        Session used for remote sources. When omitted a retrying session is
        created and closed after the request.
    timeout : float, optional
        Request timeout in seconds for remote sources.

    Returns
    -------
    bytes
        Undecoded manifest payload.

    Raises
    ------
    FileNotFoundError
        If a local ``source`` does not exist.
    ManifestFetchError
        If the remote request fails or returns an error status.
    """
    text = str(source)
    if not _is_remote(text):
        path = Path(source)
        if not path.exists():
            msg = f"Manifest file '{path}' not found."
            raise FileNotFoundError(msg)
        logger.debug("reading manifest from %s", path)
        return path.read_bytes()

    owned = session is None
    client = session or _build_session()
    try:
        logger.debug("fetching manifest from %s", text)
        resp = client.get(text, timeout=timeout)
        resp.raise_for_status()
        return resp.content
    except requests.RequestException as exc:
        msg = f"Unable to fetch manifest from {text}: {exc}"
        raise ManifestFetchError(msg) from exc
    finally:
        if owned:
            client.close()


def parse_manifest(raw: bytes | str, *, source: str = "<memory>") -> Manifest:
    """Decode manifest JSON and shape-check it into a :class:`Manifest`.

    Only the top-level ``components`` field is read. A component lacking a
    facet key gets an empty list for that facet; descriptor fields that are
    absent are kept as ``None`` so the renderer can apply its missing-field
    policy.

    Raises
    ------
    MalformedManifest
        If the payload is not valid JSON, ``components`` is missing or not a
        list, or any component/descriptor has the wrong shape.
    """
    try:
        document = msgspec_json.decode(raw)
    except msgspec.DecodeError as exc:
        msg = f"{source}: manifest is not valid JSON ({exc})"
        raise MalformedManifest(msg) from exc
    if not isinstance(document, dict):
        msg = f"{source}: top-level manifest must be an object"
        raise MalformedManifest(msg)
    components_raw = document.get("components")
    if not isinstance(components_raw, list):
        msg = f"{source}: 'components' must be a list"
        raise MalformedManifest(msg)

    components = tuple(
        _build_component(payload, index=index, source=source)
        for index, payload in enumerate(components_raw)
    )
    logger.debug("parsed %d components from %s", len(components), source)
    return Manifest(components=components, source=source)


def load_manifest(
    source: str | Path,
    *,
    session: requests.Session | None = None,
    timeout: float = 30,
) -> Manifest:
    """Read and parse the manifest at ``source``."""
    raw = read_manifest_source(source, session=session, timeout=timeout)
    return parse_manifest(raw, source=str(source))


def _build_component(payload: object, *, index: int, source: str) -> ComponentEntry:
    if not isinstance(payload, dict):
        msg = f"{source}: components[{index}] must be an object"
        raise MalformedManifest(msg)
    tag = payload.get("tag")
    if not isinstance(tag, str) or not tag:
        msg = f"{source}: components[{index}] has no 'tag'"
        raise MalformedManifest(msg)
    if any(sep in tag for sep in _PATH_SEPARATORS):
        msg = f"{source}: components[{index}] tag {tag!r} contains a path separator"
        raise MalformedManifest(msg)

    facets: dict[str, tuple[typ.Any, ...]] = {}
    for key, (factory, fields) in _DESCRIPTOR_FIELDS.items():
        facets[key] = _build_descriptors(
            payload.get(key),
            factory=factory,
            fields=fields,
            where=f"{source}: {tag}.{key}",
        )
    return ComponentEntry(tag=tag, **facets)


def _build_descriptors(
    value: object,
    *,
    factory: typ.Callable[..., _T],
    fields: tuple[str, ...],
    where: str,
) -> tuple[_T, ...]:
    match value:
        case None:
            return ()
        case list():
            pass
        case _:
            msg = f"{where} must be a list"
            raise MalformedManifest(msg)

    descriptors: list[_T] = []
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            msg = f"{where}[{index}] must be an object"
            raise MalformedManifest(msg)
        descriptors.append(
            factory(**{name: _optional_text(item.get(name)) for name in fields})
        )
    return tuple(descriptors)


def _optional_text(value: object | None) -> str | None:
    """Return ``value`` as text, keeping ``None`` for absent fields."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = ["load_manifest", "parse_manifest", "read_manifest_source"]
