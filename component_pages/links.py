r"""Build matchers for relative Markdown links between component pages.

Component docs cross-reference each other with relative links such as
``(../button)`` or ``(../card#usage)``. :func:`build_component_link_pattern`
returns a compiled pattern recognising exactly those links whose target is a
known component short name, so a later rewriting pass can retarget them.

Example
-------
>>> pattern = build_component_link_pattern(["button", "card"])
>>> pattern.search("see [cards](../card#usage)").groups()
('card', '#usage')
>>> pattern.search("(../select)") is None
True
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .manifest import Manifest

_NEVER_MATCHES = re.compile(r"(?!)")


def build_component_link_pattern(names: cabc.Iterable[str]) -> re.Pattern[str]:
    """Return a pattern matching ``(../<name>/?#fragment?)`` for known names.

    Parameters
    ----------
    names : Iterable[str]
        Component short names (tag with the namespace prefix removed).

    Returns
    -------
    re.Pattern[str]
        Group 1 captures the short name, group 2 the optional ``#fragment``.
        With no names the pattern never matches.
    """
    alternatives = [re.escape(name) for name in dict.fromkeys(names) if name]
    if not alternatives:
        return _NEVER_MATCHES
    joined = "|".join(alternatives)
    return re.compile(rf"\(\.\./({joined})/?(#[^)]+)?\)")


def component_link_pattern(manifest: Manifest, prefix: str) -> re.Pattern[str]:
    """Build the link pattern for every component listed in ``manifest``."""
    return build_component_link_pattern(manifest.short_names(prefix))


__all__ = ["build_component_link_pattern", "component_link_pattern"]
