"""Resolve a possibly partial plugin key against a candidate set."""

from __future__ import annotations

from collections.abc import Sequence

from scaffolder.core.contracts.exceptions import AmbiguousPluginKeyError, EmptyPluginKeyError, NoMatchingPluginError
from scaffolder.core.contracts.plugin import Plugin, PluginKey, key_for, short_name


def _name_matches(plugin: Plugin, name: str) -> bool:
    full = plugin.name()
    return full == name or short_name(full) == name


def match_plugins(candidates: Sequence[Plugin], raw_key: str) -> tuple[Plugin, ...]:
    """Return the single plugin in ``candidates`` identified by ``raw_key``.

    ``raw_key`` is ``name`` or ``name/version``; ``name`` may be the full plugin
    name or its short name. An unversioned key matches every version.
    """
    key = PluginKey.parse(raw_key)
    if not key.name:
        raise EmptyPluginKeyError(raw_key)

    matches = [
        p for p in candidates if _name_matches(p, key.name) and (key.version is None or str(p.version()) == key.version)
    ]
    if not matches:
        raise NoMatchingPluginError(raw_key)
    if len(matches) > 1:
        raise AmbiguousPluginKeyError(raw_key, [key_for(p) for p in matches])
    return (matches[0],)
