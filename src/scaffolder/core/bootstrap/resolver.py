"""Plugin resolution: turn a bootstrap context into the plugins that drive scaffolding."""

from __future__ import annotations

import logging

from scaffolder.core.contracts.bootstrap import ResolutionContext
from scaffolder.core.contracts.exceptions import MissingLayoutKeyError, NoDefaultPluginError, PluginResolutionError
from scaffolder.core.contracts.plugin import Plugin, key_for
from scaffolder.core.contracts.project import supports_layout
from scaffolder.core.plugins.matcher import match_plugins
from scaffolder.core.plugins.registry import PluginRegistry

_LOG = logging.getLogger(__name__)


def _resolve_by_key(registry: PluginRegistry, version: str, raw_key: str) -> tuple[Plugin, ...]:
    # The version default is tried first so a short key such as "go" resolves
    # even when several plugins of that name are registered for the version.
    default = registry.default_for(version)
    narrow = [default] if default is not None else []
    try:
        return match_plugins(narrow, raw_key)
    except PluginResolutionError as exc:
        _LOG.debug("key %r did not resolve against the default plugin: %s", raw_key, exc)
    return match_plugins(registry.plugins_for(version), raw_key)


def resolve_plugins(ctx: ResolutionContext, registry: PluginRegistry) -> tuple[Plugin, ...]:
    """Select the plugins for ``ctx``.

    Precedence: ``--plugins`` key, then the project file layout key (for
    project versions that record one), then the version default.
    """
    version = ctx.requested_version

    if ctx.cli_plugin_key:
        _LOG.debug("resolving plugins from --plugins %r", ctx.cli_plugin_key)
        resolved = _resolve_by_key(registry, version, ctx.cli_plugin_key)
    elif ctx.configured and supports_layout(version):
        layout = ctx.layout_key
        if not layout:
            raise MissingLayoutKeyError(version)
        _LOG.debug("resolving plugins from layout %r", layout)
        resolved = _resolve_by_key(registry, version, layout)
    else:
        default = registry.default_for(version)
        if default is None:
            raise NoDefaultPluginError(version)
        _LOG.debug("using default plugin for project version %s", version)
        resolved = (default,)

    _LOG.debug("resolved plugins: %s", ", ".join(key_for(p) for p in resolved))
    return resolved
