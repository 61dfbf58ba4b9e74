"""Validation gate run before plugin resolution."""

from __future__ import annotations

from scaffolder.core.contracts.bootstrap import ResolutionContext
from scaffolder.core.contracts.exceptions import (
    InvalidPluginNameError,
    InvalidPluginVersionError,
    InvalidProjectVersionError,
    NoDefaultPluginError,
    NoPluginsForVersionError,
)
from scaffolder.core.contracts.plugin import PluginKey, parse_plugin_version, validate_plugin_name
from scaffolder.core.contracts.project import supports_layout, validate_project_version
from scaffolder.core.plugins.registry import PluginRegistry


def requires_default_plugin(ctx: ResolutionContext) -> bool:
    """No ``--plugins`` and no layout key can govern, so the version default is used."""
    if ctx.cli_plugin_key:
        return False
    return not ctx.configured or not supports_layout(ctx.requested_version)


def validate_context(ctx: ResolutionContext, registry: PluginRegistry) -> None:
    """Reject incoherent bootstrap states; the first failing check wins."""
    version = ctx.requested_version
    try:
        validate_project_version(version)
    except ValueError as exc:
        raise InvalidProjectVersionError(version, str(exc)) from exc

    if not registry.plugins_for(version):
        raise NoPluginsForVersionError(version)

    if requires_default_plugin(ctx) and registry.default_for(version) is None:
        raise NoDefaultPluginError(version)

    if ctx.cli_plugin_key:
        key = PluginKey.parse(ctx.cli_plugin_key)
        try:
            validate_plugin_name(key.name)
        except ValueError as exc:
            raise InvalidPluginNameError(key.name, str(exc)) from exc
        # CLI keys do not have to carry a version.
        if key.version:
            try:
                parse_plugin_version(key.version)
            except ValueError as exc:
                raise InvalidPluginVersionError(key.version, str(exc)) from exc
