"""Per-project-version plugin registry.

Plugins are registered once by the host program, then the registry is frozen
and only read during resolution.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from scaffolder.core.contracts.exceptions import (
    ConflictingPluginKeysError,
    DuplicateDefaultPluginError,
    InvalidPluginError,
    RegistryError,
)
from scaffolder.core.contracts.plugin import Plugin, key_for, validate_plugin_name
from scaffolder.core.contracts.project import validate_project_version

_LOG = logging.getLogger(__name__)


def validate_plugin(plugin: Plugin) -> None:
    key = key_for(plugin)
    try:
        validate_plugin_name(plugin.name())
    except ValueError as exc:
        raise InvalidPluginError(key, str(exc)) from exc

    versions = list(plugin.supported_project_versions())
    if not versions:
        raise InvalidPluginError(key, "plugin must support at least one project version")
    for version in versions:
        try:
            validate_project_version(version)
        except ValueError as exc:
            raise InvalidPluginError(key, f"supported project version {version!r}: {exc}") from exc


class PluginRegistry:
    def __init__(self) -> None:
        self._by_version: dict[str, list[Plugin]] = {}
        self._default_by_version: dict[str, Plugin] = {}
        self._frozen = False

    def register_plugins(self, plugins: Iterable[Plugin], *, is_default: bool = False) -> None:
        """Add ``plugins`` under every project version they support.

        Raises:
            DuplicateDefaultPluginError: A default already exists for a version.
            ConflictingPluginKeysError: Two distinct plugins share a key within a version.
            InvalidPluginError: A plugin has a malformed identity.
        """
        if self._frozen:
            raise RegistryError("plugin registry is frozen, plugins must be registered before resolution")

        # Changes are staged and committed only once the whole batch is consistent.
        by_version = {version: list(registered) for version, registered in self._by_version.items()}
        default_by_version = dict(self._default_by_version)

        for plugin in plugins:
            validate_plugin(plugin)
            for version in plugin.supported_project_versions():
                registered = by_version.setdefault(version, [])
                if not any(existing is plugin for existing in registered):
                    registered.append(plugin)
                if is_default:
                    _set_default(default_by_version, version, plugin)

        for version, registered in by_version.items():
            _check_conflicts(version, registered)

        self._by_version = by_version
        self._default_by_version = default_by_version

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def plugins_for(self, version: str) -> tuple[Plugin, ...]:
        return tuple(self._by_version.get(version, ()))

    def default_for(self, version: str) -> Plugin | None:
        return self._default_by_version.get(version)

    def versions(self) -> tuple[str, ...]:
        return tuple(self._by_version)


def _set_default(defaults: dict[str, Plugin], version: str, plugin: Plugin) -> None:
    existing = defaults.get(version)
    if existing is not None:
        raise DuplicateDefaultPluginError(version, key_for(existing), key_for(plugin))
    _LOG.debug("default plugin for project version %s: %s", version, key_for(plugin))
    defaults[version] = plugin


def _check_conflicts(version: str, plugins: list[Plugin]) -> None:
    counts = Counter(key_for(p) for p in plugins)
    duplicated = sorted(key for key, count in counts.items() if count > 1)
    if duplicated:
        raise ConflictingPluginKeysError(version, duplicated)
