"""Exception hierarchy for scaffolder."""

from __future__ import annotations

from collections.abc import Sequence


class ScaffolderError(Exception):
    """Base exception for all scaffolder errors."""


class ConfigError(ScaffolderError):
    """Project file loading or parsing failure."""


class UnsupportedProjectVersionError(ConfigError):
    """Project declares a schema generation that is no longer supported.

    This error is terminal: bootstrap stops before any plugin is resolved.
    """

    def __init__(self, version: str, *, migration_url: str) -> None:
        super().__init__(
            f"project version {version} is no longer supported.\nSee how to upgrade your project: {migration_url}"
        )
        self.version = version
        self.migration_url = migration_url


class CLIValidationError(ScaffolderError):
    """Bootstrap inputs are incoherent."""


class InvalidProjectVersionError(CLIValidationError):
    def __init__(self, version: str, reason: str) -> None:
        super().__init__(f"invalid project version {version!r}: {reason}")
        self.version = version
        self.reason = reason


class NoPluginsForVersionError(CLIValidationError):
    def __init__(self, version: str) -> None:
        super().__init__(f"no plugins for project version {version!r}")
        self.version = version


class NoDefaultPluginError(CLIValidationError):
    def __init__(self, version: str) -> None:
        super().__init__(f"no default plugins for project version {version!r}")
        self.version = version


class InvalidPluginNameError(CLIValidationError):
    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"invalid plugin name {name!r}: {reason}")
        self.name = name
        self.reason = reason


class InvalidPluginVersionError(CLIValidationError):
    def __init__(self, version: str, reason: str) -> None:
        super().__init__(f"invalid plugin version {version!r}: {reason}")
        self.version = version
        self.reason = reason


class PluginResolutionError(ScaffolderError):
    """A plugin key could not be resolved to exactly one plugin."""


class EmptyPluginKeyError(PluginResolutionError):
    def __init__(self, raw_key: str) -> None:
        super().__init__(f"plugin key {raw_key!r} has an empty name")
        self.raw_key = raw_key


class NoMatchingPluginError(PluginResolutionError):
    def __init__(self, raw_key: str) -> None:
        super().__init__(f"no plugin could be resolved with key {raw_key!r}")
        self.raw_key = raw_key


class AmbiguousPluginKeyError(PluginResolutionError):
    """More than one plugin matches a key; a more specific key is needed."""

    def __init__(self, raw_key: str, matches: Sequence[str]) -> None:
        listed = ", ".join(repr(key) for key in matches)
        super().__init__(
            f"plugin key {raw_key!r} is ambiguous, possible matches: {listed}. "
            "Specify the plugin version to disambiguate"
        )
        self.raw_key = raw_key
        self.matches = tuple(matches)


class MissingLayoutKeyError(PluginResolutionError):
    def __init__(self, version: str) -> None:
        super().__init__(f"config must have a layout value (project version {version!r})")
        self.version = version


class RegistryError(ScaffolderError):
    """Host-supplied plugin sets are broken."""


class DuplicateDefaultPluginError(RegistryError):
    def __init__(self, version: str, existing_key: str, new_key: str) -> None:
        super().__init__(
            f"broken pre-set default plugins: project version {version!r} already has plugin "
            f"{existing_key!r}, cannot also set {new_key!r}"
        )
        self.version = version
        self.existing_key = existing_key
        self.new_key = new_key


class ConflictingPluginKeysError(RegistryError):
    def __init__(self, version: str, keys: Sequence[str]) -> None:
        listed = ", ".join(repr(key) for key in keys)
        super().__init__(f"broken pre-set plugins: project version {version!r} has conflicting plugin keys: {listed}")
        self.version = version
        self.keys = tuple(keys)


class InvalidPluginError(RegistryError):
    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"broken pre-set plugin {key!r}: {reason}")
        self.key = key
        self.reason = reason


class CommandConflictError(ScaffolderError):
    """Two sources contribute the same command."""

    def __init__(self, name: str, reason: str = "already exists") -> None:
        super().__init__(f"command {name!r} {reason}")
        self.name = name


class UnsupportedSubcommandError(ScaffolderError):
    """None of the resolved plugins implements a subcommand."""

    def __init__(self, command: str, plugin_keys: Sequence[str]) -> None:
        if plugin_keys:
            resolved = ", ".join(repr(key) for key in plugin_keys)
            message = f"resolved plugins {resolved} do not support {command!r}"
        else:
            message = f"no plugins were resolved, cannot run {command!r}"
        super().__init__(message)
        self.command = command
        self.plugin_keys = tuple(plugin_keys)
