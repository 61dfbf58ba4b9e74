"""Public API surface for scaffolder."""

__version__ = "0.1.0"

from scaffolder.cli import ScaffolderCLI, main, new_cli
from scaffolder.core.bootstrap import prescan_args, resolve_plugins, run_bootstrap, validate_context
from scaffolder.core.config import probe_project_config
from scaffolder.core.contracts.bootstrap import BaseFlags, BootstrapResult, ResolutionContext
from scaffolder.core.contracts.command import ExtraCommand, Subcommand, SubcommandContext
from scaffolder.core.contracts.exceptions import (
    AmbiguousPluginKeyError,
    CLIValidationError,
    CommandConflictError,
    ConfigError,
    ConflictingPluginKeysError,
    DuplicateDefaultPluginError,
    EmptyPluginKeyError,
    InvalidPluginError,
    InvalidPluginNameError,
    InvalidPluginVersionError,
    InvalidProjectVersionError,
    MissingLayoutKeyError,
    NoDefaultPluginError,
    NoMatchingPluginError,
    NoPluginsForVersionError,
    PluginResolutionError,
    RegistryError,
    ScaffolderError,
    UnsupportedProjectVersionError,
    UnsupportedSubcommandError,
)
from scaffolder.core.contracts.plugin import (
    CreateAPIPlugin,
    CreateWebhookPlugin,
    Deprecated,
    InitPlugin,
    Plugin,
    PluginKey,
    PluginVersion,
    key_for,
)
from scaffolder.core.contracts.project import ProjectConfig
from scaffolder.core.plugins import PluginRegistry, match_plugins

__all__ = [
    "AmbiguousPluginKeyError",
    "BaseFlags",
    "BootstrapResult",
    "CLIValidationError",
    "CommandConflictError",
    "ConfigError",
    "ConflictingPluginKeysError",
    "CreateAPIPlugin",
    "CreateWebhookPlugin",
    "Deprecated",
    "DuplicateDefaultPluginError",
    "EmptyPluginKeyError",
    "ExtraCommand",
    "InitPlugin",
    "InvalidPluginError",
    "InvalidPluginNameError",
    "InvalidPluginVersionError",
    "InvalidProjectVersionError",
    "MissingLayoutKeyError",
    "NoDefaultPluginError",
    "NoMatchingPluginError",
    "NoPluginsForVersionError",
    "Plugin",
    "PluginKey",
    "PluginRegistry",
    "PluginResolutionError",
    "PluginVersion",
    "ProjectConfig",
    "RegistryError",
    "ResolutionContext",
    "ScaffolderCLI",
    "ScaffolderError",
    "Subcommand",
    "SubcommandContext",
    "UnsupportedProjectVersionError",
    "UnsupportedSubcommandError",
    "__version__",
    "key_for",
    "main",
    "match_plugins",
    "new_cli",
    "prescan_args",
    "probe_project_config",
    "resolve_plugins",
    "run_bootstrap",
    "validate_context",
]
