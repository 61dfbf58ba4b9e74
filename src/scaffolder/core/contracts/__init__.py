"""Core contracts-domain exports."""

from scaffolder.core.contracts.bootstrap import BaseFlags, BootstrapResult, ResolutionContext
from scaffolder.core.contracts.command import ExtraCommand, Subcommand, SubcommandContext
from scaffolder.core.contracts.exceptions import ConfigError, PluginResolutionError, ScaffolderError
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

__all__ = [
    "BaseFlags",
    "BootstrapResult",
    "ConfigError",
    "CreateAPIPlugin",
    "CreateWebhookPlugin",
    "Deprecated",
    "ExtraCommand",
    "InitPlugin",
    "Plugin",
    "PluginKey",
    "PluginResolutionError",
    "PluginVersion",
    "ProjectConfig",
    "ResolutionContext",
    "ScaffolderError",
    "Subcommand",
    "SubcommandContext",
    "key_for",
]
