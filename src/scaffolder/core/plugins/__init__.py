"""Core plugin registry and matching exports."""

from scaffolder.core.plugins.matcher import match_plugins
from scaffolder.core.plugins.registry import PluginRegistry, validate_plugin

__all__ = ["PluginRegistry", "match_plugins", "validate_plugin"]
