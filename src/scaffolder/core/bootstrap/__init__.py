"""Core bootstrap exports."""

from scaffolder.core.bootstrap.guard import ensure_supported_project
from scaffolder.core.bootstrap.prescan import prescan_args
from scaffolder.core.bootstrap.resolver import resolve_plugins
from scaffolder.core.bootstrap.runner import build_context, run_bootstrap
from scaffolder.core.bootstrap.validator import requires_default_plugin, validate_context

__all__ = [
    "build_context",
    "ensure_supported_project",
    "prescan_args",
    "requires_default_plugin",
    "resolve_plugins",
    "run_bootstrap",
    "validate_context",
]
