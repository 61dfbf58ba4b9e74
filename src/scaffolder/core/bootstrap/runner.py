"""The bootstrap pass: pre-scan, probe, guard, validate, resolve."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from scaffolder.core.bootstrap.guard import ensure_supported_project
from scaffolder.core.bootstrap.prescan import prescan_args
from scaffolder.core.bootstrap.resolver import resolve_plugins
from scaffolder.core.bootstrap.validator import validate_context
from scaffolder.core.config.probe import probe_project_config
from scaffolder.core.contracts.bootstrap import BaseFlags, BootstrapResult, ResolutionContext
from scaffolder.core.contracts.project import DEFAULT_PROJECT_VERSION, PROJECT_FILE, ProjectConfig
from scaffolder.core.plugins.registry import PluginRegistry

_LOG = logging.getLogger(__name__)


def build_context(flags: BaseFlags, config: ProjectConfig | None, *, default_project_version: str) -> ResolutionContext:
    # A configured project always uses its declared version.
    if config is not None:
        requested_version = config.version
    else:
        requested_version = flags.project_version or default_project_version

    return ResolutionContext(
        requested_version=requested_version,
        cli_plugin_key=flags.plugins_key,
        configured=config is not None,
        config=config,
        generic_help=flags.generic_help,
    )


def run_bootstrap(
    argv: Sequence[str],
    registry: PluginRegistry,
    *,
    default_project_version: str = DEFAULT_PROJECT_VERSION,
    config_path: str | Path = PROJECT_FILE,
) -> BootstrapResult:
    """Run one bootstrap pass over ``argv`` and return the resolved plugins.

    When generic help is requested no plugin is resolved and the result
    carries an empty plugin tuple.
    """
    flags = prescan_args(argv)
    config = probe_project_config(config_path)
    ensure_supported_project(config)

    ctx = build_context(flags, config, default_project_version=default_project_version)
    _LOG.debug(
        "bootstrap context: version=%s configured=%s plugins=%r",
        ctx.requested_version,
        ctx.configured,
        ctx.cli_plugin_key,
    )
    if ctx.generic_help:
        return BootstrapResult(context=ctx, plugins=())

    registry.freeze()
    validate_context(ctx, registry)
    return BootstrapResult(context=ctx, plugins=resolve_plugins(ctx, registry))
