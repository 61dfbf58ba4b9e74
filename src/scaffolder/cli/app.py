"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from scaffolder.cli.builder import build_command_tree
from scaffolder.cli.notices import emit_deprecation_notices
from scaffolder.core.bootstrap import prescan_args, run_bootstrap
from scaffolder.core.contracts.bootstrap import BootstrapResult
from scaffolder.core.contracts.command import ExtraCommand
from scaffolder.core.contracts.exceptions import (
    CLIValidationError,
    CommandConflictError,
    ConfigError,
    InvalidProjectVersionError,
    PluginResolutionError,
    RegistryError,
    ScaffolderError,
)
from scaffolder.core.contracts.plugin import Plugin
from scaffolder.core.contracts.project import DEFAULT_PROJECT_VERSION, PROJECT_FILE, validate_project_version
from scaffolder.core.plugins.registry import PluginRegistry

_LOG = logging.getLogger(__name__)


class ScaffolderCLI:
    """A bootstrapped CLI: plugins resolved, command tree built."""

    def __init__(self, *, parser: argparse.ArgumentParser, result: BootstrapResult, argv: Sequence[str]) -> None:
        self.parser = parser
        self.result = result
        self._argv = list(argv)

    @property
    def resolved_plugins(self) -> tuple[Plugin, ...]:
        return self.result.plugins

    def run(self) -> None:
        args = self.parser.parse_args(self._argv)
        args.handler(args)


def new_cli(
    *,
    command_name: str = "scaffolder",
    default_project_version: str = DEFAULT_PROJECT_VERSION,
    plugins: Sequence[Plugin] = (),
    default_plugins: Sequence[Plugin] = (),
    extra_commands: Sequence[ExtraCommand] = (),
    alpha_commands: Sequence[ExtraCommand] = (),
    argv: Sequence[str] | None = None,
    config_path: str | Path = PROJECT_FILE,
    console: Console | None = None,
) -> ScaffolderCLI:
    """Register plugins, run the bootstrap pass and build the command tree."""
    try:
        validate_project_version(default_project_version)
    except ValueError as exc:
        raise InvalidProjectVersionError(
            default_project_version, f"broken pre-set default project version: {exc}"
        ) from exc

    registry = PluginRegistry()
    registry.register_plugins(plugins)
    registry.register_plugins(default_plugins, is_default=True)

    args = list(sys.argv[1:] if argv is None else argv)
    result = run_bootstrap(
        args,
        registry,
        default_project_version=default_project_version,
        config_path=config_path,
    )
    parser = build_command_tree(
        result,
        command_name=command_name,
        extra_commands=extra_commands,
        alpha_commands=alpha_commands,
    )
    emit_deprecation_notices(result.plugins, console=console)
    return ScaffolderCLI(parser=parser, result=result, argv=args)


def main(
    argv: list[str] | None = None,
    *,
    command_name: str = "scaffolder",
    default_project_version: str = DEFAULT_PROJECT_VERSION,
    plugins: Sequence[Plugin] = (),
    default_plugins: Sequence[Plugin] = (),
    extra_commands: Sequence[ExtraCommand] = (),
    alpha_commands: Sequence[ExtraCommand] = (),
    config_path: str | Path = PROJECT_FILE,
) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if prescan_args(args).verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        cli = new_cli(
            command_name=command_name,
            default_project_version=default_project_version,
            plugins=plugins,
            default_plugins=default_plugins,
            extra_commands=extra_commands,
            alpha_commands=alpha_commands,
            argv=args,
            config_path=config_path,
        )
        cli.run()
        return 0
    except CLIValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except PluginResolutionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (RegistryError, CommandConflictError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except ScaffolderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # pragma: no cover - defensive fallback
        _LOG.debug("unexpected failure", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["ScaffolderCLI", "main", "new_cli"]
