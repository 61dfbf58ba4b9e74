"""Command tree construction from resolved plugins."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from scaffolder.core.contracts.bootstrap import BootstrapResult
from scaffolder.core.contracts.command import ExtraCommand, Subcommand, SubcommandContext
from scaffolder.core.contracts.exceptions import CommandConflictError, UnsupportedSubcommandError
from scaffolder.core.contracts.plugin import CreateAPIPlugin, CreateWebhookPlugin, InitPlugin, Plugin, key_for
from scaffolder.core.contracts.project import ProjectConfig

Handler = Callable[[argparse.Namespace], None]

RUN_IN_PROJECT_ROOT_MSG = """For project-specific information, run this command in the root directory of a
project.
"""

_ROOT_DESCRIPTION = """Development kit for building Kubernetes extensions and tools.

Provides libraries and tools to create new projects, APIs and controllers.

Typical project lifecycle:

- initialize a project:

  {name} init --domain example.com --license apache2 --owner "The Kubernetes authors"

- create one or more new resource APIs and add your code to them:

  {name} create api --group <group> --version <version> --kind <Kind>
"""

_ROOT_EXAMPLES = """examples:
  # Initialize your project
  {name} init --domain example.com --license apache2 --owner "The Kubernetes authors"

  # Create a frigates API with Group: ship, Version: v1beta1 and Kind: Frigate
  {name} create api --group ship --version v1beta1 --kind Frigate
"""

_CAPABILITIES: dict[str, tuple[type, str]] = {
    "init": (InitPlugin, "get_init_subcommand"),
    "create api": (CreateAPIPlugin, "get_create_api_subcommand"),
    "create webhook": (CreateWebhookPlugin, "get_create_webhook_subcommand"),
}


def _global_options(*, suppress_defaults: bool = False) -> argparse.ArgumentParser:
    """Options accepted both before and after the subcommand name.

    Subcommand copies suppress their defaults so a value given at the root
    level is not overwritten when the subparser fills in its namespace.
    """

    def default(value: object) -> object:
        return argparse.SUPPRESS if suppress_defaults else value

    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--project-version", default=default(None), help="project version")
    parser.add_argument("--plugins", default=default(""), help="plugin key to be used for this subcommand execution")
    parser.add_argument("--verbose", "-v", action="store_true", default=default(False), help="Enable debug logging")
    return parser


def subcommand_for(plugins: Sequence[Plugin], command: str) -> Subcommand | None:
    """Return the subcommand the resolved plugins provide for ``command``, if any."""
    protocol, getter = _CAPABILITIES[command]
    capable = [p for p in plugins if isinstance(p, protocol)]
    if len(capable) > 1:
        keys = ", ".join(key_for(p) for p in capable)
        raise CommandConflictError(command, f"is provided by more than one resolved plugin: {keys}")
    if not capable:
        return None
    subcommand: Subcommand = getattr(capable[0], getter)()
    return subcommand


def _help_handler(parser: argparse.ArgumentParser) -> Handler:
    def handler(args: argparse.Namespace) -> None:
        del args
        parser.print_help()

    return handler


def _subcommand_handler(subcommand: Subcommand, config: ProjectConfig | None) -> Handler:
    def handler(args: argparse.Namespace) -> None:
        subcommand.inject_config(config)
        subcommand.run(args)

    return handler


def _unsupported_handler(command: str, plugin_keys: Sequence[str]) -> Handler:
    def handler(args: argparse.Namespace) -> None:
        del args
        raise UnsupportedSubcommandError(command, plugin_keys)

    return handler


class CommandTreeBuilder:
    """Builds the ``argparse`` tree the full argument parse runs against."""

    def __init__(
        self,
        result: BootstrapResult,
        *,
        command_name: str,
        extra_commands: Sequence[ExtraCommand] = (),
        alpha_commands: Sequence[ExtraCommand] = (),
    ) -> None:
        self._result = result
        self._command_name = command_name
        self._extra_commands = extra_commands
        self._alpha_commands = alpha_commands
        self._globals = _global_options()
        self._subcommand_globals = _global_options(suppress_defaults=True)

    def build(self) -> argparse.ArgumentParser:
        root = argparse.ArgumentParser(
            prog=self._command_name,
            description=_ROOT_DESCRIPTION.format(name=self._command_name),
            epilog=_ROOT_EXAMPLES.format(name=self._command_name),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            parents=[self._globals],
        )
        root.set_defaults(handler=_help_handler(root))
        subparsers = root.add_subparsers(dest="command", metavar="<command>")
        names: set[str] = set()

        if self._alpha_commands:
            alpha = subparsers.add_parser("alpha", help="Expose commands which are in experimental or early stages")
            alpha.set_defaults(handler=_help_handler(alpha))
            alpha_subparsers = alpha.add_subparsers(dest="alpha_command", metavar="<command>")
            self._add_extra_commands(alpha_subparsers, self._alpha_commands, set(), group="alpha")
            names.add("alpha")

        create = subparsers.add_parser(
            "create",
            help="Scaffold a Kubernetes API or webhook",
            description="Scaffold a Kubernetes API or webhook.",
        )
        create.set_defaults(handler=_help_handler(create))
        create_subparsers = create.add_subparsers(dest="create_command", metavar="<command>")
        self._add_plugin_command(
            create_subparsers,
            "api",
            command="create api",
            help_text="Scaffold a Kubernetes API",
            description="Scaffold a Kubernetes API.",
        )
        self._add_plugin_command(
            create_subparsers,
            "webhook",
            command="create webhook",
            help_text="Scaffold a webhook for an API resource",
            description="Scaffold a webhook for an API resource.",
        )
        names.add("create")

        self._add_plugin_command(
            subparsers,
            "init",
            command="init",
            help_text="Initialize a new project",
            description="Initialize a new project.",
        )
        names.add("init")

        self._add_extra_commands(subparsers, self._extra_commands, names)
        return root

    def _add_plugin_command(
        self,
        subparsers: argparse._SubParsersAction,
        name: str,
        *,
        command: str,
        help_text: str,
        description: str,
    ) -> argparse.ArgumentParser:
        ctx = self._result.context
        if not ctx.configured and command != "init":
            description = f"{description}\n\n{RUN_IN_PROJECT_ROOT_MSG}"

        subcommand = subcommand_for(self._result.plugins, command)
        sub_ctx = SubcommandContext(command_name=self._command_name, description=description)
        if subcommand is not None:
            subcommand.update_context(sub_ctx)

        parser = subparsers.add_parser(
            name,
            help=help_text,
            description=sub_ctx.description,
            epilog=sub_ctx.examples or None,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            parents=[self._subcommand_globals],
        )
        if subcommand is None:
            parser.set_defaults(handler=_unsupported_handler(command, self._result.plugin_keys))
        else:
            subcommand.bind_flags(parser)
            parser.set_defaults(handler=_subcommand_handler(subcommand, ctx.config))
        return parser

    def _add_extra_commands(
        self,
        subparsers: argparse._SubParsersAction,
        commands: Sequence[ExtraCommand],
        names: set[str],
        *,
        group: str | None = None,
    ) -> None:
        for extra in commands:
            if extra.name in names:
                full_name = f"{group} {extra.name}" if group else extra.name
                raise CommandConflictError(full_name)
            names.add(extra.name)
            parser = subparsers.add_parser(extra.name, help=extra.help, description=extra.help or None)
            extra.bind_flags(parser)
            parser.set_defaults(handler=extra.run)


def build_command_tree(
    result: BootstrapResult,
    *,
    command_name: str,
    extra_commands: Sequence[ExtraCommand] = (),
    alpha_commands: Sequence[ExtraCommand] = (),
) -> argparse.ArgumentParser:
    return CommandTreeBuilder(
        result,
        command_name=command_name,
        extra_commands=extra_commands,
        alpha_commands=alpha_commands,
    ).build()
