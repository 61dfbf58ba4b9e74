"""In-memory plugin fakes for bootstrap and CLI tests."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from scaffolder.core.contracts.command import ExtraCommand, Subcommand, SubcommandContext
from scaffolder.core.contracts.plugin import Plugin, PluginVersion, parse_plugin_version
from scaffolder.core.contracts.project import ProjectConfig


class FakePlugin(Plugin):
    def __init__(self, name: str, version: str, project_versions: Sequence[str] = ("2",)) -> None:
        self._name = name
        self._version = parse_plugin_version(version)
        self._project_versions = tuple(project_versions)

    def name(self) -> str:
        return self._name

    def version(self) -> PluginVersion:
        return self._version

    def supported_project_versions(self) -> Sequence[str]:
        return self._project_versions


class FakeSubcommand(Subcommand):
    def __init__(self, label: str) -> None:
        self.label = label
        self.config: ProjectConfig | None = None
        self.injected = False
        self.runs: list[argparse.Namespace] = []

    def update_context(self, ctx: SubcommandContext) -> None:
        ctx.description = f"{self.label} for {ctx.command_name}"
        ctx.examples = f"  {ctx.command_name} {self.label} --domain example.com"

    def bind_flags(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--domain", default="")

    def inject_config(self, config: ProjectConfig | None) -> None:
        self.injected = True
        self.config = config

    def run(self, args: argparse.Namespace) -> None:
        self.runs.append(args)


class ScaffoldingFakePlugin(FakePlugin):
    """Fake plugin exposing init, create api and create webhook subcommands."""

    def __init__(self, name: str, version: str, project_versions: Sequence[str] = ("2",)) -> None:
        super().__init__(name, version, project_versions)
        self.init = FakeSubcommand("init")
        self.create_api = FakeSubcommand("api")
        self.create_webhook = FakeSubcommand("webhook")

    def get_init_subcommand(self) -> Subcommand:
        return self.init

    def get_create_api_subcommand(self) -> Subcommand:
        return self.create_api

    def get_create_webhook_subcommand(self) -> Subcommand:
        return self.create_webhook


class DeprecatedFakePlugin(ScaffoldingFakePlugin):
    def deprecation_warning(self) -> str:
        return f"{self.key()} is deprecated, use go.kubebuilder.io/v3 instead"


class FakeExtraCommand(ExtraCommand):
    def __init__(self, name: str, help: str = "") -> None:
        self.name = name
        self.help = help
        self.runs: list[argparse.Namespace] = []

    def run(self, args: argparse.Namespace) -> None:
        self.runs.append(args)
