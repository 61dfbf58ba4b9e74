"""Subcommand contracts implemented by plugins and host programs."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from dataclasses import dataclass

from scaffolder.core.contracts.project import ProjectConfig


@dataclass
class SubcommandContext:
    """Help metadata a subcommand may rewrite before its parser is built."""

    command_name: str
    description: str = ""
    examples: str = ""


class Subcommand(ABC):
    """A plugin-provided implementation of ``init``, ``create api`` or ``create webhook``."""

    def update_context(self, ctx: SubcommandContext) -> None:
        """Adjust description and examples shown in the subcommand help."""

    def bind_flags(self, parser: argparse.ArgumentParser) -> None:
        """Register subcommand-specific flags."""

    def inject_config(self, config: ProjectConfig | None) -> None:
        """Receive the loaded project file, or ``None`` for unconfigured projects."""

    @abstractmethod
    def run(self, args: argparse.Namespace) -> None: ...  # pragma: no cover


class ExtraCommand(ABC):
    """A host-supplied command added next to the plugin-driven ones."""

    name: str
    help: str = ""

    def bind_flags(self, parser: argparse.ArgumentParser) -> None:
        """Register command-specific flags."""

    @abstractmethod
    def run(self, args: argparse.Namespace) -> None: ...  # pragma: no cover
