"""Command-line interface for scaffolder."""

from __future__ import annotations

from scaffolder.cli.app import ScaffolderCLI as ScaffolderCLI
from scaffolder.cli.app import main as main
from scaffolder.cli.app import new_cli as new_cli
from scaffolder.cli.builder import build_command_tree as build_command_tree
from scaffolder.cli.notices import emit_deprecation_notices as emit_deprecation_notices
