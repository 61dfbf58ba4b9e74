"""Informational notices printed after plugin resolution."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console

from scaffolder.core.contracts.plugin import Deprecated, Plugin


def emit_deprecation_notices(plugins: Sequence[Plugin], *, console: Console | None = None) -> int:
    """Print one notice per deprecated plugin and return how many were printed."""
    out = console or Console(stderr=True)
    printed = 0
    for plugin in plugins:
        if isinstance(plugin, Deprecated):
            out.print(
                f"[Deprecation Notice] {plugin.deprecation_warning()}\n",
                style="bold cyan",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
            printed += 1
    return printed
