"""Values threaded through a single bootstrap pass."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from scaffolder.core.contracts.plugin import Plugin, key_for
from scaffolder.core.contracts.project import ProjectConfig


class BaseFlags(BaseModel):
    """Flags recovered by the tolerant pre-scan of raw arguments."""

    model_config = ConfigDict(frozen=True)

    project_version: str | None = None
    plugins_key: str = ""
    help: bool = False
    verbose: bool = False
    generic_help: bool = False


class ResolutionContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    requested_version: str
    cli_plugin_key: str = ""
    configured: bool = False
    config: ProjectConfig | None = None
    generic_help: bool = False

    @property
    def layout_key(self) -> str:
        return self.config.layout if self.config is not None else ""


@dataclass(frozen=True)
class BootstrapResult:
    context: ResolutionContext
    plugins: tuple[Plugin, ...]

    @property
    def plugin_keys(self) -> tuple[str, ...]:
        return tuple(key_for(p) for p in self.plugins)
