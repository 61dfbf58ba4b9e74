"""Plugin identity and capability contracts."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import StrEnum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from scaffolder.core.contracts.command import Subcommand

_NAME_MAX_LENGTH = 253
_NAME_LABEL_RE = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")
_VERSION_RE = re.compile(r"^v(0|[1-9][0-9]*)(?:-([a-z]+))?$")


class Stage(StrEnum):
    STABLE = ""
    ALPHA = "alpha"
    BETA = "beta"


class PluginVersion(BaseModel):
    """Structured plugin version rendered as ``v<number>[-<stage>]``."""

    model_config = ConfigDict(frozen=True)

    number: int
    stage: Stage = Stage.STABLE

    def __str__(self) -> str:
        if self.stage is Stage.STABLE:
            return f"v{self.number}"
        return f"v{self.number}-{self.stage.value}"


def parse_plugin_version(value: str) -> PluginVersion:
    """Parse ``v3`` or ``v3-alpha`` style strings; raises ``ValueError`` with the reason."""
    match = _VERSION_RE.match(value)
    if match is None:
        raise ValueError("plugin version must match v<number>[-<stage>]")
    number, stage = match.group(1), match.group(2) or ""
    if stage and stage not in (Stage.ALPHA, Stage.BETA):
        raise ValueError(f"unknown plugin version stage {stage!r}, expected one of: alpha, beta")
    return PluginVersion(number=int(number), stage=Stage(stage))


def validate_plugin_name(name: str) -> None:
    """Plugin names are lowercase DNS-1123 subdomains; raises ``ValueError`` with the reason."""
    if not name:
        raise ValueError("plugin name must not be empty")
    if len(name) > _NAME_MAX_LENGTH:
        raise ValueError(f"plugin name must be no more than {_NAME_MAX_LENGTH} characters")
    for label in name.split("."):
        if not _NAME_LABEL_RE.match(label):
            raise ValueError(
                "plugin name must consist of lower case alphanumeric characters, '-' or '.', "
                "and must start and end with an alphanumeric character"
            )


def short_name(name: str) -> str:
    """``go.kubebuilder.io`` -> ``go``."""
    return name.split(".", 1)[0]


class PluginKey(BaseModel):
    """``name`` or ``name/version`` identifier of a plugin."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str | None = None

    @classmethod
    def parse(cls, raw: str) -> PluginKey:
        name, _, version = raw.strip().partition("/")
        return cls(name=name, version=version or None)

    def __str__(self) -> str:
        if self.version is None:
            return self.name
        return f"{self.name}/{self.version}"


class Plugin(ABC):
    """A bundle of scaffolding behaviour tied to one or more project versions."""

    @abstractmethod
    def name(self) -> str: ...  # pragma: no cover

    @abstractmethod
    def version(self) -> PluginVersion: ...  # pragma: no cover

    @abstractmethod
    def supported_project_versions(self) -> Sequence[str]: ...  # pragma: no cover

    def key(self) -> PluginKey:
        return PluginKey(name=self.name(), version=str(self.version()))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.key()}>"


def key_for(plugin: Plugin) -> str:
    return str(plugin.key())


@runtime_checkable
class Deprecated(Protocol):
    def deprecation_warning(self) -> str: ...


@runtime_checkable
class InitPlugin(Protocol):
    def get_init_subcommand(self) -> Subcommand: ...


@runtime_checkable
class CreateAPIPlugin(Protocol):
    def get_create_api_subcommand(self) -> Subcommand: ...


@runtime_checkable
class CreateWebhookPlugin(Protocol):
    def get_create_webhook_subcommand(self) -> Subcommand: ...
