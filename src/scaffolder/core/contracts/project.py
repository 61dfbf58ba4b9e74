"""Project schema versions and the persisted project file contract."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

VERSION_1 = "1"
VERSION_2 = "2"
VERSION_3_ALPHA = "3-alpha"

DEFAULT_PROJECT_VERSION = VERSION_2
LEGACY_PROJECT_VERSIONS = frozenset({VERSION_1})
LAYOUT_PROJECT_VERSIONS = frozenset({VERSION_3_ALPHA})

PROJECT_FILE = "PROJECT"
MIGRATION_GUIDE_URL = "https://book.kubebuilder.io/migration/guide.html"

_PROJECT_VERSION_RE = re.compile(r"^[1-9][0-9]*(-(alpha|beta))?$")


def validate_project_version(version: str) -> None:
    """Raise ``ValueError`` with the reason when ``version`` is malformed."""
    if not version:
        raise ValueError("project version must not be empty")
    if not _PROJECT_VERSION_RE.match(version):
        raise ValueError("project version must match <number>[-alpha|-beta]")


def supports_layout(version: str) -> bool:
    return version in LAYOUT_PROJECT_VERSIONS


class ProjectConfig(BaseModel):
    """Read-only view of the project file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    version: str = VERSION_1
    layout: str = ""
    domain: str = ""
    repo: str = ""
    multigroup: bool = False

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> Any:
        if value is None:
            return VERSION_1
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("layout", "domain", "repo", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_legacy_v1(self) -> bool:
        return self.version in LEGACY_PROJECT_VERSIONS

    @property
    def supports_layout(self) -> bool:
        return supports_layout(self.version)
