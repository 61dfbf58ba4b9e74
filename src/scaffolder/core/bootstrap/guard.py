"""Reject projects declaring an unsupported legacy schema generation."""

from __future__ import annotations

from scaffolder.core.contracts.exceptions import UnsupportedProjectVersionError
from scaffolder.core.contracts.project import MIGRATION_GUIDE_URL, ProjectConfig


def ensure_supported_project(config: ProjectConfig | None) -> None:
    if config is not None and config.is_legacy_v1:
        raise UnsupportedProjectVersionError(config.version, migration_url=MIGRATION_GUIDE_URL)
