"""Shared test fixtures for scaffolder tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from scaffolder.core.plugins.registry import PluginRegistry
from tests.fakes.plugins import ScaffoldingFakePlugin


@pytest.fixture
def go_v2() -> ScaffoldingFakePlugin:
    """Plugin supporting project versions 2 and 3-alpha."""
    return ScaffoldingFakePlugin("go.kubebuilder.io", "v2", ("2", "3-alpha"))


@pytest.fixture
def go_v3() -> ScaffoldingFakePlugin:
    """Layout-era plugin, only for project version 3-alpha."""
    return ScaffoldingFakePlugin("go.kubebuilder.io", "v3", ("3-alpha",))


@pytest.fixture
def registry(go_v2: ScaffoldingFakePlugin, go_v3: ScaffoldingFakePlugin) -> PluginRegistry:
    """go/v2 and go/v3 registered, go/v2 the default for both project versions."""
    registry = PluginRegistry()
    registry.register_plugins([go_v2, go_v3])
    registry.register_plugins([go_v2], is_default=True)
    return registry


@pytest.fixture
def project_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write a PROJECT file into ``tmp_path`` and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "PROJECT"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
