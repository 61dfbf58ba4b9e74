from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from scaffolder.core.bootstrap.guard import ensure_supported_project
from scaffolder.core.bootstrap.runner import build_context, run_bootstrap
from scaffolder.core.contracts.bootstrap import BaseFlags
from scaffolder.core.contracts.exceptions import (
    AmbiguousPluginKeyError,
    ConfigError,
    NoPluginsForVersionError,
    UnsupportedProjectVersionError,
)
from scaffolder.core.contracts.project import ProjectConfig
from scaffolder.core.plugins.registry import PluginRegistry
from tests.fakes.plugins import FakePlugin, ScaffoldingFakePlugin


def test_guard_allows_unconfigured_and_current_projects() -> None:
    ensure_supported_project(None)
    ensure_supported_project(ProjectConfig(version="2"))


def test_guard_rejects_legacy_projects() -> None:
    with pytest.raises(UnsupportedProjectVersionError, match="migration"):
        ensure_supported_project(ProjectConfig(version="1"))


def test_build_context_prefers_configured_version() -> None:
    flags = BaseFlags(project_version="2", plugins_key="go")
    config = ProjectConfig(version="3-alpha", layout="go.kubebuilder.io/v3")

    ctx = build_context(flags, config, default_project_version="2")

    assert ctx.requested_version == "3-alpha"
    assert ctx.configured
    assert ctx.layout_key == "go.kubebuilder.io/v3"
    assert ctx.cli_plugin_key == "go"


def test_build_context_falls_back_to_flag_then_default() -> None:
    from_flag = build_context(BaseFlags(project_version="3-alpha"), None, default_project_version="2")
    from_default = build_context(BaseFlags(), None, default_project_version="2")

    assert from_flag.requested_version == "3-alpha"
    assert from_default.requested_version == "2"
    assert not from_default.configured


def test_unconfigured_project_resolves_version_default(
    tmp_path: Path, registry: PluginRegistry, go_v2: ScaffoldingFakePlugin
) -> None:
    result = run_bootstrap(["init"], registry, config_path=tmp_path / "PROJECT")

    assert result.plugins == (go_v2,)
    assert result.plugin_keys == ("go.kubebuilder.io/v2",)
    assert not result.context.configured
    assert registry.frozen


def test_ambiguous_cli_key_without_default_fails(tmp_path: Path) -> None:
    registry = PluginRegistry()
    registry.register_plugins([FakePlugin("go.kubebuilder.io", "v2"), FakePlugin("go.kubebuilder.io", "v3")])

    with pytest.raises(AmbiguousPluginKeyError) as exc_info:
        run_bootstrap(["init", "--plugins", "go"], registry, config_path=tmp_path / "PROJECT")

    assert set(exc_info.value.matches) == {"go.kubebuilder.io/v2", "go.kubebuilder.io/v3"}


def test_layout_key_wins_over_default(
    project_file: Callable[[str], Path], registry: PluginRegistry, go_v3: ScaffoldingFakePlugin
) -> None:
    path = project_file('version: "3-alpha"\nlayout: go.kubebuilder.io/v3\n')

    result = run_bootstrap(["create", "api"], registry, config_path=path)

    assert result.plugins == (go_v3,)
    assert result.context.configured


def test_legacy_project_fails_before_resolution(project_file: Callable[[str], Path]) -> None:
    path = project_file('version: "1"\ndomain: example.com\n')
    # An empty registry would fail validation; the guard must fire first.
    registry = PluginRegistry()

    with pytest.raises(UnsupportedProjectVersionError):
        run_bootstrap(["create", "api"], registry, config_path=path)

    assert not registry.frozen


def test_blank_plugins_flag_is_treated_as_absent(
    project_file: Callable[[str], Path], registry: PluginRegistry, go_v3: ScaffoldingFakePlugin
) -> None:
    path = project_file('version: "3-alpha"\nlayout: go.kubebuilder.io/v3\n')

    result = run_bootstrap(["create", "api", "--plugins", "  "], registry, config_path=path)

    assert result.context.cli_plugin_key == ""
    assert result.plugins == (go_v3,)


def test_project_version_flag_is_ignored_for_configured_projects(
    project_file: Callable[[str], Path], registry: PluginRegistry, go_v2: ScaffoldingFakePlugin
) -> None:
    path = project_file('version: "2"\n')

    result = run_bootstrap(["create", "api", "--project-version", "3-alpha"], registry, config_path=path)

    assert result.context.requested_version == "2"
    assert result.plugins == (go_v2,)


def test_corrupt_project_file_is_fatal(project_file: Callable[[str], Path], registry: PluginRegistry) -> None:
    path = project_file("version: [\n")

    with pytest.raises(ConfigError):
        run_bootstrap(["init"], registry, config_path=path)


def test_generic_help_skips_resolution(tmp_path: Path) -> None:
    registry = PluginRegistry()

    result = run_bootstrap(["--help"], registry, config_path=tmp_path / "PROJECT")

    assert result.context.generic_help
    assert result.plugins == ()


def test_help_with_project_version_still_resolves(tmp_path: Path) -> None:
    with pytest.raises(NoPluginsForVersionError):
        run_bootstrap(["init", "--project-version", "4", "--help"], PluginRegistry(), config_path=tmp_path / "PROJECT")


def test_bootstrap_is_idempotent(project_file: Callable[[str], Path], registry: PluginRegistry) -> None:
    path = project_file('version: "3-alpha"\nlayout: go.kubebuilder.io/v3\n')

    first = run_bootstrap(["create", "api"], registry, config_path=path)
    second = run_bootstrap(["create", "api"], registry, config_path=path)

    assert first == second
