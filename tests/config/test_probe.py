from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from scaffolder.core.config.probe import probe_project_config
from scaffolder.core.contracts.exceptions import ConfigError


def test_missing_project_file_means_unconfigured(tmp_path: Path) -> None:
    assert probe_project_config(tmp_path / "PROJECT") is None


def test_loads_version_and_layout(project_file: Callable[[str], Path]) -> None:
    path = project_file(
        'version: "3-alpha"\nlayout: go.kubebuilder.io/v3\ndomain: example.com\nrepo: example.com/app\n'
    )

    config = probe_project_config(path)

    assert config is not None
    assert config.version == "3-alpha"
    assert config.layout == "go.kubebuilder.io/v3"
    assert config.domain == "example.com"
    assert config.repo == "example.com/app"


def test_unquoted_numeric_version_is_a_string(project_file: Callable[[str], Path]) -> None:
    config = probe_project_config(project_file("version: 2\ndomain: example.com\n"))

    assert config is not None
    assert config.version == "2"
    assert config.layout == ""


def test_project_file_without_version_is_legacy(project_file: Callable[[str], Path]) -> None:
    config = probe_project_config(project_file("domain: example.com\n"))

    assert config is not None
    assert config.is_legacy_v1


def test_empty_project_file_is_legacy(project_file: Callable[[str], Path]) -> None:
    config = probe_project_config(project_file(""))

    assert config is not None
    assert config.version == "1"


def test_invalid_yaml_is_a_config_error(project_file: Callable[[str], Path]) -> None:
    path = project_file("version: [unclosed\n")

    with pytest.raises(ConfigError, match="invalid YAML"):
        probe_project_config(path)


def test_non_mapping_document_is_a_config_error(project_file: Callable[[str], Path]) -> None:
    with pytest.raises(ConfigError, match="expected mapping"):
        probe_project_config(project_file("- version\n- layout\n"))


def test_schema_violation_is_a_config_error(project_file: Callable[[str], Path]) -> None:
    with pytest.raises(ConfigError, match="invalid config"):
        probe_project_config(project_file("version: '2'\nlayout: [a, b]\n"))


def test_unreadable_path_is_a_config_error(tmp_path: Path) -> None:
    directory = tmp_path / "PROJECT"
    directory.mkdir()

    with pytest.raises(ConfigError, match="failed to read config"):
        probe_project_config(directory)


def test_non_utf8_project_file_is_a_config_error(tmp_path: Path) -> None:
    path = tmp_path / "PROJECT"
    path.write_bytes(b"version: \xff\xfe\n")

    with pytest.raises(ConfigError, match="invalid encoding") as exc_info:
        probe_project_config(path)

    assert str(path) in str(exc_info.value)
