"""Project file probing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from scaffolder.core.contracts.exceptions import ConfigError
from scaffolder.core.contracts.project import PROJECT_FILE, ProjectConfig

_LOG = logging.getLogger(__name__)


def probe_project_config(path: str | Path = PROJECT_FILE) -> ProjectConfig | None:
    """Load the project file at ``path``.

    Returns ``None`` when the file does not exist, i.e. the project is not
    configured yet. Any other read or parse failure is a ``ConfigError``.
    """
    config_path = Path(path).expanduser()

    try:
        raw_payload: Any = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        _LOG.debug("no project file at %s", config_path)
        return None
    except OSError as exc:
        raise ConfigError(f"failed to read config: {config_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"invalid encoding in config file: {config_path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in config file: {config_path}") from exc

    if raw_payload is None:
        raw_payload = {}
    if not isinstance(raw_payload, dict):
        raise ConfigError(f"invalid config file (expected mapping): {config_path}")

    try:
        config = ProjectConfig.model_validate(raw_payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid config {config_path}: {exc}") from exc

    _LOG.debug("loaded project file %s (version %s, layout %r)", config_path, config.version, config.layout)
    return config
