"""Core configuration loading exports."""

from scaffolder.core.config.probe import probe_project_config

__all__ = ["probe_project_config"]
