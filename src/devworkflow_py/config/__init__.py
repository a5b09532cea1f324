"""Configuration management for devworkflow-py."""

from __future__ import annotations

from devworkflow_py.config.loader import env, load_config
from devworkflow_py.config.models import (
    ChangelogConfig,
    DevWorkflowConfig,
    ReleaseConfig,
    ServerConfig,
)

__all__ = [
    "ChangelogConfig",
    "DevWorkflowConfig",
    "ReleaseConfig",
    "ServerConfig",
    "env",
    "load_config",
]
