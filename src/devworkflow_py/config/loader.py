"""Configuration loading from pyproject.toml and the environment.

Settings live under ``[tool.devworkflow]``. Environment variables take
precedence over the file:

- ``REPO_PATH``: default repository for git and release tools
- ``GITHUB_TOKEN``: forwarded to semantic-release as GITHUB_TOKEN/GH_TOKEN
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from devworkflow_py.config.models import DevWorkflowConfig
from devworkflow_py.exceptions import (
    ConfigNotFoundError,
    ConfigValidationError,
    MissingEnvError,
)

logger = logging.getLogger(__name__)

TOOL_KEY = "devworkflow"

ENV_OVERRIDES = {
    "REPO_PATH": "repo_path",
    "GITHUB_TOKEN": "github_token",
}


def env(key: str, required: bool = True) -> str:
    """Read an environment variable.

    Args:
        key: Variable name
        required: Raise when the variable is unset or empty

    Returns:
        The value, or "" when optional and unset

    Raises:
        MissingEnvError: If required and not set
    """
    value = os.environ.get(key)
    if not value and required:
        raise MissingEnvError(key)
    return value or ""


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in ``start`` or one of its parents.

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the root
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Config file not found: {path}")
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_devworkflow_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.devworkflow]`` table, or an empty dict."""
    return dict(pyproject.get("tool", {}).get(TOOL_KEY, {}))


def load_config(path: Path | None = None) -> DevWorkflowConfig:
    """Load configuration for the project at ``path``.

    Falls back to defaults when there is no pyproject.toml. Environment
    variables override file values.

    Raises:
        ConfigValidationError: If the settings are invalid
    """
    data: dict[str, Any] = {}
    try:
        pyproject_path = find_pyproject_toml(path)
    except ConfigNotFoundError:
        logger.debug("No pyproject.toml found, using default configuration")
    else:
        data = extract_devworkflow_config(load_pyproject_toml(pyproject_path))
        repo_path = data.get("repo_path")
        if isinstance(repo_path, str) and not Path(repo_path).is_absolute():
            data["repo_path"] = str(pyproject_path.parent / repo_path)
        logger.debug("Loaded configuration from %s", pyproject_path)

    for key, field_name in ENV_OVERRIDES.items():
        value = env(key, required=False)
        if value:
            data[field_name] = value

    try:
        return DevWorkflowConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}") from e
