"""Configuration models.

All models have defaults, so an empty ``[tool.devworkflow]`` table (or no
pyproject.toml at all) yields a working configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from devworkflow_py.exceptions import MissingEnvError


class ReleaseConfig(BaseModel):
    """Settings for the semantic-release dry run."""

    model_config = ConfigDict(extra="forbid")

    command: list[str] | None = Field(
        default=None,
        description="Command used to invoke semantic-release. Resolved from PATH when unset.",
    )
    no_ci: bool = Field(default=True, description="Pass --no-ci to semantic-release")


class ChangelogConfig(BaseModel):
    """Settings for changelog generation."""

    model_config = ConfigDict(extra="forbid")

    default_until: str = "HEAD"


class ServerConfig(BaseModel):
    """Identity the MCP server reports to clients."""

    model_config = ConfigDict(extra="forbid")

    name: str = "DevWorkflow"
    version: str = "0.1.0"


class DevWorkflowConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="forbid")

    repo_path: Path | None = None
    github_token: str | None = Field(default=None, repr=False)
    release: ReleaseConfig = Field(default_factory=ReleaseConfig)
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    def resolve_repo_path(self, override: str | Path | None = None) -> Path:
        """Pick the repository path: explicit argument, then config.

        Raises:
            MissingEnvError: If neither is set
        """
        if override:
            return Path(override)
        if self.repo_path is not None:
            return self.repo_path
        raise MissingEnvError("REPO_PATH")
