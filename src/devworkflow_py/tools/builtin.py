"""Built-in tools.

Argument names are camelCase on the wire (``prTitle``, ``repoPath``) and
snake_case in Python.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from devworkflow_py.config.models import DevWorkflowConfig
from devworkflow_py.core.changelog import generate_changelog
from devworkflow_py.core.commits import infer_bump
from devworkflow_py.core.guard import check_version_guard
from devworkflow_py.core.release import run_release_dry_run
from devworkflow_py.tools.registry import Tool, ToolRegistry
from devworkflow_py.vcs.git import GitRepository


class ToolInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class DryRunInput(ToolInput):
    repo_path: str | None = Field(default=None, alias="repoPath")
    branch: str | None = None


class GuardInput(ToolInput):
    pr_title: str = Field(alias="prTitle")
    commits: list[str] | None = None


class InferBumpInput(ToolInput):
    commits: list[str]


class ChangelogInput(ToolInput):
    repo_path: str | None = Field(default=None, alias="repoPath")
    since: str | None = None
    until: str | None = None


def health_ping(_params: None, _config: DevWorkflowConfig) -> dict[str, Any]:
    return {"ok": True, "ts": datetime.now(UTC).isoformat()}


def release_dry_run(params: DryRunInput, config: DevWorkflowConfig) -> dict[str, Any]:
    cwd = config.resolve_repo_path(params.repo_path)
    return run_release_dry_run(cwd, config, branch=params.branch).to_dict()


def version_guard(params: GuardInput, _config: DevWorkflowConfig) -> dict[str, Any]:
    return check_version_guard(params.pr_title, params.commits).to_dict()


def git_infer_bump(params: InferBumpInput, _config: DevWorkflowConfig) -> dict[str, Any]:
    return {"bump": str(infer_bump(params.commits))}


def git_changelog(params: ChangelogInput, config: DevWorkflowConfig) -> dict[str, Any]:
    repo = GitRepository(config.resolve_repo_path(params.repo_path))
    until = params.until or config.changelog.default_until
    return generate_changelog(repo, since=params.since, until=until).to_dict()


BUILTIN_TOOLS = (
    Tool(
        name="health.ping",
        description="Check if the DevWorkflow server is alive.",
        handler=health_ping,
    ),
    Tool(
        name="release.dryRun",
        description="Run semantic-release in dry mode and return next version + notes.",
        handler=release_dry_run,
        input_model=DryRunInput,
    ),
    Tool(
        name="git.versionGuard",
        description="Validate PR title bump tag against conventional commit signals.",
        handler=version_guard,
        input_model=GuardInput,
    ),
    Tool(
        name="git.inferBump",
        description="Infer the semantic version bump implied by conventional commit messages.",
        handler=git_infer_bump,
        input_model=InferBumpInput,
    ),
    Tool(
        name="git.changelog",
        description="Generate a simple conventional-style changelog between two points.",
        handler=git_changelog,
        input_model=ChangelogInput,
    ),
)


def create_registry(config: DevWorkflowConfig | None = None) -> ToolRegistry:
    """Build a registry holding every built-in tool."""
    registry = ToolRegistry(config)
    for tool in BUILTIN_TOOLS:
        registry.add(tool)
    return registry
