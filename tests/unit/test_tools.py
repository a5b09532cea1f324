"""Tests for the tool registry and built-in tools."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from devworkflow_py.config.models import DevWorkflowConfig
from devworkflow_py.exceptions import (
    GitError,
    MissingEnvError,
    ToolInputError,
    ToolNotFoundError,
)
from devworkflow_py.tools import BUILTIN_TOOLS, Tool, ToolRegistry, create_registry


@pytest.fixture
def registry() -> ToolRegistry:
    return create_registry()


class TestToolRegistry:
    """Tests for ToolRegistry listing and dispatch."""

    def test_list_tools(self, registry: ToolRegistry):
        names = [tool["name"] for tool in registry.list_tools()]

        assert names == [
            "health.ping",
            "release.dryRun",
            "git.versionGuard",
            "git.inferBump",
            "git.changelog",
        ]

    def test_input_schema_uses_wire_names(self, registry: ToolRegistry):
        tools = {tool["name"]: tool for tool in registry.list_tools()}
        schema = tools["git.versionGuard"]["inputSchema"]

        assert "prTitle" in schema["properties"]
        assert schema["required"] == ["prTitle"]

    def test_tool_without_input_has_no_schema(self, registry: ToolRegistry):
        tools = {tool["name"]: tool for tool in registry.list_tools()}
        assert tools["health.ping"]["inputSchema"] is None

    def test_unknown_tool(self, registry: ToolRegistry):
        with pytest.raises(ToolNotFoundError, match="Tool not found: git.blame"):
            registry.call("git.blame", {})

    def test_missing_required_field(self, registry: ToolRegistry):
        with pytest.raises(ToolInputError, match="Missing required field: prTitle") as exc_info:
            registry.call("git.versionGuard", {"commits": ["feat: x"]})

        assert exc_info.value.field == "prTitle"

    def test_invalid_field(self, registry: ToolRegistry):
        with pytest.raises(ToolInputError, match="Invalid field commits"):
            registry.call("git.inferBump", {"commits": "feat: x"})

    def test_handler_not_called_on_invalid_input(self):
        handler = MagicMock()
        registry = ToolRegistry()
        registry.add(
            Tool(
                name="x",
                description="",
                handler=handler,
                input_model=BUILTIN_TOOLS[2].input_model,
            )
        )

        with pytest.raises(ToolInputError):
            registry.call("x", {})
        handler.assert_not_called()

    def test_result_envelope(self, registry: ToolRegistry):
        response = registry.call("git.inferBump", {"commits": ["fix: a"]})
        assert response == {"result": {"bump": "patch"}}

    def test_contains_and_len(self, registry: ToolRegistry):
        assert "git.changelog" in registry
        assert "git.blame" not in registry
        assert len(registry) == len(BUILTIN_TOOLS)


class TestBuiltinTools:
    """Tests for the built-in tool handlers."""

    def test_health_ping(self, registry: ToolRegistry):
        result = registry.call("health.ping")["result"]

        assert result["ok"] is True
        assert datetime.fromisoformat(result["ts"]).tzinfo is not None

    def test_version_guard(self, registry: ToolRegistry):
        result = registry.call(
            "git.versionGuard", {"prTitle": "[Release][PATCH] x", "commits": ["feat: x"]}
        )["result"]

        assert result == {
            "declared": "patch",
            "inferred": "minor",
            "ok": False,
            "violations": ["Declared PATCH but commits imply MINOR."],
        }

    def test_version_guard_without_commits(self, registry: ToolRegistry):
        result = registry.call("git.versionGuard", {"prTitle": "no tag"})["result"]

        assert result["declared"] is None
        assert result["inferred"] is None
        assert result["violations"] == ["PR title missing [Release][MAJOR|MINOR|PATCH] tag."]

    def test_infer_bump_empty(self, registry: ToolRegistry):
        assert registry.call("git.inferBump", {"commits": []})["result"] == {"bump": "none"}

    def test_dry_run_uses_repo_path_argument(self, registry: ToolRegistry, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(
                stdout="The next release version is 2.3.0", stderr="", returncode=0
            )

            result = registry.call("release.dryRun", {"repoPath": str(tmp_path)})["result"]

        assert result["ok"] is True
        assert result["nextVersion"] == "2.3.0"
        assert result["releaseType"] == "patch"
        assert mock_run.call_args.kwargs["cwd"] == tmp_path

    def test_dry_run_falls_back_to_config(self, tmp_path: Path):
        registry = create_registry(DevWorkflowConfig(repo_path=tmp_path))

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)
            result = registry.call("release.dryRun", {})["result"]

        assert result["releaseType"] == "none"
        assert mock_run.call_args.kwargs["cwd"] == tmp_path

    def test_dry_run_without_repo_path(self, registry: ToolRegistry):
        with pytest.raises(MissingEnvError, match="REPO_PATH"):
            registry.call("release.dryRun", {})

    def test_changelog(self, registry: ToolRegistry, temp_git_repo: Path):
        result = registry.call(
            "git.changelog", {"repoPath": str(temp_git_repo), "since": "v0.1.0"}
        )["result"]

        assert result["range"] == "v0.1.0..HEAD"
        assert result["sections"].startswith("### 💥 Breaking Changes\n- refactor!: drop python 3.10")

    def test_changelog_default_range(self, registry: ToolRegistry, temp_git_repo: Path):
        result = registry.call("git.changelog", {"repoPath": str(temp_git_repo)})["result"]

        assert result["range"] == "HEAD"
        assert "### 🧰 Other\n- chore: initial commit" in result["sections"]

    def test_changelog_until_cannot_inject_options(
        self, registry: ToolRegistry, temp_git_repo: Path
    ):
        """An ``until`` that looks like a git option fails instead of writing a file."""
        target = temp_git_repo / "changelog-leak.txt"

        with pytest.raises(GitError):
            registry.call(
                "git.changelog",
                {"repoPath": str(temp_git_repo), "until": f"--output={target}"},
            )

        assert not target.exists()
