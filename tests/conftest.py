"""Shared fixtures."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from devworkflow_py.vcs.git import Commit


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's REPO_PATH/GITHUB_TOKEN out of tests."""
    monkeypatch.delenv("REPO_PATH", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)


@pytest.fixture
def feat_commit() -> Commit:
    return Commit(sha="feat123", subject="feat: add user authentication")


@pytest.fixture
def fix_commit() -> Commit:
    return Commit(sha="fix456", subject="fix(core): handle null response")


@pytest.fixture
def breaking_commit() -> Commit:
    return Commit(
        sha="break789",
        subject="feat(api): new response format",
        body="BREAKING CHANGE: responses are now wrapped in an envelope",
    )


@pytest.fixture
def sample_commits(feat_commit: Commit, fix_commit: Commit, breaking_commit: Commit) -> list[Commit]:
    return [
        feat_commit,
        fix_commit,
        breaking_commit,
        Commit(sha="docs111", subject="docs: update readme"),
        Commit(sha="chore222", subject="chore: bump dependencies"),
        Commit(sha="perf333", subject="perf: cache parsed configs"),
        Commit(sha="misc444", subject="Merge branch 'main'"),
    ]


def _git(cwd: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True)


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Path:
    """A git repository with a tagged first commit and a few commits after it."""
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test")
    _git(repo, "config", "commit.gpgsign", "false")

    messages = [
        "chore: initial commit",
        "feat(api): add search endpoint",
        "fix: handle empty query\n\nThe endpoint crashed on blank input.\nNow returns 400.",
        "refactor!: drop python 3.10",
    ]
    for i, message in enumerate(messages):
        (repo / f"file{i}.txt").write_text(f"{i}\n")
        _git(repo, "add", ".")
        _git(repo, "commit", "-q", "-m", message)
        if i == 0:
            _git(repo, "tag", "v0.1.0")
    return repo


@pytest.fixture
def temp_repo_with_pyproject(tmp_path: Path) -> Path:
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.devworkflow]
repo_path = "/srv/repo"

[tool.devworkflow.server]
name = "Test Workflow"

[tool.devworkflow.release]
command = ["npx", "semantic-release"]
"""
    )
    return tmp_path
