"""Tests for the git log collaborator."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from devworkflow_py.exceptions import GitError
from devworkflow_py.vcs.git import Commit, GitRepository, parse_log_output


class TestCommit:
    """Tests for Commit.from_message()."""

    def test_subject_only(self):
        commit = Commit.from_message("feat: add login")

        assert commit.subject == "feat: add login"
        assert commit.body == ""

    def test_subject_and_body(self):
        commit = Commit.from_message("fix: crash\n\nDetails here.\nMore details.", sha="abc")

        assert commit.sha == "abc"
        assert commit.subject == "fix: crash"
        assert commit.body == "Details here.\nMore details."

    def test_leading_whitespace_kept(self):
        """Only trailing whitespace is trimmed from the subject."""
        commit = Commit.from_message("  feat: indented  \nbody")

        assert commit.subject == "  feat: indented"


class TestParseLogOutput:
    """Tests for parse_log_output()."""

    def test_multi_line_bodies(self):
        output = (
            "feat: a\x1f\x1fsha1\x1e\n"
            "fix: b\x1fline one\nline two\n\x1fsha2\x1e"
        )

        commits = parse_log_output(output)

        assert commits == [
            Commit(sha="sha1", subject="feat: a", body=""),
            Commit(sha="sha2", subject="fix: b", body="line one\nline two"),
        ]

    def test_empty(self):
        assert parse_log_output("") == []


class TestGitRepository:
    """Tests for GitRepository."""

    def test_not_a_directory(self, tmp_path: Path):
        with pytest.raises(GitError, match="Not a directory"):
            GitRepository(tmp_path / "missing")

    def test_not_a_repository(self, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.CalledProcessError(
                128, "git", stderr="fatal: not a git repository"
            )

            with pytest.raises(GitError, match="Not a git repository"):
                GitRepository(tmp_path)

    def test_git_not_installed(self, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError("git")

            with pytest.raises(GitError):
                GitRepository(tmp_path)

    def test_get_log_failure(self, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = [
                MagicMock(stdout=".git\n", returncode=0),
                subprocess.CalledProcessError(
                    128, "git", stderr="fatal: bad revision 'nope..HEAD'"
                ),
            ]
            repo = GitRepository(tmp_path)

            with pytest.raises(GitError, match="bad revision"):
                repo.get_log("nope..HEAD")

    def test_get_log_real_repository(self, temp_git_repo: Path):
        repo = GitRepository(temp_git_repo)

        commits = repo.get_log("v0.1.0..HEAD")

        assert [c.subject for c in commits] == [
            "refactor!: drop python 3.10",
            "fix: handle empty query",
            "feat(api): add search endpoint",
        ]
        assert commits[1].body == "The endpoint crashed on blank input.\nNow returns 400."
        assert all(len(c.sha) == 40 for c in commits)

    def test_get_log_range_is_never_an_option(self, temp_git_repo: Path):
        """A range that looks like a git option is rejected as a revision."""
        target = temp_git_repo / "written-by-git.txt"
        repo = GitRepository(temp_git_repo)

        with pytest.raises(GitError):
            repo.get_log(f"--output={target}")

        assert not target.exists()

    def test_get_log_passes_end_of_options(self, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="", returncode=0)
            repo = GitRepository(tmp_path)

            repo.get_log("v1.0.0..HEAD")

        args = mock_run.call_args.args[0]
        assert args[-2:] == ["--end-of-options", "v1.0.0..HEAD"]
