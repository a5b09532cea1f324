"""Version control access."""

from __future__ import annotations

from devworkflow_py.vcs.git import Commit, GitRepository, parse_log_output

__all__ = ["Commit", "GitRepository", "parse_log_output"]
