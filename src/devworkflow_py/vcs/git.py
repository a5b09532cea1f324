"""Git log access.

Only the pieces the changelog needs: commit subject, body and hash for a
revision range. git is called as a subprocess and its output parsed.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from devworkflow_py.exceptions import GitError

logger = logging.getLogger(__name__)

# ASCII unit and record separators keep multi-line bodies intact.
_FIELD_SEP = "\x1f"
_RECORD_SEP = "\x1e"
_LOG_FORMAT = "%s%x1f%b%x1f%H%x1e"


@dataclass(frozen=True)
class Commit:
    """A commit reduced to subject, body and hash."""

    sha: str
    subject: str
    body: str = ""

    @classmethod
    def from_message(cls, message: str, sha: str = "") -> Commit:
        """Split a raw commit message into subject (first line) and body."""
        subject, _, body = message.partition("\n")
        return cls(sha=sha, subject=subject.rstrip(), body=body.strip())


class GitRepository:
    """A local git working tree."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).resolve()
        if not self.path.is_dir():
            raise GitError(f"Not a directory: {self.path}")
        try:
            self._run("rev-parse", "--git-dir")
        except GitError as e:
            raise GitError(f"Not a git repository: {self.path}", stderr=e.stderr) from e

    def _run(self, *args: str) -> str:
        try:
            result = subprocess.run(
                ["git", *args],
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout

    def get_log(self, revision_range: str = "HEAD") -> list[Commit]:
        """Return the commits in ``revision_range``, newest first.

        Args:
            revision_range: Anything ``git log`` accepts, e.g. ``v1.0.0..HEAD``

        Raises:
            GitError: If git log fails (unknown revision, empty repository)
        """
        # Revisions come from callers; never let git read them as options.
        output = self._run(
            "log", f"--pretty=format:{_LOG_FORMAT}", "--end-of-options", revision_range
        )
        commits = parse_log_output(output)
        logger.debug("Read %d commits from %s in %s", len(commits), revision_range, self.path)
        return commits


def parse_log_output(output: str) -> list[Commit]:
    """Parse output produced with the separator-delimited log format."""
    commits = []
    for record in output.split(_RECORD_SEP):
        if not record.strip():
            continue
        fields = record.strip("\n").split(_FIELD_SEP)
        subject = fields[0].strip()
        body = fields[1].strip() if len(fields) > 1 else ""
        sha = fields[2].strip() if len(fields) > 2 else ""
        commits.append(Commit(sha=sha, subject=subject, body=body))
    return commits
