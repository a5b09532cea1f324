"""Release dry runs via semantic-release.

semantic-release is called as a subprocess in ``--dry-run`` mode and its
human-readable output is scraped for the next version, the release type
and the release notes. The output has no formal grammar, so parsing is
best effort: missing markers degrade to "no version", ``none`` and empty
notes. The process exit code is reported next to the parse result and
never stops parsing.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from devworkflow_py.core.version import BumpType

if TYPE_CHECKING:
    from devworkflow_py.config.models import DevWorkflowConfig

logger = logging.getLogger(__name__)

# Reported when semantic-release could not be started at all.
PROCESS_ERROR_CODE = 127


@dataclass(frozen=True)
class ReleaseOutputPatterns:
    """Markers recognised in semantic-release output."""

    next_version: re.Pattern[str] = re.compile(
        r"next release version is\s+(\d+\.\d+\.\d+(?:-[\w.-]+)?)", re.IGNORECASE
    )
    release_type: re.Pattern[str] = re.compile(
        r"Release type:\s*(major|minor|patch)", re.IGNORECASE
    )
    notes_marker: str = "\n\n### "


DEFAULT_PATTERNS = ReleaseOutputPatterns()


@dataclass(frozen=True)
class ReleaseParseResult:
    """Structured view of a dry-run's output."""

    next_version: str | None
    release_type: BumpType
    notes: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "nextVersion": self.next_version,
            "releaseType": str(self.release_type),
            "notes": self.notes,
        }


@dataclass(frozen=True)
class DryRunResult:
    """Outcome of running semantic-release in dry mode."""

    code: int
    parsed: ReleaseParseResult
    raw: str

    @property
    def ok(self) -> bool:
        return self.code == 0

    def to_dict(self) -> dict[str, Any]:
        return {"ok": self.ok, "code": self.code, **self.parsed.to_dict(), "raw": self.raw}


def parse_release_output(
    text: str,
    patterns: ReleaseOutputPatterns = DEFAULT_PATTERNS,
) -> ReleaseParseResult:
    """Parse the combined stdout/stderr of a semantic-release dry run.

    Args:
        text: Raw output
        patterns: Markers to look for

    Returns:
        ReleaseParseResult. ``release_type`` falls back to PATCH when a
        version is found without an explicit type, and to NONE when
        neither is found.
    """
    version_match = patterns.next_version.search(text)
    type_match = patterns.release_type.search(text)

    next_version = version_match.group(1) if version_match else None
    if type_match:
        release_type = BumpType(type_match.group(1).lower())
    elif next_version:
        release_type = BumpType.PATCH
    else:
        release_type = BumpType.NONE

    notes_start = text.find(patterns.notes_marker)
    # Skip the blank line, keep the heading.
    notes = text[notes_start + 2 :].strip() if notes_start >= 0 else ""

    return ReleaseParseResult(next_version=next_version, release_type=release_type, notes=notes)


def semantic_release_command(config: DevWorkflowConfig | None = None) -> list[str]:
    """Resolve how to invoke semantic-release.

    Uses the configured command, then a ``semantic-release`` binary on
    PATH, then ``npx semantic-release``.
    """
    if config is not None and config.release.command:
        return list(config.release.command)
    binary = shutil.which("semantic-release")
    if binary:
        return [binary]
    return ["npx", "semantic-release"]


def build_dry_run_args(
    config: DevWorkflowConfig | None = None,
    branch: str | None = None,
) -> list[str]:
    args = [*semantic_release_command(config), "--dry-run"]
    if config is None or config.release.no_ci:
        args.append("--no-ci")
    if branch:
        args.extend(["--branches", branch])
    return args


def run_release_dry_run(
    repo_path: Path,
    config: DevWorkflowConfig | None = None,
    *,
    branch: str | None = None,
) -> DryRunResult:
    """Run semantic-release in dry mode and parse what it would release.

    Args:
        repo_path: Repository to run in
        config: Configuration (command override, GitHub token)
        branch: Restrict the release to this branch

    Returns:
        DryRunResult. Parsing happens regardless of the exit code; a
        process that cannot be started is reported with code 127.
    """
    args = build_dry_run_args(config, branch)
    token = (config.github_token if config else None) or os.environ.get("GITHUB_TOKEN", "")
    child_env = {**os.environ, "GITHUB_TOKEN": token, "GH_TOKEN": token}

    logger.debug("Running %s in %s", " ".join(args), repo_path)
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            check=False,
            cwd=repo_path,
            env=child_env,
        )
    except OSError as e:
        logger.warning("Could not start semantic-release: %s", e)
        raw = str(e)
        return DryRunResult(code=PROCESS_ERROR_CODE, parsed=parse_release_output(raw), raw=raw)

    combined = f"{result.stdout or ''}\n{result.stderr or ''}"
    if result.returncode != 0:
        logger.warning("semantic-release exited with code %d", result.returncode)
    return DryRunResult(code=result.returncode, parsed=parse_release_output(combined), raw=combined)
