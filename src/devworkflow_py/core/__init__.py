"""Core business logic for devworkflow-py.

This module contains the fundamental building blocks:
- Version bump levels and their ordering
- Conventional commit classification and bump inference
- PR title version guard
- semantic-release dry-run parsing
- Changelog bucketing
"""

from __future__ import annotations

from devworkflow_py.core.changelog import (
    ChangelogBucket,
    ChangelogResult,
    bucket_changelog,
    generate_changelog,
    render_sections,
    revision_range,
)
from devworkflow_py.core.commits import CommitCategory, classify_commit, infer_bump
from devworkflow_py.core.guard import GuardVerdict, check_version_guard, extract_declared_bump
from devworkflow_py.core.release import (
    DryRunResult,
    ReleaseOutputPatterns,
    ReleaseParseResult,
    parse_release_output,
    run_release_dry_run,
)
from devworkflow_py.core.version import BumpType

__all__ = [
    # Version
    "BumpType",
    # Changelog
    "ChangelogBucket",
    "ChangelogResult",
    # Commits
    "CommitCategory",
    # Release
    "DryRunResult",
    # Guard
    "GuardVerdict",
    "ReleaseOutputPatterns",
    "ReleaseParseResult",
    "bucket_changelog",
    "check_version_guard",
    "classify_commit",
    "extract_declared_bump",
    "generate_changelog",
    "infer_bump",
    "parse_release_output",
    "render_sections",
    "revision_range",
    "run_release_dry_run",
]
