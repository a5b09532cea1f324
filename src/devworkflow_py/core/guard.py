"""PR title version guard.

A PR title declares its release impact with a tag such as
``[Release][MINOR]``. The guard checks that the tag is present and that it
is not lower than the bump implied by the PR's commits.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from devworkflow_py.core.commits import infer_bump
from devworkflow_py.core.version import BumpType
from devworkflow_py.vcs.git import Commit

logger = logging.getLogger(__name__)

DECLARED_BUMP_PATTERN = re.compile(r"\[Release\]\s*\[(MAJOR|MINOR|PATCH)\]", re.IGNORECASE)

MISSING_TAG_VIOLATION = "PR title missing [Release][MAJOR|MINOR|PATCH] tag."


@dataclass
class GuardVerdict:
    """Result of comparing a declared bump with the inferred one."""

    declared: BumpType | None
    inferred: BumpType
    violations: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def to_dict(self) -> dict[str, Any]:
        return {
            "declared": str(self.declared) if self.declared else None,
            "inferred": None if self.inferred is BumpType.NONE else str(self.inferred),
            "ok": self.ok,
            "violations": list(self.violations),
        }


def extract_declared_bump(pr_title: str) -> BumpType | None:
    """Extract the ``[Release][MAJOR|MINOR|PATCH]`` tag from a PR title.

    Matching is case-insensitive and the tag may appear anywhere.

    Returns:
        The declared bump, or None when the title has no tag
    """
    match = DECLARED_BUMP_PATTERN.search(pr_title)
    if match is None:
        return None
    return BumpType(match.group(1).lower())


def check_version_guard(
    pr_title: str,
    commits: Sequence[Commit | str] | None = None,
) -> GuardVerdict:
    """Validate a PR title's declared bump against its commits.

    Args:
        pr_title: The PR title
        commits: Commit messages in the PR, if known

    Returns:
        GuardVerdict; ``ok`` is False when the tag is missing or lower
        than the bump the commits imply
    """
    declared = extract_declared_bump(pr_title)
    inferred = infer_bump(commits) if commits else BumpType.NONE

    violations = []
    if declared is None:
        violations.append(MISSING_TAG_VIOLATION)
    if inferred is not BumpType.NONE and declared is not None and declared.rank < inferred.rank:
        violations.append(
            f"Declared {declared.value.upper()} but commits imply {inferred.value.upper()}."
        )

    verdict = GuardVerdict(declared=declared, inferred=inferred, violations=violations)
    logger.debug(
        "Version guard: declared=%s inferred=%s ok=%s", declared, inferred, verdict.ok
    )
    return verdict
