"""Conventional commit classification and bump inference.

Each commit is matched against an ordered list of rules; the first rule
that matches decides its category. The overall bump for a set of commits
is the highest category seen anywhere in the set, so one breaking change
among a hundred fixes still means a major release.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from enum import StrEnum

from devworkflow_py.core.version import BumpType, highest_bump
from devworkflow_py.vcs.git import Commit

logger = logging.getLogger(__name__)

BREAKING_MARKER_PATTERN = re.compile(r"BREAKING CHANGE", re.IGNORECASE)
BANG_MARKER = "!:"

FEATURE_PATTERN = re.compile(r"^feat[(:]", re.IGNORECASE)
FIX_PATTERN = re.compile(r"^fix[(:]", re.IGNORECASE)
PERFORMANCE_PATTERN = re.compile(r"^perf[(:]", re.IGNORECASE)

# Types that trigger a patch release, even though several of them are
# grouped under "Other" in the changelog.
PATCH_TYPES = (
    "fix",
    "perf",
    "refactor",
    "revert",
    "chore",
    "build",
    "ci",
    "docs",
    "style",
    "test",
)
PATCH_PATTERN = re.compile(rf"^(?:{'|'.join(PATCH_TYPES)})[(:]", re.IGNORECASE)


class CommitCategory(StrEnum):
    """Version impact of a single commit."""

    BREAKING = "breaking"
    FEATURE = "feature"
    FIX = "fix"
    PERFORMANCE = "performance"
    PATCH = "patch"
    NONE = "none"

    @property
    def bump(self) -> BumpType:
        return _CATEGORY_BUMPS[self]


_CATEGORY_BUMPS = {
    CommitCategory.BREAKING: BumpType.MAJOR,
    CommitCategory.FEATURE: BumpType.MINOR,
    CommitCategory.FIX: BumpType.PATCH,
    CommitCategory.PERFORMANCE: BumpType.PATCH,
    CommitCategory.PATCH: BumpType.PATCH,
    CommitCategory.NONE: BumpType.NONE,
}

CommitPredicate = Callable[[Commit], bool]


def is_breaking(commit: Commit) -> bool:
    """True if the commit carries a BREAKING CHANGE marker or a ``!:`` subject."""
    return (
        BREAKING_MARKER_PATTERN.search(commit.subject) is not None
        or BREAKING_MARKER_PATTERN.search(commit.body) is not None
        or BANG_MARKER in commit.subject
    )


def is_feature(commit: Commit) -> bool:
    return FEATURE_PATTERN.match(commit.subject) is not None


def is_fix(commit: Commit) -> bool:
    return FIX_PATTERN.match(commit.subject) is not None


def is_performance(commit: Commit) -> bool:
    return PERFORMANCE_PATTERN.match(commit.subject) is not None


def is_patch(commit: Commit) -> bool:
    return PATCH_PATTERN.match(commit.subject) is not None


# Evaluated in order; the first matching rule wins.
CLASSIFICATION_RULES: tuple[tuple[CommitPredicate, CommitCategory], ...] = (
    (is_breaking, CommitCategory.BREAKING),
    (is_feature, CommitCategory.FEATURE),
    (is_fix, CommitCategory.FIX),
    (is_performance, CommitCategory.PERFORMANCE),
    (is_patch, CommitCategory.PATCH),
)


def as_commit(commit: Commit | str) -> Commit:
    """Accept either a Commit or a raw commit message."""
    if isinstance(commit, Commit):
        return commit
    return Commit.from_message(commit)


def classify_commit(commit: Commit | str) -> CommitCategory:
    """Classify one commit message.

    Args:
        commit: A Commit, or a raw message whose first line is the subject

    Returns:
        The category of the first matching rule, or NONE
    """
    commit = as_commit(commit)
    for predicate, category in CLASSIFICATION_RULES:
        if predicate(commit):
            return category
    return CommitCategory.NONE


def infer_bump(commits: Iterable[Commit | str]) -> BumpType:
    """Infer the overall version bump implied by a set of commits.

    Args:
        commits: Commits or raw commit messages, in any order

    Returns:
        MAJOR if any commit is breaking, else MINOR if any is a feature,
        else PATCH if any is patch-eligible, else NONE
    """
    bump = highest_bump(classify_commit(c).bump for c in commits)
    logger.debug("Inferred %s bump", bump)
    return bump
