"""Changelog generation from git history.

Commits are sorted into five fixed sections. The grouping rules are
narrower than the bump rules in ``core.commits``: ``refactor``, ``chore``,
``docs`` and friends trigger a patch release but are listed under
"Other" here, since the two answer different questions.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from devworkflow_py.core.commits import as_commit
from devworkflow_py.vcs.git import Commit

if TYPE_CHECKING:
    from devworkflow_py.vcs.git import GitRepository

logger = logging.getLogger(__name__)

# Unlike bump inference, a "!:" anywhere in the body also counts here.
_BREAKING_PATTERN = re.compile(r"BREAKING CHANGE|!:", re.IGNORECASE)


def _subject_prefix(commit_type: str) -> Callable[[Commit], bool]:
    pattern = re.compile(rf"^{commit_type}[(:]", re.IGNORECASE)
    return lambda commit: pattern.match(commit.subject) is not None


def _is_breaking(commit: Commit) -> bool:
    return (
        _BREAKING_PATTERN.search(commit.body) is not None
        or _BREAKING_PATTERN.search(commit.subject) is not None
    )


@dataclass
class ChangelogBucket:
    """One changelog section."""

    key: str
    title: str
    items: list[str] = field(default_factory=list)

    def render(self) -> str:
        return "\n".join([f"### {self.title}", *self.items])


# (key, title) in display order.
BUCKET_TITLES: tuple[tuple[str, str], ...] = (
    ("breaking", "💥 Breaking Changes"),
    ("feat", "✨ Features"),
    ("fix", "🐛 Fixes"),
    ("perf", "⚡ Performance"),
    ("other", "🧰 Other"),
)

# First match wins; anything unmatched goes to "other".
BUCKET_RULES: tuple[tuple[Callable[[Commit], bool], str], ...] = (
    (_is_breaking, "breaking"),
    (_subject_prefix("feat"), "feat"),
    (_subject_prefix("fix"), "fix"),
    (_subject_prefix("perf"), "perf"),
)


def bucket_key(commit: Commit) -> str:
    """Return the key of the section a commit belongs in."""
    for predicate, key in BUCKET_RULES:
        if predicate(commit):
            return key
    return "other"


def format_changelog_item(commit: Commit) -> str:
    return f"- {commit.subject}"


def bucket_changelog(records: Iterable[Commit | str]) -> list[ChangelogBucket]:
    """Sort commits into changelog sections.

    Args:
        records: Commits (or raw messages) in the order they should appear

    Returns:
        The non-empty buckets in display order
    """
    buckets = {key: ChangelogBucket(key=key, title=title) for key, title in BUCKET_TITLES}
    for record in records:
        commit = as_commit(record)
        buckets[bucket_key(commit)].items.append(format_changelog_item(commit))
    return [bucket for bucket in buckets.values() if bucket.items]


def render_sections(buckets: Iterable[ChangelogBucket]) -> str:
    """Render buckets as markdown sections separated by blank lines."""
    return "\n\n".join(bucket.render() for bucket in buckets if bucket.items)


def revision_range(since: str | None = None, until: str | None = None) -> str:
    """Build a git revision range.

    ``since..until`` when ``since`` is given (``until`` defaulting to
    HEAD), otherwise just ``until`` or HEAD.
    """
    if since:
        return f"{since}..{until or 'HEAD'}"
    return until or "HEAD"


@dataclass
class ChangelogResult:
    """Changelog text for a revision range."""

    range: str
    buckets: list[ChangelogBucket]

    @property
    def sections(self) -> str:
        return render_sections(self.buckets)

    def to_dict(self) -> dict[str, Any]:
        return {"range": self.range, "sections": self.sections}


def generate_changelog(
    repo: GitRepository,
    since: str | None = None,
    until: str | None = None,
) -> ChangelogResult:
    """Generate a changelog for the commits between two points.

    Args:
        repo: Git repository
        since: Exclusive start (tag, branch or sha)
        until: Inclusive end, HEAD by default

    Returns:
        ChangelogResult with the range and grouped sections

    Raises:
        GitError: If git log fails
    """
    rev_range = revision_range(since, until)
    commits = repo.get_log(rev_range)
    buckets = bucket_changelog(commits)
    logger.debug(
        "Changelog for %s: %s",
        rev_range,
        ", ".join(f"{b.key}={len(b.items)}" for b in buckets) or "empty",
    )
    return ChangelogResult(range=rev_range, buckets=buckets)
