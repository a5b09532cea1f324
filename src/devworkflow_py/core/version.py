"""Semantic version bump levels.

BumpType is totally ordered by an explicit rank rather than by its string
value, so comparisons never depend on alphabetical order.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

_RANKS = {
    "none": 0,
    "patch": 1,
    "minor": 2,
    "major": 3,
}


class BumpType(StrEnum):
    """Semantic-versioning impact of a set of changes."""

    NONE = "none"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"

    @property
    def rank(self) -> int:
        """Position in the order none < patch < minor < major."""
        return _RANKS[self.value]


def highest_bump(bumps: Iterable[BumpType]) -> BumpType:
    """Return the highest-ranked bump, or NONE for an empty iterable."""
    return max(bumps, key=lambda b: b.rank, default=BumpType.NONE)
