"""Implementation of the 'changelog' command."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from devworkflow_py.config import load_config
from devworkflow_py.core.changelog import generate_changelog
from devworkflow_py.exceptions import ConfigError, GitError
from devworkflow_py.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console


def run_changelog(
    path: str | None,
    since: str | None,
    until: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Print a grouped changelog for a revision range.

    Args:
        path: Repository path; falls back to REPO_PATH, then the cwd
        since: Exclusive start of the range
        until: Inclusive end of the range
        console: Console for standard output
        err_console: Console for error output
    """
    try:
        config = load_config(Path(path) if path else None)
    except ConfigError as e:
        err_console.print(f"[red]Error loading config:[/] {e}")
        raise SystemExit(1) from e

    repo_path = Path(path) if path else (config.repo_path or Path.cwd())

    try:
        repo = GitRepository(repo_path)
        result = generate_changelog(repo, since=since, until=until or config.changelog.default_until)
    except GitError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if not result.buckets:
        console.print(f"[yellow]No commits found in {result.range}.[/]")
        return

    console.print(f"[dim]Range: {result.range}[/]\n")
    console.print(result.sections, markup=False, highlight=False)
