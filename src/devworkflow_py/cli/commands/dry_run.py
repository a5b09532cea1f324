"""Implementation of the 'dry-run' command.

Runs semantic-release without publishing and shows what it would do.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.panel import Panel

from devworkflow_py.config import load_config
from devworkflow_py.core.release import run_release_dry_run
from devworkflow_py.exceptions import ConfigError

if TYPE_CHECKING:
    from rich.console import Console


def run_dry_run(
    path: str | None,
    branch: str | None,
    show_raw: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the dry-run command.

    Args:
        path: Repository path; falls back to REPO_PATH, then the cwd
        branch: Branch to release from
        show_raw: Print semantic-release's full output
        console: Console for standard output
        err_console: Console for error output
    """
    try:
        config = load_config(Path(path) if path else None)
    except ConfigError as e:
        err_console.print(f"[red]Error loading config:[/] {e}")
        raise SystemExit(1) from e

    repo_path = Path(path) if path else (config.repo_path or Path.cwd())
    result = run_release_dry_run(repo_path, config, branch=branch)
    parsed = result.parsed

    if show_raw:
        console.print(result.raw, markup=False, highlight=False)

    if parsed.next_version:
        console.print(
            Panel(
                f"Next version: [green]{parsed.next_version}[/]\n"
                f"Release type: [cyan]{parsed.release_type.value}[/]",
                title="[yellow]Dry Run Preview[/]",
                border_style="yellow",
            )
        )
        if parsed.notes:
            console.print(parsed.notes, markup=False, highlight=False)
    else:
        console.print("[yellow]No release would be published.[/]")

    if not result.ok:
        err_console.print(f"[red]semantic-release exited with code {result.code}[/]")
        raise SystemExit(1)
