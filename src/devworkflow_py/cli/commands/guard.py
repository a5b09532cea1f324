"""Implementation of the 'guard' and 'bump' commands.

Both work purely on the text they are given; no repository is needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel

from devworkflow_py.core.commits import classify_commit, infer_bump
from devworkflow_py.core.guard import check_version_guard

if TYPE_CHECKING:
    from rich.console import Console


def run_guard(
    pr_title: str,
    commits: list[str],
    console: Console,
    err_console: Console,
) -> None:
    """Run the version guard on a PR title.

    Args:
        pr_title: PR title to check
        commits: Commit messages belonging to the PR
        console: Console for standard output
        err_console: Console for error output

    Raises:
        SystemExit: With code 1 when the guard fails
    """
    verdict = check_version_guard(pr_title, commits)

    declared = verdict.declared.value.upper() if verdict.declared else "[dim]none[/]"
    console.print(f"Declared: [cyan]{declared}[/]")
    console.print(f"Inferred: [cyan]{verdict.inferred.value.upper()}[/]")

    if verdict.ok:
        console.print(Panel("[green]Version guard passed[/]", border_style="green"))
        return

    err_console.print(
        Panel(
            "\n".join(f"• {escape(violation)}" for violation in verdict.violations),
            title="[red]Version guard failed[/]",
            border_style="red",
        )
    )
    raise SystemExit(1)


def run_bump(commits: list[str], console: Console) -> None:
    """Print each commit's category and the overall bump."""
    for message in commits:
        subject = message.partition("\n")[0]
        console.print(f"  [dim]{classify_commit(message).value:>11}[/]  {escape(subject)}")
    console.print(f"\nBump: [green]{infer_bump(commits).value}[/]")
