"""Command-line interface for devworkflow-py."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from devworkflow_py.log import setup_logging

app = typer.Typer(
    name="devworkflow",
    help="Version guard, release dry runs and changelogs for conventional commits.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

PathOption = Annotated[
    str | None,
    typer.Option("--path", "-p", help="Repository path (defaults to REPO_PATH, then cwd)"),
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    setup_logging(verbose)


@app.command()
def guard(
    pr_title: Annotated[str, typer.Argument(help="PR title, e.g. 'feat: x [Release][MINOR]'")],
    commit: Annotated[
        list[str] | None,
        typer.Option("--commit", "-c", help="Commit message in the PR (repeatable)"),
    ] = None,
) -> None:
    """Check a PR title's [Release][...] tag against its commits."""
    from devworkflow_py.cli.commands.guard import run_guard

    run_guard(pr_title, commit or [], console, err_console)


@app.command()
def bump(
    commits: Annotated[list[str], typer.Argument(help="Commit messages")],
) -> None:
    """Infer the version bump implied by commit messages."""
    from devworkflow_py.cli.commands.guard import run_bump

    run_bump(commits, console)


@app.command()
def changelog(
    path: PathOption = None,
    since: Annotated[str | None, typer.Option(help="Start of the range (exclusive)")] = None,
    until: Annotated[str | None, typer.Option(help="End of the range (default: HEAD)")] = None,
) -> None:
    """Generate a grouped changelog between two points."""
    from devworkflow_py.cli.commands.changelog import run_changelog

    run_changelog(path, since, until, console, err_console)


@app.command("dry-run")
def dry_run(
    path: PathOption = None,
    branch: Annotated[str | None, typer.Option("--branch", "-b", help="Release branch")] = None,
    raw: Annotated[bool, typer.Option("--raw", help="Show semantic-release output")] = False,
) -> None:
    """Preview the next release with semantic-release --dry-run."""
    from devworkflow_py.cli.commands.dry_run import run_dry_run

    run_dry_run(path, branch, raw, console, err_console)


@app.command()
def tools(path: PathOption = None) -> None:
    """List the tools the MCP server exposes."""
    from devworkflow_py.cli.commands.serve import run_list_tools

    run_list_tools(path, console, err_console)


@app.command()
def serve(path: PathOption = None) -> None:
    """Serve the tools over MCP (stdio)."""
    from devworkflow_py.cli.commands.serve import run_serve

    run_serve(path, err_console)


if __name__ == "__main__":
    app()
