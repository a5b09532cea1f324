"""Implementation of the 'serve' and 'tools' commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.table import Table

from devworkflow_py.config import load_config
from devworkflow_py.exceptions import ConfigError
from devworkflow_py.tools import create_registry

if TYPE_CHECKING:
    from rich.console import Console

    from devworkflow_py.tools import ToolRegistry


def _registry(path: str | None, err_console: Console) -> ToolRegistry:
    try:
        config = load_config(Path(path) if path else None)
    except ConfigError as e:
        err_console.print(f"[red]Error loading config:[/] {e}")
        raise SystemExit(1) from e
    return create_registry(config)


def run_serve(path: str | None, err_console: Console) -> None:
    """Serve the tools over MCP stdio."""
    from devworkflow_py.server import serve

    serve(_registry(path, err_console))


def run_list_tools(path: str | None, console: Console, err_console: Console) -> None:
    """Print the available tools and their arguments."""
    registry = _registry(path, err_console)

    table = Table(title="Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Arguments")
    table.add_column("Description")
    for tool in registry.list_tools():
        schema = tool["inputSchema"] or {}
        required = set(schema.get("required", []))
        arguments = ", ".join(
            name if name in required else f"{name}?" for name in schema.get("properties", {})
        )
        table.add_row(tool["name"], arguments or "-", tool["description"])
    console.print(table)
