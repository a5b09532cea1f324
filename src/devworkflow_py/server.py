"""FastMCP server exposing the tool registry over stdio.

FastMCP builds each tool's schema from the wrapper's signature, so every
registry tool gets a thin typed wrapper that forwards to
``ToolRegistry.call``. Parameter names stay camelCase to match the wire
format.
"""

from __future__ import annotations

import logging
from typing import Any

from fastmcp import FastMCP

from devworkflow_py.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def build_app(registry: ToolRegistry) -> FastMCP:
    """Create a FastMCP app with every registry tool registered."""
    app = FastMCP(registry.config.server.name)

    def result(name: str, arguments: dict[str, Any] | None = None) -> Any:
        return registry.call(name, arguments)["result"]

    def health_ping() -> dict[str, Any]:
        return result("health.ping")

    def release_dry_run(repoPath: str | None = None, branch: str | None = None) -> dict[str, Any]:  # noqa: N803
        return result("release.dryRun", {"repoPath": repoPath, "branch": branch})

    def version_guard(prTitle: str, commits: list[str] | None = None) -> dict[str, Any]:  # noqa: N803
        return result("git.versionGuard", {"prTitle": prTitle, "commits": commits})

    def infer_bump(commits: list[str]) -> dict[str, Any]:
        return result("git.inferBump", {"commits": commits})

    def changelog(
        repoPath: str | None = None,  # noqa: N803
        since: str | None = None,
        until: str | None = None,
    ) -> dict[str, Any]:
        return result("git.changelog", {"repoPath": repoPath, "since": since, "until": until})

    handlers = {
        "health.ping": health_ping,
        "release.dryRun": release_dry_run,
        "git.versionGuard": version_guard,
        "git.inferBump": infer_bump,
        "git.changelog": changelog,
    }
    for tool in registry:
        handler = handlers.get(tool.name)
        if handler is None:
            logger.warning("Tool %s has no MCP binding, skipping", tool.name)
            continue
        app.tool(name=tool.name, description=tool.description)(handler)
    return app


def serve(registry: ToolRegistry) -> None:
    """Run the MCP server on stdio until the client disconnects."""
    app = build_app(registry)
    logger.info(
        "Starting %s %s on stdio with %d tools",
        registry.config.server.name,
        registry.config.server.version,
        len(registry),
    )
    app.run()
