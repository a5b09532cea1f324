"""Tools exposed to agents."""

from __future__ import annotations

from devworkflow_py.tools.builtin import BUILTIN_TOOLS, create_registry
from devworkflow_py.tools.registry import Tool, ToolRegistry

__all__ = ["BUILTIN_TOOLS", "Tool", "ToolRegistry", "create_registry"]
