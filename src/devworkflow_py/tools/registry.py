"""Tool registry: listing, argument validation and dispatch.

A tool is a name, a description, an optional pydantic input model and a
handler. ``call`` validates the raw arguments against the input model
before the handler runs and wraps the handler's return value in a
``{"result": ...}`` envelope.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from devworkflow_py.config.models import DevWorkflowConfig
from devworkflow_py.exceptions import ToolInputError, ToolNotFoundError

logger = logging.getLogger(__name__)

ToolHandler = Callable[[Any, DevWorkflowConfig], Any]


@dataclass(frozen=True)
class Tool:
    """A callable tool."""

    name: str
    description: str
    handler: ToolHandler
    input_model: type[BaseModel] | None = None

    def input_schema(self) -> dict[str, Any] | None:
        if self.input_model is None:
            return None
        return self.input_model.model_json_schema(by_alias=True)

    def parse_arguments(self, arguments: dict[str, Any] | None) -> BaseModel | None:
        """Validate raw arguments.

        Raises:
            ToolInputError: Naming the first missing or invalid field
        """
        if self.input_model is None:
            return None
        try:
            return self.input_model.model_validate(arguments or {})
        except ValidationError as e:
            raise _input_error(self.name, e) from e


def _input_error(tool_name: str, error: ValidationError) -> ToolInputError:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or None
    if first["type"] == "missing":
        message = f"Missing required field: {field}"
    else:
        message = f"Invalid field {field}: {first['msg']}"
    logger.debug("Rejected arguments for %s: %s", tool_name, message)
    return ToolInputError(message, field=field)


class ToolRegistry:
    """Tools available to clients, keyed by name."""

    def __init__(self, config: DevWorkflowConfig | None = None) -> None:
        self.config = config or DevWorkflowConfig()
        self._tools: dict[str, Tool] = {}

    def add(self, tool: Tool) -> None:
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self):
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def list_tools(self) -> list[dict[str, Any]]:
        """Describe every registered tool, in registration order."""
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.input_schema(),
            }
            for tool in self._tools.values()
        ]

    def call(self, name: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
        """Validate arguments and run a tool.

        Returns:
            ``{"result": <handler return value>}``

        Raises:
            ToolNotFoundError: If no tool has this name
            ToolInputError: If the arguments fail validation
        """
        tool = self.get(name)
        params = tool.parse_arguments(arguments)
        logger.debug("Calling tool %s", name)
        return {"result": tool.handler(params, self.config)}
