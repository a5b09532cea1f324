"""Exception hierarchy for devworkflow-py.

Core classification and parsing functions never raise. These exceptions
cover the boundaries: configuration, the git collaborator, and tool
dispatch.
"""

from __future__ import annotations


class DevWorkflowError(Exception):
    """Base class for all devworkflow-py errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(DevWorkflowError):
    """Configuration could not be loaded or is invalid."""


class ConfigNotFoundError(ConfigError):
    """A configuration file could not be found."""


class ConfigValidationError(ConfigError):
    """Configuration values failed validation."""


class MissingEnvError(ConfigError):
    """A required environment variable is not set."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing env: {key}")


# =============================================================================
# Version control
# =============================================================================


class GitError(DevWorkflowError):
    """A git command failed."""

    def __init__(self, message: str, *, stderr: str | None = None) -> None:
        self.stderr = stderr
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.stderr:
            return f"{message}: {self.stderr.strip()}"
        return message


# =============================================================================
# Tool dispatch
# =============================================================================


class ToolError(DevWorkflowError):
    """Base class for tool dispatch errors."""


class ToolNotFoundError(ToolError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")


class ToolInputError(ToolError):
    """Tool arguments failed validation before reaching the handler."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
