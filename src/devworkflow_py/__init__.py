"""devworkflow-py: developer-workflow tools for agents.

Infers semantic version bumps from conventional commits, guards PR titles
against under-declared releases, previews semantic-release dry runs and
builds grouped changelogs. The tools are served over MCP.
"""

from __future__ import annotations

__version__ = "0.1.0"
