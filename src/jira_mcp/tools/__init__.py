"""
Registry of the Jira MCP tools.

``TOOL_DEFINITIONS`` maps each tool name to its definition; ``TOOLS`` is the
catalog returned to ``tools/list`` callers, reads first, then writes.
"""

from mcp.types import Tool

from .base import ToolDefinition, define_tool
from .boards import LIST_BOARDS_TOOL
from .issues import CREATE_ISSUE_TOOL, LIST_ISSUES_FROM_SPRINT_TOOL
from .projects import LIST_PROJECTS_TOOL
from .sprint_csv import LIST_ISSUES_FROM_SPRINT_CSV_TOOL
from .sprints import LIST_SPRINTS_FROM_BOARD_TOOL


def _build_registry(*definitions: ToolDefinition) -> dict[str, ToolDefinition]:
    registry: dict[str, ToolDefinition] = {}
    for definition in definitions:
        if definition.name in registry:
            raise ValueError(f"Duplicate tool name: {definition.name}")
        registry[definition.name] = definition
    return registry


TOOL_DEFINITIONS: dict[str, ToolDefinition] = _build_registry(
    # list
    LIST_PROJECTS_TOOL,
    LIST_BOARDS_TOOL,
    LIST_SPRINTS_FROM_BOARD_TOOL,
    LIST_ISSUES_FROM_SPRINT_TOOL,
    LIST_ISSUES_FROM_SPRINT_CSV_TOOL,
    # create
    CREATE_ISSUE_TOOL,
)

TOOLS: list[Tool] = [definition.tool for definition in TOOL_DEFINITIONS.values()]


def get_tool_definition(name: str) -> ToolDefinition | None:
    return TOOL_DEFINITIONS.get(name)


__all__ = [
    "TOOLS",
    "TOOL_DEFINITIONS",
    "ToolDefinition",
    "define_tool",
    "get_tool_definition",
]
