"""Shared pieces of the tool definitions."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mcp.types import Tool, ToolAnnotations

from ..exceptions import JiraMCPError
from ..jira import JiraClient
from ..models import ApiModel, PaginationInput
from ..result import Result

Handler = Callable[[JiraClient, Any], Result[Any, JiraMCPError]]


@dataclass(frozen=True)
class ToolDefinition:
    """A tool descriptor paired with its input model and handler."""

    tool: Tool
    input_model: type[ApiModel]
    handler: Handler

    @property
    def name(self) -> str:
        return self.tool.name

    @property
    def is_write(self) -> bool:
        annotations = self.tool.annotations
        return annotations is not None and annotations.readOnlyHint is False


def define_tool(
    name: str,
    description: str,
    input_model: type[ApiModel],
    handler: Handler,
    *,
    title: str,
    read_only: bool = True,
) -> ToolDefinition:
    """Build a ToolDefinition whose input schema is generated from the model."""
    tool = Tool(
        name=name,
        description=description,
        inputSchema=input_model.model_json_schema(by_alias=True),
        annotations=ToolAnnotations(title=title, readOnlyHint=read_only),
    )
    return ToolDefinition(tool=tool, input_model=input_model, handler=handler)


def query_params(**values: Any) -> dict[str, str]:
    """Render query parameters, dropping every falsy value (0 and "" included)."""
    return {key: str(value) for key, value in values.items() if value}


def pagination_params(data: PaginationInput) -> dict[str, str]:
    return query_params(startAt=data.start_at, maxResults=data.max_results)
