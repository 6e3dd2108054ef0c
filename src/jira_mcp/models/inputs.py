"""
Input models for the Jira MCP tools.

The JSON schema of each model, generated with its camelCase aliases, is the
``inputSchema`` advertised for the tool.
"""

from typing import Literal

from pydantic import Field, StrictInt

from .base import ApiModel

SprintState = Literal["active", "closed", "future"]
BoardType = Literal["scrum", "kanban", "simple"]


class PaginationInput(ApiModel):
    """Optional paging controls shared by the list tools."""

    max_results: StrictInt | None = Field(
        default=None,
        alias="maxResults",
        ge=0,
        description="The maximum number of results to return, (default: 50, max: 100)",
    )
    start_at: StrictInt | None = Field(
        default=None,
        alias="startAt",
        ge=0,
        description="The starting index of the returned items",
    )


class ListProjectsInput(PaginationInput):
    query: str | None = Field(
        default=None,
        description="Filter projects by key or name (Jira Cloud only)",
    )


class ListBoardsInput(PaginationInput):
    type: BoardType | None = Field(
        default=None,
        description="Filter boards by type (scrum, kanban, or simple)",
    )
    name: str | None = Field(
        default=None,
        description="Filter boards whose name contains this text",
    )
    project_key_or_id: str | None = Field(
        default=None,
        alias="projectKeyOrId",
        description="Filter boards by project key or ID",
    )


class ListSprintsFromBoardInput(PaginationInput):
    board_id: str = Field(alias="boardId", description="The ID of the board")
    state: SprintState | None = Field(
        default=None,
        description="Filter sprints by state (active, closed, or future)",
    )


class ListIssuesFromSprintInput(PaginationInput):
    board_id: str = Field(alias="boardId", description="The ID of the board")
    sprint_id: str = Field(alias="sprintId", description="The ID of the sprint")


class ListIssuesFromSprintCsvInput(ListIssuesFromSprintInput):
    pass


class CreateIssueInput(ApiModel):
    project_key: str = Field(
        alias="projectKey",
        min_length=1,
        description="Key of the project to create the issue in (e.g. 'PROJ')",
    )
    summary: str = Field(min_length=1, description="Summary (title) of the issue")
    issue_type: str = Field(
        alias="issueType",
        min_length=1,
        description="Issue type name (e.g. 'Task', 'Bug', 'Story')",
    )
    description: str | None = Field(
        default=None, description="Description of the issue"
    )
    labels: list[str] | None = Field(
        default=None, description="Labels to attach to the issue"
    )
    parent_key: str | None = Field(
        default=None,
        alias="parentKey",
        description="Key of the parent issue (for sub-tasks and epic children)",
    )
    assignee: str | None = Field(
        default=None,
        description="Assignee account ID (Cloud) or user name (Server/Data Center)",
    )
