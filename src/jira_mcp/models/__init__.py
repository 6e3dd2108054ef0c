"""
Pydantic models for tool inputs and Jira responses.
"""

from .base import ApiModel
from .inputs import (
    CreateIssueInput,
    ListBoardsInput,
    ListIssuesFromSprintCsvInput,
    ListIssuesFromSprintInput,
    ListProjectsInput,
    ListSprintsFromBoardInput,
    PaginationInput,
)
from .issue import (
    JiraIssueRef,
    JiraNamed,
    JiraUserRef,
    SprintIssue,
    SprintIssueFields,
    SprintIssuesResponse,
)

__all__ = [
    "ApiModel",
    "CreateIssueInput",
    "JiraIssueRef",
    "JiraNamed",
    "JiraUserRef",
    "ListBoardsInput",
    "ListIssuesFromSprintCsvInput",
    "ListIssuesFromSprintInput",
    "ListProjectsInput",
    "ListSprintsFromBoardInput",
    "PaginationInput",
    "SprintIssue",
    "SprintIssueFields",
    "SprintIssuesResponse",
]
