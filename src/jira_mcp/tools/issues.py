"""Sprint issue listing and issue creation tools."""

from typing import Any

from ..exceptions import JiraMCPError
from ..jira import JiraClient
from ..models import CreateIssueInput, ListIssuesFromSprintInput
from ..result import Result
from ..utils import quote_path_segment
from .base import define_tool, pagination_params

ISSUE_PATH = "/rest/api/2/issue"


def sprint_issues_path(board_id: str, sprint_id: str) -> str:
    return (
        f"/rest/agile/1.0/board/{quote_path_segment(board_id)}"
        f"/sprint/{quote_path_segment(sprint_id)}/issue"
    )


def list_issues_from_sprint(
    client: JiraClient, data: ListIssuesFromSprintInput
) -> Result[Any, JiraMCPError]:
    return client.get_json(
        sprint_issues_path(data.board_id, data.sprint_id), pagination_params(data)
    )


def build_issue_fields(data: CreateIssueInput, is_cloud: bool) -> dict[str, Any]:
    """Build the ``fields`` object of an issue creation request.

    Optional fields are only sent when they carry a value. Cloud identifies
    users by account ID, Server/Data Center by user name.
    """
    fields: dict[str, Any] = {
        "project": {"key": data.project_key},
        "summary": data.summary,
        "issuetype": {"name": data.issue_type},
    }
    if data.description:
        fields["description"] = data.description
    if data.labels:
        fields["labels"] = data.labels
    if data.parent_key:
        fields["parent"] = {"key": data.parent_key}
    if data.assignee:
        fields["assignee"] = (
            {"accountId": data.assignee} if is_cloud else {"name": data.assignee}
        )
    return fields


def create_issue(client: JiraClient, data: CreateIssueInput) -> Result[Any, JiraMCPError]:
    body = {"fields": build_issue_fields(data, client.config.is_cloud)}
    return client.post_json(ISSUE_PATH, body)


LIST_ISSUES_FROM_SPRINT_TOOL = define_tool(
    name="list_issues_from_sprint",
    description="List issues from a sprint as the full Jira JSON response",
    input_model=ListIssuesFromSprintInput,
    handler=list_issues_from_sprint,
    title="List Issues From Sprint",
)

CREATE_ISSUE_TOOL = define_tool(
    name="create_issue",
    description=(
        "Create a new Jira issue. Requires project key, summary and issue type; "
        "description, labels, parent and assignee are optional."
    ),
    input_model=CreateIssueInput,
    handler=create_issue,
    title="Create Issue",
    read_only=False,
)
