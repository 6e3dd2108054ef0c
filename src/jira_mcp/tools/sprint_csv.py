"""Compact CSV export of the issues in a sprint.

The export asks Jira for a fixed, minimal field list and renders one row per
issue. It costs far fewer tokens than the full JSON listing.
"""

from decimal import ROUND_HALF_UP, Decimal

from pydantic import ValidationError

from ..exceptions import JiraMCPError, JiraMCPResponseError
from ..jira import JiraClient
from ..models import ListIssuesFromSprintCsvInput, SprintIssue, SprintIssuesResponse
from ..result import Err, Ok, Result
from .base import define_tool, pagination_params
from .issues import sprint_issues_path

CSV_FIELDS = (
    "summary",
    "status",
    "assignee",
    "created",
    "timeoriginalestimate",
    "fixVersions",
    "issuetype",
    "labels",
    "parent",
)

CSV_HEADER = (
    "Key",
    "Summary",
    "Type",
    "Status",
    "Assignee",
    "Created",
    "Original Estimate (hours)",
    "Fix Versions",
    "Hotfix",
    "Parent ID",
)

HOTFIX_LABEL = "hotfix"
SECONDS_PER_HOUR = 3600
HOURS_PRECISION = Decimal("0.01")


def escape_csv(value: str | None) -> str:
    """Quote a CSV value containing a comma, a double quote or a newline.

    Embedded double quotes are doubled. Empty and missing values render as an
    empty, unquoted string.
    """
    if not value:
        return ""
    if "," in value or '"' in value or "\n" in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def format_estimate_hours(seconds: float | None) -> str:
    # Zero counts as no estimate. The exact binary value is rounded, ties upward.
    if not seconds:
        return ""
    hours = Decimal(seconds / SECONDS_PER_HOUR)
    return str(hours.quantize(HOURS_PRECISION, rounding=ROUND_HALF_UP))


def is_hotfix(labels: list[str] | None) -> bool:
    return any(label.lower() == HOTFIX_LABEL for label in labels or [])


def issue_to_csv_row(issue: SprintIssue) -> str:
    fields = issue.fields
    fix_versions = (
        escape_csv("; ".join(version.name for version in fields.fix_versions))
        if fields.fix_versions is not None
        else ""
    )
    columns = [
        escape_csv(issue.key),
        escape_csv(fields.summary),
        escape_csv(fields.issuetype.name if fields.issuetype else None),
        escape_csv(fields.status.name if fields.status else None),
        escape_csv(fields.assignee.display_name if fields.assignee else None),
        escape_csv(fields.created),
        format_estimate_hours(fields.timeoriginalestimate),
        fix_versions,
        "1" if is_hotfix(fields.labels) else "0",
        escape_csv(fields.parent.key if fields.parent else None),
    ]
    return ",".join(columns)


def issues_to_csv(issues: list[SprintIssue]) -> str:
    """Render the header row plus one row per issue, newline separated."""
    rows = [",".join(CSV_HEADER)]
    rows.extend(issue_to_csv_row(issue) for issue in issues)
    return "\n".join(rows)


def list_issues_from_sprint_csv(
    client: JiraClient, data: ListIssuesFromSprintCsvInput
) -> Result[str, JiraMCPError]:
    params = {"fields": ",".join(CSV_FIELDS)} | pagination_params(data)

    fetched = client.get_json(sprint_issues_path(data.board_id, data.sprint_id), params)
    if isinstance(fetched, Err):
        return fetched

    try:
        response = SprintIssuesResponse.model_validate(fetched.value)
    except ValidationError:
        return Err(JiraMCPResponseError("Invalid response from Jira"))

    return Ok(issues_to_csv(response.issues))


LIST_ISSUES_FROM_SPRINT_CSV_TOOL = define_tool(
    name="list_issues_from_sprint_csv",
    description=(
        "List issues from a sprint in compact CSV format (key, summary, type, status, "
        "assignee, created, original estimate in hours, fix versions, hotfix, parent_id). "
        "Reduces token usage compared to full JSON response."
    ),
    input_model=ListIssuesFromSprintCsvInput,
    handler=list_issues_from_sprint_csv,
    title="List Issues From Sprint (CSV)",
)
