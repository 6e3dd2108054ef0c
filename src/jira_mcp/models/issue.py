"""
Minimal Jira issue models for the sprint CSV export.

Only the fields requested by the export are modelled. Anything else in the
response is ignored.
"""

from pydantic import Field, StrictFloat, StrictInt

from .base import ApiModel


class JiraNamed(ApiModel):
    """An object identified by its name (status, issue type, fix version)."""

    name: str


class JiraUserRef(ApiModel):
    display_name: str = Field(alias="displayName")


class JiraIssueRef(ApiModel):
    key: str


class SprintIssueFields(ApiModel):
    summary: str | None = None
    status: JiraNamed | None = None
    assignee: JiraUserRef | None = None
    created: str
    timeoriginalestimate: StrictInt | StrictFloat | None = None
    fix_versions: list[JiraNamed] | None = Field(default=None, alias="fixVersions")
    issuetype: JiraNamed | None = None
    labels: list[str] | None = None
    parent: JiraIssueRef | None = None


class SprintIssue(ApiModel):
    key: str
    fields: SprintIssueFields


class SprintIssuesResponse(ApiModel):
    """The ``issues`` page returned by the sprint issue endpoint."""

    issues: list[SprintIssue]
