"""Tests for the sprint CSV export tool."""

import copy

import pytest

from jira_mcp.exceptions import JiraMCPError, JiraMCPResponseError
from jira_mcp.models import ListIssuesFromSprintCsvInput, SprintIssue
from jira_mcp.result import Err, Ok
from jira_mcp.tools.sprint_csv import (
    CSV_HEADER,
    escape_csv,
    format_estimate_hours,
    is_hotfix,
    issue_to_csv_row,
    list_issues_from_sprint_csv,
)
from tests.fixtures.jira_mocks import MINIMAL_SPRINT_ISSUE, SPRINT_ISSUE, SPRINT_ISSUE_CSV


def _issue(**field_overrides):
    data = copy.deepcopy(SPRINT_ISSUE)
    data["fields"].update(field_overrides)
    return SprintIssue.model_validate(data)


def _input(**overrides):
    return ListIssuesFromSprintCsvInput.model_validate(
        {"boardId": "7", "sprintId": "37", **overrides}
    )


class TestEscapeCsv:
    """Tests for escape_csv."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("plain", "plain"),
            ('Fix, "bug"', '"Fix, ""bug"""'),
            ("a,b", '"a,b"'),
            ('say "hi"', '"say ""hi"""'),
            ("line one\nline two", '"line one\nline two"'),
            ("", ""),
            (None, ""),
        ],
        ids=["plain", "comma-and-quotes", "comma", "quotes", "newline", "empty", "none"],
    )
    def test_escape_csv(self, value, expected):
        assert escape_csv(value) == expected


class TestColumns:
    """Tests for the derived columns."""

    @pytest.mark.parametrize(
        ("labels", "expected"),
        [
            (["HotFix"], True),
            (["hotfix"], True),
            (["urgent", "HOTFIX"], True),
            (["urgent"], False),
            ([], False),
            (None, False),
        ],
    )
    def test_is_hotfix(self, labels, expected):
        assert is_hotfix(labels) is expected

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (7200, "2.00"),
            (5400, "1.50"),
            (60, "0.02"),
            (450, "0.13"),
            (2250, "0.63"),
            (54, "0.01"),
            (None, ""),
            (0, ""),
        ],
    )
    def test_format_estimate_hours(self, seconds, expected):
        assert format_estimate_hours(seconds) == expected


class TestIssueToCsvRow:
    """Tests for issue_to_csv_row."""

    def test_full_issue(self):
        assert issue_to_csv_row(_issue()) == SPRINT_ISSUE_CSV.split("\n")[1]

    def test_minimal_issue_renders_empty_columns(self):
        issue = SprintIssue.model_validate(MINIMAL_SPRINT_ISSUE)

        assert issue_to_csv_row(issue) == "ABC-2,,,,,2024-02-01T09:30:00Z,,,0,"

    def test_null_fields_render_empty(self):
        issue = _issue(
            status=None,
            assignee=None,
            issuetype=None,
            parent=None,
            timeoriginalestimate=None,
        )

        row = issue_to_csv_row(issue).split(",")

        assert row[2:5] == ["", "", ""]
        assert row[6] == ""
        assert row[9] == ""

    def test_summary_is_escaped(self):
        row = issue_to_csv_row(_issue(summary='Fix, "bug"'))

        assert row.startswith('ABC-1,"Fix, ""bug""",Bug,')

    def test_fix_versions_joined(self):
        row = issue_to_csv_row(_issue(fixVersions=[{"name": "1.0"}, {"name": "1.1"}]))

        assert ",1.0; 1.1," in row

    def test_empty_fix_versions(self):
        row = issue_to_csv_row(_issue(fixVersions=[]))

        assert row.split(",")[7] == ""

    def test_hotfix_absent_labels(self):
        row = issue_to_csv_row(_issue(labels=None))

        assert row.split(",")[8] == "0"


class TestListIssuesFromSprintCsv:
    """Tests for the list_issues_from_sprint_csv handler."""

    def test_renders_csv(self, mock_client):
        mock_client.get_json.return_value = Ok({"issues": [SPRINT_ISSUE]})

        result = list_issues_from_sprint_csv(mock_client, _input())

        assert result == Ok(SPRINT_ISSUE_CSV)

    def test_requests_minimal_field_list(self, mock_client):
        mock_client.get_json.return_value = Ok({"issues": []})

        list_issues_from_sprint_csv(mock_client, _input(maxResults=25, startAt=0))

        mock_client.get_json.assert_called_once_with(
            "/rest/agile/1.0/board/7/sprint/37/issue",
            {
                "fields": "summary,status,assignee,created,timeoriginalestimate,"
                "fixVersions,issuetype,labels,parent",
                "maxResults": "25",
            },
        )

    def test_no_issues_returns_header_only(self, mock_client):
        mock_client.get_json.return_value = Ok({"issues": []})

        result = list_issues_from_sprint_csv(mock_client, _input())

        assert result == Ok(",".join(CSV_HEADER))

    def test_fetch_error_is_propagated(self, mock_client):
        error = JiraMCPError("HTTP 500 during GET")
        mock_client.get_json.return_value = Err(error)

        result = list_issues_from_sprint_csv(mock_client, _input())

        assert result.is_err()
        assert result.error is error

    @pytest.mark.parametrize(
        "payload",
        [
            {"values": []},
            {"issues": [{"fields": {"created": "2024-01-01"}}]},
            {"issues": [{"key": "ABC-1", "fields": {"summary": "no created"}}]},
            ["not", "an", "object"],
            {
                "issues": [
                    {
                        "key": "ABC-1",
                        "fields": {"created": "2024-01-01", "timeoriginalestimate": "7200"},
                    }
                ]
            },
        ],
        ids=[
            "missing-issues",
            "missing-key",
            "missing-created",
            "not-an-object",
            "estimate-as-text",
        ],
    )
    def test_unexpected_shape(self, mock_client, payload):
        mock_client.get_json.return_value = Ok(payload)

        result = list_issues_from_sprint_csv(mock_client, _input())

        assert result.is_err()
        assert isinstance(result.error, JiraMCPResponseError)
        assert str(result.error) == "Invalid response from Jira"
