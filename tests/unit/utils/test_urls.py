"""Tests for the URL utilities module."""

import pytest

from jira_mcp.utils.urls import is_atlassian_cloud_url, join_url, quote_path_segment


class TestIsAtlassianCloudUrl:
    """Tests for is_atlassian_cloud_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.atlassian.net",
            "https://example.atlassian.net/wiki",
            "https://example.jira.com",
            "https://api.atlassian.com/ex/jira/abc",
            "https://agency.atlassian-us-gov-mod.net",
        ],
    )
    def test_cloud_urls(self, url):
        assert is_atlassian_cloud_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            None,
            "",
            "https://jira.example.com",
            "http://localhost:8080",
            "http://127.0.0.1:2990/jira",
            "http://10.0.0.5",
            "http://172.20.1.1",
            "http://192.168.1.10",
        ],
    )
    def test_server_urls(self, url):
        assert is_atlassian_cloud_url(url) is False


class TestJoinUrl:
    """Tests for join_url."""

    @pytest.mark.parametrize(
        ("base_url", "path", "expected"),
        [
            (
                "https://jira.example.com",
                "/rest/api/2/project",
                "https://jira.example.com/rest/api/2/project",
            ),
            # Base URL with trailing slash, no double slash
            (
                "https://jira.example.com/",
                "/rest/api/2/project",
                "https://jira.example.com/rest/api/2/project",
            ),
            # Context path is kept
            (
                "https://example.com/jira/",
                "rest/agile/1.0/board",
                "https://example.com/jira/rest/agile/1.0/board",
            ),
        ],
    )
    def test_join(self, base_url, path, expected):
        assert join_url(base_url, path) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("42", "42"),
        ("a/b", "a%2Fb"),
        ("1 2", "1%202"),
        ("x?y#z", "x%3Fy%23z"),
    ],
)
def test_quote_path_segment(value, expected):
    assert quote_path_segment(value) == expected
