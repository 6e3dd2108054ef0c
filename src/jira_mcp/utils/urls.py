"""URL-related utility functions for Jira MCP."""

import re
from urllib.parse import quote, urlparse


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Atlassian Cloud or Server/Data Center.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False for Server/Data Center
    """
    # Localhost and IP-based URLs are always Server/Data Center
    if not url:
        return False

    hostname = urlparse(url).hostname or ""

    if (
        hostname == "localhost"
        or re.match(r"^127\.", hostname)
        or re.match(r"^192\.168\.", hostname)
        or re.match(r"^10\.", hostname)
        or re.match(r"^172\.(1[6-9]|2[0-9]|3[0-1])\.", hostname)
    ):
        return False

    return (
        ".atlassian.net" in hostname
        or ".jira.com" in hostname
        or ".jira-dev.com" in hostname
        or "api.atlassian.com" in hostname
        or ".atlassian-us-gov-mod.net" in hostname  # US Gov Moderate (FedRAMP)
        or ".atlassian-us-gov.net" in hostname  # US Gov (FedRAMP)
    )


def join_url(base_url: str, path: str) -> str:
    """Join a REST path onto the configured base URL.

    The base URL may carry a context path (``https://host/jira``); it is kept.

    Examples:
        >>> join_url("https://jira.example.com/", "/rest/api/2/issue")
        'https://jira.example.com/rest/api/2/issue'
        >>> join_url("https://example.com/jira", "rest/agile/1.0/board")
        'https://example.com/jira/rest/agile/1.0/board'
    """
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def quote_path_segment(value: str) -> str:
    """Percent-encode a single path segment (``/`` included)."""
    return quote(value, safe="")
