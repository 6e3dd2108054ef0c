class JiraMCPError(Exception):
    """Base exception for Jira MCP errors."""

    pass


class JiraMCPAuthenticationError(JiraMCPError):
    """Raised when Jira API authentication fails (401/403)."""

    pass


class JiraMCPResponseError(JiraMCPError):
    """Raised when a Jira response does not have the expected shape."""

    pass
