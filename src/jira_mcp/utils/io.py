"""I/O utility functions for Jira MCP."""

from .env import is_env_extended_truthy


def is_read_only_mode() -> bool:
    """Check if the server is running in read-only mode.

    Read-only mode refuses every write tool (issue creation) while allowing
    all read operations. Useful when pointing the server at a production
    Jira instance.

    Returns:
        True if read-only mode is enabled, False otherwise
    """
    return is_env_extended_truthy("READ_ONLY_MODE", "false")
