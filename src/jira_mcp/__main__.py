"""Entry point for running the Jira MCP server with ``python -m jira_mcp``."""

from . import main

if __name__ == "__main__":
    main()
