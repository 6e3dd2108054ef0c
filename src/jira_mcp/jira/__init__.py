"""Jira REST API access for the MCP tools."""

from .client import JiraClient
from .config import JiraConfig

__all__ = ["JiraClient", "JiraConfig"]
