"""
Utility functions for the Jira MCP server.
"""

from .env import get_env_float, is_env_extended_truthy, is_env_ssl_verify
from .io import is_read_only_mode
from .logging import log_config_param, mask_sensitive
from .urls import is_atlassian_cloud_url, join_url, quote_path_segment

__all__ = [
    "get_env_float",
    "is_atlassian_cloud_url",
    "is_env_extended_truthy",
    "is_env_ssl_verify",
    "is_read_only_mode",
    "join_url",
    "log_config_param",
    "mask_sensitive",
    "quote_path_segment",
]
