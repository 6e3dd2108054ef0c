"""
Shared fixtures for the Jira MCP unit tests.

Provides Jira configurations and a mocked ``JiraClient`` whose request
methods return canned ``Result`` values.
"""

from unittest.mock import MagicMock

import pytest

from jira_mcp.jira import JiraClient, JiraConfig
from jira_mcp.result import Ok

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Example:
        def test_config(jira_config_factory):
            config = jira_config_factory(url="https://custom.atlassian.net")
            assert config.url == "https://custom.atlassian.net"
    """

    def _create_config(**overrides):
        defaults = {
            "url": "https://jira.example.com",
            "auth_type": "token",
            "personal_token": "test-personal-token",
        }
        return JiraConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def mock_config(jira_config_factory):
    """Standard Server/Data Center configuration."""
    return jira_config_factory()


@pytest.fixture
def cloud_config(jira_config_factory):
    """Jira Cloud configuration using basic auth."""
    return jira_config_factory(
        url="https://example.atlassian.net",
        auth_type="basic",
        username="jane@example.com",
        api_token="test-api-token",
        personal_token=None,
    )


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client(mock_config):
    """
    A JiraClient mock bound to the standard configuration.

    ``get_json`` and ``post_json`` succeed by default; tests override
    ``return_value`` or ``side_effect`` as needed.
    """
    client = MagicMock(spec=JiraClient)
    client.config = mock_config
    client.get_json.return_value = Ok({"values": []})
    client.post_json.return_value = Ok({"id": "10001", "key": "PROJ-1"})
    return client


@pytest.fixture
def cloud_client(mock_client, cloud_config):
    mock_client.config = cloud_config
    return mock_client
