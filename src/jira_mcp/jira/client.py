"""Base client module for Jira API interactions."""

from typing import Any

import requests

from ..exceptions import JiraMCPAuthenticationError, JiraMCPError
from ..logging_config import get_logger
from ..result import Err, Ok, Result
from ..utils import join_url
from .config import JiraConfig

logger = get_logger("jira-mcp.jira")

# Characters of an error body kept in the internal error message
ERROR_BODY_LIMIT = 200


class JiraClient:
    """Thin JSON client for the Jira REST API.

    Every request method returns a ``Result``; network, HTTP and decoding
    failures come back as ``Err`` and are never raised.
    """

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.
        """
        self.config = config if config is not None else JiraConfig.from_env()

        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.session.verify = self.config.ssl_verify

        if self.config.auth_type == "token":
            self.session.headers["Authorization"] = (
                f"Bearer {self.config.personal_token}"
            )
        else:  # basic auth
            self.session.auth = (self.config.username or "", self.config.api_token or "")

    def build_url(self, path: str) -> str:
        """Return the absolute URL for a REST path."""
        return join_url(self.config.url, path)

    def request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: Any = None,
    ) -> Result[Any, JiraMCPError]:
        """Send one request and decode the JSON response.

        Args:
            method: HTTP method
            path: REST path relative to the base URL
            params: Query parameters
            body: JSON body, sent only when not None

        Returns:
            Ok with the decoded JSON, or Err describing the failure
        """
        url = self.build_url(path)
        logger.debug(f"{method} {url} params={params or {}}")

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=body,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as http_err:
            return Err(_http_error(method, url, http_err))
        except requests.Timeout:
            return Err(
                JiraMCPError(
                    f"Timed out after {self.config.timeout}s during {method} {url}"
                )
            )
        except requests.RequestException as e:
            return Err(JiraMCPError(f"Network error during {method} {url}: {e}"))

        if response.status_code == 204 or not response.content:
            return Ok({})

        try:
            return Ok(response.json())
        except ValueError:
            return Err(JiraMCPError(f"Jira returned invalid JSON for {method} {url}"))

    def get_json(
        self, path: str, params: dict[str, str] | None = None
    ) -> Result[Any, JiraMCPError]:
        """GET a REST path and decode the JSON response."""
        return self.request_json("GET", path, params=params)

    def post_json(self, path: str, body: Any) -> Result[Any, JiraMCPError]:
        """POST a JSON body to a REST path and decode the JSON response."""
        return self.request_json("POST", path, body=body)

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()


def _http_error(method: str, url: str, http_err: requests.HTTPError) -> JiraMCPError:
    response = http_err.response
    status = response.status_code if response is not None else None

    if status in (401, 403):
        return JiraMCPAuthenticationError(
            f"Authentication failed for Jira API ({status}). "
            "Token may be expired or invalid. Please verify credentials."
        )

    detail = response.text[:ERROR_BODY_LIMIT] if response is not None else ""
    return JiraMCPError(f"HTTP {status} during {method} {url}: {detail}")
