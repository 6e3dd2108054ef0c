"""Project listing tool."""

from typing import Any

from ..exceptions import JiraMCPError
from ..jira import JiraClient
from ..models import ListProjectsInput
from ..result import Result
from .base import define_tool, pagination_params, query_params

# Jira Cloud pages projects; Server/Data Center only offers the full list.
PROJECT_SEARCH_PATH = "/rest/api/2/project/search"
PROJECT_LIST_PATH = "/rest/api/2/project"


def list_projects(
    client: JiraClient, data: ListProjectsInput
) -> Result[Any, JiraMCPError]:
    """List the projects visible to the configured user."""
    if not client.config.is_cloud:
        return client.get_json(PROJECT_LIST_PATH)

    params = pagination_params(data) | query_params(query=data.query)
    return client.get_json(PROJECT_SEARCH_PATH, params)


LIST_PROJECTS_TOOL = define_tool(
    name="list_projects",
    description=(
        "List Jira projects. Pagination and the query filter apply to Jira Cloud; "
        "Server/Data Center returns every visible project."
    ),
    input_model=ListProjectsInput,
    handler=list_projects,
    title="List Projects",
)
