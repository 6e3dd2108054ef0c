"""Agile board listing tool."""

from typing import Any

from ..exceptions import JiraMCPError
from ..jira import JiraClient
from ..models import ListBoardsInput
from ..result import Result
from .base import define_tool, pagination_params, query_params

BOARD_PATH = "/rest/agile/1.0/board"


def list_boards(client: JiraClient, data: ListBoardsInput) -> Result[Any, JiraMCPError]:
    params = pagination_params(data) | query_params(
        type=data.type,
        name=data.name,
        projectKeyOrId=data.project_key_or_id,
    )
    return client.get_json(BOARD_PATH, params)


LIST_BOARDS_TOOL = define_tool(
    name="list_boards",
    description="List agile boards. Can filter by type, name, or project",
    input_model=ListBoardsInput,
    handler=list_boards,
    title="List Boards",
)
