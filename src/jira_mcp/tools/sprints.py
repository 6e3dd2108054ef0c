"""Sprint listing tool."""

from typing import Any

from ..exceptions import JiraMCPError
from ..jira import JiraClient
from ..models import ListSprintsFromBoardInput
from ..result import Result
from ..utils import quote_path_segment
from .base import define_tool, pagination_params, query_params


def sprints_path(board_id: str) -> str:
    return f"/rest/agile/1.0/board/{quote_path_segment(board_id)}/sprint"


def list_sprints_from_board(
    client: JiraClient, data: ListSprintsFromBoardInput
) -> Result[Any, JiraMCPError]:
    params = pagination_params(data) | query_params(state=data.state)
    return client.get_json(sprints_path(data.board_id), params)


LIST_SPRINTS_FROM_BOARD_TOOL = define_tool(
    name="list_sprints_from_board",
    description="List sprints from a board. Can filter by state (active, closed, or future)",
    input_model=ListSprintsFromBoardInput,
    handler=list_sprints_from_board,
    title="List Sprints From Board",
)
