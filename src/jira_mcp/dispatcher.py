"""Dispatch of MCP tool calls to the Jira tool handlers.

Every call produces exactly one ``CallToolResult``. Internal error details are
logged and never returned to the caller; no exception escapes
``call_jira_tool``.
"""

import json
from typing import Any

import anyio.to_thread
from mcp.types import CallToolResult, TextContent
from pydantic import ValidationError

from .jira import JiraClient
from .logging_config import get_logger, log_operation
from .result import Err, Ok
from .tools import get_tool_definition
from .utils import is_read_only_mode

INVALID_INPUT_MESSAGE = "Invalid input"
GENERIC_ERROR_MESSAGE = "An error occurred"

logger = get_logger("jira-mcp.dispatcher")


def text_result(text: str, *, is_error: bool = False) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=is_error,
    )


def format_payload(value: Any) -> str:
    """Return text payloads verbatim and pretty-print everything else as JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False)


async def call_jira_tool(
    name: str, arguments: Any, client: JiraClient | None
) -> CallToolResult:
    """Run the named tool and wrap its outcome in a result envelope.

    Args:
        name: Tool name as listed in the catalog
        arguments: Raw, unvalidated tool arguments
        client: Jira client, or None when Jira is not configured

    Returns:
        The tool output, or an error envelope with a fixed message
    """
    try:
        with log_operation(logger, "call_tool", tool=name):
            return await _dispatch(name, arguments, client)
    except Exception as e:  # noqa: BLE001 - nothing may cross the protocol boundary
        logger.error(f"Tool execution error: {e}", exc_info=True)
        return text_result(GENERIC_ERROR_MESSAGE, is_error=True)


async def _dispatch(
    name: str, arguments: Any, client: JiraClient | None
) -> CallToolResult:
    if arguments is None:
        raise ValueError("No arguments provided")

    definition = get_tool_definition(name)
    if definition is None:
        raise ValueError(f"Unknown tool: {name}")

    try:
        data = definition.input_model.model_validate(arguments)
    except ValidationError as e:
        logger.debug(f"Rejected input for {name}: {e.error_count()} validation error(s)")
        return text_result(INVALID_INPUT_MESSAGE, is_error=True)

    if client is None:
        raise ValueError("Jira is not configured.")

    if definition.is_write and is_read_only_mode():
        logger.warning(f"Attempted to call tool '{name}' in read-only mode.")
        return text_result(GENERIC_ERROR_MESSAGE, is_error=True)

    result = await anyio.to_thread.run_sync(definition.handler, client, data)

    match result:
        case Ok(value=value):
            return text_result(format_payload(value))
        case Err(error=error):
            logger.error(f"{name} failed: {error}")
            return text_result(GENERIC_ERROR_MESSAGE, is_error=True)

    raise TypeError(f"Handler for {name} returned {type(result).__name__}, not a Result")
