from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from mcp.server import Server
from mcp.types import CallToolResult, Tool

from .dispatcher import call_jira_tool
from .jira import JiraClient, JiraConfig
from .logging_config import get_logger
from .tools import TOOLS
from .utils import is_read_only_mode, log_config_param

logger = get_logger("jira-mcp.server")


@dataclass
class AppContext:
    """Application context for Jira MCP."""

    jira: JiraClient | None = None


def create_jira_client() -> JiraClient:
    """Build the Jira client from the environment, logging the configuration."""
    config = JiraConfig.from_env()
    log_config_param(logger, "Jira", "URL", config.url)
    log_config_param(logger, "Jira", "Auth Type", config.auth_type)
    if config.auth_type == "basic":
        log_config_param(logger, "Jira", "Username", config.username)
        log_config_param(logger, "Jira", "API Token", config.api_token, sensitive=True)
    else:
        log_config_param(
            logger, "Jira", "Personal Token", config.personal_token, sensitive=True
        )
    log_config_param(logger, "Jira", "SSL Verify", str(config.ssl_verify))
    log_config_param(logger, "Jira", "Timeout", f"{config.timeout}s")
    return JiraClient(config=config)


@asynccontextmanager
async def server_lifespan(server: Server) -> AsyncIterator[AppContext]:
    """Initialize and clean up application resources."""
    logger.info("Starting Jira MCP server")
    logger.info(f"Read-only mode: {'ENABLED' if is_read_only_mode() else 'DISABLED'}")

    jira = None
    try:
        jira = create_jira_client()
        logger.info("Jira client initialized successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize Jira client: {e}", exc_info=True)

    try:
        yield AppContext(jira=jira)
    finally:
        if jira is not None:
            jira.close()


# Create server instance
app = Server("jira-mcp", lifespan=server_lifespan)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List the Jira tools."""
    return TOOLS


# Input is validated by the dispatcher so that callers get "Invalid input"
@app.call_tool(validate_input=False)
async def call_tool(name: str, arguments: Any) -> CallToolResult:
    """Handle tool calls for Jira operations."""
    try:
        ctx = app.request_context.lifespan_context
    except LookupError:
        ctx = None
    return await call_jira_tool(name, arguments, ctx.jira if ctx else None)


async def run_server() -> None:
    """Run the Jira MCP server over stdio."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())
