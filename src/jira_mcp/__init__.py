import asyncio
import os

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

from .logging_config import get_logger, log_operation, setup_logger

logger = get_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net or https://jira.your-company.com)",
)
@click.option("--jira-username", help="Jira username/email (for Jira Cloud)")
@click.option("--jira-token", help="Jira API token (for Jira Cloud)")
@click.option(
    "--jira-personal-token",
    help="Jira Personal Access Token (for Jira Server/Data Center)",
)
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates for Jira Server/Data Center (default: verify)",
)
@click.option(
    "--jira-timeout",
    type=click.FloatRange(min=0, min_open=True),
    help="Timeout in seconds for each Jira request (default: 30)",
)
@click.option(
    "--read-only",
    is_flag=True,
    default=False,
    help="Refuse write tools such as create_issue",
)
def main(
    verbose: int,
    env_file: str | None,
    log_dir: str | None,
    log_to_file: bool,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_personal_token: str | None,
    jira_ssl_verify: bool,
    jira_timeout: float | None,
    read_only: bool,
) -> None:
    """Jira MCP Server - Jira projects, boards, sprints and issues over MCP stdio

    Supports both Atlassian Cloud and Jira Server/Data Center deployments.
    """
    # Without -v the LOG_LEVEL environment variable decides
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        # Load environment variables from file if specified, otherwise try default .env
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line arguments take precedence over the environment
        if jira_url:
            os.environ["JIRA_URL"] = jira_url
        if jira_username:
            os.environ["JIRA_USERNAME"] = jira_username
        if jira_token:
            os.environ["JIRA_API_TOKEN"] = jira_token
        if jira_personal_token:
            os.environ["JIRA_PERSONAL_TOKEN"] = jira_personal_token
        if jira_timeout:
            os.environ["JIRA_TIMEOUT"] = str(jira_timeout)
        if read_only:
            os.environ["READ_ONLY_MODE"] = "true"
        if log_dir:
            os.environ["LOG_DIR"] = log_dir
        if not jira_ssl_verify:
            os.environ["JIRA_SSL_VERIFY"] = "false"

    from . import server

    logger.info(f"Starting Jira MCP v{__version__} with stdio transport")
    asyncio.run(server.run_server())


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
