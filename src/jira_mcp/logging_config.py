"""Contextual logging configuration for Jira MCP."""

import contextvars
import logging
import os
import sys
import time
import types
import uuid
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

# Default logger configuration
DEFAULT_LOGGER_NAME = "jira-mcp"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5


class ContextualLogger(logging.Logger):
    """Logger that maintains context between related operations.

    Context lives in a ``ContextVar`` so that concurrent tool calls on the
    same event loop each see their own values.
    """

    def __init__(self, name: str, level: int = 0) -> None:
        """Initialize the contextual logger."""
        super().__init__(name, level)
        self._context_data: contextvars.ContextVar[dict[str, Any]] = (
            contextvars.ContextVar(f"log_context.{name}", default={})
        )

    def _get_context_str(self) -> str:
        """Get the current context string."""
        context_data = self._context_data.get()
        if not context_data:
            return "no-context"

        # Format context as: operation=X,trace_id=Y,...
        return ",".join(f"{k}={v}" for k, v in context_data.items())

    def _log(
        self,
        level: int,
        msg: object,
        args: tuple[object, ...] | Mapping[str, object],
        exc_info: Any = None,
        extra: Mapping[str, object] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        """Overrides _log method to include context."""
        extra = dict(extra or {})
        extra.setdefault("context", self._get_context_str())

        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)

    def get_context(self) -> dict[str, Any]:
        """Return a copy of the current context values."""
        return dict(self._context_data.get())

    def set_context(self, **kwargs: Any) -> None:
        """
        Sets context values for the logger.

        Args:
            **kwargs: Key-value pairs to add to the context
        """
        # The stored dict is never mutated in place; other contexts may share it
        self._context_data.set({**self._context_data.get(), **kwargs})

    def replace_context(self, data: dict[str, Any]) -> None:
        """Replace the context values wholesale."""
        self._context_data.set(dict(data))

    def clear_context(self) -> None:
        """Removes all context data from the logger."""
        self._context_data.set({})


class LoggingContextManager:
    """Context manager for logging with tracking."""

    def __init__(
        self, logger: ContextualLogger, operation: str, **context: Any
    ) -> None:
        """
        Initializes the logging context manager.

        Args:
            logger: Contextual logger
            operation: Name of the operation being executed
            **context: Additional context data
        """
        self.logger = logger
        self.operation = operation
        self.context = context.copy()
        self.start_time = time.time()
        self.old_context: dict[str, Any] = {}

        # Generates a trace_id if not provided
        self.trace_id = context.get("trace_id", str(uuid.uuid4())[:8])

    def __enter__(self) -> "LoggingContextManager":
        """Starts the logging context."""
        self.old_context = self.logger.get_context()

        self.context["operation"] = self.operation
        self.context["trace_id"] = self.trace_id
        self.logger.set_context(**self.context)

        self.logger.debug(f"Operation started: {self.operation}")

        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        """Finalizes the logging context."""
        duration = time.time() - self.start_time

        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s"
            )

        self.logger.replace_context(self.old_context)


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> ContextualLogger:
    """Return a contextual logger without attaching any handlers.

    Module-level loggers are created through this function so that they
    understand ``log_operation`` even before ``setup_logger`` has run.
    """
    manager = logging.Logger.manager
    previous_class = manager.loggerClass
    manager.setLoggerClass(ContextualLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        manager.loggerClass = previous_class

    if not isinstance(logger, ContextualLogger):
        raise TypeError(f"Logger {name!r} already exists and is not contextual")
    return logger


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configures and returns a contextual logger.

    Console output goes to stderr: stdout is reserved for the stdio protocol.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.)
        log_to_file: If True, logs to file
        log_dir: Directory to store log files
        log_format: Log format

    Returns:
        Configured contextual logger
    """
    logger = get_logger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper()))

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))

    # Reconfiguring replaces the previous handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_directory = log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY)
        Path(log_directory).mkdir(parents=True, exist_ok=True)

        log_file = Path(log_directory) / f"{name}.log"
        file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_SIZE, backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevents propagation to the root logger
    logger.propagate = False

    return cast(ContextualLogger, logger)


def log_operation(
    logger: ContextualLogger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Contextual logger
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
