"""
Logging configuration module for the roster manager.

Provides centralized logging setup with colored output using rich.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.INFO) -> RichHandler:
    """
    Routes the root logger through a rich handler on stderr, so that log
    records never interleave with the screens drawn on stdout.

    Args:
        level (int): The root logging level. Defaults to logging.INFO.

    Returns:
        RichHandler: The handler built for the root logger.

    """
    handler = RichHandler(
        console=Console(width=120, stderr=True, force_jupyter=False),
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
        log_time_format="[%X]",
    )
    # The handler prints time and level itself. Context is appended as
    # "[key=value]", so markup stays off.
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logging.basicConfig(level=level, handlers=[handler])

    # prompt_toolkit chatters at debug level.
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The configured logger instance.

    """
    return logging.getLogger(name)


logger = get_logger("roster")


def _with_context(message: str, context: dict[str, Any] | None) -> str:
    if context:
        context_str = " ".join(f"{k}={v}" for k, v in context.items())
        message = f"{message} [{context_str}]"
    return message


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs an info message with optional context.

    Args:
        message (str): The info message.
        context (Dict[str, Any] | None): Optional context dictionary.

    """
    logger.info(_with_context(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs a debug message with optional context.

    Args:
        message (str): The debug message.
        context (Dict[str, Any] | None): Optional context dictionary.

    """
    logger.debug(_with_context(message, context))
