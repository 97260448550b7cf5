"""Logging setup using structlog.

All output goes to stderr: in stdio mode stdout carries the MCP protocol.
Every event carries ``service`` and, while a tool runs, ``tool``.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from realtime_crypto_mcp.core.constants import SERVER_NAME, SERVER_VERSION


def add_service_info(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Stamp events with the server name and version."""
    event_dict.setdefault("service", SERVER_NAME)
    event_dict.setdefault("version", SERVER_VERSION)
    return event_dict


def setup_logging(debug: bool = False, log_level: str = "INFO") -> None:
    """
    Configure structlog for the MCP server.

    Debug mode renders colored console lines, otherwise one JSON object
    per event.

    Args:
        debug: Enable debug mode with pretty console output
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    # Note: Don't use add_logger_name with PrintLoggerFactory
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_service_info,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=True)
        processors = shared_processors + [renderer]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # httpx and mcp log through the standard library; keep httpx request
    # lines out of INFO output
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level)
    logging.getLogger("httpx").setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger instance."""
    return structlog.get_logger(name)


@contextmanager
def tool_context(tool: str, **kwargs: Any) -> Iterator[None]:
    """
    Bind ``tool`` (and any extra keys) to log events for the duration of a call.

    Only the keys bound here are removed on exit.
    """
    structlog.contextvars.bind_contextvars(tool=tool, **kwargs)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars("tool", *kwargs)
