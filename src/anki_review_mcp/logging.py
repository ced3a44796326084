"""Structured logging configuration.

The stdio transport owns stdout, so every log line goes to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(
    *,
    debug: bool = False,
    json_output: bool = True,
    log_stream: TextIO | None = None,
) -> None:
    """Configure structlog as the logging layer for the server.

    Call once from the entry point.

    Args:
        debug: Enable DEBUG level.
        json_output: Use the JSON renderer instead of the console renderer.
        log_stream: Output stream; defaults to ``sys.stderr``.
    """
    if log_stream is None:
        log_stream = sys.stderr

    level = logging.DEBUG if debug else logging.INFO

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # httpx and the MCP SDK log through stdlib; give them the same output.
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(log_stream)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(**initial_context: object) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger.

    Args:
        **initial_context: Key-value pairs bound to every log entry from this logger.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(**initial_context)
    return logger
