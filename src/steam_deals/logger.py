"""
Structured logging for the deal selector and its CLI.

The CLI prints the plugin payload as JSON on stdout, so every log line
is written to stderr instead. JSON lines suit the unattended polling
run; console rendering is for local debugging of filter decisions.
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from structlog.types import Processor

from steam_deals.config import LoggingConfig


def setup_logging() -> None:
    """
    Configure structlog from ``LOG_*`` settings.

    Called once by the CLI entry point, after the selection modules have
    already created their module-level loggers; those loggers pick the
    configuration up on their first call.
    """
    config = LoggingConfig()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if config.include_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if config.format == "json":
        processors = [
            *shared_processors,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, config.level),
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Get a module logger tagged with its pipeline component.

    The logger stays lazy: binding eagerly at import time would freeze
    structlog's default stdout configuration into it and corrupt the
    CLI's JSON output, so the context is handed to the proxy instead.

    Args:
        name: Logger name (typically __name__ of the calling module)
        **initial_context: Context carried on every event, e.g. ``component``

    Example:
        >>> logger = get_logger(__name__, component="selector")
        >>> logger.info("Deal selection complete", filtered_count=3)
    """
    return structlog.get_logger(name, **initial_context)
