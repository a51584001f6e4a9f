"""Structured logging for the client and its command-line tools."""
import logging
import sys
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a structlog logger backed by the stdlib logger ``name``.

    Until :func:`configure_logging` runs, events go through the stdlib
    defaults, so importing the library never prints debug output.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(json_logs: bool = False, level: str = "INFO") -> None:
    """Configure structlog for console or JSON output on stderr."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    logging.getLogger("ollama_rest").setLevel(log_level)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=shared_processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
