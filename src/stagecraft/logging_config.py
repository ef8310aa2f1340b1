"""Structured logging for Stagecraft, built on structlog over stdlib logging.

Modules keep logging through ``logging.getLogger(__name__)``; the formatter
installed here renders those records with any request context bound via
:func:`request_log_context` or :func:`bind_issue_type`.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def _renderer(json_output: bool):
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(log_level: str = "info", json_output: bool = False) -> None:
    """Route stdlib and structlog loggers through one stdout handler.

    Args:
        log_level: Logging level string (debug/info/warning/error).
        json_output: JSON lines when True, colored console output otherwise.
    """
    structlog.configure(
        processors=_SHARED_PROCESSORS + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


@contextmanager
def request_log_context(trace_id: str) -> Iterator[None]:
    """Tag every record logged inside the block with ``trace_id``."""
    with structlog.contextvars.bound_contextvars(trace_id=trace_id):
        yield


def bind_issue_type(issue_type: str) -> None:
    """Tag the rest of the current request's records with the issue type."""
    structlog.contextvars.bind_contextvars(issue_type=issue_type)
