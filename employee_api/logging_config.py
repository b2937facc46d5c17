"""
Logging configuration for the employee API façade.

Sets up structlog on top of the standard library logger factory so that
application events and third-party stdlib logs share one output. Request
IDs are carried through structlog contextvars.
"""

import logging
import sys
from typing import Optional
from uuid import uuid4

import structlog


def configure_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure structured logging for the process.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON instead of colored console output
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def bind_request_id(request_id: Optional[str] = None) -> str:
    """
    Bind a request ID into the logging context.

    Args:
        request_id: Request ID to bind, generates a new UUID if None

    Returns:
        The request ID that was bound
    """
    if not request_id:
        request_id = str(uuid4())
    structlog.contextvars.bind_contextvars(request_id=request_id)
    return request_id


def get_request_id() -> Optional[str]:
    """Get the request ID bound to the current context, if any."""
    return structlog.contextvars.get_contextvars().get("request_id")


def clear_request_context() -> None:
    """Clear all bound logging context."""
    structlog.contextvars.clear_contextvars()
