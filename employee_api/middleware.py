"""
Middleware components for request handling and logging.

Binds a request ID into the logging context, logs each request with its
timing and records Prometheus request metrics.
"""

import time
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging_config import bind_request_id, clear_request_context
from .metrics import track_request_metrics

logger = structlog.get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request tracing, logging and metrics.

    Reuses an inbound ``X-Request-ID`` header or generates one, and echoes
    it on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and log details.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware or route handler

        Returns:
            HTTP response
        """
        request_id = bind_request_id(request.headers.get("X-Request-ID"))
        start_time = time.perf_counter()

        logger.info(
            "Request started",
            method=request.method,
            path=request.url.path,
            client_host=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
            duration = time.perf_counter() - start_time

            response.headers["X-Request-ID"] = request_id
            track_request_metrics(
                request.method, _endpoint_label(request), response.status_code, duration
            )

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
            )
            return response
        except Exception as exc:
            duration = time.perf_counter() - start_time
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(exc),
                duration_ms=round(duration * 1000, 2),
            )
            raise
        finally:
            clear_request_context()


def _endpoint_label(request: Request) -> str:
    """Route template for metrics, so ids do not explode label cardinality."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"
