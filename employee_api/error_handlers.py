"""
Exception-to-response mapping at the HTTP boundary.

Lower layers raise domain exceptions; this module is the only place that
knows which HTTP status each kind becomes.
"""

from typing import Any, Dict, List, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .domain.exceptions import (
    EmployeeNotFoundException,
    EmployeeServiceException,
    UpstreamUnavailableException,
    ValidationException,
)
from .logging_config import get_request_id

logger = structlog.get_logger(__name__)

_STATUS_BY_EXCEPTION = (
    (ValidationException, status.HTTP_400_BAD_REQUEST, "validation_error"),
    (EmployeeNotFoundException, status.HTTP_404_NOT_FOUND, "not_found"),
    (UpstreamUnavailableException, status.HTTP_502_BAD_GATEWAY, "upstream_unavailable"),
)


def status_code_for(exc: EmployeeServiceException) -> int:
    """HTTP status code for a domain exception."""
    for exc_type, status_code, _ in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_code_for(exc: EmployeeServiceException) -> str:
    """Short machine-readable error code for a domain exception."""
    for exc_type, _, code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return code
    return "internal_server_error"


def _error_body(
    request: Request, error: str, message: str, details: Optional[Any] = None
) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "success": False,
        "error": error,
        "message": message,
        "request_id": get_request_id() or request.headers.get("X-Request-ID"),
    }
    if details is not None:
        body["details"] = details
    return body


def _validation_details(exc: RequestValidationError) -> List[Dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


async def domain_exception_handler(
    request: Request, exc: EmployeeServiceException
) -> JSONResponse:
    """Handle domain exceptions raised by services and clients."""
    status_code = status_code_for(exc)
    log = logger.warning if status_code < 500 else logger.error
    log(
        "Request failed",
        path=request.url.path,
        method=request.method,
        status_code=status_code,
        error=exc.message,
    )
    return JSONResponse(
        status_code=status_code,
        content=_error_body(request, error_code_for(exc), exc.message),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer request schema violations with 400 instead of FastAPI's 422."""
    details = _validation_details(exc)
    logger.info(
        "Request validation failed",
        path=request.url.path,
        method=request.method,
        errors=details,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(request, "validation_error", "Request validation failed", details),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(request, "internal_server_error", "An unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler in this module to the application."""
    app.add_exception_handler(EmployeeServiceException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)
