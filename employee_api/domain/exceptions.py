"""
Custom exceptions for the employee façade domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, transport, etc.). The façade maps
each kind to a status code at the boundary.
"""

from typing import Any, Optional


class EmployeeServiceException(Exception):
    """Base exception for all employee façade errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(EmployeeServiceException):
    """Raised when a create payload fails validation."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.reason = reason
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )


class EmployeeNotFoundException(EmployeeServiceException):
    """Raised when an id or name does not resolve to an employee upstream."""

    def __init__(self, identifier: str, lookup: str = "id"):
        self.identifier = identifier
        self.lookup = lookup
        message = f"Employee not found: {identifier}"
        if lookup != "id":
            message = f"Employee not found by {lookup}: {identifier}"
        super().__init__(
            message=message, details={"identifier": identifier, "lookup": lookup}
        )


class UpstreamUnavailableException(EmployeeServiceException):
    """Raised when the upstream employee API fails or answers unexpectedly."""

    def __init__(
        self,
        operation: str,
        reason: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.operation = operation
        self.status_code = status_code
        message = f"Upstream employee service unavailable during {operation}"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message,
            details={
                "operation": operation,
                "reason": reason,
                "upstream_status": status_code,
            },
        )
