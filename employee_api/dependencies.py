"""
Shared dependencies for the application.

Provides dependency injection functions used across routers. The
instances themselves are built in the application lifespan and kept on
``app.state``.
"""

from fastapi import Request

from .infrastructure.employee_client import EmployeeClient
from .services.employee_service import EmployeeService


def get_employee_service(request: Request) -> EmployeeService:
    """
    Get the employee service for dependency injection.

    Raises:
        RuntimeError: If the application has not finished starting up
    """
    service = getattr(request.app.state, "employee_service", None)
    if service is None:
        raise RuntimeError("Employee service not initialized")
    return service


def get_employee_client(request: Request) -> EmployeeClient:
    """Get the upstream client for dependency injection."""
    client = getattr(request.app.state, "employee_client", None)
    if client is None:
        raise RuntimeError("Employee client not initialized")
    return client
