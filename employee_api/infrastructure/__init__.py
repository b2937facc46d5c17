"""Infrastructure layer: clients for external services."""

from .employee_client import EmployeeClient

__all__ = ["EmployeeClient"]
