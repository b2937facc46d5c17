"""
Domain layer for the employee façade.

Contains the employee entity, the pure query functions over employee
lists, and the exception taxonomy shared by every other layer.
"""

from .entities import CreateEmployeeCommand, Employee
from .exceptions import (
    EmployeeNotFoundException,
    EmployeeServiceException,
    UpstreamUnavailableException,
    ValidationException,
)

__all__ = [
    "CreateEmployeeCommand",
    "Employee",
    "EmployeeNotFoundException",
    "EmployeeServiceException",
    "UpstreamUnavailableException",
    "ValidationException",
]
