"""
Tests for custom exception classes.

Tests all custom exception types to ensure proper initialization
and error message formatting.
"""

from employee_api.domain.exceptions import (
    EmployeeNotFoundException,
    EmployeeServiceException,
    UpstreamUnavailableException,
    ValidationException,
)
from employee_api.error_handlers import error_code_for, status_code_for


def test_base_exception_basic() -> None:
    """Base exception can be created with just a message."""
    exc = EmployeeServiceException("Test error")

    assert exc.message == "Test error"
    assert exc.details == {}
    assert str(exc) == "Test error"


def test_validation_exception() -> None:
    """Validation errors include field, value and reason."""
    exc = ValidationException("salary", -1, "must be positive")

    assert exc.field == "salary"
    assert exc.reason == "must be positive"
    assert exc.details == {"field": "salary", "value": "-1", "reason": "must be positive"}
    assert "salary" in exc.message


def test_not_found_by_id() -> None:
    """Default lookup is by id."""
    exc = EmployeeNotFoundException("abc")

    assert exc.identifier == "abc"
    assert exc.lookup == "id"
    assert exc.message == "Employee not found: abc"


def test_not_found_by_name() -> None:
    """Name lookups say so in the message."""
    exc = EmployeeNotFoundException("Jane Doe", lookup="name")

    assert exc.message == "Employee not found by name: Jane Doe"
    assert exc.details["lookup"] == "name"


def test_upstream_unavailable_with_reason() -> None:
    """Operation, reason and status are all kept."""
    exc = UpstreamUnavailableException("create", "unexpected status 503", 503)

    assert exc.operation == "create"
    assert exc.status_code == 503
    assert exc.message == (
        "Upstream employee service unavailable during create: unexpected status 503"
    )
    assert exc.details["upstream_status"] == 503


def test_upstream_unavailable_without_reason() -> None:
    """Reason is optional."""
    exc = UpstreamUnavailableException("list_all")

    assert exc.message == "Upstream employee service unavailable during list_all"
    assert exc.status_code is None


def test_exception_inheritance() -> None:
    """All custom exceptions share the base class."""
    for exc in (
        ValidationException("f", "v", "r"),
        EmployeeNotFoundException("x"),
        UpstreamUnavailableException("op"),
    ):
        assert isinstance(exc, EmployeeServiceException)


def test_status_mapping() -> None:
    """Each kind maps to one status code and error code."""
    assert status_code_for(ValidationException("f", "v", "r")) == 400
    assert status_code_for(EmployeeNotFoundException("x")) == 404
    assert status_code_for(UpstreamUnavailableException("op")) == 502
    assert status_code_for(EmployeeServiceException("other")) == 500

    assert error_code_for(ValidationException("f", "v", "r")) == "validation_error"
    assert error_code_for(EmployeeNotFoundException("x")) == "not_found"
    assert error_code_for(UpstreamUnavailableException("op")) == "upstream_unavailable"
    assert error_code_for(EmployeeServiceException("other")) == "internal_server_error"
