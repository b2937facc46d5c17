"""
Employee API Tests - Test Configuration.

Provides pytest fixtures for employee data, upstream payloads and an
upstream client wired to an in-memory httpx transport.
"""

from typing import Any, Callable, Dict, List

import httpx
import pytest

from employee_api.domain.entities import Employee
from employee_api.infrastructure.employee_client import EmployeeClient

UPSTREAM_URL = "http://upstream.test/api/v1"


def upstream_record(
    employee_id: str,
    name: str,
    salary: int,
    age: int = 30,
    title: str = "Engineer",
) -> Dict[str, Any]:
    """Employee as the upstream API serializes it."""
    return {
        "id": employee_id,
        "employee_name": name,
        "employee_salary": salary,
        "employee_age": age,
        "employee_title": title,
        "employee_email": name.lower().replace(" ", "") + "@company.com",
    }


@pytest.fixture
def jane() -> Employee:
    """Sample employee used across service and router tests."""
    return Employee(
        id="5255f1a5-f9f7-4be5-829a-134bde088d17",
        name="Jane Doe",
        salary=123000,
        age=33,
        title="Software Engineer",
        email="janedoe@company.com",
    )


@pytest.fixture
def staff() -> List[Employee]:
    """Small roster in upstream order."""
    return [
        Employee(id="e1", name="Alice Rossi", salary=120000, age=31, title="Engineer"),
        Employee(id="e2", name="Bob Novak", salary=90000, age=28, title="QA"),
        Employee(id="e3", name="Rosario O'Kon", salary=130000, age=40, title="Manager"),
        Employee(id="e4", name="Carla Dupont", salary=90000, age=45, title="Analyst"),
    ]


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], EmployeeClient]:
    """
    Factory for an EmployeeClient backed by httpx.MockTransport.

    The handler receives every outgoing request and returns the response
    the fake upstream should give.
    """

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> EmployeeClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return EmployeeClient(base_url=UPSTREAM_URL, timeout=5.0, http_client=http_client)

    return factory
