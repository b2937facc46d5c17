"""
Business logic service layer.

Orchestrates employee operations on top of the upstream client. Queries
always work on a fresh upstream listing; deletion resolves the id to a
name first because the upstream delete primitive is keyed by name.
"""

from typing import List, Optional

import structlog

from ..domain import queries
from ..domain.entities import CreateEmployeeCommand, Employee
from ..domain.exceptions import EmployeeNotFoundException
from ..infrastructure.employee_client import EmployeeClient

logger = structlog.get_logger(__name__)


class EmployeeService:
    """
    Employee service over the upstream employee API.

    Stateless: every call is resolved against upstream, which is the
    system of record.
    """

    def __init__(self, client: EmployeeClient):
        """
        Initialize employee service.

        Args:
            client: Upstream employee API client
        """
        self.client = client

    async def get_all_employees(self) -> List[Employee]:
        """Fetch every employee from upstream."""
        employees = await self.client.list_all()
        logger.info("Fetched employees", count=len(employees))
        return employees

    async def search_by_name(self, fragment: Optional[str]) -> List[Employee]:
        """
        Employees whose name contains the fragment, case-insensitively.

        A blank fragment returns every employee.
        """
        employees = await self.get_all_employees()
        matches = queries.filter_by_name(employees, fragment)
        logger.info(
            "Name search completed",
            fragment=fragment,
            searched=len(employees),
            matched=len(matches),
        )
        return matches

    async def get_employee_by_id(self, employee_id: str) -> Employee:
        """
        Fetch a single employee.

        Raises:
            EmployeeNotFoundException: If upstream does not know the id
        """
        logger.debug("Fetching employee", employee_id=employee_id)
        return await self.client.get_by_id(employee_id)

    async def get_highest_salary(self) -> int:
        """Highest salary across all employees; 0 when there are none."""
        employees = await self.get_all_employees()
        salary = queries.highest_salary(employees)
        logger.info("Highest salary computed", salary=salary, base_size=len(employees))
        return salary

    async def get_top_ten_highest_earning_names(self) -> List[str]:
        """Names of the ten best paid employees, highest first."""
        employees = await self.get_all_employees()
        return queries.top_earning_names(employees, queries.TOP_EARNERS_LIMIT)

    async def create_employee(self, command: CreateEmployeeCommand) -> Employee:
        """Create an employee upstream and return the stored record."""
        logger.info(
            "Creating employee",
            name=command.name,
            salary=command.salary,
            age=command.age,
            title=command.title,
        )
        employee = await self.client.create(command)
        logger.info("Employee created", employee_id=employee.id)
        return employee

    async def delete_employee_by_id(self, employee_id: str) -> str:
        """
        Delete an employee by id.

        Upstream deletes by name, so the id is resolved to the current
        name first. The two calls are not transactional: if the record
        vanishes in between, the negative delete result is taken as
        authoritative absence.

        Args:
            employee_id: Upstream employee identifier

        Returns:
            Name of the deleted employee

        Raises:
            EmployeeNotFoundException: If the id does not resolve, resolves
                to a record without a name, or the delete finds nothing
            UpstreamUnavailableException: If either upstream call fails
        """
        logger.info("Deleting employee", employee_id=employee_id)

        employee = await self.client.get_by_id(employee_id)
        if not employee.has_name():
            logger.warning("Employee has no name, cannot delete", employee_id=employee_id)
            raise EmployeeNotFoundException(employee_id)

        name = employee.name
        deleted = await self.client.delete_by_name(name)
        if not deleted:
            logger.info(
                "Upstream found nothing to delete",
                employee_id=employee_id,
                name=name,
            )
            raise EmployeeNotFoundException(name, lookup="name")

        logger.info("Employee deleted", employee_id=employee_id, name=name)
        return name
