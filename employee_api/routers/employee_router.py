"""
Employee router.

Maps the public employee endpoints onto EmployeeService. Domain
exceptions raised below are translated to HTTP responses by the
handlers registered in ``employee_api.error_handlers``.

Static paths are declared before ``/{employee_id}`` so that
``highestSalary`` and ``topTenHighestEarningEmployeeNames`` are never
captured as ids.
"""

from typing import List

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from ..dependencies import get_employee_service
from ..services.employee_service import EmployeeService
from .schemas import CreateEmployeeRequest, EmployeeResponse, ErrorResponse

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/api/v1/employees",
    tags=["employees"],
    responses={502: {"description": "Upstream unavailable", "model": ErrorResponse}},
)


@router.get(
    "",
    response_model=List[EmployeeResponse],
    summary="List employees",
)
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeResponse]:
    """Return every employee known upstream."""
    employees = await service.get_all_employees()
    return [EmployeeResponse.from_entity(e) for e in employees]


@router.get(
    "/search/{fragment}",
    response_model=List[EmployeeResponse],
    summary="Search employees by name",
)
async def search_employees_by_name(
    fragment: str,
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeResponse]:
    """Return employees whose name contains the fragment, case-insensitively."""
    logger.info("Search requested", fragment=fragment)
    employees = await service.search_by_name(fragment)
    return [EmployeeResponse.from_entity(e) for e in employees]


@router.get(
    "/highestSalary",
    response_model=int,
    summary="Highest salary",
)
async def get_highest_salary(
    service: EmployeeService = Depends(get_employee_service),
) -> int:
    """Return the highest salary; 0 when there are no employees."""
    return await service.get_highest_salary()


@router.get(
    "/topTenHighestEarningEmployeeNames",
    response_model=List[str],
    summary="Top ten earners",
)
async def get_top_ten_highest_earning_names(
    service: EmployeeService = Depends(get_employee_service),
) -> List[str]:
    """Return up to ten names, highest salary first."""
    return await service.get_top_ten_highest_earning_names()


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={404: {"description": "Employee not found", "model": ErrorResponse}},
    summary="Get employee by id",
)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Return one employee."""
    employee = await service.get_employee_by_id(employee_id)
    return EmployeeResponse.from_entity(employee)


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid employee", "model": ErrorResponse}},
    summary="Create employee",
)
async def create_employee(
    body: CreateEmployeeRequest,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """Create an employee upstream and return the stored record."""
    employee = await service.create_employee(body.to_command())
    return EmployeeResponse.from_entity(employee)


@router.delete(
    "/{employee_id}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Name of the deleted employee", "content": {"text/plain": {}}},
        404: {"description": "Employee not found", "model": ErrorResponse},
    },
    summary="Delete employee by id",
)
async def delete_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> PlainTextResponse:
    """Delete an employee and return its name as plain text."""
    name = await service.delete_employee_by_id(employee_id)
    return PlainTextResponse(name)
