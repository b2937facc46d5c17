"""
Wire models for the upstream mock employee API.

The upstream wraps every payload in an envelope of the form
``{"data": ..., "status": "..."}``. These models only describe that wire
shape; callers receive domain entities via ``to_entity``.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..domain.entities import Employee


class UpstreamEmployee(BaseModel):
    """Employee record as serialized by the upstream service."""

    model_config = ConfigDict(extra="ignore")

    id: str
    employee_name: Optional[str] = None
    employee_salary: int
    employee_age: int
    employee_title: Optional[str] = None
    employee_email: Optional[str] = None

    def to_entity(self) -> Employee:
        """Translate to the domain entity."""
        return Employee(
            id=self.id,
            name=self.employee_name or "",
            salary=self.employee_salary,
            age=self.employee_age,
            title=self.employee_title or "",
            email=self.employee_email,
        )


class EmployeeListEnvelope(BaseModel):
    """Envelope returned by GET /employee."""

    model_config = ConfigDict(extra="ignore")

    data: Optional[List[UpstreamEmployee]] = None
    status: Optional[str] = None


class EmployeeEnvelope(BaseModel):
    """Envelope returned by GET /employee/{id} and POST /employee."""

    model_config = ConfigDict(extra="ignore")

    data: Optional[UpstreamEmployee] = None
    status: Optional[str] = None
