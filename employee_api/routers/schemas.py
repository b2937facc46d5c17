"""
Request and response models for the employee endpoints.

The façade owns these field names; they are populated from domain
entities, never passed through from the upstream payload.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain.entities import MAX_AGE, MIN_AGE, CreateEmployeeCommand, Employee


class EmployeeResponse(BaseModel):
    """Employee as returned by the façade."""

    id: str = Field(..., description="Upstream-assigned identifier")
    employee_name: str = Field(..., description="Full name")
    employee_salary: int = Field(..., description="Yearly salary")
    employee_age: int = Field(..., description="Age in years")
    employee_title: str = Field(..., description="Job title")
    employee_email: Optional[str] = Field(None, description="Contact email")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "4a3a170b-22cd-4ac2-aad1-9bb5b34a1507",
                "employee_name": "Jon Doe",
                "employee_salary": 110500,
                "employee_age": 26,
                "employee_title": "Software Engineer",
                "employee_email": "jondoe@company.com",
            }
        }
    )

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            employee_name=employee.name,
            employee_salary=employee.salary,
            employee_age=employee.age,
            employee_title=employee.title,
            employee_email=employee.email,
        )


class CreateEmployeeRequest(BaseModel):
    """Body of POST /api/v1/employees."""

    name: str = Field(..., description="Full name, not blank")
    salary: int = Field(..., gt=0, description="Yearly salary, positive")
    age: int = Field(..., ge=MIN_AGE, le=MAX_AGE, description="Age in years")
    title: str = Field(..., description="Job title, not blank")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jon Doe",
                "salary": 110500,
                "age": 26,
                "title": "Software Engineer",
            }
        }
    )

    @field_validator("name", "title")
    @classmethod
    def not_blank(cls, value: str) -> str:
        """Reject empty or whitespace-only strings."""
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_command(self) -> CreateEmployeeCommand:
        return CreateEmployeeCommand(
            name=self.name, salary=self.salary, age=self.age, title=self.title
        )


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = False
    error: str
    message: str
    request_id: Optional[str] = None
