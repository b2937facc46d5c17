"""
Domain entities for employee data.

Core business objects representing employees and creation requests.
These entities are framework-agnostic: the upstream client and the HTTP
façade each translate their own wire format to and from these types.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .exceptions import ValidationException

MIN_AGE = 16
MAX_AGE = 75


@dataclass(frozen=True)
class Employee:
    """
    Employee record as owned by the upstream service.

    Read-only: the identifier is an opaque token assigned upstream and
    the age bound is not re-checked on read.
    """

    id: str
    name: str
    salary: int
    age: int
    title: str
    email: Optional[str] = None

    def has_name(self) -> bool:
        """Check whether the record carries a usable name."""
        return bool(self.name and self.name.strip())


@dataclass(frozen=True)
class CreateEmployeeCommand:
    """
    Value object for creating an employee upstream.

    Validates on construction so an invalid command can never be sent.
    """

    name: str
    salary: int
    age: int
    title: str

    def __post_init__(self):
        """Validate fields on creation."""
        if not self.name or not self.name.strip():
            raise ValidationException("name", self.name, "must not be blank")
        if self.salary is None or self.salary <= 0:
            raise ValidationException("salary", self.salary, "must be positive")
        if self.age is None or not MIN_AGE <= self.age <= MAX_AGE:
            raise ValidationException(
                "age", self.age, f"must be between {MIN_AGE} and {MAX_AGE}"
            )
        if not self.title or not self.title.strip():
            raise ValidationException("title", self.title, "must not be blank")

    def to_payload(self) -> Dict[str, Any]:
        """Body accepted by the upstream POST /employee endpoint."""
        return {
            "name": self.name,
            "salary": self.salary,
            "age": self.age,
            "title": self.title,
        }
