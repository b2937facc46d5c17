"""
Pure query functions over a materialized list of employees.

Every function is total: empty inputs produce a defined result rather
than an error, and the input list is never mutated.
"""

from typing import List, Optional, Sequence

from .entities import Employee

TOP_EARNERS_LIMIT = 10


def filter_by_name(
    employees: Sequence[Employee], fragment: Optional[str]
) -> List[Employee]:
    """
    Filter employees whose name contains the fragment, case-insensitively.

    A missing or blank fragment matches everything.

    Args:
        employees: Employees in upstream order
        fragment: Substring to look for

    Returns:
        Matching employees, order preserved
    """
    if fragment is None or not fragment.strip():
        return list(employees)

    needle = fragment.casefold()
    return [e for e in employees if e.name and needle in e.name.casefold()]


def highest_salary(employees: Sequence[Employee]) -> int:
    """Return the highest salary, or 0 for an empty list."""
    return max((e.salary for e in employees), default=0)


def top_earning_names(
    employees: Sequence[Employee], limit: int = TOP_EARNERS_LIMIT
) -> List[str]:
    """
    Names of the highest earners, highest salary first.

    Equal salaries keep their upstream order (``sorted`` is stable).

    Args:
        employees: Employees in upstream order
        limit: Maximum number of names

    Returns:
        At most ``limit`` names
    """
    ranked = sorted(employees, key=lambda e: e.salary, reverse=True)
    return [e.name for e in ranked[:limit]]
