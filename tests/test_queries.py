"""
Tests for the pure employee query functions.
"""

from employee_api.domain.entities import Employee
from employee_api.domain.queries import filter_by_name, highest_salary, top_earning_names


def _emp(name: str, salary: int) -> Employee:
    return Employee(id=name, name=name, salary=salary, age=30, title="Engineer")


class TestFilterByName:
    """Test case-insensitive name filtering."""

    def test_substring_match_is_case_insensitive(self, staff):
        """Fragment matches regardless of case."""
        result = filter_by_name(staff, "ROSA")

        assert [e.name for e in result] == ["Rosario O'Kon"]

    def test_matches_in_the_middle_of_the_name(self, staff):
        """Containment, not prefix."""
        result = filter_by_name(staff, "ova")

        assert [e.name for e in result] == ["Bob Novak"]

    def test_preserves_upstream_order(self, staff):
        """Matches come back in the order upstream returned them."""
        result = filter_by_name(staff, "o")

        assert [e.id for e in result] == ["e1", "e2", "e3", "e4"]

    def test_blank_fragment_matches_everything(self, staff):
        """Empty, whitespace and None all return the full list."""
        assert filter_by_name(staff, "") == staff
        assert filter_by_name(staff, "   ") == staff
        assert filter_by_name(staff, None) == staff

    def test_no_match_returns_empty(self, staff):
        """Unknown fragment yields nothing."""
        assert filter_by_name(staff, "zzz") == []

    def test_does_not_mutate_input(self, staff):
        """Returned list is a new list."""
        result = filter_by_name(staff, None)
        result.pop()

        assert len(staff) == 4


class TestHighestSalary:
    """Test highest salary computation."""

    def test_empty_list_is_zero(self):
        """Defined floor for no employees."""
        assert highest_salary([]) == 0

    def test_returns_maximum(self, staff):
        """Maximum of the salary field."""
        assert highest_salary(staff) == 130000

    def test_single_employee(self):
        """One employee is its own maximum."""
        assert highest_salary([_emp("Solo", 42)]) == 42


class TestTopEarningNames:
    """Test top-N ranking by salary."""

    def test_sorted_descending(self, staff):
        """Highest earner first."""
        assert top_earning_names(staff) == [
            "Rosario O'Kon",
            "Alice Rossi",
            "Bob Novak",
            "Carla Dupont",
        ]

    def test_ties_keep_upstream_order(self):
        """Equal salaries are not reordered."""
        employees = [_emp("First", 100), _emp("Second", 100), _emp("Third", 100)]

        assert top_earning_names(employees) == ["First", "Second", "Third"]

    def test_limited_to_ten(self):
        """Never more than ten names."""
        employees = [_emp(f"Employee {i}", 1000 + i) for i in range(25)]

        result = top_earning_names(employees)

        assert len(result) == 10
        assert result[0] == "Employee 24"
        assert result[-1] == "Employee 15"

    def test_fewer_than_ten(self, staff):
        """Short lists are returned whole."""
        assert len(top_earning_names(staff)) == len(staff)

    def test_empty_list(self):
        """No employees, no names."""
        assert top_earning_names([]) == []

    def test_names_are_subset_of_input(self):
        """Only names from the input appear."""
        employees = [_emp(f"E{i}", (i * 37) % 11) for i in range(15)]
        names = {e.name for e in employees}

        result = top_earning_names(employees)

        assert set(result) <= names
        salaries = [next(e.salary for e in employees if e.name == n) for n in result]
        assert salaries == sorted(salaries, reverse=True)
