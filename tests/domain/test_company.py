"""
Tests for Company aggregation (``workforce_kernel.domain.company``).

Invariants tested:
- add_employee appends in insertion order, without de-duplication.
- all_employees is a live, read-only view rather than a copy.
"""

from collections.abc import MutableSequence, Sequence

import pytest

from workforce_kernel.domain.company import Company, EmployeeView
from workforce_kernel.domain.person import Role


class TestCompany:

    def test_construct_with_employees(self, company, john, jane):
        assert company.name == "My Company"
        assert list(company.all_employees()) == [john, jane]

    def test_construct_empty(self):
        company = Company("Empty Inc")
        assert len(company.all_employees()) == 0
        assert len(company) == 0

    def test_add_employee(self, make_employee):
        company = Company("My Company")
        company.add_employee(make_employee(name="Jane", age=25, role=Role.DEVELOPER))

        employees = company.all_employees()
        assert len(employees) == 1
        assert employees[0].person.name == "Jane"
        assert employees[0].person.age == 25
        assert employees[0].role == Role.DEVELOPER

    @pytest.mark.parametrize("n", [0, 1, 7])
    def test_insertion_order(self, make_employee, n):
        company = Company("Ordered")
        added = [make_employee(name=f"E{i}") for i in range(n)]
        for employee in added:
            company.add_employee(employee)

        employees = company.all_employees()
        assert len(employees) == n
        assert [e.person.name for e in employees] == [f"E{i}" for i in range(n)]
        assert all(a is b for a, b in zip(employees, added))

    def test_duplicates_allowed(self, john):
        company = Company("Dupes")
        company.add_employee(john)
        company.add_employee(john)
        assert len(company) == 2

    def test_iteration(self, company):
        assert [e.person.name for e in company] == ["John", "Jane"]

    def test_initial_iterable_is_copied(self, john, jane):
        source = [john]
        company = Company("Copy", source)
        source.append(jane)
        assert len(company) == 1

    def test_employees_are_shared_objects(self, company):
        company.all_employees()[0].take_vacation(5)
        assert company.all_employees()[0].vacation_days == 15


class TestEmployeeView:

    def test_is_read_only_sequence(self, company):
        view = company.all_employees()
        assert isinstance(view, EmployeeView)
        assert isinstance(view, Sequence)
        assert not isinstance(view, MutableSequence)
        assert not hasattr(view, "append")

    def test_item_assignment_rejected(self, company, john):
        view = company.all_employees()
        with pytest.raises(TypeError):
            view[0] = john

    def test_live_view(self, company, make_employee):
        view = company.all_employees()
        company.add_employee(make_employee(name="Late"))
        assert len(view) == 3
        assert view[-1].person.name == "Late"

    def test_slice_returns_tuple(self, company, john):
        assert company.all_employees()[:1] == (john,)

    def test_membership(self, company, jane):
        assert jane in company.all_employees()
