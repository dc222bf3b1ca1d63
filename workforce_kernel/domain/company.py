"""
Company (``workforce_kernel.domain.company``).

A named company and the employees it owns, in the order they were added.
Pure aggregation: no cross-employee logic, no removal, no lookup.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from workforce_kernel.domain.employee import Employee
from workforce_kernel.logging_config import get_logger

logger = get_logger("domain.company")


class EmployeeView(Sequence[Employee]):
    """Live, read-only view over a company's employee list.

    Reflects later ``add_employee`` calls; exposes no way to mutate the
    underlying list.
    """

    __slots__ = ("_employees",)

    def __init__(self, employees: list[Employee]):
        self._employees = employees

    @overload
    def __getitem__(self, index: int) -> Employee: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Employee, ...]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._employees[index])
        return self._employees[index]

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def __repr__(self) -> str:
        return f"EmployeeView({self._employees!r})"


class Company:
    """A company with a name and employees."""

    def __init__(self, name: str, employees: Iterable[Employee] = ()):
        self.name = name
        self._employees: list[Employee] = list(employees)

    def add_employee(self, employee: Employee) -> None:
        self._employees.append(employee)
        logger.debug(
            "company_employee_added",
            extra={
                "company": self.name,
                "employee": employee.person.name,
                "employee_count": len(self._employees),
            },
        )

    def all_employees(self) -> Sequence[Employee]:
        return EmployeeView(self._employees)

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def __repr__(self) -> str:
        return f"Company(name={self.name!r}, employees={self._employees!r})"
