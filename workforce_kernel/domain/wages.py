"""
Wage Policies (``workforce_kernel.domain.wages``).

Responsibility
--------------
The two wage policies an employee can be paid under and the pay each one
yields.  An employee holds exactly one policy, chosen at construction.

Architecture position
---------------------
**Kernel > Domain** -- pure value objects, zero I/O.  Consumed by
``Employee.pay``.

Invariants enforced
-------------------
* ``calculate_pay`` is pure: same inputs, same result, no side effects.
* Exactly two policies exist (``WAGE_TYPES``).

Failure modes
-------------
* None.  Negative or NaN inputs are not rejected; callers supply sane
  values and get the arithmetic result back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Wage(Protocol):
    """Anything that can compute a pay amount."""

    def calculate_pay(self) -> float: ...


@dataclass(frozen=True, slots=True)
class SalariedWage:
    """A fixed monthly salary."""

    monthly_salary: float

    def calculate_pay(self) -> float:
        return self.monthly_salary


@dataclass(frozen=True, slots=True)
class HourlyWage:
    """An hourly rate paid for the hours worked in the period."""

    hourly_rate: float
    hours_worked: float

    def calculate_pay(self) -> float:
        return self.hourly_rate * self.hours_worked


WAGE_TYPES: tuple[type, ...] = (SalariedWage, HourlyWage)
