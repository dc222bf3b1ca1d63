"""
Roster schema.

Defines the human-authored source artifact describing one company and its
employees.  YAML roster files are parsed into these types by the loader,
checked by the validator, and turned into kernel objects by the bridges.

Key distinction:
  RosterDefinition = source artifact (human-authored, plain data)
  Company          = runtime object (kernel domain, mutable balances)
"""

from __future__ import annotations

from dataclasses import dataclass

WAGE_TYPE_SALARIED = "salaried"
WAGE_TYPE_HOURLY = "hourly"
VALID_WAGE_TYPES = frozenset({WAGE_TYPE_SALARIED, WAGE_TYPE_HOURLY})


@dataclass(frozen=True)
class WageDef:
    """A wage policy as written in the roster.

    ``monthly_salary`` is set for salaried wages; ``hourly_rate`` and
    ``hours_worked`` for hourly ones.
    """

    wage_type: str
    monthly_salary: float | None = None
    hourly_rate: float | None = None
    hours_worked: float | None = None


@dataclass(frozen=True)
class EmployeeDef:
    """One roster entry."""

    name: str
    age: int
    role: str
    vacation_days: int
    wage: WageDef


@dataclass(frozen=True)
class CompanyDef:
    name: str


@dataclass(frozen=True)
class RosterDefinition:
    """A complete roster: the company and its employees in file order."""

    company: CompanyDef
    employees: tuple[EmployeeDef, ...] = ()
    checksum: str = ""
