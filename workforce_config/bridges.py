"""
Config -> Kernel Bridges.

Turns a validated ``RosterDefinition`` into kernel domain objects.  Lives in
workforce_config (the producer) because the kernel must never import
workforce_config.

Usage:
    from workforce_config.bridges import build_company

    company = build_company(roster, notifier=RecordingNotifier())
"""

from __future__ import annotations

from workforce_config.schema import WAGE_TYPE_SALARIED, EmployeeDef, RosterDefinition, WageDef
from workforce_kernel.domain.company import Company
from workforce_kernel.domain.employee import Employee
from workforce_kernel.domain.notifications import Notifier
from workforce_kernel.domain.person import Person, Role
from workforce_kernel.domain.wages import HourlyWage, SalariedWage, Wage


def build_wage(wage: WageDef) -> Wage:
    if wage.wage_type == WAGE_TYPE_SALARIED:
        return SalariedWage(wage.monthly_salary)
    return HourlyWage(wage.hourly_rate, wage.hours_worked)


def build_employee(emp: EmployeeDef, notifier: Notifier | None = None) -> Employee:
    return Employee(
        Person(emp.name, emp.age),
        Role.parse(emp.role),
        build_wage(emp.wage),
        emp.vacation_days,
        notifier=notifier,
    )


def build_company(roster: RosterDefinition, notifier: Notifier | None = None) -> Company:
    """Build a Company with its employees in roster order.

    Every employee shares ``notifier`` (default: a console notifier each).
    """
    company = Company(roster.company.name)
    for emp in roster.employees:
        company.add_employee(build_employee(emp, notifier))
    return company
