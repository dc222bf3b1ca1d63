"""Domain objects: people, wage policies, employees, and companies."""

from workforce_kernel.domain.company import Company, EmployeeView
from workforce_kernel.domain.employee import Employee
from workforce_kernel.domain.notifications import (
    ConsoleNotifier,
    Notifier,
    RecordingNotifier,
    format_amount,
)
from workforce_kernel.domain.person import Person, Role
from workforce_kernel.domain.wages import WAGE_TYPES, HourlyWage, SalariedWage, Wage

__all__ = [
    "Company",
    "ConsoleNotifier",
    "Employee",
    "EmployeeView",
    "HourlyWage",
    "Notifier",
    "Person",
    "RecordingNotifier",
    "Role",
    "SalariedWage",
    "WAGE_TYPES",
    "Wage",
    "format_amount",
]
