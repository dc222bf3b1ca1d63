"""
Workforce Kernel

An in-memory model of companies and their employees with:
- Salaried and hourly wage policies
- Vacation-day bookkeeping with shortage checks
- Injectable notification output
- Structured JSON logging
"""

from workforce_kernel.domain import (
    Company,
    ConsoleNotifier,
    Employee,
    HourlyWage,
    Person,
    RecordingNotifier,
    Role,
    SalariedWage,
    Wage,
)
from workforce_kernel.exceptions import (
    VacationDaysShortageError,
    VacationError,
    WorkforceError,
)

__version__ = "0.1.0"

__all__ = [
    "Company",
    "ConsoleNotifier",
    "Employee",
    "HourlyWage",
    "Person",
    "RecordingNotifier",
    "Role",
    "SalariedWage",
    "VacationDaysShortageError",
    "VacationError",
    "Wage",
    "WorkforceError",
]
