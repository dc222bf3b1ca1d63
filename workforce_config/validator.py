"""
Roster Validator (``workforce_config.validator``).

Responsibility
--------------
Checks a parsed ``RosterDefinition`` before any kernel object is built, so
that every problem in a file is reported at once instead of failing on the
first bad employee.

Checks
------
* Company and employee names are non-empty strings.
* Ages and vacation-day balances are ints in ``[0, 255]``.
* Roles are strings naming a known ``Role``.

Wage amounts are deliberately not checked: negative or zero rates are
passed through to the kernel unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from workforce_config.schema import RosterDefinition
from workforce_kernel.domain.employee import MAX_VACATION_DAYS
from workforce_kernel.domain.person import MAX_AGE, Role


@dataclass
class RosterValidationResult:
    """
    Result of roster validation.

    ``is_valid`` returns ``True`` only when ``errors`` is empty.
    """

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)


def _is_int_in_range(value: object, upper: int) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= upper
    )


def _is_text(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_roster(roster: RosterDefinition) -> RosterValidationResult:
    result = RosterValidationResult()

    if not _is_text(roster.company.name):
        result.add_error(
            f"company name must be a non-empty string, got {roster.company.name!r}"
        )

    for index, emp in enumerate(roster.employees):
        label = f"employees[{index}]"
        if not _is_text(emp.name):
            result.add_error(f"{label}: name must be a non-empty string, got {emp.name!r}")
        else:
            label = f"{label} ({emp.name})"
        if not _is_int_in_range(emp.age, MAX_AGE):
            result.add_error(f"{label}: age must be an int in [0, {MAX_AGE}], got {emp.age!r}")
        if not _is_int_in_range(emp.vacation_days, MAX_VACATION_DAYS):
            result.add_error(
                f"{label}: vacation_days must be an int in [0, {MAX_VACATION_DAYS}], "
                f"got {emp.vacation_days!r}"
            )
        if not isinstance(emp.role, str):
            result.add_error(f"{label}: role must be a string, got {emp.role!r}")
            continue
        try:
            Role.parse(emp.role)
        except ValueError as exc:
            result.add_error(f"{label}: {exc}")

    return result
