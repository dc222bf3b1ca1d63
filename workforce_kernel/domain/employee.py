"""
Employee (``workforce_kernel.domain.employee``).

Responsibility
--------------
One employee: who they are, what they do, how they are paid, and how many
vacation days they have left.  Gates every vacation-day debit against the
current balance.

Architecture position
---------------------
**Kernel > Domain** -- owns its ``Person`` and wage policy exclusively.
Side effects are limited to the injected ``Notifier`` and structured log
records.

Invariants enforced
-------------------
* ``vacation_days`` stays within ``[0, 255]``.
* ``vacation_days`` only changes through ``take_vacation`` and
  ``payout_vacation``.
* A refused debit leaves the balance untouched (no partial debit).

Failure modes
-------------
* ``VacationDaysShortageError`` -- the request exceeds the balance.
* ``ValueError`` -- a day count outside ``[0, 255]``.
"""

from __future__ import annotations

from typing import ClassVar

from workforce_kernel.domain.notifications import (
    ConsoleNotifier,
    Notifier,
    pay_message,
    vacation_payout_message,
    vacation_taken_message,
)
from workforce_kernel.domain.person import Person, Role
from workforce_kernel.domain.wages import Wage
from workforce_kernel.exceptions import VacationDaysShortageError
from workforce_kernel.logging_config import get_logger

logger = get_logger("domain.employee")

MAX_VACATION_DAYS = 255


def _check_day_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {value!r}")
    if not 0 <= value <= MAX_VACATION_DAYS:
        raise ValueError(
            f"{name} must be between 0 and {MAX_VACATION_DAYS}, got {value}"
        )


class Employee:
    """
    An employee paid under a single wage policy.

    Contract:
        ``pay`` never fails.  ``take_vacation`` and ``payout_vacation`` either
        debit the full amount and notify, or raise and change nothing.

    Example:
        >>> from workforce_kernel.domain.person import Person, Role
        >>> from workforce_kernel.domain.wages import SalariedWage
        >>> employee = Employee(
        ...     Person("John", 30), Role.MANAGER, SalariedWage(1000.0), 20,
        ... )
        >>> employee.take_vacation(5)
        Taking a vacation!. Holidays left: 15
        >>> employee.vacation_days
        15
    """

    FIXED_VACATION_DAYS_PAYOUT: ClassVar[int] = 5

    def __init__(
        self,
        person: Person,
        role: Role,
        wage: Wage,
        vacation_days: int,
        *,
        notifier: Notifier | None = None,
    ):
        _check_day_count("vacation_days", vacation_days)
        self.person = person
        self.role = role
        self.wage = wage
        self._vacation_days = vacation_days
        self.notifier: Notifier = notifier if notifier is not None else ConsoleNotifier()

    @property
    def vacation_days(self) -> int:
        return self._vacation_days

    @property
    def name(self) -> str:
        return self.person.name

    def __repr__(self) -> str:
        return (
            f"Employee(person={self.person!r}, role={self.role!r}, "
            f"wage={self.wage!r}, vacation_days={self._vacation_days!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return (
            self.person == other.person
            and self.role == other.role
            and self.wage == other.wage
            and self._vacation_days == other._vacation_days
        )

    __hash__ = None  # mutable

    def pay(self) -> float:
        """Compute this period's pay and announce it.

        Returns the amount so callers can total a payroll without
        recomputing it.
        """
        amount = self.wage.calculate_pay()
        self.notifier.notify(pay_message(amount, self.person.name))
        logger.info(
            "employee_paid",
            extra={
                "employee": self.person.name,
                "wage_type": type(self.wage).__name__,
                "amount": amount,
            },
        )
        return amount

    def take_vacation(self, days: int) -> None:
        """Take ``days`` of vacation.

        Raises:
            VacationDaysShortageError: ``days`` exceeds the balance; nothing
                is debited.
            ValueError: ``days`` is not an int in ``[0, 255]``.
        """
        _check_day_count("days", days)
        self._debit(days)
        self.notifier.notify(vacation_taken_message(self._vacation_days))
        logger.info(
            "vacation_taken",
            extra={
                "employee": self.person.name,
                "days": days,
                "remaining_days": self._vacation_days,
            },
        )

    def payout_vacation(self) -> None:
        """Cash out ``FIXED_VACATION_DAYS_PAYOUT`` vacation days.

        Raises:
            VacationDaysShortageError: fewer than the payout quantum remain;
                nothing is debited.
        """
        days = self.FIXED_VACATION_DAYS_PAYOUT
        self._debit(days)
        self.notifier.notify(vacation_payout_message(self._vacation_days))
        logger.info(
            "vacation_paid_out",
            extra={
                "employee": self.person.name,
                "days": days,
                "remaining_days": self._vacation_days,
            },
        )

    def _debit(self, days: int) -> None:
        if self._vacation_days < days:
            logger.warning(
                "vacation_shortage",
                extra={
                    "employee": self.person.name,
                    "requested_days": days,
                    "remaining_days": self._vacation_days,
                },
            )
            raise VacationDaysShortageError(
                requested_days=days,
                remaining_days=self._vacation_days,
            )
        self._vacation_days -= days
