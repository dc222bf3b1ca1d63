"""
Typed Exception Hierarchy for the Workforce Kernel.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from WorkforceError:

    WorkforceError (base)
    |
    +-- VacationError
        +-- VacationDaysShortageError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Vacation        | VACATION_DAYS_SHORTAGE      | Requested debit exceeds the balance
----------------|-----------------------------|-----------------------------------------

===============================================================================
HANDLING PATTERNS
===============================================================================

Catch by type and read the structured attributes instead of parsing the
message:

    try:
        employee.take_vacation(days)
    except VacationDaysShortageError as e:
        return {
            "error": e.code,
            "requested": e.requested_days,
            "remaining": e.remaining_days,
        }

A shortage never modifies the employee; the caller may retry with a
smaller request.

Wage calculation and company aggregation never raise. Out-of-range day
counts and ages raise the built-in ``ValueError`` at construction or call
time, the same way the domain value objects reject unrepresentable input.
"""


class WorkforceError(Exception):
    """
    Base exception for all workforce kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "WORKFORCE_ERROR"


# Vacation-related exceptions


class VacationError(WorkforceError):
    """Base exception for vacation bookkeeping errors."""

    code: str = "VACATION_ERROR"


class VacationDaysShortageError(VacationError):
    """A vacation debit asked for more days than the employee has left."""

    code: str = "VACATION_DAYS_SHORTAGE"

    DEFAULT_MESSAGE = "Not enough vacation days are available."

    def __init__(
        self,
        requested_days: int,
        remaining_days: int,
        message: str = DEFAULT_MESSAGE,
    ):
        self.requested_days = requested_days
        self.remaining_days = remaining_days
        self.message = message
        super().__init__(
            f"Not enough vacation days are available. "
            f"Requested: {requested_days}, Remaining: {remaining_days}. "
            f"Message: {message}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VacationDaysShortageError):
            return NotImplemented
        return (
            self.requested_days == other.requested_days
            and self.remaining_days == other.remaining_days
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((self.requested_days, self.remaining_days, self.message))

    def __repr__(self) -> str:
        return (
            f"VacationDaysShortageError(requested_days={self.requested_days!r}, "
            f"remaining_days={self.remaining_days!r}, message={self.message!r})"
        )
