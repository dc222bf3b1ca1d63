"""Roster configuration errors."""

from __future__ import annotations


class RosterValidationError(ValueError):
    """A roster file failed parsing or validation.

    Attributes:
        errors: Every problem found, one message per entry.
    """

    code: str = "ROSTER_INVALID"

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(
            f"Roster validation failed with {len(self.errors)} error(s): "
            + "; ".join(self.errors)
        )
