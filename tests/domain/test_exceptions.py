"""Tests for the typed exception hierarchy (``workforce_kernel.exceptions``)."""

import pytest

from workforce_kernel.exceptions import (
    VacationDaysShortageError,
    VacationError,
    WorkforceError,
)


class TestVacationDaysShortageError:

    def test_display(self):
        error = VacationDaysShortageError(
            requested_days=10,
            remaining_days=5,
            message="Not enough vacation days are available.",
        )
        assert str(error) == (
            "Not enough vacation days are available. Requested: 10, Remaining: 5. "
            "Message: Not enough vacation days are available."
        )

    def test_custom_message(self):
        error = VacationDaysShortageError(3, 1, "blackout period")
        assert str(error).endswith("Message: blackout period")
        assert error.message == "blackout period"

    def test_default_message(self):
        assert VacationDaysShortageError(1, 0).message == (
            "Not enough vacation days are available."
        )

    def test_hierarchy_and_code(self):
        error = VacationDaysShortageError(1, 0)
        assert isinstance(error, VacationError)
        assert isinstance(error, WorkforceError)
        assert error.code == "VACATION_DAYS_SHORTAGE"
        assert VacationError.code == "VACATION_ERROR"
        assert WorkforceError.code == "WORKFORCE_ERROR"

    def test_equality_by_fields(self):
        assert VacationDaysShortageError(5, 2) == VacationDaysShortageError(5, 2)
        assert VacationDaysShortageError(5, 2) != VacationDaysShortageError(5, 3)
        assert len({VacationDaysShortageError(5, 2), VacationDaysShortageError(5, 2)}) == 1

    def test_catchable_as_base(self):
        with pytest.raises(WorkforceError):
            raise VacationDaysShortageError(5, 2)

    def test_repr(self):
        assert repr(VacationDaysShortageError(5, 2, "m")) == (
            "VacationDaysShortageError(requested_days=5, remaining_days=2, message='m')"
        )
