"""
Pytest fixtures for the workforce kernel test suite.

Provides:
- Structured logging configuration and log capture
- Recording notifier so tests can assert on notification text
- Employee and company builders
- Roster file writer
"""

import json
import logging
from io import StringIO
from pathlib import Path

import pytest
import yaml

from workforce_kernel.domain.company import Company
from workforce_kernel.domain.employee import Employee
from workforce_kernel.domain.notifications import RecordingNotifier
from workforce_kernel.domain.person import Person, Role
from workforce_kernel.domain.wages import HourlyWage, SalariedWage
from workforce_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture workforce_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, make_employee):
            make_employee(vacation_days=2).take_vacation(1)
            logs = captured_logs()
            assert any(r["message"] == "vacation_taken" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("workforce_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def make_employee(notifier):
    """
    Build an Employee with sensible defaults; every argument is overridable.

    All employees built by one test share the ``notifier`` fixture.
    """

    def _make(
        name: str = "John",
        age: int = 30,
        role: Role = Role.MANAGER,
        wage=None,
        vacation_days: int = 20,
    ) -> Employee:
        return Employee(
            Person(name, age),
            role,
            wage if wage is not None else SalariedWage(1000.0),
            vacation_days,
            notifier=notifier,
        )

    return _make


@pytest.fixture
def john(make_employee) -> Employee:
    """Salaried manager with 20 vacation days."""
    return make_employee()


@pytest.fixture
def jane(make_employee) -> Employee:
    """Hourly developer with 20 vacation days."""
    return make_employee(
        name="Jane", age=25, role=Role.DEVELOPER, wage=HourlyWage(20.0, 40.0),
    )


@pytest.fixture
def company(john, jane) -> Company:
    return Company("My Company", [john, jane])


# =============================================================================
# Roster fixtures
# =============================================================================


SAMPLE_ROSTER = {
    "company": {"name": "My Company"},
    "employees": [
        {
            "name": "John",
            "age": 30,
            "role": "manager",
            "vacation_days": 20,
            "wage": {"type": "salaried", "monthly_salary": 1000.0},
        },
        {
            "name": "Jane",
            "age": 25,
            "role": "developer",
            "vacation_days": 2,
            "wage": {"type": "hourly", "hourly_rate": 20.0, "hours_worked": 40.0},
        },
    ],
}


@pytest.fixture
def write_roster(tmp_path):
    """Write a roster dict (default: SAMPLE_ROSTER) to a YAML file and return its path."""

    def _write(data: dict | None = None, filename: str = "roster.yaml") -> Path:
        path = tmp_path / filename
        path.write_text(yaml.safe_dump(data if data is not None else SAMPLE_ROSTER))
        return path

    return _write
