"""
Notifications -- human-readable confirmations for pay and vacation events.

Employees report what they did through a ``Notifier`` rather than printing
directly, so callers can redirect, record, or silence the output.  The
message wording is fixed; tests and downstream tooling match on it.
"""

from __future__ import annotations

import math
import sys
from typing import Protocol, TextIO


class Notifier(Protocol):
    """Output sink for employee notifications."""

    def notify(self, message: str) -> None: ...


class ConsoleNotifier:
    """Writes each notification as one line of text.

    With no stream given, ``sys.stdout`` is looked up on every call so that
    redirection after construction (pytest's capsys, contextlib.redirect_stdout)
    is honoured.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def notify(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(message + "\n")


class RecordingNotifier:
    """Keeps notifications in memory instead of writing them anywhere."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()


def format_amount(value: float) -> str:
    """Render a pay amount the way it is shown to people.

    Whole amounts drop the fractional part (``1000.0 -> "1000"``); anything
    else uses the shortest repr that round-trips (``12.5 -> "12.5"``).
    NaN prints as ``"NaN"`` and infinities as ``"inf"`` / ``"-inf"``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def pay_message(amount: float, name: str) -> str:
    return f"Paying {format_amount(amount)} for {name}."


def vacation_taken_message(days_left: int) -> str:
    return f"Taking a vacation!. Holidays left: {days_left}"


def vacation_payout_message(days_left: int) -> str:
    return f"Paying out a holiday. Holidays left: {days_left}"
