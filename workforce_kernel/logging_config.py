"""
Structured JSON logging for the workforce kernel.

Every record under the ``workforce_kernel`` logger namespace is written as a
single JSON object: a fixed envelope (``ts``, ``level``, ``logger``,
``message``), whatever ``LogContext`` fields are bound for the current call,
the record's ``extra`` fields, and for records logged with ``exc_info`` the
exception's type, message, ``code``, and public attributes.

Typical wiring in a command-line tool::

    configure_logging(level=logging.INFO)
    with LogContext.bind(correlation_id=uuid4().hex, company=company.name):
        ...
"""

__all__ = [
    "CONTEXT_FIELDS",
    "StructuredFormatter",
    "LogContext",
    "get_logger",
    "configure_logging",
    "reset_logging",
]

import json
import logging
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

# ---------------------------------------------------------------------------
# Context propagation
# ---------------------------------------------------------------------------

CONTEXT_FIELDS: tuple[str, ...] = ("correlation_id", "company", "employee", "operation")

_CONTEXT_VARS: dict[str, ContextVar[str | None]] = {
    name: ContextVar(f"workforce_log_{name}", default=None) for name in CONTEXT_FIELDS
}


class LogContext:
    """Call-scoped fields merged into every log record.

    ``correlation_id`` ties together the records of one pay run; ``company``,
    ``employee`` and ``operation`` say what the run was doing when a record
    was written.
    """

    @staticmethod
    def set(**fields: str | None) -> None:
        """Set context fields. None values are skipped."""
        unknown = set(fields) - set(CONTEXT_FIELDS)
        if unknown:
            raise TypeError(f"Unknown log context field(s): {sorted(unknown)}")
        for name, value in fields.items():
            if value is not None:
                _CONTEXT_VARS[name].set(value)

    @staticmethod
    def get_all() -> dict[str, str]:
        """Return the fields that currently have a value."""
        return {
            name: var.get()
            for name, var in _CONTEXT_VARS.items()
            if var.get() is not None
        }

    @staticmethod
    def clear() -> None:
        for var in _CONTEXT_VARS.values():
            var.set(None)

    @staticmethod
    @contextmanager
    def bind(**fields: str | None) -> Iterator[type["LogContext"]]:
        """Set fields for the duration of a ``with`` block.

        Previous values are restored on exit.  Unknown names and None values
        are ignored.
        """
        tokens = [
            (_CONTEXT_VARS[name], _CONTEXT_VARS[name].set(value))
            for name, value in fields.items()
            if name in _CONTEXT_VARS and value is not None
        ]
        try:
            yield LogContext
        finally:
            for var, token in reversed(tokens):
                var.reset(token)


# ---------------------------------------------------------------------------
# JSON Formatter
# ---------------------------------------------------------------------------

_RESERVED_RECORD_KEYS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "taskName"}


def _to_json(obj: Any) -> Any:
    if isinstance(obj, datetime):
        return obj.isoformat()
    # Enum members are logged by value (Role.DEVELOPER -> "developer")
    value = getattr(obj, "value", None)
    if isinstance(value, (str, int)):
        return value
    return str(obj)


def _exception_fields(exc: BaseException) -> dict[str, Any]:
    """Flatten an exception into ``exc_*`` keys.

    WorkforceError subclasses contribute their ``code`` and every public
    attribute (``VacationDaysShortageError.requested_days`` becomes
    ``exc_requested_days``).
    """
    fields: dict[str, Any] = {
        "exc_type": type(exc).__name__,
        "exc_message": str(exc),
    }
    code = getattr(exc, "code", None)
    if code is not None:
        fields["exc_code"] = code
    for key, value in vars(exc).items():
        if not key.startswith("_"):
            fields.setdefault(f"exc_{key}", value)
    return fields


class StructuredFormatter(logging.Formatter):
    """Formats each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **LogContext.get_all(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED_RECORD_KEYS:
                payload.setdefault(key, value)

        if record.exc_info and record.exc_info[1] is not None:
            payload.update(_exception_fields(record.exc_info[1]))
            payload["traceback"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=_to_json)


# ---------------------------------------------------------------------------
# Logger factory and initialization
# ---------------------------------------------------------------------------

_ROOT_LOGGER_NAME = "workforce_kernel"

_configured = False
_lock = threading.Lock()


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the workforce_kernel namespace."""
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    *,
    level: int = logging.INFO,
    stream: Any = None,
    handler: logging.Handler | None = None,
) -> None:
    """Attach a JSON handler to the workforce_kernel logger.

    Only the first call has any effect until ``reset_logging`` is called.
    """
    global _configured
    with _lock:
        if _configured:
            return
        _configured = True

    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter())

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.propagate = False
    root.addHandler(handler)


def reset_logging() -> None:
    """Undo ``configure_logging``; used between tests."""
    global _configured
    with _lock:
        _configured = False
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.WARNING)
    root.propagate = True
