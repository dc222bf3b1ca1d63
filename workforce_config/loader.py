"""
Roster Loader (``workforce_config.loader``).

Responsibility
--------------
Loads a YAML roster file and parses it into typed
``workforce_config.schema`` dataclass instances.  The single public entry
point for callers is ``workforce_config.load_company()``.

Architecture position
---------------------
**Config layer** -- infrastructure tooling.  No dependency on kernel
objects; the bridges turn parsed definitions into them.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing required keys  -> ``KeyError`` propagates.
* A section of the wrong shape (a list where a mapping belongs), an unknown
  wage type, or a non-numeric wage amount  -> ``RosterValidationError``.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from workforce_config.errors import RosterValidationError
from workforce_config.schema import (
    VALID_WAGE_TYPES,
    WAGE_TYPE_HOURLY,
    WAGE_TYPE_SALARIED,
    CompanyDef,
    EmployeeDef,
    RosterDefinition,
    WageDef,
)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _require_mapping(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise RosterValidationError(
            [f"{where} must be a mapping, got {type(value).__name__}"]
        )
    return value


def _amount(data: dict[str, Any], key: str) -> float:
    value = data[key]
    try:
        return float(value)
    except (TypeError, ValueError):
        raise RosterValidationError([f"wage {key} must be a number, got {value!r}"]) from None


def parse_wage(data: dict[str, Any]) -> WageDef:
    """Parse a WageDef from a dict."""
    data = _require_mapping(data, "wage")
    wage_type = str(data["type"]).strip().lower()
    if wage_type not in VALID_WAGE_TYPES:
        raise RosterValidationError(
            [f"wage type must be one of {sorted(VALID_WAGE_TYPES)}, got {data['type']!r}"]
        )
    if wage_type == WAGE_TYPE_SALARIED:
        return WageDef(
            wage_type=WAGE_TYPE_SALARIED,
            monthly_salary=_amount(data, "monthly_salary"),
        )
    return WageDef(
        wage_type=WAGE_TYPE_HOURLY,
        hourly_rate=_amount(data, "hourly_rate"),
        hours_worked=_amount(data, "hours_worked"),
    )


def parse_employee(data: dict[str, Any]) -> EmployeeDef:
    """Parse an EmployeeDef from a dict."""
    data = _require_mapping(data, "employee")
    return EmployeeDef(
        name=data["name"],
        age=data["age"],
        role=data["role"],
        vacation_days=data["vacation_days"],
        wage=parse_wage(data["wage"]),
    )


def parse_roster(data: dict[str, Any]) -> RosterDefinition:
    """
    Parse a complete roster document.

    Preconditions:
        - ``data`` has a ``company`` mapping with ``name``.
        - ``employees``, when present, is a list of employee mappings.
    Postconditions:
        - Employees keep their file order.
        - ``checksum`` identifies the parsed document.

    Raises:
        RosterValidationError: if the document, its ``company`` section, or
            its ``employees`` section has the wrong shape.
    """
    data = _require_mapping(data, "roster")
    company = _require_mapping(data["company"], "company")
    employees = data.get("employees") or []
    if not isinstance(employees, list):
        raise RosterValidationError(
            [f"employees must be a list, got {type(employees).__name__}"]
        )
    return RosterDefinition(
        company=CompanyDef(name=company["name"]),
        employees=tuple(parse_employee(e) for e in employees),
        checksum=compute_checksum(data),
    )


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Identical ``data`` always produces identical checksums.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
