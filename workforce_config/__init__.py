"""
workforce_config -- single public entrypoint for roster configuration.

Responsibility:
    Provides the way to obtain a populated ``Company`` from a YAML roster
    file through ``load_company()``.  Parsing, validation, and object
    construction happen behind it.

Architecture position:
    Configuration -- sits above ``workforce_kernel``.  The kernel MUST NEVER
    import from ``workforce_config``; ``bridges`` translate parsed roster
    definitions into kernel objects.

Failure modes:
    - ``FileNotFoundError`` -- the roster file does not exist.
    - ``yaml.YAMLError`` -- the file is not valid YAML.
    - ``KeyError`` -- a required key is missing.
    - ``RosterValidationError`` -- the roster parsed but failed validation;
      ``errors`` lists every problem found.

Audit relevance:
    Every successful ``load_company()`` call emits a ``roster_loaded`` log
    entry with the company name, employee count, and roster checksum.
"""

from __future__ import annotations

from pathlib import Path

from workforce_config.bridges import build_company
from workforce_config.errors import RosterValidationError
from workforce_config.loader import compute_checksum, load_yaml_file, parse_roster
from workforce_config.schema import RosterDefinition
from workforce_config.validator import validate_roster
from workforce_kernel.domain.company import Company
from workforce_kernel.domain.notifications import Notifier
from workforce_kernel.logging_config import get_logger

_logger = get_logger("config")


def load_roster(path: Path | str) -> RosterDefinition:
    """Load, parse, and validate a roster file without building objects."""
    path = Path(path)
    roster = parse_roster(load_yaml_file(path))
    result = validate_roster(roster)
    if not result.is_valid:
        _logger.warning(
            "roster_invalid",
            extra={"path": str(path), "errors": result.errors},
        )
        raise RosterValidationError(result.errors)
    return roster


def load_company(path: Path | str, notifier: Notifier | None = None) -> Company:
    """The public roster entrypoint.

    Guarantees:
        - The returned ``Company`` holds one ``Employee`` per roster entry,
          in file order.
        - A ``roster_loaded`` log entry is emitted on every successful call.
    """
    roster = load_roster(path)
    company = build_company(roster, notifier)
    _logger.info(
        "roster_loaded",
        extra={
            "path": str(path),
            "company": company.name,
            "employee_count": len(company),
            "checksum": roster.checksum,
        },
    )
    return company


__all__ = [
    "RosterValidationError",
    "build_company",
    "compute_checksum",
    "load_company",
    "load_roster",
    "parse_roster",
    "validate_roster",
]
