#!/usr/bin/env python3
"""
Run a pay cycle for a company roster.

Usage:
    python scripts/run_payroll.py ROSTER [--vacation NAME DAYS]... [--payout NAME]...
                                  [--log-level LEVEL]

The script:
  1. Loads the roster YAML into a Company
  2. Applies --vacation / --payout requests in the order given
  3. Pays every employee in roster order

Notifications go to stdout; structured JSON logs go to stderr.

Exit codes:
  0 -- every request succeeded
  1 -- at least one vacation request was refused for lack of days
  2 -- the roster could not be loaded or a name matched no employee
"""

import argparse
import logging
import sys
from pathlib import Path
from uuid import uuid4

# Add project root to path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

import yaml

from workforce_config import load_company
from workforce_kernel.domain.company import Company
from workforce_kernel.domain.employee import Employee
from workforce_kernel.exceptions import VacationDaysShortageError
from workforce_kernel.logging_config import LogContext, configure_logging, get_logger

EXIT_OK = 0
EXIT_SHORTAGE = 1
EXIT_USAGE = 2

logger = get_logger("cli.run_payroll")


class _AppendOperation(argparse.Action):
    """Collect --vacation and --payout into one ordered list."""

    def __call__(self, parser, namespace, values, option_string=None):
        operations = list(getattr(namespace, self.dest, None) or [])
        if option_string == "--vacation":
            name, days = values
            try:
                operations.append(("vacation", name, int(days)))
            except ValueError:
                parser.error(f"--vacation DAYS must be an integer, got {days!r}")
        else:
            operations.append(("payout", values, None))
        setattr(namespace, self.dest, operations)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Apply vacation requests and pay every employee in a roster.",
    )
    parser.add_argument("roster", type=Path, help="Path to the roster YAML file")
    parser.add_argument(
        "--vacation",
        nargs=2,
        metavar=("NAME", "DAYS"),
        dest="operations",
        action=_AppendOperation,
        help="Take DAYS of vacation for NAME (repeatable)",
    )
    parser.add_argument(
        "--payout",
        metavar="NAME",
        dest="operations",
        action=_AppendOperation,
        help="Pay out the fixed vacation quantum for NAME (repeatable)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Structured log level on stderr (default: WARNING)",
    )
    return parser


def find_employee(company: Company, name: str) -> Employee | None:
    for employee in company.all_employees():
        if employee.person.name == name:
            return employee
    return None


def run(company: Company, operations: list[tuple[str, str, int | None]]) -> int:
    """Apply operations, then pay everyone. Returns the exit code."""
    status = EXIT_OK
    for kind, name, days in operations:
        employee = find_employee(company, name)
        if employee is None:
            print(f"Error: no employee named {name!r} in {company.name}", file=sys.stderr)
            return EXIT_USAGE
        with LogContext.bind(employee=name, operation=kind):
            try:
                if kind == "vacation":
                    employee.take_vacation(days)
                else:
                    employee.payout_vacation()
            except VacationDaysShortageError as exc:
                logger.warning("vacation_request_refused", exc_info=True)
                print(str(exc), file=sys.stderr)
                status = EXIT_SHORTAGE
            except ValueError as exc:
                print(f"Error: {exc}", file=sys.stderr)
                return EXIT_USAGE

    for employee in company.all_employees():
        with LogContext.bind(employee=employee.person.name, operation="pay"):
            employee.pay()
    return status


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=getattr(logging, args.log_level), stream=sys.stderr)

    with LogContext.bind(correlation_id=uuid4().hex):
        # RosterValidationError is a ValueError; an unreadable path is an OSError
        try:
            company = load_company(args.roster)
        except (OSError, yaml.YAMLError, KeyError, ValueError) as exc:
            print(f"Error: cannot load roster {args.roster}: {exc}", file=sys.stderr)
            return EXIT_USAGE

        with LogContext.bind(company=company.name):
            return run(company, args.operations or [])


if __name__ == "__main__":
    sys.exit(main())
