"""
Person and Role (``workforce_kernel.domain.person``).

Responsibility
--------------
Immutable identity data for an employee (name and age) and the closed set
of roles an employee can hold.

Architecture position
---------------------
**Kernel > Domain** -- pure value objects, zero I/O.  Owned exclusively by
the ``Employee`` that contains them.

Failure modes
-------------
* ``ValueError`` when ``age`` is not an int in ``[0, 255]``.
* ``ValueError`` from ``Role.parse`` for unknown role text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MAX_AGE = 255


class Role(Enum):
    """Roles an employee can hold."""
    DEVELOPER = "developer"
    MANAGER = "manager"
    DESIGNER = "designer"
    TESTER = "tester"
    ANALYST = "analyst"
    SUPPORT = "support"

    @classmethod
    def parse(cls, text: str) -> Role:
        """Resolve a role from its value or name, ignoring case."""
        key = text.strip().lower()
        for role in cls:
            if key in (role.value, role.name.lower()):
                return role
        raise ValueError(
            f"Unknown role {text!r}; expected one of "
            f"{sorted(r.value for r in cls)}"
        )


@dataclass(frozen=True, slots=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful age
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise ValueError(f"age must be an int, got {self.age!r}")
        if not 0 <= self.age <= MAX_AGE:
            raise ValueError(f"age must be between 0 and {MAX_AGE}, got {self.age}")
