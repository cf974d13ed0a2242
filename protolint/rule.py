"""The rule interface and rule collections."""

from __future__ import annotations

import enum
from typing import Protocol, runtime_checkable

from .proto import Proto
from .report import Failure


class Severity(str, enum.Enum):
    """Severity a rule's failures carry on export."""

    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"


@runtime_checkable
class Rule(Protocol):
    """A rule that a linter can apply to a parsed file."""

    @property
    def id(self) -> str:
        """The rule ID in UPPER_SNAKE_CASE."""
        ...

    @property
    def purpose(self) -> str:
        """A human-readable description of the rule."""
        ...

    @property
    def is_official(self) -> bool:
        """Whether the rule belongs to the official style guide."""
        ...

    @property
    def severity(self) -> Severity:
        """The severity of the rule's failures."""
        ...

    def apply(self, proto: Proto) -> list[Failure]:
        """Apply the rule and return the failures found."""
        ...


class Rules(list):
    """A list of rules."""

    def default(self) -> Rules:
        """The official rules, in their original order."""
        return Rules(r for r in self if r.is_official)

    def ids(self) -> list[str]:
        """The IDs of the rules, in order."""
        return [r.id for r in self]