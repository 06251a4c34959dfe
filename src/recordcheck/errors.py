"""Error taxonomy for record validation.

Two tiers are modelled here. Fatal errors (``NotARecordError`` and
``UnexportedFieldError``) abort a validation call. Per-field problems are
collected as ``Violation`` entries and raised together as ``ValidationErrors``.
"""

from dataclasses import dataclass
from enum import Enum


class ViolationKind(str, Enum):
    """Kind of a single per-field violation."""
    MAX = "max"
    MIN = "min"
    LEN = "len"
    IN = "in"
    INVALID_SYNTAX = "invalid_syntax"
    NEGATIVE_LENGTH = "negative_length"


@dataclass(frozen=True)
class Violation:
    """A single failed constraint or rule syntax error for one field."""
    field: str
    kind: ViolationKind
    message: str

    def __str__(self) -> str:
        return f"field: {self.field} err: {self.message}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "field": self.field,
            "kind": self.kind.value,
            "message": self.message,
        }


class RecordCheckError(Exception):
    """Base class for all recordcheck errors."""


class NotARecordError(RecordCheckError, TypeError):
    """Raised when the validated value is not a dataclass or pydantic model instance."""

    def __init__(self, value: object):
        self.value_type = type(value).__name__
        super().__init__(f"wrong argument given, should be a record, got {self.value_type}")


class UnexportedFieldError(RecordCheckError):
    """Raised when a rule string is attached to a non-exported field."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"validation for unexported field '{field_name}' is not allowed")


class ValidationErrors(RecordCheckError, ValueError):
    """Every violation found across the fields of one record."""

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        super().__init__(str(self))

    def __str__(self) -> str:
        return ",".join(str(violation) for violation in self.violations)

    def __len__(self) -> int:
        return len(self.violations)

    def __iter__(self):
        return iter(self.violations)

    def fields(self) -> list[str]:
        """Field labels in violation order (duplicates kept)."""
        return [violation.field for violation in self.violations]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "valid": False,
            "total_violations": len(self.violations),
            "violations": [violation.to_dict() for violation in self.violations],
        }
