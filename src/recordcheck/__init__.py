"""recordcheck - declarative field validation for dataclass and pydantic records.

Fields carry a compact rule string such as ``"min:3;max:5"`` or
``"in:admin,user"``; ``validate`` checks every field of one record and
reports all violations at once.
"""

__version__ = "0.1.0"
__author__ = "recordcheck contributors"
__description__ = "Declarative field validation for dataclass and pydantic records"

from recordcheck.config import RecordCheckConfig, load_config
from recordcheck.constraints import ConstraintSet, parse_rule
from recordcheck.errors import (
    NotARecordError,
    RecordCheckError,
    UnexportedFieldError,
    ValidationErrors,
    Violation,
    ViolationKind,
)
from recordcheck.inspector import rule
from recordcheck.kinds import Kind
from recordcheck.validator import RecordValidator, validate

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "validate",
    "rule",
    "RecordValidator",
    "RecordCheckConfig",
    "load_config",
    "ConstraintSet",
    "parse_rule",
    "Kind",
    "Violation",
    "ViolationKind",
    "RecordCheckError",
    "NotARecordError",
    "UnexportedFieldError",
    "ValidationErrors",
]
