"""Rule string parser.

A rule string is a ``;``-separated list of ``key:value`` clauses, e.g.::

    "max:10;min:1;len:3;in:a,b,c"

Recognized keys are ``max``, ``min``, ``len`` and ``in``; any other key is
ignored. Syntax problems never abort parsing: they are appended to the
caller's violation list and the affected constraint stays unset.
"""

import logging
import re
from dataclasses import dataclass

from .errors import Violation, ViolationKind

logger = logging.getLogger(__name__)

CLAUSE_SEPARATOR = ";"
KEY_SEPARATOR = ":"
VALUE_SEPARATOR = ","

KNOWN_KEYS = frozenset({"max", "min", "len", "in"})

INVALID_SYNTAX_MESSAGE = "invalid validator syntax"
NEGATIVE_LENGTH_MESSAGE = "wrong length"

_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")


@dataclass
class ConstraintSet:
    """Parsed constraints of one field. ``None`` means the constraint is absent."""
    max: int | None = None
    min: int | None = None
    length: int | None = None
    allowed: list[str] | None = None

    @property
    def empty(self) -> bool:
        return self.max is None and self.min is None and self.length is None and self.allowed is None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output, using rule key names."""
        return {
            "max": self.max,
            "min": self.min,
            "len": self.length,
            "in": self.allowed,
        }


def parse_int(text: str) -> int | None:
    """Parse a strict decimal integer: optional sign, ASCII digits, nothing else.

    Returns:
        The integer, or None when the text is not a well-formed integer
    """
    if not _INTEGER_PATTERN.match(text):
        return None
    return int(text)


def syntax_violation(field_name: str) -> Violation:
    return Violation(field_name, ViolationKind.INVALID_SYNTAX, INVALID_SYNTAX_MESSAGE)


def parse_rule(rule: str, field_name: str, violations: list[Violation]) -> ConstraintSet:
    """Parse one field's rule string into a constraint set.

    Args:
        rule: Raw rule string, possibly empty
        field_name: Field name used to label syntax violations
        violations: Running violation list; parse errors are appended to it

    Returns:
        ConstraintSet with every clause that parsed successfully
    """
    constraints = ConstraintSet()
    if not rule:
        return constraints

    for clause in rule.split(CLAUSE_SEPARATOR):
        key, separator, value = clause.partition(KEY_SEPARATOR)

        if key not in KNOWN_KEYS:
            if key:
                logger.debug(f"Ignoring unknown rule key '{key}' on field {field_name}")
            continue

        if not separator:
            violations.append(syntax_violation(field_name))
            continue

        if key == "in":
            constraints.allowed = value.split(VALUE_SEPARATOR)
            continue

        number = parse_int(value)
        if number is None:
            violations.append(syntax_violation(field_name))
            continue

        if key == "max":
            constraints.max = number
        elif key == "min":
            constraints.min = number
        elif number < 0:
            violations.append(Violation(field_name, ViolationKind.NEGATIVE_LENGTH, NEGATIVE_LENGTH_MESSAGE))
        else:
            constraints.length = number

    logger.debug(f"Parsed rule '{rule}' for field {field_name}: {constraints}")
    return constraints
