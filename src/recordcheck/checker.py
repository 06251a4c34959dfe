"""Constraint checks per value kind.

Every present constraint is evaluated, in the order max, min, len, in, and
each failure becomes one more ``Violation``. Nothing here raises.
"""

import logging
from typing import Any

from .constraints import ConstraintSet, parse_int, syntax_violation
from .errors import Violation, ViolationKind
from .kinds import Kind, is_integer

logger = logging.getLogger(__name__)

DEFAULT_SEQUENCE_LABEL = "{field} {index}th element"

NOT_CONTAINED_MESSAGE = "value is not contained in the 'in'"


def check_text(value: str, field_name: str, constraints: ConstraintSet, violations: list[Violation]) -> None:
    """Check a text value: length bounds, exact length and membership."""
    size = len(value)

    if constraints.max is not None and size > constraints.max:
        violations.append(Violation(field_name, ViolationKind.MAX, "length can't be more than max"))
    if constraints.min is not None and size < constraints.min:
        violations.append(Violation(field_name, ViolationKind.MIN, "length can't be less than min"))
    if constraints.length is not None and size != constraints.length:
        violations.append(Violation(field_name, ViolationKind.LEN, "length must be equal to len"))

    if constraints.allowed is not None and value not in constraints.allowed:
        violations.append(Violation(field_name, ViolationKind.IN, NOT_CONTAINED_MESSAGE))


def check_integer(value: int, field_name: str, constraints: ConstraintSet, violations: list[Violation]) -> None:
    """Check an integer value.

    ``len`` has no meaning for integers, so its presence is always reported
    as a syntax violation. ``in`` tokens that are not integers are reported
    individually and left out of the membership test.
    """
    if constraints.max is not None and value > constraints.max:
        violations.append(Violation(field_name, ViolationKind.MAX, "value can't be more than max"))
    if constraints.min is not None and value < constraints.min:
        violations.append(Violation(field_name, ViolationKind.MIN, "value can't be less than min"))
    if constraints.length is not None:
        violations.append(syntax_violation(field_name))

    if constraints.allowed is not None:
        allowed = []
        for token in constraints.allowed:
            number = parse_int(token)
            if number is None:
                violations.append(syntax_violation(field_name))
            else:
                allowed.append(number)
        if value not in allowed:
            violations.append(Violation(field_name, ViolationKind.IN, NOT_CONTAINED_MESSAGE))


def check_sequence(
    values: Any,
    kind: Kind,
    field_name: str,
    constraints: ConstraintSet,
    violations: list[Violation],
    label: str = DEFAULT_SEQUENCE_LABEL,
) -> None:
    """Check every element of a sequence against the same constraint set.

    Args:
        values: Sequence value of the field
        kind: SEQUENCE_OF_INT, SEQUENCE_OF_TEXT or SEQUENCE (elements classified one by one)
        field_name: Field name; each element is labelled with its zero-based index
        constraints: Parsed constraint set of the field
        violations: Running violation list
        label: Format string with ``{field}`` and ``{index}`` placeholders
    """
    for index, element in enumerate(values):
        element_name = label.format(field=field_name, index=index)

        if isinstance(element, str) and kind is not Kind.SEQUENCE_OF_INT:
            check_text(element, element_name, constraints, violations)
        elif is_integer(element) and kind is not Kind.SEQUENCE_OF_TEXT:
            check_integer(element, element_name, constraints, violations)
        else:
            logger.debug(f"Skipping element {element_name} of type {type(element).__name__}")


def check_constraints(
    value: Any,
    kind: Kind,
    field_name: str,
    constraints: ConstraintSet,
    violations: list[Violation],
    label: str = DEFAULT_SEQUENCE_LABEL,
) -> None:
    """Dispatch constraint checks on the field kind. Unsupported kinds pass silently."""
    if constraints.empty:
        return

    if kind is Kind.TEXT:
        check_text(value, field_name, constraints, violations)
    elif kind is Kind.INTEGER:
        check_integer(value, field_name, constraints, violations)
    elif kind in (Kind.SEQUENCE, Kind.SEQUENCE_OF_INT, Kind.SEQUENCE_OF_TEXT):
        check_sequence(value, kind, field_name, constraints, violations, label)
