"""Resolution of a field's value kind from its type annotation."""

import collections.abc
import types
import typing
from enum import Enum
from typing import Any


class Kind(str, Enum):
    """Value kinds the constraint checker knows how to handle."""
    TEXT = "text"
    INTEGER = "integer"
    SEQUENCE_OF_INT = "sequence_of_int"
    SEQUENCE_OF_TEXT = "sequence_of_text"
    SEQUENCE = "sequence"
    UNSUPPORTED = "unsupported"


# Ordered collections only; element labels carry the position
SEQUENCE_ORIGINS = (list, tuple, collections.abc.Sequence)

_UNION_TYPES = (typing.Union, types.UnionType)


def is_integer(value: Any) -> bool:
    # bool subclasses int but is not an integer field
    return isinstance(value, int) and not isinstance(value, bool)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _unwrap_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) in _UNION_TYPES:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _element_kind(annotation: Any) -> Kind:
    args = [arg for arg in typing.get_args(annotation) if arg is not Ellipsis]
    if len(args) != 1:
        return Kind.SEQUENCE
    element = _unwrap_optional(args[0])
    if element is int:
        return Kind.SEQUENCE_OF_INT
    if element is str:
        return Kind.SEQUENCE_OF_TEXT
    return Kind.SEQUENCE


def kind_of_value(value: Any) -> Kind:
    """Classify a runtime value."""
    if isinstance(value, str):
        return Kind.TEXT
    if is_integer(value):
        return Kind.INTEGER
    if is_sequence(value):
        return Kind.SEQUENCE
    return Kind.UNSUPPORTED


def resolve_kind(annotation: Any, value: Any) -> Kind:
    """Choose the kind of a field from its annotation.

    Missing and ``Any`` annotations, and unions that do not narrow to a
    single type, fall back to the runtime value.

    Args:
        annotation: Resolved type hint of the field, or None
        value: Runtime value of the field

    Returns:
        Kind used to dispatch constraint checks
    """
    if annotation is None or annotation is Any:
        return kind_of_value(value)

    annotation = _unwrap_optional(annotation)
    if typing.get_origin(annotation) in _UNION_TYPES:
        return kind_of_value(value)
    if typing.get_origin(annotation) is typing.Annotated:
        annotation = typing.get_args(annotation)[0]

    if annotation is str:
        return Kind.TEXT
    if annotation is int:
        return Kind.INTEGER
    if annotation in SEQUENCE_ORIGINS:
        return Kind.SEQUENCE
    if typing.get_origin(annotation) in SEQUENCE_ORIGINS:
        return _element_kind(annotation)
    return Kind.UNSUPPORTED


def matches_kind(kind: Kind, value: Any) -> bool:
    """Whether the runtime value can be checked as ``kind``."""
    if kind is Kind.TEXT:
        return isinstance(value, str)
    if kind is Kind.INTEGER:
        return is_integer(value)
    if kind in (Kind.SEQUENCE, Kind.SEQUENCE_OF_INT, Kind.SEQUENCE_OF_TEXT):
        return is_sequence(value)
    return False
