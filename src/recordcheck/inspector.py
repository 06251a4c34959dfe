"""Field inspection for dataclass and pydantic records."""

import dataclasses
import logging
import typing
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from .kinds import Kind, matches_kind, resolve_kind

logger = logging.getLogger(__name__)

DEFAULT_TAG = "validate"


@dataclass
class FieldDescriptor:
    """Metadata and value of one declared field, built per validation call."""
    name: str
    exported: bool
    kind: Kind
    rule: str
    value: Any

    @property
    def checkable(self) -> bool:
        """Whether the runtime value matches the declared kind."""
        return matches_kind(self.kind, self.value)


def rule(rule_text: str, *, tag: str = DEFAULT_TAG, **kwargs) -> Any:
    """Declare a dataclass field carrying a rule string.

    ``rule("min:3;max:5", default="abc")`` is shorthand for
    ``field(default="abc", metadata={"validate": "min:3;max:5"})``.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[tag] = rule_text
    return dataclasses.field(metadata=metadata, **kwargs)


def is_record(value: Any) -> bool:
    """True for dataclass and pydantic model instances (not the classes)."""
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or isinstance(value, BaseModel)


def is_exported(name: str) -> bool:
    return not name.startswith("_")


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError) as e:
        logger.debug(f"Could not resolve type hints of {cls.__name__}: {e}")
        return {}


def _dataclass_fields(record: Any, tag: str) -> list[FieldDescriptor]:
    hints = _type_hints(type(record))
    descriptors = []
    for field in dataclasses.fields(record):
        annotation = hints.get(field.name, field.type)
        if isinstance(annotation, str):
            annotation = None
        value = getattr(record, field.name)
        descriptors.append(FieldDescriptor(
            name=field.name,
            exported=is_exported(field.name),
            kind=resolve_kind(annotation, value),
            rule=str(field.metadata.get(tag, "")),
            value=value,
        ))
    return descriptors


def _model_fields(record: BaseModel, tag: str) -> list[FieldDescriptor]:
    descriptors = []
    for name, info in type(record).model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        value = getattr(record, name)
        descriptors.append(FieldDescriptor(
            name=name,
            exported=is_exported(name),
            kind=resolve_kind(info.annotation, value),
            rule=str(extra.get(tag, "")),
            value=value,
        ))
    return descriptors


def describe_fields(record: Any, tag: str = DEFAULT_TAG) -> list[FieldDescriptor]:
    """List the declared fields of a record in declaration order.

    Args:
        record: Dataclass or pydantic model instance
        tag: Metadata key holding each field's rule string

    Returns:
        One FieldDescriptor per declared field
    """
    if isinstance(record, BaseModel):
        return _model_fields(record, tag)
    return _dataclass_fields(record, tag)
