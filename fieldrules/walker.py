"""Struct walker: enumerates a record's fields, rule tags and values.

Supported records, in order of precedence:
1. Objects implementing DescribesFields (explicit self-description)
2. Pydantic models - tag in Field(json_schema_extra={tag_name: "..."})
3. Dataclass instances - tag in field(metadata={tag_name: "..."})

Inherited fields are included as if declared on the record itself.
Nested record-typed fields are described (kind RECORD) but never walked.
"""

import dataclasses
import numbers
from collections.abc import Collection
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from fieldrules.errors import UnsupportedRecordError
from fieldrules.models.domain import FieldDescriptor
from fieldrules.models.enums import FieldKind
from fieldrules.protocols import DescribesFields


def is_record(value: Any) -> bool:
    """True for pydantic model instances and dataclass instances."""
    if isinstance(value, BaseModel):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def kind_of(value: Any) -> FieldKind:
    """Classify a runtime value for size-aware rules.

    bool is checked before int because bool is an int subclass.
    """
    if value is None:
        return FieldKind.NIL
    if isinstance(value, str):
        return FieldKind.STRING
    if isinstance(value, bool):
        return FieldKind.BOOL
    if isinstance(value, numbers.Integral):
        return FieldKind.INT
    if isinstance(value, (numbers.Real, Decimal)):
        return FieldKind.FLOAT
    if is_record(value):
        return FieldKind.RECORD
    if isinstance(value, Collection):
        return FieldKind.COLLECTION
    return FieldKind.OTHER


def describe_fields(record: Any, tag_name: str) -> list[FieldDescriptor]:
    """Describe every top-level field of a record.

    Args:
        record: Record to describe
        tag_name: Metadata key holding the rule tag

    Returns:
        Field descriptors in declaration order (untagged fields have tag "")

    Raises:
        UnsupportedRecordError: If the record is not a supported record type
    """
    if isinstance(record, DescribesFields):
        return list(record.describe_fields())
    if isinstance(record, BaseModel):
        return _describe_model(record, tag_name)
    if is_record(record):
        return _describe_dataclass(record, tag_name)
    raise UnsupportedRecordError(record)


def _describe_model(record: BaseModel, tag_name: str) -> list[FieldDescriptor]:
    descriptors = []
    for name, info in type(record).model_fields.items():
        extra = info.json_schema_extra
        tag = extra.get(tag_name, "") if isinstance(extra, dict) else ""
        value = getattr(record, name, None)
        descriptors.append(
            FieldDescriptor(
                name=name, tag=tag, value=value, kind=kind_of(value), annotation=info.annotation
            )
        )
    return descriptors


def _describe_dataclass(record: Any, tag_name: str) -> list[FieldDescriptor]:
    descriptors = []
    for f in dataclasses.fields(record):
        value = getattr(record, f.name, None)
        descriptors.append(
            FieldDescriptor(
                name=f.name,
                tag=f.metadata.get(tag_name, ""),
                value=value,
                kind=kind_of(value),
                annotation=f.type,
            )
        )
    return descriptors
