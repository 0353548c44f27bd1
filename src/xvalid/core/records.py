"""
Record introspection for pydantic models and dataclasses.

A record is a pydantic ``BaseModel`` subclass or a standard library
dataclass. Its fields are read once per type and cached; each declared field
becomes a ``RecordField`` whose identity is the owning record type plus the
declared name.

Embedding is explicit: mark a sub-record field with ``Embedded``::

    class Person(BaseModel):
        name: str
        address: Annotated[Address, Embedded]

Members of an embedded sub-record are promoted into the parent's selector
namespace, and the decomposed value of an embedded field is a nested mapping.
"""

import dataclasses
import logging
import types
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel

from xvalid.core.naming import export_name
from xvalid.exceptions import RecordReferenceError

logger = logging.getLogger(__name__)


class _EmbeddedMarker:
    """Annotation marker flagging a field as an embedded sub-record."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Embedded"


Embedded = _EmbeddedMarker()


@dataclass(frozen=True)
class RecordField:
    """
    One declared field of a record type.

    Equality and hashing use only ``owner`` and ``name``: two references to
    the same declared field are the same field no matter how they were built.

    Params:
        owner: Record type that declares the field
        name: Declared attribute name
        export_name: Name used in paths, exports and decomposed mappings
        annotation: Declared type annotation with ``Annotated`` metadata stripped
        embedded: Whether the field is an embedded sub-record
        record_type: Record type of the field value, when it is a record
    """

    owner: type
    name: str
    export_name: str = field(compare=False)
    annotation: Any = field(default=None, compare=False, repr=False)
    embedded: bool = field(default=False, compare=False)
    record_type: type | None = field(default=None, compare=False, repr=False)


def is_record_type(obj: Any) -> bool:
    """Check whether obj is a record class (pydantic model or dataclass)."""
    if not isinstance(obj, type):
        return False
    return issubclass(obj, BaseModel) or dataclasses.is_dataclass(obj)


def is_record(obj: Any) -> bool:
    """Check whether obj is a record instance."""
    return not isinstance(obj, type) and is_record_type(type(obj))


def record_type_of(record: Any) -> type:
    """
    Get the record type behind a record reference.

    Params:
        record: A record class or a record instance

    Returns:
        The record class

    Raises:
        RecordReferenceError: If record is None or not a record
    """
    if record is None:
        raise RecordReferenceError(record, "record is None")
    if isinstance(record, type):
        if not is_record_type(record):
            raise RecordReferenceError(
                record, "is not a pydantic model or dataclass type"
            )
        return record
    if not is_record_type(type(record)):
        raise RecordReferenceError(record, "is not a pydantic model or dataclass")
    return type(record)


def _unwrap_record_type(annotation: Any) -> type | None:
    """Find the record type inside an annotation, looking through Optional."""
    if get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    if is_record_type(annotation):
        return annotation
    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1 and is_record_type(members[0]):
            return members[0]
    return None


def _make_field(
    owner: type, name: str, annotation: Any, alias: str | None, embedded: bool
) -> RecordField:
    record_type = _unwrap_record_type(annotation)
    if embedded and record_type is None:
        raise RecordReferenceError(
            owner, f"embedded field '{name}' is not a pydantic model or dataclass"
        )
    return RecordField(
        owner=owner,
        name=name,
        export_name=export_name(name, alias),
        annotation=annotation,
        embedded=embedded,
        record_type=record_type,
    )


def _model_fields(model: type[BaseModel]) -> tuple[RecordField, ...]:
    result = []
    for name, info in model.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        embedded = any(m is Embedded for m in info.metadata) or bool(
            extra.get("embedded")
        )
        alias = info.serialization_alias or info.alias
        result.append(_make_field(model, name, info.annotation, alias, embedded))
    return tuple(result)


def _dataclass_fields(cls: type) -> tuple[RecordField, ...]:
    try:
        hints = get_type_hints(cls, include_extras=True)
    except NameError as e:
        raise RecordReferenceError(cls, f"cannot resolve annotation ({e})") from e

    result = []
    for f in dataclasses.fields(cls):
        annotation = hints.get(f.name, f.type)
        embedded = bool(f.metadata.get("embedded"))
        if get_origin(annotation) is Annotated:
            embedded = embedded or any(m is Embedded for m in annotation.__metadata__)
            annotation = get_args(annotation)[0]
        alias = f.metadata.get("alias") or f.metadata.get("json")
        result.append(_make_field(cls, f.name, annotation, alias, embedded))
    return tuple(result)


@lru_cache(maxsize=None)
def record_fields(record_type: type) -> tuple[RecordField, ...]:
    """
    List the declared fields of a record type in declaration order.

    Params:
        record_type: A pydantic model class or dataclass type

    Returns:
        Tuple of RecordField, computed once per type

    Raises:
        RecordReferenceError: If record_type is not a record type, or an
            embedded field is not itself a record
    """
    if not is_record_type(record_type):
        raise RecordReferenceError(
            record_type, "is not a pydantic model or dataclass type"
        )
    if issubclass(record_type, BaseModel):
        fields = _model_fields(record_type)
    else:
        fields = _dataclass_fields(record_type)
    logger.debug(
        "Introspected %s: %d fields (%d embedded)",
        record_type.__name__,
        len(fields),
        sum(1 for f in fields if f.embedded),
    )
    return fields


def find_declared_field(record_type: type, name: str) -> RecordField | None:
    """Find a field declared directly on record_type by its declared name."""
    for f in record_fields(record_type):
        if f.name == name:
            return f
    return None
