"""
Record value decomposition.

Converts a record instance into a nested mapping keyed by export names,
recursing into embedded sub-records, so that resolved field paths can be
walked segment by segment.
"""

from collections.abc import Sequence
from typing import Any

from xvalid.core.records import record_fields, record_type_of
from xvalid.core.types import ValueMap
from xvalid.exceptions import RecordReferenceError


class RecordMap(dict):
    """Decomposed mapping of one record instance, remembering its source."""

    __slots__ = ("source",)

    def __init__(self, source: Any):
        super().__init__()
        self.source = source


def record_to_map(record: Any) -> ValueMap:
    """
    Decompose a record instance into an export-name keyed mapping.

    Embedded sub-records become nested mappings; every other field keeps its
    raw value. When two fields share an export name, the first declared wins.

    Params:
        record: Record instance to decompose

    Returns:
        RecordMap of export name -> value

    Raises:
        RecordReferenceError: If record is None, a type, or not a record
    """
    record_type = record_type_of(record)
    if isinstance(record, type):
        raise RecordReferenceError(record, "expected a record instance, not a type")

    values = RecordMap(record)
    for f in record_fields(record_type):
        value = getattr(record, f.name, None)
        if f.embedded and value is not None:
            value = record_to_map(value)
        values.setdefault(f.export_name, value)
    return values


def lookup_path(values: ValueMap, path: Sequence[str]) -> Any:
    """
    Walk a decomposed mapping along a field path.

    Params:
        values: Mapping produced by record_to_map
        path: Export-name segments, outermost first

    Returns:
        The located value; an embedded sub-record is returned as the original
        instance. None when a segment is missing or an intermediate value is
        not a mapping.
    """
    value: Any = values
    for segment in path:
        if not isinstance(value, dict):
            return None
        value = value.get(segment)
    if isinstance(value, RecordMap):
        return value.source
    return value
