"""
xvalid field resolution.

This package turns symbolic field references into export-name paths and
decomposes record instances into mappings those paths can be walked through.
"""

from xvalid.resolution.decompose import RecordMap, lookup_path, record_to_map
from xvalid.resolution.resolver import field_index, resolve_field
from xvalid.resolution.selector import FieldRef, FieldSelector, fields_of, selector_ref

__all__ = [
    "FieldRef",
    "FieldSelector",
    "fields_of",
    "selector_ref",
    "field_index",
    "resolve_field",
    "RecordMap",
    "record_to_map",
    "lookup_path",
]
