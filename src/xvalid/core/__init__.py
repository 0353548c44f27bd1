"""
Core xvalid components.

This package provides record introspection, export-name lookup and the
shared type aliases.
"""

from xvalid.core.naming import export_name, field_path_name
from xvalid.core.records import (
    Embedded,
    RecordField,
    find_declared_field,
    is_record,
    is_record_type,
    record_fields,
    record_type_of,
)
from xvalid.core.types import ExportedRules, FieldPath, RuleDescription, ValueMap

__all__ = [
    "Embedded",
    "RecordField",
    "record_fields",
    "record_type_of",
    "find_declared_field",
    "is_record",
    "is_record_type",
    "export_name",
    "field_path_name",
    "FieldPath",
    "ValueMap",
    "RuleDescription",
    "ExportedRules",
]
