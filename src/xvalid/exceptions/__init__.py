"""
xvalid exception classes.

This package provides the configuration error types raised when rules are
registered against the wrong record, reference unknown fields, or are run
against values they cannot handle.
"""

from xvalid.exceptions.core import (
    AmbiguousFieldError,
    FieldNotFoundError,
    FieldReferenceError,
    MessageTemplateError,
    RecordReferenceError,
    UnsupportedValueError,
    ValidatorTypeError,
    XValidError,
)

__all__ = [
    "XValidError",
    "RecordReferenceError",
    "FieldReferenceError",
    "FieldNotFoundError",
    "AmbiguousFieldError",
    "MessageTemplateError",
    "UnsupportedValueError",
    "ValidatorTypeError",
]
