"""
Exception classes for xvalid rule configuration.

This module defines the programmer-error exceptions raised while rules are
being registered or run. They signal a defect in calling code and are never
collected as validation violations.
"""

from typing import Any


class XValidError(Exception):
    """Base exception for all xvalid configuration errors."""

    pass


class RecordReferenceError(XValidError):
    """Raised when a record reference is missing or is not a record."""

    def __init__(self, record: Any, reason: str):
        """
        Initialize the exception.

        Params:
            record: The offending record reference
            reason: Why the reference cannot be used
        """
        self.record = record
        self.reason = reason
        super().__init__(f"Invalid record reference {record!r}: {reason}")


class FieldReferenceError(XValidError):
    """Raised when a field reference is not a usable reference at all."""

    def __init__(self, reference: Any, reason: str = "is not a field reference"):
        """
        Initialize the exception.

        Params:
            reference: The value passed where a field reference was expected
            reason: Specific error message
        """
        self.reference = reference
        self.reason = reason
        super().__init__(f"Field reference {reference!r} {reason}")


class FieldNotFoundError(XValidError, AttributeError):
    """Raised when a field reference cannot be located inside a record.

    Also an AttributeError, so hasattr and getattr with a default work on
    field selectors.
    """

    def __init__(self, field: str, record: str, message: str = "does not exist"):
        """
        Initialize the exception.

        Params:
            field: Dotted declared-name path of the field
            record: Name of the record type that was searched
            message: Specific error message
        """
        self.field = field
        self.record = record
        super().__init__(f"Field '{field}' {message} in {record}")


class AmbiguousFieldError(XValidError):
    """Raised when a promoted field name matches several embedded fields."""

    def __init__(self, name: str, record: str, candidates: list[str]):
        """
        Initialize the exception.

        Params:
            name: The promoted field name that was requested
            record: Name of the record type that was searched
            candidates: Dotted paths of every match at the winning depth
        """
        self.name = name
        self.record = record
        self.candidates = candidates
        super().__init__(
            f"Field '{name}' is ambiguous in {record}: {', '.join(candidates)}"
        )


class UnsupportedValueError(XValidError):
    """Raised when a rule is applied to a value kind it cannot handle."""

    def __init__(self, rule: str, value: Any):
        """
        Initialize the exception.

        Params:
            rule: Rule discriminator of the validator
            value: The value that could not be handled
        """
        self.rule = rule
        self.value = value
        super().__init__(
            f"Rule '{rule}' does not support values of type {type(value).__name__}"
        )


class ValidatorTypeError(XValidError):
    """Raised when something other than a validator or violation shows up."""

    def __init__(self, value: Any, expected: str):
        """
        Initialize the exception.

        Params:
            value: The unexpected object
            expected: Description of what was expected instead
        """
        self.value = value
        self.expected = expected
        super().__init__(f"Expected {expected}, got {type(value).__name__}")


class MessageTemplateError(XValidError):
    """Raised when a configured message template cannot be rendered."""

    def __init__(self, key: str, template: Any, reason: str):
        """
        Initialize the exception.

        Params:
            key: Template name, such as required or min_length
            template: The offending template value
            reason: Why the template is unusable
        """
        self.key = key
        self.template = template
        self.reason = reason
        super().__init__(f"Invalid message template '{key}' ({template!r}): {reason}")
