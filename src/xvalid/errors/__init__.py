"""
xvalid violation types.

This package provides the Violation value and the ordered and name-keyed
violation collections returned by rule validation.
"""

from xvalid.errors.violations import (
    Violation,
    ViolationError,
    ViolationList,
    ViolationMap,
    join_sentences,
    new_violation,
)

__all__ = [
    "Violation",
    "ViolationError",
    "ViolationList",
    "ViolationMap",
    "join_sentences",
    "new_violation",
]
