"""
xvalid - declarative validation rules for pydantic models and dataclasses

xvalid binds typed rules to record fields through symbolic field selectors,
runs them against record instances to collect every violation in one pass,
and exports the rules as JSON for client-side validation.
"""

from importlib.metadata import version

from xvalid.config import MessageTemplates
from xvalid.core import Embedded
from xvalid.errors import Violation, ViolationError, ViolationList, ViolationMap
from xvalid.resolution import fields_of, resolve_field
from xvalid.rules import (
    Email,
    FieldFunc,
    Max,
    MaxLength,
    Min,
    MinLength,
    Options,
    Pattern,
    RecordFunc,
    Required,
    RuleSet,
    Validator,
    is_email,
)

__version__ = version("xvalid")

__all__ = [
    "__version__",
    "RuleSet",
    "Embedded",
    "fields_of",
    "resolve_field",
    "Validator",
    "Required",
    "MinLength",
    "MaxLength",
    "Min",
    "Max",
    "Pattern",
    "Email",
    "Options",
    "FieldFunc",
    "RecordFunc",
    "is_email",
    "Violation",
    "ViolationError",
    "ViolationList",
    "ViolationMap",
    "MessageTemplates",
]
