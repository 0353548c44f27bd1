"""
xvalid rules.

This package provides the validator capability, the built-in rule kinds and
the RuleSet that binds validators to record fields and runs them.
"""

from xvalid.rules.base import OptionalValidator, Validator
from xvalid.rules.rule_set import RuleSet
from xvalid.rules.validators import (
    EMAIL_PATTERN,
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
    is_email,
    is_zero,
)

__all__ = [
    "Validator",
    "OptionalValidator",
    "RuleSet",
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
    "EMAIL_PATTERN",
    "is_email",
    "is_zero",
]
