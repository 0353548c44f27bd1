"""
Core type definitions for xvalid.

This module contains the type aliases shared by the resolver, the rule engine
and the violation collections.
"""

from typing import Any

FieldPath = tuple[str, ...]

ValueMap = dict[str, Any]

RuleDescription = dict[str, Any]

ExportedRules = dict[str, list[RuleDescription]]
