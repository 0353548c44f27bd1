"""
Rule sets: ordered chains of validators bound to one record type.

A rule set is declared once per record type and reused for any number of
instances::

    rules = RuleSet(Person)
    f = rules.fields
    rules = (
        rules.field(f.name, Required(), MaxLength(40))
        .field(f.city, MinLength(2).set_optional())
        .record(RecordFunc(check_dates))
    )
    violations = rules.validate(person)

Every registration call returns a new rule set sharing the previous
validators, so partially built chains can be shared and forked safely.
Validation runs every validator; it never stops at the first violation.
"""

import json
import logging
from typing import Any

import attrs
from attrs import evolve, frozen

from xvalid.config.messages import DEFAULT_MESSAGES, MessageTemplates
from xvalid.core.records import record_type_of
from xvalid.core.types import ExportedRules
from xvalid.errors.violations import ViolationList
from xvalid.exceptions import RecordReferenceError, ValidatorTypeError
from xvalid.resolution.decompose import lookup_path, record_to_map
from xvalid.resolution.resolver import FieldReference, resolve_field
from xvalid.resolution.selector import FieldSelector, fields_of
from xvalid.rules.base import Validator

logger = logging.getLogger(__name__)


def _as_validators(validators: tuple[Any, ...]) -> tuple[Validator, ...]:
    for validator in validators:
        if not isinstance(validator, Validator):
            raise ValidatorTypeError(validator, "a Validator")
    return validators


@frozen
class RuleSet:
    """
    Ordered validators for one record type.

    Params:
        record_type: Record class (or an instance of it) used to resolve field
            references
        messages: Default message templates for violations
        validators: Bound validators in registration order
    """

    record_type: type = attrs.field(converter=record_type_of)
    messages: MessageTemplates = attrs.field(default=DEFAULT_MESSAGES, kw_only=True)
    validators: tuple[Validator, ...] = attrs.field(
        default=(), converter=tuple, kw_only=True
    )

    @property
    def fields(self) -> FieldSelector:
        """Root field selector of the record type."""
        return fields_of(self.record_type)

    def field(self, reference: FieldReference, *validators: Validator) -> "RuleSet":
        """
        Add validators for one field.

        Params:
            reference: Field selector, dotted declared-name string, or accessor
                callable receiving the root selector
            *validators: Validators to bind to the field, in order

        Returns:
            New RuleSet with the bound validators appended

        Raises:
            FieldReferenceError: If reference is not a field reference
            FieldNotFoundError: If the field is not addressable in the record
            ValidatorTypeError: If any argument is not a Validator
        """
        path = resolve_field(self.record_type, reference)
        bound = tuple(v.bind(*path) for v in _as_validators(validators))
        logger.debug(
            "Bound %d validator(s) to %s.%s",
            len(bound),
            self.record_type.__name__,
            ".".join(path),
        )
        return evolve(self, validators=self.validators + bound)

    def record(self, *validators: Validator) -> "RuleSet":
        """
        Add validators for the whole record.

        Returns:
            New RuleSet with the whole-record validators appended
        """
        bound = tuple(v.bind() for v in _as_validators(validators))
        return evolve(self, validators=self.validators + bound)

    def validate(self, subject: Any) -> ViolationList | None:
        """
        Run every validator against a record instance.

        Params:
            subject: Instance of the rule set's record type

        Returns:
            ViolationList in registration order, or None when nothing is broken

        Raises:
            RecordReferenceError: If subject is not an instance of the record type
            UnsupportedValueError: If a rule meets a value kind it cannot handle
        """
        if not isinstance(subject, self.record_type):
            raise RecordReferenceError(
                subject, f"is not an instance of {self.record_type.__name__}"
            )

        values = record_to_map(subject)
        violations = []
        for validator in self.validators:
            if validator.field:
                value = lookup_path(values, validator.field)
            else:
                value = subject
            violation = validator.validate(value, self.messages)
            if violation is not None:
                violations.append(violation)

        logger.debug(
            "Validated %s with %d rule(s): %d violation(s)",
            self.record_type.__name__,
            len(self.validators),
            len(violations),
        )
        if not violations:
            return None
        return ViolationList(violations)

    def export(self) -> ExportedRules:
        """
        Describe the exportable validators, grouped by terminal field name.

        Field order and validator order are registration order. Custom
        function validators are left out.
        """
        exported: ExportedRules = {}
        for validator in self.validators:
            if not validator.exportable:
                continue
            exported.setdefault(validator.field_name, []).append(validator.describe())
        return exported

    def to_json(self, indent: int | None = None, sort_keys: bool = False) -> str:
        return json.dumps(
            self.export(), indent=indent, sort_keys=sort_keys, ensure_ascii=False
        )
