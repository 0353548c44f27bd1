"""
Validator capability shared by every rule kind.

Validators are immutable attrs values. Configuration calls return a new
validator, so a partially configured validator can be shared or forked
without aliasing::

    rule = MinLength(4).set_optional().set_message("Name is too short")

Binding a validator to a field path, done by ``RuleSet.field``, also returns
a copy.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Self

import attrs
from attrs import evolve, frozen

from xvalid.config.messages import DEFAULT_MESSAGES, MessageTemplates
from xvalid.core.naming import field_path_name
from xvalid.core.types import FieldPath, RuleDescription
from xvalid.errors.violations import Violation


@frozen
class Validator(ABC):
    """
    Base class for rules.

    Params:
        field: Export-name path the validator is bound to, empty for
            whole-record validators
        message: Override message used instead of the default template
    """

    rule: ClassVar[str] = ""
    exportable: ClassVar[bool] = True

    field: FieldPath = attrs.field(default=(), converter=tuple, kw_only=True)
    message: str | None = attrs.field(default=None, kw_only=True)

    @property
    def field_name(self) -> str:
        """Terminal export-name segment of the bound path."""
        return field_path_name(self.field)

    def bind(self, *field: str) -> Self:
        return evolve(self, field=field)

    def set_message(self, message: str) -> Self:
        """Return a copy that reports message instead of the default."""
        return evolve(self, message=message)

    @abstractmethod
    def validate(
        self, value: Any, messages: MessageTemplates | None = None
    ) -> Violation | None:
        """
        Check a value.

        Params:
            value: Located field value (None when absent), or the whole
                record for whole-record validators
            messages: Default message templates, DEFAULT_MESSAGES when None

        Returns:
            A Violation when the rule is broken, otherwise None
        """

    def params(self) -> dict[str, Any]:
        """Kind-specific parameters included in the exported description."""
        return {}

    def describe(self) -> RuleDescription:
        """Exported description: rule discriminator, parameters, override message."""
        description: RuleDescription = {"rule": self.rule, **self.params()}
        if self.message:
            description["message"] = self.message
        return description

    def _violation(
        self, messages: MessageTemplates | None, kind: str, **params: Any
    ) -> Violation:
        if self.message:
            return Violation(self.message, self.field)
        templates = messages or DEFAULT_MESSAGES
        return Violation(templates.render(kind, self.field_name, **params), self.field)


@frozen
class OptionalValidator(Validator):
    """Validator that can skip empty values.

    Params:
        optional: Skip validation when the value is empty or zero
    """

    optional: bool = attrs.field(default=False, kw_only=True)

    def set_optional(self, optional: bool = True) -> Self:
        """Return a copy that skips empty values."""
        return evolve(self, optional=optional)
