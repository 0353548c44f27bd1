"""
Built-in validators.

Each rule kind is a small immutable attrs class. Text rules count code
points, not bytes. Numeric rules accept ``int`` and ``float`` values only;
any other value kind is a configuration error.
"""

import re
from collections.abc import Callable, Sized
from datetime import timedelta
from decimal import Decimal
from typing import Any, ClassVar

import attrs
from attrs import frozen

from xvalid.config.messages import MessageTemplates
from xvalid.core.records import is_record, record_fields
from xvalid.core.types import FieldPath
from xvalid.errors.violations import Violation
from xvalid.exceptions import UnsupportedValueError, ValidatorTypeError
from xvalid.rules.base import OptionalValidator, Validator

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


def is_email(text: str) -> bool:
    """Check whether text is an email address."""
    return EMAIL_PATTERN.fullmatch(text) is not None


def is_zero(value: Any) -> bool:
    """
    Check whether a value is empty or its type's zero value.

    None, False, numeric zero, zero durations, empty text and empty
    containers (mappings included) are zero. A record is zero when every
    one of its fields is zero.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float, complex, Decimal)):
        return value == 0
    if isinstance(value, timedelta):
        return value == timedelta(0)
    if is_record(value):
        return all(
            is_zero(getattr(value, f.name, None)) for f in record_fields(type(value))
        )
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def _number(rule: str, value: Any) -> int | float:
    # bool is an int subclass but not a numeric kind
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise UnsupportedValueError(rule, value)
    return value


def _checked(result: Any) -> Violation | None:
    if result is None or isinstance(result, Violation):
        return result
    raise ValidatorTypeError(result, "a Violation or None from the validation function")


@frozen
class Required(Validator):
    """Field must not be empty or zero."""

    rule: ClassVar[str] = "required"

    def validate(
        self, value: Any, messages: MessageTemplates | None = None
    ) -> Violation | None:
        if is_zero(value):
            return self._violation(messages, "required")
        return None


@frozen
class MinLength(OptionalValidator):
    """Text must have at least min characters."""

    rule: ClassVar[str] = "minLength"

    min: int

    def validate(
        self, value: Any, messages: MessageTemplates | None = None
    ) -> Violation | None:
        if not isinstance(value, str):
            if self.optional:
                return None
            return self._violation(messages, "min_length", min=self.min)
        if self.optional and value == "":
            return None
        if len(value) < self.min:
            return self._violation(messages, "min_length", min=self.min)
        return None

    def params(self) -> dict[str, Any]:
        return {"min": self.min}


@frozen
class MaxLength(Validator):
    """Text must have at most max characters."""

    rule: ClassVar[str] = "maxLength"

    max: int

    def validate(
        self, value: Any, messages: MessageTemplates | None = None
    ) -> Violation | None:
        if not isinstance(value, str):
            return None
        if len(value) > self.max:
            return self._violation(messages, "max_length", max=self.max)
        return None

    def params(self) -> dict[str, Any]:
        return {"max": self.max}


@frozen
class Min(OptionalValidator):
    """Number must be min or more. Optional skips zero."""

    rule: ClassVar[str] = "min"

    min: int | float

    def validate(
        self, value: Any, messages: MessageTemplates | None = None
    ) -> Violation | None:
        if value is None:
            if self.optional:
                return None
            return self._violation(messages, "min", min=self.min)
        number = _number(self.rule, value)
        if self.optional and number == 0:
            return None
        if number < self.min:
            return self._violation(messages, "min", min=self.min)
        return None

    def params(self) -> dict[str, Any]:
        return {"min": self.min}


@frozen
class Max(Validator):
    """Number must be max or less."""

    rule: ClassVar[str] = "max"

    max: int | float

    def validate(
        self, value: Any, messages: MessageTemplates | None = None
    ) -> Violation | None:
        if value is None:
            return None
        if _number(self.rule, value) > self.max:
            return self._violation(messages, "max", max=self.max)
        return None

    def params(self) -> dict[str, Any]:
        return {"max": self.max}


def _compile(pattern: str | re.Pattern) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def _end_anchored(pattern: re.Pattern) -> re.Pattern:
    """
    Rewrite ``$`` anchors to ``\\Z``.

    Outside multiline mode ``$`` also matches before a trailing newline, which
    client-side regular expressions do not. The exported pattern is left as
    written; only matching uses the rewritten one.
    """
    if pattern.flags & re.MULTILINE or not isinstance(pattern.pattern, str):
        return pattern
    source = pattern.pattern
    out = []
    in_class = False
    i = 0
    while i < len(source):
        char = source[i]
        if char == "\\":
            out.append(source[i : i + 2])
            i += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
            out.append(char)
            i += 1
            # A leading "]" (after an optional "^") is a literal member
            if source.startswith("^", i):
                out.append("^")
                i += 1
            if source.startswith("]", i):
                out.append("]")
                i += 1
            continue
        elif char == "$":
            out.append(r"\Z")
            i += 1
            continue
        out.append(char)
        i += 1
    return re.compile("".join(out), pattern.flags)


@frozen
class Pattern(OptionalValidator):
    """Text must contain a match of the regular expression."""

    rule: ClassVar[str] = "pattern"

    pattern: re.Pattern = attrs.field(converter=_compile)
    _matcher: re.Pattern = attrs.field(
        init=False,
        eq=False,
        repr=False,
        default=attrs.Factory(lambda self: _end_anchored(self.pattern), takes_self=True),
    )

    def validate(
        self, value: Any, messages: MessageTemplates | None = None
    ) -> Violation | None:
        if not isinstance(value, str):
            if self.optional:
                return None
            return self._violation(messages, "pattern")
        if self.optional and value == "":
            return None
        if self._matcher.search(value):
            return None
        return self._violation(messages, "pattern")

    def params(self) -> dict[str, Any]:
        return {"pattern": self.pattern.pattern}


@frozen
class Email(OptionalValidator):
    """Text must be an email address."""

    rule: ClassVar[str] = "type"

    def validate(
        self, value: Any, messages: MessageTemplates | None = None
    ) -> Violation | None:
        if not isinstance(value, str):
            if self.optional:
                return None
            return self._violation(messages, "email")
        if self.optional and value == "":
            return None
        if is_email(value):
            return None
        return self._violation(messages, "email")

    def params(self) -> dict[str, Any]:
        return {"type": "email", "pattern": EMAIL_PATTERN.pattern}


@frozen(init=False)
class Options(Validator):
    """Value must equal one of the allowed options, type included.

    Options are given positionally: ``Options("admin", "user")``.
    """

    rule: ClassVar[str] = "options"

    options: tuple[Any, ...] = attrs.field(converter=tuple)

    def __init__(self, *options: Any, **kwargs: Any):
        # Copies made by attrs.evolve pass the options by keyword
        if not options:
            options = kwargs.pop("options", ())
        self.__attrs_init__(options, **kwargs)

    def validate(
        self, value: Any, messages: MessageTemplates | None = None
    ) -> Violation | None:
        for option in self.options:
            if type(option) is type(value) and option == value:
                return None
        return self._violation(messages, "options")

    def params(self) -> dict[str, Any]:
        return {"options": list(self.options)}


@frozen
class FieldFunc(Validator):
    """Validate a field with a custom function. Never exported.

    The function receives the bound field path and the located value and
    returns a Violation or None.
    """

    rule: ClassVar[str] = "fieldFunc"
    exportable: ClassVar[bool] = False

    checker: Callable[[FieldPath, Any], Violation | None]

    def validate(
        self, value: Any, messages: MessageTemplates | None = None
    ) -> Violation | None:
        violation = _checked(self.checker(self.field, value))
        if violation is not None and self.message:
            return Violation(self.message, violation.field)
        return violation


@frozen
class RecordFunc(Validator):
    """Validate the whole record with a custom function. Never exported.

    Add to a rule set with ``RuleSet.record``.
    """

    rule: ClassVar[str] = "recordFunc"
    exportable: ClassVar[bool] = False

    checker: Callable[[Any], Violation | None]

    def validate(
        self, value: Any, messages: MessageTemplates | None = None
    ) -> Violation | None:
        violation = _checked(self.checker(value))
        if violation is not None and self.message:
            return Violation(self.message, violation.field)
        return violation
