"""
Validation violations and their collections.

A ``Violation`` is one broken rule: a message and the field path it applies
to (empty for whole-record rules). ``ViolationList`` keeps violations in the
order the rules ran; ``ViolationMap`` keys them by terminal field name for
client display, the last violation of a field winning.
"""

import json
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import overload

import attrs
from attrs import frozen

from xvalid.core.naming import field_path_name
from xvalid.core.types import FieldPath


def join_sentences(sentences: Iterable[str]) -> str:
    """
    Join messages into a paragraph.

    Examples:
        ["Please enter the name", "Too short"] -> "Please enter the name. Too short."
        [] -> ""
    """
    items = list(sentences)
    if not items:
        return ""
    return ". ".join(items) + "."


@frozen
class Violation:
    """One broken rule.

    Params:
        message: Human-readable message
        field: Export-name path of the field, empty for whole-record violations
    """

    message: str
    field: FieldPath = attrs.field(default=(), converter=tuple)

    @property
    def field_name(self) -> str:
        """Terminal export-name segment, or "" for whole-record violations."""
        return field_path_name(self.field)

    def to_dict(self) -> dict[str, str]:
        """Serialisable form; only the terminal field name is kept."""
        return {"message": self.message, "field": self.field_name}

    def as_error(self) -> "ViolationError":
        return ViolationError(self)

    def __str__(self) -> str:
        return self.message


def new_violation(message: str, *field: str) -> Violation:
    """Create a violation for a field path given as separate segments."""
    return Violation(message, field)


class ViolationError(Exception):
    """Exception view of a single violation."""

    def __init__(self, violation: Violation):
        self.violation = violation
        super().__init__(violation.message)

    @property
    def field(self) -> FieldPath:
        return self.violation.field


class ViolationList(Sequence[Violation]):
    """Violations in the order their rules ran; duplicates allowed."""

    __slots__ = ("_items",)

    def __init__(self, violations: Iterable[Violation] = ()):
        self._items = tuple(violations)

    @overload
    def __getitem__(self, index: int) -> Violation: ...

    @overload
    def __getitem__(self, index: slice) -> "ViolationList": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ViolationList(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Violation]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ViolationList):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"ViolationList({list(self._items)!r})"

    @property
    def message(self) -> str:
        """All messages joined into sentences."""
        return join_sentences(v.message for v in self._items)

    def __str__(self) -> str:
        return self.message

    def unwrap(self) -> list[ViolationError]:
        """Each violation as an independent exception."""
        return [v.as_error() for v in self._items]

    def as_exception_group(self) -> ExceptionGroup:
        return ExceptionGroup(self.message, self.unwrap())

    def to_map(self) -> "ViolationMap":
        """Key violations by terminal field name; the last one of a field wins."""
        return ViolationMap((v.field_name, v) for v in self._items)

    def to_list(self) -> list[dict[str, str]]:
        """Serialisable form: a list of {message, field} objects."""
        return [v.to_dict() for v in self._items]

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_list(), indent=indent, ensure_ascii=False)


class ViolationMap(Mapping[str, Violation]):
    """Violations keyed by terminal field name."""

    __slots__ = ("_items",)

    def __init__(
        self,
        violations: Mapping[str, Violation] | Iterable[tuple[str, Violation]] = (),
    ):
        self._items: dict[str, Violation] = dict(violations)

    def __getitem__(self, name: str) -> Violation:
        return self._items[name]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ViolationMap({self._items!r})"

    @property
    def message(self) -> str:
        """All messages joined into sentences."""
        return join_sentences(v.message for v in self._items.values())

    def __str__(self) -> str:
        return self.message

    def unwrap(self) -> list[ViolationError]:
        """Each violation as an independent exception."""
        return [v.as_error() for v in self._items.values()]

    def as_exception_group(self) -> ExceptionGroup:
        return ExceptionGroup(self.message, self.unwrap())

    def to_list(self) -> ViolationList:
        return ViolationList(self._items.values())

    def to_dict(self) -> dict[str, str]:
        """Serialisable form: {field: message}."""
        return {name: v.message for name, v in self._items.items()}

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

