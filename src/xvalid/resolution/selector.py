"""
Symbolic field references.

A field is referenced by selecting it from a ``FieldSelector``, never by
name strings scattered through calling code::

    f = fields_of(Person)
    f.name                 # declared field
    f.address.city         # field of an embedded sub-record
    f.city                 # the same field, promoted through embedding

Every selection produces a ``FieldRef``: the root record type plus the chain
of declared fields (``RecordField``) leading to the target. Field identity is
the owning record type plus the declared name, so two selections of the same
field compare equal however they were written.
"""

from collections import deque
from dataclasses import dataclass
from typing import Any

from xvalid.core.records import (
    RecordField,
    find_declared_field,
    record_fields,
    record_type_of,
)
from xvalid.exceptions import AmbiguousFieldError, FieldNotFoundError


@dataclass(frozen=True)
class FieldRef:
    """
    Reference to a field reachable from a root record type.

    Params:
        root: Record type the selection started from
        hops: Declared fields traversed from root, outermost first
    """

    root: type
    hops: tuple[RecordField, ...] = ()

    @property
    def target(self) -> RecordField | None:
        """The referenced field, or None for a reference to the root itself."""
        return self.hops[-1] if self.hops else None

    @property
    def current_type(self) -> type | None:
        """Record type whose fields can be selected next, if any."""
        if not self.hops:
            return self.root
        return self.hops[-1].record_type

    @property
    def dotted(self) -> str:
        """Dotted declared-name path, used in error messages."""
        return ".".join(hop.name for hop in self.hops)

    def child(self, name: str) -> "FieldRef":
        """
        Select a field below this reference.

        Declared fields win over promoted ones. Promoted fields are searched
        through embedded sub-records one embedding level at a time; the
        shallowest match wins.

        Params:
            name: Declared attribute name to select

        Returns:
            New FieldRef extended by the selected hop(s)

        Raises:
            FieldNotFoundError: If no such field is reachable
            AmbiguousFieldError: If several promoted fields match at one depth
        """
        owner = self.current_type
        full_name = f"{self.dotted}.{name}" if self.hops else name
        if owner is None:
            raise FieldNotFoundError(
                full_name, self.root.__name__, "cannot be selected from a non-record field"
            )

        declared = find_declared_field(owner, name)
        if declared is not None:
            return FieldRef(self.root, self.hops + (declared,))

        promoted = _find_promoted(owner, name)
        if promoted is None:
            raise FieldNotFoundError(full_name, self.root.__name__)
        return FieldRef(self.root, self.hops + promoted)


def _find_promoted(owner: type, name: str) -> tuple[RecordField, ...] | None:
    """Breadth-first search for name through the embedded sub-records of owner."""
    level = deque(
        ((f,), f.record_type, frozenset({owner}))
        for f in record_fields(owner)
        if f.embedded
    )
    while level:
        matches = []
        next_level = deque()
        for chain, record_type, seen in level:
            if record_type in seen:
                continue
            declared = find_declared_field(record_type, name)
            if declared is not None:
                matches.append(chain + (declared,))
            for f in record_fields(record_type):
                if f.embedded:
                    next_level.append(
                        (chain + (f,), f.record_type, seen | {record_type})
                    )
        if len(matches) == 1:
            return matches[0]
        if matches:
            raise AmbiguousFieldError(
                name,
                owner.__name__,
                [".".join(hop.name for hop in chain) for chain in matches],
            )
        level = next_level
    return None


class FieldSelector:
    """Attribute-access proxy that builds FieldRef values."""

    __slots__ = ("_ref",)

    def __init__(self, ref: FieldRef):
        object.__setattr__(self, "_ref", ref)

    def __getattr__(self, name: str) -> "FieldSelector":
        # Dunder and private lookups are never fields
        if name.startswith("_"):
            raise AttributeError(name)
        return FieldSelector(self._ref.child(name))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("field selectors are read-only")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldSelector):
            return self._ref == other._ref
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._ref)

    def __repr__(self) -> str:
        ref = self._ref
        suffix = f".{ref.dotted}" if ref.hops else ""
        return f"<FieldSelector {ref.root.__name__}{suffix}>"


def fields_of(record: Any) -> FieldSelector:
    """
    Get the root field selector of a record.

    Params:
        record: A record class or instance

    Returns:
        FieldSelector rooted at the record type

    Raises:
        RecordReferenceError: If record is None or not a record
    """
    return FieldSelector(FieldRef(record_type_of(record)))


def selector_ref(obj: Any) -> FieldRef | None:
    """Extract the FieldRef from a selector or reference, or None for anything else."""
    if isinstance(obj, FieldSelector):
        return object.__getattribute__(obj, "_ref")
    if isinstance(obj, FieldRef):
        return obj
    return None
