"""
Field path resolution.

Turns a field reference into the ordered export-name segments that locate
the field inside the decomposed value of a record. The paths of every field
reachable from a record type are computed once per type by a depth-first
scan that recurses into embedded sub-records, and references are then
matched by field identity rather than by name.
"""

import logging
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from xvalid.core.records import RecordField, record_fields, record_type_of
from xvalid.core.types import FieldPath
from xvalid.exceptions import (
    AmbiguousFieldError,
    FieldNotFoundError,
    FieldReferenceError,
)
from xvalid.resolution.selector import FieldRef, fields_of, selector_ref

logger = logging.getLogger(__name__)

FieldReference = Any  # FieldSelector | FieldRef | str | Callable[[FieldSelector], FieldSelector]


def _scan(
    record_type: type,
    hops: tuple[RecordField, ...],
    path: FieldPath,
    index: dict[tuple[RecordField, ...], FieldPath],
    seen: frozenset[type],
) -> None:
    # Reverse declaration order; identity keys make the result order independent
    for f in reversed(record_fields(record_type)):
        chain = hops + (f,)
        segments = path + (f.export_name,)
        index[chain] = segments
        if f.embedded and f.record_type not in seen:
            _scan(f.record_type, chain, segments, index, seen | {f.record_type})


@lru_cache(maxsize=None)
def field_index(record_type: type) -> Mapping[tuple[RecordField, ...], FieldPath]:
    """
    Map every addressable field chain of a record type to its path.

    A chain is addressable when every hop but the last is an embedded
    sub-record. Fields inside non-embedded sub-records are not addressable:
    their parent is a terminal whose whole value is validated.

    Params:
        record_type: Record type to index

    Returns:
        Read-only mapping of hop chain -> export-name path
    """
    index: dict[tuple[RecordField, ...], FieldPath] = {}
    _scan(record_type, (), (), index, frozenset({record_type}))
    logger.debug("Indexed %d field paths for %s", len(index), record_type.__name__)
    return MappingProxyType(index)


def _as_ref(record_type: type, reference: FieldReference) -> FieldRef:
    """Normalise the accepted reference forms into a FieldRef."""
    ref = selector_ref(reference)
    if ref is not None:
        return ref

    if isinstance(reference, str):
        if not reference.strip():
            raise FieldReferenceError(reference, "is an empty field name")
        ref = FieldRef(record_type)
        for part in reference.split("."):
            ref = ref.child(part.strip())
        return ref

    if callable(reference) and not isinstance(reference, type):
        result = reference(fields_of(record_type))
        ref = selector_ref(result)
        if ref is None:
            raise FieldReferenceError(
                reference, "did not return a field selector from its accessor"
            )
        return ref

    raise FieldReferenceError(reference)


def _anchored_match(
    index: Mapping[tuple[RecordField, ...], FieldPath], ref: FieldRef
) -> FieldPath | None:
    """
    Match a reference rooted at an embedded sub-record type.

    The reference's hops must form the tail of an indexed chain whose
    preceding hop embeds the reference's root type. The deepest such chain
    wins; several equally deep chains are ambiguous.
    """
    size = len(ref.hops)
    candidates = [
        (chain, path)
        for chain, path in index.items()
        if len(chain) > size
        and chain[-size:] == ref.hops
        and chain[-size - 1].record_type is ref.root
    ]
    if not candidates:
        return None
    deepest = max(len(chain) for chain, _ in candidates)
    best = [(chain, path) for chain, path in candidates if len(chain) == deepest]
    if len(best) > 1:
        raise AmbiguousFieldError(
            ref.dotted,
            ref.root.__name__,
            [".".join(hop.name for hop in chain) for chain, _ in best],
        )
    return best[0][1]


def resolve_field(record: Any, reference: FieldReference) -> FieldPath:
    """
    Resolve a field reference to its export-name path.

    Params:
        record: Record class or instance the rules are declared for
        reference: A FieldSelector/FieldRef, a dotted string of declared
            names, or an accessor callable receiving the root selector

    Returns:
        Non-empty tuple of export-name segments, outermost first

    Raises:
        RecordReferenceError: If record is None or not a record
        FieldReferenceError: If reference is not a field reference
        FieldNotFoundError: If the referenced field is not addressable in record
        AmbiguousFieldError: If the reference matches several fields equally well
    """
    record_type = record_type_of(record)
    ref = _as_ref(record_type, reference)
    if not ref.hops:
        raise FieldReferenceError(
            reference, "selects the whole record, not one of its fields"
        )

    index = field_index(record_type)
    if ref.root is record_type:
        path = index.get(ref.hops)
        if path is None:
            raise FieldNotFoundError(
                ref.dotted,
                record_type.__name__,
                "is inside a non-embedded sub-record and is not addressable",
            )
        return path

    path = _anchored_match(index, ref)
    if path is None:
        raise FieldNotFoundError(
            f"{ref.root.__name__}.{ref.dotted}", record_type.__name__
        )
    return path
