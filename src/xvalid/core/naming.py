"""
Export-name lookup for record fields.

Both the field resolver and the value decomposition step name fields the
same way, so that paths produced at registration time always resolve during
validation.
"""

from collections.abc import Sequence


def export_name(declared: str, alias: str | None = None) -> str:
    """
    Compute the export name of a field from its rename annotation.

    Params:
        declared: Declared attribute name of the field
        alias: Rename annotation, possibly comma-qualified (e.g. "number,omitempty")

    Returns:
        First comma-delimited token of the alias, or the declared name when
        the alias is missing or its first token is blank

    Examples:
        export_name("Int", "number,omitempty") -> "number"
        export_name("Str") -> "Str"
    """
    if alias:
        name = alias.split(",", 1)[0].strip()
        if name:
            return name
    return declared


def field_path_name(path: Sequence[str] | None) -> str:
    """Return the terminal segment of a field path, or "" for whole-record paths."""
    if not path:
        return ""
    return path[-1]
