"""
Default violation message configuration for xvalid.

This module provides the templates used when a validator has no override
message of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

from xvalid.exceptions import MessageTemplateError

# Placeholders each template is rendered with
_BOUNDS = {"min_length": "min", "max_length": "max", "min": "min", "max": "max"}


def _sample_bound(kind: str) -> dict[str, int]:
    bound = _BOUNDS.get(kind)
    return {bound: 0} if bound else {}


@dataclass(frozen=True)
class MessageTemplates:
    """Default message templates, one per rule kind.

    Templates are ``str.format`` strings. ``{field}`` is the terminal export
    name of the field; ``{min}`` and ``{max}`` are the rule's bounds.

    Examples:
        # All defaults
        messages = MessageTemplates()

        # Partial override from dict
        messages = MessageTemplates.from_dict({"required": "{field} is required"})

        # From YAML file
        messages = MessageTemplates.from_yaml("messages.yaml")
    """

    required: str = "Please enter the {field}"
    min_length: str = "Please lengthen {field} to {min} characters or more"
    max_length: str = "Please shorten {field} to {max} characters or less"
    min: str = "Please increase {field} to be {min} or more"
    max: str = "Please decrease {field} to be {max} or less"
    pattern: str = "Please correct {field} into a valid format"
    email: str = "Please use a valid email address for {field}"
    options: str = "Please select one of the valid options for {field}"

    def __post_init__(self) -> None:
        for f in dataclass_fields(self):
            template = getattr(self, f.name)
            if not isinstance(template, str):
                raise MessageTemplateError(f.name, template, "template must be a string")
            try:
                self.render(f.name, "field", **_sample_bound(f.name))
            except (KeyError, IndexError, ValueError) as e:
                raise MessageTemplateError(
                    f.name, template, f"cannot be rendered ({e!r})"
                ) from e

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> MessageTemplates:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Keys that are not
                   template names are ignored.

        Returns:
            MessageTemplates instance with specified overrides

        Raises:
            MessageTemplateError: If a template is not a string or uses an
                unknown placeholder
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> MessageTemplates:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing templates

        Example YAML:
            required: "{field} is required"
            email: "{field} must be an email address"
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)

    def render(self, kind: str, field: str, **params: Any) -> str:
        """Format the template for a rule kind.

        Args:
            kind: Template name (required, min_length, ...)
            field: Terminal export name of the field
            **params: Rule parameters such as min and max

        Returns:
            Rendered message
        """
        template = getattr(self, kind, None)
        if template is None:
            return f"Please correct {field}"
        return template.format(field=field, **params)


DEFAULT_MESSAGES = MessageTemplates()
