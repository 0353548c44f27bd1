"""
Tests for default message configuration.
"""

import pytest
from pydantic import BaseModel

from xvalid import Min, Required, RuleSet
from xvalid.config import DEFAULT_MESSAGES, MessageTemplates
from xvalid.exceptions import MessageTemplateError


class Account(BaseModel):
    login: str = ""
    age: int = 0


class TestMessageTemplates:
    """Test MessageTemplates construction and rendering."""

    def test_defaults(self):
        assert MessageTemplates() == DEFAULT_MESSAGES
        assert DEFAULT_MESSAGES.render("required", "login") == "Please enter the login"

    def test_render_with_bounds(self):
        assert (
            DEFAULT_MESSAGES.render("max_length", "login", max=8)
            == "Please shorten login to 8 characters or less"
        )

    def test_unknown_kind(self):
        assert DEFAULT_MESSAGES.render("nothing", "login") == "Please correct login"

    def test_from_dict_partial_override(self):
        messages = MessageTemplates.from_dict(
            {"required": "{field} is required", "unknown": "ignored"}
        )
        assert messages.required == "{field} is required"
        assert messages.min == DEFAULT_MESSAGES.min

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "messages.yaml"
        path.write_text('required: "{field} is required"\nmin: "{field} must be >= {min}"\n')
        messages = MessageTemplates.from_yaml(path)
        assert messages.required == "{field} is required"
        assert messages.min == "{field} must be >= {min}"
        assert messages.email == DEFAULT_MESSAGES.email

    def test_from_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert MessageTemplates.from_yaml(path) == DEFAULT_MESSAGES

    def test_unknown_placeholder_rejected_on_load(self):
        with pytest.raises(MessageTemplateError) as exc_info:
            MessageTemplates.from_dict({"required": "{name} is required"})
        assert exc_info.value.key == "required"
        assert exc_info.value.template == "{name} is required"

    @pytest.mark.parametrize("template", ["{field", "{0} is required", "{field!z}"])
    def test_malformed_template_rejected(self, template):
        with pytest.raises(MessageTemplateError):
            MessageTemplates(min=template)

    def test_null_template_rejected(self, tmp_path):
        path = tmp_path / "messages.yaml"
        path.write_text("required:\n")
        with pytest.raises(MessageTemplateError) as exc_info:
            MessageTemplates.from_yaml(path)
        assert exc_info.value.key == "required"
        assert exc_info.value.template is None

    def test_bound_outside_its_rule_rejected(self):
        with pytest.raises(MessageTemplateError):
            MessageTemplates.from_dict({"required": "{field} needs {min}"})
        with pytest.raises(MessageTemplateError):
            MessageTemplates.from_dict({"min_length": "{field} under {max}"})


class TestRuleSetMessages:
    """Rule sets render defaults from their templates."""

    def test_custom_templates(self):
        messages = MessageTemplates.from_dict(
            {"required": "{field} is required", "min": "{field} must be >= {min}"}
        )
        rules = RuleSet(Account, messages=messages)
        f = rules.fields
        rules = rules.field(f.login, Required()).field(f.age, Min(18))
        assert [v.message for v in rules.validate(Account())] == [
            "login is required",
            "age must be >= 18",
        ]

    def test_override_message_wins(self):
        messages = MessageTemplates.from_dict({"required": "{field} is required"})
        rules = RuleSet(Account, messages=messages)
        rules = rules.field(rules.fields.login, Required().set_message("Pick a login"))
        assert rules.validate(Account())[0].message == "Pick a login"

    def test_templates_survive_registration(self):
        messages = MessageTemplates.from_dict({"required": "{field} is required"})
        rules = RuleSet(Account, messages=messages)
        assert rules.field(rules.fields.login, Required()).messages is messages
