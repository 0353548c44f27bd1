"""
Tests for configuration error types.
"""

import pytest

from xvalid.exceptions import (
    AmbiguousFieldError,
    FieldNotFoundError,
    FieldReferenceError,
    RecordReferenceError,
    UnsupportedValueError,
    ValidatorTypeError,
    XValidError,
)


class TestErrorHierarchy:
    """All configuration errors share one base."""

    @pytest.mark.parametrize(
        "error",
        [
            RecordReferenceError(None, "record is None"),
            FieldReferenceError(42),
            FieldNotFoundError("name", "Person"),
            AmbiguousFieldError("city", "Person", ["home.city", "work.city"]),
            UnsupportedValueError("min", "text"),
            ValidatorTypeError(42, "a Validator"),
        ],
    )
    def test_subclass_of_base(self, error):
        assert isinstance(error, XValidError)


class TestErrorMessages:
    """Test that errors keep their inputs and format messages."""

    def test_field_not_found(self):
        error = FieldNotFoundError("embed.missing", "Nested")
        assert error.field == "embed.missing"
        assert error.record == "Nested"
        assert str(error) == "Field 'embed.missing' does not exist in Nested"

    def test_field_not_found_custom_message(self):
        error = FieldNotFoundError("sub.x", "Holder", "is not addressable")
        assert str(error) == "Field 'sub.x' is not addressable in Holder"

    def test_ambiguous_lists_candidates(self):
        error = AmbiguousFieldError("city", "Person", ["home.city", "work.city"])
        assert error.candidates == ["home.city", "work.city"]
        assert "home.city, work.city" in str(error)

    def test_field_reference_default_reason(self):
        assert str(FieldReferenceError(42)) == "Field reference 42 is not a field reference"

    def test_unsupported_value_names_type(self):
        error = UnsupportedValueError("max", "abc")
        assert error.rule == "max"
        assert "str" in str(error)

    def test_record_reference(self):
        error = RecordReferenceError(None, "record is None")
        assert error.record is None
        assert error.reason == "record is None"
