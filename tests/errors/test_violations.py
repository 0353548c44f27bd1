"""
Tests for violations and violation collections.
"""

import json

import pytest

from xvalid.errors import (
    Violation,
    ViolationError,
    ViolationList,
    ViolationMap,
    join_sentences,
    new_violation,
)


@pytest.fixture
def violations():
    return ViolationList(
        [
            Violation("First A", ("embed", "A")),
            Violation("Second A", ("A",)),
            Violation("Only B", ("B",)),
        ]
    )


class TestJoinSentences:
    """Test message joining."""

    def test_empty(self):
        assert join_sentences([]) == ""

    def test_single(self):
        assert join_sentences(["Please enter the name"]) == "Please enter the name."

    def test_several(self):
        assert join_sentences(["One", "Two"]) == "One. Two."


class TestViolation:
    """Test the Violation value."""

    def test_field_name_is_terminal_segment(self):
        violation = new_violation("bad", "embed", "deep", "deepInt")
        assert violation.field == ("embed", "deep", "deepInt")
        assert violation.field_name == "deepInt"

    def test_whole_record_violation(self):
        violation = Violation("bad")
        assert violation.field == ()
        assert violation.field_name == ""

    def test_to_dict(self):
        assert Violation("bad", ["embed", "x"]).to_dict() == {"message": "bad", "field": "x"}

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Violation("bad").message = "good"

    def test_str(self):
        assert str(Violation("bad", ("x",))) == "bad"

    def test_as_error(self):
        error = Violation("bad", ("x",)).as_error()
        assert isinstance(error, ViolationError)
        assert str(error) == "bad"
        assert error.field == ("x",)


class TestViolationList:
    """Test the ordered collection."""

    def test_sequence_behaviour(self, violations):
        assert len(violations) == 3
        assert violations[0].message == "First A"
        assert isinstance(violations[1:], ViolationList)
        assert [v.message for v in violations] == ["First A", "Second A", "Only B"]

    def test_message(self, violations):
        assert violations.message == "First A. Second A. Only B."
        assert str(violations) == violations.message

    def test_to_map_last_writer_wins(self, violations):
        by_name = violations.to_map()
        assert isinstance(by_name, ViolationMap)
        assert len(by_name) == 2
        assert by_name["A"].message == "Second A"
        assert by_name["B"].message == "Only B"

    def test_unwrap(self, violations):
        errors = violations.unwrap()
        assert len(errors) == 3
        assert all(isinstance(e, ViolationError) for e in errors)
        assert errors[2].violation is violations[2]

    def test_exception_group(self, violations):
        group = violations.as_exception_group()
        assert isinstance(group, ExceptionGroup)
        assert len(group.exceptions) == 3
        with pytest.raises(ExceptionGroup) as exc_info:
            raise group
        matched, rest = exc_info.value.split(ViolationError)
        assert rest is None

    def test_to_list_and_json(self, violations):
        expected = [
            {"message": "First A", "field": "A"},
            {"message": "Second A", "field": "A"},
            {"message": "Only B", "field": "B"},
        ]
        assert violations.to_list() == expected
        assert json.loads(violations.to_json()) == expected

    def test_equality(self, violations):
        assert violations == ViolationList(list(violations))
        assert violations == list(violations)


class TestViolationMap:
    """Test the name-keyed collection."""

    def test_round_trip_to_list(self, violations):
        back = violations.to_map().to_list()
        assert isinstance(back, ViolationList)
        assert [v.message for v in back] == ["Second A", "Only B"]

    def test_message(self, violations):
        assert violations.to_map().message == "Second A. Only B."

    def test_unwrap(self, violations):
        assert [str(e) for e in violations.to_map().unwrap()] == ["Second A", "Only B"]

    def test_to_dict_and_json(self, violations):
        by_name = violations.to_map()
        assert by_name.to_dict() == {"A": "Second A", "B": "Only B"}
        assert json.loads(by_name.to_json()) == {"A": "Second A", "B": "Only B"}

    def test_empty(self):
        empty = ViolationMap()
        assert len(empty) == 0
        assert empty.message == ""
