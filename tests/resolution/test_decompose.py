"""
Tests for record value decomposition and path lookup.
"""

from typing import Annotated

import pytest
from pydantic import BaseModel, Field

from xvalid.core import Embedded
from xvalid.exceptions import RecordReferenceError
from xvalid.resolution import lookup_path, record_to_map


class Deep(BaseModel):
    deep_int: int = Field(0, serialization_alias="deepInt")


class Embed(BaseModel):
    embed_str: str = Field("", serialization_alias="embedStr")
    deep: Annotated[Deep, Embedded] = Field(default_factory=Deep)


class Nested(BaseModel):
    top: str = ""
    embed: Annotated[Embed, Embedded] = Field(default_factory=Embed)
    plain: Deep | None = None
    maybe: Annotated[Deep | None, Embedded] = None


class TestRecordToMap:
    """Test decomposition into nested mappings."""

    def test_nested_mapping_uses_export_names(self):
        record = Nested(top="t", embed=Embed(embed_str="e", deep=Deep(deep_int=3)))
        assert record_to_map(record) == {
            "top": "t",
            "embed": {"embedStr": "e", "deep": {"deepInt": 3}},
            "plain": None,
            "maybe": None,
        }

    def test_non_embedded_sub_record_kept_raw(self):
        sub = Deep(deep_int=1)
        assert record_to_map(Nested(plain=sub))["plain"] is sub

    def test_type_rejected(self):
        with pytest.raises(RecordReferenceError):
            record_to_map(Nested)

    def test_non_record_rejected(self):
        with pytest.raises(RecordReferenceError):
            record_to_map({"top": "t"})


class TestLookupPath:
    """Test walking decomposed mappings."""

    def test_leaf_value(self):
        values = record_to_map(Nested(embed=Embed(deep=Deep(deep_int=7))))
        assert lookup_path(values, ("embed", "deep", "deepInt")) == 7

    def test_missing_segment_is_absent(self):
        values = record_to_map(Nested())
        assert lookup_path(values, ("embed", "nothing")) is None

    def test_none_embedded_value_is_absent(self):
        values = record_to_map(Nested())
        assert lookup_path(values, ("maybe", "deepInt")) is None

    def test_walk_through_leaf_is_absent(self):
        values = record_to_map(Nested(top="t"))
        assert lookup_path(values, ("top", "more")) is None

    def test_embedded_terminal_returns_source_instance(self):
        embed = Embed(embed_str="x")
        values = record_to_map(Nested(embed=embed))
        assert lookup_path(values, ("embed",)) is embed
