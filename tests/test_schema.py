"""Tests for schema property registration and ordering."""

import pytest

from artconfig.domain import (
    DuplicateNameError,
    DuplicateSequenceError,
    ErrorKind,
    FormatError,
    IntegerProperty,
    InvalidArgumentError,
    NotFoundError,
    NullArgumentError,
    Schema,
    TextProperty,
)


def test_add_property_conflicts():
    """Reused sequence fails outright; fresh sequence with a used name fails too."""
    schema = Schema("chair")
    legs = IntegerProperty("legs")
    schema.add_property(1, legs)

    with pytest.raises(DuplicateSequenceError) as exc_info:
        schema.add_property(1, TextProperty("color"))
    assert exc_info.value.kind == ErrorKind.DUPLICATE_SEQUENCE

    with pytest.raises(DuplicateNameError) as exc_info:
        schema.add_property(2, IntegerProperty("legs"))
    assert exc_info.value.kind == ErrorKind.DUPLICATE_NAME

    assert schema.properties == [legs]


def test_reused_sequence_with_duplicate_name_is_duplicate_sequence():
    schema = Schema("chair")
    schema.add_property(1, IntegerProperty("legs"))
    with pytest.raises(DuplicateSequenceError):
        schema.add_property(1, IntegerProperty("legs"))


def test_properties_iterate_in_ascending_sequence():
    schema = Schema("table")
    top = TextProperty("top")
    legs = IntegerProperty("legs")
    width = IntegerProperty("width")
    schema.add_property(30, top)
    schema.add_property(5, legs)
    schema.add_property(12, width)

    assert schema.properties == [legs, width, top]
    assert list(schema) == [legs, width, top]
    assert [seq for seq, _ in schema.items()] == [5, 12, 30]
    assert len(schema) == 3
    assert "width" in schema


def test_add_property_rejects_none_and_non_properties():
    schema = Schema("chair")
    with pytest.raises(NullArgumentError):
        schema.add_property(1, None)
    with pytest.raises(InvalidArgumentError):
        schema.add_property(1, "legs")
    assert len(schema) == 0


def test_get_property(chair):
    assert chair.get_property("legs").name == "legs"
    with pytest.raises(NotFoundError):
        chair.get_property("armrest")


def test_schema_name_required():
    with pytest.raises(FormatError):
        Schema(" ")
    assert Schema("chair").name == "chair"


def test_reset_to_default_resets_all_properties(chair):
    chair.get_property("color").set_default_value("red")
    chair.get_property("color").set_current_value("blue")
    chair.get_property("legs").current_value = 6
    chair.get_property("label").current_text = "oak"

    chair.reset_to_default()

    assert chair.get_property("color").current_value.name == "red"
    assert chair.get_property("legs").current_value == 4
    assert chair.get_property("label").current_text == "blue"
