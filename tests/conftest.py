import pytest

from artconfig.domain import (
    DecimalProperty,
    IntegerProperty,
    ListProperty,
    PropertyValue,
    Schema,
    TextProperty,
)


def _snapshot(obj) -> dict:
    """Capture every public property value of a domain object."""
    names = {
        name
        for cls in type(obj).__mro__
        for name, attr in vars(cls).items()
        if isinstance(attr, property)
    }
    return {name: getattr(obj, name) for name in names}


@pytest.fixture(name="snapshot")
def snapshot_fixture():
    return _snapshot


@pytest.fixture(name="color")
def color_fixture() -> ListProperty:
    """List property with three colors registered out of order."""
    prop = ListProperty("color", "Frame color")
    prop.add_value(20, PropertyValue("blue", "Ocean blue"))
    prop.add_value(10, PropertyValue("red", "Signal red"))
    prop.add_value(30, PropertyValue("green"))
    return prop


@pytest.fixture(name="legs")
def legs_fixture() -> IntegerProperty:
    prop = IntegerProperty("legs")
    prop.upper_bound = 8
    prop.default_value = 4
    prop.current_value = 4
    prop.lower_bound = 3
    return prop


@pytest.fixture(name="label")
def label_fixture() -> TextProperty:
    prop = TextProperty("label")
    prop.max_length = 10
    prop.default_text = "blue"
    prop.current_text = "blue"
    prop.min_length = 2
    return prop


@pytest.fixture(name="chair")
def chair_fixture(color: ListProperty, legs: IntegerProperty, label: TextProperty):
    """Chair schema: color, legs, label, seat height."""
    seat_height = DecimalProperty("seat_height")
    seat_height.upper_bound = 60.0
    seat_height.default_value = 45.0
    seat_height.current_value = 45.0
    seat_height.lower_bound = 35.0

    schema = Schema("chair")
    schema.add_property(1, color)
    schema.add_property(2, legs)
    schema.add_property(3, label)
    schema.add_property(4, seat_height)
    return schema
