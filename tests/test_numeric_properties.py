"""Tests for integer and decimal property bounds."""

import math
import random

import pytest

from artconfig.domain import (
    DecimalProperty,
    DomainError,
    ErrorKind,
    IncompatibleWithSetValuesError,
    IntegerProperty,
    InvalidArgumentError,
    OutOfRangeError,
)
from artconfig.domain.constants import (
    DECIMAL_MAX,
    DECIMAL_MIN,
    INTEGER_MAX,
    INTEGER_MIN,
)


def test_integer_defaults_span_domain():
    prop = IntegerProperty("qty")
    assert prop.lower_bound == INTEGER_MIN
    assert prop.upper_bound == INTEGER_MAX
    assert prop.default_value == 0
    assert prop.current_value == 0
    assert prop.required is False
    assert prop.description == ""
    assert prop.kind == "integer"


def test_decimal_defaults_span_domain():
    prop = DecimalProperty("height")
    assert prop.lower_bound == DECIMAL_MIN
    assert prop.upper_bound == DECIMAL_MAX
    assert prop.default_value == 0.0
    assert prop.current_value == 0.0


def test_lower_bound_above_default_is_incompatible():
    """Lower bound 5 cannot be set while default and current are 0."""
    prop = IntegerProperty("qty")
    with pytest.raises(IncompatibleWithSetValuesError) as exc_info:
        prop.lower_bound = 5
    assert exc_info.value.kind == ErrorKind.INCOMPATIBLE_WITH_SET_VALUES
    assert prop.lower_bound == INTEGER_MIN


def test_lower_bound_accepted_once_values_moved():
    prop = IntegerProperty("qty")
    prop.default_value = 10
    prop.current_value = 10
    prop.lower_bound = 5
    assert prop.lower_bound == 5


def test_lower_bound_checks_current_value_too():
    """Moving only the default is not enough while current stays below."""
    prop = IntegerProperty("qty")
    prop.default_value = 10
    with pytest.raises(IncompatibleWithSetValuesError):
        prop.lower_bound = 5


def test_upper_bound_below_current_is_incompatible(legs):
    legs.current_value = 7
    with pytest.raises(IncompatibleWithSetValuesError):
        legs.upper_bound = 6
    assert legs.upper_bound == 8


def test_crossing_bounds_reports_incompatible_values():
    """Values always lie between the bounds, so a bound crossing the other
    bound is first reported as incompatible with the set values."""
    prop = IntegerProperty("qty")
    prop.upper_bound = 10
    prop.lower_bound = -10
    with pytest.raises(IncompatibleWithSetValuesError):
        prop.lower_bound = 11
    with pytest.raises(IncompatibleWithSetValuesError):
        prop.upper_bound = -11
    assert (prop.lower_bound, prop.upper_bound) == (-10, 10)


def test_zero_width_range():
    prop = DecimalProperty("ratio")
    prop.upper_bound = 0.0
    prop.lower_bound = 0.0
    assert prop.lower_bound == prop.upper_bound == 0.0
    with pytest.raises(OutOfRangeError):
        prop.current_value = 0.1


def test_bound_outside_integer_domain():
    prop = IntegerProperty("qty")
    with pytest.raises(OutOfRangeError):
        prop.lower_bound = INTEGER_MIN - 1
    with pytest.raises(OutOfRangeError):
        prop.upper_bound = INTEGER_MAX + 1


def test_default_and_current_outside_bounds(legs):
    with pytest.raises(OutOfRangeError) as exc_info:
        legs.default_value = 9
    assert exc_info.value.field == "default_value"
    assert legs.default_value == 4

    with pytest.raises(OutOfRangeError):
        legs.current_value = 2
    assert legs.current_value == 4


def test_integer_rejects_non_integers():
    prop = IntegerProperty("qty")
    with pytest.raises(InvalidArgumentError):
        prop.current_value = 1.5
    with pytest.raises(InvalidArgumentError):
        prop.current_value = True
    with pytest.raises(InvalidArgumentError):
        prop.lower_bound = "3"


def test_decimal_accepts_ints_and_rejects_nan():
    prop = DecimalProperty("height")
    prop.current_value = 3
    assert prop.current_value == 3.0
    assert isinstance(prop.current_value, float)
    with pytest.raises(OutOfRangeError):
        prop.current_value = math.nan
    with pytest.raises(OutOfRangeError):
        prop.upper_bound = math.inf
    assert prop.current_value == 3.0


def test_reset_to_default(legs):
    legs.current_value = 7
    legs.reset_to_default()
    assert legs.current_value == 4


def test_failed_setter_leaves_property_unchanged(legs, snapshot):
    before = snapshot(legs)
    for field, value in [
        ("lower_bound", 5),
        ("upper_bound", 3),
        ("default_value", 100),
        ("current_value", -100),
    ]:
        with pytest.raises(DomainError):
            setattr(legs, field, value)
        assert snapshot(legs) == before


def test_random_setter_sequences_keep_values_within_bounds():
    """Whatever sequence of assignments is attempted, values stay in bounds."""
    rng = random.Random(1234)
    prop = IntegerProperty("qty")
    fields = ["lower_bound", "upper_bound", "default_value", "current_value"]
    for _ in range(2000):
        try:
            setattr(prop, rng.choice(fields), rng.randint(-50, 50))
        except DomainError:
            pass
        assert prop.lower_bound <= prop.default_value <= prop.upper_bound
        assert prop.lower_bound <= prop.current_value <= prop.upper_bound


def test_rendering():
    qty = IntegerProperty("qty")
    qty.current_value = 12
    assert qty.render_text() == "qty: 12"
    assert str(qty) == "qty: 12"
    assert qty.render_json_fragment() == '"qty": 12'

    ratio = DecimalProperty("ratio")
    ratio.current_value = 2.5
    assert ratio.render_text() == "ratio: 2.5"
    assert ratio.render_json_fragment() == '"ratio": 2.5'


def test_required_and_description_are_mutable():
    prop = IntegerProperty("qty", description="Quantity", required=True)
    assert prop.required is True
    prop.required = False
    prop.description = None
    assert prop.description == ""
    assert prop.name == "qty"
    with pytest.raises(AttributeError):
        prop.name = "other"
