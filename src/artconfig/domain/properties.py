"""Configurable properties of a schema.

All variants share the ``Property`` interface. Bounded variants (integer,
decimal, text) validate each setter against the other three fields before
assigning, so a failed assignment never changes the property:

1. a bound that would exclude the current or default value is rejected
   with ``IncompatibleWithSetValues``;
2. a bound that would cross the opposite bound is rejected with
   ``BoundsCrossed``;
3. a bound outside the type domain, or a default/current value outside
   the bounds, is rejected with ``OutOfRange``.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from .constants import (
    DECIMAL_MAX,
    DECIMAL_MIN,
    INTEGER_MAX,
    INTEGER_MIN,
    MAX_TEXT_LENGTH,
    MSG_HIGHER_THAN_UPPER_BOUND,
    MSG_INCOMPATIBLE_WITH_SET_VALUES,
    MSG_LOWER_THAN_LOWER_BOUND,
    MSG_VALUE_OUT_OF_BOUNDS,
)
from .exceptions import (
    BoundsCrossedError,
    IncompatibleWithSetValuesError,
    OutOfRangeError,
)
from .validation import coerce_text, require_int, require_number, validate_identifier

N = TypeVar("N", int, float)


class Property(ABC):
    """A named configurable attribute belonging to a schema."""

    kind: ClassVar[str]

    def __init__(self, name: str, description: str = "", required: bool = False):
        self._name = validate_identifier(name, "name")
        self._description = coerce_text(description, "description")
        self._required = bool(required)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str | None) -> None:
        self._description = coerce_text(value, "description")

    @property
    def required(self) -> bool:
        return self._required

    @required.setter
    def required(self, value: bool) -> None:
        self._required = bool(value)

    @abstractmethod
    def reset_to_default(self) -> None:
        """Reset the current value to the default value."""

    @abstractmethod
    def _display_value(self) -> str: ...

    @abstractmethod
    def _json_value(self) -> Any: ...

    def render_text(self) -> str:
        """Name and current value separated by a colon."""
        return f"{self._name}: {self._display_value()}"

    def render_json_fragment(self) -> str:
        """Name and current value as a single JSON member (no braces)."""
        return (
            f"{json.dumps(self._name, ensure_ascii=False)}: "
            f"{json.dumps(self._json_value(), ensure_ascii=False)}"
        )

    def __str__(self) -> str:
        return self.render_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


class BoundedNumericProperty(Property, Generic[N]):
    """Shared contract of integer and decimal properties."""

    domain_min: ClassVar[Any]
    domain_max: ClassVar[Any]

    def __init__(self, name: str, description: str = "", required: bool = False):
        super().__init__(name, description, required)
        self._lower_bound: N = self.domain_min
        self._upper_bound: N = self.domain_max
        self._default_value: N = self._coerce(0, "default_value")
        self._current_value: N = self._default_value

    @classmethod
    @abstractmethod
    def _coerce(cls, value: Any, field: str) -> N: ...

    @property
    def lower_bound(self) -> N:
        return self._lower_bound

    @lower_bound.setter
    def lower_bound(self, value: N) -> None:
        bound = self._coerce(value, "lower_bound")
        if bound > self._current_value or bound > self._default_value:
            raise IncompatibleWithSetValuesError(
                MSG_INCOMPATIBLE_WITH_SET_VALUES, field="lower_bound", value=value
            )
        if bound > self._upper_bound:
            raise BoundsCrossedError(
                MSG_HIGHER_THAN_UPPER_BOUND, field="lower_bound", value=value
            )
        if bound < self.domain_min:
            raise OutOfRangeError(
                MSG_VALUE_OUT_OF_BOUNDS, field="lower_bound", value=value
            )
        self._lower_bound = bound

    @property
    def upper_bound(self) -> N:
        return self._upper_bound

    @upper_bound.setter
    def upper_bound(self, value: N) -> None:
        bound = self._coerce(value, "upper_bound")
        if bound < self._current_value or bound < self._default_value:
            raise IncompatibleWithSetValuesError(
                MSG_INCOMPATIBLE_WITH_SET_VALUES, field="upper_bound", value=value
            )
        if bound < self._lower_bound:
            raise BoundsCrossedError(
                MSG_LOWER_THAN_LOWER_BOUND, field="upper_bound", value=value
            )
        if bound > self.domain_max:
            raise OutOfRangeError(
                MSG_VALUE_OUT_OF_BOUNDS, field="upper_bound", value=value
            )
        self._upper_bound = bound

    @property
    def default_value(self) -> N:
        return self._default_value

    @default_value.setter
    def default_value(self, value: N) -> None:
        self._default_value = self._check_in_bounds(value, "default_value")

    @property
    def current_value(self) -> N:
        return self._current_value

    @current_value.setter
    def current_value(self, value: N) -> None:
        self._current_value = self._check_in_bounds(value, "current_value")

    def _check_in_bounds(self, value: Any, field: str) -> N:
        number = self._coerce(value, field)
        if number < self._lower_bound or number > self._upper_bound:
            raise OutOfRangeError(MSG_VALUE_OUT_OF_BOUNDS, field=field, value=value)
        return number

    def reset_to_default(self) -> None:
        # The default is always within bounds, so this cannot fail
        self._current_value = self._default_value

    def _display_value(self) -> str:
        return str(self._current_value)

    def _json_value(self) -> Any:
        return self._current_value


class IntegerProperty(BoundedNumericProperty[int]):
    """A whole-number property bounded within the signed 32-bit range."""

    kind = "integer"
    domain_min = INTEGER_MIN
    domain_max = INTEGER_MAX

    @classmethod
    def _coerce(cls, value: Any, field: str) -> int:
        return require_int(value, field)


class DecimalProperty(BoundedNumericProperty[float]):
    """A floating-point property; NaN is never an admissible value."""

    kind = "decimal"
    domain_min = DECIMAL_MIN
    domain_max = DECIMAL_MAX

    @classmethod
    def _coerce(cls, value: Any, field: str) -> float:
        return require_number(value, field, MSG_VALUE_OUT_OF_BOUNDS)


class TextProperty(Property):
    """A free-text property whose length is bounded.

    ``min_length``/``max_length`` bound the length of both ``default_text``
    and ``current_text``. Assigning ``None`` to a text stores an empty string.
    """

    kind = "text"

    def __init__(self, name: str, description: str = "", required: bool = False):
        super().__init__(name, description, required)
        self._min_length = 0
        self._max_length = MAX_TEXT_LENGTH
        self._default_text = ""
        self._current_text = ""

    @property
    def min_length(self) -> int:
        return self._min_length

    @min_length.setter
    def min_length(self, value: int) -> None:
        length = require_int(value, "min_length")
        if length > len(self._current_text) or length > len(self._default_text):
            raise IncompatibleWithSetValuesError(
                MSG_INCOMPATIBLE_WITH_SET_VALUES, field="min_length", value=value
            )
        if length > self._max_length:
            raise BoundsCrossedError(
                MSG_HIGHER_THAN_UPPER_BOUND, field="min_length", value=value
            )
        if length < 0:
            raise OutOfRangeError(
                MSG_VALUE_OUT_OF_BOUNDS, field="min_length", value=value
            )
        self._min_length = length

    @property
    def max_length(self) -> int:
        return self._max_length

    @max_length.setter
    def max_length(self, value: int) -> None:
        length = require_int(value, "max_length")
        if length < len(self._current_text) or length < len(self._default_text):
            raise IncompatibleWithSetValuesError(
                MSG_INCOMPATIBLE_WITH_SET_VALUES, field="max_length", value=value
            )
        if length < self._min_length:
            raise BoundsCrossedError(
                MSG_LOWER_THAN_LOWER_BOUND, field="max_length", value=value
            )
        if length > MAX_TEXT_LENGTH:
            raise OutOfRangeError(
                MSG_VALUE_OUT_OF_BOUNDS, field="max_length", value=value
            )
        self._max_length = length

    @property
    def default_text(self) -> str:
        return self._default_text

    @default_text.setter
    def default_text(self, value: str | None) -> None:
        self._default_text = self._check_length(value, "default_text")

    @property
    def current_text(self) -> str:
        return self._current_text

    @current_text.setter
    def current_text(self, value: str | None) -> None:
        self._current_text = self._check_length(value, "current_text")

    def _check_length(self, value: Any, field: str) -> str:
        text = coerce_text(value, field)
        if len(text) < self._min_length or len(text) > self._max_length:
            raise OutOfRangeError(MSG_VALUE_OUT_OF_BOUNDS, field=field, value=value)
        return text

    def reset_to_default(self) -> None:
        self._current_text = self._default_text

    def _display_value(self) -> str:
        return self._current_text

    def _json_value(self) -> Any:
        return self._current_text
