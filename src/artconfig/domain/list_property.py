"""Single-choice property over an ordered set of values."""

from collections.abc import Iterator
from typing import Any

from .constants import MSG_INVALID_ARGUMENT, MSG_PROPERTY_IS_NULL, MSG_VALUE_NOT_FOUND
from .exceptions import InvalidArgumentError, NotFoundError
from .properties import Property
from .property_value import PropertyValue
from .sequenced import SequencedRegistry
from .validation import require_present


class ListProperty(Property):
    """A property whose value is one of its registered ``PropertyValue``s.

    Values are kept in ascending sequence order. Default and current
    selections, when set, always reference a registered value.
    """

    kind = "list"

    def __init__(self, name: str, description: str = "", required: bool = False):
        super().__init__(name, description, required)
        self._values: SequencedRegistry[PropertyValue] = SequencedRegistry(
            lambda value: value.name
        )
        self._default_value: PropertyValue | None = None
        self._current_value: PropertyValue | None = None

    def add_value(self, sequence: int, value: PropertyValue) -> None:
        """Register a selectable value at the given sequence number.

        Raises:
            NullArgumentError: If value is None
            DuplicateSequenceError: If sequence is already used
            DuplicateNameError: If a value with the same name is registered
        """
        require_present(value, "value", MSG_PROPERTY_IS_NULL)
        if not isinstance(value, PropertyValue):
            raise InvalidArgumentError(MSG_INVALID_ARGUMENT, field="value", value=value)
        self._values.add(sequence, value)

    @property
    def values(self) -> list[PropertyValue]:
        return list(self._values)

    def items(self) -> Iterator[tuple[int, PropertyValue]]:
        return self._values.items()

    def get_value(self, name: str) -> PropertyValue:
        value = self._values.find(name)
        if value is None:
            raise NotFoundError(MSG_VALUE_NOT_FOUND, field="name", value=name)
        return value

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    @property
    def current_value(self) -> PropertyValue | None:
        return self._current_value

    @current_value.setter
    def current_value(self, value: PropertyValue | str) -> None:
        self.set_current_value(value)

    @property
    def default_value(self) -> PropertyValue | None:
        return self._default_value

    @default_value.setter
    def default_value(self, value: PropertyValue | str) -> None:
        self.set_default_value(value)

    def set_current_value(self, value: PropertyValue | str) -> None:
        """Select the current value by reference or by name."""
        self._current_value = self._resolve(value, "current_value")

    def set_default_value(self, value: PropertyValue | str) -> None:
        """Select the default value by reference or by name."""
        self._default_value = self._resolve(value, "default_value")

    def clear_current_value(self) -> None:
        self._current_value = None

    def clear_default_value(self) -> None:
        self._default_value = None

    def reset_to_default(self) -> None:
        # No default means no current selection
        self._current_value = self._default_value

    def _resolve(self, value: Any, field: str) -> PropertyValue:
        if isinstance(value, PropertyValue):
            if not self._values.contains_entry(value):
                raise NotFoundError(MSG_VALUE_NOT_FOUND, field=field, value=value.name)
            return value
        if not isinstance(value, str) or not value:
            raise InvalidArgumentError(MSG_INVALID_ARGUMENT, field=field, value=value)
        found = self._values.find(value)
        if found is None:
            raise NotFoundError(MSG_VALUE_NOT_FOUND, field=field, value=value)
        return found

    def _display_value(self) -> str:
        return "" if self._current_value is None else self._current_value.name

    def _json_value(self) -> Any:
        return None if self._current_value is None else self._current_value.name
