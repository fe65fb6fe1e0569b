"""Schema: the ordered set of properties of a configurable article."""

from collections.abc import Iterator

from .constants import MSG_INVALID_ARGUMENT, MSG_PROPERTY_IS_NULL, MSG_PROPERTY_NOT_FOUND
from .exceptions import InvalidArgumentError, NotFoundError
from .properties import Property
from .sequenced import SequencedRegistry
from .validation import require_present, validate_identifier


class Schema:
    """A named, sequence-ordered collection of properties.

    A schema is shared: several articles may reference the same instance,
    and detaching it from an article leaves it untouched.
    """

    def __init__(self, name: str):
        self._name = validate_identifier(name, "name")
        self._properties: SequencedRegistry[Property] = SequencedRegistry(
            lambda prop: prop.name
        )

    @property
    def name(self) -> str:
        return self._name

    def add_property(self, sequence: int, property: Property) -> None:
        """Add a property at the given sequence number.

        Raises:
            NullArgumentError: If property is None
            DuplicateSequenceError: If sequence is already used
            DuplicateNameError: If a property with the same name exists
        """
        require_present(property, "property", MSG_PROPERTY_IS_NULL)
        if not isinstance(property, Property):
            raise InvalidArgumentError(
                MSG_INVALID_ARGUMENT, field="property", value=property
            )
        self._properties.add(sequence, property)

    @property
    def properties(self) -> list[Property]:
        return list(self._properties)

    def items(self) -> Iterator[tuple[int, Property]]:
        return self._properties.items()

    def get_property(self, name: str) -> Property:
        prop = self._properties.find(name)
        if prop is None:
            raise NotFoundError(MSG_PROPERTY_NOT_FOUND, field="name", value=name)
        return prop

    def reset_to_default(self) -> None:
        """Reset every property to its default value."""
        for prop in self._properties:
            prop.reset_to_default()

    def __iter__(self) -> Iterator[Property]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __repr__(self) -> str:
        return f"Schema(name={self._name!r}, properties={len(self)})"
