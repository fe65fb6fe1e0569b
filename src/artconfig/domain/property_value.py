"""A selectable value of a list property."""

from dataclasses import dataclass
from typing import Any

from .validation import coerce_text, validate_identifier


@dataclass(eq=False)
class PropertyValue:
    """One admissible choice within a list property (e.g., a color "red").

    The name identifies the value inside its owning property and cannot be
    changed once the value is created; the description stays editable.
    Equality and hashing are by identity, matching how list properties
    recognise their registered values.
    """

    name: str
    description: str = ""

    def __post_init__(self):
        """Validate value data after initialization."""
        validate_identifier(self.name, "name")

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name" and "name" in self.__dict__:
            raise AttributeError("PropertyValue name is read-only")
        if key == "description":
            value = coerce_text(value, "description")
        super().__setattr__(key, value)
