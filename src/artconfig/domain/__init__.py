"""Pure domain model: articles, schemas, properties and their values."""

from .article import Article, Collection, ConfigurationState
from .exceptions import (
    BoundsCrossedError,
    ConflictError,
    DomainError,
    DuplicateNameError,
    DuplicateSequenceError,
    ErrorKind,
    FormatError,
    IncompatibleWithSetValuesError,
    InvalidArgumentError,
    NotFoundError,
    NullArgumentError,
    OutOfRangeError,
    ValidationError,
)
from .list_property import ListProperty
from .properties import (
    BoundedNumericProperty,
    DecimalProperty,
    IntegerProperty,
    Property,
    TextProperty,
)
from .property_value import PropertyValue
from .schema import Schema

__all__ = [
    "Article",
    "BoundedNumericProperty",
    "BoundsCrossedError",
    "Collection",
    "ConfigurationState",
    "ConflictError",
    "DecimalProperty",
    "DomainError",
    "DuplicateNameError",
    "DuplicateSequenceError",
    "ErrorKind",
    "FormatError",
    "IncompatibleWithSetValuesError",
    "IntegerProperty",
    "InvalidArgumentError",
    "ListProperty",
    "NotFoundError",
    "NullArgumentError",
    "OutOfRangeError",
    "Property",
    "PropertyValue",
    "Schema",
    "TextProperty",
    "ValidationError",
]
