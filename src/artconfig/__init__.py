"""Configurable article definitions: schemas, typed properties and values."""

from .domain import (
    Article,
    Collection,
    ConfigurationState,
    DecimalProperty,
    DomainError,
    ErrorKind,
    IntegerProperty,
    ListProperty,
    Property,
    PropertyValue,
    Schema,
    TextProperty,
)

__version__ = "0.1.0"

__all__ = [
    "Article",
    "Collection",
    "ConfigurationState",
    "DecimalProperty",
    "DomainError",
    "ErrorKind",
    "IntegerProperty",
    "ListProperty",
    "Property",
    "PropertyValue",
    "Schema",
    "TextProperty",
    "__version__",
]
