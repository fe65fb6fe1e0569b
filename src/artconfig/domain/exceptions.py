"""Domain-specific exceptions.

Every error carries a stable ``kind`` and ``message_key``. The exception text
is a technical description for logs; user-facing text comes from the message
catalog in the application layer.
"""

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    """Stable error codes surfaced by the domain."""

    NULL_ARGUMENT = "NullArgument"
    INVALID_ARGUMENT = "InvalidArgument"
    DUPLICATE_SEQUENCE = "DuplicateSequence"
    DUPLICATE_NAME = "DuplicateName"
    NOT_FOUND = "NotFound"
    OUT_OF_RANGE = "OutOfRange"
    BOUNDS_CROSSED = "BoundsCrossed"
    INCOMPATIBLE_WITH_SET_VALUES = "IncompatibleWithSetValues"
    FORMAT_ERROR = "FormatError"


class DomainError(Exception):
    """Base exception for domain errors."""

    kind: ErrorKind

    def __init__(
        self,
        message_key: str,
        *,
        field: str | None = None,
        value: Any = None,
        detail: str | None = None,
    ):
        self.message_key = message_key
        self.field = field
        self.value = value
        super().__init__(detail or self._describe())

    def _describe(self) -> str:
        parts = [f"{self.kind.value}: {self.message_key}"]
        if self.field is not None:
            parts.append(f"field={self.field}")
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        return " ".join(parts)


class ValidationError(DomainError):
    """Raised when an argument fails domain validation."""

    pass


class ConflictError(DomainError):
    """Raised when an entry collides with one already registered."""

    pass


class NullArgumentError(ValidationError):
    kind = ErrorKind.NULL_ARGUMENT


class InvalidArgumentError(ValidationError):
    kind = ErrorKind.INVALID_ARGUMENT


class OutOfRangeError(ValidationError):
    kind = ErrorKind.OUT_OF_RANGE


class BoundsCrossedError(ValidationError):
    kind = ErrorKind.BOUNDS_CROSSED


class IncompatibleWithSetValuesError(ValidationError):
    kind = ErrorKind.INCOMPATIBLE_WITH_SET_VALUES


class FormatError(ValidationError):
    kind = ErrorKind.FORMAT_ERROR


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND


class DuplicateSequenceError(ConflictError):
    kind = ErrorKind.DUPLICATE_SEQUENCE


class DuplicateNameError(ConflictError):
    kind = ErrorKind.DUPLICATE_NAME
