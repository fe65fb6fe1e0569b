"""Shared argument checks used by the domain entities.

Pure domain validation without logging or external dependencies.
"""

import math
from typing import Any

from .constants import MSG_ARGUMENT_IS_NULL, MSG_BLANK_IDENTIFIER, MSG_INVALID_ARGUMENT
from .exceptions import FormatError, InvalidArgumentError, NullArgumentError, OutOfRangeError


def validate_identifier(value: Any, field: str = "name") -> str:
    """Validate a required identifier (name, code, id).

    Args:
        value: The identifier to validate
        field: Name of the field being validated (for error context)

    Returns:
        The identifier unchanged

    Raises:
        FormatError: If the identifier is missing, not a string, or blank
    """
    if not isinstance(value, str) or not value.strip():
        raise FormatError(MSG_BLANK_IDENTIFIER, field=field, value=value)
    return value


def require_present(value: Any, field: str, message_key: str = MSG_ARGUMENT_IS_NULL) -> None:
    """Raise NullArgumentError if a required reference is absent."""
    if value is None:
        raise NullArgumentError(message_key, field=field)


def require_int(value: Any, field: str) -> int:
    """Ensure value is a plain integer (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(MSG_INVALID_ARGUMENT, field=field, value=value)
    return value


def require_number(value: Any, field: str, message_key: str) -> float:
    """Convert an int/float to float, rejecting other types and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(MSG_INVALID_ARGUMENT, field=field, value=value)
    try:
        number = float(value)
    except OverflowError as e:
        raise OutOfRangeError(message_key, field=field, value=value) from e
    if math.isnan(number):
        raise OutOfRangeError(message_key, field=field, value=value)
    return number


def coerce_text(value: Any, field: str) -> str:
    """Treat an absent string as empty text."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidArgumentError(MSG_INVALID_ARGUMENT, field=field, value=value)
    return value
