"""Default message catalog for domain errors.

The domain raises errors carrying a stable message key; this module turns
them into readable text. Hosts that need another language pass their own
catalog mapping keys to templates.
"""

from collections.abc import Mapping
from typing import Final

from ..domain import constants
from ..domain.exceptions import DomainError

DEFAULT_CATALOG: Final[Mapping[str, str]] = {
    constants.MSG_PROPERTY_IS_NULL: "The {field} to add is missing.",
    constants.MSG_ARGUMENT_IS_NULL: "A value for {field} is required.",
    constants.MSG_INVALID_ARGUMENT: "{value} is not a valid {field}.",
    constants.MSG_DUPLICATED_SEQUENCE: "Sequence {value} is already used.",
    constants.MSG_DUPLICATED_NAME: "The name {value} is already used.",
    constants.MSG_VALUE_NOT_FOUND: "No value named {value} exists.",
    constants.MSG_PROPERTY_NOT_FOUND: "No property named {value} exists.",
    constants.MSG_ARTICLE_NOT_CONFIGURABLE: "Article {value} is not configurable.",
    constants.MSG_VALUE_OUT_OF_BOUNDS: "{value} is outside the allowed range of {field}.",
    constants.MSG_HIGHER_THAN_UPPER_BOUND: "{value} is higher than the upper bound.",
    constants.MSG_LOWER_THAN_LOWER_BOUND: "{value} is lower than the lower bound.",
    constants.MSG_INCOMPATIBLE_WITH_SET_VALUES: (
        "{value} is incompatible with the default or current value."
    ),
    constants.MSG_MUST_BE_NON_NEGATIVE: "{field} must be zero or greater.",
    constants.MSG_BLANK_IDENTIFIER: "{field} cannot be empty.",
}


def render_message(error: DomainError, catalog: Mapping[str, str] | None = None) -> str:
    """Render a user-facing message for a domain error.

    Args:
        error: The error to describe
        catalog: Optional templates overriding the default catalog

    Returns:
        The formatted message, or the error kind if no template is known
    """
    template = None
    if catalog is not None:
        template = catalog.get(error.message_key)
    if template is None:
        template = DEFAULT_CATALOG.get(error.message_key)
    if template is None:
        return error.kind.value

    field = error.field or "value"
    value = "" if error.value is None else repr(error.value)
    return template.format(field=field, value=value)
