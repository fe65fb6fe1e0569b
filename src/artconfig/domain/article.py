"""Article and collection entities."""

from enum import StrEnum

from .constants import CLASSIFICATION_SLOTS, MSG_ARGUMENT_IS_NULL, MSG_MUST_BE_NON_NEGATIVE
from .exceptions import OutOfRangeError
from .schema import Schema
from .validation import coerce_text, require_number, require_present, validate_identifier


class ConfigurationState(StrEnum):
    NON_CONFIGURABLE = "non_configurable"
    CONFIGURABLE = "configurable"


class Collection:
    """A collection (product line) to which an article belongs."""

    def __init__(self, collection_id: str, name: str):
        self._collection_id = validate_identifier(collection_id, "collection_id")
        self._name = validate_identifier(name, "name")

    @property
    def collection_id(self) -> str:
        return self._collection_id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = validate_identifier(value, "name")

    def __repr__(self) -> str:
        return f"Collection(collection_id={self._collection_id!r}, name={self._name!r})"


def _non_negative(value: float, field: str) -> float:
    number = require_number(value, field, MSG_MUST_BE_NON_NEGATIVE)
    if number < 0:
        raise OutOfRangeError(MSG_MUST_BE_NON_NEGATIVE, field=field, value=value)
    return number


class Article:
    """A product, configurable when a schema is attached.

    The article is configurable exactly when it holds a schema. Dimensions
    (length, width, height, weight) are never negative.
    """

    def __init__(self, code: str, schema: Schema | None = None):
        self._code = validate_identifier(code, "code")
        self._schema = schema
        self._series = ""
        self._collection: Collection | None = None
        self._classification: tuple[str, ...] = ("",) * CLASSIFICATION_SLOTS
        self._length = 0.0
        self._width = 0.0
        self._height = 0.0
        self._weight = 0.0

    @property
    def code(self) -> str:
        return self._code

    # Configurability

    @property
    def schema(self) -> Schema | None:
        return self._schema

    @property
    def state(self) -> ConfigurationState:
        if self._schema is None:
            return ConfigurationState.NON_CONFIGURABLE
        return ConfigurationState.CONFIGURABLE

    @property
    def configurable(self) -> bool:
        return self._schema is not None

    def is_configurable(self) -> bool:
        return self.configurable

    def set_configurable(self, schema: Schema) -> None:
        """Attach a schema, replacing any previous one."""
        require_present(schema, "schema", MSG_ARGUMENT_IS_NULL)
        self._schema = schema

    def set_not_configurable(self) -> None:
        """Detach the schema. The schema itself is not modified."""
        self._schema = None

    # Descriptive fields

    @property
    def series(self) -> str:
        return self._series

    @series.setter
    def series(self, value: str | None) -> None:
        self._series = coerce_text(value, "series")

    @property
    def collection(self) -> Collection | None:
        return self._collection

    @collection.setter
    def collection(self, value: Collection | None) -> None:
        self._collection = value

    @property
    def classification(self) -> tuple[str, ...]:
        return self._classification

    def add_classification(
        self, c1: str, c2: str = "", c3: str = "", c4: str = "", c5: str = ""
    ) -> None:
        """Store the five classification slots, used only for statistics.

        The first slot is the main classification; the others are optional.
        """
        self._classification = (c1, c2, c3, c4, c5)

    # Dimensions

    @property
    def length(self) -> float:
        return self._length

    @length.setter
    def length(self, value: float) -> None:
        self._length = _non_negative(value, "length")

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = _non_negative(value, "width")

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = _non_negative(value, "height")

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float) -> None:
        self._weight = _non_negative(value, "weight")

    def __repr__(self) -> str:
        return f"Article(code={self._code!r}, state={self.state.value})"
