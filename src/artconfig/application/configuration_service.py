"""Application layer - configuring articles through their schema."""

from collections.abc import Mapping
from typing import Any, Final

from ..domain.article import Article
from ..domain.constants import MSG_ARTICLE_NOT_CONFIGURABLE, MSG_PROPERTY_NOT_FOUND
from ..domain.exceptions import DomainError, NotFoundError
from ..domain.list_property import ListProperty
from ..domain.properties import BoundedNumericProperty, Property, TextProperty
from ..domain.schema import Schema
from ..logging_config import get_logger

logger: Final = get_logger(__name__)

SUPPORTED_PROPERTIES: Final = (TextProperty, ListProperty, BoundedNumericProperty)


def _read_current(prop: Property) -> Any:
    if isinstance(prop, TextProperty):
        return prop.current_text
    if isinstance(prop, (BoundedNumericProperty, ListProperty)):
        return prop.current_value
    raise TypeError(f"Unsupported property type: {type(prop).__name__}")


def _write_current(prop: Property, value: Any) -> None:
    if isinstance(prop, TextProperty):
        prop.current_text = value
    elif isinstance(prop, ListProperty):
        if value is None:
            prop.clear_current_value()
        else:
            prop.set_current_value(value)
    elif isinstance(prop, BoundedNumericProperty):
        prop.current_value = value
    else:
        raise TypeError(f"Unsupported property type: {type(prop).__name__}")


class ConfigurationService:
    """Application service for article configuration."""

    def attach_schema(self, article: Article, schema: Schema) -> None:
        """Make an article configurable with the given schema."""
        previous = article.schema
        article.set_configurable(schema)
        logger.info(
            "Schema attached",
            article_code=article.code,
            schema_name=schema.name,
            replaced_schema=previous.name if previous is not None else None,
        )

    def detach_schema(self, article: Article) -> None:
        """Make an article non-configurable. The schema is left untouched."""
        previous = article.schema
        article.set_not_configurable()
        logger.info(
            "Schema detached",
            article_code=article.code,
            schema_name=previous.name if previous is not None else None,
        )

    def apply_configuration(
        self, article: Article, selections: Mapping[str, Any]
    ) -> None:
        """Set current values of schema properties by property name.

        List properties take a choice name (or PropertyValue), text properties
        a string, numeric properties a number. Either every selection is
        applied or none is.

        Raises:
            NotFoundError: If the article has no schema or a property is unknown
            DomainError: If a value is rejected by its property
            TypeError: If a selected property is of an unsupported type
        """
        schema = self._require_schema(article)

        targets: list[tuple[Property, Any]] = []
        for name, value in selections.items():
            if name not in schema:
                logger.warning(
                    "Configuration rejected - unknown property",
                    article_code=article.code,
                    property_name=name,
                )
                raise NotFoundError(MSG_PROPERTY_NOT_FOUND, field="name", value=name)
            prop = schema.get_property(name)
            if not isinstance(prop, SUPPORTED_PROPERTIES):
                logger.warning(
                    "Configuration rejected - unsupported property type",
                    article_code=article.code,
                    property_name=name,
                    property_type=type(prop).__name__,
                )
                raise TypeError(f"Unsupported property type: {type(prop).__name__}")
            targets.append((prop, value))

        applied: list[tuple[Property, Any]] = []
        try:
            for prop, value in targets:
                previous = _read_current(prop)
                _write_current(prop, value)
                applied.append((prop, previous))
        except DomainError as e:
            failed_name = prop.name
            # Roll back in reverse order; previous values were valid before
            for done, previous in reversed(applied):
                _write_current(done, previous)
            logger.warning(
                "Configuration rejected - invalid value",
                article_code=article.code,
                property_name=failed_name,
                error_kind=e.kind.value,
                message_key=e.message_key,
            )
            raise

        logger.debug(
            "Configuration applied",
            article_code=article.code,
            properties=[prop.name for prop, _ in targets],
        )

    def reset_configuration(self, article: Article) -> None:
        """Reset every property of the article's schema to its default."""
        schema = self._require_schema(article)
        schema.reset_to_default()
        logger.debug("Configuration reset", article_code=article.code)

    def describe_configuration(self, article: Article) -> str:
        """Current configuration as a JSON object, in sequence order."""
        if article.schema is None:
            return "{}"
        fragments = [prop.render_json_fragment() for prop in article.schema]
        return "{" + ", ".join(fragments) + "}"

    def describe_configuration_text(self, article: Article) -> list[str]:
        """One ``name: value`` line per property, in sequence order."""
        if article.schema is None:
            return []
        return [prop.render_text() for prop in article.schema]

    def _require_schema(self, article: Article) -> Schema:
        schema = article.schema
        if schema is None:
            logger.warning(
                "Configuration rejected - article not configurable",
                article_code=article.code,
            )
            raise NotFoundError(
                MSG_ARTICLE_NOT_CONFIGURABLE, field="schema", value=article.code
            )
        return schema
