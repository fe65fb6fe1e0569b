"""Application layer - use cases over the domain model."""

from .configuration_service import ConfigurationService
from .messages import DEFAULT_CATALOG, render_message

__all__ = ["DEFAULT_CATALOG", "ConfigurationService", "render_message"]
