import logging

import structlog
from rich.logging import RichHandler

from .config import settings


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the application.

    Args:
        log_level: Override the log level from settings
    """
    level_name = (log_level or settings.effective_log_level).upper()
    level = getattr(logging, level_name, logging.INFO)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Clear any existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Console handler with Rich for better formatting
    console_handler = RichHandler(
        rich_tracebacks=True,
        show_path=settings.debug,
        show_time=False,  # We handle time in formatter
    )
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler for production or when explicitly requested
    if not settings.debug or settings.log_to_file:
        settings.log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(
            settings.log_dir / f"{settings.app_name}.log", encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)

    _configure_structlog(level)

    logger = get_logger(__name__)
    logger.info("Logging configured", level=logging.getLevelName(level))


def _configure_structlog(level: int) -> None:
    """Configure structlog for structured logging through stdlib handlers.

    Level and timestamp come from the stdlib formatter, so the structlog
    chain only renders the event and its key/value pairs.
    """
    if settings.debug:
        # Development: key=value pairs rendered in the Rich console
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        # Production: one JSON object per event
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[renderer],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """Get a logger with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)
