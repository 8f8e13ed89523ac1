"""Structured logging configuration using structlog.

Production emits one JSON object per line; development gets colored
console output. Standard library loggers (uvicorn, fastapi) are routed
through the same processor chain so every line carries the same context.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from weather_inference import __version__

SERVICE_NAME = "weather-inference-layer"

# Third-party loggers that are too chatty at INFO
_NOISY_LOGGERS = {
    "asyncio": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def add_service_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Stamp service name and package version on every event."""
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", __version__)
    return event_dict


def build_processors(is_production: bool) -> tuple[list[Processor], Processor]:
    """Return (pre-render processors, renderer) for the given environment."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        add_service_context,
    ]

    if is_production:
        processors.append(structlog.processors.format_exc_info)
        return processors, structlog.processors.JSONRenderer()

    return processors, structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(log_level: str = "INFO", environment: str = "development") -> None:
    """Configure structlog and bridge the standard library root logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: "production" selects the JSON renderer, anything else
            selects the console renderer
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    is_production = environment.lower() == "production"
    processors, renderer = build_processors(is_production)

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=processors,
        )
    )
    handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name, noisy_level in _NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(noisy_level)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=logging.getLevelName(level),
        environment=environment,
        renderer="json" if is_production else "console",
    )
