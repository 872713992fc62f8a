from __future__ import annotations

import logging
import sys

import structlog

from issuegraph.config import Settings


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Route structlog through the stdlib root logger.

    Called once by the host application; the engine itself only asks for loggers.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def configure_logging(settings: Settings | None = None) -> Settings:
    """Apply ``LOG_LEVEL`` and ``LOG_FORMAT`` from settings; returns the settings used."""
    settings = settings or Settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    return settings


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
