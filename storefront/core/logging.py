import logging
import sys

import structlog

from storefront.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """
    Configure structlog to emit JSON lines (production) or colored
    console output (development), and route stdlib logging (uvicorn,
    sqlalchemy) to the same stream at the same level.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
