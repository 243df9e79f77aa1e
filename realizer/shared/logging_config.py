# realizer/shared/logging_config.py
import logging
import sys
from typing import Optional

import structlog

from realizer.shared.config import LogFormat, settings


def configure_logging(level: Optional[str] = None, log_format: Optional[LogFormat] = None) -> None:
    """
    Configures structlog to emit structured JSON logs (production) or
    colored text logs (development).

    ``level`` / ``log_format`` override the values from settings.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_format = log_format or settings.LOG_FORMAT
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    # 1. Define the chain of processors (Middleware for logs)
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Determine the Output Format
    if log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure Structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
