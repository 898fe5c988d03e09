"""Custom log handlers."""
import logging
import sys

import structlog

from struct2schema.settings import LOG_DIR, LOG_LEVEL, LOG_TO_FILE

LOGGER_NAME = "struct2schema"


def setup_file_logging():
    """Setup file logging."""
    LOG_DIR.mkdir(exist_ok=True)
    handler = logging.FileHandler(LOG_DIR / "struct2schema.log")
    return handler


def configure_logging(level: str = LOG_LEVEL, log_to_file: bool = LOG_TO_FILE):
    """
    Route structlog through stdlib logging.

    Log lines go to stderr (and optionally the log file) so stdout only
    carries generated DDL.
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_to_file:
        handlers.append(setup_file_logging())

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
