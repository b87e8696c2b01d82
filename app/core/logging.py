"""Structured logging configuration.

Configures the root logger with a structured format including timestamp,
level, and module name.  The log level is controlled by ``settings.LOG_LEVEL``.
"""

import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure structured logging for the application.

    Sets the root logger level from ``level`` (falling back to
    ``settings.LOG_LEVEL``) and installs a single ``StreamHandler`` writing
    to *stdout*.
    """
    name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, name, logging.INFO)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    # Replace rather than stack handlers on repeated calls
    root.handlers.clear()
    root.addHandler(handler)

    for noisy in ("httpx", "httpcore", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
