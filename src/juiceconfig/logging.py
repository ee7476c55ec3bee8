"""
Logging helpers.

juiceconfig only emits structlog events; configuring handlers, renderers and
levels is left to the host application. When the host routes structlog
through the standard library, events land on loggers under "juiceconfig",
which carry a NullHandler so an unconfigured host stays quiet.
"""

import logging
from typing import Any

import structlog

LOGGER_NAME = "juiceconfig"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def bind_context(**kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Bind contextual fields for downstream logs."""

    logger = structlog.get_logger()
    return logger.bind(**kwargs)
