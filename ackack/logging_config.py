import logging
import os
from logging import getLevelName

import structlog

LOG_LEVEL_ENV = "ACKACK_LOG_LEVEL"


def resolve_log_level(log_level=None) -> int:
    """Numeric level for a level name; unknown names fall back to WARNING"""
    level = getLevelName((log_level or os.getenv(LOG_LEVEL_ENV) or "WARNING").upper())
    if not isinstance(level, int):
        return logging.WARNING
    return level


def configure_structlog(log_level=None):
    """Configure structlog if it has not been configured by the user"""
    if not structlog.is_configured():
        structlog.configure(
            processors=[
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.JSONRenderer()
            ],
            wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level(log_level))
        )
