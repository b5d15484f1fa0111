"""Standard library logging for third-party packages.

Portal code logs through Logfire; uvicorn, SQLAlchemy and asyncpg still
use ``logging`` and are routed to stdout here.
"""

import logging
import sys

from portal.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Chatty even at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "asyncpg")


def level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route ``logging`` records to stdout at the level of the environment."""
    level = level_for(settings)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).debug(
        "stdlib logging at %s", logging.getLevelName(level)
    )
