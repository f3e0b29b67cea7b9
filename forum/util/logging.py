"""Standard library logging for libraries that do not go through Logfire."""

import logging
import sys

from forum.config import Settings

# Libraries whose INFO output is request-level noise
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "asyncpg", "httpx")


def setup_logging(settings: Settings) -> None:
    """Route plain ``logging`` output to stdout.

    Args:
        settings: Application settings; ``debug`` lowers the level to DEBUG
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
