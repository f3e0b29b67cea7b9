#!/usr/bin/env python3
"""Upgrade the forum database schema to the latest revision."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parents[1] / "alembic.ini"


def main(revision: str = "head") -> int:
    """Apply migrations up to ``revision``.

    Failures are reported and re-raised so a deployment never starts the
    API against a half-migrated schema.
    """
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise
        logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
