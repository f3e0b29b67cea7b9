"""Logfire setup.

Application code logs through logfire directly::

    with logfire.span("comment_service.get_comments", discussion_id=...):
        logfire.info("Comments retrieved for discussion", returned=len(nodes))

``configure_logfire`` must run before the app module is imported so that
instrumentation registered at import time is exported.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import ObservabilitySettings, Settings
from forum.util.logging import setup_logging

SERVICE_NAME = "forum-api"


def _should_send(observability: ObservabilitySettings) -> bool:
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire export and console output, then plain logging.

    Args:
        settings: Application settings
    """
    send = _should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    setup_logging(settings)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Open a span per HTTP request, without recording headers (auth cookie)."""
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Open a span per SQL statement issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
