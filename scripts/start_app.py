#!/usr/bin/env python3
"""Serve the comments API, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Configured before uvicorn imports the app so import errors are traced
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting comments API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "forum.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=settings.environment != "development",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Comments API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
