"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings
from forum.interface.api.routes import comments, health
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this; scripts/start_app.py
    does so in production.

    Args:
        container: DI container to use; the production container when None
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Forum Comments API",
        description="Read API for threaded discussion comments",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Comment reads are credentialed (auth cookie), so origins are explicit
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "Cache-Control"],
        max_age=settings.cors.max_age,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)

    return app_instance


# App instance for uvicorn
app = create_app()
