"""FastAPI application."""

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portal.config import Settings
from portal.interface.api.routes import articles, comments, health
from portal.util.di.container import create_container
from portal.util.observability import instrument_fastapi

LOCAL_FRONTEND = "http://localhost:3000"


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the portal API.

    Logfire is configured by the start script before this runs; tests pass
    their own container.
    """
    settings = Settings()

    app_instance = FastAPI(
        title=f"{settings.site.name} API",
        description="Articles and reader comments for the news portal",
        version="0.1.0",
    )
    instrument_fastapi(app_instance)

    # The session cookie must reach /comments from the frontend origin
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=sorted({settings.site.frontend_url, LOCAL_FRONTEND}),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Accept", "Content-Type", "Origin", "User-Agent"],
        max_age=600,
    )

    setup_dishka(container or create_container(), app_instance)

    for router in (health.router, articles.router, comments.router):
        app_instance.include_router(router)

    return app_instance


app = create_app()
