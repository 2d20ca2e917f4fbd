from fastapi import FastAPI

from catalog.api.router import api_router
from catalog.core.config import get_settings
from catalog.core.logging import configure_logging
from catalog.db.init_db import init_db


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings.log_level)
    init_db()

    application = FastAPI(title=settings.app_name, debug=settings.debug)
    application.include_router(api_router, prefix="/api")

    @application.get("/health", tags=["health"])
    def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()
