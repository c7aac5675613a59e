"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mediacapture import __version__
from mediacapture.api.dependencies import Services
from mediacapture.api.errors import register_error_handlers
from mediacapture.api.routes import router as uploads_router
from mediacapture.database.connection import close_pool
from mediacapture.logging.logger import Log


def create_app(services: Services) -> FastAPI:
    """Build the HTTP application around already-wired services."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        Log.info(f"Media capture API starting ({services.settings.app_env})")
        yield
        services.worker.shutdown(wait=True)
        close_pool()
        Log.info("Media capture API stopped")

    app = FastAPI(
        title="Media Capture API",
        description="Upload images, audio and documents for AI analysis and export",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.services = services
    register_error_handlers(app)
    app.include_router(uploads_router, prefix="/api/uploads", tags=["Uploads"])

    @app.get("/")
    def root() -> dict[str, str]:
        return {"name": "Media Capture API", "version": __version__, "status": "running"}

    return app
