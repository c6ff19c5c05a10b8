"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from photo_share.api.diagnostics import router as diagnostics_router
from photo_share.api.errors import register_error_handlers
from photo_share.api.photos import router as photos_router
from photo_share.api.static import PublicStaticFiles
from photo_share.api.users import router as users_router
from photo_share.app_logging import configure_logging
from photo_share.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    static_root = container.settings.static_root.resolve()

    app = FastAPI(title="Photo Share API")
    app.state.container = container

    register_error_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    async def index() -> str:
        """Plain-text status line for checking the server is up."""
        return f"Simple web server of files from {static_root}"

    app.include_router(diagnostics_router)
    app.include_router(users_router)
    app.include_router(photos_router)

    # Registered last so API routes take precedence.
    app.mount("/", PublicStaticFiles(directory=static_root), name="static")
    logger.info("Serving static files from %s", static_root)
    return app
