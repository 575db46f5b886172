"""FastAPI application for Track Studio."""

import logging
import sys

from fastapi import FastAPI

from track_studio.api import options, routes, tracks
from track_studio.config import settings

# Configure logging to stdout with proper format
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
    force=True,  # Override any existing configuration
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Track Studio",
        description="GPX import, route metrics and synthetic activity generation",
        version="0.1.0",
    )

    # Include API routers
    app.include_router(tracks.router, prefix="/api", tags=["gpx"])
    app.include_router(routes.router, prefix="/api", tags=["route"])
    app.include_router(options.router, prefix="/api", tags=["options"])

    @app.get("/health")
    async def health():
        """Liveness probe."""
        return {"status": "ok"}

    return app


# Create app instance
app = create_app()
