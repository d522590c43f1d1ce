"""recast - Main application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from recast import __version__
from recast.api import meta_router, rss_router
from recast.config import get_settings
from recast.errors import install_error_handlers
from recast.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    setup_logging()
    yield
    # Shutdown


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="recast",
        description="Republish RSS feeds with every item postdated by a fixed delay",
        version=__version__,
        lifespan=lifespan,
    )

    install_error_handlers(app)

    # Include routers
    app.include_router(meta_router)
    app.include_router(rss_router)

    return app


app = create_app()


def main():
    """Entry point for running the application."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
