"""FastAPI application for the beerball game tracker."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from beerball import __version__
from beerball.api.routers import games_router
from beerball.api.services.session_manager import session_manager
from beerball.config import get_config
from beerball.storage import GameStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    config = get_config()
    logger.info(f"Beerball API starting up, saving to {config.storage_dir}")
    session_manager.configure(GameStore(config.storage_dir) if config.autosave else None)
    yield
    # Shutdown; the save file stays behind for the next start
    logger.info("Beerball API shutting down...")
    session_manager.clear()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Beerball API",
        description="Gridiron beerball game tracker",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(games_router, prefix="/api/v1")

    @app.get("/")
    async def root() -> dict:
        """Root endpoint - API info."""
        return {
            "name": "Beerball API",
            "version": __version__,
            "description": "Gridiron beerball game tracker",
            "docs": "/docs",
        }

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "active_games": len(session_manager.active_sessions),
        }

    return app


# Create app instance
app = create_app()


def run_api(host: str = "127.0.0.1", port: int = 8000, log_level: str = "info") -> None:
    """Run the API server."""
    uvicorn.run(app, host=host, port=port, log_level=log_level)
