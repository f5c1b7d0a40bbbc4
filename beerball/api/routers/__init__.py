"""API routers."""

from beerball.api.routers.games import router as games_router

__all__ = ["games_router"]
