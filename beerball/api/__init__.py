"""Beerball API package - FastAPI backend for the game tracker."""

from beerball.api.main import app, create_app

__all__ = ["app", "create_app"]
