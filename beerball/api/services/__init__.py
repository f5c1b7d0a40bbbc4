"""API services."""

from beerball.api.services.session_manager import GameSessionManager, session_manager

__all__ = ["GameSessionManager", "session_manager"]
