"""In-process registry of game sessions served by the API."""

import logging
from typing import Optional

from beerball.events import GameEvent
from beerball.game.session import GameSession
from beerball.storage import GameStore

logger = logging.getLogger(__name__)


class GameSessionManager:
    """
    Keeps the active game sessions by id.

    Only one game is resumable at a time: when a store is configured, the
    most recently created game owns the save file.
    """

    def __init__(self, store: Optional[GameStore] = None) -> None:
        self._sessions: dict[str, GameSession] = {}
        self.store = store

    @property
    def active_sessions(self) -> list[str]:
        return list(self._sessions)

    def configure(self, store: Optional[GameStore]) -> None:
        """Attach the save file and pick up any game saved in it."""
        self.store = store
        if store is None:
            return
        session = GameSession.resume(store)
        if session is not None:
            self._register(session)

    def create_session(
        self,
        team1: str = "Home",
        team2: str = "Away",
        team1_color: str = "#1f77b4",
        team2_color: str = "#d62728",
    ) -> GameSession:
        """Start a new game and register it."""
        for session in self._sessions.values():
            session.store = None

        session = GameSession.new(
            team1,
            team2,
            team1_color=team1_color,
            team2_color=team2_color,
            store=self.store,
        )
        self._register(session)
        logger.info(f"Registered game {session.game_id} ({len(self._sessions)} active)")
        return session

    def _register(self, session: GameSession) -> None:
        session.event_bus.subscribe_all(_log_event)
        self._sessions[session.game_id] = session

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self._sessions.get(game_id)

    def remove_session(self, game_id: str) -> None:
        session = self._sessions.pop(game_id, None)
        if session is not None and session.store is not None:
            session.store.clear()
        logger.info(f"Removed game {game_id}")

    def clear(self) -> None:
        """Forget every session without touching the save file."""
        self._sessions.clear()


def _log_event(event: GameEvent) -> None:
    logger.debug(
        f"Game {event.game_id}: {type(event).__name__} "
        f"(Q{event.quarter}, {event.team1_score}-{event.team2_score})"
    )


# Global session manager instance
session_manager = GameSessionManager()
