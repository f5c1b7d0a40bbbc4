"""Save file for the one resumable game.

The save is a single JSON document:

    {"version": 1, "game_id": "...", "state": {...}, "history": [{...}, ...]}

`history` holds serialized snapshots, oldest first, so undo survives a
restart, and `game_id` keeps API clients pointed at the same game. A
file written by a different schema version, or one that can't be read
back, is discarded rather than migrated.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from beerball.core.models.game import GameState
from beerball.core.models.phase_data import InvalidPhaseDataError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
STORAGE_KEY = "gridiron-beerball-game.json"


@dataclass
class SavedGame:
    """A game read back from disk."""

    state: GameState
    history: list[dict] = field(default_factory=list)
    game_id: Optional[str] = None


class GameStore:
    """Reads and writes the save file inside a storage directory."""

    def __init__(self, storage_dir: Path) -> None:
        self.storage_dir = Path(storage_dir)
        self.path = self.storage_dir / STORAGE_KEY

    @property
    def exists(self) -> bool:
        return self.path.exists()

    def save(
        self,
        state: GameState,
        history: Optional[list[dict]] = None,
        game_id: Optional[str] = None,
    ) -> None:
        """Write the game, its undo snapshots and its id."""
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        payload = {
            "version": SCHEMA_VERSION,
            "game_id": game_id,
            "state": state.to_dict(),
            "history": list(history or []),
        }
        with open(self.path, "w") as f:
            json.dump(payload, f, indent=2)
        logger.debug(f"Saved game to {self.path}")

    def load(self) -> Optional[SavedGame]:
        """
        Read the saved game.

        Returns:
            The saved game, or None when there is no usable save. Unusable
            saves are deleted.
        """
        if not self.path.exists():
            return None

        try:
            with open(self.path, "r") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Discarding unreadable save {self.path}: {e}")
            self.clear()
            return None

        version = payload.get("version") if isinstance(payload, dict) else None
        if version != SCHEMA_VERSION:
            logger.warning(
                f"Discarding save {self.path}: version {version!r}, expected {SCHEMA_VERSION}"
            )
            self.clear()
            return None

        try:
            state = GameState.from_dict(payload["state"])
            history = list(payload.get("history") or [])
            for snapshot in history:
                GameState.from_dict(snapshot)
        except (KeyError, TypeError, ValueError, AttributeError, InvalidPhaseDataError) as e:
            logger.warning(f"Discarding malformed save {self.path}: {e!r}")
            self.clear()
            return None

        logger.info(f"Loaded game from {self.path}")
        game_id = payload.get("game_id")
        if game_id is not None and not isinstance(game_id, str):
            game_id = None
        return SavedGame(state=state, history=history, game_id=game_id)

    def clear(self) -> None:
        """Delete the save file if there is one."""
        if self.path.exists():
            self.path.unlink()
