"""Shared pytest fixtures for beerball tests."""

import pytest
from fastapi.testclient import TestClient

from beerball.api.main import app
from beerball.api.services.session_manager import session_manager
from beerball.config import BeerballConfig, set_config
from beerball.core.enums import Phase
from beerball.core.models.field import CUPS_TO_FIRST_DOWN, clamp_marker
from beerball.core.models.game import GameState, TeamState
from beerball.game.session import GameSession
from beerball.storage import GameStore


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture(autouse=True)
def test_config(tmp_path) -> BeerballConfig:
    """Point every test at a throwaway storage directory."""
    config = BeerballConfig(
        storage_dir=tmp_path / "saves",
        autosave=True,
        history_limit=20,
        host="127.0.0.1",
        port=8000,
        log_level="INFO",
    )
    set_config(config)
    yield config
    set_config(None)


# =============================================================================
# State Fixtures
# =============================================================================


@pytest.fixture
def new_game() -> GameState:
    """Fresh game at the coin toss."""
    return GameState.new_game("Home", "#1f77b4", "Away", "#d62728")


@pytest.fixture
def state_at():
    """
    Factory for a scrimmage state.

    Usage: state_at(ball=5, offense=1, down=2, marker=None, phase=...)
    The marker defaults to three cups ahead of the ball.
    """

    def _make(
        ball: int = 0,
        offense: int = 1,
        down: int = 1,
        marker=None,
        phase: Phase = Phase.NORMAL_PLAY,
        quarter: int = 1,
        possession: int = 1,
        scores=(0, 0),
    ) -> GameState:
        if marker is None:
            marker = clamp_marker(ball + CUPS_TO_FIRST_DOWN * offense)
        return GameState(
            team1=TeamState("Home", score=scores[0]),
            team2=TeamState("Away", "#d62728", score=scores[1]),
            quarter=quarter,
            possession=possession,
            offense_team=offense,
            ball_position=ball,
            first_down_marker=marker,
            down=down,
            phase=phase,
            opening_kickoff_receiver=1,
        )

    return _make


# =============================================================================
# Session Fixtures
# =============================================================================


@pytest.fixture
def store(test_config) -> GameStore:
    return GameStore(test_config.storage_dir)


@pytest.fixture
def session() -> GameSession:
    """Session without a save file."""
    return GameSession.new("Home", "Away")


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Create test client."""
    session_manager.clear()
    session_manager.store = None
    yield TestClient(app)
    session_manager.clear()
