"""Core game models."""

from beerball.core.models.game import (
    TEAM_ONE,
    TEAM_TWO,
    GameState,
    OvertimeState,
    PlayResult,
    ShootoutState,
    TeamState,
    team_sign,
)
from beerball.core.models.phase_data import (
    IncompletePassData,
    InvalidPhaseDataError,
    KickData,
    PhaseData,
    PuntData,
    RunData,
)

__all__ = [
    "GameState",
    "IncompletePassData",
    "InvalidPhaseDataError",
    "KickData",
    "OvertimeState",
    "PhaseData",
    "PlayResult",
    "PuntData",
    "RunData",
    "ShootoutState",
    "TEAM_ONE",
    "TEAM_TWO",
    "TeamState",
    "team_sign",
]
