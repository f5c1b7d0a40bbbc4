"""Event types emitted by a game session."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from beerball.core.enums import Action, Phase
    from beerball.core.models.game import PlayResult


@dataclass
class GameEvent:
    """Base class for all game events."""

    timestamp: datetime = field(default_factory=datetime.now)
    game_id: str = None

    # Game context at time of event
    quarter: int = 1
    team1_score: int = 0
    team2_score: int = 0
    is_overtime: bool = False


@dataclass
class PlayResolvedEvent(GameEvent):
    """Fired after every action that changed the game."""

    action: "Action" = None
    result: Optional["PlayResult"] = None
    description: str = ""

    # Situation after the play
    down: int = 1
    ball_position: int = 0
    first_down_marker: int = 3
    offense_team: int = 1


@dataclass
class PhaseChangedEvent(GameEvent):
    """Fired when the game moves into a different phase."""

    previous_phase: "Phase" = None
    phase: "Phase" = None


@dataclass
class ScoringEvent(GameEvent):
    """Fired when points are scored."""

    team: int = 0
    points: int = 0
    scoring_type: str = ""  # "TD", "FG", "Safety", "XP", "2PT"
    description: str = ""


@dataclass
class TurnoverEvent(GameEvent):
    """Fired on turnovers."""

    losing_team: int = 0
    gaining_team: int = 0
    turnover_type: str = ""  # "INTERCEPTION", "FUMBLE", "DOWNS", ...


@dataclass
class QuarterEndEvent(GameEvent):
    """Fired at end of a quarter."""

    quarter_ended: int = 1


@dataclass
class GameEndEvent(GameEvent):
    """Fired when game ends."""

    winner: Optional[int] = None  # None if tie
    final_team1_score: int = 0
    final_team2_score: int = 0
