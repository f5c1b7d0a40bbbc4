"""Game state models."""

import copy
from dataclasses import dataclass, field
from typing import Optional

from beerball.core.enums import Phase, PlayOutcome, TurnoverReason
from beerball.core.models.field import CUPS_TO_FIRST_DOWN, MIDFIELD
from beerball.core.models.phase_data import (
    PhaseData,
    phase_data_from_dict,
    phase_data_to_dict,
)

TEAM_ONE = 1
TEAM_TWO = -1

QUARTERS = 4
POSSESSIONS_PER_QUARTER = 4


@dataclass
class TeamState:
    """One side of the scoreboard."""

    name: str
    color: str = "#1f77b4"
    score: int = 0

    @property
    def abbreviation(self) -> str:
        """First three letters, upper-cased (e.g. 'HOM')."""
        return self.name[:3].upper()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"name": self.name, "color": self.color, "score": self.score}

    @classmethod
    def from_dict(cls, data: dict) -> "TeamState":
        """Create from dictionary."""
        return cls(
            name=data.get("name", "Team"),
            color=data.get("color", "#1f77b4"),
            score=data.get("score", 0),
        )


@dataclass(frozen=True)
class PlayResult:
    """
    Record of the most recently resolved play.

    Written by the resolution engine only; the display layer turns it
    into prose.

    Attributes:
        team: Sign of the team that ran the play
        phase: Phase in which the play was entered
        begin: Ball position before the play
        end: Ball position after the play (clamped)
        outcome: What happened
        turnover_reason: Set when possession changed hands
        points: Points scored on the play, if any
    """

    team: int
    phase: Phase
    begin: int
    end: int
    outcome: PlayOutcome
    turnover_reason: Optional[TurnoverReason] = None
    points: Optional[int] = None

    @property
    def yards(self) -> int:
        """Net cups gained in the team's attacking direction."""
        return (self.end - self.begin) * self.team

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "team": self.team,
            "phase": self.phase.name,
            "begin": self.begin,
            "end": self.end,
            "outcome": self.outcome.name,
            "turnover_reason": self.turnover_reason.name if self.turnover_reason else None,
            "points": self.points,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlayResult":
        """Create from dictionary."""
        reason = data.get("turnover_reason")
        return cls(
            team=data["team"],
            phase=Phase[data["phase"]],
            begin=data["begin"],
            end=data["end"],
            outcome=PlayOutcome[data["outcome"]],
            turnover_reason=TurnoverReason[reason] if reason else None,
            points=data.get("points"),
        )


@dataclass
class ShootoutState:
    """Overtime field goal shootout bookkeeping."""

    first_team: int
    first_result: Optional[bool] = None  # None until the first kicker of the round has gone
    round: int = 1

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "first_team": self.first_team,
            "first_result": self.first_result,
            "round": self.round,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ShootoutState":
        """Create from dictionary."""
        return cls(
            first_team=data["first_team"],
            first_result=data.get("first_result"),
            round=data.get("round", 1),
        )


@dataclass
class OvertimeState:
    """Overtime bookkeeping; present only once overtime has started."""

    first_offense: Optional[int] = None
    fg_shootout: Optional[ShootoutState] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "first_offense": self.first_offense,
            "fg_shootout": self.fg_shootout.to_dict() if self.fg_shootout else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OvertimeState":
        """Create from dictionary."""
        shootout = data.get("fg_shootout")
        return cls(
            first_offense=data.get("first_offense"),
            fg_shootout=ShootoutState.from_dict(shootout) if shootout else None,
        )


@dataclass
class GameState:
    """
    Complete game state - the single source of truth for a game.

    The state machine never mutates the instance it is handed: it works on
    a copy and returns the result, and the session controller swaps it in.
    """

    team1: TeamState = field(default_factory=lambda: TeamState("Home"))
    team2: TeamState = field(default_factory=lambda: TeamState("Away"))

    quarter: int = 1
    possession: int = 1

    offense_team: int = TEAM_ONE
    ball_position: int = MIDFIELD
    first_down_marker: int = MIDFIELD + CUPS_TO_FIRST_DOWN
    down: int = 1

    phase: Phase = Phase.COIN_TOSS
    phase_data: PhaseData = None
    last_play_result: Optional[PlayResult] = None
    play_count: int = 0

    opening_kickoff_receiver: Optional[int] = None
    overtime: Optional[OvertimeState] = None

    @classmethod
    def new_game(
        cls,
        team1_name: str = "Home",
        team1_color: str = "#1f77b4",
        team2_name: str = "Away",
        team2_color: str = "#d62728",
    ) -> "GameState":
        """Fresh game at the coin toss, ball at midfield."""
        return cls(
            team1=TeamState(team1_name, team1_color),
            team2=TeamState(team2_name, team2_color),
        )

    def team(self, sign: int) -> TeamState:
        """Get a team by its sign."""
        return self.team1 if sign == TEAM_ONE else self.team2

    @property
    def offense(self) -> TeamState:
        return self.team(self.offense_team)

    @property
    def defense(self) -> TeamState:
        return self.team(-self.offense_team)

    @property
    def defense_team(self) -> int:
        return -self.offense_team

    @property
    def is_overtime(self) -> bool:
        return self.overtime is not None

    @property
    def is_game_over(self) -> bool:
        return self.phase == Phase.GAME_OVER

    @property
    def is_tied(self) -> bool:
        return self.team1.score == self.team2.score

    @property
    def leader(self) -> Optional[int]:
        """Sign of the leading team, None when tied."""
        if self.team1.score > self.team2.score:
            return TEAM_ONE
        if self.team2.score > self.team1.score:
            return TEAM_TWO
        return None

    def copy(self) -> "GameState":
        """Create a deep copy of this state."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "team1": self.team1.to_dict(),
            "team2": self.team2.to_dict(),
            "quarter": self.quarter,
            "possession": self.possession,
            "offense_team": self.offense_team,
            "ball_position": self.ball_position,
            "first_down_marker": self.first_down_marker,
            "down": self.down,
            "phase": self.phase.name,
            "phase_data": phase_data_to_dict(self.phase_data),
            "last_play_result": self.last_play_result.to_dict()
            if self.last_play_result
            else None,
            "play_count": self.play_count,
            "opening_kickoff_receiver": self.opening_kickoff_receiver,
            "overtime": self.overtime.to_dict() if self.overtime else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameState":
        """Create from dictionary."""
        last_play = data.get("last_play_result")
        overtime = data.get("overtime")
        return cls(
            team1=TeamState.from_dict(data.get("team1", {})),
            team2=TeamState.from_dict(data.get("team2", {})),
            quarter=data.get("quarter", 1),
            possession=data.get("possession", 1),
            offense_team=data.get("offense_team", TEAM_ONE),
            ball_position=data.get("ball_position", MIDFIELD),
            first_down_marker=data.get("first_down_marker", MIDFIELD + CUPS_TO_FIRST_DOWN),
            down=data.get("down", 1),
            phase=Phase[data.get("phase", "COIN_TOSS")],
            phase_data=phase_data_from_dict(data.get("phase_data")),
            last_play_result=PlayResult.from_dict(last_play) if last_play else None,
            play_count=data.get("play_count", 0),
            opening_kickoff_receiver=data.get("opening_kickoff_receiver"),
            overtime=OvertimeState.from_dict(overtime) if overtime else None,
        )

    def __str__(self) -> str:
        """String representation."""
        period = "OT" if self.is_overtime else f"Q{self.quarter}"
        return (
            f"{self.team1.abbreviation} {self.team1.score} - "
            f"{self.team2.abbreviation} {self.team2.score} ({period}, {self.phase.name})"
        )


def team_sign(value) -> int:
    """
    Normalize a team reference to its sign.

    Accepts the sign itself (1 / -1) or the team number (1 / 2), as an int
    or a numeric string.
    """
    number = int(value)
    if number == TEAM_ONE:
        return TEAM_ONE
    if number in (TEAM_TWO, 2):
        return TEAM_TWO
    raise ValueError(f"Unknown team: {value!r}")
