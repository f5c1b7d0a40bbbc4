"""Pydantic schemas for game-related models."""

from typing import Optional, Union

from pydantic import BaseModel, Field

from beerball.core.models.game import GameState, PlayResult, TeamState
from beerball.game.display import (
    cup_effects,
    describe_play,
    down_and_distance,
)
from beerball.game.session import GameSession


# === Request schemas ===


class CreateGameRequest(BaseModel):
    """Request to create a new game."""

    team1_name: str = Field("Home", min_length=1, max_length=40)
    team1_color: str = Field("#1f77b4", pattern="^#[0-9a-fA-F]{6}$")
    team2_name: str = Field("Away", min_length=1, max_length=40)
    team2_color: str = Field("#d62728", pattern="^#[0-9a-fA-F]{6}$")


class ActionRequest(BaseModel):
    """One human-entered input."""

    action: str
    data: dict[str, Optional[Union[int, str]]] = Field(default_factory=dict)


# === Response schemas ===


class TeamSchema(BaseModel):
    """One side of the scoreboard."""

    name: str
    abbreviation: str
    color: str
    score: int

    @classmethod
    def from_model(cls, team: TeamState) -> "TeamSchema":
        """Create from TeamState model."""
        return cls(
            name=team.name,
            abbreviation=team.abbreviation,
            color=team.color,
            score=team.score,
        )


class PlayResultSchema(BaseModel):
    """Last play result."""

    team: int
    phase: str
    begin: int
    end: int
    outcome: str
    turnover_reason: Optional[str] = None
    points: Optional[int] = None
    description: str = ""

    @classmethod
    def from_model(cls, result: PlayResult, state: GameState) -> "PlayResultSchema":
        """Create from PlayResult model."""
        return cls(
            team=result.team,
            phase=result.phase.name,
            begin=result.begin,
            end=result.end,
            outcome=result.outcome.name,
            turnover_reason=result.turnover_reason.name if result.turnover_reason else None,
            points=result.points,
            description=describe_play(result, state),
        )


class CupEffectSchema(BaseModel):
    """Label for one cup in the current phase."""

    cup: int
    label: str
    tone: str


class GameStateSchema(BaseModel):
    """Full game state."""

    team1: TeamSchema
    team2: TeamSchema
    quarter: int
    possession: int
    offense_team: int
    ball_position: int
    first_down_marker: int
    down: int
    phase: str
    phase_data: Optional[dict] = None
    last_play: Optional[PlayResultSchema] = None
    is_overtime: bool = False
    is_game_over: bool = False

    # Display helpers
    headline: str = ""
    situation: str = ""
    cup_effects: list[CupEffectSchema] = Field(default_factory=list)

    @classmethod
    def from_model(cls, state: GameState) -> "GameStateSchema":
        """Create from GameState model."""
        data = state.to_dict()
        summary = down_and_distance(state)
        return cls(
            team1=TeamSchema.from_model(state.team1),
            team2=TeamSchema.from_model(state.team2),
            quarter=state.quarter,
            possession=state.possession,
            offense_team=state.offense_team,
            ball_position=state.ball_position,
            first_down_marker=state.first_down_marker,
            down=state.down,
            phase=state.phase.name,
            phase_data=data["phase_data"],
            last_play=PlayResultSchema.from_model(state.last_play_result, state)
            if state.last_play_result
            else None,
            is_overtime=state.is_overtime,
            is_game_over=state.is_game_over,
            headline=summary.headline,
            situation=summary.situation,
            cup_effects=[CupEffectSchema(**effect.to_dict()) for effect in cup_effects(state)],
        )


class GameResponse(BaseModel):
    """Response containing a game and what can be done next."""

    game_id: str
    state: GameStateSchema
    legal_actions: list[str]
    can_undo: bool = False

    @classmethod
    def from_session(cls, session: GameSession) -> "GameResponse":
        return cls(
            game_id=session.game_id,
            state=GameStateSchema.from_model(session.state),
            legal_actions=[action.name for action in session.legal_actions()],
            can_undo=session.can_undo,
        )


class LegalActionsResponse(BaseModel):
    """Actions offered in the current phase."""

    game_id: str
    phase: str
    actions: list[str]
