"""Game session controller.

Owns the one mutable GameState of a game. Each action is applied through
the state machine, the previous state is kept for undo, events are
emitted for anything that changed, and the game is saved if a store is
attached.
"""

import logging
from collections import deque
from typing import Optional, Union
from uuid import uuid4

from beerball.config import get_config
from beerball.core.enums import Action, Phase, PlayOutcome, TurnoverReason
from beerball.core.models.game import GameState
from beerball.events import (
    EventBus,
    GameEndEvent,
    GameEvent,
    PhaseChangedEvent,
    PlayResolvedEvent,
    QuarterEndEvent,
    ScoringEvent,
    TurnoverEvent,
)
from beerball.game.display import describe_play
from beerball.game.machine import apply, legal_actions
from beerball.storage import GameStore

logger = logging.getLogger(__name__)

SCORING_TYPES = {6: "TD", 3: "FG", 1: "XP"}


def parse_action(action: Union[Action, str]) -> Action:
    """Accept an Action or its name."""
    if isinstance(action, Action):
        return action
    try:
        return Action[str(action).upper()]
    except KeyError:
        raise ValueError(f"Unknown action: {action!r}") from None


class GameSession:
    """
    Controller for a single game.

    Example:
        session = GameSession.new("Home", "Away")
        session.act(Action.COIN_TOSS, {"team": 1})
        session.act("REGULAR_KICKOFF")
        session.undo()
    """

    def __init__(
        self,
        state: Optional[GameState] = None,
        event_bus: Optional[EventBus] = None,
        store: Optional[GameStore] = None,
        history_limit: Optional[int] = None,
        history: Optional[list[dict]] = None,
        game_id: Optional[str] = None,
    ) -> None:
        """
        Initialize a session.

        Args:
            state: Starting state (a fresh game if omitted)
            event_bus: Bus to emit events on (a private bus if omitted)
            store: Save file to write after every change, None to disable
            history_limit: Undo depth (config default if omitted)
            history: Serialized snapshots to seed undo with, oldest first
            game_id: Identifier used in emitted events
        """
        limit = history_limit if history_limit is not None else get_config().history_limit
        self.game_id = game_id or str(uuid4())
        self.state = state or GameState.new_game()
        self.event_bus = event_bus or EventBus()
        self.store = store
        self.history: deque[dict] = deque(history or [], maxlen=limit)

    @classmethod
    def new(
        cls,
        team1: str = "Home",
        team2: str = "Away",
        team1_color: str = "#1f77b4",
        team2_color: str = "#d62728",
        **kwargs,
    ) -> "GameSession":
        """Start a new game at the coin toss."""
        state = GameState.new_game(team1, team1_color, team2, team2_color)
        session = cls(state=state, **kwargs)
        logger.info(f"New game {session.game_id}: {team1} vs {team2}")
        session._save()
        return session

    @classmethod
    def resume(cls, store: GameStore, **kwargs) -> Optional["GameSession"]:
        """Pick up the saved game, or None if there is nothing to resume."""
        saved = store.load()
        if saved is None:
            return None
        kwargs.setdefault("game_id", saved.game_id)
        session = cls(state=saved.state, store=store, history=saved.history, **kwargs)
        logger.info(f"Resumed game {session.game_id} ({session.state})")
        return session

    # =========================================================================
    # Actions
    # =========================================================================

    def legal_actions(self) -> list[Action]:
        return legal_actions(self.state)

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    def act(self, action: Union[Action, str], data: Optional[dict] = None) -> GameState:
        """
        Apply one action and commit the result.

        Raises:
            IllegalActionError: If the action is not valid for the current phase
            ValueError: If the action or its data is malformed
        """
        action = parse_action(action)
        previous = self.state
        transition = apply(previous, action, data)

        if transition is None:
            self.restart()
            return self.state

        self.history.append(previous.to_dict())
        self.state = transition.state
        logger.debug(
            f"{action.name} {data or {}}: {previous.phase.name} -> {self.state.phase.name} "
            f"({self.state})"
        )

        self._emit_events(previous, action)
        self._save()
        return self.state

    def undo(self) -> bool:
        """Step back one action. Returns False when there is nothing to undo."""
        if not self.history:
            return False
        self.state = GameState.from_dict(self.history.pop())
        logger.info(f"Undo in game {self.game_id}, back to {self.state.phase.name}")
        self._save()
        return True

    def restart(self) -> None:
        """New game with the same teams; undo history is dropped."""
        old = self.state
        self.state = GameState.new_game(
            old.team1.name, old.team1.color, old.team2.name, old.team2.color
        )
        self.history.clear()
        logger.info(f"Restarted game {self.game_id}: {old.team1.name} vs {old.team2.name}")
        self._save()

    # =========================================================================
    # Internals
    # =========================================================================

    def _save(self) -> None:
        if self.store is not None and get_config().autosave:
            self.store.save(self.state, list(self.history), self.game_id)

    def _context(self) -> dict:
        return {
            "game_id": self.game_id,
            "quarter": self.state.quarter,
            "team1_score": self.state.team1.score,
            "team2_score": self.state.team2.score,
            "is_overtime": self.state.is_overtime,
        }

    def _emit(self, event: GameEvent) -> None:
        self.event_bus.emit(event)

    def _emit_events(self, previous: GameState, action: Action) -> None:
        state = self.state
        context = self._context()
        new_play = state.play_count != previous.play_count
        result = state.last_play_result if new_play else None

        self._emit(
            PlayResolvedEvent(
                action=action,
                result=result,
                description=describe_play(result, state),
                down=state.down,
                ball_position=state.ball_position,
                first_down_marker=state.first_down_marker,
                offense_team=state.offense_team,
                **context,
            )
        )

        for sign in (1, -1):
            points = state.team(sign).score - previous.team(sign).score
            if points > 0:
                scoring_type = SCORING_TYPES.get(points, "2PT")
                if result is not None and result.outcome is PlayOutcome.SAFETY:
                    scoring_type = "Safety"
                self._emit(
                    ScoringEvent(
                        team=sign,
                        points=points,
                        scoring_type=scoring_type,
                        description=describe_play(result, state),
                        **context,
                    )
                )

        if (
            result is not None
            and result.turnover_reason is not None
            and result.turnover_reason is not TurnoverReason.PUNT
        ):
            self._emit(
                TurnoverEvent(
                    losing_team=previous.offense_team,
                    gaining_team=-previous.offense_team,
                    turnover_type=result.turnover_reason.name,
                    **context,
                )
            )

        game_ended = state.phase == Phase.GAME_OVER and previous.phase != Phase.GAME_OVER

        if state.quarter > previous.quarter:
            self._emit(QuarterEndEvent(quarter_ended=previous.quarter, **context))
        elif game_ended and not previous.is_overtime:
            self._emit(QuarterEndEvent(quarter_ended=state.quarter, **context))

        if state.phase != previous.phase:
            self._emit(
                PhaseChangedEvent(previous_phase=previous.phase, phase=state.phase, **context)
            )

        if game_ended:
            logger.info(f"Game {self.game_id} over: {state}")
            self._emit(
                GameEndEvent(
                    winner=state.leader,
                    final_team1_score=state.team1.score,
                    final_team2_score=state.team2.score,
                    **context,
                )
            )
