"""Phase State Machine - validated game phase transitions.

Every human input is an `(action, data)` pair applied to the current
phase. The dispatch table below maps each legal `(Phase, Action)` pair to
exactly one rule handler; the table is checked against `PHASE_ACTIONS`
when this module is imported, so a declared pair without a handler (or a
handler for an undeclared pair) fails immediately.

Game Lifecycle:
    COIN_TOSS → KICKOFF_CHOICE → KICKOFF | ONSIDE_KICK → KICKOFF_RETURN
        → NORMAL_PLAY

    From NORMAL_PLAY:
        → RUN_PLAY (run / QB sneak)
        → THROW_PLAY → INCOMPLETE_DEFENSE_SHOT (on incompletions)
        → PUNT → PUNT_RETURN
        → FIELD_GOAL_ATTEMPT
        → NORMAL_PLAY (offsides)

    Touchdowns go through TOUCHDOWN_CONVERSION → EXTRA_POINT |
    TWO_POINT_CONVERSION, then back to KICKOFF_CHOICE.

    End of regulation → GAME_OVER, and when tied → OVERTIME_START →
    NORMAL_PLAY possessions → OVERTIME_FIELD_GOAL → GAME_OVER.
"""

from typing import Callable, Optional

from beerball.core.enums import PHASE_ACTIONS, Action, Phase
from beerball.core.models.field import FIELD_MAX, FIELD_MIN
from beerball.core.models.game import GameState
from beerball.game import overtime, penalties, plays, special_teams
from beerball.game.resolution import Transition

Handler = Callable[[GameState, dict], Transition]


class IllegalActionError(Exception):
    """Raised when an action is not valid for the current phase."""

    def __init__(self, phase: Phase, action: Action):
        self.phase = phase
        self.action = action
        super().__init__(f"{action.name} is not allowed during {phase.name}")


_HANDLERS: dict[tuple[Phase, Action], Handler] = {
    # Coin toss and kickoffs
    (Phase.COIN_TOSS, Action.COIN_TOSS): special_teams.coin_toss,
    (Phase.KICKOFF_CHOICE, Action.REGULAR_KICKOFF): special_teams.regular_kickoff,
    (Phase.KICKOFF_CHOICE, Action.ONSIDE_KICK): special_teams.onside_kick,
    (Phase.KICKOFF, Action.KICKOFF_HIT): special_teams.kickoff_hit,
    (Phase.KICKOFF, Action.KICKOFF_MISS): special_teams.kickoff_miss,
    (Phase.ONSIDE_KICK, Action.ONSIDE_HIT): special_teams.onside_hit,
    (Phase.ONSIDE_KICK, Action.ONSIDE_MISS): special_teams.onside_miss,
    (Phase.KICKOFF_RETURN, Action.RETURN_HIT): special_teams.return_hit,
    (Phase.KICKOFF_RETURN, Action.RETURN_MISS): special_teams.return_miss,
    # Scrimmage
    (Phase.NORMAL_PLAY, Action.RUN): plays.run,
    (Phase.NORMAL_PLAY, Action.QB_SNEAK): plays.qb_sneak,
    (Phase.NORMAL_PLAY, Action.PASS): plays.start_pass,
    (Phase.NORMAL_PLAY, Action.PUNT): special_teams.punt,
    (Phase.NORMAL_PLAY, Action.FIELD_GOAL): special_teams.field_goal,
    (Phase.NORMAL_PLAY, Action.OFFSIDES): penalties.offsides,
    (Phase.RUN_PLAY, Action.RUN_RESULT): plays.run_result,
    (Phase.THROW_PLAY, Action.THROW_HIT): plays.throw_hit,
    (Phase.THROW_PLAY, Action.THROW_MISS): plays.throw_miss,
    (Phase.INCOMPLETE_DEFENSE_SHOT, Action.DEFENSE_HIT): plays.defense_hit,
    (Phase.INCOMPLETE_DEFENSE_SHOT, Action.DEFENSE_MISS): plays.defense_miss,
    # Punts and field goals
    (Phase.PUNT, Action.PUNT_HIT): special_teams.punt_hit,
    (Phase.PUNT, Action.PUNT_MISS): special_teams.punt_miss,
    (Phase.PUNT_RETURN, Action.PUNT_RETURN_HIT): special_teams.punt_return_hit,
    (Phase.PUNT_RETURN, Action.PUNT_RETURN_MISS): special_teams.punt_return_miss,
    (Phase.FIELD_GOAL_ATTEMPT, Action.FIELD_GOAL_MAKE): special_teams.field_goal_make,
    (Phase.FIELD_GOAL_ATTEMPT, Action.FIELD_GOAL_MISS): special_teams.field_goal_miss,
    # Conversions
    (Phase.TOUCHDOWN_CONVERSION, Action.CHOOSE_EXTRA_POINT): special_teams.choose_extra_point,
    (Phase.TOUCHDOWN_CONVERSION, Action.CHOOSE_TWO_POINT): special_teams.choose_two_point,
    (Phase.EXTRA_POINT, Action.EXTRA_POINT_MAKE): special_teams.extra_point_make,
    (Phase.EXTRA_POINT, Action.EXTRA_POINT_MISS): special_teams.extra_point_miss,
    (Phase.TWO_POINT_CONVERSION, Action.TWO_POINT_MAKE): special_teams.two_point_make,
    (Phase.TWO_POINT_CONVERSION, Action.TWO_POINT_MISS): special_teams.two_point_miss,
    # Overtime
    (Phase.GAME_OVER, Action.START_OVERTIME): overtime.start_overtime,
    (Phase.OVERTIME_START, Action.OVERTIME_FIRST): overtime.overtime_first,
    (Phase.OVERTIME_FIELD_GOAL, Action.OT_FIELD_GOAL_MAKE): overtime.overtime_field_goal_make,
    (Phase.OVERTIME_FIELD_GOAL, Action.OT_FIELD_GOAL_MISS): overtime.overtime_field_goal_miss,
}

# Actions that are declared for a phase but only offered in some states
_GUARDS: dict[Action, Callable[[GameState], bool]] = {
    Action.START_OVERTIME: lambda state: state.is_tied,
}

# Data keys each action needs
REQUIRED_DATA: dict[Action, tuple[str, ...]] = {
    Action.COIN_TOSS: ("team",),
    Action.KICKOFF_HIT: ("cup",),
    Action.ONSIDE_HIT: ("cup",),
    Action.RETURN_HIT: ("cup",),
    Action.RUN: ("players",),
    Action.OFFSIDES: ("team",),
    Action.RUN_RESULT: ("cups",),
    Action.THROW_HIT: ("cup",),
    Action.DEFENSE_HIT: ("cup",),
    Action.PUNT_HIT: ("cup",),
    Action.PUNT_RETURN_HIT: ("cup",),
    Action.OVERTIME_FIRST: ("team",),
}

_INT_KEYS = ("cup", "called", "players", "cups", "team")
_CUP_KEYS = ("cup", "called")


def _check_handlers() -> None:
    declared = {
        (phase, action)
        for phase, actions in PHASE_ACTIONS.items()
        for action in actions
        if action is not Action.NEW_GAME
    }
    missing = declared - set(_HANDLERS)
    undeclared = set(_HANDLERS) - declared
    if missing or undeclared:
        raise RuntimeError(
            f"Dispatch table out of sync: missing={sorted(f'{p.name}/{a.name}' for p, a in missing)}, "
            f"undeclared={sorted(f'{p.name}/{a.name}' for p, a in undeclared)}"
        )


_check_handlers()


def coerce_data(action: Action, data: Optional[dict]) -> dict:
    """
    Normalize the data that came with an action.

    Numeric values may arrive as strings; empty values are dropped.

    Raises:
        ValueError: If a required key is missing or a cup is off the field
    """
    coerced = {}
    for key, value in (data or {}).items():
        if value is None or value == "":
            continue
        coerced[key] = int(value) if key in _INT_KEYS else value

    for key in REQUIRED_DATA.get(action, ()):
        if key not in coerced:
            raise ValueError(f"{action.name} requires '{key}'")

    for key in _CUP_KEYS:
        if key in coerced and not FIELD_MIN <= coerced[key] <= FIELD_MAX:
            raise ValueError(f"Cup {coerced[key]} is off the field")

    return coerced


def legal_actions(state: GameState) -> list[Action]:
    """Actions offered in the current phase."""
    return [
        action
        for action in PHASE_ACTIONS[state.phase]
        if _GUARDS.get(action, lambda _: True)(state)
    ]


def is_legal(state: GameState, action: Action) -> bool:
    return action in legal_actions(state)


def apply(state: GameState, action: Action, data: Optional[dict] = None) -> Optional[Transition]:
    """
    Apply one action to the game.

    The given state is never modified; the returned transition carries a
    new state.

    Args:
        state: Current game state
        action: Action entered by the players
        data: Action payload (cup, players, cups, team, called)

    Returns:
        Transition into the next phase, or None for NEW_GAME, which the
        caller handles by starting over

    Raises:
        IllegalActionError: If the action is not valid for the current phase
        ValueError: If the action data is missing or malformed
    """
    if not is_legal(state, action):
        raise IllegalActionError(state.phase, action)

    if action is Action.NEW_GAME:
        return None

    handler = _HANDLERS[(state.phase, action)]
    return handler(state.copy(), coerce_data(action, data))
