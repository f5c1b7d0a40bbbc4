"""Scrimmage play rules: runs, passes and the defense shot on incompletions."""

from dataclasses import dataclass
from typing import Optional

from beerball.core.enums import Phase, PlayMode, PlayOutcome, TurnoverReason
from beerball.core.models.field import relative_position, yards_to_touchdown
from beerball.core.models.game import GameState
from beerball.core.models.phase_data import IncompletePassData, RunData, expect
from beerball.game.resolution import (
    PlayDetail,
    Transition,
    enter,
    resolve_play,
)

# Yards by unflipped cups left on the losing side; the last entry is a touchdown
FLIP_CUP_YARDAGE = (0, 1, 2, 5, 9, None)

MIN_RUN_PLAYERS = 2
MAX_RUN_PLAYERS = 4

SACK_FUMBLE_YARDS = -3

# Throw zones, relative to the offense
SACK_FUMBLE_MAX = -4
MIDDLE_ZONE = range(-3, 4)
INCOMPLETE_SPOTS = (4, 6)
INTERCEPTION_SPOT = 5
DEEP_ZONE = range(7, 10)
DEEP_GAINS = {7: 6, 8: 9, 9: None}


class ThrowKind:
    """Classification tags for a throw."""

    GAIN = "gain"
    TOUCHDOWN = "touchdown"
    INCOMPLETE = "incomplete"
    INTERCEPTION = "interception"
    SACK_FUMBLE = "sack_fumble"


@dataclass(frozen=True)
class ThrowResult:
    """What a thrown ball did; `yards` is set for gains only."""

    kind: str
    yards: Optional[int] = None


# =============================================================================
# Runs
# =============================================================================

def run(state: GameState, data: dict) -> Transition:
    """Send 2-4 players to the flip-cup table."""
    players = data["players"]
    if not MIN_RUN_PLAYERS <= players <= MAX_RUN_PLAYERS:
        raise ValueError(
            f"Run plays use {MIN_RUN_PLAYERS}-{MAX_RUN_PLAYERS} players, got {players}"
        )
    return enter(state, Phase.RUN_PLAY, RunData(offense_players=players))


def qb_sneak(state: GameState, data: dict) -> Transition:
    return enter(state, Phase.RUN_PLAY, RunData(offense_players=1, is_sneak=True))


def run_result(state: GameState, data: dict) -> Transition:
    """
    Resolve a flip-cup race.

    `cups` is positive when the offense won (that many defense cups left
    standing), negative when the defense won, 0 on a tie.
    """
    run_data = expect(state.phase_data, RunData)
    cups = data["cups"]

    if run_data.is_sneak:
        return resolve_play(state, 1 if cups > 0 else 0)

    if cups == 0:
        return resolve_play(state, 0)

    if cups > 0:
        gain = FLIP_CUP_YARDAGE[min(cups, len(FLIP_CUP_YARDAGE) - 1)]
        if gain is None:
            gain = yards_to_touchdown(state.ball_position, state.offense_team)
        return resolve_play(state, gain)

    loss = FLIP_CUP_YARDAGE[min(-cups, len(FLIP_CUP_YARDAGE) - 2)]
    players = run_data.offense_players
    if cups == -players and players > 1:
        # Every defender finished before any runner: fumble
        return resolve_play(
            state,
            -loss,
            PlayMode.TURNOVER,
            PlayDetail(PlayOutcome.TURNOVER, TurnoverReason.FUMBLE),
        )
    return resolve_play(state, -loss)


# =============================================================================
# Passing
# =============================================================================

def throw_result(relative_cup: int, relative_call: Optional[int] = None) -> ThrowResult:
    """
    Classify a throw by where it landed relative to the offense.

    Args:
        relative_cup: Cup hit, in the offense's attacking direction
        relative_call: Called deep target, None if nothing was called

    Returns:
        ThrowResult with the kind and, for gains, the yards
    """
    if relative_call is not None and relative_call not in DEEP_ZONE:
        relative_call = None

    if relative_cup <= SACK_FUMBLE_MAX:
        return ThrowResult(ThrowKind.SACK_FUMBLE, SACK_FUMBLE_YARDS)

    if relative_cup in MIDDLE_ZONE:
        if relative_call is not None:
            return ThrowResult(ThrowKind.INCOMPLETE)
        return ThrowResult(ThrowKind.GAIN, relative_cup + 1)

    if relative_cup in INCOMPLETE_SPOTS:
        return ThrowResult(ThrowKind.INCOMPLETE)
    if relative_cup == INTERCEPTION_SPOT:
        return ThrowResult(ThrowKind.INTERCEPTION)

    # Deep zone: the hit has to reach the call, the call sets the gain
    if relative_call is None or relative_cup < relative_call:
        return ThrowResult(ThrowKind.INCOMPLETE)
    gain = DEEP_GAINS[relative_call]
    if gain is None:
        return ThrowResult(ThrowKind.TOUCHDOWN)
    return ThrowResult(ThrowKind.GAIN, gain)


def start_pass(state: GameState, data: dict) -> Transition:
    return enter(state, Phase.THROW_PLAY)


def _incomplete(state: GameState) -> Transition:
    return enter(
        state,
        Phase.INCOMPLETE_DEFENSE_SHOT,
        IncompletePassData(spot=state.ball_position),
    )


def throw_hit(state: GameState, data: dict) -> Transition:
    offense = state.offense_team
    called = data.get("called")
    result = throw_result(
        relative_position(data["cup"], offense),
        relative_position(called, offense) if called is not None else None,
    )

    if result.kind == ThrowKind.GAIN:
        return resolve_play(state, result.yards)
    if result.kind == ThrowKind.TOUCHDOWN:
        return resolve_play(state, yards_to_touchdown(state.ball_position, offense))
    if result.kind == ThrowKind.INTERCEPTION:
        return resolve_play(
            state,
            0,
            PlayMode.TURNOVER,
            PlayDetail(PlayOutcome.TURNOVER, TurnoverReason.INTERCEPTION),
        )
    if result.kind == ThrowKind.SACK_FUMBLE:
        return resolve_play(
            state,
            result.yards,
            PlayMode.TURNOVER,
            PlayDetail(PlayOutcome.TURNOVER, TurnoverReason.FUMBLE),
        )
    return _incomplete(state)


def throw_miss(state: GameState, data: dict) -> Transition:
    return _incomplete(state)


# =============================================================================
# Defense shot after an incompletion
# =============================================================================

DEFENSE_FUMBLE_DEPTH = 9


def defense_shot_yards(depth: int) -> Optional[int]:
    """Offense yardage for a defense hit at `depth`; None means a fumble."""
    if depth >= DEFENSE_FUMBLE_DEPTH:
        return None
    if depth <= 0:
        return -1
    if depth <= 4:
        return -2
    return -3


def defense_hit(state: GameState, data: dict) -> Transition:
    expect(state.phase_data, IncompletePassData)
    depth = relative_position(data["cup"], state.defense_team)
    yards = defense_shot_yards(depth)
    if yards is None:
        return resolve_play(
            state,
            0,
            PlayMode.TURNOVER,
            PlayDetail(PlayOutcome.TURNOVER, TurnoverReason.FUMBLE),
        )
    return resolve_play(state, yards)


def defense_miss(state: GameState, data: dict) -> Transition:
    expect(state.phase_data, IncompletePassData)
    return resolve_play(state, 0, detail=PlayDetail(PlayOutcome.INCOMPLETE))
