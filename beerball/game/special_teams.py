"""Kicking game rules.

Covers the coin toss, kickoffs and onside kicks, kickoff and punt returns,
punts, field goals and the conversion after a touchdown.

During the kickoff phases the kicking team is the nominal offense, so every
kick travels in the offense's attacking direction. Kicks and punts are
resolved in two inputs: where the ball landed, then how the return went.
Landings are kept unclamped in the phase data so a ball that dies in the
endzone can still be recognised by the return.
"""

from dataclasses import dataclass
from typing import Optional

from beerball.core.enums import Phase, PlayMode, PlayOutcome, TurnoverReason
from beerball.core.models.field import (
    FIELD_MAX,
    KICKOFF_SPOT,
    RECOVERY_SPOT,
    TOUCHBACK_SPOT,
    clamp_to_field,
    directional_modifier,
    in_own_endzone,
    in_scoring_endzone,
    kick_distance,
    relative_position,
    team_spot,
)
from beerball.core.models.game import GameState, team_sign
from beerball.core.models.phase_data import KickData, PuntData, expect
from beerball.game.resolution import (
    EXTRA_POINT_POINTS,
    FIELD_GOAL_POINTS,
    TWO_POINT_POINTS,
    PlayDetail,
    Transition,
    enter,
    enter_kickoff,
    fresh_downs,
    record_play,
    resolve_play,
    score,
    start_kickoff,
)

# Kicking team's own 35, 40 and 45
ONSIDE_RECOVERY_ZONE = range(-3, 0)


@dataclass(frozen=True)
class ReturnResult:
    """
    Classified return.

    `spot` is the unclamped finishing position for a touchdown and the
    spot the ball is placed at for everything else.
    """

    outcome: PlayOutcome
    spot: int


def return_outcome(landing: int, cup: Optional[int], returner: int) -> ReturnResult:
    """
    Classify a kickoff or punt return.

    Args:
        landing: Where the kick landed (may be inside an endzone)
        cup: Cup the returner hit, None on a miss
        returner: Sign of the returning team

    Returns:
        TOUCHDOWN, RECOVERY (kicking team falls on it at the returner's 5),
        TOUCHBACK (returner's 20) or RETURN
    """
    if cup is None:
        if in_own_endzone(landing, returner):
            return ReturnResult(PlayOutcome.TOUCHBACK, team_spot(TOUCHBACK_SPOT, returner))
        return ReturnResult(PlayOutcome.RETURN, clamp_to_field(landing))

    modifier = directional_modifier(cup, returner)
    final = landing + modifier * returner

    if in_scoring_endzone(final, returner):
        return ReturnResult(PlayOutcome.TOUCHDOWN, final)
    if modifier <= 0 and in_own_endzone(final, returner):
        return ReturnResult(PlayOutcome.RECOVERY, team_spot(RECOVERY_SPOT, returner))
    return ReturnResult(PlayOutcome.RETURN, clamp_to_field(final))


# =============================================================================
# Coin toss and kickoffs
# =============================================================================

def coin_toss(state: GameState, data: dict) -> Transition:
    """The chosen team receives; the other team kicks from its 25."""
    receiver = team_sign(data["team"])
    state.opening_kickoff_receiver = receiver
    return enter_kickoff(state, -receiver)


def regular_kickoff(state: GameState, data: dict) -> Transition:
    return enter(state, Phase.KICKOFF)


def onside_kick(state: GameState, data: dict) -> Transition:
    return enter(state, Phase.ONSIDE_KICK)


def _kick(state: GameState, cup: Optional[int]) -> Transition:
    kicker = state.offense_team
    landing = state.ball_position + kick_distance(cup, kicker) * kicker
    state.offense_team = -kicker
    return enter(state, Phase.KICKOFF_RETURN, KickData(landing=landing))


def kickoff_hit(state: GameState, data: dict) -> Transition:
    return _kick(state, data["cup"])


def kickoff_miss(state: GameState, data: dict) -> Transition:
    return _kick(state, None)


def _onside_failed(state: GameState) -> Transition:
    kicker = state.offense_team
    state.offense_team = -kicker
    state.ball_position = team_spot(KICKOFF_SPOT, kicker)
    return resolve_play(
        state,
        0,
        PlayMode.FRESH,
        PlayDetail(PlayOutcome.TURNOVER, TurnoverReason.ONSIDE),
    )


def onside_hit(state: GameState, data: dict) -> Transition:
    """Kicking team keeps the ball if the kick dies on its own 35-45."""
    kicker = state.offense_team
    cup = data["cup"]
    if relative_position(cup, kicker) not in ONSIDE_RECOVERY_ZONE:
        return _onside_failed(state)

    begin = state.ball_position
    state.ball_position = cup
    record_play(state, kicker, state.phase, begin, cup, PlayOutcome.RECOVERY)
    return fresh_downs(state)


def onside_miss(state: GameState, data: dict) -> Transition:
    return _onside_failed(state)


# =============================================================================
# Returns
# =============================================================================

def _kickoff_return(state: GameState, cup: Optional[int]) -> Transition:
    kick = expect(state.phase_data, KickData)
    returner = state.offense_team
    result = return_outcome(kick.landing, cup, returner)
    begin = clamp_to_field(kick.landing)

    if result.outcome is PlayOutcome.RECOVERY:
        kicker = -returner
        state.offense_team = kicker
        state.ball_position = result.spot
        record_play(state, kicker, state.phase, begin, result.spot, PlayOutcome.RECOVERY)
        return fresh_downs(state)

    state.ball_position = begin
    yards = relative_position(result.spot - begin, returner)
    return resolve_play(state, yards, PlayMode.FRESH, PlayDetail(result.outcome))


def return_hit(state: GameState, data: dict) -> Transition:
    return _kickoff_return(state, data["cup"])


def return_miss(state: GameState, data: dict) -> Transition:
    return _kickoff_return(state, None)


def _punt_return(state: GameState, cup: Optional[int]) -> Transition:
    punt = expect(state.phase_data, PuntData)
    punter = state.offense_team
    result = return_outcome(punt.landing, cup, -punter)
    begin = clamp_to_field(punt.landing)

    state.ball_position = begin
    yards = relative_position(result.spot - begin, punter)

    if result.outcome is PlayOutcome.RECOVERY:
        return resolve_play(state, yards, PlayMode.FRESH, PlayDetail(PlayOutcome.RECOVERY))

    return resolve_play(
        state,
        yards,
        PlayMode.TURNOVER,
        PlayDetail(result.outcome, TurnoverReason.PUNT),
    )


def punt_return_hit(state: GameState, data: dict) -> Transition:
    return _punt_return(state, data["cup"])


def punt_return_miss(state: GameState, data: dict) -> Transition:
    return _punt_return(state, None)


# =============================================================================
# Punts and field goals
# =============================================================================

def punt(state: GameState, data: dict) -> Transition:
    return enter(state, Phase.PUNT)


def _punt(state: GameState, cup: Optional[int]) -> Transition:
    punter = state.offense_team
    landing = state.ball_position + kick_distance(cup, punter) * punter
    return enter(state, Phase.PUNT_RETURN, PuntData(landing=landing))


def punt_hit(state: GameState, data: dict) -> Transition:
    return _punt(state, data["cup"])


def punt_miss(state: GameState, data: dict) -> Transition:
    return _punt(state, None)


def field_goal(state: GameState, data: dict) -> Transition:
    return enter(state, Phase.FIELD_GOAL_ATTEMPT)


def field_goal_make(state: GameState, data: dict) -> Transition:
    kicker = state.offense_team
    score(state, kicker, FIELD_GOAL_POINTS)
    record_play(
        state,
        kicker,
        state.phase,
        state.ball_position,
        state.ball_position,
        PlayOutcome.FIELD_GOAL,
        points=FIELD_GOAL_POINTS,
    )
    return start_kickoff(state)


def field_goal_miss(state: GameState, data: dict) -> Transition:
    """Missed field goal: the defense takes over at the spot."""
    return resolve_play(
        state,
        0,
        PlayMode.TURNOVER,
        PlayDetail(PlayOutcome.TURNOVER, TurnoverReason.MISSED_FIELD_GOAL),
    )


# =============================================================================
# Conversions
# =============================================================================

def _choose_conversion(state: GameState, phase: Phase) -> Transition:
    # Ball goes on the opponent's 5
    state.ball_position = team_spot(FIELD_MAX, state.offense_team)
    return enter(state, phase)


def choose_extra_point(state: GameState, data: dict) -> Transition:
    return _choose_conversion(state, Phase.EXTRA_POINT)


def choose_two_point(state: GameState, data: dict) -> Transition:
    return _choose_conversion(state, Phase.TWO_POINT_CONVERSION)


def _conversion(state: GameState, outcome: PlayOutcome, points: int) -> Transition:
    team = state.offense_team
    if points:
        score(state, team, points)
    record_play(
        state,
        team,
        state.phase,
        state.ball_position,
        state.ball_position,
        outcome,
        points=points,
    )
    return start_kickoff(state)


def extra_point_make(state: GameState, data: dict) -> Transition:
    return _conversion(state, PlayOutcome.EXTRA_POINT, EXTRA_POINT_POINTS)


def extra_point_miss(state: GameState, data: dict) -> Transition:
    return _conversion(state, PlayOutcome.EXTRA_POINT, 0)


def two_point_make(state: GameState, data: dict) -> Transition:
    return _conversion(state, PlayOutcome.TWO_POINT, TWO_POINT_POINTS)


def two_point_miss(state: GameState, data: dict) -> Transition:
    return _conversion(state, PlayOutcome.TWO_POINT, 0)
