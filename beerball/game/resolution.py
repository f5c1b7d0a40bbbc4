"""Play resolution engine.

Every scrimmage play, return and turnover funnels into `resolve_play`,
which turns a yardage delta and a resolution mode into the score, the
new spot, and the down/possession bookkeeping. The clock and kickoff
helpers it hands off to live here as well so that possession changes are
booked in exactly one place.

All helpers mutate the working copy they are given; the state machine is
responsible for copying the caller's state first.
"""

from dataclasses import dataclass, replace
from typing import Optional

from beerball.core.enums import Phase, PlayMode, PlayOutcome, TurnoverReason
from beerball.core.models.field import (
    CUPS_TO_FIRST_DOWN,
    FIELD_MAX,
    KICKOFF_SPOT,
    MIDFIELD,
    clamp_marker,
    clamp_to_field,
    is_safety,
    is_touchdown,
    relative_position,
    team_spot,
)
from beerball.core.models.game import (
    POSSESSIONS_PER_QUARTER,
    QUARTERS,
    GameState,
    PlayResult,
    ShootoutState,
)
from beerball.core.models.phase_data import PhaseData

TOUCHDOWN_POINTS = 6
FIELD_GOAL_POINTS = 3
SAFETY_POINTS = 2
TWO_POINT_POINTS = 2
EXTRA_POINT_POINTS = 1

MAX_DOWNS = 4
SECOND_HALF = 3


@dataclass
class Transition:
    """Outcome of one action: the phase entered and the resulting state."""

    phase: Phase
    phase_data: PhaseData
    state: GameState


@dataclass(frozen=True)
class PlayDetail:
    """Annotations a handler can attach to the play it resolves."""

    outcome: Optional[PlayOutcome] = None
    turnover_reason: Optional[TurnoverReason] = None


def enter(state: GameState, phase: Phase, data: PhaseData = None) -> Transition:
    """Move the state into `phase`, replacing any phase data."""
    state.phase = phase
    state.phase_data = data
    return Transition(phase=phase, phase_data=data, state=state)


def score(state: GameState, team: int, points: int) -> None:
    state.team(team).score += points


def record_play(
    state: GameState,
    team: int,
    phase: Phase,
    begin: int,
    end: int,
    outcome: PlayOutcome,
    turnover_reason: Optional[TurnoverReason] = None,
    points: Optional[int] = None,
) -> PlayResult:
    """Store the last play result on the state and return it."""
    result = PlayResult(
        team=team,
        phase=phase,
        begin=begin,
        end=end,
        outcome=outcome,
        turnover_reason=turnover_reason,
        points=points,
    )
    state.last_play_result = result
    state.play_count += 1
    return result


def set_first_down_marker(state: GameState) -> None:
    state.first_down_marker = clamp_marker(
        state.ball_position + CUPS_TO_FIRST_DOWN * state.offense_team
    )


def fresh_downs(state: GameState) -> Transition:
    """First down at the current spot."""
    state.down = 1
    set_first_down_marker(state)
    return enter(state, Phase.NORMAL_PLAY)


def enter_kickoff(state: GameState, kicker: int) -> Transition:
    """Line the kicking team up at its own 25 and let it pick the kick."""
    state.offense_team = kicker
    state.ball_position = team_spot(KICKOFF_SPOT, kicker)
    state.down = 1
    set_first_down_marker(state)
    return enter(state, Phase.KICKOFF_CHOICE)


def overtime_handoff(state: GameState) -> Transition:
    """
    End the current overtime possession.

    After the first possession the other team gets the ball at midfield.
    After the second, a decided score ends the game and a tie starts the
    field goal shootout with the first overtime offense kicking.
    """
    overtime = state.overtime
    state.down = 1

    if state.possession == 1:
        state.possession = 2
        state.offense_team = -overtime.first_offense
        state.ball_position = MIDFIELD
        return fresh_downs(state)

    if not state.is_tied:
        return enter(state, Phase.GAME_OVER)

    overtime.fg_shootout = ShootoutState(first_team=overtime.first_offense)
    state.offense_team = overtime.first_offense
    state.ball_position = MIDFIELD
    return enter(state, Phase.OVERTIME_FIELD_GOAL)


def advance_game_clock(state: GameState) -> Optional[Transition]:
    """
    Use up one possession of the quarter.

    Returns a transition when the clock itself decides what happens next
    (end of regulation, second-half kickoff, overtime handoff), otherwise
    None and the caller carries on.
    """
    if state.is_overtime:
        return overtime_handoff(state)

    state.possession += 1
    if state.possession <= POSSESSIONS_PER_QUARTER:
        return None

    state.possession = 1
    state.quarter += 1

    if state.quarter > QUARTERS:
        state.quarter = QUARTERS
        return enter(state, Phase.GAME_OVER)

    if state.quarter == SECOND_HALF:
        # Opening receiver kicks to start the second half
        kicker = state.opening_kickoff_receiver or state.offense_team
        return enter_kickoff(state, kicker)

    return None


def change_of_possession(state: GameState) -> Transition:
    """Clock advancement followed by fresh downs for the current offense."""
    state.down = 1
    transition = advance_game_clock(state)
    if transition is not None:
        return transition
    return fresh_downs(state)


def start_kickoff(state: GameState) -> Transition:
    """
    Set up the kickoff that follows a score.

    The current offense kicks: that is the scoring team after a touchdown
    or field goal and the team scored upon after a safety. In overtime
    there are no kickoffs and the possession simply ends.
    """
    if state.is_overtime:
        return overtime_handoff(state)

    transition = advance_game_clock(state)
    if transition is not None:
        return transition
    return enter_kickoff(state, state.offense_team)


def resolve_play(
    state: GameState,
    yards: int,
    mode: PlayMode = PlayMode.NORMAL,
    detail: Optional[PlayDetail] = None,
) -> Transition:
    """
    Book a play that moved the ball `yards` cups for the current offense.

    Args:
        state: Working copy of the game state (mutated)
        yards: Cups gained in the offense's attacking direction
        mode: How downs and possession are booked afterwards
        detail: Outcome tag and turnover reason for the play record

    Returns:
        Transition into the phase that follows the play
    """
    detail = detail or PlayDetail()
    phase = state.phase
    offense = state.offense_team
    begin = state.ball_position
    raw_end = begin + yards * offense
    end = clamp_to_field(raw_end)

    # Possession flips before the scoring checks so a defensive score
    # belongs to the team holding the ball
    if mode is PlayMode.TURNOVER:
        state.offense_team = -offense
    team = state.offense_team

    if is_touchdown(raw_end, team):
        score(state, team, TOUCHDOWN_POINTS)
        state.ball_position = team_spot(FIELD_MAX, team)
        record_play(
            state,
            team,
            phase,
            begin,
            state.ball_position,
            PlayOutcome.TOUCHDOWN,
            detail.turnover_reason,
            TOUCHDOWN_POINTS,
        )
        return enter(state, Phase.TOUCHDOWN_CONVERSION)

    state.ball_position = end

    if mode is not PlayMode.TURNOVER and is_safety(raw_end, team):
        score(state, -team, SAFETY_POINTS)
        record_play(state, team, phase, begin, end, PlayOutcome.SAFETY, points=SAFETY_POINTS)
        return start_kickoff(state)

    if mode is PlayMode.TURNOVER:
        record_play(
            state,
            offense,
            phase,
            begin,
            end,
            detail.outcome or PlayOutcome.TURNOVER,
            detail.turnover_reason,
        )
        return change_of_possession(state)

    outcome = detail.outcome or PlayOutcome.for_yards(relative_position(end - begin, team))
    record_play(state, team, phase, begin, end, outcome, detail.turnover_reason)

    if mode is PlayMode.REPLAY:
        return enter(state, Phase.NORMAL_PLAY)
    if mode is PlayMode.FRESH:
        return fresh_downs(state)

    if relative_position(end, team) >= relative_position(state.first_down_marker, team):
        return fresh_downs(state)

    state.down += 1
    if state.down > MAX_DOWNS:
        state.offense_team = -team
        state.last_play_result = replace(
            state.last_play_result, turnover_reason=TurnoverReason.DOWNS
        )
        return change_of_possession(state)

    return enter(state, Phase.NORMAL_PLAY)
