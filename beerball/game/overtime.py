"""Overtime rules.

Each team gets one untimed possession from midfield. If the game is still
tied after both, the teams trade field goal attempts in rounds, backing up
one cup after every round that both teams make or both miss, until one
round splits.

The possession handoff itself lives in the resolution engine, since every
possession-ending play reaches it through the clock.
"""

from beerball.core.enums import Phase, PlayOutcome
from beerball.core.models.field import MIDFIELD, clamp_to_field, team_spot
from beerball.core.models.game import GameState, OvertimeState, team_sign
from beerball.game.resolution import (
    FIELD_GOAL_POINTS,
    Transition,
    enter,
    fresh_downs,
    record_play,
    score,
)


def start_overtime(state: GameState, data: dict) -> Transition:
    state.overtime = OvertimeState()
    return enter(state, Phase.OVERTIME_START)


def overtime_first(state: GameState, data: dict) -> Transition:
    """The chosen team takes the first overtime possession at midfield."""
    team = team_sign(data["team"])
    state.overtime.first_offense = team
    state.offense_team = team
    state.ball_position = MIDFIELD
    state.possession = 1
    return fresh_downs(state)


def shootout_spot(round_number: int, kicker: int) -> int:
    """Kicking spot for a shootout round, one cup further back each round."""
    return clamp_to_field(team_spot(-(round_number - 1), kicker))


def _shootout_attempt(state: GameState, made: bool) -> Transition:
    shootout = state.overtime.fg_shootout
    kicker = state.offense_team
    points = FIELD_GOAL_POINTS if made else 0

    if made:
        score(state, kicker, points)
    record_play(
        state,
        kicker,
        state.phase,
        state.ball_position,
        state.ball_position,
        PlayOutcome.FIELD_GOAL,
        points=points,
    )

    if shootout.first_result is None:
        shootout.first_result = made
        state.offense_team = -kicker
        state.ball_position = shootout_spot(shootout.round, -kicker)
        return enter(state, Phase.OVERTIME_FIELD_GOAL)

    if made != shootout.first_result:
        return enter(state, Phase.GAME_OVER)

    shootout.round += 1
    shootout.first_result = None
    state.offense_team = shootout.first_team
    state.ball_position = shootout_spot(shootout.round, shootout.first_team)
    return enter(state, Phase.OVERTIME_FIELD_GOAL)


def overtime_field_goal_make(state: GameState, data: dict) -> Transition:
    return _shootout_attempt(state, made=True)


def overtime_field_goal_miss(state: GameState, data: dict) -> Transition:
    return _shootout_attempt(state, made=False)
