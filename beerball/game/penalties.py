"""Pre-snap penalties."""

from beerball.core.enums import PlayMode, PlayOutcome
from beerball.core.models.field import FIELD_MAX, FIELD_MIN, relative_position
from beerball.core.models.game import GameState, team_sign
from beerball.game.resolution import PlayDetail, Transition, resolve_play

OFFSIDES_YARDS = 1


def offsides(state: GameState, data: dict) -> Transition:
    """
    Move the ball one cup against the side that jumped and replay the down.

    The move stops at the last cup on either side, so a penalty can never
    produce a touchdown or a safety. A move that reaches the first down
    marker gives the offense a first down.
    """
    offense = state.offense_team
    offender = team_sign(data["team"])
    yards = OFFSIDES_YARDS if offender == state.defense_team else -OFFSIDES_YARDS

    progress = relative_position(state.ball_position, offense)
    yards = max(FIELD_MIN - progress, min(FIELD_MAX - progress, yards))

    reaches_marker = progress + yards >= relative_position(state.first_down_marker, offense)
    mode = PlayMode.FRESH if reaches_marker else PlayMode.REPLAY
    return resolve_play(state, yards, mode, PlayDetail(PlayOutcome.PENALTY))
