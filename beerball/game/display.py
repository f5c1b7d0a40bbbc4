"""Display helpers for renderers.

Turns game state into the short strings a scoreboard or field view needs:
per-cup effect labels for the current phase, down and distance, cup
labels, a one-line description of the last play and the announcement
for a session event. Nothing here changes
state.
"""

from dataclasses import dataclass
from typing import Optional

from beerball.core.enums import Phase, PlayOutcome, TurnoverReason
from beerball.core.models.field import (
    BASE_KICK_DISTANCE,
    FIELD_MAX,
    FIELD_MIN,
    YARDS_PER_CUP,
    directional_modifier,
    kick_distance,
    relative_position,
    territory,
    yard_line,
)
from beerball.core.models.game import GameState, PlayResult
from beerball.core.models.phase_data import KickData, PuntData
from beerball.events import GameEndEvent, GameEvent, ScoringEvent, TurnoverEvent
from beerball.game.plays import ThrowKind, defense_shot_yards, throw_result
from beerball.game.special_teams import ONSIDE_RECOVERY_ZONE, return_outcome

GAIN = "gain"
NEUTRAL = "neutral"
LOSS = "loss"

DOWN_NAMES = ("1st", "2nd", "3rd", "4th")


@dataclass(frozen=True)
class CupEffect:
    """What hitting a cup would do, from the shooting team's point of view."""

    cup: int
    label: str
    tone: str

    def to_dict(self) -> dict:
        return {"cup": self.cup, "label": self.label, "tone": self.tone}


@dataclass(frozen=True)
class DownDistance:
    """Scoreboard headline ("2nd & 3") and situation line."""

    headline: str
    situation: str = ""

    def to_dict(self) -> dict:
        return {"headline": self.headline, "situation": self.situation}


def _tone(value: int) -> str:
    if value > 0:
        return GAIN
    if value < 0:
        return LOSS
    return NEUTRAL


def _signed(value: int) -> str:
    return f"{value:+d}" if value else "0"


def cup_label(pos: int, state: GameState) -> str:
    """Yard line label for a cup, e.g. "HOM 25" or "50"."""
    owner = territory(pos)
    if owner == 0:
        return str(yard_line(pos))
    return f"{state.team(owner).abbreviation} {yard_line(pos)}"


# =============================================================================
# Cup effects
# =============================================================================

def _kick_effect(cup: int, kicker: int) -> CupEffect:
    movement = kick_distance(cup, kicker)
    return CupEffect(cup, f"+{movement}", _tone(movement - BASE_KICK_DISTANCE))


def _return_effect(cup: int, landing: int, returner: int) -> CupEffect:
    result = return_outcome(landing, cup, returner)
    if result.outcome is PlayOutcome.TOUCHDOWN:
        return CupEffect(cup, "TD", GAIN)
    if result.outcome is PlayOutcome.RECOVERY:
        return CupEffect(cup, "REC", LOSS)
    modifier = directional_modifier(cup, returner)
    return CupEffect(cup, _signed(modifier), _tone(modifier))


def _throw_effect(cup: int, offense: int) -> CupEffect:
    rel = relative_position(cup, offense)
    # Deep cups are labelled as if they had been called
    result = throw_result(rel, rel)
    if result.kind == ThrowKind.GAIN:
        return CupEffect(cup, _signed(result.yards), _tone(result.yards))
    if result.kind == ThrowKind.TOUCHDOWN:
        return CupEffect(cup, "TD", GAIN)
    if result.kind == ThrowKind.INTERCEPTION:
        return CupEffect(cup, "INT", LOSS)
    if result.kind == ThrowKind.SACK_FUMBLE:
        return CupEffect(cup, "FUM", LOSS)
    return CupEffect(cup, "INC", NEUTRAL)


def _defense_effect(cup: int, defense: int) -> CupEffect:
    yards = defense_shot_yards(relative_position(cup, defense))
    if yards is None:
        return CupEffect(cup, "FUM", GAIN)
    return CupEffect(cup, _signed(yards), GAIN)


def cup_effects(state: GameState) -> list[CupEffect]:
    """
    Effect of every cup for the current phase.

    Tones are from the point of view of the team taking the shot. Phases
    without cup targets return an empty list.
    """
    phase = state.phase
    offense = state.offense_team
    cups = range(FIELD_MIN, FIELD_MAX + 1)

    if phase in (Phase.KICKOFF, Phase.PUNT):
        return [_kick_effect(cup, offense) for cup in cups]

    if phase == Phase.ONSIDE_KICK:
        return [
            CupEffect(cup, "REC", GAIN)
            if relative_position(cup, offense) in ONSIDE_RECOVERY_ZONE
            else CupEffect(cup, "", LOSS)
            for cup in cups
        ]

    if phase == Phase.KICKOFF_RETURN and isinstance(state.phase_data, KickData):
        return [_return_effect(cup, state.phase_data.landing, offense) for cup in cups]

    if phase == Phase.PUNT_RETURN and isinstance(state.phase_data, PuntData):
        return [_return_effect(cup, state.phase_data.landing, -offense) for cup in cups]

    if phase == Phase.THROW_PLAY:
        return [_throw_effect(cup, offense) for cup in cups]

    if phase == Phase.INCOMPLETE_DEFENSE_SHOT:
        return [_defense_effect(cup, -offense) for cup in cups]

    if phase in (Phase.FIELD_GOAL_ATTEMPT, Phase.OVERTIME_FIELD_GOAL):
        return [CupEffect(cup, "FG", GAIN) for cup in cups]

    return []


# =============================================================================
# Down and distance
# =============================================================================

def down_and_distance(state: GameState) -> DownDistance:
    """Scoreboard text for the current phase."""
    phase = state.phase

    if phase == Phase.COIN_TOSS:
        return DownDistance("Coin Toss")
    if phase == Phase.GAME_OVER:
        return DownDistance("Game Over")
    if phase == Phase.OVERTIME_START:
        return DownDistance("Overtime")
    if phase.is_conversion:
        return DownDistance("Touchdown!", f"{state.offense.name} scored")
    if phase == Phase.OVERTIME_FIELD_GOAL:
        return DownDistance("OT Field Goal", state.offense.name)
    if phase.is_kicking:
        return DownDistance("Kickoff", f"{state.offense.name} kicking")
    if phase == Phase.KICKOFF_RETURN:
        return DownDistance("Kickoff", f"{state.offense.name} returning")

    team = state.offense_team
    to_go = relative_position(state.first_down_marker - state.ball_position, team)
    goal_to_go = relative_position(state.first_down_marker, team) > FIELD_MAX
    down = DOWN_NAMES[min(state.down, len(DOWN_NAMES)) - 1]
    headline = f"{down} & Goal" if goal_to_go or to_go <= 0 else f"{down} & {to_go}"

    if phase == Phase.PUNT:
        return DownDistance(headline, f"{state.offense.name} punting")
    if phase == Phase.PUNT_RETURN:
        return DownDistance(headline, f"{state.defense.name} returning")

    return DownDistance(
        headline,
        f"{state.offense.name} ball at {cup_label(state.ball_position, state)}",
    )


# =============================================================================
# Play descriptions
# =============================================================================

def _yards_text(cups: int) -> str:
    yards = abs(cups) * YARDS_PER_CUP
    return f"{yards} yard{'s' if yards != 1 else ''}"


_TURNOVER_TEXT = {
    TurnoverReason.FUMBLE: "Fumble",
    TurnoverReason.INTERCEPTION: "Intercepted",
    TurnoverReason.DOWNS: "Turnover on downs",
    TurnoverReason.MISSED_FIELD_GOAL: "Field goal no good",
    TurnoverReason.ONSIDE: "Onside kick recovered by the receiving team",
    TurnoverReason.PUNT: "Punt",
}


def describe_play(result: Optional[PlayResult], state: GameState) -> str:
    """One-line description of a play result."""
    if result is None:
        return ""

    team = state.team(result.team).name
    spot = cup_label(result.end, state)
    outcome = result.outcome

    if outcome is PlayOutcome.TOUCHDOWN:
        if result.turnover_reason is not None:
            return f"{_TURNOVER_TEXT[result.turnover_reason]} returned for a touchdown by {team}!"
        return f"Touchdown {team}!"
    if outcome is PlayOutcome.SAFETY:
        return f"Safety! {state.team(-result.team).name} scores 2"
    if outcome is PlayOutcome.FIELD_GOAL:
        return f"{team} field goal is {'good' if result.points else 'no good'}"
    if outcome is PlayOutcome.EXTRA_POINT:
        return f"{team} extra point is {'good' if result.points else 'no good'}"
    if outcome is PlayOutcome.TWO_POINT:
        return f"{team} two-point try {'succeeds' if result.points else 'fails'}"
    if outcome is PlayOutcome.RECOVERY:
        return f"{team} recovers at {spot}"
    if outcome is PlayOutcome.TOUCHBACK:
        return f"Touchback, ball at {spot}"
    if outcome is PlayOutcome.PENALTY:
        return f"Offsides, ball moves to {spot}, replay the down"

    if result.turnover_reason is TurnoverReason.PUNT:
        return f"Punt returned to {spot}"
    if result.turnover_reason is not None:
        return f"{_TURNOVER_TEXT[result.turnover_reason]}, ball at {spot}"

    if outcome is PlayOutcome.RETURN:
        return f"Returned to {spot}"
    if outcome is PlayOutcome.INCOMPLETE:
        return f"{team} pass incomplete"
    if outcome is PlayOutcome.GAIN:
        return f"{team} gain of {_yards_text(result.yards)} to {spot}"
    if outcome is PlayOutcome.LOSS:
        return f"{team} loss of {_yards_text(result.yards)} to {spot}"
    return f"{team} no gain"


# =============================================================================
# Announcements
# =============================================================================

def announcement(event: GameEvent, state: GameState) -> Optional[str]:
    """Short pop-up text for a score, turnover or final whistle, else None."""
    if isinstance(event, ScoringEvent):
        return f"{state.team(event.team).name} {event.scoring_type} (+{event.points})"
    if isinstance(event, TurnoverEvent):
        reason = event.turnover_type.replace("_", " ").lower()
        return f"Turnover ({reason}), {state.team(event.gaining_team).name} ball"
    if isinstance(event, GameEndEvent):
        score = f"{event.final_team1_score}-{event.final_team2_score}"
        if event.winner is None:
            return f"End of regulation, tied {score}"
        return f"Final: {state.team(event.winner).name} wins {score}"
    return None
