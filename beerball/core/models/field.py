"""Field position model.

The field is 19 cups numbered -9..9 with midfield at 0. Each cup is 5
yards. Team 1 (sign +1) attacks toward +9, team 2 (sign -1) toward -9, so
multiplying a position by a team sign gives that team's progress:

    -9 ... -1   0   1 ... 9
    own 5     own 45  50  opp 45    opp 5     (from team 1's side)

Endzones start one unit past the last cup (+/-10). Intermediate kick and
return math may run past the field; only persisted positions are clamped.
"""

from typing import Optional

FIELD_MIN = -9
FIELD_MAX = 9
ENDZONE_BOUNDARY = FIELD_MAX + 1

TOTAL_CUPS = FIELD_MAX - FIELD_MIN + 1
YARDS_PER_CUP = 5
CUPS_TO_FIRST_DOWN = 3

# Kicks and punts travel this far on a miss
BASE_KICK_DISTANCE = 10

# Spots relative to the team that owns them (multiply by the team sign)
KICKOFF_SPOT = -5  # Kicking team's 25
TOUCHBACK_SPOT = -6  # Returner's 20
RECOVERY_SPOT = -9  # Returner's 5
MIDFIELD = 0


def relative_position(pos: int, team: int) -> int:
    """Progress of `pos` in the attacking direction of `team`."""
    return pos * team


def is_touchdown(pos: int, team: int) -> bool:
    """True once the ball is past the far boundary for `team`."""
    return pos * team > FIELD_MAX


def is_safety(pos: int, team: int) -> bool:
    """True once the ball is pushed behind `team`'s own boundary."""
    return pos * team < -FIELD_MAX


def in_scoring_endzone(pos: int, team: int) -> bool:
    """Where a return finishes for a touchdown, unclamped."""
    return is_touchdown(pos, team)


def in_own_endzone(pos: int, team: int) -> bool:
    """Where a kick dies for a touchback or recovery, unclamped."""
    return is_safety(pos, team)


def clamp_to_field(pos: int) -> int:
    """Saturate a computed position to a persistable cup."""
    return max(FIELD_MIN, min(FIELD_MAX, pos))


def clamp_marker(pos: int) -> int:
    """Saturate a first down marker to one unit past the field (goal to go)."""
    return max(-ENDZONE_BOUNDARY, min(ENDZONE_BOUNDARY, pos))


def directional_modifier(cup: int, direction: int) -> int:
    """
    Modifier for a cup hit on kicks, punts and returns.

    Hitting the cup that sits one unit behind midfield for `direction` is
    worth 0; the range is -8..+10. The +1 offset is part of the rules and
    decides whether a hit is better or worse than a miss.
    """
    return cup * direction + 1


def kick_distance(cup: Optional[int], direction: int) -> int:
    """Total ball movement for a kick; `None` is a miss (base distance)."""
    if cup is None:
        return BASE_KICK_DISTANCE
    return BASE_KICK_DISTANCE + directional_modifier(cup, direction)


def yards_to_touchdown(pos: int, team: int) -> int:
    """Smallest gain from `pos` that crosses `team`'s scoring boundary."""
    return ENDZONE_BOUNDARY - pos * team


def team_spot(spot: int, team: int) -> int:
    """Absolute position of a spot given relative to `team`."""
    return spot * team


def yard_line(pos: int) -> int:
    """Yard line number painted at a cup (5..50)."""
    return (ENDZONE_BOUNDARY - abs(pos)) * YARDS_PER_CUP


def territory(pos: int) -> int:
    """Sign of the team whose half the cup is in, 0 at midfield."""
    if pos < 0:
        return 1
    if pos > 0:
        return -1
    return 0
