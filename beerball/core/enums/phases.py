"""Game phases and the actions a player can take in each."""

from enum import Enum, auto


class Phase(Enum):
    """Current phase of the game."""

    COIN_TOSS = auto()
    KICKOFF_CHOICE = auto()
    KICKOFF = auto()
    ONSIDE_KICK = auto()
    KICKOFF_RETURN = auto()
    NORMAL_PLAY = auto()
    RUN_PLAY = auto()
    THROW_PLAY = auto()
    INCOMPLETE_DEFENSE_SHOT = auto()
    PUNT = auto()
    PUNT_RETURN = auto()
    FIELD_GOAL_ATTEMPT = auto()
    TOUCHDOWN_CONVERSION = auto()
    EXTRA_POINT = auto()
    TWO_POINT_CONVERSION = auto()
    GAME_OVER = auto()
    OVERTIME_START = auto()
    OVERTIME_FIELD_GOAL = auto()

    @property
    def is_kicking(self) -> bool:
        """Kicking team is the nominal offense during these phases."""
        return self in {Phase.KICKOFF_CHOICE, Phase.KICKOFF, Phase.ONSIDE_KICK}

    @property
    def is_conversion(self) -> bool:
        """Check if the offense just scored a touchdown."""
        return self in {
            Phase.TOUCHDOWN_CONVERSION,
            Phase.EXTRA_POINT,
            Phase.TWO_POINT_CONVERSION,
        }

    @property
    def is_scrimmage(self) -> bool:
        """Phases played from the line of scrimmage with a down in effect."""
        return self in {
            Phase.NORMAL_PLAY,
            Phase.RUN_PLAY,
            Phase.THROW_PLAY,
            Phase.INCOMPLETE_DEFENSE_SHOT,
            Phase.PUNT,
            Phase.FIELD_GOAL_ATTEMPT,
        }


class Action(Enum):
    """A single human-entered input."""

    # Coin toss / kickoffs
    COIN_TOSS = auto()
    REGULAR_KICKOFF = auto()
    ONSIDE_KICK = auto()
    KICKOFF_HIT = auto()
    KICKOFF_MISS = auto()
    ONSIDE_HIT = auto()
    ONSIDE_MISS = auto()
    RETURN_HIT = auto()
    RETURN_MISS = auto()

    # Play selection
    RUN = auto()
    QB_SNEAK = auto()
    PASS = auto()
    PUNT = auto()
    FIELD_GOAL = auto()
    OFFSIDES = auto()

    # Play results
    RUN_RESULT = auto()
    THROW_HIT = auto()
    THROW_MISS = auto()
    DEFENSE_HIT = auto()
    DEFENSE_MISS = auto()
    PUNT_HIT = auto()
    PUNT_MISS = auto()
    PUNT_RETURN_HIT = auto()
    PUNT_RETURN_MISS = auto()
    FIELD_GOAL_MAKE = auto()
    FIELD_GOAL_MISS = auto()

    # Conversions
    CHOOSE_EXTRA_POINT = auto()
    CHOOSE_TWO_POINT = auto()
    EXTRA_POINT_MAKE = auto()
    EXTRA_POINT_MISS = auto()
    TWO_POINT_MAKE = auto()
    TWO_POINT_MISS = auto()

    # End of game / overtime
    START_OVERTIME = auto()
    NEW_GAME = auto()
    OVERTIME_FIRST = auto()
    OT_FIELD_GOAL_MAKE = auto()
    OT_FIELD_GOAL_MISS = auto()


# Actions offered in each phase. Every pair listed here must have a handler.
PHASE_ACTIONS: dict[Phase, tuple[Action, ...]] = {
    Phase.COIN_TOSS: (Action.COIN_TOSS,),
    Phase.KICKOFF_CHOICE: (Action.REGULAR_KICKOFF, Action.ONSIDE_KICK),
    Phase.KICKOFF: (Action.KICKOFF_HIT, Action.KICKOFF_MISS),
    Phase.ONSIDE_KICK: (Action.ONSIDE_HIT, Action.ONSIDE_MISS),
    Phase.KICKOFF_RETURN: (Action.RETURN_HIT, Action.RETURN_MISS),
    Phase.NORMAL_PLAY: (
        Action.RUN,
        Action.QB_SNEAK,
        Action.PASS,
        Action.PUNT,
        Action.FIELD_GOAL,
        Action.OFFSIDES,
    ),
    Phase.RUN_PLAY: (Action.RUN_RESULT,),
    Phase.THROW_PLAY: (Action.THROW_HIT, Action.THROW_MISS),
    Phase.INCOMPLETE_DEFENSE_SHOT: (Action.DEFENSE_HIT, Action.DEFENSE_MISS),
    Phase.PUNT: (Action.PUNT_HIT, Action.PUNT_MISS),
    Phase.PUNT_RETURN: (Action.PUNT_RETURN_HIT, Action.PUNT_RETURN_MISS),
    Phase.FIELD_GOAL_ATTEMPT: (Action.FIELD_GOAL_MAKE, Action.FIELD_GOAL_MISS),
    Phase.TOUCHDOWN_CONVERSION: (Action.CHOOSE_EXTRA_POINT, Action.CHOOSE_TWO_POINT),
    Phase.EXTRA_POINT: (Action.EXTRA_POINT_MAKE, Action.EXTRA_POINT_MISS),
    Phase.TWO_POINT_CONVERSION: (Action.TWO_POINT_MAKE, Action.TWO_POINT_MISS),
    Phase.GAME_OVER: (Action.START_OVERTIME, Action.NEW_GAME),
    Phase.OVERTIME_START: (Action.OVERTIME_FIRST,),
    Phase.OVERTIME_FIELD_GOAL: (Action.OT_FIELD_GOAL_MAKE, Action.OT_FIELD_GOAL_MISS),
}
