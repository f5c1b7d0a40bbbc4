"""Play resolution modes and outcomes."""

from enum import Enum, auto


class PlayMode(Enum):
    """How the resolution engine books a play after moving the ball."""

    NORMAL = auto()  # Down advances unless the marker is reached
    FRESH = auto()  # First down at the new spot (returns, recoveries)
    REPLAY = auto()  # Same down again (penalty)
    TURNOVER = auto()  # Offense flips before the scoring checks


class PlayOutcome(Enum):
    """Outcome tag recorded on the last play result."""

    GAIN = auto()
    LOSS = auto()
    NEUTRAL = auto()
    INCOMPLETE = auto()
    TURNOVER = auto()
    TOUCHDOWN = auto()
    SAFETY = auto()
    FIELD_GOAL = auto()
    EXTRA_POINT = auto()
    TWO_POINT = auto()
    RETURN = auto()
    RECOVERY = auto()
    TOUCHBACK = auto()
    PENALTY = auto()

    @classmethod
    def for_yards(cls, yards: int) -> "PlayOutcome":
        """Tag a plain gain/loss by its sign."""
        if yards > 0:
            return cls.GAIN
        if yards < 0:
            return cls.LOSS
        return cls.NEUTRAL


class TurnoverReason(Enum):
    """Why possession changed hands."""

    FUMBLE = auto()
    INTERCEPTION = auto()
    DOWNS = auto()
    MISSED_FIELD_GOAL = auto()
    ONSIDE = auto()
    PUNT = auto()
