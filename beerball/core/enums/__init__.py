"""Game enumerations."""

from beerball.core.enums.phases import PHASE_ACTIONS, Action, Phase
from beerball.core.enums.plays import PlayMode, PlayOutcome, TurnoverReason

__all__ = [
    "Action",
    "PHASE_ACTIONS",
    "Phase",
    "PlayMode",
    "PlayOutcome",
    "TurnoverReason",
]
