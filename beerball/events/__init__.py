"""Event system for game sessions."""

from beerball.events.bus import EventBus
from beerball.events.types import (
    GameEndEvent,
    GameEvent,
    PhaseChangedEvent,
    PlayResolvedEvent,
    QuarterEndEvent,
    ScoringEvent,
    TurnoverEvent,
)

__all__ = [
    "EventBus",
    "GameEndEvent",
    "GameEvent",
    "PhaseChangedEvent",
    "PlayResolvedEvent",
    "QuarterEndEvent",
    "ScoringEvent",
    "TurnoverEvent",
]
