"""Game rules and the session controller.

Core components:
- resolution: unified play resolution, clock and kickoff setup
- machine: (phase, action) dispatch, legal actions
- special_teams / plays / penalties / overtime: per-phase rule handlers
- display: labels and prose for renderers
- session: GameSession (undo history, events, autosave)
"""

from beerball.game.display import (
    CupEffect,
    DownDistance,
    cup_effects,
    cup_label,
    describe_play,
    down_and_distance,
)
from beerball.game.machine import IllegalActionError, apply, legal_actions
from beerball.game.resolution import PlayDetail, Transition, resolve_play
from beerball.game.session import GameSession, parse_action

__all__ = [
    "CupEffect",
    "DownDistance",
    "GameSession",
    "IllegalActionError",
    "PlayDetail",
    "Transition",
    "apply",
    "cup_effects",
    "cup_label",
    "describe_play",
    "down_and_distance",
    "legal_actions",
    "parse_action",
    "resolve_play",
]
