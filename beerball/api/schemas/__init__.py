"""API request and response schemas."""

from beerball.api.schemas.game import (
    ActionRequest,
    CreateGameRequest,
    CupEffectSchema,
    GameResponse,
    GameStateSchema,
    LegalActionsResponse,
    PlayResultSchema,
    TeamSchema,
)

__all__ = [
    "ActionRequest",
    "CreateGameRequest",
    "CupEffectSchema",
    "GameResponse",
    "GameStateSchema",
    "LegalActionsResponse",
    "PlayResultSchema",
    "TeamSchema",
]
