"""Games API router - REST endpoints for tracking a game."""

import logging

from fastapi import APIRouter, HTTPException, status

from beerball.api.schemas.game import (
    ActionRequest,
    CreateGameRequest,
    GameResponse,
    LegalActionsResponse,
)
from beerball.api.services.session_manager import session_manager
from beerball.game.machine import IllegalActionError
from beerball.game.session import GameSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/games", tags=["games"])


def _get_session(game_id: str) -> GameSession:
    session = session_manager.get_session(game_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Game {game_id} not found",
        )
    return session


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
async def create_game(request: CreateGameRequest) -> GameResponse:
    """Create a new game at the coin toss."""
    session = session_manager.create_session(
        team1=request.team1_name,
        team2=request.team2_name,
        team1_color=request.team1_color,
        team2_color=request.team2_color,
    )
    return GameResponse.from_session(session)


@router.get("", response_model=list[str])
async def list_games() -> list[str]:
    """Ids of the games being tracked."""
    return session_manager.active_sessions


@router.get("/{game_id}", response_model=GameResponse)
async def get_game(game_id: str) -> GameResponse:
    """Get current game state."""
    return GameResponse.from_session(_get_session(game_id))


@router.get("/{game_id}/actions", response_model=LegalActionsResponse)
async def get_actions(game_id: str) -> LegalActionsResponse:
    """Actions offered in the current phase."""
    session = _get_session(game_id)
    return LegalActionsResponse(
        game_id=game_id,
        phase=session.state.phase.name,
        actions=[action.name for action in session.legal_actions()],
    )


@router.post("/{game_id}/actions", response_model=GameResponse)
async def post_action(game_id: str, request: ActionRequest) -> GameResponse:
    """Apply one action to the game."""
    session = _get_session(game_id)
    try:
        session.act(request.action, request.data)
    except IllegalActionError as e:
        logger.warning(f"Rejected action for game {game_id}: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        logger.warning(f"Bad action data for game {game_id}: {e}")
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return GameResponse.from_session(session)


@router.post("/{game_id}/undo", response_model=GameResponse)
async def undo(game_id: str) -> GameResponse:
    """Step back one action."""
    session = _get_session(game_id)
    if not session.undo():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Nothing to undo",
        )
    return GameResponse.from_session(session)


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game(game_id: str) -> None:
    """Delete/end a game."""
    _get_session(game_id)
    session_manager.remove_session(game_id)
