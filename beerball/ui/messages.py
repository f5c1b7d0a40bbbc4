"""Custom Textual messages for UI updates."""

from typing import Optional

from textual.message import Message

from beerball.core.enums import Action


class ActionRequestedMessage(Message):
    """Posted when the players pick an action."""

    def __init__(self, action: Action, data: Optional[dict] = None) -> None:
        self.action = action
        self.data = data or {}
        super().__init__()
