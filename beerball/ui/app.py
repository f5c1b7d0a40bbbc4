"""Terminal front end for tracking a game."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from beerball.events import GameEndEvent, GameEvent, ScoringEvent, TurnoverEvent
from beerball.game.display import announcement, describe_play
from beerball.game.machine import IllegalActionError
from beerball.game.session import GameSession
from beerball.ui.messages import ActionRequestedMessage
from beerball.ui.widgets import ActionBar, FieldView, Scoreboard

logger = logging.getLogger(__name__)

ANNOUNCED_EVENTS = (ScoringEvent, TurnoverEvent, GameEndEvent)


class BeerballApp(App):
    """Main Textual application for the game tracker."""

    TITLE = "Gridiron Beerball"
    SUB_TITLE = "Game Tracker"

    DEFAULT_CSS = """
    #scoreboard { height: 3; padding: 0 1; }
    #field-view { height: 5; padding: 0 1; }
    #last-play { height: 1; padding: 0 1; color: $text-muted; }
    ActionBar { height: auto; }
    ActionBar Input { width: 24; }
    #action-buttons { height: auto; }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True, priority=True),
        Binding("ctrl+z", "undo", "Undo", show=True),
    ]

    def __init__(self, session: Optional[GameSession] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.session = session or GameSession.new()
        self.session.event_bus.subscribe_many(ANNOUNCED_EVENTS, self._announce)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Scoreboard(id="scoreboard")
        yield FieldView(id="field-view")
        yield Static("", id="last-play")
        yield ActionBar(id="action-bar")
        yield Footer()

    def _announce(self, event: GameEvent) -> None:
        message = announcement(event, self.session.state)
        if message:
            self.notify(message, title="Beerball", timeout=4)

    async def on_mount(self) -> None:
        await self._refresh_view()

    async def _refresh_view(self) -> None:
        state = self.session.state
        self.query_one("#scoreboard", Scoreboard).update_state(state)
        self.query_one("#field-view", FieldView).update_state(state)
        self.query_one("#last-play", Static).update(describe_play(state.last_play_result, state))
        await self.query_one("#action-bar", ActionBar).set_actions(self.session.legal_actions())

    async def on_action_requested_message(self, message: ActionRequestedMessage) -> None:
        try:
            self.session.act(message.action, message.data)
        except (IllegalActionError, ValueError) as e:
            logger.warning(f"Rejected {message.action.name}: {e}")
            self.notify(str(e), title="Not allowed", severity="warning")
            return
        await self._refresh_view()

    async def action_undo(self) -> None:
        if self.session.undo():
            await self._refresh_view()
        else:
            self.notify("Nothing to undo", timeout=2)


def run_app(session: Optional[GameSession] = None) -> None:
    """Run the tracker TUI."""
    app = BeerballApp(session=session)
    app.run()
