"""Action buttons for the current phase."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Input

from beerball.core.enums import Action
from beerball.game.machine import REQUIRED_DATA
from beerball.ui.messages import ActionRequestedMessage


def action_data(action: Action, value: str, call: str = "") -> dict:
    """Build the payload for `action` from the two input boxes."""
    data = {}
    keys = REQUIRED_DATA.get(action, ())
    if keys:
        data[keys[0]] = value.strip()
    if action is Action.THROW_HIT and call.strip():
        data["called"] = call.strip()
    return data


class ActionBar(Horizontal):
    """One button per legal action, plus inputs for the value and the called cup."""

    def compose(self) -> ComposeResult:
        yield Input(placeholder="cup / team / players", id="action-value")
        yield Input(placeholder="called cup", id="action-call")
        yield Horizontal(id="action-buttons")

    async def set_actions(self, actions: list[Action]) -> None:
        """Replace the buttons with those for `actions`."""
        container = self.query_one("#action-buttons", Horizontal)
        await container.remove_children()
        if not actions:
            return
        await container.mount(
            *[
                Button(
                    action.name.replace("_", " ").title(),
                    id=f"action-{action.name.lower()}",
                    classes="action-btn",
                )
                for action in actions
            ]
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if not button_id.startswith("action-"):
            return
        action = Action[button_id[len("action-"):].upper()]
        value = self.query_one("#action-value", Input).value
        call = self.query_one("#action-call", Input).value
        self.post_message(ActionRequestedMessage(action, action_data(action, value, call)))
