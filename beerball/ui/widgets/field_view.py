"""Rich-styled cup field visualization widget."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static

from beerball.core.models.field import FIELD_MAX, FIELD_MIN, yard_line
from beerball.core.models.game import TEAM_ONE, TEAM_TWO, GameState
from beerball.game.display import GAIN, LOSS, cup_effects

CELL_WIDTH = 5

TONE_STYLES = {
    GAIN: "bold #2e7d32",
    LOSS: "bold #c62828",
}


def _cell(value: str) -> str:
    return f"{value:^{CELL_WIDTH}}"


def render_field(state: GameState) -> Text:
    """
    Render the 19 cups left to right, team 1's endzone on the left.

    Rows: yard lines, ball and first down marker, then the effect of
    hitting each cup in the current phase.
    """
    cups = range(FIELD_MIN, FIELD_MAX + 1)
    effects = {effect.cup: effect for effect in cup_effects(state)}
    team1 = state.team(TEAM_ONE)
    team2 = state.team(TEAM_TWO)

    text = Text()
    text.append(_cell(team1.abbreviation), style=f"bold on {team1.color}")
    for cup in cups:
        text.append(_cell(str(yard_line(cup))), style="on #2e8b2e")
    text.append(_cell(team2.abbreviation), style=f"bold on {team2.color}")
    text.append("\n")

    text.append(_cell(""))
    for cup in cups:
        if cup == state.ball_position:
            text.append(_cell("<*>"), style="bold #ffffff on #8b4513")
        elif cup == state.first_down_marker and state.phase.is_scrimmage:
            text.append(_cell("|"), style="bold #ff8c00")
        else:
            text.append(_cell("."))
    text.append(_cell(""))

    if effects:
        text.append("\n")
        text.append(_cell(""))
        for cup in cups:
            effect = effects.get(cup)
            if effect is None:
                text.append(_cell(""))
            else:
                text.append(_cell(effect.label), style=TONE_STYLES.get(effect.tone, ""))
        text.append(_cell(""))

    return text


class FieldView(Static):
    """Cup field with ball, first down marker and per-cup effects."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.game_state: Optional[GameState] = None

    def update_state(self, state: GameState) -> None:
        self.game_state = state
        self.refresh()

    def render(self) -> Text:
        if self.game_state is None:
            return Text("")
        return render_field(self.game_state)
