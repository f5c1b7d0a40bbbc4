"""Scoreboard widget displaying game status."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static

from beerball.core.enums import Phase
from beerball.core.models.game import TEAM_ONE, TEAM_TWO, GameState
from beerball.game.display import down_and_distance


def render_scoreboard(state: GameState) -> Text:
    """Score line plus the down-and-distance line."""
    text = Text()
    period = "OT" if state.is_overtime else f"Q{state.quarter}"

    for sign in (TEAM_ONE, TEAM_TWO):
        team = state.team(sign)
        if sign == TEAM_TWO:
            text.append(f"    {period}  ", style="bold #666666")
        if sign == state.offense_team and state.phase != Phase.COIN_TOSS:
            text.append("● ", style="bold #2e7d32")
        else:
            text.append("  ")
        text.append(f"{team.abbreviation} ", style=f"bold {team.color}")
        text.append(f"{team.score:>2}", style="bold")

    summary = down_and_distance(state)
    text.append("\n")
    text.append(summary.headline, style="bold")
    if summary.situation:
        text.append("  ")
        text.append(summary.situation, style="#666666")
    return text


class Scoreboard(Static):
    """Displays score, period, and down/distance."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.game_state: Optional[GameState] = None

    def update_state(self, state: GameState) -> None:
        self.game_state = state
        self.refresh()

    def render(self) -> Text:
        if self.game_state is None:
            return Text("No game")
        return render_scoreboard(self.game_state)
