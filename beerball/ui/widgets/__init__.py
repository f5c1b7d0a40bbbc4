"""Textual widgets for the game tracker."""

from beerball.ui.widgets.action_bar import ActionBar
from beerball.ui.widgets.field_view import FieldView
from beerball.ui.widgets.scoreboard import Scoreboard

__all__ = ["ActionBar", "FieldView", "Scoreboard"]
