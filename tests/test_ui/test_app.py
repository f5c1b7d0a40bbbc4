"""Tests for the tracker app wiring."""

from beerball.core.enums import Action
from beerball.game.session import GameSession
from beerball.ui.app import BeerballApp


class TestAnnouncements:
    """Session events pop up as notifications."""

    def _app(self, session):
        app = BeerballApp(session=session)
        notes = []
        app.notify = lambda message, **kwargs: notes.append(message)
        return app, notes

    def test_score_announced(self, state_at):
        session = GameSession(state=state_at(ball=4, offense=1))
        app, notes = self._app(session)

        session.act(Action.FIELD_GOAL)
        session.act(Action.FIELD_GOAL_MAKE)

        assert notes == ["Home FG (+3)"]

    def test_turnover_announced(self, state_at):
        session = GameSession(state=state_at(ball=0, offense=1))
        app, notes = self._app(session)

        session.act(Action.PASS)
        session.act(Action.THROW_HIT, {"cup": 5})

        assert notes == ["Turnover (interception), Away ball"]

    def test_plain_play_is_quiet(self, state_at):
        session = GameSession(state=state_at(ball=0, offense=1))
        app, notes = self._app(session)

        session.act(Action.RUN, {"players": 2})
        session.act(Action.RUN_RESULT, {"cups": 1})

        assert notes == []
