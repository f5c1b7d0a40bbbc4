"""Tests for the event bus."""

from beerball.events import EventBus, GameEvent, ScoringEvent, TurnoverEvent


class TestEventBus:
    """Tests for EventBus."""

    def test_typed_subscription(self):
        bus = EventBus()
        received = []
        bus.subscribe(ScoringEvent, received.append)

        bus.emit(ScoringEvent(team=1, points=3, scoring_type="FG"))
        bus.emit(TurnoverEvent(losing_team=1, gaining_team=-1))

        assert len(received) == 1
        assert received[0].points == 3

    def test_subscribe_all(self):
        bus = EventBus()
        received = []
        bus.subscribe_all(received.append)

        bus.emit(ScoringEvent())
        bus.emit(TurnoverEvent())

        assert len(received) == 2

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        bus.subscribe(ScoringEvent, received.append)
        bus.unsubscribe(ScoringEvent, received.append)

        bus.emit(ScoringEvent())

        assert received == []
        assert bus.handler_count(ScoringEvent) == 0

    def test_handler_may_unsubscribe_during_emit(self):
        bus = EventBus()
        calls = []

        def once(event: GameEvent) -> None:
            calls.append(event)
            bus.unsubscribe_all(once)

        bus.subscribe_all(once)
        bus.emit(ScoringEvent())
        bus.emit(ScoringEvent())

        assert len(calls) == 1

    def test_clear(self):
        bus = EventBus()
        bus.subscribe(ScoringEvent, print)
        bus.subscribe_all(print)
        bus.clear()
        assert bus.handler_count() == 0

    def test_subscribe_many(self):
        bus = EventBus()
        received = []
        bus.subscribe_many((ScoringEvent, TurnoverEvent), received.append)

        bus.emit(ScoringEvent())
        bus.emit(TurnoverEvent())
        bus.emit(GameEvent())

        assert len(received) == 2
        assert bus.handler_count() == 2
