"""Event bus for pub/sub communication."""

from collections import defaultdict
from typing import Callable, Iterable, Optional, TypeVar

from beerball.events.types import GameEvent

T = TypeVar("T", bound=GameEvent)
EventHandler = Callable[[GameEvent], None]


class EventBus:
    """
    Pub/sub event bus between a game session and whoever is watching it.

    The session emits events after each committed action; renderers,
    loggers and the API subscribe without the session knowing about them.

    Example:
        bus = EventBus()

        def on_score(event: ScoringEvent):
            print(f"{event.scoring_type} for team {event.team}")

        bus.subscribe(ScoringEvent, on_score)
    """

    def __init__(self) -> None:
        self._handlers: dict[type[GameEvent], list[EventHandler]] = defaultdict(list)
        self._global_handlers: list[EventHandler] = []

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """Register a handler for one event type."""
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register a handler that receives every event."""
        self._global_handlers.append(handler)

    def subscribe_many(self, event_types: Iterable[type[GameEvent]], handler: EventHandler) -> None:
        """Register one handler for several event types."""
        for event_type in event_types:
            self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        if handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)

    def unsubscribe_all(self, handler: EventHandler) -> None:
        if handler in self._global_handlers:
            self._global_handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """
        Deliver an event.

        Handlers for the exact event type run first, then global handlers.
        """
        for handler in list(self._handlers[type(event)]):
            handler(event)

        for handler in list(self._global_handlers):
            handler(event)

    def clear(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()
        self._global_handlers.clear()

    def handler_count(self, event_type: Optional[type[GameEvent]] = None) -> int:
        """Number of handlers for `event_type`, or of all handlers when None."""
        if event_type is None:
            total = sum(len(handlers) for handlers in self._handlers.values())
            return total + len(self._global_handlers)
        return len(self._handlers[event_type])
