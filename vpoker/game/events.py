"""Synchronous event notification for the game session."""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Notifications published by a game session."""
    BET_CHANGED = "bet_changed"          # old, new
    CREDITS_CHANGED = "credits_changed"  # old, new
    ROUND_STARTED = "round_started"      # bet
    CARDS_DEALT = "cards_dealt"          # cards, positions
    CARD_HELD = "card_held"              # index, held
    ROUND_ENDED = "round_ended"          # category, payout


@dataclass
class GameEvent:
    """An event and its payload."""
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


Handler = Callable[[GameEvent], None]


class EventBus:
    """
    In-process publish/subscribe.

    publish() calls every handler for the event type before returning,
    in the order the handlers subscribed. Handler exceptions propagate to
    the publisher.
    """

    def __init__(self):
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)
        self._any_handlers: list[Handler] = []

    def subscribe(self, event_type: EventType, handler: Handler) -> None:
        """Register a handler for one event type."""
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: Handler) -> None:
        """Register a handler for every event type."""
        self._any_handlers.append(handler)

    def unsubscribe(self, event_type: EventType, handler: Handler) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: GameEvent) -> None:
        """Deliver an event to its subscribers."""
        logger.debug("Event %s %s", event.type.value, event.data)
        for handler in list(self._handlers.get(event.type, [])):
            handler(event)
        for handler in list(self._any_handlers):
            handler(event)

    def emit(self, event_type: EventType, **data: Any) -> GameEvent:
        """Build and publish an event in one call."""
        event = GameEvent(event_type, data)
        self.publish(event)
        return event
