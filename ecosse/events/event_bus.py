"""Synchronous event bus for domain event dispatch.

The EventBus provides a lightweight, synchronous pub/sub mechanism for
decoupling the genetics/food-web core from whatever turns its notifications
into organism adjustments, statistics, or telemetry.

Design goals:
- Zero overhead when no subscribers (single dict lookup)
- Synchronous for determinism within a simulation tick
- Type-safe dispatch via event type
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class NotificationSink(Protocol):
    """Anything the core can publish notifications to.

    The core never imports a concrete global bus; components receive a sink
    (usually an EventBus) at construction time.
    """

    def emit(self, event: object) -> None:
        """Publish a single event."""


class EventBus:
    """Synchronous event bus for domain events.

    Events are dispatched immediately to all registered handlers.
    With no subscribers, emit() is essentially a no-op (dict lookup only).

    Example:
        bus = EventBus()
        bus.subscribe(ElementRemovedEvent, handle_removal)
        bus.emit(ElementRemovedEvent(element_type="creature", cause="starvation"))
    """

    def __init__(self) -> None:
        """Initialize an empty event bus."""
        self._handlers: dict[type, list[Callable]] = defaultdict(list)

    def emit(self, event: object) -> None:
        """Emit an event to all registered handlers.

        Handlers are called synchronously in registration order. A handler
        may emit further events; those are dispatched depth-first.

        Args:
            event: The domain event to dispatch
        """
        handlers = self._handlers.get(type(event))
        if handlers:
            # Copy so handlers may unsubscribe while being dispatched
            for handler in list(handlers):
                handler(event)

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """Register a handler for a specific event type.

        Args:
            event_type: The event class to subscribe to
            handler: Callable that receives the event instance
        """
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> bool:
        """Remove a handler for a specific event type.

        Returns:
            True if handler was found and removed, False otherwise
        """
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def clear_subscribers(self) -> None:
        """Remove all registered handlers."""
        self._handlers.clear()

    def has_subscribers(self, event_type: type) -> bool:
        """Check if any handlers are registered for an event type."""
        return bool(self._handlers.get(event_type))

    def subscriber_count(self, event_type: type) -> int:
        """Get the number of handlers registered for an event type."""
        return len(self._handlers.get(event_type, []))


class RecordingSink:
    """Sink that keeps every emitted event in order.

    Handy for tests and for hosts that batch notifications per tick.
    """

    def __init__(self) -> None:
        self.events: list[object] = []

    def emit(self, event: object) -> None:
        self.events.append(event)

    def of_type(self, event_type: type[T]) -> list[T]:
        return [event for event in self.events if isinstance(event, event_type)]

    def clear(self) -> None:
        self.events.clear()
