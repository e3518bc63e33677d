"""Events module for domain event dispatch.

This module provides the EventBus and the NotificationSink protocol the core
publishes through, plus typed domain event definitions.
"""

from ecosse.events.domain_events import (
    CascadeEffectEvent,
    ElementCreatedEvent,
    ElementRemovedEvent,
    GeneticReproductionEvent,
    MutationOccurredEvent,
)
from ecosse.events.event_bus import EventBus, NotificationSink, RecordingSink

__all__ = [
    "CascadeEffectEvent",
    "ElementCreatedEvent",
    "ElementRemovedEvent",
    "EventBus",
    "GeneticReproductionEvent",
    "MutationOccurredEvent",
    "NotificationSink",
    "RecordingSink",
]
