from .bus import Event, EventBus, Subscription
from .domain_events import DomainEvent
from .topic_events import (
    TopicListFetchedEvent,
    TopicMessagesPurgedEvent,
    TopicsDeletedEvent,
)

__all__ = [
    "DomainEvent",
    "Event",
    "EventBus",
    "Subscription",
    "TopicListFetchedEvent",
    "TopicMessagesPurgedEvent",
    "TopicsDeletedEvent",
]
