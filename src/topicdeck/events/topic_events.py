from dataclasses import dataclass
from typing import Optional

from .domain_events import DomainEvent


@dataclass(frozen=True)
class TopicListFetchedEvent(DomainEvent):
    cluster_name: str = ""
    page: int = 1
    total_pages: int = 0
    topic_count: int = 0


@dataclass(frozen=True)
class TopicsDeletedEvent(DomainEvent):
    cluster_name: str = ""
    topic_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class TopicMessagesPurgedEvent(DomainEvent):
    cluster_name: str = ""
    topic_names: tuple[str, ...] = ()
    partitions: Optional[tuple[int, ...]] = None
    records_removed: int = 0
