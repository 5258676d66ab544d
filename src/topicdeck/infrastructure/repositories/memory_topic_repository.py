import json
import logging
import threading
from dataclasses import replace
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from topicdeck.domain.models import (
    SortOrder,
    Topic,
    TopicColumnsToSort,
    TopicListPage,
    TopicListRequest,
)
from topicdeck.domain.repositories import ITopicRepository
from topicdeck.errors import TopicNotFoundError, TopicSourceError
from topicdeck.utils.jsonio import write_json

_logger = logging.getLogger(__name__)

_SORT_KEYS: Dict[TopicColumnsToSort, Callable[[Topic], object]] = {
    TopicColumnsToSort.NAME: lambda topic: topic.name,
    TopicColumnsToSort.TOTAL_PARTITIONS: lambda topic: (topic.partition_count, topic.name),
    TopicColumnsToSort.OUT_OF_SYNC_REPLICAS: lambda topic: (topic.out_of_sync_replicas, topic.name),
}


def _detached(topic: Topic) -> Topic:
    # Rows handed out must not change when the stored topic is purged later.
    return replace(topic, partition_messages=list(topic.partition_messages))


class InMemoryTopicRepository(ITopicRepository):
    """Topic collection of one cluster held in process memory."""

    def __init__(self, cluster_name: str, topics: Optional[Iterable[Topic]] = None):
        self._cluster_name = cluster_name
        self._topics: Dict[str, Topic] = {}
        self._lock = threading.Lock()
        for topic in topics or []:
            topic.cluster_name = cluster_name
            self._topics[topic.name] = topic

    @property
    def cluster_name(self) -> str:
        return self._cluster_name

    def get(self, name: str) -> Optional[Topic]:
        with self._lock:
            return self._topics.get(name)

    def list_names(self) -> List[str]:
        with self._lock:
            return sorted(self._topics)

    def find(self, request: TopicListRequest) -> TopicListPage:
        needle = request.search.strip().lower()
        with self._lock:
            rows = [
                _detached(topic)
                for topic in self._topics.values()
                if (request.show_internal or not topic.is_internal)
                and (not needle or needle in topic.name.lower())
            ]

        column = request.order_by or TopicColumnsToSort.NAME
        reverse = request.order_by is not None and request.sort_order == SortOrder.DESC
        rows.sort(key=_SORT_KEYS[column], reverse=reverse)

        offset = request.offset
        page_rows = rows[offset: offset + request.per_page]
        _logger.debug(
            "find(%s): %d matches, returning %d", request.as_params(), len(rows), len(page_rows)
        )
        return TopicListPage(
            topics=page_rows,
            page=request.page,
            per_page=request.per_page,
            total_count=len(rows),
        )

    def delete(self, name: str) -> None:
        with self._lock:
            if name not in self._topics:
                raise TopicNotFoundError(f"Topic not found: {name}")
            del self._topics[name]
        _logger.info("Deleted topic %s from %s", name, self._cluster_name)

    def purge(self, name: str, partitions: Optional[Iterable[int]] = None) -> int:
        with self._lock:
            topic = self._topics.get(name)
            if topic is None:
                raise TopicNotFoundError(f"Topic not found: {name}")
            targets = range(len(topic.partition_messages)) if partitions is None else list(partitions)
            removed = 0
            for partition in targets:
                if 0 <= partition < len(topic.partition_messages):
                    removed += topic.partition_messages[partition]
                    topic.partition_messages[partition] = 0
        _logger.info("Purged %d records from %s", removed, name)
        return removed


def load_topics_json(path: Path, cluster_name: str) -> InMemoryTopicRepository:
    """Seed a repository from a JSON file holding a list of topic objects."""
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise TopicSourceError(f"Cannot read topics from {path}: {exc}") from exc

    if isinstance(payload, dict):
        payload = payload.get("topics", [])
    if not isinstance(payload, list):
        raise TopicSourceError(f"Expected a list of topics in {path}")

    try:
        topics = [Topic.from_dict(entry, cluster_name) for entry in payload]
    except (KeyError, TypeError, ValueError) as exc:
        raise TopicSourceError(f"Malformed topic entry in {path}: {exc}") from exc
    return InMemoryTopicRepository(cluster_name, topics)


def save_topics_json(repository: InMemoryTopicRepository, path: Path) -> None:
    """Write the repository contents back in the format :func:`load_topics_json` reads."""
    rows = []
    for name in repository.list_names():
        topic = repository.get(name)
        if topic is None:
            continue
        rows.append(
            {
                "name": topic.name,
                "internal": topic.internal,
                "partitions": topic.partition_count,
                "replication_factor": topic.replication_factor,
                "out_of_sync_replicas": topic.out_of_sync_replicas,
                "partition_messages": list(topic.partition_messages),
                "segment_size": topic.segment_size,
            }
        )
    write_json(Path(path), rows)
