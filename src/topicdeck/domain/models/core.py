from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from topicdeck.config import INTERNAL_TOPIC_PREFIX


@dataclass(frozen=True)
class TopicRef:
    """Key of one list row: unique by ``name`` within a single response."""

    name: str
    cluster_name: str


@dataclass
class Topic:
    name: str
    cluster_name: str = ""
    internal: bool = False
    partition_count: int = 1
    replication_factor: int = 1
    out_of_sync_replicas: int = 0
    # Per-partition message counts; index is the partition number.
    partition_messages: List[int] = field(default_factory=list)
    segment_size: int = 0

    @property
    def ref(self) -> TopicRef:
        return TopicRef(name=self.name, cluster_name=self.cluster_name)

    @property
    def message_count(self) -> int:
        return sum(self.partition_messages)

    @property
    def is_internal(self) -> bool:
        return self.internal or self.name.startswith(INTERNAL_TOPIC_PREFIX)

    @classmethod
    def from_dict(cls, data: dict, cluster_name: Optional[str] = None) -> Topic:
        partitions = int(data.get("partitions", data.get("partition_count", 1)))
        messages = list(data.get("partition_messages") or [0] * partitions)
        return cls(
            name=str(data["name"]),
            cluster_name=cluster_name or str(data.get("cluster_name", "")),
            internal=bool(data.get("internal", False)),
            partition_count=partitions,
            replication_factor=int(data.get("replication_factor", 1)),
            out_of_sync_replicas=int(data.get("out_of_sync_replicas", 0)),
            partition_messages=[int(count) for count in messages],
            segment_size=int(data.get("segment_size", 0)),
        )


@dataclass
class TopicListPage:
    """One page of the remote topic collection."""

    topics: List[Topic] = field(default_factory=list)
    page: int = 1
    per_page: int = 0
    total_count: int = 0

    @property
    def total_pages(self) -> int:
        if self.per_page <= 0 or self.total_count <= 0:
            return 0
        return (self.total_count + self.per_page - 1) // self.per_page
