import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .base import UseCase, UseCaseRequest, UseCaseResponse
from topicdeck.domain.repositories import ITopicRepository
from topicdeck.errors import TopicDeckError
from topicdeck.events.bus import EventBus
from topicdeck.events.topic_events import TopicMessagesPurgedEvent


@dataclass(frozen=True)
class PurgeTopicsRequest(UseCaseRequest):
    cluster_name: str = ""
    topic_names: Tuple[str, ...] = ()
    # None clears every partition.
    partitions: Optional[Tuple[int, ...]] = None


@dataclass(frozen=True)
class PurgeTopicsResponse(UseCaseResponse):
    purged: Tuple[str, ...] = ()
    records_removed: int = 0
    failed: Dict[str, str] = field(default_factory=dict)


class PurgeTopicsUseCase(UseCase):
    """Clear the messages of every named topic, keeping the topics themselves."""

    def __init__(self, topic_repo: ITopicRepository, event_bus: EventBus):
        self._topic_repo = topic_repo
        self._event_bus = event_bus
        self._logger = logging.getLogger(__name__)

    def execute(self, request: PurgeTopicsRequest) -> PurgeTopicsResponse:
        purged: list[str] = []
        failed: Dict[str, str] = {}
        removed = 0
        for name in request.topic_names:
            try:
                removed += self._topic_repo.purge(name, request.partitions)
            except TopicDeckError as exc:
                failed[name] = str(exc)
                continue
            purged.append(name)

        if purged:
            self._event_bus.publish(
                TopicMessagesPurgedEvent(
                    cluster_name=request.cluster_name,
                    topic_names=tuple(purged),
                    partitions=request.partitions,
                    records_removed=removed,
                )
            )
        self._logger.info("Purged %d record(s) from %d topic(s)", removed, len(purged))
        if failed:
            return PurgeTopicsResponse(
                success=False,
                error=f"Failed to purge {len(failed)} topic(s): {', '.join(sorted(failed))}",
                purged=tuple(purged),
                records_removed=removed,
                failed=failed,
            )
        return PurgeTopicsResponse(success=True, purged=tuple(purged), records_removed=removed)

    def __call__(self, cluster_name: str, topic_names, partitions=None) -> PurgeTopicsResponse:
        return self.execute(
            PurgeTopicsRequest(
                cluster_name=cluster_name,
                topic_names=tuple(topic_names),
                partitions=tuple(partitions) if partitions is not None else None,
            )
        )


@dataclass(frozen=True)
class PurgeTopicRequest(UseCaseRequest):
    cluster_name: str = ""
    topic_name: str = ""
    partitions: Optional[Tuple[int, ...]] = None


class PurgeTopicUseCase(UseCase):
    """Single-row purge, optionally limited to some partitions."""

    def __init__(self, topic_repo: ITopicRepository, event_bus: EventBus):
        self._bulk = PurgeTopicsUseCase(topic_repo, event_bus)

    def execute(self, request: PurgeTopicRequest) -> PurgeTopicsResponse:
        return self._bulk.execute(
            PurgeTopicsRequest(
                cluster_name=request.cluster_name,
                topic_names=(request.topic_name,),
                partitions=request.partitions,
            )
        )

    def __call__(self, cluster_name: str, topic_name: str, partitions=None) -> PurgeTopicsResponse:
        return self.execute(
            PurgeTopicRequest(
                cluster_name=cluster_name,
                topic_name=topic_name,
                partitions=tuple(partitions) if partitions is not None else None,
            )
        )
