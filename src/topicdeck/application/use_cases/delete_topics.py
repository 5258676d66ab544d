import logging
from dataclasses import dataclass, field
from typing import Dict, Tuple

from .base import UseCase, UseCaseRequest, UseCaseResponse
from topicdeck.domain.repositories import ITopicRepository
from topicdeck.errors import TopicDeckError
from topicdeck.events.bus import EventBus
from topicdeck.events.topic_events import TopicsDeletedEvent


@dataclass(frozen=True)
class DeleteTopicsRequest(UseCaseRequest):
    cluster_name: str = ""
    topic_names: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DeleteTopicsResponse(UseCaseResponse):
    deleted: Tuple[str, ...] = ()
    failed: Dict[str, str] = field(default_factory=dict)


class DeleteTopicsUseCase(UseCase):
    """Delete every named topic; one rejected name does not stop the rest."""

    def __init__(self, topic_repo: ITopicRepository, event_bus: EventBus):
        self._topic_repo = topic_repo
        self._event_bus = event_bus
        self._logger = logging.getLogger(__name__)

    def execute(self, request: DeleteTopicsRequest) -> DeleteTopicsResponse:
        deleted: list[str] = []
        failed: Dict[str, str] = {}
        for name in request.topic_names:
            try:
                self._topic_repo.delete(name)
            except TopicDeckError as exc:
                failed[name] = str(exc)
                continue
            deleted.append(name)

        if deleted:
            self._event_bus.publish(
                TopicsDeletedEvent(cluster_name=request.cluster_name, topic_names=tuple(deleted))
            )
        self._logger.info(
            "Deleted %d topic(s) in %s, %d failed", len(deleted), request.cluster_name, len(failed)
        )
        if failed:
            return DeleteTopicsResponse(
                success=False,
                error=f"Failed to delete {len(failed)} topic(s): {', '.join(sorted(failed))}",
                deleted=tuple(deleted),
                failed=failed,
            )
        return DeleteTopicsResponse(success=True, deleted=tuple(deleted))

    def __call__(self, cluster_name: str, topic_names) -> DeleteTopicsResponse:
        return self.execute(DeleteTopicsRequest(cluster_name=cluster_name, topic_names=tuple(topic_names)))


@dataclass(frozen=True)
class DeleteTopicRequest(UseCaseRequest):
    cluster_name: str = ""
    topic_name: str = ""


class DeleteTopicUseCase(UseCase):
    """Single-row delete offered next to each topic in the list."""

    def __init__(self, topic_repo: ITopicRepository, event_bus: EventBus):
        self._bulk = DeleteTopicsUseCase(topic_repo, event_bus)

    def execute(self, request: DeleteTopicRequest) -> DeleteTopicsResponse:
        return self._bulk.execute(
            DeleteTopicsRequest(cluster_name=request.cluster_name, topic_names=(request.topic_name,))
        )

    def __call__(self, cluster_name: str, topic_name: str) -> DeleteTopicsResponse:
        return self.execute(DeleteTopicRequest(cluster_name=cluster_name, topic_name=topic_name))
