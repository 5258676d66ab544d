"""Fetch capability that queries the topic repository page by page."""

from __future__ import annotations

import logging
from typing import Optional

from topicdeck.application.services.topic_list_store import TopicListStore
from topicdeck.domain.models import TopicListRequest
from topicdeck.domain.repositories import ITopicRepository
from topicdeck.events.bus import EventBus
from topicdeck.events.topic_events import TopicListFetchedEvent

LOGGER = logging.getLogger(__name__)


class TopicListService:
    """Runs one list query and hands the page to the shared store.

    Callers get nothing back: results are observed through the store.
    Repository errors propagate to the caller once the fetching flag has
    been cleared.
    """

    def __init__(
        self,
        repository: ITopicRepository,
        store: TopicListStore,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self._repository = repository
        self._store = store
        self._event_bus = event_bus

    @property
    def store(self) -> TopicListStore:
        return self._store

    def fetch_list(self, request: TopicListRequest) -> None:
        LOGGER.debug("Fetching topics %s", request.as_params())
        self._store.begin(request)
        try:
            page = self._repository.find(request)
            self._store.accept(request, page)
        finally:
            self._store.finish()

        if self._event_bus is not None:
            self._event_bus.publish(
                TopicListFetchedEvent(
                    cluster_name=request.cluster_name,
                    page=page.page,
                    total_pages=page.total_pages,
                    topic_count=len(page.topics),
                )
            )

    __call__ = fetch_list
