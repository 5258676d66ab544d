"""Shared read model that fetched topic pages are delivered into."""

from __future__ import annotations

import logging
from typing import Optional

from topicdeck.domain.models import TopicListPage, TopicListRequest
from topicdeck.gui.viewmodels.signal import ObservableProperty

LOGGER = logging.getLogger(__name__)


class TopicListStore:
    """Last-write-wins sink for topic list results.

    Every accepted page replaces the previous one, regardless of which
    request produced it; ordering between overlapping fetches is not
    reconciled here.
    """

    def __init__(self) -> None:
        self.topics = ObservableProperty([])
        self.total_pages = ObservableProperty(0)
        self.is_fetching = ObservableProperty(False)
        self.last_request: Optional[TopicListRequest] = None

    def begin(self, request: TopicListRequest) -> None:
        self.is_fetching.value = True

    def accept(self, request: TopicListRequest, page: TopicListPage) -> None:
        self.last_request = request
        self.topics.value = list(page.topics)
        self.total_pages.value = page.total_pages
        LOGGER.debug(
            "Accepted page %d of %d (%d topics)", page.page, page.total_pages, len(page.topics)
        )

    def finish(self) -> None:
        self.is_fetching.value = False
