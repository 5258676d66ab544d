"""Issue one list fetch per distinct request."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from topicdeck.domain.models import TopicListRequest
from topicdeck.gui.viewmodels.signal import Signal

LOGGER = logging.getLogger(__name__)

FetchCapability = Callable[[TopicListRequest], None]


class FetchOrchestrator:
    """Forward request changes to a fire-and-forget fetch capability.

    Nothing is sent before :meth:`mount`. After that a request equal to the
    last one sent is dropped. In-flight fetches are never cancelled; their
    results land in the data source's read model in whatever order they
    finish. A capability that raises propagates to the caller and the
    request is not remembered, so the next change retries it.
    """

    def __init__(self, fetch_list: FetchCapability) -> None:
        self._fetch_list = fetch_list
        self._last_request: Optional[TopicListRequest] = None
        self._mounted = False
        self._fetch_count = 0

        self.fetch_issued = Signal()  # emits (request)

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def last_request(self) -> Optional[TopicListRequest]:
        return self._last_request

    @property
    def fetch_count(self) -> int:
        return self._fetch_count

    def mount(self, request: TopicListRequest) -> bool:
        self._mounted = True
        return self.sync(request)

    def unmount(self) -> None:
        self._mounted = False
        self._last_request = None

    def sync(self, request: TopicListRequest) -> bool:
        """Fetch *request* unless it is what was sent last. Returns whether a fetch went out."""
        if not self._mounted:
            return False
        if request == self._last_request:
            LOGGER.debug("Skipping fetch, request unchanged: %s", request)
            return False
        self._issue(request)
        return True

    def refresh(self, request: TopicListRequest) -> None:
        """Fetch *request* again even if it was the last one sent."""
        if not self._mounted:
            return
        self._issue(request)

    def _issue(self, request: TopicListRequest) -> None:
        self._fetch_list(request)
        self._last_request = request
        self._fetch_count += 1
        self.fetch_issued.emit(request)
