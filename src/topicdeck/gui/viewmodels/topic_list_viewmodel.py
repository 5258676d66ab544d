"""TopicListViewModel — composition root of the topic list view.

Pure Python. Wires query state, fetch orchestrator, selection set and the
destructive action coordinator together and exposes what a view needs to
render the list: rows, loading flag and page count from the shared read
model, plus the query, selection and confirmation handles.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional

from topicdeck.application.use_cases.base import UseCaseResponse
from topicdeck.config import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SHOW_INTERNAL,
    EMPTY_LIST_MESSAGE,
    FIRST_PAGE,
)
from topicdeck.domain.models import SortSpec, Topic, TopicListRequest
from topicdeck.errors import ApplicationError, InvalidActionError, ReadOnlyClusterError
from topicdeck.errors.handler import ErrorHandler, ErrorSeverity
from topicdeck.events.bus import EventBus
from topicdeck.events.topic_events import TopicMessagesPurgedEvent, TopicsDeletedEvent
from topicdeck.gui.services.pagination_service import PaginationParams, PaginationService
from topicdeck.gui.viewmodels.base import BaseViewModel
from topicdeck.gui.viewmodels.destructive_action import (
    ConfirmationState,
    DeleteManyCapability,
    DestructiveActionCoordinator,
    PurgeManyCapability,
)
from topicdeck.gui.viewmodels.fetch_orchestrator import FetchCapability, FetchOrchestrator
from topicdeck.gui.viewmodels.query_state import QueryState
from topicdeck.gui.viewmodels.selection_set import SelectionSet
from topicdeck.gui.viewmodels.signal import Signal


class TopicListViewModel(BaseViewModel):
    """Topic list ViewModel.

    *store* is the read model the fetch capability delivers into; it must
    expose ``topics``, ``total_pages`` and ``is_fetching`` observable
    properties (see ``TopicListStore``). Page and page size come in as
    arguments (normally parsed from the location) and go back out through
    ``navigation_requested`` and the optional *pagination* service.

    While a confirmation is pending the selection is locked, and on a
    read-only cluster every mutating control is unavailable. Using a
    control that should not be reachable raises ``InvalidActionError``.
    """

    def __init__(
        self,
        cluster_name: str,
        *,
        store: Any,
        fetch_list: FetchCapability,
        delete_topics: DeleteManyCapability,
        purge_topics: PurgeManyCapability,
        delete_topic: Optional[Callable[[str, str], Optional[UseCaseResponse]]] = None,
        purge_topic: Optional[Callable[..., Optional[UseCaseResponse]]] = None,
        sort: Optional[SortSpec] = None,
        page: int = FIRST_PAGE,
        per_page: int = DEFAULT_PAGE_SIZE,
        show_internal: bool = DEFAULT_SHOW_INTERNAL,
        read_only: bool = False,
        pagination: Optional[PaginationService] = None,
        error_handler: Optional[ErrorHandler] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        super().__init__()
        self._cluster_name = cluster_name
        self._store = store
        self._delete_topic = delete_topic
        self._purge_topic = purge_topic
        self._read_only = read_only
        self._pagination = pagination
        self._error_handler = error_handler
        self._logger = logging.getLogger(__name__)

        self.query = QueryState(
            cluster_name, sort=sort, page=page, per_page=per_page, show_internal=show_internal
        )
        self._written_location = self.location
        self._force_location_write = False
        self.orchestrator = FetchOrchestrator(fetch_list)
        self.selection = SelectionSet()
        self.confirmation = DestructiveActionCoordinator(
            cluster_name,
            self.selection,
            delete_topics,
            purge_topics,
            error_handler=error_handler,
        )

        # Signals
        self.navigation_requested = Signal()  # emits (PaginationParams)
        self.row_action_completed = Signal()  # emits (action, name, response)

        self.query.changed.connect(self._on_query_changed)
        if pagination is not None:
            pagination.location_changed.connect(self._on_location_changed)
        if event_bus is not None:
            self.subscribe_event(event_bus, TopicsDeletedEvent, self._on_topics_mutated)
            self.subscribe_event(event_bus, TopicMessagesPurgedEvent, self._on_topics_mutated)

    # -- lifecycle ---------------------------------------------------------

    def mount(self) -> None:
        """Issue the initial fetch."""
        self.orchestrator.mount(self.query.current_request())

    def dispose(self) -> None:
        self.orchestrator.unmount()
        self.query.changed.disconnect(self._on_query_changed)
        if self._pagination is not None:
            self._pagination.location_changed.disconnect(self._on_location_changed)
        super().dispose()

    # -- read side ---------------------------------------------------------

    @property
    def cluster_name(self) -> str:
        return self._cluster_name

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def topics(self) -> List[Topic]:
        return self._store.topics.value

    @property
    def total_pages(self) -> int:
        return self._store.total_pages.value

    @property
    def is_fetching(self) -> bool:
        return self._store.is_fetching.value

    @property
    def empty_message(self) -> Optional[str]:
        if self.is_fetching or self.topics:
            return None
        return EMPTY_LIST_MESSAGE

    @property
    def search(self) -> str:
        return self.query.search

    @property
    def sort(self) -> Optional[SortSpec]:
        return self.query.sort

    @property
    def page(self) -> int:
        return self.query.page

    @property
    def per_page(self) -> int:
        return self.query.per_page

    @property
    def show_internal(self) -> bool:
        return self.query.show_internal

    @property
    def location(self) -> PaginationParams:
        return PaginationParams(page=self.query.page, per_page=self.query.per_page)

    def current_request(self) -> TopicListRequest:
        return self.query.current_request()

    def is_selected(self, name: str) -> bool:
        return self.selection.has(name)

    @property
    def selected_names(self) -> tuple[str, ...]:
        return self.selection.snapshot()

    @property
    def pending_confirmation(self) -> ConfirmationState:
        return self.confirmation.pending

    @property
    def confirmation_message(self) -> Optional[str]:
        return self.confirmation.confirmation_message

    @property
    def selection_enabled(self) -> bool:
        return not self._read_only

    @property
    def selection_locked(self) -> bool:
        return self.confirmation.is_pending

    @property
    def bulk_actions_visible(self) -> bool:
        return not self._read_only and self.selection.size() > 0

    # -- query -------------------------------------------------------------

    def set_search(self, text: str) -> None:
        self.query.set_search(text)

    def set_sort(self, sort: Optional[SortSpec]) -> None:
        self.query.set_sort(sort)

    def set_page(self, page: int) -> None:
        self.query.set_page(page)

    def set_page_size(self, per_page: int) -> None:
        self.query.set_page_size(per_page)

    def set_include_internal(self, show_internal: bool) -> PaginationParams:
        """Switch internal topics on or off and send the location back to page 1.

        Returns the location the caller has to persist.
        """
        self._force_location_write = True
        try:
            self.query.set_include_internal(show_internal)
        finally:
            self._force_location_write = False
        return self.location

    def toggle_include_internal(self) -> PaginationParams:
        return self.set_include_internal(not self.query.show_internal)

    def apply_location(self, page: int, per_page: int) -> None:
        if page == self.query.page and per_page == self.query.per_page:
            return
        self._written_location = PaginationParams(page=page, per_page=per_page)
        self.query.apply_location(page, per_page)

    def refresh(self) -> None:
        self.orchestrator.refresh(self.query.current_request())

    # -- selection ---------------------------------------------------------

    def toggle_selection(self, name: str) -> bool:
        self._check_writable("select topics")
        self._check_unlocked()
        return self.selection.toggle(name)

    def clear_selection(self) -> None:
        self._check_unlocked()
        self.selection.clear()

    # -- bulk actions ------------------------------------------------------

    def request_delete(self) -> None:
        self._check_bulk_available()
        self.confirmation.request_delete()

    def request_purge(self) -> None:
        self._check_bulk_available()
        self.confirmation.request_purge()

    def cancel_confirmation(self) -> None:
        self.confirmation.cancel()

    def confirm(self) -> Optional[UseCaseResponse]:
        return self.confirmation.confirm()

    # -- per-row actions ---------------------------------------------------

    def delete_topic(self, name: str) -> Optional[UseCaseResponse]:
        self._check_writable("delete a topic")
        if self._delete_topic is None:
            raise InvalidActionError("Single-topic delete is not available")
        return self._run_row_action("delete", name, lambda: self._delete_topic(self._cluster_name, name))

    def purge_topic(
        self, name: str, partitions: Optional[Iterable[int]] = None
    ) -> Optional[UseCaseResponse]:
        self._check_writable("purge a topic")
        if self._purge_topic is None:
            raise InvalidActionError("Single-topic purge is not available")
        selected = list(partitions) if partitions is not None else None
        return self._run_row_action(
            "purge", name, lambda: self._purge_topic(self._cluster_name, name, selected)
        )

    # -- internal ----------------------------------------------------------

    def _run_row_action(
        self, action: str, name: str, call: Callable[[], Optional[UseCaseResponse]]
    ) -> Optional[UseCaseResponse]:
        response = call()
        if response is not None and not response.success:
            self._logger.warning("Failed to %s topic %s: %s", action, name, response.error)
            if self._error_handler is not None:
                self._error_handler.handle(
                    ApplicationError(response.error or f"{action} failed"),
                    ErrorSeverity.ERROR,
                    {"cluster_name": self._cluster_name, "action": action, "topic": name},
                )
        self.row_action_completed.emit(action, name, response)
        return response

    def _check_writable(self, what: str) -> None:
        if self._read_only:
            raise ReadOnlyClusterError(f"Cannot {what}: cluster {self._cluster_name} is read-only")

    def _check_unlocked(self) -> None:
        if self.confirmation.is_pending:
            raise InvalidActionError("Selection is locked while a confirmation is pending")

    def _check_bulk_available(self) -> None:
        self._check_writable("run bulk actions")
        if self.selection.size() == 0:
            raise InvalidActionError("Bulk actions need at least one selected topic")

    def _on_query_changed(self, request: TopicListRequest) -> None:
        self.orchestrator.sync(request)
        self._write_location(force=self._force_location_write)

    def _write_location(self, force: bool = False) -> None:
        params = self.location
        if params == self._written_location and not force:
            return
        self._written_location = params
        self.navigation_requested.emit(params)
        if self._pagination is not None and self._pagination.params != params:
            self._pagination.navigate(params)

    def _on_location_changed(self, url: str, params: PaginationParams) -> None:
        self.apply_location(params.page, params.per_page)

    def _on_topics_mutated(self, event) -> None:
        if event.cluster_name != self._cluster_name:
            return
        self._logger.debug("Refreshing %s after %s", self._cluster_name, type(event).__name__)
        self.refresh()
