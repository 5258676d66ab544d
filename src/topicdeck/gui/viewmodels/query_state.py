"""Search, sort, pagination and internal-topic filter of one topic list view."""

from __future__ import annotations

from typing import Optional

from topicdeck.config import DEFAULT_PAGE_SIZE, DEFAULT_SHOW_INTERNAL, FIRST_PAGE
from topicdeck.domain.models import SortSpec, TopicListRequest
from topicdeck.errors import InvalidQueryError
from topicdeck.gui.viewmodels.signal import Signal


def _check_page(page: int) -> int:
    if isinstance(page, bool) or not isinstance(page, int) or page < FIRST_PAGE:
        raise InvalidQueryError(f"Page must be an integer >= {FIRST_PAGE}, got {page!r}")
    return page


def _check_page_size(per_page: int) -> int:
    if isinstance(per_page, bool) or not isinstance(per_page, int) or per_page <= 0:
        raise InvalidQueryError(f"Page size must be a positive integer, got {per_page!r}")
    return per_page


class QueryState:
    """Holds the five query inputs and derives the fetch request from them.

    Any change other than a page change moves back to the first page, since
    a page number means nothing once the filter or the ordering changed.
    ``changed`` fires with the derived request after every mutation, even
    when the request came out identical; deduplication is left to the
    fetch orchestrator.
    """

    def __init__(
        self,
        cluster_name: str,
        *,
        search: str = "",
        sort: Optional[SortSpec] = None,
        page: int = FIRST_PAGE,
        per_page: int = DEFAULT_PAGE_SIZE,
        show_internal: bool = DEFAULT_SHOW_INTERNAL,
    ) -> None:
        self._cluster_name = cluster_name
        self._search = search
        self._sort = sort
        self._page = _check_page(page)
        self._per_page = _check_page_size(per_page)
        self._show_internal = bool(show_internal)

        self.changed = Signal()  # emits (request: TopicListRequest)

    # -- read side ---------------------------------------------------------

    @property
    def cluster_name(self) -> str:
        return self._cluster_name

    @property
    def search(self) -> str:
        return self._search

    @property
    def sort(self) -> Optional[SortSpec]:
        return self._sort

    @property
    def page(self) -> int:
        return self._page

    @property
    def per_page(self) -> int:
        return self._per_page

    @property
    def show_internal(self) -> bool:
        return self._show_internal

    def current_request(self) -> TopicListRequest:
        sort = self._sort
        return TopicListRequest(
            cluster_name=self._cluster_name,
            page=self._page,
            per_page=self._per_page,
            search=self._search,
            show_internal=self._show_internal,
            order_by=sort.column if sort is not None else None,
            sort_order=sort.order if sort is not None else None,
        )

    # -- mutators ----------------------------------------------------------

    def set_search(self, text: str) -> None:
        self._search = text or ""
        self._page = FIRST_PAGE
        self._notify()

    def set_sort(self, sort: Optional[SortSpec]) -> None:
        self._sort = sort
        self._page = FIRST_PAGE
        self._notify()

    def set_include_internal(self, show_internal: bool) -> None:
        self._show_internal = bool(show_internal)
        self._page = FIRST_PAGE
        self._notify()

    def set_page_size(self, per_page: int) -> None:
        self._per_page = _check_page_size(per_page)
        self._page = FIRST_PAGE
        self._notify()

    def set_page(self, page: int) -> None:
        self._page = _check_page(page)
        self._notify()

    def apply_location(self, page: int, per_page: int) -> None:
        """Take page and page size from the external location in one step.

        Unlike :meth:`set_page_size` this keeps *page*, because the location
        already carries a consistent pair.
        """
        self._page = _check_page(page)
        self._per_page = _check_page_size(per_page)
        self._notify()

    def _notify(self) -> None:
        self.changed.emit(self.current_request())
