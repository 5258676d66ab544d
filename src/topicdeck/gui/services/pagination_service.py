"""PaginationService — the query-string location that page state lives in.

Page number and page size are owned by the location (``?page=2&perPage=50``),
not by the list viewmodel. Pure Python, no Qt dependency.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlencode

from topicdeck.config import DEFAULT_PAGE_SIZE, FIRST_PAGE, PAGE_PARAM, PER_PAGE_PARAM
from topicdeck.gui.viewmodels.signal import Signal


def _positive_int(raw: Optional[list[str]], fallback: int) -> int:
    if not raw:
        return fallback
    try:
        value = int(raw[0])
    except (TypeError, ValueError):
        return fallback
    return value if value > 0 else fallback


@dataclass(frozen=True)
class PaginationParams:
    page: int = FIRST_PAGE
    per_page: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_query(cls, query: str, default_per_page: int = DEFAULT_PAGE_SIZE) -> PaginationParams:
        """Parse ``page``/``perPage``; missing or malformed values fall back to defaults."""
        parsed = parse_qs(query.lstrip("?"))
        return cls(
            page=_positive_int(parsed.get(PAGE_PARAM), FIRST_PAGE),
            per_page=_positive_int(parsed.get(PER_PAGE_PARAM), default_per_page),
        )

    def to_query(self) -> str:
        return urlencode({PAGE_PARAM: self.page, PER_PAGE_PARAM: self.per_page})


class PaginationService:
    """Location store for one list view."""

    def __init__(self, pathname: str, params: Optional[PaginationParams] = None) -> None:
        self._pathname = pathname
        self._params = params or PaginationParams()
        self._history: list[PaginationParams] = [self._params]
        self.location_changed = Signal()  # emits (url: str, params: PaginationParams)

    @property
    def pathname(self) -> str:
        return self._pathname

    @property
    def params(self) -> PaginationParams:
        return self._params

    @property
    def url(self) -> str:
        return f"{self._pathname}?{self._params.to_query()}"

    @property
    def history_depth(self) -> int:
        return len(self._history)

    def navigate(self, params: PaginationParams) -> None:
        self._params = params
        self._history.append(params)
        self.location_changed.emit(self.url, params)

    def navigate_to_query(self, query: str) -> None:
        self.navigate(PaginationParams.from_query(query, self._params.per_page))

    def go_back(self) -> bool:
        """Go back one step. Returns ``True`` if navigation occurred."""
        if len(self._history) > 1:
            self._history.pop()
            self._params = self._history[-1]
            self.location_changed.emit(self.url, self._params)
            return True
        return False
