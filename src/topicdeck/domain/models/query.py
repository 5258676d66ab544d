from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class TopicColumnsToSort(str, Enum):
    NAME = "NAME"
    TOTAL_PARTITIONS = "TOTAL_PARTITIONS"
    OUT_OF_SYNC_REPLICAS = "OUT_OF_SYNC_REPLICAS"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class SortSpec:
    column: TopicColumnsToSort
    order: SortOrder = SortOrder.ASC


@dataclass(frozen=True)
class TopicListRequest:
    """Canonical parameters of one topic-list fetch.

    Two requests compare equal exactly when they would fetch the same page,
    which is what the fetch orchestrator relies on to skip redundant calls.
    """

    cluster_name: str
    page: int = 1
    per_page: int = 25
    search: str = ""
    show_internal: bool = True
    order_by: Optional[TopicColumnsToSort] = None
    sort_order: Optional[SortOrder] = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    def as_params(self) -> Dict[str, Any]:
        """Render the request as remote query parameters.

        The sort keys are left out altogether when no column is selected so
        the remote default ordering applies.
        """
        params: Dict[str, Any] = {
            "clusterName": self.cluster_name,
            "page": self.page,
            "perPage": self.per_page,
            "search": self.search,
            "showInternal": self.show_internal,
        }
        if self.order_by is not None:
            params["orderBy"] = self.order_by.value
            params["sortOrder"] = (self.sort_order or SortOrder.ASC).value
        return params
