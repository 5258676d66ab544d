"""ViewModelFactory — builds topic list viewmodels from the DI ``Container``."""

from __future__ import annotations

from typing import Optional

from topicdeck.application.services import TopicListService, TopicListStore
from topicdeck.application.use_cases import (
    DeleteTopicsUseCase,
    DeleteTopicUseCase,
    PurgeTopicsUseCase,
    PurgeTopicUseCase,
)
from topicdeck.config import DEFAULT_PAGE_SIZE, DEFAULT_SHOW_INTERNAL
from topicdeck.di.container import Container
from topicdeck.domain.models import SortSpec
from topicdeck.errors.handler import ErrorHandler
from topicdeck.events.bus import EventBus
from topicdeck.gui.services.pagination_service import PaginationParams, PaginationService
from topicdeck.gui.viewmodels.topic_list_viewmodel import TopicListViewModel


class ViewModelFactory:
    def __init__(self, container: Container) -> None:
        self._container = container

    def create_topic_list_vm(
        self,
        cluster_name: str,
        *,
        location: Optional[PaginationParams] = None,
        sort: Optional[SortSpec] = None,
        per_page: int = DEFAULT_PAGE_SIZE,
        show_internal: bool = DEFAULT_SHOW_INTERNAL,
        read_only: bool = False,
        pagination: Optional[PaginationService] = None,
    ) -> TopicListViewModel:
        """Create a list viewmodel; *location* wins over *per_page* when given."""
        resolve = self._container.resolve
        location = location or PaginationParams(per_page=per_page)
        return TopicListViewModel(
            cluster_name,
            store=resolve(TopicListStore),
            fetch_list=resolve(TopicListService).fetch_list,
            delete_topics=resolve(DeleteTopicsUseCase),
            purge_topics=resolve(PurgeTopicsUseCase),
            delete_topic=resolve(DeleteTopicUseCase),
            purge_topic=resolve(PurgeTopicUseCase),
            sort=sort,
            page=location.page,
            per_page=location.per_page,
            show_internal=show_internal,
            read_only=read_only,
            pagination=pagination,
            error_handler=resolve(ErrorHandler),
            event_bus=resolve(EventBus),
        )
