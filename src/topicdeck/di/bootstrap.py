import logging

from .container import Container
from topicdeck.application.services import TopicListService, TopicListStore
from topicdeck.application.use_cases import (
    DeleteTopicsUseCase,
    DeleteTopicUseCase,
    PurgeTopicsUseCase,
    PurgeTopicUseCase,
)
from topicdeck.domain.repositories import ITopicRepository
from topicdeck.errors.handler import ErrorHandler
from topicdeck.events.bus import EventBus


def bootstrap(container: Container, repository: ITopicRepository) -> Container:
    """Register the topic list services around *repository*."""
    container.register_instance(ITopicRepository, repository)
    container.register_singleton(EventBus, EventBus)
    container.register_singleton(TopicListStore, TopicListStore)
    container.register_factory(
        ErrorHandler,
        lambda c: ErrorHandler(logging.getLogger("topicdeck.errors"), c.resolve(EventBus)),
    )
    container.register_factory(
        TopicListService,
        lambda c: TopicListService(
            c.resolve(ITopicRepository), c.resolve(TopicListStore), c.resolve(EventBus)
        ),
    )
    for use_case in (DeleteTopicsUseCase, DeleteTopicUseCase, PurgeTopicsUseCase, PurgeTopicUseCase):
        container.register_factory(
            use_case,
            lambda c, cls=use_case: cls(c.resolve(ITopicRepository), c.resolve(EventBus)),
        )
    return container
