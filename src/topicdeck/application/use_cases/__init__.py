from .base import UseCase, UseCaseRequest, UseCaseResponse
from .delete_topics import (
    DeleteTopicRequest,
    DeleteTopicsRequest,
    DeleteTopicsResponse,
    DeleteTopicsUseCase,
    DeleteTopicUseCase,
)
from .purge_topics import (
    PurgeTopicRequest,
    PurgeTopicsRequest,
    PurgeTopicsResponse,
    PurgeTopicsUseCase,
    PurgeTopicUseCase,
)

__all__ = [
    "DeleteTopicRequest",
    "DeleteTopicsRequest",
    "DeleteTopicsResponse",
    "DeleteTopicsUseCase",
    "DeleteTopicUseCase",
    "PurgeTopicRequest",
    "PurgeTopicsRequest",
    "PurgeTopicsResponse",
    "PurgeTopicsUseCase",
    "PurgeTopicUseCase",
    "UseCase",
    "UseCaseRequest",
    "UseCaseResponse",
]
