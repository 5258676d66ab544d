import pytest
from abc import ABC, abstractmethod

from topicdeck.di.bootstrap import bootstrap
from topicdeck.di.container import Container
from topicdeck.di.lifetime import Lifetime
from topicdeck.application.services import TopicListService, TopicListStore
from topicdeck.application.use_cases import DeleteTopicsUseCase, PurgeTopicUseCase
from topicdeck.domain.repositories import ITopicRepository
from topicdeck.errors import CircularDependencyError, ResolutionError
from topicdeck.errors.handler import ErrorHandler
from topicdeck.events.bus import EventBus


class IService(ABC):
    @abstractmethod
    def do_something(self):
        pass


class ServiceImpl(IService):
    def do_something(self):
        return "done"


class ServiceWithArgs(IService):
    def __init__(self, value):
        self.value = value

    def do_something(self):
        return self.value


def test_register_resolve_transient():
    container = Container()
    container.register_transient(IService, ServiceImpl)

    s1 = container.resolve(IService)
    s2 = container.resolve(IService)

    assert isinstance(s1, ServiceImpl)
    assert s1 is not s2


def test_register_resolve_singleton():
    container = Container()
    container.register_singleton(IService, ServiceImpl)

    assert container.resolve(IService) is container.resolve(IService)


def test_register_with_factory():
    container = Container()
    container.register_factory(IService, lambda c: ServiceWithArgs("from factory"), Lifetime.TRANSIENT)

    s1 = container.resolve(IService)
    assert s1.do_something() == "from factory"
    assert container.resolve(IService) is not s1


def test_register_with_kwargs():
    container = Container()
    container.register_transient(IService, ServiceWithArgs, value="test_value")

    assert container.resolve(IService).do_something() == "test_value"


def test_resolve_unregistered():
    container = Container()
    with pytest.raises(ResolutionError):
        container.resolve(IService)


def test_circular_factory():
    container = Container()
    container.register_factory(IService, lambda c: c.resolve(IService))

    with pytest.raises(CircularDependencyError):
        container.resolve(IService)


def test_bootstrap_wires_topic_services(repository):
    container = bootstrap(Container(), repository)

    assert container.resolve(ITopicRepository) is repository
    assert container.resolve(TopicListService).store is container.resolve(TopicListStore)
    assert isinstance(container.resolve(ErrorHandler), ErrorHandler)
    assert isinstance(container.resolve(DeleteTopicsUseCase), DeleteTopicsUseCase)
    assert isinstance(container.resolve(PurgeTopicUseCase), PurgeTopicUseCase)
    assert container.resolve(EventBus) is container.resolve(EventBus)
