"""Tests for BaseViewModel — pure Python, no Qt dependency."""

from topicdeck.events.bus import EventBus
from topicdeck.events.topic_events import TopicMessagesPurgedEvent, TopicsDeletedEvent
from topicdeck.gui.viewmodels.base import BaseViewModel


class TestBaseViewModel:
    def test_subscribe_event_receives_events(self):
        bus = EventBus()
        vm = BaseViewModel()
        received = []

        vm.subscribe_event(bus, TopicsDeletedEvent, lambda e: received.append(e.topic_names))
        bus.publish(TopicsDeletedEvent(cluster_name="local", topic_names=("orders",)))

        assert received == [("orders",)]

    def test_dispose_cancels_subscriptions(self):
        bus = EventBus()
        vm = BaseViewModel()
        received = []

        vm.subscribe_event(bus, TopicsDeletedEvent, lambda e: received.append(e.topic_names))
        bus.publish(TopicsDeletedEvent(topic_names=("before",)))
        vm.dispose()
        bus.publish(TopicsDeletedEvent(topic_names=("after",)))

        assert received == [("before",)]
        assert vm.disposed

    def test_dispose_clears_subscription_list(self):
        bus = EventBus()
        vm = BaseViewModel()
        vm.subscribe_event(bus, TopicsDeletedEvent, lambda e: None)
        vm.subscribe_event(bus, TopicMessagesPurgedEvent, lambda e: None)
        assert len(vm._subscriptions) == 2

        vm.dispose()
        assert len(vm._subscriptions) == 0

    def test_subscribe_returns_subscription(self):
        bus = EventBus()
        vm = BaseViewModel()
        sub = vm.subscribe_event(bus, TopicsDeletedEvent, lambda e: None)

        assert sub.active is True
        assert sub.event_type is TopicsDeletedEvent
