"""Tests for Signal and ObservableProperty."""

import pytest
from topicdeck.gui.viewmodels.signal import Signal, ObservableProperty


class TestSignal:
    def test_connect_and_emit(self):
        sig = Signal()
        received = []
        sig.connect(received.append)

        sig.emit("orders")

        assert received == ["orders"]

    def test_disconnect(self):
        sig = Signal()
        received = []
        handler = received.append
        sig.connect(handler)
        sig.emit(1)
        sig.disconnect(handler)
        sig.emit(2)

        assert received == [1]

    def test_disconnect_missing_raises(self):
        sig = Signal()
        with pytest.raises(ValueError):
            sig.disconnect(lambda: None)

    def test_duplicate_connect_ignored(self):
        sig = Signal()
        handler = lambda: None
        sig.connect(handler)
        sig.connect(handler)
        assert sig.handler_count == 1

    def test_emit_multiple_args(self):
        sig = Signal()
        received = []
        sig.connect(lambda *args: received.append(args))

        sig.emit("delete", ("a", "b"), None)

        assert received == [("delete", ("a", "b"), None)]

    def test_handler_exception_does_not_break_others(self):
        sig = Signal()
        received = []

        def bad_handler(v):
            raise RuntimeError("boom")

        sig.connect(bad_handler)
        sig.connect(received.append)

        sig.emit(1)

        assert received == [1]


class TestObservableProperty:
    def test_initial_value(self):
        assert ObservableProperty(25).value == 25
        assert ObservableProperty().value is None

    def test_changed_emits_new_and_old(self):
        prop = ObservableProperty(False)
        changes = []
        prop.changed.connect(lambda new, old: changes.append((new, old)))

        prop.value = True
        prop.value = True
        prop.value = False

        assert changes == [(True, False), (False, True)]
