import logging
from unittest.mock import Mock

from topicdeck.errors import BulkActionError, TopicNotFoundError
from topicdeck.errors.handler import ErrorHandler, ErrorOccurredEvent, ErrorSeverity
from topicdeck.events.bus import EventBus


def test_handle_error_logs_and_publishes():
    logger = Mock(spec=logging.Logger)
    event_bus = Mock(spec=EventBus)
    handler = ErrorHandler(logger, event_bus)

    error = TopicNotFoundError("Topic not found: ghost")
    handler.handle(error, ErrorSeverity.ERROR, {"topic": "ghost"})

    logger.error.assert_called()
    assert logger.error.call_args[1]["extra"] == {"context": {"topic": "ghost"}}

    event = event_bus.publish.call_args[0][0]
    assert isinstance(event, ErrorOccurredEvent)
    assert event.error == error
    assert event.severity == ErrorSeverity.ERROR
    assert event.context == {"topic": "ghost"}


def test_warning_uses_warning_level():
    logger = Mock(spec=logging.Logger)
    handler = ErrorHandler(logger, Mock(spec=EventBus))

    handler.handle(BulkActionError("partial"), ErrorSeverity.WARNING)

    logger.warning.assert_called_once()
    logger.error.assert_not_called()


def test_ui_callback():
    logger = Mock(spec=logging.Logger)
    event_bus = Mock(spec=EventBus)
    handler = ErrorHandler(logger, event_bus)

    callback = Mock()
    handler.register_ui_callback(callback)

    handler.handle(RuntimeError("ui error"), ErrorSeverity.CRITICAL)

    callback.assert_called_with("ui error", ErrorSeverity.CRITICAL)


def test_ignore_low_severity_in_ui():
    logger = Mock(spec=logging.Logger)
    event_bus = Mock(spec=EventBus)
    handler = ErrorHandler(logger, event_bus)

    callback = Mock()
    handler.register_ui_callback(callback)

    handler.handle(Exception("info"), ErrorSeverity.INFO)
    handler.handle(Exception("warn"), ErrorSeverity.WARNING)

    callback.assert_not_called()
