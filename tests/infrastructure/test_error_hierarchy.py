"""Tests for the custom error hierarchy."""

import pytest

from topicdeck.errors import (
    ApplicationError,
    BulkActionError,
    CircularDependencyError,
    DomainError,
    InfrastructureError,
    InvalidActionError,
    InvalidQueryError,
    InvalidTransitionError,
    ReadOnlyClusterError,
    SettingsValidationError,
    TopicDeckError,
    TopicNotFoundError,
    TopicSourceError,
)


@pytest.mark.parametrize("layer", [DomainError, InfrastructureError, ApplicationError])
def test_layers_share_root(layer):
    assert issubclass(layer, TopicDeckError)


def test_topic_not_found_is_domain_error():
    assert isinstance(TopicNotFoundError("missing"), DomainError)


def test_invalid_query_is_also_value_error():
    assert issubclass(InvalidQueryError, ValueError)
    assert issubclass(InvalidQueryError, DomainError)


def test_topic_source_is_infrastructure_error():
    assert issubclass(TopicSourceError, InfrastructureError)


def test_controller_errors_are_application_errors():
    for error in (InvalidTransitionError, InvalidActionError, BulkActionError):
        assert issubclass(error, ApplicationError)
    assert issubclass(ReadOnlyClusterError, InvalidActionError)


def test_misc_errors_are_topicdeck_errors():
    assert isinstance(CircularDependencyError("loop"), TopicDeckError)
    assert isinstance(SettingsValidationError("bad"), TopicDeckError)


def test_error_message():
    err = TopicNotFoundError("Topic not found: orders")
    assert str(err) == "Topic not found: orders"
