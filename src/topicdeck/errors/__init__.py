"""Custom exception hierarchy for topicdeck."""

from __future__ import annotations


class TopicDeckError(Exception):
    """Base class for all custom errors raised by topicdeck."""


# --- 3-layer hierarchy ---

class DomainError(TopicDeckError):
    """Base class for domain-level errors."""


class InfrastructureError(TopicDeckError):
    """Base class for infrastructure-level errors."""


class ApplicationError(TopicDeckError):
    """Base class for application-level errors."""


# --- Domain errors ---

class TopicNotFoundError(DomainError):
    """Raised when the requested topic does not exist in the cluster."""


class InvalidQueryError(DomainError, ValueError):
    """Raised when a page number or page size is out of range."""


# --- Infrastructure errors ---

class TopicSourceError(InfrastructureError):
    """Raised when the topic source cannot be read."""


# --- Application errors ---

class InvalidTransitionError(ApplicationError):
    """Raised when the confirmation state machine is driven out of order."""


class InvalidActionError(ApplicationError):
    """Raised when a control is used while it should be unreachable."""


class ReadOnlyClusterError(InvalidActionError):
    """Raised when a mutating action is attempted on a read-only cluster."""


# --- DI-specific errors ---

class CircularDependencyError(TopicDeckError):
    """Raised when a circular dependency is detected during resolution."""


class ResolutionError(TopicDeckError):
    """Raised when a dependency cannot be resolved."""


# --- Settings ---

class SettingsError(TopicDeckError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""


class BulkActionError(ApplicationError):
    """Raised (or reported) when a bulk delete or purge did not fully succeed."""
