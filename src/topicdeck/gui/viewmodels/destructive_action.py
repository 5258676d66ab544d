"""Confirmation gate in front of the bulk delete and bulk purge actions."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from topicdeck.application.use_cases.base import UseCaseResponse
from topicdeck.config import DELETE_TOPICS_CONFIRMATION, PURGE_TOPICS_CONFIRMATION
from topicdeck.errors import BulkActionError, InvalidTransitionError
from topicdeck.errors.handler import ErrorHandler, ErrorSeverity
from topicdeck.gui.viewmodels.selection_set import SelectionSet
from topicdeck.gui.viewmodels.signal import ObservableProperty, Signal

LOGGER = logging.getLogger(__name__)

DeleteManyCapability = Callable[[str, Sequence[str]], Optional[UseCaseResponse]]
PurgeManyCapability = Callable[..., Optional[UseCaseResponse]]


class ConfirmationState(str, Enum):
    NONE = "none"
    PENDING_DELETE = "pendingDelete"
    PENDING_PURGE = "pendingPurge"


_MESSAGES = {
    ConfirmationState.PENDING_DELETE: DELETE_TOPICS_CONFIRMATION,
    ConfirmationState.PENDING_PURGE: PURGE_TOPICS_CONFIRMATION,
}


class DestructiveActionCoordinator:
    """State machine: ``none`` -> pending delete/purge -> confirm or cancel -> ``none``.

    :meth:`confirm` snapshots the selection, runs the matching capability
    with it and then always returns to ``none`` with the selection cleared,
    whether or not the capability reported success. Failures are logged and
    passed to the optional :class:`ErrorHandler`, never retried.

    The coordinator does not check that the selection is non-empty; the
    owning viewmodel only offers the actions when something is selected.
    """

    def __init__(
        self,
        cluster_name: str,
        selection: SelectionSet,
        delete_many: DeleteManyCapability,
        purge_many: PurgeManyCapability,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        self._cluster_name = cluster_name
        self._selection = selection
        self._delete_many = delete_many
        self._purge_many = purge_many
        self._error_handler = error_handler

        self.state = ObservableProperty(ConfirmationState.NONE)
        self.last_response: Optional[UseCaseResponse] = None

        self.action_completed = Signal()  # emits (state, names, response)

    @property
    def pending(self) -> ConfirmationState:
        return self.state.value

    @property
    def is_pending(self) -> bool:
        return self.state.value is not ConfirmationState.NONE

    @property
    def confirmation_message(self) -> Optional[str]:
        return _MESSAGES.get(self.state.value)

    def request_delete(self) -> None:
        self._request(ConfirmationState.PENDING_DELETE)

    def request_purge(self) -> None:
        self._request(ConfirmationState.PENDING_PURGE)

    def cancel(self) -> None:
        if not self.is_pending:
            LOGGER.debug("cancel() with nothing pending")
            return
        self.state.value = ConfirmationState.NONE

    def confirm(self) -> Optional[UseCaseResponse]:
        kind = self.state.value
        if kind is ConfirmationState.NONE:
            raise InvalidTransitionError("confirm() called with no pending action")

        names = self._selection.snapshot()
        response = self._run(kind, names)

        self.last_response = response
        self.state.value = ConfirmationState.NONE
        self._selection.clear()
        self.action_completed.emit(kind, names, response)
        return response

    def _request(self, target: ConfirmationState) -> None:
        current = self.state.value
        if current is not ConfirmationState.NONE:
            raise InvalidTransitionError(
                f"Cannot request {target.value} while {current.value} is pending"
            )
        self.state.value = target

    def _run(self, kind: ConfirmationState, names: tuple[str, ...]) -> Optional[UseCaseResponse]:
        action = "delete" if kind is ConfirmationState.PENDING_DELETE else "purge"
        LOGGER.info("Confirmed bulk %s of %d topic(s) in %s", action, len(names), self._cluster_name)
        try:
            if kind is ConfirmationState.PENDING_DELETE:
                response = self._delete_many(self._cluster_name, list(names))
            else:
                response = self._purge_many(self._cluster_name, list(names))
        except Exception as exc:
            LOGGER.error("Bulk %s failed: %s", action, exc)
            self._report(exc, action, names)
            return UseCaseResponse(success=False, error=str(exc))

        if response is not None and not response.success:
            LOGGER.warning("Bulk %s reported failure: %s", action, response.error)
            self._report(BulkActionError(response.error or f"bulk {action} failed"), action, names)
        return response

    def _report(self, error: Exception, action: str, names: tuple[str, ...]) -> None:
        if self._error_handler is None:
            return
        context: dict[str, Any] = {
            "cluster_name": self._cluster_name,
            "action": action,
            "topics": list(names),
        }
        self._error_handler.handle(error, ErrorSeverity.WARNING, context)
