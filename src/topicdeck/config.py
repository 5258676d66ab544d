"""Default configuration values for topicdeck."""

from __future__ import annotations

from typing import Final

# Rows per page when neither the location nor the settings file provides one.
DEFAULT_PAGE_SIZE: Final[int] = 25
FIRST_PAGE: Final[int] = 1

# Internal topics are listed unless the user switches them off.
DEFAULT_SHOW_INTERNAL: Final[bool] = True

# Broker-managed topics (``__consumer_offsets``, ``_schemas``) start with an
# underscore even when the cluster does not flag them as internal.
INTERNAL_TOPIC_PREFIX: Final[str] = "_"

# Query-string keys used by the pagination location.
PAGE_PARAM: Final[str] = "page"
PER_PAGE_PARAM: Final[str] = "perPage"

# ---------------------------------------------------------------------------
# Confirmation prompts
# ---------------------------------------------------------------------------

DELETE_TOPICS_CONFIRMATION: Final[str] = "Are you sure you want to remove selected topics?"
PURGE_TOPICS_CONFIRMATION: Final[str] = (
    "Are you sure you want to purge messages of selected topics?"
)

EMPTY_LIST_MESSAGE: Final[str] = "No topics found"
