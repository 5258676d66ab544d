"""Schema helpers for the topicdeck settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from topicdeck.config import DEFAULT_PAGE_SIZE, DEFAULT_SHOW_INTERNAL

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "topicdeck/settings.schema.json",
    "type": "object",
    "required": ["schema", "list", "cluster"],
    "properties": {
        "schema": {"const": "topicdeck/settings@1"},
        "list": {
            "type": "object",
            "properties": {
                "per_page": {"type": "integer", "minimum": 1, "maximum": 1000},
                "show_internal": {"type": "boolean"},
                "order_by": {
                    "type": ["string", "null"],
                    "enum": ["NAME", "TOTAL_PARTITIONS", "OUT_OF_SYNC_REPLICAS", None],
                },
            },
            "additionalProperties": True,
        },
        "cluster": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "read_only": {"type": "boolean"},
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "topicdeck/settings@1",
    "list": {
        "per_page": DEFAULT_PAGE_SIZE,
        "show_internal": DEFAULT_SHOW_INTERNAL,
        "order_by": None,
    },
    "cluster": {
        "name": "local",
        "read_only": False,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key in ("list", "cluster") and isinstance(value, dict):
                merged.setdefault(key, {}).update(value)
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
