from __future__ import annotations

import json
from pathlib import Path

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for settings tests", exc_type=ImportError)

from topicdeck.errors import SettingsLoadError, SettingsValidationError
from topicdeck.settings.manager import SettingsManager
from topicdeck.settings.schema import DEFAULT_SETTINGS, merge_with_defaults


def test_settings_manager_roundtrip(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    manager = SettingsManager(path=settings_path)
    manager.load()
    assert settings_path.exists()
    assert manager.per_page == 25
    changes = []
    manager.settingsChanged.connect(lambda key, value: changes.append((key, value)))
    manager.set("list.per_page", 50)
    assert changes == [("list.per_page", 50)]
    assert manager.per_page == 50
    stored = json.loads(settings_path.read_text(encoding="utf-8"))
    assert stored["list"]["per_page"] == 50


def test_settings_manager_nested_updates_preserve_defaults(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    manager.set("cluster.read_only", True)
    assert manager.read_only is True
    assert manager.cluster_name == "local"
    assert manager.show_internal is True


def test_settings_manager_loads_existing_file(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(
        json.dumps({"cluster": {"name": "prod"}, "list": {"show_internal": False}}),
        encoding="utf-8",
    )
    manager = SettingsManager(path=settings_path)
    manager.load()
    assert manager.cluster_name == "prod"
    assert manager.show_internal is False
    assert manager.per_page == DEFAULT_SETTINGS["list"]["per_page"]


def test_settings_manager_rejects_invalid_values(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    with pytest.raises(SettingsValidationError):
        manager.set("list.per_page", 0)
    assert manager.per_page == 25


def test_settings_manager_rejects_corrupt_file(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SettingsLoadError):
        SettingsManager(path=settings_path).load()


def test_get_supports_defaults(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    assert manager.get("list.missing", "fallback") == "fallback"
    assert manager.get("cluster.name") == "local"


def test_merge_with_defaults_keeps_unknown_keys() -> None:
    merged = merge_with_defaults({"list": {"order_by": "NAME"}, "extra": 1})
    assert merged["list"]["order_by"] == "NAME"
    assert merged["list"]["per_page"] == 25
    assert merged["extra"] == 1


def test_settings_manager_order_by(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    assert manager.order_by is None
    manager.set("list.order_by", "TOTAL_PARTITIONS")
    assert manager.order_by == "TOTAL_PARTITIONS"
