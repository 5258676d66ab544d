"""Tests for SelectionSet."""

import pytest

from topicdeck.gui.viewmodels.selection_set import SelectionSet


class TestSelectionSet:
    @pytest.mark.parametrize("name", ["orders", "", "__consumer_offsets"])
    def test_toggle_twice_restores_prior_state(self, name):
        selection = SelectionSet()
        selection.toggle("payments")
        before = set(selection.snapshot())

        selection.toggle(name)
        selection.toggle(name)

        assert set(selection.snapshot()) == before

    def test_single_toggle_on_empty_set(self):
        selection = SelectionSet()

        assert selection.toggle("orders") is True
        assert selection.has("orders")
        assert selection.size() == 1

    def test_toggle_returns_membership(self):
        selection = SelectionSet()
        selection.toggle("orders")

        assert selection.toggle("orders") is False
        assert not selection.has("orders")

    def test_clear(self):
        selection = SelectionSet()
        for name in ("a", "b", "c"):
            selection.toggle(name)

        selection.clear()

        assert selection.size() == 0
        selection.clear()
        assert selection.size() == 0

    def test_snapshot_keeps_insertion_order(self):
        selection = SelectionSet()
        selection.toggle("b")
        selection.toggle("a")

        assert selection.snapshot() == ("b", "a")
        assert list(selection) == ["b", "a"]
        assert "a" in selection
        assert len(selection) == 2

    def test_changed_signal(self):
        selection = SelectionSet()
        seen = []
        selection.changed.connect(seen.append)

        selection.toggle("a")
        selection.toggle("b")
        selection.clear()
        selection.clear()

        assert seen == [("a",), ("a", "b"), ()]
