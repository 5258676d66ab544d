"""Tests for QueryState — page reset rules and the derived request."""

import pytest

from topicdeck.domain.models import SortOrder, SortSpec, TopicColumnsToSort, TopicListRequest
from topicdeck.errors import InvalidQueryError
from topicdeck.gui.viewmodels.query_state import QueryState


def _state(**kwargs) -> QueryState:
    return QueryState("local", **kwargs)


class TestPageReset:
    @pytest.mark.parametrize(
        "mutate",
        [
            lambda s: s.set_search("orders"),
            lambda s: s.set_search(""),
            lambda s: s.set_sort(SortSpec(TopicColumnsToSort.NAME)),
            lambda s: s.set_sort(None),
            lambda s: s.set_include_internal(False),
            lambda s: s.set_include_internal(True),
            lambda s: s.set_page_size(50),
        ],
    )
    def test_non_page_changes_reset_page(self, mutate):
        state = _state(page=4)

        mutate(state)

        assert state.page == 1

    def test_sequence_of_filter_changes_keeps_first_page(self):
        state = _state()
        for step in range(5):
            state.set_page(step + 2)
            state.set_search(f"topic-{step}")
            assert state.page == 1
            state.set_page(3)
            state.set_include_internal(step % 2 == 0)
            assert state.page == 1

    def test_set_page_keeps_other_fields(self):
        state = _state(search="orders", per_page=10)

        state.set_page(3)

        assert state.page == 3
        assert state.search == "orders"
        assert state.per_page == 10


class TestCurrentRequest:
    def test_search_then_page_then_search(self):
        state = _state(per_page=25, show_internal=True)

        state.set_search("orders")
        request = state.current_request()
        assert request.search == "orders"
        assert request.page == 1

        state.set_page(3)
        assert state.current_request().page == 3

        state.set_search("orders-v2")
        request = state.current_request()
        assert request.search == "orders-v2"
        assert request.page == 1

    def test_initial_request(self):
        assert _state().current_request() == TopicListRequest(
            cluster_name="local", page=1, per_page=25, search="", show_internal=True
        )

    def test_params_omit_sort_when_unset(self):
        params = _state().current_request().as_params()

        assert "orderBy" not in params
        assert "sortOrder" not in params
        assert params["clusterName"] == "local"
        assert params["showInternal"] is True

    def test_params_include_sort(self):
        state = _state()
        state.set_sort(SortSpec(TopicColumnsToSort.TOTAL_PARTITIONS, SortOrder.DESC))

        params = state.current_request().as_params()

        assert params["orderBy"] == "TOTAL_PARTITIONS"
        assert params["sortOrder"] == "DESC"

    def test_changed_emits_request(self):
        state = _state()
        received = []
        state.changed.connect(received.append)

        state.set_search("pay")

        assert received == [state.current_request()]


class TestValidation:
    @pytest.mark.parametrize("page", [0, -1, 1.5, True])
    def test_bad_page(self, page):
        with pytest.raises(InvalidQueryError):
            _state().set_page(page)

    @pytest.mark.parametrize("per_page", [0, -5, "10"])
    def test_bad_page_size(self, per_page):
        with pytest.raises(InvalidQueryError):
            _state().set_page_size(per_page)

    def test_invalid_query_error_is_value_error(self):
        with pytest.raises(ValueError):
            _state(page=0)

    def test_apply_location_keeps_page(self):
        state = _state()

        state.apply_location(4, 50)

        assert (state.page, state.per_page) == (4, 50)
