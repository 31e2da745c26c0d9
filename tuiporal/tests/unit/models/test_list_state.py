"""Tests for ListViewState and AutoRefresh."""

from __future__ import annotations

import pytest

from tuiporal.constants.enums import WorkflowFilter
from tuiporal.models.state.list_state import AutoRefresh, ListViewState


@pytest.fixture
def state() -> ListViewState[str]:
    return ListViewState(items=["a", "b", "c"], selection_index=0)


class TestSelection:
    """Circular selection."""

    def test_select_previous_wraps_to_last(self, state: ListViewState[str]) -> None:
        """Moving up from the first row selects the last."""
        state.select_previous()
        assert state.selection_index == 2

    def test_select_next_wraps_to_first(self, state: ListViewState[str]) -> None:
        """Moving down from the last row selects the first."""
        state.selection_index = 2
        state.select_next()
        assert state.selection_index == 0

    def test_selection_noop_on_empty(self) -> None:
        """Empty lists keep no selection."""
        state: ListViewState[str] = ListViewState()
        state.select_next()
        state.select_previous()
        assert state.selection_index is None
        assert state.selected_item() is None

    def test_selected_item(self, state: ListViewState[str]) -> None:
        state.select_next()
        assert state.selected_item() == "b"


class TestComposedQuery:
    """Filter atom and free-text query composition."""

    def test_filter_and_query(self) -> None:
        """Filter atom comes first, joined with AND."""
        state: ListViewState[str] = ListViewState(
            filter=WorkflowFilter.RUNNING, query="WorkflowType='Foo'"
        )
        assert state.composed_query() == "ExecutionStatus = 'Running' AND WorkflowType='Foo'"

    def test_all_filter_contributes_nothing(self) -> None:
        state: ListViewState[str] = ListViewState(filter=WorkflowFilter.ALL, query="x = 1")
        assert state.composed_query() == "x = 1"

    def test_empty(self) -> None:
        assert ListViewState().composed_query() == ""

    def test_filter_only(self) -> None:
        state: ListViewState[str] = ListViewState(filter=WorkflowFilter.FAILED)
        assert state.composed_query() == "ExecutionStatus = 'Failed'"


class TestQueryHistory:
    def test_remember_skips_empty_and_repeats(self) -> None:
        state: ListViewState[str] = ListViewState()
        state.remember_query("")
        state.remember_query("a")
        state.remember_query("a")
        state.remember_query("b")
        assert state.query_history == ["a", "b"]

    def test_recall_walks_back_then_forward(self) -> None:
        """Up recalls older queries; down past the newest clears the draft."""
        state: ListViewState[str] = ListViewState(query_history=["first", "second"])
        state.recall_history(-1)
        assert state.query_draft == "second"
        state.recall_history(-1)
        assert state.query_draft == "first"
        state.recall_history(-1)
        assert state.query_draft == "first"
        state.recall_history(1)
        assert state.query_draft == "second"
        state.recall_history(1)
        assert state.query_draft == ""
        assert state.history_cursor is None


class TestPagination:
    """Cursor stack behaviour."""

    def test_initial_state(self) -> None:
        state: ListViewState[str] = ListViewState()
        assert state.page == 1
        assert not state.has_next_page
        assert not state.has_prev_page

    def test_advance_requires_forward_cursor(self) -> None:
        state: ListViewState[str] = ListViewState()
        assert state.advance_page() is None
        assert state.page == 1

    def test_advance_blocked_while_loading(self) -> None:
        state: ListViewState[str] = ListViewState(forward_cursor=b"t2", loading=True)
        assert state.advance_page() is None
        assert state.page == 1

    def test_advance_then_retreat_replays_prior_token(self) -> None:
        """Previous returns the exact token that produced the earlier page."""
        state: ListViewState[str] = ListViewState(forward_cursor=b"t2")
        assert state.advance_page() == b"t2"
        assert state.page == 2
        state.forward_cursor = b"t3"
        assert state.advance_page() == b"t3"
        assert state.page == 3
        assert state.retreat_page() == b"t2"
        assert state.page == 2
        assert state.retreat_page() == b""
        assert state.page == 1
        assert state.retreat_page() is None
        assert state.page == 1

    def test_page_never_exceeds_forward_advances(self) -> None:
        state: ListViewState[str] = ListViewState(forward_cursor=b"t")
        advances = 0
        for _ in range(5):
            if state.advance_page() is not None:
                advances += 1
        for _ in range(10):
            state.retreat_page()
        assert advances == 5
        assert state.page == 1

    def test_reset_pagination(self) -> None:
        state: ListViewState[str] = ListViewState(forward_cursor=b"t")
        state.advance_page()
        state.reset_pagination()
        assert state.page == 1
        assert state.backward_cursor_stack == []
        assert state.current_cursor == b""


class TestResultApplication:
    """Sequence-number ordering of results."""

    def test_apply_page_replaces_items(self) -> None:
        state: ListViewState[str] = ListViewState(items=["old"], error="boom")
        state.begin_load(1)
        assert state.apply_page(1, ["x", "y"], b"next", now=5.0)
        assert state.items == ["x", "y"]
        assert state.selection_index == 0
        assert state.forward_cursor == b"next"
        assert state.error is None
        assert not state.loading
        assert state.auto_refresh.last_refreshed_at == 5.0

    def test_apply_empty_page_clears_selection(self) -> None:
        state: ListViewState[str] = ListViewState(items=["a"], selection_index=0)
        state.begin_load(1)
        state.apply_page(1, [], b"", now=0.0)
        assert state.selection_index is None

    def test_stale_result_does_not_overwrite(self) -> None:
        """An older RefreshList arriving after a newer one is discarded."""
        state: ListViewState[str] = ListViewState()
        state.begin_load(1)
        state.begin_load(2)
        assert state.apply_page(2, ["new"], b"", now=1.0)
        assert not state.apply_page(1, ["old"], b"", now=2.0)
        assert state.items == ["new"]

    def test_older_result_keeps_loading_for_newer_owner(self) -> None:
        state: ListViewState[str] = ListViewState()
        state.begin_load(1)
        state.begin_load(2)
        state.apply_page(1, ["first"], b"", now=0.0)
        assert state.items == ["first"]
        assert state.loading

    def test_apply_success_keeps_items(self) -> None:
        state: ListViewState[str] = ListViewState(items=["a"], error="boom")
        state.begin_load(2)
        assert state.apply_success(2)
        assert state.items == ["a"]
        assert state.error is None
        assert not state.loading
        assert not state.apply_success(1)

    def test_same_failure_twice_leaves_items(self) -> None:
        state: ListViewState[str] = ListViewState(items=["a", "b"], selection_index=1)
        state.begin_load(3)
        state.apply_failure(3, "unavailable")
        state.apply_failure(3, "unavailable")
        assert state.items == ["a", "b"]
        assert state.error == "unavailable"
        assert not state.loading

    def test_failed_page_move_rolls_back(self) -> None:
        """A failed Next restores the page number and cursor stack."""
        state: ListViewState[str] = ListViewState(items=["a"], forward_cursor=b"t2")
        snapshot = state.snapshot()
        state.advance_page()
        state.begin_load(4, rollback=snapshot)
        state.apply_failure(4, "deadline exceeded")
        assert state.page == 1
        assert state.backward_cursor_stack == []
        assert state.current_cursor == b""
        assert state.forward_cursor == b"t2"
        assert state.items == ["a"]


class TestAutoRefresh:
    """Due/not-due evaluation with a 5 second interval."""

    def test_disabled_never_due(self) -> None:
        auto = AutoRefresh(enabled=False, interval_seconds=5)
        assert not auto.is_due(loading=False, now=100.0)

    def test_never_refreshed_is_due(self) -> None:
        auto = AutoRefresh(enabled=True, interval_seconds=5)
        assert auto.is_due(loading=False, now=100.0)

    def test_interval_scenario(self) -> None:
        auto = AutoRefresh(enabled=True, interval_seconds=5, last_refreshed_at=100.0)
        assert not auto.is_due(loading=False, now=103.0)
        assert auto.is_due(loading=False, now=105.0)
        assert not auto.is_due(loading=True, now=106.0)

    def test_failed_attempt_waits_full_interval(self) -> None:
        auto = AutoRefresh(
            enabled=True,
            interval_seconds=5,
            last_refreshed_at=100.0,
            last_attempted_at=105.0,
        )
        assert not auto.is_due(loading=False, now=107.0)
        assert auto.is_due(loading=False, now=110.0)

    def test_toggle(self) -> None:
        auto = AutoRefresh()
        assert auto.toggle() is True
        assert auto.toggle() is False
