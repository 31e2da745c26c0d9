"""Workflows screen machine - listing, filtering, search and pagination."""

from __future__ import annotations

import logging

from tuiporal.constants.enums import PageDirection, ScreenId, WorkflowFilter
from tuiporal.engine.commands import LoadPage, RefreshList
from tuiporal.engine.event_source import KeyPress
from tuiporal.engine.results import CommandFailed, ListLoaded, Result
from tuiporal.keyboard import SEARCH_INPUT_BINDINGS, WORKFLOWS_SCREEN_BINDINGS
from tuiporal.models.core import WorkflowRecord
from tuiporal.models.state.list_state import ListViewState, PageSnapshot
from tuiporal.screens.base_screen import BaseScreenMachine
from tuiporal.screens.workflows.config import FILTER_CYCLE

logger = logging.getLogger(__name__)


def next_filter(current: WorkflowFilter | None) -> WorkflowFilter | None:
    index = FILTER_CYCLE.index(current)
    return FILTER_CYCLE[(index + 1) % len(FILTER_CYCLE)]


class WorkflowsMachine(BaseScreenMachine):
    """Key handling and result application for the workflows list."""

    BINDINGS = WORKFLOWS_SCREEN_BINDINGS

    @property
    def state(self) -> ListViewState[WorkflowRecord]:
        return self.session.workflows

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """Reset to page 1 and reload with the composed query."""
        state = self.state
        state.reset_pagination()
        command = self.machine.issue(RefreshList(query=state.composed_query()))
        state.begin_load(command.seq)

    def _load_page(
        self,
        token: bytes,
        direction: PageDirection,
        rollback: PageSnapshot | None = None,
    ) -> None:
        command = self.machine.issue(
            LoadPage(
                query=self.state.composed_query(),
                page_token=token,
                direction=direction,
            )
        )
        self.state.begin_load(command.seq, rollback=rollback)

    def refresh_if_due(self, now: float) -> bool:
        state = self.state
        if not state.auto_refresh.is_due(loading=state.loading, now=now):
            return False
        state.auto_refresh.last_attempted_at = now
        if state.page > 1:
            self._load_page(state.current_cursor, PageDirection.RELOAD)
        else:
            command = self.machine.issue(RefreshList(query=state.composed_query()))
            state.begin_load(command.seq)
        return True

    # ------------------------------------------------------------------
    # Search input
    # ------------------------------------------------------------------

    def intercept(self, event: KeyPress) -> bool:
        if not self.state.input_mode:
            return False
        if self.run_binding(SEARCH_INPUT_BINDINGS, event, prefix="search_"):
            return True
        if event.is_printable:
            self.state.query_draft += event.character
        return True

    def search_commit_search(self) -> None:
        state = self.state
        query = state.query_draft.strip()
        state.remember_query(query)
        state.query = query
        state.input_mode = False
        state.history_cursor = None
        self.refresh()

    def search_cancel_search(self) -> None:
        self.state.input_mode = False
        self.state.query_draft = ""
        self.state.history_cursor = None

    def search_delete_character(self) -> None:
        self.state.query_draft = self.state.query_draft[:-1]

    def search_history_previous(self) -> None:
        self.state.recall_history(-1)

    def search_history_next(self) -> None:
        self.state.recall_history(1)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_quit(self) -> None:
        self.session.quit()

    def action_nav_workflows(self) -> None:
        self.session.navigate(ScreenId.WORKFLOWS)

    def action_nav_namespaces(self) -> None:
        self.machine.show_namespaces()

    def action_show_help(self) -> None:
        self.session.navigate(ScreenId.HELP)

    def action_start_search(self) -> None:
        self.state.input_mode = True
        self.state.query_draft = self.state.query
        self.state.history_cursor = None

    def action_cycle_filter(self) -> None:
        self.state.filter = next_filter(self.state.filter)
        self.refresh()

    def action_clear_filter(self) -> None:
        self.state.filter = None
        self.state.query = ""
        self.refresh()

    def action_toggle_auto_refresh(self) -> None:
        enabled = self.state.auto_refresh.toggle()
        logger.info(f"Workflow auto-refresh {'enabled' if enabled else 'disabled'}")

    def action_select_next(self) -> None:
        self.state.select_next()

    def action_select_previous(self) -> None:
        self.state.select_previous()

    def action_refresh(self) -> None:
        if self.session.connection.is_errored:
            self.machine.reconnect()
            return
        self.refresh()

    def action_next_page(self) -> None:
        snapshot = self.state.snapshot()
        token = self.state.advance_page()
        if token is None:
            return
        self._load_page(token, PageDirection.FORWARD, rollback=snapshot)

    def action_prev_page(self) -> None:
        snapshot = self.state.snapshot()
        token = self.state.retreat_page()
        if token is None:
            return
        self._load_page(token, PageDirection.BACKWARD, rollback=snapshot)

    def action_open_detail(self) -> None:
        record = self.state.selected_item()
        if record is None:
            return
        self.machine.open_detail(record.workflow_id, record.run_id)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def apply(self, result: Result) -> None:
        if isinstance(result, ListLoaded):
            self.state.apply_page(
                result.seq,
                list(result.records),
                result.next_page_token,
                self.machine.clock(),
            )
        elif isinstance(result, CommandFailed):
            self.state.apply_failure(result.seq, result.cause)
        else:
            logger.warning(f"Unexpected result for workflows: {type(result).__name__}")
