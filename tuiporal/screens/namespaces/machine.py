"""Namespaces screen machine - browse namespaces and switch the active one."""

from __future__ import annotations

import logging

from tuiporal.constants.enums import ScreenId
from tuiporal.engine.commands import RefreshNamespaces, SwitchNamespace
from tuiporal.engine.results import (
    CommandFailed,
    NamespacesLoaded,
    NamespaceSwitched,
    Result,
)
from tuiporal.keyboard import NAMESPACES_SCREEN_BINDINGS
from tuiporal.models.core import NamespaceRecord
from tuiporal.models.state.list_state import ListViewState
from tuiporal.screens.base_screen import BaseScreenMachine

logger = logging.getLogger(__name__)


class NamespacesMachine(BaseScreenMachine):
    BINDINGS = NAMESPACES_SCREEN_BINDINGS

    @property
    def state(self) -> ListViewState[NamespaceRecord]:
        return self.session.namespaces

    def refresh(self) -> None:
        self.state.reset_pagination()
        command = self.machine.issue(RefreshNamespaces())
        self.state.begin_load(command.seq)

    def refresh_if_due(self, now: float) -> bool:
        state = self.state
        if not state.auto_refresh.is_due(loading=state.loading, now=now):
            return False
        state.auto_refresh.last_attempted_at = now
        self.refresh()
        return True

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_nav_workflows(self) -> None:
        self.session.navigate(ScreenId.WORKFLOWS)

    def action_select_next(self) -> None:
        self.state.select_next()

    def action_select_previous(self) -> None:
        self.state.select_previous()

    def action_refresh(self) -> None:
        self.refresh()

    def action_toggle_auto_refresh(self) -> None:
        enabled = self.state.auto_refresh.toggle()
        logger.info(f"Namespace auto-refresh {'enabled' if enabled else 'disabled'}")

    def action_show_help(self) -> None:
        self.session.navigate(ScreenId.HELP)

    def action_switch_namespace(self) -> None:
        record = self.state.selected_item()
        if record is None:
            return
        command = self.machine.issue(SwitchNamespace(name=record.name))
        self.state.begin_load(command.seq)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def apply(self, result: Result) -> None:
        state = self.state
        if isinstance(result, NamespacesLoaded):
            state.apply_page(
                result.seq,
                list(result.namespaces),
                result.next_page_token,
                self.machine.clock(),
            )
        elif isinstance(result, NamespaceSwitched):
            # The worker has already switched, so the namespace always follows.
            self.session.current_namespace = result.namespace.name
            self.machine.workflows.refresh()
            if state.apply_success(result.seq):
                self.session.navigate(ScreenId.WORKFLOWS)
        elif isinstance(result, CommandFailed):
            state.apply_failure(result.seq, result.cause)
        else:
            logger.warning(f"Unexpected result for namespaces: {type(result).__name__}")
