"""Detail screen machine - event history, mutation dialogs, event overlay.

Key precedence is event overlay, then banner, then dialog, then the base
keymap. A visible banner is dismissed by the next key, which is consumed.
"""

from __future__ import annotations

import logging

from tuiporal.constants.enums import BannerLevel, MutationKind, ScreenId
from tuiporal.constants.limits import SCROLL_PAGE_STEP, SCROLL_STEP
from tuiporal.engine.commands import Mutate, ViewDetail
from tuiporal.engine.event_source import KeyPress
from tuiporal.engine.results import (
    CommandFailed,
    DetailLoaded,
    MutationApplied,
    Result,
)
from tuiporal.keyboard import (
    DETAIL_SCREEN_BINDINGS,
    DIALOG_BINDINGS,
    EVENT_OVERLAY_BINDINGS,
)
from tuiporal.models.state.detail_state import DetailViewState, InputValidationError
from tuiporal.screens.base_screen import BaseScreenMachine

logger = logging.getLogger(__name__)


class DetailMachine(BaseScreenMachine):
    BINDINGS = DETAIL_SCREEN_BINDINGS

    @property
    def state(self) -> DetailViewState:
        return self.session.detail

    def intercept(self, event: KeyPress) -> bool:
        state = self.state
        if state.event_overlay is not None:
            self.run_binding(EVENT_OVERLAY_BINDINGS, event, prefix="overlay_")
            return True
        if state.banner is not None:
            state.dismiss_banner()
            return True
        if state.pending_dialog is not None:
            if not self.run_binding(DIALOG_BINDINGS, event, prefix="dialog_"):
                if event.is_printable:
                    state.pending_dialog.type_character(event.character)
            return True
        return False

    # ------------------------------------------------------------------
    # Event overlay
    # ------------------------------------------------------------------

    def overlay_close(self) -> None:
        self.state.close_overlay()

    def overlay_scroll_down(self) -> None:
        self.state.event_overlay.scroll(SCROLL_STEP)

    def overlay_scroll_up(self) -> None:
        self.state.event_overlay.scroll(-SCROLL_STEP)

    def overlay_page_down(self) -> None:
        self.state.event_overlay.scroll(SCROLL_PAGE_STEP)

    def overlay_page_up(self) -> None:
        self.state.event_overlay.scroll(-SCROLL_PAGE_STEP)

    # ------------------------------------------------------------------
    # Dialog
    # ------------------------------------------------------------------

    def dialog_confirm(self) -> None:
        state = self.state
        dialog = state.pending_dialog
        state.close_dialog()
        try:
            argument = dialog.argument()
        except InputValidationError as e:
            state.show_banner(str(e), BannerLevel.ERROR)
            return
        run_id = state.run_id or (state.subject.run_id if state.subject else "")
        self.machine.issue(
            Mutate(
                kind=dialog.kind,
                workflow_id=state.workflow_id,
                run_id=run_id,
                argument=argument,
            )
        )

    def dialog_dismiss(self) -> None:
        self.state.close_dialog()

    def dialog_delete_character(self) -> None:
        self.state.pending_dialog.backspace()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_nav_workflows(self) -> None:
        self.session.navigate(ScreenId.WORKFLOWS)

    def action_nav_namespaces(self) -> None:
        self.machine.show_namespaces()

    def action_show_help(self) -> None:
        self.session.navigate(ScreenId.HELP)

    def action_select_next(self) -> None:
        self.state.select_next()

    def action_select_previous(self) -> None:
        self.state.select_previous()

    def action_open_event(self) -> None:
        self.state.open_overlay()

    def action_refresh(self) -> None:
        if self.state.workflow_id:
            self.machine.open_detail(self.state.workflow_id, self.state.run_id)

    def _open_dialog(self, kind: MutationKind) -> None:
        if self.state.loading or self.state.subject is None:
            return
        self.state.open_dialog(kind)

    def action_terminate(self) -> None:
        self._open_dialog(MutationKind.TERMINATE)

    def action_cancel_workflow(self) -> None:
        self._open_dialog(MutationKind.CANCEL)

    def action_signal(self) -> None:
        self._open_dialog(MutationKind.SIGNAL)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def apply(self, result: Result) -> None:
        state = self.state
        command = result.command
        if isinstance(command, ViewDetail):
            if isinstance(result, DetailLoaded):
                state.apply_loaded(
                    result.seq, result.workflow, result.events, result.truncated
                )
            elif isinstance(result, CommandFailed):
                state.apply_failure(result.seq, result.cause)
        elif isinstance(command, Mutate):
            if isinstance(result, MutationApplied):
                state.show_banner(result.message, BannerLevel.SUCCESS)
            elif isinstance(result, CommandFailed):
                state.show_banner(
                    f"Failed to {command.kind.value} workflow {command.workflow_id}: "
                    f"{result.cause}",
                    BannerLevel.ERROR,
                )
        else:
            logger.warning(f"Unexpected result for detail: {type(result).__name__}")
