"""State of the workflow detail screen, its dialogs and overlays."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tuiporal.constants.enums import BannerLevel, MutationKind
from tuiporal.constants.values import DEFAULT_TERMINATE_REASON, EMPTY_SIGNAL_MESSAGE
from tuiporal.models.core import HistoryEvent, WorkflowRecord

logger = logging.getLogger(__name__)


class InputValidationError(ValueError):
    """Raised when dialog input is rejected before any command is built."""


@dataclass
class PendingDialog:
    """A confirmation dialog awaiting Enter or Escape."""

    kind: MutationKind
    input_buffer: str = ""

    @property
    def accepts_input(self) -> bool:
        return self.kind is not MutationKind.CANCEL

    def type_character(self, character: str) -> None:
        if self.accepts_input:
            self.input_buffer += character

    def backspace(self) -> None:
        if self.accepts_input:
            self.input_buffer = self.input_buffer[:-1]

    def argument(self) -> str | None:
        """Return the mutation argument for this dialog.

        Raises:
            InputValidationError: Signal dialog confirmed with an empty name.
        """
        text = self.input_buffer.strip()
        if self.kind is MutationKind.TERMINATE:
            return text or DEFAULT_TERMINATE_REASON
        if self.kind is MutationKind.SIGNAL:
            if not text:
                raise InputValidationError(EMPTY_SIGNAL_MESSAGE)
            return text
        return None


@dataclass(frozen=True)
class Banner:
    message: str
    level: BannerLevel = BannerLevel.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.level is BannerLevel.ERROR


@dataclass
class EventDetailOverlay:
    """Full-screen view of one history event."""

    selected_event_index: int
    scroll_offset: int = 0

    def scroll(self, delta: int) -> None:
        self.scroll_offset = max(0, self.scroll_offset + delta)


@dataclass
class DetailViewState:
    workflow_id: str = ""
    run_id: str = ""
    subject: WorkflowRecord | None = None
    events: tuple[HistoryEvent, ...] = ()
    events_truncated: bool = False
    selection_index: int | None = None
    loading: bool = False
    error: str | None = None
    pending_dialog: PendingDialog | None = None
    banner: Banner | None = None
    event_overlay: EventDetailOverlay | None = None
    pending_seq: int = 0
    applied_seq: int = 0

    def begin_load(self, workflow_id: str, run_id: str, seq: int) -> None:
        """Point the screen at a workflow and wait for its data."""
        self.workflow_id = workflow_id
        self.run_id = run_id
        self.subject = None
        self.events = ()
        self.events_truncated = False
        self.selection_index = None
        self.loading = True
        self.error = None
        self.pending_dialog = None
        self.banner = None
        self.event_overlay = None
        self.pending_seq = seq

    def apply_loaded(
        self,
        seq: int,
        workflow: WorkflowRecord,
        events: tuple[HistoryEvent, ...],
        truncated: bool,
    ) -> bool:
        """Apply a loaded workflow. Returns False when discarded.

        Every ViewDetail replaces the whole screen, so only the result of the
        most recently issued one is applied.
        """
        if self._is_stale(seq):
            logger.debug(f"Discarding stale detail result seq={seq} (pending={self.pending_seq})")
            return False
        self.applied_seq = seq
        self.subject = workflow
        self.events = tuple(events)
        self.events_truncated = truncated
        self.selection_index = 0 if self.events else None
        self.error = None
        self.banner = None
        self.event_overlay = None
        self.loading = False
        return True

    def apply_failure(self, seq: int, error: str) -> bool:
        if self._is_stale(seq):
            logger.debug(f"Discarding stale detail failure seq={seq} (pending={self.pending_seq})")
            return False
        self.applied_seq = seq
        self.subject = None
        self.events = ()
        self.selection_index = None
        self.error = error
        self.banner = None
        self.event_overlay = None
        self.loading = False
        return True

    def _is_stale(self, seq: int) -> bool:
        return seq < self.pending_seq or seq <= self.applied_seq

    # ------------------------------------------------------------------
    # Event selection
    # ------------------------------------------------------------------

    def select_next(self) -> None:
        if not self.events:
            return
        if self.selection_index is None or self.selection_index >= len(self.events) - 1:
            self.selection_index = 0
        else:
            self.selection_index += 1

    def select_previous(self) -> None:
        if not self.events:
            return
        if self.selection_index is None:
            self.selection_index = 0
        elif self.selection_index == 0:
            self.selection_index = len(self.events) - 1
        else:
            self.selection_index -= 1

    def selected_event(self) -> HistoryEvent | None:
        if self.selection_index is None or not self.events:
            return None
        return self.events[self.selection_index]

    def overlay_event(self) -> HistoryEvent | None:
        """Event shown by the overlay, or None when it no longer exists."""
        overlay = self.event_overlay
        if overlay is None or not 0 <= overlay.selected_event_index < len(self.events):
            return None
        return self.events[overlay.selected_event_index]

    # ------------------------------------------------------------------
    # Dialogs, banners and overlays
    # ------------------------------------------------------------------

    def open_dialog(self, kind: MutationKind) -> None:
        self.banner = None
        self.error = None
        self.pending_dialog = PendingDialog(kind=kind)

    def close_dialog(self) -> None:
        self.pending_dialog = None

    def show_banner(self, message: str, level: BannerLevel = BannerLevel.SUCCESS) -> None:
        self.banner = Banner(message=message, level=level)

    def dismiss_banner(self) -> None:
        self.banner = None

    def open_overlay(self) -> bool:
        if self.selection_index is None or not self.events:
            return False
        self.event_overlay = EventDetailOverlay(selected_event_index=self.selection_index)
        return True

    def close_overlay(self) -> None:
        self.event_overlay = None
