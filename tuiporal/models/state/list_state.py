"""State of a listing screen (workflows, namespaces).

Mutated only by the main loop, either from a key press or from a result.
Results carry the sequence number of the command that produced them; the
state keeps the newest applied number so a result older than data already on
screen is discarded, and only the result of the command that owns ``loading``
clears it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from tuiporal.constants.defaults import AUTO_REFRESH_INTERVAL_DEFAULT
from tuiporal.constants.enums import WorkflowFilter
from tuiporal.constants.limits import QUERY_HISTORY_MAX

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class AutoRefresh:
    """Per-list refresh timer, evaluated on every main loop tick."""

    enabled: bool = False
    interval_seconds: int = AUTO_REFRESH_INTERVAL_DEFAULT
    last_refreshed_at: float | None = None
    last_attempted_at: float | None = None

    def is_due(self, *, loading: bool, now: float) -> bool:
        """Return True when a refresh should fire at ``now``.

        Due when enabled, idle, and either never refreshed or at least
        ``interval_seconds`` since the last successful refresh. A failed
        automatic attempt also waits a full interval before the next one.
        """
        if not self.enabled or loading:
            return False
        if (
            self.last_attempted_at is not None
            and now - self.last_attempted_at < self.interval_seconds
        ):
            return False
        if self.last_refreshed_at is None:
            return True
        return now - self.last_refreshed_at >= self.interval_seconds

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled


@dataclass(frozen=True)
class PageSnapshot:
    """Pagination position restored when a page move fails."""

    page: int
    backward_cursor_stack: tuple[bytes, ...]
    current_cursor: bytes


@dataclass
class ListViewState(Generic[T]):
    """Items, cursor, pagination and query state of one list screen."""

    items: list[T] = field(default_factory=list)
    selection_index: int | None = None

    # Pagination
    forward_cursor: bytes = b""
    backward_cursor_stack: list[bytes] = field(default_factory=list)
    current_cursor: bytes = b""
    page: int = 1

    loading: bool = False
    error: str | None = None

    # Query
    filter: WorkflowFilter | None = None
    query: str = ""
    query_draft: str = ""
    input_mode: bool = False
    query_history: list[str] = field(default_factory=list)
    history_cursor: int | None = None

    auto_refresh: AutoRefresh = field(default_factory=AutoRefresh)

    # Ordering bookkeeping
    pending_seq: int = 0
    applied_seq: int = 0
    rollback: PageSnapshot | None = None

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_next(self) -> None:
        if not self.items:
            return
        if self.selection_index is None or self.selection_index >= len(self.items) - 1:
            self.selection_index = 0
        else:
            self.selection_index += 1

    def select_previous(self) -> None:
        if not self.items:
            return
        if self.selection_index is None:
            self.selection_index = 0
        elif self.selection_index == 0:
            self.selection_index = len(self.items) - 1
        else:
            self.selection_index -= 1

    def selected_item(self) -> T | None:
        if self.selection_index is None:
            return None
        if 0 <= self.selection_index < len(self.items):
            return self.items[self.selection_index]
        return None

    # ------------------------------------------------------------------
    # Query composition
    # ------------------------------------------------------------------

    def composed_query(self) -> str:
        """Filter atom first, then the free-text query, joined with AND."""
        parts: list[str] = []
        if self.filter is not None and self.filter.query_atom:
            parts.append(self.filter.query_atom)
        if self.query:
            parts.append(self.query)
        return " AND ".join(parts)

    def remember_query(self, query: str) -> None:
        if not query:
            return
        if self.query_history and self.query_history[-1] == query:
            return
        self.query_history.append(query)
        del self.query_history[:-QUERY_HISTORY_MAX]

    def recall_history(self, step: int) -> None:
        """Move through query history while typing (step -1 older, +1 newer)."""
        if not self.query_history:
            return
        if self.history_cursor is None:
            if step > 0:
                return
            self.history_cursor = len(self.query_history) - 1
        else:
            self.history_cursor += step
        if self.history_cursor >= len(self.query_history):
            self.history_cursor = None
            self.query_draft = ""
            return
        self.history_cursor = max(0, self.history_cursor)
        self.query_draft = self.query_history[self.history_cursor]

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    @property
    def has_next_page(self) -> bool:
        return bool(self.forward_cursor)

    @property
    def has_prev_page(self) -> bool:
        return bool(self.backward_cursor_stack)

    def snapshot(self) -> PageSnapshot:
        return PageSnapshot(
            page=self.page,
            backward_cursor_stack=tuple(self.backward_cursor_stack),
            current_cursor=self.current_cursor,
        )

    def reset_pagination(self) -> None:
        self.page = 1
        self.backward_cursor_stack.clear()
        self.current_cursor = b""

    def advance_page(self) -> bytes | None:
        """Move to the next page; return the token to load or None if blocked."""
        if not self.has_next_page or self.loading:
            return None
        self.backward_cursor_stack.append(self.current_cursor)
        self.current_cursor = self.forward_cursor
        self.page += 1
        return self.current_cursor

    def retreat_page(self) -> bytes | None:
        """Move to the previous page; return the token that produced it.

        The returned token is empty for the first page. None means blocked.
        """
        if not self.has_prev_page or self.loading:
            return None
        self.current_cursor = self.backward_cursor_stack.pop()
        self.page = max(1, self.page - 1)
        return self.current_cursor

    # ------------------------------------------------------------------
    # Request lifecycle
    # ------------------------------------------------------------------

    def begin_load(self, seq: int, rollback: PageSnapshot | None = None) -> None:
        """Mark the command ``seq`` as the owner of the loading flag."""
        self.loading = True
        self.pending_seq = seq
        self.rollback = rollback

    def apply_page(
        self,
        seq: int,
        items: list[T],
        next_page_token: bytes,
        now: float,
    ) -> bool:
        """Apply a successful page result. Returns False when discarded."""
        if seq <= self.applied_seq:
            logger.debug(f"Discarding stale page result seq={seq} (applied={self.applied_seq})")
            return False
        self.applied_seq = seq
        self.items = list(items)
        self.forward_cursor = next_page_token
        self.error = None
        self.selection_index = 0 if self.items else None
        self.auto_refresh.last_refreshed_at = now
        if seq >= self.pending_seq:
            self.loading = False
            self.rollback = None
        return True

    def apply_success(self, seq: int) -> bool:
        """Apply a successful result that carries no page. Items are kept."""
        if seq <= self.applied_seq:
            logger.debug(f"Discarding stale result seq={seq} (applied={self.applied_seq})")
            return False
        self.applied_seq = seq
        self.error = None
        if seq >= self.pending_seq:
            self.loading = False
            self.rollback = None
        return True

    def apply_failure(self, seq: int, error: str) -> bool:
        """Apply a failed result. Items are kept; a failed page move is undone."""
        if seq <= self.applied_seq:
            logger.debug(f"Discarding stale failure seq={seq} (applied={self.applied_seq})")
            return False
        self.applied_seq = seq
        self.error = error
        if seq >= self.pending_seq:
            self.loading = False
            if self.rollback is not None:
                self.page = self.rollback.page
                self.backward_cursor_stack = list(self.rollback.backward_cursor_stack)
                self.current_cursor = self.rollback.current_cursor
                self.rollback = None
        return True
