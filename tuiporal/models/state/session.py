"""Process-wide session: active screen, connection and per-screen state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tuiporal.constants.enums import ConnectionStatus, ScreenId
from tuiporal.constants.values import SPINNER_FRAME_DIVISOR, SPINNER_FRAMES
from tuiporal.models.core import NamespaceRecord, WorkflowRecord
from tuiporal.models.state.detail_state import DetailViewState
from tuiporal.models.state.list_state import ListViewState

logger = logging.getLogger(__name__)


class InvalidTransitionError(RuntimeError):
    """Raised on a connection state change that is not allowed."""


_ALLOWED_TRANSITIONS: dict[ConnectionStatus, frozenset[ConnectionStatus]] = {
    ConnectionStatus.DISCONNECTED: frozenset(
        {ConnectionStatus.CONNECTING, ConnectionStatus.ERRORED}
    ),
    ConnectionStatus.CONNECTING: frozenset(
        {ConnectionStatus.CONNECTED, ConnectionStatus.ERRORED}
    ),
    ConnectionStatus.CONNECTED: frozenset(),
    ConnectionStatus.ERRORED: frozenset({ConnectionStatus.CONNECTING}),
}


@dataclass
class ConnectionState:
    status: ConnectionStatus = ConnectionStatus.DISCONNECTED
    message: str | None = None

    def transition(self, status: ConnectionStatus, message: str | None = None) -> None:
        if status not in _ALLOWED_TRANSITIONS[self.status]:
            raise InvalidTransitionError(
                f"Connection cannot move from {self.status.value} to {status.value}"
            )
        logger.info(f"Connection {self.status.value} -> {status.value}")
        self.status = status
        self.message = message

    @property
    def is_connected(self) -> bool:
        return self.status is ConnectionStatus.CONNECTED

    @property
    def is_errored(self) -> bool:
        return self.status is ConnectionStatus.ERRORED


@dataclass
class HelpState:
    scroll_offset: int = 0

    def scroll(self, delta: int) -> None:
        self.scroll_offset = max(0, self.scroll_offset + delta)

    def reset(self) -> None:
        self.scroll_offset = 0


@dataclass
class Session:
    """Everything the main loop renders.

    Owned by the main loop thread; the worker never sees it.
    """

    current_namespace: str
    profile_name: str | None = None
    active_screen: ScreenId = ScreenId.WORKFLOWS
    previous_screen: ScreenId = ScreenId.WORKFLOWS
    connection: ConnectionState = field(default_factory=ConnectionState)
    workflows: ListViewState[WorkflowRecord] = field(default_factory=ListViewState)
    namespaces: ListViewState[NamespaceRecord] = field(default_factory=ListViewState)
    detail: DetailViewState = field(default_factory=DetailViewState)
    help: HelpState = field(default_factory=HelpState)
    running: bool = True
    frame_count: int = 0

    def navigate(self, screen: ScreenId) -> None:
        if screen is ScreenId.HELP and self.active_screen is not ScreenId.HELP:
            self.previous_screen = self.active_screen
            self.help.reset()
        self.active_screen = screen

    def active_list(self) -> ListViewState | None:
        if self.active_screen is ScreenId.WORKFLOWS:
            return self.workflows
        if self.active_screen is ScreenId.NAMESPACES:
            return self.namespaces
        return None

    @property
    def spinner(self) -> str:
        index = (self.frame_count // SPINNER_FRAME_DIVISOR) % len(SPINNER_FRAMES)
        return SPINNER_FRAMES[index]

    def quit(self) -> None:
        self.running = False
