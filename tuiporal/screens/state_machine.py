"""Screen state machine - routes keys and results to the per-screen machines.

All methods run on the main loop thread. Commands leave through ``send``;
the only state they carry back is the result the worker produces.
"""

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Callable
from dataclasses import replace
from typing import TypeVar

from tuiporal.constants.enums import ConnectionStatus, ScreenId
from tuiporal.constants.values import NO_PROFILE_MESSAGE
from tuiporal.engine.commands import (
    Command,
    Connect,
    LoadPage,
    Mutate,
    RefreshList,
    RefreshNamespaces,
    SwitchNamespace,
    ViewDetail,
)
from tuiporal.engine.event_source import KeyPress
from tuiporal.engine.results import CommandFailed, Connected, Result
from tuiporal.models.state.session import Session
from tuiporal.screens.base_screen import BaseScreenMachine
from tuiporal.screens.detail.machine import DetailMachine
from tuiporal.screens.help.machine import HelpMachine
from tuiporal.screens.namespaces.machine import NamespacesMachine
from tuiporal.screens.workflows.machine import WorkflowsMachine

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Command)


class ScreenStateMachine:
    """Dispatches input to the active screen and results to their owners.

    Args:
        session: Session mutated by every transition.
        send: Callable delivering a command to the worker.
        clock: Monotonic clock used for refresh timestamps.
    """

    def __init__(
        self,
        session: Session,
        send: Callable[[Command], None],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.session = session
        self.clock = clock
        self._send = send
        self._seq = itertools.count(1)
        self.workflows = WorkflowsMachine(self)
        self.namespaces = NamespacesMachine(self)
        self.detail = DetailMachine(self)
        self.help = HelpMachine(self)
        self._screens: dict[ScreenId, BaseScreenMachine] = {
            ScreenId.WORKFLOWS: self.workflows,
            ScreenId.NAMESPACES: self.namespaces,
            ScreenId.DETAIL: self.detail,
            ScreenId.HELP: self.help,
        }

    def issue(self, command: C) -> C:
        """Stamp the next sequence number on ``command`` and send it."""
        command = replace(command, seq=next(self._seq))
        logger.debug(f"Issuing {command.describe()}")
        self._send(command)
        return command

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Connect and load the first page, or report a missing profile."""
        if self.session.profile_name is None:
            self.session.connection.transition(
                ConnectionStatus.ERRORED, NO_PROFILE_MESSAGE
            )
            return
        self._connect()

    def reconnect(self) -> None:
        if self.session.profile_name is None:
            logger.info("Reconnect ignored: no active profile")
            return
        if not self.session.connection.is_errored:
            return
        self._connect()

    def _connect(self) -> None:
        self.session.connection.transition(ConnectionStatus.CONNECTING)
        self.issue(Connect())
        self.workflows.refresh()

    # ------------------------------------------------------------------
    # Cross-screen navigation
    # ------------------------------------------------------------------

    def show_namespaces(self) -> None:
        self.session.navigate(ScreenId.NAMESPACES)
        state = self.session.namespaces
        if not state.items and not state.loading:
            self.namespaces.refresh()

    def open_detail(self, workflow_id: str, run_id: str) -> None:
        command = self.issue(ViewDetail(workflow_id=workflow_id, run_id=run_id))
        self.session.detail.begin_load(workflow_id, run_id, command.seq)
        self.session.navigate(ScreenId.DETAIL)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def handle_key(self, event: KeyPress) -> None:
        self._screens[self.session.active_screen].handle_key(event)

    def refresh_if_due(self, now: float | None = None) -> bool:
        """Evaluate auto-refresh for the active list screen."""
        screen = self._screens[self.session.active_screen]
        return screen.refresh_if_due(self.clock() if now is None else now)

    def apply(self, result: Result) -> None:
        command = result.command
        if isinstance(command, Connect):
            self._apply_connection(result)
        elif isinstance(command, (RefreshList, LoadPage)):
            self.workflows.apply(result)
        elif isinstance(command, (RefreshNamespaces, SwitchNamespace)):
            self.namespaces.apply(result)
        elif isinstance(command, (ViewDetail, Mutate)):
            self.detail.apply(result)
        else:
            logger.warning(f"No owner for result of {command.describe()}")

    def _apply_connection(self, result: Result) -> None:
        connection = self.session.connection
        if connection.status is not ConnectionStatus.CONNECTING:
            logger.warning(
                f"Ignoring connect result while {connection.status.value}"
            )
            return
        if isinstance(result, Connected):
            connection.transition(ConnectionStatus.CONNECTED)
        elif isinstance(result, CommandFailed):
            connection.transition(ConnectionStatus.ERRORED, result.cause)
