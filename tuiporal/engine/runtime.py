"""Runtime wiring - session, channels, worker, state machine and main loop."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from tuiporal.constants.defaults import NAMESPACE_DEFAULT
from tuiporal.constants.timeouts import WORKER_SHUTDOWN_TIMEOUT
from tuiporal.controllers.base import BaseController
from tuiporal.controllers.temporal import TemporalController
from tuiporal.engine.channels import Channel
from tuiporal.engine.commands import Command
from tuiporal.engine.main_loop import MainLoop, RenderSurface
from tuiporal.engine.results import Result
from tuiporal.engine.worker_loop import WorkerLoop
from tuiporal.models.state.app_settings import AppSettings
from tuiporal.models.state.session import Session
from tuiporal.screens.state_machine import ScreenStateMachine

logger = logging.getLogger(__name__)


class DashboardRuntime:
    """Owns every long-lived object of one dashboard process.

    Args:
        settings: Effective settings (file plus CLI overrides).
        capability: Remote capability. Built from the active profile when
            omitted; stays None when no profile resolves.
        clock: Monotonic clock for refresh timing.
    """

    def __init__(
        self,
        settings: AppSettings,
        capability: BaseController | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings
        profile = settings.get_active_profile()
        if capability is None and profile is not None:
            capability = TemporalController(
                profile, request_timeout=settings.request_timeout_seconds
            )
        namespace = profile.namespace if profile is not None else NAMESPACE_DEFAULT

        self.session = Session(
            current_namespace=namespace,
            profile_name=profile.name if profile is not None else None,
        )
        self.session.workflows.auto_refresh.interval_seconds = settings.auto_refresh_interval
        self.session.namespaces.auto_refresh.interval_seconds = settings.auto_refresh_interval

        self.commands: Channel[Command] = Channel("commands")
        self.results: Channel[Result] = Channel("results")
        self.worker = WorkerLoop(
            capability,
            self.commands,
            self.results,
            namespace,
            page_size=settings.page_size,
            history_page_size=settings.history_page_size,
            namespace_page_size=settings.namespace_page_size,
        )
        self.machine = ScreenStateMachine(self.session, self.commands.send, clock)
        self._started = False

    def attach(self, surface: RenderSurface) -> MainLoop:
        return MainLoop(self.session, self.machine, self.results, surface)

    def start(self) -> None:
        """Start the worker, then connect and request the first page."""
        if self._started:
            return
        self._started = True
        self.worker.start()
        self.machine.start()

    def shutdown(self, timeout: float = WORKER_SHUTDOWN_TIMEOUT) -> int:
        """Stop the worker and discard undelivered results.

        Returns:
            Number of results dropped.
        """
        self.session.running = False
        self.commands.close()
        self.worker.join(timeout)
        dropped = self.results.drain()
        self.results.close()
        if dropped:
            logger.info(f"Dropped {len(dropped)} pending result(s) at shutdown")
        return len(dropped)
