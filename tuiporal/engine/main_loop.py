"""Main loop - drain results, auto-refresh, render, then dispatch input.

The loop never blocks on the network. It waits only for input, and never
longer than the event source's poll interval.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from tuiporal.engine.channels import Channel
from tuiporal.engine.event_source import Event, KeyPress, PollingEventSource
from tuiporal.engine.results import Result

if TYPE_CHECKING:
    from tuiporal.models.state.session import Session
    from tuiporal.screens.state_machine import ScreenStateMachine

logger = logging.getLogger(__name__)


class RenderSurfaceError(RuntimeError):
    """The terminal surface failed; fatal for the process."""


class RenderSurface(Protocol):
    """Paints a snapshot of the session. Must not mutate it."""

    def draw(self, session: Session) -> None: ...


class MainLoop:
    """One iteration per input event or tick.

    Args:
        session: Session rendered every iteration.
        machine: Screen state machine receiving keys and results.
        results: Channel the worker sends results on.
        surface: Rendering surface.
    """

    def __init__(
        self,
        session: Session,
        machine: ScreenStateMachine,
        results: Channel[Result],
        surface: RenderSurface,
    ) -> None:
        self.session = session
        self.machine = machine
        self.results = results
        self.surface = surface

    def drain_results(self) -> int:
        """Apply every result available right now. Returns how many."""
        results = self.results.drain()
        for result in results:
            self.machine.apply(result)
        return len(results)

    def refresh_if_due(self) -> bool:
        return self.machine.refresh_if_due()

    def render(self) -> None:
        self.session.frame_count += 1
        try:
            self.surface.draw(self.session)
        except RenderSurfaceError:
            raise
        except Exception as e:
            raise RenderSurfaceError(f"Rendering failed: {e}") from e

    def dispatch(self, event: Event) -> None:
        if isinstance(event, KeyPress):
            self.machine.handle_key(event)

    def iterate(self, event: Event) -> None:
        """Run one cycle for an event delivered from outside the loop."""
        self.drain_results()
        self.refresh_if_due()
        self.render()
        self.dispatch(event)

    def respond(self, event: Event) -> None:
        """Run one cycle for a key pushed by the host, drawing its effect once.

        Hosts that deliver input as callbacks have no next iteration to show
        the result of the dispatch, so the frame is drawn after it instead.
        """
        self.drain_results()
        self.refresh_if_due()
        self.dispatch(event)
        self.render()

    def run(self, events: PollingEventSource) -> None:
        """Drive the loop until the session stops running."""
        logger.info("Main loop started")
        while self.session.running:
            self.drain_results()
            self.refresh_if_due()
            self.render()
            self.dispatch(events.next())
        logger.info("Main loop stopped")
