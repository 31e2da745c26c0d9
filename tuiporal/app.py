"""Main application class for Tuiporal."""

from __future__ import annotations

import logging
from collections.abc import Callable

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches, WrongType

from tuiporal.constants import APP_SUBTITLE, APP_TITLE, POLL_INTERVAL
from tuiporal.engine.event_source import TICK, KeyPress
from tuiporal.engine.main_loop import MainLoop, RenderSurfaceError
from tuiporal.engine.runtime import DashboardRuntime
from tuiporal.keyboard.app import APP_BINDINGS
from tuiporal.models.state.session import Session
from tuiporal.screens import render_body
from tuiporal.screens.common_presenter import render_key_hints, render_status_bar
from tuiporal.widgets import BodyView, KeyHints, StatusBar

logger = logging.getLogger(__name__)

# Body height used before Textual has laid the widgets out.
_FALLBACK_BODY_ROWS = 20


class TuiporalApp(App[None]):
    """Textual surface for the dashboard.

    Keys and a ``POLL_INTERVAL`` timer both feed the main loop; the app itself
    holds no dashboard state and paints whatever the session holds.
    """

    TITLE = APP_TITLE
    SUB_TITLE = APP_SUBTITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    def __init__(self, runtime: DashboardRuntime, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.runtime = runtime
        self.main_loop: MainLoop = runtime.attach(self)
        self.surface_error: RenderSurfaceError | None = None

    @property
    def session(self) -> Session:
        return self.runtime.session

    def compose(self) -> ComposeResult:
        yield StatusBar(id="status-bar")
        yield BodyView(id="body")
        yield KeyHints(id="key-hints")

    def on_mount(self) -> None:
        self.runtime.start()
        self.set_interval(POLL_INTERVAL, self._on_tick)
        self._step(self.main_loop.render)

    def _on_tick(self) -> None:
        self._step(lambda: self.main_loop.iterate(TICK))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        key = KeyPress(key=event.key, character=event.character)
        self._step(lambda: self.main_loop.respond(key))

    def _step(self, step: Callable[[], None]) -> None:
        """Run one main loop step, exiting when the session stops."""
        if self.surface_error is not None:
            return
        try:
            step()
        except RenderSurfaceError as e:
            logger.exception("Rendering surface failed")
            self.surface_error = e
            self.exit(return_code=1, message=str(e))
            return
        if not self.session.running:
            self.exit()

    # ------------------------------------------------------------------
    # RenderSurface
    # ------------------------------------------------------------------

    def draw(self, session: Session) -> None:
        try:
            status_bar = self.query_one("#status-bar", StatusBar)
            body = self.query_one("#body", BodyView)
            key_hints = self.query_one("#key-hints", KeyHints)
        except (NoMatches, WrongType) as e:
            raise RenderSurfaceError(f"Dashboard widgets missing: {e}") from e
        rows = body.rows or _FALLBACK_BODY_ROWS
        status_bar.show(render_status_bar(session))
        body.show(render_body(session, rows))
        key_hints.show(render_key_hints(session))

    def action_quit(self) -> None:  # type: ignore[override]
        """Quit the application."""
        self.session.quit()
        self.exit()

    def on_unmount(self) -> None:
        """Stop the worker and drop undelivered results."""
        self.runtime.shutdown()


__all__ = [
    "TuiporalApp",
]
